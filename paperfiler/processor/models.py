from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path


class Stage(StrEnum):
    """Pipeline stage a document can fail at."""

    RASTERIZE = "rasterize"
    STITCH = "stitch"
    OCR = "ocr"
    RESOLVE_METADATA = "resolve_metadata"
    ARCHIVE = "archive"


@dataclass(frozen=True)
class Document:
    """A source PDF discovered in the input directory."""

    path: Path

    @property
    def filename(self) -> str:
        return self.path.name

    @property
    def stem(self) -> str:
        return self.path.stem

    @property
    def extension(self) -> str:
        return self.path.suffix


@dataclass(frozen=True)
class PageImage:
    """One rasterized page. `index` is the 0-based page number in the PDF."""

    index: int
    path: Path
    width: int
    height: int


@dataclass(frozen=True)
class CompositeImage:
    """All page images of a document stacked top-to-bottom."""

    path: Path
    width: int
    height: int
    offsets: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class ArchivedDocument:
    """Where the renamed PDF and its model response log ended up."""

    pdf_path: Path
    log_path: Path


@dataclass(frozen=True)
class DocumentResult:
    """Outcome of one document's pipeline run."""

    document: Document
    status: str
    stage: Stage | None = None
    reason: str = ""
    output_path: Path | None = None

    SUCCEEDED = "succeeded"
    FAILED = "failed"

    @classmethod
    def succeeded(
        cls,
        document: Document,
        output_path: Path | None = None,
    ) -> "DocumentResult":
        return cls(document=document, status=cls.SUCCEEDED, output_path=output_path)

    @classmethod
    def failed(
        cls,
        document: Document,
        stage: Stage | None,
        reason: str,
    ) -> "DocumentResult":
        return cls(document=document, status=cls.FAILED, stage=stage, reason=reason)

    @property
    def ok(self) -> bool:
        return self.status == self.SUCCEEDED


@dataclass
class BatchSummary:
    """Accumulates per-document results for the end-of-run report."""

    results: list[DocumentResult] = field(default_factory=list)

    @property
    def succeeded(self) -> list[DocumentResult]:
        return [r for r in self.results if r.ok]

    @property
    def failed(self) -> list[DocumentResult]:
        return [r for r in self.results if not r.ok]

    def failures_by_stage(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for result in self.failed:
            key = str(result.stage) if result.stage is not None else "unexpected"
            counts[key] = counts.get(key, 0) + 1
        return counts
