from pathlib import Path
from unittest.mock import MagicMock

import pytest

from paperfiler.archive.archiver import FileArchiver
from paperfiler.imaging.exceptions import StitchError
from paperfiler.imaging.stitcher import ImageStitcher
from paperfiler.metadata.models import BibliographicRecord, MetadataFailure, ResolvedMetadata
from paperfiler.ocr.exceptions import OcrError
from paperfiler.pdf.exceptions import RasterizationError
from paperfiler.processor.models import (
    ArchivedDocument,
    CompositeImage,
    Document,
    PageImage,
    Stage,
)
from paperfiler.processor.pipeline import PipelineContext
from paperfiler.processor.processor import Processor
from paperfiler.processor.steps import (
    ArchiveStep,
    OcrStep,
    RasterizeStep,
    ResolveMetadataStep,
    StitchStep,
)

_RESOLVED = ResolvedMetadata(
    record=BibliographicRecord(author="Smith J", year="2001"),
    raw_response='{"author": "Smith J", "year": "2001"}',
    filename="SmithJ,2001",
)


def _make_pipeline(
    tmp_path: Path,
) -> tuple[Processor, MagicMock, MagicMock, MagicMock, MagicMock, MagicMock]:
    rasterizer = MagicMock()
    stitcher = MagicMock(spec=ImageStitcher)
    ocr_engine = MagicMock()
    resolver = MagicMock()
    archiver = MagicMock(spec=FileArchiver)

    page_path = tmp_path / "temp" / "scan.pdf-001.jpg"
    page_path.parent.mkdir(parents=True)
    page_path.write_bytes(b"jpeg")
    pages = [PageImage(index=0, path=page_path, width=10, height=20)]
    composite = CompositeImage(
        path=tmp_path / "images" / "scan.pdf.jpg", width=10, height=20, offsets=[0]
    )

    rasterizer.rasterize.return_value = pages
    stitcher.stitch.return_value = composite
    ocr_engine.recognize.return_value = "On Widgets 71 4 688"
    resolver.resolve.return_value = _RESOLVED
    archiver.archive.return_value = ArchivedDocument(
        pdf_path=tmp_path / "pdf" / "SmithJ,2001.pdf",
        log_path=tmp_path / "log" / "SmithJ,2001.pdf-result.txt",
    )

    steps = [
        RasterizeStep(rasterizer, tmp_path / "temp", page_limit=2),
        StitchStep(stitcher, tmp_path / "images"),
        OcrStep(ocr_engine),
        ResolveMetadataStep(resolver),
        ArchiveStep(archiver),
    ]
    return Processor(steps=steps), rasterizer, stitcher, ocr_engine, resolver, archiver


def _document(tmp_path: Path) -> Document:
    return Document(path=tmp_path / "input" / "scan.pdf")


class TestProcessorPipeline:
    def test_runs_all_steps_in_order(self, tmp_path: Path) -> None:
        processor, rasterizer, stitcher, ocr_engine, resolver, archiver = _make_pipeline(
            tmp_path
        )
        doc = _document(tmp_path)

        result = processor.process(doc)

        assert result.ok
        assert result.output_path == tmp_path / "pdf" / "SmithJ,2001.pdf"
        rasterizer.rasterize.assert_called_once_with(
            doc.path, tmp_path / "temp", "scan.pdf", 2
        )
        stitcher.stitch.assert_called_once()
        assert stitcher.stitch.call_args.args[1] == tmp_path / "images" / "scan.pdf.jpg"
        ocr_engine.recognize.assert_called_once_with(tmp_path / "images" / "scan.pdf.jpg")
        resolver.resolve.assert_called_once_with("On Widgets 71 4 688")
        archiver.archive.assert_called_once_with(_RESOLVED, doc)

    def test_purges_page_images_after_stitch(self, tmp_path: Path) -> None:
        processor, *_ = _make_pipeline(tmp_path)
        processor.process(_document(tmp_path))
        assert not (tmp_path / "temp" / "scan.pdf-001.jpg").exists()

    def test_documents_sharing_a_stem_get_distinct_image_paths(self, tmp_path: Path) -> None:
        processor, rasterizer, stitcher, *_ = _make_pipeline(tmp_path)
        lower = Document(path=tmp_path / "input" / "scan.pdf")
        upper = Document(path=tmp_path / "input" / "scan.PDF")

        processor.process(lower)
        processor.process(upper)

        prefixes = [c.args[2] for c in rasterizer.rasterize.call_args_list]
        composites = [c.args[1] for c in stitcher.stitch.call_args_list]
        assert prefixes == ["scan.pdf", "scan.PDF"]
        assert composites == [
            tmp_path / "images" / "scan.pdf.jpg",
            tmp_path / "images" / "scan.PDF.jpg",
        ]


class TestStageFailures:
    def test_rasterize_failure_stops_pipeline(self, tmp_path: Path) -> None:
        processor, rasterizer, stitcher, _, _, archiver = _make_pipeline(tmp_path)
        rasterizer.rasterize.side_effect = RasterizationError("corrupt")

        result = processor.process(_document(tmp_path))

        assert not result.ok
        assert result.stage == Stage.RASTERIZE
        assert result.reason == "corrupt"
        stitcher.stitch.assert_not_called()
        archiver.archive.assert_not_called()

    def test_stitch_failure_skips_ocr(self, tmp_path: Path) -> None:
        processor, _, stitcher, ocr_engine, _, _ = _make_pipeline(tmp_path)
        stitcher.stitch.side_effect = StitchError("bad image")

        result = processor.process(_document(tmp_path))

        assert result.stage == Stage.STITCH
        ocr_engine.recognize.assert_not_called()

    def test_ocr_failure(self, tmp_path: Path) -> None:
        processor, _, _, ocr_engine, resolver, _ = _make_pipeline(tmp_path)
        ocr_engine.recognize.side_effect = OcrError("timeout")

        result = processor.process(_document(tmp_path))

        assert result.stage == Stage.OCR
        resolver.resolve.assert_not_called()

    def test_metadata_failure_skips_archive(self, tmp_path: Path) -> None:
        processor, _, _, _, resolver, archiver = _make_pipeline(tmp_path)
        resolver.resolve.return_value = MetadataFailure(reason="Invalid JSON response")

        result = processor.process(_document(tmp_path))

        assert not result.ok
        assert result.stage == Stage.RESOLVE_METADATA
        assert result.reason == "Invalid JSON response"
        archiver.archive.assert_not_called()

    def test_archive_failure(self, tmp_path: Path) -> None:
        processor, _, _, _, _, archiver = _make_pipeline(tmp_path)
        archiver.archive.side_effect = OSError("disk full")

        result = processor.process(_document(tmp_path))

        assert result.stage == Stage.ARCHIVE
        assert "disk full" in result.reason


class TestStepPreconditions:
    def test_stitch_requires_page_images(self, tmp_path: Path) -> None:
        step = StitchStep(MagicMock(spec=ImageStitcher), tmp_path)
        with pytest.raises(ValueError, match="page_images"):
            step.run(PipelineContext(document=_document(tmp_path)))

    def test_ocr_requires_composite(self, tmp_path: Path) -> None:
        step = OcrStep(MagicMock())
        with pytest.raises(ValueError, match="composite"):
            step.run(PipelineContext(document=_document(tmp_path)))

    def test_archive_requires_resolved_metadata(self, tmp_path: Path) -> None:
        step = ArchiveStep(MagicMock(spec=FileArchiver))
        context = PipelineContext(
            document=_document(tmp_path),
            metadata=MetadataFailure(reason="x"),
        )
        with pytest.raises(ValueError, match="resolved"):
            step.run(context)

    def test_keep_page_images(self, tmp_path: Path) -> None:
        page_path = tmp_path / "p.jpg"
        page_path.write_bytes(b"jpeg")
        stitcher = MagicMock(spec=ImageStitcher)
        stitcher.stitch.return_value = CompositeImage(path=tmp_path / "c.jpg", width=1, height=1)
        step = StitchStep(stitcher, tmp_path, keep_page_images=True)
        context = PipelineContext(
            document=_document(tmp_path),
            page_images=[PageImage(index=0, path=page_path, width=1, height=1)],
        )
        step.run(context)
        assert page_path.exists()
