from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from paperfiler.metadata.models import MetadataResult
from paperfiler.processor.models import (
    ArchivedDocument,
    CompositeImage,
    Document,
    PageImage,
    Stage,
)


@dataclass(slots=True)
class PipelineContext:
    document: Document
    page_images: list[PageImage] = field(default_factory=list)
    composite: CompositeImage | None = None
    extracted_text: str = ""
    metadata: MetadataResult | None = None
    archived: ArchivedDocument | None = None


class PipelineStep(ABC):
    stage: Stage

    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
