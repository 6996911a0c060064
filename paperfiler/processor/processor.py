from collections.abc import Sequence

from paperfiler.archive.archiver import FileArchiver
from paperfiler.config.settings import Settings
from paperfiler.imaging.stitcher import ImageStitcher
from paperfiler.logging.logger import Log
from paperfiler.metadata.factory import MetadataResolverFactory
from paperfiler.ocr.tesseract_adapter import TesseractOcrEngine
from paperfiler.pdf.factory import PdfRasterizerFactory
from paperfiler.processor.models import Document, DocumentResult
from paperfiler.processor.pipeline import PipelineContext, PipelineStep
from paperfiler.processor.steps import (
    ArchiveStep,
    OcrStep,
    RasterizeStep,
    ResolveMetadataStep,
    StitchStep,
)


class Processor:
    """Runs one document through the filing pipeline.

    Pipeline: rasterize -> stitch -> ocr -> resolve metadata -> archive.
    The first failing step ends the run; the document is left where it was.
    """

    def __init__(self, steps: Sequence[PipelineStep]) -> None:
        self._steps = list(steps)

    def process(self, document: Document) -> DocumentResult:
        """Run all steps for a document and report how far it got."""
        Log.info(f"Processing {document.filename}")
        context = PipelineContext(document=document)
        for step in self._steps:
            try:
                context = step.run(context)
            except Exception as exc:
                reason = str(exc)
                Log.error(f"{document.filename} failed at {step.stage}: {reason}")
                return DocumentResult.failed(document, step.stage, reason)

        output_path = context.archived.pdf_path if context.archived else None
        Log.info(f"{document.filename} processed successfully")
        return DocumentResult.succeeded(document, output_path)


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with all required adapters."""
    rasterizer = PdfRasterizerFactory.create(settings)
    ocr_engine = TesseractOcrEngine(
        languages=settings.ocr_languages,
        timeout_seconds=settings.ocr_timeout_seconds,
    )
    resolver = MetadataResolverFactory.create(settings)
    archiver = FileArchiver(settings.pdf_output_dir, settings.result_log_dir)
    steps: list[PipelineStep] = [
        RasterizeStep(rasterizer, settings.temp_images_dir, settings.page_limit),
        StitchStep(ImageStitcher(), settings.images_dir, settings.keep_page_images),
        OcrStep(ocr_engine),
        ResolveMetadataStep(resolver),
        ArchiveStep(archiver),
    ]
    return Processor(steps=steps)
