from pathlib import Path

from paperfiler.archive.archiver import FileArchiver
from paperfiler.imaging.stitcher import ImageStitcher
from paperfiler.logging.logger import Log
from paperfiler.metadata.base import BaseMetadataResolver
from paperfiler.metadata.models import MetadataFailure, ResolvedMetadata
from paperfiler.ocr.base import BaseOcrEngine
from paperfiler.pdf.base import BasePdfRasterizer
from paperfiler.processor.exceptions import StepAbortedError
from paperfiler.processor.models import Stage
from paperfiler.processor.pipeline import PipelineContext, PipelineStep


class RasterizeStep(PipelineStep):
    stage = Stage.RASTERIZE

    def __init__(
        self,
        rasterizer: BasePdfRasterizer,
        temp_dir: Path,
        page_limit: int,
    ) -> None:
        self._rasterizer = rasterizer
        self._temp_dir = temp_dir
        self._page_limit = page_limit

    def run(self, context: PipelineContext) -> PipelineContext:
        context.page_images = self._rasterizer.rasterize(
            context.document.path,
            self._temp_dir,
            context.document.filename,
            self._page_limit,
        )
        Log.info(
            f"Rasterized {len(context.page_images)} page(s) of {context.document.filename}"
        )
        return context


class StitchStep(PipelineStep):
    stage = Stage.STITCH

    def __init__(
        self,
        stitcher: ImageStitcher,
        images_dir: Path,
        keep_page_images: bool = False,
    ) -> None:
        self._stitcher = stitcher
        self._images_dir = images_dir
        self._keep_page_images = keep_page_images

    def run(self, context: PipelineContext) -> PipelineContext:
        if not context.page_images:
            raise ValueError("PipelineContext.page_images must be set before stitching")
        output_path = self._images_dir / f"{context.document.filename}.jpg"
        context.composite = self._stitcher.stitch(context.page_images, output_path)
        Log.info(
            f"Stitched {context.document.filename} into "
            f"{context.composite.width}x{context.composite.height} image"
        )
        if not self._keep_page_images:
            for page in context.page_images:
                page.path.unlink(missing_ok=True)
        return context


class OcrStep(PipelineStep):
    stage = Stage.OCR

    def __init__(self, ocr_engine: BaseOcrEngine) -> None:
        self._ocr_engine = ocr_engine

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.composite is None:
            raise ValueError("PipelineContext.composite must be set before OCR")
        context.extracted_text = self._ocr_engine.recognize(context.composite.path)
        Log.info(
            f"Recognized {len(context.extracted_text)} chars in {context.document.filename}"
        )
        Log.debug(f"OCR text of {context.document.filename}:\n{context.extracted_text}")
        return context


class ResolveMetadataStep(PipelineStep):
    stage = Stage.RESOLVE_METADATA

    def __init__(self, resolver: BaseMetadataResolver) -> None:
        self._resolver = resolver

    def run(self, context: PipelineContext) -> PipelineContext:
        context.metadata = self._resolver.resolve(context.extracted_text)
        if isinstance(context.metadata, MetadataFailure):
            raise StepAbortedError(context.metadata.reason)
        return context


class ArchiveStep(PipelineStep):
    stage = Stage.ARCHIVE

    def __init__(self, archiver: FileArchiver) -> None:
        self._archiver = archiver

    def run(self, context: PipelineContext) -> PipelineContext:
        if not isinstance(context.metadata, ResolvedMetadata):
            raise ValueError("PipelineContext.metadata must be resolved before archiving")
        context.archived = self._archiver.archive(context.metadata, context.document)
        return context
