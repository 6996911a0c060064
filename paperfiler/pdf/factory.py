from paperfiler.config.settings import Settings
from paperfiler.pdf.base import BasePdfRasterizer
from paperfiler.pdf.pdfplumber_adapter import PdfPlumberRasterizer
from paperfiler.pdf.pymupdf_adapter import PyMuPdfRasterizer


class PdfRasterizerFactory:
    """Creates the correct PDF rasterizer based on settings."""

    ADAPTERS: dict[str, type[BasePdfRasterizer]] = {
        "pymupdf": PyMuPdfRasterizer,
        "pdfplumber": PdfPlumberRasterizer,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfRasterizer:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls(dpi=settings.rasterize_dpi)
