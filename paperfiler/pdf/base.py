from abc import ABC, abstractmethod
from pathlib import Path

from paperfiler.processor.models import PageImage


def page_image_path(out_dir: Path, prefix: str, index: int) -> Path:
    """Build scratch path for a page image: {out_dir}/{prefix}-{page:03d}.jpg"""
    return out_dir / f"{prefix}-{index + 1:03d}.jpg"


class BasePdfRasterizer(ABC):
    """Contract for all PDF rasterization adapters."""

    def __init__(self, dpi: int = 200) -> None:
        self._dpi = dpi

    @abstractmethod
    def rasterize(
        self,
        pdf_path: Path,
        out_dir: Path,
        prefix: str,
        page_limit: int,
    ) -> list[PageImage]:
        """Render the first pages of a PDF to JPEG files.

        Args:
            pdf_path: Source PDF on disk.
            out_dir: Directory receiving the page images.
            prefix: File name prefix, derived from the source file name.
            page_limit: Maximum number of pages to render, counted from page 1.

        Returns:
            One PageImage per rendered page, ordered by page index.

        Raises:
            RasterizationError: if rendering fails for any reason. No page
                images of the failed call are left on disk.
        """

    @staticmethod
    def _discard(pages: list[PageImage]) -> None:
        for page in pages:
            page.path.unlink(missing_ok=True)
