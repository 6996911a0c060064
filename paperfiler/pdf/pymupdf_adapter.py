from pathlib import Path

import pymupdf

from paperfiler.pdf.base import BasePdfRasterizer, page_image_path
from paperfiler.pdf.exceptions import RasterizationError
from paperfiler.processor.models import PageImage


class PyMuPdfRasterizer(BasePdfRasterizer):
    """Renders PDF pages to JPEG using PyMuPDF."""

    def rasterize(
        self,
        pdf_path: Path,
        out_dir: Path,
        prefix: str,
        page_limit: int,
    ) -> list[PageImage]:
        pages: list[PageImage] = []
        try:
            out_dir.mkdir(parents=True, exist_ok=True)
            zoom = self._dpi / 72
            matrix = pymupdf.Matrix(zoom, zoom)
            with pymupdf.open(pdf_path) as doc:  # type: ignore[no-untyped-call]
                if doc.page_count == 0:
                    raise RasterizationError(f"{pdf_path.name} has no pages")
                for index in range(min(page_limit, doc.page_count)):
                    pix = doc.load_page(index).get_pixmap(matrix=matrix, alpha=False)
                    path = page_image_path(out_dir, prefix, index)
                    pix.save(str(path))
                    pages.append(
                        PageImage(index=index, path=path, width=pix.width, height=pix.height)
                    )
            return pages
        except RasterizationError:
            self._discard(pages)
            raise
        except Exception as exc:
            self._discard(pages)
            raise RasterizationError(f"pymupdf rasterization failed: {exc}") from exc
