from pathlib import Path

import pdfplumber

from paperfiler.pdf.base import BasePdfRasterizer, page_image_path
from paperfiler.pdf.exceptions import RasterizationError
from paperfiler.processor.models import PageImage


class PdfPlumberRasterizer(BasePdfRasterizer):
    """Renders PDF pages to JPEG using pdfplumber's page images."""

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
            with pdfplumber.open(pdf_path) as pdf:
                if not pdf.pages:
                    raise RasterizationError(f"{pdf_path.name} has no pages")
                for index, page in enumerate(pdf.pages[:page_limit]):
                    image = page.to_image(resolution=self._dpi).original.convert("RGB")
                    path = page_image_path(out_dir, prefix, index)
                    image.save(path, format="JPEG")
                    pages.append(
                        PageImage(index=index, path=path, width=image.width, height=image.height)
                    )
            return pages
        except RasterizationError:
            self._discard(pages)
            raise
        except Exception as exc:
            self._discard(pages)
            raise RasterizationError(f"pdfplumber rasterization failed: {exc}") from exc
