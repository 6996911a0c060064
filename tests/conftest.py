import io
from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from paperfiler.processor.models import PageImage


def _pdf_bytes(page_texts: list[str]) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for text in page_texts:
        c.drawString(72, 720, text)
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    return _pdf_bytes(["Hello PDF World"])


@pytest.fixture()
def three_page_pdf_bytes() -> bytes:
    """Generate a three-page PDF with known text on each page."""
    return _pdf_bytes(["Page one content", "Page two content", "Page three content"])


@pytest.fixture()
def make_page_image(tmp_path: Path) -> Callable[..., PageImage]:
    """Factory writing a solid-color JPEG page image and returning its PageImage."""

    def _make(
        index: int,
        width: int,
        height: int,
        color: tuple[int, int, int] = (0, 0, 0),
    ) -> PageImage:
        path = tmp_path / "pages" / f"page-{index + 1:03d}.jpg"
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.new("RGB", (width, height), color).save(path, format="JPEG")
        return PageImage(index=index, path=path, width=width, height=height)

    return _make


_SETTINGS_ENV_VARS = (
    "INPUT_DIR",
    "OUTPUT_DIR",
    "PAGE_LIMIT",
    "PDF_ENGINE",
    "OCR_LANGUAGES",
    "METADATA_PROVIDER",
    "OPENAI_API_KEY",
    "OPENAI_BASE_URL",
    "OPENAI_MODEL_NAME",
    "MAX_CONCURRENT_DOCUMENTS",
)


@pytest.fixture(autouse=True)
def _isolate_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
