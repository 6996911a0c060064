from pathlib import Path

import pytesseract
from PIL import Image

from paperfiler.ocr.base import BaseOcrEngine
from paperfiler.ocr.exceptions import OcrError


class TesseractOcrEngine(BaseOcrEngine):
    """Recognizes text with Tesseract through pytesseract."""

    def __init__(self, *, languages: str, timeout_seconds: int = 0) -> None:
        self._languages = languages
        self._timeout_seconds = timeout_seconds

    def recognize(self, image_path: Path) -> str:
        try:
            with Image.open(image_path) as img:
                text = pytesseract.image_to_string(
                    img,
                    lang=self._languages,
                    timeout=self._timeout_seconds,
                )
        except pytesseract.TesseractNotFoundError as exc:
            raise OcrError(f"Tesseract is not installed or not on PATH: {exc}") from exc
        except (pytesseract.TesseractError, RuntimeError, OSError) as exc:
            raise OcrError(f"tesseract recognition failed: {exc}") from exc
        return text.strip()
