from abc import ABC, abstractmethod
from pathlib import Path


class BaseOcrEngine(ABC):
    """Contract for all OCR adapters."""

    @abstractmethod
    def recognize(self, image_path: Path) -> str:
        """Extract plain text from an image file.

        Returns:
            Recognized text; may be empty or noisy.

        Raises:
            OcrError: if recognition fails or times out.
        """
