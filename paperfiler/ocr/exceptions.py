class OcrError(Exception):
    """Raised when text recognition fails."""
