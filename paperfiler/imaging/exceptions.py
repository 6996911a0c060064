class StitchError(Exception):
    """Raised when page images cannot be composited."""
