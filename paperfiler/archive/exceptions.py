class ArchiveError(Exception):
    """Raised when the result log or the renamed PDF cannot be written."""
