class MetadataError(Exception):
    """Raised when metadata resolution fails."""


class MetadataValidationError(MetadataError):
    """Raised when the model response does not fit the bibliographic schema."""


class MetadataNetworkError(MetadataError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
