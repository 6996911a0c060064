from abc import ABC, abstractmethod

from paperfiler.metadata.models import MetadataResult


class BaseMetadataResolver(ABC):
    """Contract for all metadata resolvers."""

    @abstractmethod
    def resolve(self, text: str) -> MetadataResult:
        """Identify bibliographic metadata in OCR text.

        Args:
            text: Raw OCR output, passed to the model untruncated.

        Returns:
            ResolvedMetadata on success, MetadataFailure with a reason otherwise.
            Implementations do not raise for provider or parsing failures.
        """
