from paperfiler.config.settings import Settings
from paperfiler.metadata.base import BaseMetadataResolver
from paperfiler.metadata.example_client_adapter import ExampleClientAdapter
from paperfiler.metadata.openai_client_adapter import OpenAIClientAdapter
from paperfiler.metadata.resolver import MetadataResolver

SUPPORTED_PROVIDERS = ("example", "openai", "openai_compatible")


class MetadataResolverFactory:
    """Creates the configured metadata resolver."""

    @classmethod
    def create(cls, settings: Settings) -> BaseMetadataResolver:
        """Create a configured resolver from application settings."""
        provider = settings.metadata_provider.lower()
        if provider == "example":
            return MetadataResolver(
                client=ExampleClientAdapter(),
                model="example",
                temperature=0.0,
            )
        client = OpenAIClientAdapter(
            api_key=settings.openai_api_key,
            timeout_seconds=settings.openai_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )
        return MetadataResolver(
            client=client,
            model=settings.openai_model_name,
            temperature=settings.openai_temperature,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return settings.openai_base_url or None
        if provider == "openai_compatible":
            url = (settings.openai_base_url or "").strip()
            if not url:
                raise ValueError(
                    "openai_base_url is required for metadata_provider=openai_compatible"
                )
            return url
        raise ValueError(
            f"Unknown metadata provider '{provider}'. Choose from: {list(SUPPORTED_PROVIDERS)}"
        )
