from paperfiler.metadata.base import BaseMetadataResolver
from paperfiler.metadata.factory import MetadataResolverFactory
from paperfiler.metadata.filename import synthesize_filename
from paperfiler.metadata.resolver import MetadataResolver

__all__ = [
    "BaseMetadataResolver",
    "MetadataResolver",
    "MetadataResolverFactory",
    "synthesize_filename",
]
