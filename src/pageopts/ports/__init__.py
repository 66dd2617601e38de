from .defaults import DefaultsProvider
from .extractor import MetadataExtractor

__all__ = [
    "DefaultsProvider",
    "MetadataExtractor",
]
