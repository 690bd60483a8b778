"""Infrastructure settings __init__ - exports all infrastructure settings."""

from localization.configuration.infrastructure.cache import TranslationCacheSettings
from localization.configuration.infrastructure.store import TranslationStoreSettings

__all__ = [
    "TranslationCacheSettings",
    "TranslationStoreSettings",
]
