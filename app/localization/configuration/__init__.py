"""Configuration module - public API.

Centralized configuration management for the localization engine using
Pydantic BaseSettings with domain-based organization.

Exports:
    get_settings: Cached Settings provider (main configuration object)
    Settings: Main settings class (for testing/overrides)
    LocalizationSettings, TranslationCacheSettings, TranslationStoreSettings:
        Section classes (for testing)

Example:
    ```python
    from localization.configuration import get_settings

    settings = get_settings()
    if settings.is_production:
        # Production-specific logic...
    ```
"""

from localization.configuration.features import LocalizationSettings
from localization.configuration.infrastructure import (
    TranslationCacheSettings,
    TranslationStoreSettings,
)
from localization.configuration.providers import get_settings
from localization.configuration.settings import Settings

__all__ = [
    "Settings",
    "get_settings",
    "LocalizationSettings",
    "TranslationCacheSettings",
    "TranslationStoreSettings",
]
