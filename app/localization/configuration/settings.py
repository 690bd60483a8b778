"""Root settings object grouping every configuration section."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from localization.configuration.features import LocalizationSettings
from localization.configuration.infrastructure import (
    TranslationCacheSettings,
    TranslationStoreSettings,
)

SECTIONS = {
    "localization": LocalizationSettings,
    "cache": TranslationCacheSettings,
    "store": TranslationStoreSettings,
}


class Settings(BaseSettings):
    """Engine configuration.

    Sections:
        localization: Startup language and market, fallback language, RTL.
        cache: Bundle cache TTL and capacity.
        store: Persistent store backend and its connection details.

    Environment Variables:
        PREFIX: Deployment prefix; empty in production.
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR).
        GIT_SHA: Commit of the running build.

    Example:
        ```python
        settings = Settings(store=TranslationStoreSettings(TRANSLATION_STORE_BACKEND="yaml"))
        settings.store.backend       # "yaml"
        settings.cache.ttl_seconds   # 3600 unless TRANSLATION_CACHE_TTL_SECONDS is set
        ```
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    localization: LocalizationSettings
    cache: TranslationCacheSettings
    store: TranslationStoreSettings

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    def __init__(self, **kwargs):
        # Sections not passed explicitly are read from the environment
        for name, section_class in SECTIONS.items():
            kwargs.setdefault(name, section_class())
        super().__init__(**kwargs)

    @property
    def is_production(self) -> bool:
        """True when no PREFIX is set."""
        return not self.PREFIX
