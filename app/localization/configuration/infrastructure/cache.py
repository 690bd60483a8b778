"""Translation bundle cache settings."""

from pydantic import Field

from localization.configuration.base import InfrastructureSettings


class TranslationCacheSettings(InfrastructureSettings):
    """Bundle cache configuration.

    Environment Variables:
        TRANSLATION_CACHE_TTL_SECONDS: Time-to-live for cached bundles (default: 3600s = 1h)
        TRANSLATION_CACHE_MAX_ENTRIES: Bundles kept before the oldest insert is evicted (default: 500)

    Example:
        ```python
        from localization.configuration import get_settings

        ttl = get_settings().cache.ttl_seconds
        ```
    """

    ttl_seconds: int = Field(
        default=3600,
        alias="TRANSLATION_CACHE_TTL_SECONDS",
        description="Seconds a cached bundle stays fresh",
    )
    max_entries: int = Field(
        default=500,
        alias="TRANSLATION_CACHE_MAX_ENTRIES",
        description="Maximum number of cached (language, market) bundles",
    )
