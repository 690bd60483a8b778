"""Settings provider.

Provides the application-scoped settings singleton.
"""

from functools import lru_cache

from localization.configuration.settings import Settings


@lru_cache
def get_settings() -> Settings:
    """Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.
    Tests that need different values construct ``Settings`` directly and pass
    it to the factory instead of patching this provider.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()
