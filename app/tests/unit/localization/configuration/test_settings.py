"""Unit tests for localization.configuration settings.

Tests cover:
- Section defaults
- Environment variable aliases
- Settings aggregation and is_production
- get_settings() caching
"""

import pytest

from localization.configuration import (
    LocalizationSettings,
    Settings,
    TranslationCacheSettings,
    TranslationStoreSettings,
    get_settings,
)


@pytest.mark.unit
class TestLocalizationSettings:
    """Test suite for LocalizationSettings."""

    def test_defaults(self):
        """French in France with RTL handling on."""
        settings = LocalizationSettings()

        assert settings.default_language == "fr"
        assert settings.default_market == "FR"
        assert settings.fallback_language == "fr"
        assert settings.cache_translations is True
        assert settings.enable_rtl is True
        assert settings.mirror_icons is True
        assert settings.mirror_numbers is False

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("LOCALIZATION_DEFAULT_LANGUAGE", "ar")
        monkeypatch.setenv("LOCALIZATION_DEFAULT_MARKET", "MA")
        monkeypatch.setenv("LOCALIZATION_ENABLE_RTL", "false")

        settings = LocalizationSettings()

        assert settings.default_language == "ar"
        assert settings.default_market == "MA"
        assert settings.enable_rtl is False
        # Defaults preserved
        assert settings.fallback_language == "fr"


@pytest.mark.unit
class TestInfrastructureSettings:
    """Test suite for cache and store settings."""

    def test_cache_defaults(self):
        cache = TranslationCacheSettings()

        assert cache.ttl_seconds == 3600
        assert cache.max_entries == 500

    def test_cache_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("TRANSLATION_CACHE_TTL_SECONDS", "60")

        assert TranslationCacheSettings().ttl_seconds == 60

    def test_store_defaults(self):
        store = TranslationStoreSettings()

        assert store.backend == "memory"
        assert store.translations_dir is None
        assert store.table_name == "localization_translations"
        assert store.max_retries == 3
        assert store.endpoint_url is None

    def test_store_backend_values(self, monkeypatch):
        for backend in ["memory", "yaml", "dynamodb"]:
            monkeypatch.setenv("TRANSLATION_STORE_BACKEND", backend)
            assert TranslationStoreSettings().backend == backend


@pytest.mark.unit
class TestSettings:
    """Test suite for the Settings aggregator."""

    def test_sections_are_instantiated(self):
        settings = Settings()

        assert isinstance(settings.localization, LocalizationSettings)
        assert isinstance(settings.cache, TranslationCacheSettings)
        assert isinstance(settings.store, TranslationStoreSettings)

    def test_explicit_section_is_kept(self):
        store = TranslationStoreSettings(TRANSLATION_STORE_BACKEND="yaml")

        settings = Settings(store=store)

        assert settings.store.backend == "yaml"

    def test_is_production(self, monkeypatch):
        monkeypatch.setenv("PREFIX", "")
        assert Settings().is_production is True

        monkeypatch.setenv("PREFIX", "dev-")
        assert Settings().is_production is False

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
