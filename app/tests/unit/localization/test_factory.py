"""Unit tests for localization.factory module."""

from unittest.mock import MagicMock, patch

import pytest

from localization.configuration import TranslationStoreSettings
from localization.factory import (
    create_localization_service,
    create_translation_manager,
    create_translation_store,
    seed_records,
)
from localization.i18n.defaults import BUILTIN_TRANSLATIONS
from localization.i18n.dynamodb_store import DynamoDBTranslationStore
from localization.i18n.store import InMemoryTranslationStore
from localization.i18n.yaml_store import YAMLTranslationStore
from tests.factories import make_settings

pytestmark = pytest.mark.unit


class TestSeedRecords:
    def test_every_offered_pair_with_builtin_texts(self, registry):
        records = seed_records(registry)

        pairs = {(record.language, record.market) for record in records}
        assert ("fr", "MA") in pairs
        assert ("ar", "MA") in pairs
        assert ("en", "US") in pairs
        for record in records:
            assert record.value == BUILTIN_TRANSLATIONS[record.language][record.key]


class TestCreateTranslationStore:
    def test_memory_is_seeded(self, registry):
        store = create_translation_store(
            TranslationStoreSettings(TRANSLATION_STORE_BACKEND="memory"), registry
        )

        assert isinstance(store, InMemoryTranslationStore)

    async def test_memory_store_serves_builtin_texts(self, registry):
        store = create_translation_store(TranslationStoreSettings(), registry)

        records = await store.fetch_translations("fr", "FR")

        assert len(records) == len(BUILTIN_TRANSLATIONS["fr"])

    def test_yaml_requires_directory(self, registry):
        with pytest.raises(ValueError, match="TRANSLATIONS_DIR"):
            create_translation_store(
                TranslationStoreSettings(TRANSLATION_STORE_BACKEND="yaml"), registry
            )

    def test_yaml(self, registry, tmp_path):
        store = create_translation_store(
            TranslationStoreSettings(
                TRANSLATION_STORE_BACKEND="YAML", TRANSLATIONS_DIR=str(tmp_path)
            ),
            registry,
        )

        assert isinstance(store, YAMLTranslationStore)

    @patch("localization.factory.get_dynamodb_client")
    def test_dynamodb(self, mock_get_client, registry):
        mock_get_client.return_value = MagicMock()
        settings = TranslationStoreSettings(
            TRANSLATION_STORE_BACKEND="dynamodb",
            TRANSLATIONS_TABLE="translations-test",
            AWS_REGION="eu-west-3",
            DYNAMODB_ENDPOINT_URL="http://localhost:8000",
        )

        store = create_translation_store(settings, registry)

        assert isinstance(store, DynamoDBTranslationStore)
        assert store.table_name == "translations-test"
        mock_get_client.assert_called_once_with("eu-west-3", "http://localhost:8000")

    def test_unknown_backend(self, registry):
        with pytest.raises(ValueError, match="Unknown translation store backend"):
            create_translation_store(
                TranslationStoreSettings(TRANSLATION_STORE_BACKEND="redis"), registry
            )


class TestCreateLocalizationService:
    def test_wires_settings(self, style_sink):
        settings = make_settings(
            localization={
                "LOCALIZATION_DEFAULT_LANGUAGE": "ar",
                "LOCALIZATION_DEFAULT_MARKET": "MA",
                "LOCALIZATION_ENABLE_RTL": False,
                "LOCALIZATION_CACHE_TRANSLATIONS": False,
            },
            cache={"TRANSLATION_CACHE_TTL_SECONDS": 30},
        )

        service = create_localization_service(settings=settings, sink=style_sink)

        assert service.current_language == "ar"
        assert service.current_market == "MA"
        assert service.config.enable_rtl is False
        assert service.translator.cache_translations is False
        assert service.translator.cache.default_ttl == 30
        assert isinstance(service.translator.store, InMemoryTranslationStore)
        assert service.direction.state.enabled is False
        assert style_sink.direction is None

    def test_explicit_store_is_used(self, settings, seeded_store):
        service = create_localization_service(settings=settings, store=seeded_store)
        assert service.translator.store is seeded_store

    async def test_manager_shares_store_and_cache(self, initialized_service):
        manager = create_translation_manager(initialized_service)

        assert manager.store is initialized_service.translator.store
        assert manager.cache is initialized_service.translator.cache
