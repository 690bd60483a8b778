"""Unit tests for localization.management.manager module."""

import json
from unittest.mock import AsyncMock

import pytest

from localization.i18n.cache import InMemoryTranslationCache
from localization.i18n.exceptions import TranslationStoreError, UnsupportedFormatError
from localization.i18n.store import InMemoryTranslationStore
from localization.management import TranslationManager
from localization.management.validation import RuleResult
from localization.operations import OperationResult
from tests.factories import make_bundle, make_record, make_value

pytestmark = pytest.mark.unit


@pytest.fixture
def store():
    return InMemoryTranslationStore(
        [
            make_record("nav.home", "Accueil", "fr", "FR"),
            make_record("nav.cart", "Panier", "fr", "FR"),
            make_record("nav.home", "Home", "en", "US"),
        ]
    )


@pytest.fixture
def cache():
    cache = InMemoryTranslationCache(default_ttl=3600, max_entries=10)
    cache.put("fr", "FR", make_bundle())
    return cache


@pytest.fixture
def manager(store, cache):
    return TranslationManager(
        store=store, cache=cache, expected_keys=["nav.home", "nav.cart", "nav.search"]
    )


class TestValidation:
    def test_validate_bundle_summary(self, manager):
        bundle = make_bundle(translations={"nav.home": "Accueil", "nav.bad": ""})

        result = manager.validate_bundle(bundle)

        assert result.is_valid is False
        assert result.summary == {
            "total_keys": 2,
            "valid_keys": 1,
            "invalid_keys": 1,
            "total_errors": 1,
            "total_warnings": 0,
        }

    def test_custom_rule(self, manager):
        def no_exclamation(value):
            result = RuleResult()
            if "!" in value.value:
                result.errors.append("No exclamation marks")
            return result

        manager.add_rule("no_exclamation", no_exclamation)

        validation = manager.validate_translation("promo", make_value("promo", "Vite !"))

        assert validation.errors == ["No exclamation marks"]


class TestProgressReport:
    async def test_coverage_and_missing_keys(self, manager):
        reports = await manager.progress_report(["fr"], ["FR", "MA"])

        france, morocco = reports
        assert france.translated_keys == 2
        assert france.percentage == pytest.approx(200 / 3)
        assert france.quality == "poor"
        assert france.missing_keys == ["nav.search"]
        assert morocco.translated_keys == 0
        assert morocco.quality == "incomplete"


class TestExport:
    async def test_export_json(self, manager):
        content = await manager.export_translations("fr", "FR", "json")

        document = json.loads(content)
        assert set(document["translations"]) == {"nav.home", "nav.cart"}

    async def test_unsupported_format(self, manager):
        with pytest.raises(UnsupportedFormatError):
            await manager.export_translations("fr", "FR", "docx")

    async def test_store_error_propagates(self, failing_store):
        manager = TranslationManager(store=failing_store)

        with pytest.raises(TranslationStoreError):
            await manager.export_translations("fr", "FR")


class TestImport:
    async def test_imports_new_and_skips_existing(self, manager, store, cache):
        content = json.dumps({"nav.home": "Maison", "nav.search": "Rechercher"})

        result = await manager.import_translations(content, "json", "fr", "FR")

        assert result.success is True
        assert result.imported == 1
        assert result.skipped == 1
        assert (await store.get_translation("nav.home", "fr", "FR")).value == "Accueil"
        assert (await store.get_translation("nav.search", "fr", "FR")).author == "System Import"
        assert cache.get("fr", "FR") is None

    async def test_overwrite(self, manager, store):
        result = await manager.import_translations(
            '{"nav.home": "Maison"}', "json", "fr", "FR", overwrite=True
        )

        assert result.imported == 1
        assert (await store.get_translation("nav.home", "fr", "FR")).value == "Maison"

    async def test_invalid_keys_are_rejected(self, manager):
        content = json.dumps({"bad": "<script>x</script>", "nav.search": "Rechercher"})

        result = await manager.import_translations(content, "json", "fr", "FR")

        assert result.success is True
        assert result.imported == 1
        assert result.errors == ["Key bad: Dangerous tag detected: script"]

    async def test_all_rejected_is_failure(self, manager, cache):
        result = await manager.import_translations('{"bad": ""}', "json", "fr", "FR")

        assert result.success is False
        assert result.imported == 0
        assert cache.get("fr", "FR") is not None

    async def test_skip_validation(self, manager, store):
        result = await manager.import_translations(
            '{"empty": ""}', "json", "fr", "FR", validate_before_import=False
        )

        assert result.imported == 1
        assert await store.get_translation("empty", "fr", "FR") is not None

    async def test_warnings_are_reported(self, manager):
        content = json.dumps({"cta": {"value": "x" * 25, "context": "button"}})

        result = await manager.import_translations(content, "json", "fr", "FR")

        assert result.imported == 1
        assert result.warnings == ["Key cta: Text long for context button (recommended: 20)"]

    async def test_parse_error(self, manager):
        result = await manager.import_translations("{oops", "json", "fr", "FR")

        assert result.success is False
        assert len(result.errors) == 1

    async def test_store_error_is_recorded_per_key(self, manager, store):
        store.get_translation = AsyncMock(side_effect=TranslationStoreError("down"))

        result = await manager.import_translations('{"nav.search": "Chercher"}', "json", "fr", "FR")

        assert result.success is False
        assert result.errors == ["Key nav.search: down"]


class TestWrites:
    async def test_save_invalidates_cache(self, manager, store, cache):
        result = await manager.save_translation(
            "nav.search", make_value("nav.search", "Rechercher"), "fr", "FR", author="alice"
        )

        assert result.is_success
        assert cache.get("fr", "FR") is None
        assert (await store.get_translation("nav.search", "fr", "FR")).author == "alice"

    async def test_failed_save_keeps_cache(self, manager, store, cache):
        store.upsert_translation = AsyncMock(
            return_value=OperationResult.permanent_error("nope", error_code="validation")
        )

        result = await manager.save_translation("k", make_value("k", "v"), "fr", "FR")

        assert not result.is_success
        assert cache.get("fr", "FR") is not None

    async def test_delete(self, manager, cache):
        assert (await manager.delete_translation("nav.home", "fr", "FR")).is_success
        assert cache.get("fr", "FR") is None

        missing = await manager.delete_translation("nav.home", "fr", "FR")
        assert not missing.is_success


class TestBatchUpdate:
    async def test_counts_and_per_row_errors(self, manager, store, cache):
        result = await manager.batch_update(
            [make_value("nav.search", "Rechercher"), make_value("nav.bad", "")],
            "fr",
            "FR",
            author="alice",
        )

        assert result.is_success
        assert result.data.succeeded == 1
        assert result.data.failed == 1
        assert len(result.data.errors) == 1
        assert result.data.errors[0].startswith("Key nav.bad:")
        assert result.message == "Batch update finished: 1 succeeded, 1 failed"
        assert (await store.get_translation("nav.search", "fr", "FR")).author == "alice"
        assert cache.get("fr", "FR") is None

    async def test_store_failure_does_not_stop_batch(self, manager, store):
        store.upsert_translation = AsyncMock(
            side_effect=[
                TranslationStoreError("down"),
                OperationResult.transient_error("throttled", error_code="ThrottlingException"),
                OperationResult.success(),
            ]
        )

        result = await manager.batch_update(
            [
                make_value("a.one", "Un"),
                make_value("a.two", "Deux"),
                make_value("a.three", "Trois"),
            ],
            "fr",
            "FR",
        )

        assert result.data.succeeded == 1
        assert result.data.errors == ["Key a.one: down", "Key a.two: throttled"]

    async def test_nothing_written_keeps_cache(self, manager, cache):
        result = await manager.batch_update([make_value("nav.bad", "")], "fr", "FR")

        assert result.is_success
        assert result.data.failed == 1
        assert cache.get("fr", "FR") is not None


class TestSearchSimilar:
    async def test_close_key_is_found(self, manager):
        matches = await manager.search_similar("nav.hom", "fr", "FR")

        assert [(match.key, match.value) for match in matches] == [("nav.home", "Accueil")]
        assert matches[0].similarity == pytest.approx(0.875)

    async def test_case_insensitive(self, manager):
        matches = await manager.search_similar("NAV.HOME", "fr", "FR")

        assert [match.key for match in matches] == ["nav.home"]
        assert matches[0].similarity == 1.0

    async def test_threshold_and_order(self, manager, store):
        await store.upsert_translation(make_record("nav.homepage", "Page d'accueil", "fr", "FR"))

        loose = await manager.search_similar("nav.home", "fr", "FR", threshold=0.5)
        strict = await manager.search_similar("nav.home", "fr", "FR")

        assert [match.key for match in loose] == ["nav.home", "nav.homepage"]
        assert [match.key for match in strict] == ["nav.home"]

    async def test_other_pairs_are_ignored(self, manager):
        assert await manager.search_similar("nav.cart", "en", "US") == []

    async def test_store_error_propagates(self, failing_store):
        manager = TranslationManager(store=failing_store)

        with pytest.raises(TranslationStoreError):
            await manager.search_similar("nav.home", "fr", "FR")


class TestStatistics:
    async def test_breakdowns(self, manager):
        stats = await manager.statistics()

        assert stats == {
            "total_languages": 2,
            "total_markets": 2,
            "total_translations": 3,
            "language_breakdown": {"fr": 2, "en": 1},
            "market_breakdown": {"FR": 2, "US": 1},
            "quality_score": 6,
        }
