"""Root fixtures shared by every localization test."""

import asyncio
from typing import Dict, List, Optional, Tuple

import pytest

from localization.direction import InMemoryStyleSink
from localization.factory import create_localization_service, seed_records
from localization.i18n.cache import InMemoryTranslationCache
from localization.i18n.exceptions import TranslationStoreError
from localization.i18n.registry import LocaleRegistry
from localization.i18n.store import InMemoryTranslationStore, TranslationRecord
from localization.i18n.translator import Translator
from tests.factories.localization import make_settings


class FailingTranslationStore(InMemoryTranslationStore):
    """Store whose reads always fail."""

    def __init__(self):
        super().__init__()
        self.fetch_calls = 0

    async def fetch_translations(self, language: str, market: str) -> List[TranslationRecord]:
        self.fetch_calls += 1
        raise TranslationStoreError("store unreachable", error_code="connection_error")


class GatedTranslationStore(InMemoryTranslationStore):
    """Store whose reads wait until the test opens the gate for the pair."""

    def __init__(self, records: Optional[List[TranslationRecord]] = None):
        super().__init__(records)
        self.gates: Dict[Tuple[str, str], asyncio.Event] = {}
        self.fetch_calls: List[Tuple[str, str]] = []

    def gate(self, language: str, market: str) -> asyncio.Event:
        return self.gates.setdefault((language, market), asyncio.Event())

    def open(self, language: str, market: str) -> None:
        self.gate(language, market).set()

    async def fetch_translations(self, language: str, market: str) -> List[TranslationRecord]:
        self.fetch_calls.append((language, market))
        await self.gate(language, market).wait()
        return await super().fetch_translations(language, market)


@pytest.fixture
def registry():
    """Registry with the built-in languages and markets."""
    return LocaleRegistry()


@pytest.fixture
def seeded_store(registry):
    """Memory store holding the built-in texts for every offered pair."""
    return InMemoryTranslationStore(seed_records(registry))


@pytest.fixture
def cache():
    return InMemoryTranslationCache(default_ttl=3600, max_entries=50)


@pytest.fixture
def translator(seeded_store, cache, registry):
    return Translator(store=seeded_store, cache=cache, registry=registry)


@pytest.fixture
def style_sink():
    return InMemoryStyleSink()


@pytest.fixture
def settings():
    """Default settings with the memory store backend."""
    return make_settings(store={"TRANSLATION_STORE_BACKEND": "memory"})


@pytest.fixture
def service(settings, seeded_store, style_sink, registry):
    """Uninitialized service wired by the factory."""
    return create_localization_service(
        settings=settings, store=seeded_store, sink=style_sink, registry=registry
    )


@pytest.fixture
async def initialized_service(service):
    await service.initialize()
    return service


@pytest.fixture
def failing_store():
    return FailingTranslationStore()


@pytest.fixture
def gated_store(registry):
    return GatedTranslationStore(seed_records(registry))
