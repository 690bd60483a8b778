"""Factory functions for creating localization components.

create_localization_service() is the single place where the store, cache,
translator, formatter and direction adaptor are instantiated and wired.
"""

from pathlib import Path
from typing import List, Optional

from localization.configuration import Settings, get_settings
from localization.configuration.infrastructure import TranslationStoreSettings
from localization.direction import DirectionAdaptor, StyleSink
from localization.formatting import LocaleFormatter
from localization.i18n.cache import InMemoryTranslationCache
from localization.i18n.defaults import BUILTIN_TRANSLATIONS
from localization.i18n.dynamodb_store import DynamoDBTranslationStore
from localization.i18n.models import TranslationValue
from localization.i18n.registry import LocaleRegistry
from localization.i18n.store import (
    InMemoryTranslationStore,
    TranslationRecord,
    TranslationStore,
)
from localization.i18n.translator import Translator
from localization.i18n.yaml_store import YAMLTranslationStore
from localization.integrations.dynamodb import get_dynamodb_client
from localization.logging import get_module_logger
from localization.management import TranslationManager
from localization.service import LocalizationConfig, LocalizationService

logger = get_module_logger()


def seed_records(registry: LocaleRegistry) -> List[TranslationRecord]:
    """Built-in texts as store rows for every pair the registry offers.

    Languages without built-in texts are skipped.
    """
    records = []
    for market in registry.supported_markets():
        for language in market.supported_language_codes:
            texts = BUILTIN_TRANSLATIONS.get(language)
            if not texts:
                continue
            records.extend(
                TranslationRecord.from_value(
                    TranslationValue(key=key, value=text), language, market.code
                )
                for key, text in texts.items()
            )
    return records


def create_translation_store(
    settings: TranslationStoreSettings,
    registry: LocaleRegistry,
) -> TranslationStore:
    """Create the store selected by ``settings.backend``.

    Args:
        settings: Store settings.
        registry: Registry used to seed the memory backend.

    Returns:
        TranslationStore: memory (seeded with built-in texts), yaml or dynamodb.

    Raises:
        ValueError: If the backend is unknown or the yaml backend has no
            translations directory.
    """
    backend = settings.backend.lower()
    if backend == "memory":
        return InMemoryTranslationStore(seed_records(registry))
    if backend == "yaml":
        if not settings.translations_dir:
            raise ValueError("TRANSLATIONS_DIR is required for the yaml store backend")
        return YAMLTranslationStore(Path(settings.translations_dir))
    if backend == "dynamodb":
        client = get_dynamodb_client(settings.aws_region, settings.endpoint_url)
        return DynamoDBTranslationStore(
            client, settings.table_name, max_retries=settings.max_retries
        )
    raise ValueError(f"Unknown translation store backend: {settings.backend}")


def create_localization_service(
    settings: Optional[Settings] = None,
    store: Optional[TranslationStore] = None,
    sink: Optional[StyleSink] = None,
    registry: Optional[LocaleRegistry] = None,
) -> LocalizationService:
    """Create and wire a LocalizationService.

    The service is returned uninitialized; await ``initialize()`` before use.

    Args:
        settings: Settings to use (default: get_settings()).
        store: Store to use instead of the configured backend.
        sink: Style sink of the hosting UI (default: no-op sink).
        registry: Locale registry (default: built-in catalog).

    Returns:
        LocalizationService: Configured service instance.

    Usage:
        # Defaults from the environment
        service = create_localization_service()
        await service.initialize()

        # Tests: explicit settings and store
        service = create_localization_service(
            settings=Settings(), store=InMemoryTranslationStore()
        )
    """
    settings = settings or get_settings()
    registry = registry or LocaleRegistry()
    config = LocalizationConfig.from_settings(settings.localization)

    if store is None:
        store = create_translation_store(settings.store, registry)

    cache = InMemoryTranslationCache(
        default_ttl=settings.cache.ttl_seconds,
        max_entries=settings.cache.max_entries,
    )
    translator = Translator(
        store=store,
        cache=cache,
        registry=registry,
        cache_translations=config.cache_translations,
        fallback_language=config.fallback_language,
    )
    direction = DirectionAdaptor(
        sink=sink,
        enabled=config.enable_rtl,
        mirror_icons=settings.localization.mirror_icons,
        mirror_numbers=settings.localization.mirror_numbers,
    )
    formatter = LocaleFormatter(registry=registry)

    logger.info(
        "localization_service_created",
        store=type(store).__name__,
        language=config.current_language,
        market=config.current_market,
        cache_ttl=settings.cache.ttl_seconds,
    )
    return LocalizationService(
        registry=registry,
        translator=translator,
        formatter=formatter,
        direction=direction,
        config=config,
    )


def create_translation_manager(service: LocalizationService) -> TranslationManager:
    """Create a TranslationManager sharing the service's store and cache.

    Writes made through the manager invalidate the bundles the service
    serves from its cache.
    """
    translator = service.translator
    return TranslationManager(store=translator.store, cache=translator.cache)
