"""i18n system - locales, translation bundles and text resolution.

Main components:
- models: Language, Market, Locale, TranslationValue, TranslationBundle
- registry: LocaleRegistry of supported languages and markets
- cache: TranslationCache and InMemoryTranslationCache
- store: TranslationStore, InMemoryTranslationStore, TranslationRecord
- yaml_store / dynamodb_store: YAML and DynamoDB store backends
- translator: Translator with fallback, pluralization and interpolation
- detection: Accept-Language and coordinate based detection
"""

from localization.i18n.cache import InMemoryTranslationCache, TranslationCache
from localization.i18n.exceptions import (
    LanguageNotOfferedInMarketError,
    LocalizationError,
    TranslationStoreError,
    UnsupportedFormatError,
    UnsupportedLanguageError,
    UnsupportedMarketError,
)
from localization.i18n.models import (
    Language,
    Locale,
    Market,
    TextDirection,
    TranslationBundle,
    TranslationValue,
)
from localization.i18n.registry import LocaleRegistry
from localization.i18n.store import (
    InMemoryTranslationStore,
    TranslationRecord,
    TranslationStore,
)
from localization.i18n.translator import Translator

__all__ = [
    "InMemoryTranslationCache",
    "TranslationCache",
    "LocalizationError",
    "UnsupportedLanguageError",
    "UnsupportedMarketError",
    "LanguageNotOfferedInMarketError",
    "TranslationStoreError",
    "UnsupportedFormatError",
    "Language",
    "Locale",
    "Market",
    "TextDirection",
    "TranslationBundle",
    "TranslationValue",
    "LocaleRegistry",
    "InMemoryTranslationStore",
    "TranslationRecord",
    "TranslationStore",
    "Translator",
]
