"""Localization service.

Facade over the registry, translator, formatter and direction adaptor.
Holds the active language and market and performs locale transitions.

Usage:
    from localization.factory import create_localization_service

    service = create_localization_service()
    await service.initialize()

    await service.set_locale("ar", "MA")
    service.translate("nav.home")        # "الرئيسية"
    service.format_currency(1234.56)     # "1،234٫56 درهم"
"""

import asyncio
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, List, Optional, Set, Tuple

from localization.configuration import LocalizationSettings
from localization.direction import DirectionAdaptor
from localization.formatting import LocaleFormatter
from localization.i18n import detection
from localization.i18n.defaults import EXPECTED_TRANSLATION_KEYS
from localization.i18n.listeners import Listener, ListenerSet
from localization.i18n.models import Gender, Language, Locale, Market
from localization.i18n.registry import LocaleRegistry
from localization.i18n.translator import Translator
from localization.logging import bind_locale_context, get_module_logger

logger = get_module_logger()

Pair = Tuple[str, str]


@dataclass
class LocalizationConfig:
    """Runtime configuration of the service.

    Attributes:
        current_language: Active language code.
        current_market: Active market code.
        fallback_language: Language consulted for missing keys.
        cache_translations: Read and populate the bundle cache.
        enable_rtl: Let the direction adaptor change the layout.
    """

    current_language: str = "fr"
    current_market: str = "FR"
    fallback_language: str = "fr"
    cache_translations: bool = True
    enable_rtl: bool = True

    @classmethod
    def from_settings(cls, settings: LocalizationSettings) -> "LocalizationConfig":
        return cls(
            current_language=settings.default_language,
            current_market=settings.default_market,
            fallback_language=settings.fallback_language,
            cache_translations=settings.cache_translations,
            enable_rtl=settings.enable_rtl,
        )


class LocalizationService:
    """Composition root facade for localization.

    Language and market changes are hard-validated; text resolution never
    fails. The active locale is committed only after its bundles are
    loaded, so with concurrent transitions the one that finishes loading
    last wins.

    Attributes:
        registry: Locale registry.
        translator: Translation resolver.
        formatter: Locale formatter.
        direction: Direction adaptor.
    """

    def __init__(
        self,
        registry: LocaleRegistry,
        translator: Translator,
        formatter: LocaleFormatter,
        direction: DirectionAdaptor,
        config: Optional[LocalizationConfig] = None,
    ):
        self.registry = registry
        self.translator = translator
        self.formatter = formatter
        self.direction = direction
        self._config = config or LocalizationConfig(
            fallback_language=translator.fallback_language
        )
        self._retained: Set[Pair] = set()
        self._listeners = ListenerSet("localization")
        self._initialized = False

        self.translator.fallback_language = self._config.fallback_language
        self.translator.cache_translations = self._config.cache_translations

    @property
    def config(self) -> LocalizationConfig:
        """Copy of the runtime configuration."""
        return replace(self._config)

    @property
    def current_language(self) -> str:
        return self._config.current_language

    @property
    def current_market(self) -> str:
        return self._config.current_market

    def configure(self, **changes: Any) -> LocalizationConfig:
        """Update runtime options.

        Args:
            **changes: fallback_language, cache_translations and/or enable_rtl.

        Returns:
            The new configuration.

        Raises:
            ValueError: For unknown options, for the active language or
                market (use set_locale), or for an unsupported fallback.
        """
        known = {item.name for item in fields(LocalizationConfig)}
        unknown = set(changes) - known
        if unknown:
            raise ValueError(f"Unknown configuration options: {sorted(unknown)}")
        if {"current_language", "current_market"} & set(changes):
            raise ValueError("Use set_language, set_market or set_locale to change the locale")

        fallback = changes.get("fallback_language")
        if fallback is not None and self.registry.get_language(fallback) is None:
            raise ValueError(f"Unsupported fallback language: {fallback}")

        self._config = replace(self._config, **changes)
        self.translator.fallback_language = self._config.fallback_language
        self.translator.cache_translations = self._config.cache_translations
        if "enable_rtl" in changes:
            self.direction.set_enabled(self._config.enable_rtl)

        logger.info("localization_configured", changes=sorted(changes))
        return self.config

    async def initialize(self) -> Locale:
        """Validate the configured locale and load its bundles.

        Raises:
            LocalizationError: If the configured locale is not valid.
        """
        locale = await self._transition(
            self._config.current_language, self._config.current_market, notify=False
        )
        self._initialized = True
        logger.info(
            "localization_initialized",
            language=locale.language.code,
            market=locale.market.code,
        )
        return locale

    async def set_language(self, language_code: str) -> Locale:
        """Switch language within the current market.

        Raises:
            UnsupportedLanguageError: If the language is unknown.
            LanguageNotOfferedInMarketError: If the market does not offer it.
        """
        return await self._transition(language_code, self._config.current_market)

    async def set_market(self, market_code: str) -> Locale:
        """Switch market, keeping the current language.

        Raises:
            UnsupportedMarketError: If the market is unknown.
            LanguageNotOfferedInMarketError: If the market does not offer
                the current language (use set_locale to change both).
        """
        return await self._transition(self._config.current_language, market_code)

    async def set_locale(self, language_code: str, market_code: str) -> Locale:
        """Switch language and market in one transition."""
        return await self._transition(language_code, market_code)

    async def _transition(self, language: str, market: str, notify: bool = True) -> Locale:
        with bind_locale_context(language=language, market=market):
            locale = self.registry.resolve_locale(language, market)

            active = (language, market)
            fallback = self.translator.fallback_pair(market)
            pairs = [active] if fallback == active else [active, fallback]
            bundles = await asyncio.gather(
                *(self.translator.load_bundle(*pair) for pair in pairs)
            )

            # Commit: from here on nothing awaits
            for pair in self._retained - set(pairs):
                self.translator.release(*pair)
            for bundle in bundles:
                self.translator.retain(bundle)
            self._retained = set(pairs)

            previous = (self._config.current_language, self._config.current_market)
            self._config.current_language = language
            self._config.current_market = market
            self.direction.handle_language_change(locale.language)

            logger.info(
                "locale_changed",
                previous_language=previous[0],
                previous_market=previous[1],
                bundle_sources=[bundle.source.value for bundle in bundles],
            )
            if notify:
                self._listeners.notify()
            return locale

    def translate(
        self,
        key: str,
        params: Optional[Dict[str, Any]] = None,
        count: Optional[int] = None,
        gender: Optional[Gender] = None,
        context: Optional[str] = None,
    ) -> str:
        """Translate a key in the active locale. Never raises."""
        return self.translator.translate(
            key,
            self._config.current_language,
            self._config.current_market,
            params=params,
            count=count,
            gender=gender,
            context=context,
        )

    def current_locale(self) -> Locale:
        return self.registry.resolve_locale(
            self._config.current_language, self._config.current_market
        )

    def current_language_info(self) -> Optional[Language]:
        return self.registry.get_language(self._config.current_language)

    def current_market_info(self) -> Optional[Market]:
        return self.registry.get_market(self._config.current_market)

    def is_rtl(self) -> bool:
        return self.registry.is_rtl_language(self._config.current_language)

    def add_listener(self, listener: Listener) -> None:
        self._listeners.add(listener)

    def remove_listener(self, listener: Listener) -> bool:
        return self._listeners.remove(listener)

    async def preload_translations(self, languages: List[str]) -> None:
        """Load bundles for several languages into the cache.

        Each language is loaded for the current market when offered there,
        otherwise for its home market. Unknown languages are skipped.
        """
        market = self.registry.get_market(self._config.current_market)
        pairs: List[Pair] = []
        for code in languages:
            language = self.registry.get_language(code)
            if language is None:
                logger.warning("preload_language_unknown", language=code)
                continue
            if market is not None and market.offers(code):
                pairs.append((code, market.code))
            elif language.market_code:
                pairs.append((code, language.market_code))

        await asyncio.gather(*(self.translator.load_bundle(*pair) for pair in pairs))
        logger.info("translations_preloaded", pairs=[f"{lang}-{mkt}" for lang, mkt in pairs])

    async def clear_cache(self) -> None:
        """Empty the cache and reload the active bundles."""
        self.translator.clear()
        self._retained = set()
        if self._initialized:
            await self._transition(
                self._config.current_language, self._config.current_market, notify=False
            )

    def get_stats(self) -> Dict[str, Any]:
        """Loaded pairs, active bundle size and keys missing from it."""
        bundle = self.translator.bundle_for(
            self._config.current_language, self._config.current_market
        )
        keys = set(bundle.keys()) if bundle else set()
        return {
            "loaded_pairs": [f"{lang}-{mkt}" for lang, mkt in self.translator.loaded_pairs()],
            "current_language": self._config.current_language,
            "current_market": self._config.current_market,
            "total_translations": len(keys),
            "missing_translations": [key for key in EXPECTED_TRANSLATION_KEYS if key not in keys],
            "bundle_source": bundle.source.value if bundle else None,
            "cache": self.translator.cache.get_stats(),
            "config": asdict(self._config),
        }

    def format_currency(self, amount, **options: Any) -> str:
        """Format an amount for the active locale (see LocaleFormatter)."""
        options.setdefault("currency_code", self._market_currency())
        return self.formatter.format_currency(
            amount, self._config.current_language, self._config.current_market, **options
        )

    def format_number(self, number, **options: Any) -> str:
        return self.formatter.format_number(
            number, self._config.current_language, self._config.current_market, **options
        )

    def format_date(self, value, **options: Any) -> str:
        return self.formatter.format_date(
            value, self._config.current_language, self._config.current_market, **options
        )

    def _market_currency(self) -> Optional[str]:
        market = self.registry.get_market(self._config.current_market)
        return market.currency_code if market else None

    def detect_language(self, accept_language: Optional[str]) -> str:
        """Best supported language for an Accept-Language header."""
        return detection.detect_language(
            accept_language,
            [language.code for language in self.registry.supported_languages()],
            default=self.registry.default_language().code,
        )

    def detect_market(self, latitude: float, longitude: float) -> Optional[str]:
        """Market whose area contains the coordinates, if supported."""
        market = detection.detect_market(latitude, longitude)
        if market is None or self.registry.get_market(market) is None:
            return None
        return market
