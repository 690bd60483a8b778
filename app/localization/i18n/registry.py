"""Locale registry: supported languages, markets and how they combine."""

from dataclasses import replace
from typing import Any, Dict, Iterable, List, Optional

from localization.i18n.catalog import DEFAULT_LANGUAGES, DEFAULT_MARKETS
from localization.i18n.exceptions import (
    LanguageNotOfferedInMarketError,
    UnsupportedLanguageError,
    UnsupportedMarketError,
)
from localization.i18n.models import (
    BusinessCalendar,
    Language,
    Locale,
    LocaleValidation,
    Market,
)
from localization.logging import get_module_logger

logger = get_module_logger()


class LocaleRegistry:
    """Single source of truth for supported languages and markets.

    Mutations only change this in-memory catalog. They never touch the
    translation store or bundle caches; callers removing a language are
    responsible for any cache cleanup.

    Attributes:
        languages: Languages by code, in insertion order.
        markets: Markets by code, in insertion order.
    """

    def __init__(
        self,
        languages: Optional[Iterable[Language]] = None,
        markets: Optional[Iterable[Market]] = None,
    ):
        """Initialize the registry.

        Args:
            languages: Language entries (default: built-in catalog).
            markets: Market entries (default: built-in catalog).

        Raises:
            ValueError: If the languages do not contain exactly one default.
        """
        self.languages: Dict[str, Language] = {
            lang.code: lang
            for lang in (DEFAULT_LANGUAGES if languages is None else languages)
        }
        self.markets: Dict[str, Market] = {
            market.code: market
            for market in (DEFAULT_MARKETS if markets is None else markets)
        }
        self._check_single_default(self.languages.values())
        logger.info(
            "initialized_locale_registry",
            language_count=len(self.languages),
            market_count=len(self.markets),
        )

    @staticmethod
    def _check_single_default(languages: Iterable[Language]) -> None:
        defaults = [lang.code for lang in languages if lang.is_default]
        if len(defaults) != 1:
            raise ValueError(
                f"Exactly one default language is required, found {len(defaults)}: {defaults}"
            )

    def get_language(self, code: str) -> Optional[Language]:
        return self.languages.get(code)

    def get_market(self, code: str) -> Optional[Market]:
        return self.markets.get(code)

    def default_language(self) -> Language:
        """Return the catalog's default language (always present)."""
        return next(lang for lang in self.languages.values() if lang.is_default)

    def supported_languages(self) -> List[Language]:
        return list(self.languages.values())

    def supported_markets(self) -> List[Market]:
        return list(self.markets.values())

    def is_rtl_language(self, code: str) -> bool:
        language = self.get_language(code)
        return language.is_rtl if language else False

    def resolve_locale(self, language_code: str, market_code: str) -> Locale:
        """Build a validated Locale for a (language, market) pair.

        Args:
            language_code: Language code.
            market_code: Market code.

        Returns:
            Locale with timezone and business calendar of the market.

        Raises:
            UnsupportedLanguageError: If the language is unknown.
            UnsupportedMarketError: If the market is unknown.
            LanguageNotOfferedInMarketError: If the market does not offer the language.
        """
        language = self.get_language(language_code)
        if language is None:
            raise UnsupportedLanguageError(language_code)

        market = self.get_market(market_code)
        if market is None:
            raise UnsupportedMarketError(market_code)

        if not market.offers(language_code):
            raise LanguageNotOfferedInMarketError(language_code, market_code)

        return Locale(
            language=language,
            market=market,
            timezone=market.timezone,
            business_calendar=BusinessCalendar(holidays=market.holidays),
        )

    def validate_locale(self, language_code: str, market_code: str) -> LocaleValidation:
        """Check a (language, market) pair without raising.

        Args:
            language_code: Language code.
            market_code: Market code.

        Returns:
            LocaleValidation listing every problem found.
        """
        errors: List[str] = []
        language = self.get_language(language_code)
        market = self.get_market(market_code)

        if language is None:
            errors.append(f"Unsupported language: {language_code}")
        if market is None:
            errors.append(f"Unsupported market: {market_code}")
        if language and market and not market.offers(language_code):
            errors.append(
                f"Language {language_code} is not offered in market {market_code}"
            )

        return LocaleValidation(is_valid=not errors, errors=errors)

    def languages_for_market(self, market_code: str) -> List[Language]:
        """Languages offered by a market; empty when the market is unknown."""
        market = self.get_market(market_code)
        if market is None:
            return []
        return [
            self.languages[code]
            for code in market.supported_language_codes
            if code in self.languages
        ]

    def markets_for_language(self, language_code: str) -> List[Market]:
        return [market for market in self.markets.values() if market.offers(language_code)]

    def add_language(self, language: Language) -> None:
        """Add or replace a language.

        Raises:
            ValueError: If the change would leave zero or several defaults.
        """
        candidate = {**self.languages, language.code: language}
        self._check_single_default(candidate.values())
        self.languages = candidate
        logger.info("language_added", language=language.code)

    def update_language(self, code: str, **changes: Any) -> Optional[Language]:
        """Update fields of an existing language.

        Args:
            code: Language code.
            **changes: Field values to replace.

        Returns:
            The updated Language, or None if the code is unknown.

        Raises:
            ValueError: If the change would leave zero or several defaults.
        """
        existing = self.languages.get(code)
        if existing is None:
            return None
        updated = replace(existing, **changes)
        candidate = dict(self.languages)
        candidate.pop(code)
        candidate[updated.code] = updated
        self._check_single_default(candidate.values())
        self.languages = candidate
        logger.info("language_updated", language=code, fields=sorted(changes))
        return updated

    def remove_language(self, code: str) -> bool:
        """Remove a language.

        Returns:
            True if removed, False if unknown.

        Raises:
            ValueError: If the language is the default language.
        """
        language = self.languages.get(code)
        if language is None:
            return False
        if language.is_default:
            raise ValueError(f"Cannot remove the default language: {code}")
        del self.languages[code]
        logger.info("language_removed", language=code)
        return True

    def add_market(self, market: Market) -> None:
        self.markets[market.code] = market
        logger.info("market_added", market=market.code)

    def update_market(self, code: str, **changes: Any) -> Optional[Market]:
        """Update fields of an existing market.

        Returns:
            The updated Market, or None if the code is unknown.
        """
        existing = self.markets.get(code)
        if existing is None:
            return None
        updated = replace(existing, **changes)
        self.markets.pop(code)
        self.markets[updated.code] = updated
        logger.info("market_updated", market=code, fields=sorted(changes))
        return updated

    def remove_market(self, code: str) -> bool:
        removed = self.markets.pop(code, None) is not None
        if removed:
            logger.info("market_removed", market=code)
        return removed

    def get_stats(self) -> Dict[str, Any]:
        """Catalog statistics.

        Returns:
            Dict with language/market totals, the number of valid locales,
            RTL language count and per-region breakdowns.
        """
        languages_by_region: Dict[str, int] = {}
        for language in self.languages.values():
            home = self.markets.get(language.market_code or "")
            if home:
                languages_by_region[home.region] = languages_by_region.get(home.region, 0) + 1

        markets_by_region: Dict[str, int] = {}
        for market in self.markets.values():
            markets_by_region[market.region] = markets_by_region.get(market.region, 0) + 1

        return {
            "total_languages": len(self.languages),
            "total_markets": len(self.markets),
            "total_locales": sum(
                1
                for market in self.markets.values()
                for code in market.supported_language_codes
                if code in self.languages
            ),
            "rtl_languages": sum(1 for lang in self.languages.values() if lang.is_rtl),
            "languages_by_region": languages_by_region,
            "markets_by_region": markets_by_region,
        }
