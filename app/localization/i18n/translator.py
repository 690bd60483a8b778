"""Translation resolver.

Turns a key into display text for a (language, market) pair: bundle lookup,
fallback to the fallback language, pluralization and placeholder
interpolation. Bundles come from the cache or, on a miss, from the store.
"""

import asyncio
from typing import Any, Dict, List, Optional, Set, Tuple

from localization.i18n.cache import TranslationCache
from localization.i18n.defaults import build_default_bundle
from localization.i18n.models import (
    PLACEHOLDER_PATTERN,
    BundleSource,
    Gender,
    TranslationBundle,
    TranslationValue,
)
from localization.i18n.plurals import apply_plural
from localization.i18n.registry import LocaleRegistry
from localization.i18n.store import TranslationStore
from localization.logging import get_module_logger

logger = get_module_logger()

Pair = Tuple[str, str]


def interpolate(text: str, variables: Dict[str, Any]) -> str:
    """Replace ``{name}`` placeholders with values.

    Placeholders with no value (missing or None) are left verbatim.

    Args:
        text: Text with placeholders.
        variables: Placeholder values.

    Returns:
        The interpolated text.
    """
    if not variables:
        return text

    def _replace(match) -> str:
        value = variables.get(match.group(1))
        return match.group(0) if value is None else str(value)

    return PLACEHOLDER_PATTERN.sub(_replace, text)


class Translator:
    """Resolves translation keys against loaded bundles.

    translate() is synchronous and never raises or blocks: when the bundle
    for a pair is not available it returns the key and schedules a
    background load on the running event loop.

    Bundles are looked up in the cache first. Pairs the service is actively
    using (the current and fallback pairs) are also retained in
    ``_bound`` so they stay servable after their cache entry expires or when
    caching is disabled.

    Attributes:
        store: Persistent translation store.
        cache: Bundle cache.
        registry: Locale registry (fallback language lookup).
        cache_translations: When False, loads always hit the store and the
            cache is never read or written.
        fallback_language: Language consulted when a key is missing.
    """

    def __init__(
        self,
        store: TranslationStore,
        cache: TranslationCache,
        registry: LocaleRegistry,
        cache_translations: bool = True,
        fallback_language: Optional[str] = None,
    ):
        self.store = store
        self.cache = cache
        self.registry = registry
        self.cache_translations = cache_translations
        self.fallback_language = fallback_language or registry.default_language().code
        self._bound: Dict[Pair, TranslationBundle] = {}
        self._inflight: Dict[Pair, "asyncio.Future[TranslationBundle]"] = {}
        self._scheduled: Set[Pair] = set()
        self._background: Set["asyncio.Task[None]"] = set()
        logger.info(
            "initialized_translator",
            fallback_language=self.fallback_language,
            cache_translations=cache_translations,
        )

    def fallback_pair(self, market: str) -> Pair:
        """Pair holding fallback texts for a market.

        The fallback language in the same market when the market offers it,
        otherwise the fallback language in its home market.
        """
        market_entry = self.registry.get_market(market)
        if market_entry is not None and market_entry.offers(self.fallback_language):
            return (self.fallback_language, market)

        language = self.registry.get_language(self.fallback_language)
        home = language.market_code if language and language.market_code else market
        return (self.fallback_language, home)

    async def load_bundle(self, language: str, market: str) -> TranslationBundle:
        """Load the bundle for a pair.

        Served from the cache when caching is on and the entry is fresh.
        Otherwise the store is read; concurrent loads of the same pair share
        one store call. Store failures yield the built-in bundle.

        Args:
            language: Language code.
            market: Market code.

        Returns:
            The bundle (never raises for store failures).
        """
        if self.cache_translations:
            cached = self.cache.get(language, market)
            if cached is not None:
                return cached

        pair = (language, market)
        future = self._inflight.get(pair)
        if future is None:
            future = asyncio.ensure_future(self._fetch_bundle(language, market))
            self._inflight[pair] = future
            future.add_done_callback(lambda done, p=pair: self._load_finished(p, done))
        return await future

    def _load_finished(self, pair: Pair, future: "asyncio.Future[Any]") -> None:
        if self._inflight.get(pair) is future:
            del self._inflight[pair]

    async def _fetch_bundle(self, language: str, market: str) -> TranslationBundle:
        try:
            records = await self.store.fetch_translations(language, market)
        except Exception as e:
            logger.warning(
                "translation_store_unavailable",
                language=language,
                market=market,
                error=str(e),
            )
            return build_default_bundle(language, market)

        bundle = TranslationBundle(
            language=language,
            market=market,
            translations={record.key: record.to_value() for record in records},
            source=BundleSource.STORE,
        )
        if self.cache_translations:
            self.cache.put(language, market, bundle)

        logger.info(
            "loaded_translation_bundle",
            language=language,
            market=market,
            key_count=len(bundle),
        )
        return bundle

    def retain(self, bundle: TranslationBundle) -> None:
        """Keep a bundle servable regardless of cache state."""
        self._bound[(bundle.language, bundle.market)] = bundle

    def release(self, language: str, market: str) -> bool:
        """Stop retaining a pair. The cache entry, if any, is left alone."""
        return self._bound.pop((language, market), None) is not None

    def clear(self) -> None:
        """Drop retained bundles and empty the cache."""
        self._bound.clear()
        self.cache.invalidate_all()

    def loaded_pairs(self) -> List[Pair]:
        return list(self._bound.keys())

    def bundle_for(self, language: str, market: str) -> Optional[TranslationBundle]:
        """Currently servable bundle for a pair, without scheduling a load."""
        if self.cache_translations:
            cached = self.cache.get(language, market)
            if cached is not None:
                return cached
        return self._bound.get((language, market))

    def _servable_bundle(self, language: str, market: str) -> Optional[TranslationBundle]:
        cached = self.cache.get(language, market) if self.cache_translations else None
        if cached is not None:
            return cached

        bound = self._bound.get((language, market))
        # A retained bundle with caching off is current; with caching on the
        # cache miss means it is stale and gets refreshed in the background.
        if bound is None or self.cache_translations:
            self._schedule_load(language, market)
        return bound

    def _schedule_load(self, language: str, market: str) -> None:
        pair = (language, market)
        if pair in self._scheduled or pair in self._inflight:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return

        self._scheduled.add(pair)
        task = loop.create_task(self._background_load(pair))
        self._background.add(task)
        task.add_done_callback(self._background.discard)

    async def _background_load(self, pair: Pair) -> None:
        try:
            bundle = await self.load_bundle(*pair)
            if pair in self._bound:
                self._bound[pair] = bundle
        finally:
            self._scheduled.discard(pair)

    def lookup(self, key: str, language: str, market: str) -> Optional[TranslationValue]:
        """Find a key along the fallback chain.

        Returns:
            The value from the active bundle, else from the fallback bundle,
            else None. None is also returned while the active bundle is not
            available yet.
        """
        bundle = self._servable_bundle(language, market)
        if bundle is None:
            return None

        value = bundle.get(key)
        if value is not None or language == self.fallback_language:
            return value

        fallback_bundle = self._servable_bundle(*self.fallback_pair(market))
        value = fallback_bundle.get(key) if fallback_bundle else None
        if value is not None:
            logger.debug(
                "used_fallback_translation",
                key=key,
                language=language,
                fallback_language=self.fallback_language,
            )
        return value

    def has_translation(self, key: str, language: str, market: str) -> bool:
        """True if the pair's own bundle (not the fallback) holds the key."""
        bundle = self.bundle_for(language, market)
        return bundle.has(key) if bundle else False

    def translate(
        self,
        key: str,
        language: str,
        market: str,
        params: Optional[Dict[str, Any]] = None,
        count: Optional[int] = None,
        gender: Optional[Gender] = None,
        context: Optional[str] = None,
    ) -> str:
        """Translate a key.

        Args:
            key: Dot-namespaced key.
            language: Language code.
            market: Market code.
            params: Placeholder values; they override the stored defaults.
            count: When given, the plural marker is adjusted for the count.
            gender: Accepted for API compatibility; values are not selected
                by gender.
            context: Accepted for API compatibility; values are not selected
                by context.

        Returns:
            The translated text, or the key itself when no translation is
            available. Never raises.
        """
        try:
            value = self.lookup(key, language, market)
            if value is None:
                logger.debug(
                    "translation_not_found", key=key, language=language, market=market
                )
                return key

            text = value.value
            if count is not None:
                text = apply_plural(text, count, language)

            variables = {**value.variables, **(params or {})}
            return interpolate(text, variables)

        except Exception as e:
            logger.error(
                "translate_failed",
                key=key,
                language=language,
                market=market,
                error=str(e),
                exc_info=True,
            )
            return key
