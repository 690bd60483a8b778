"""Translation bundle cache abstract base class and in-memory implementation."""

import time
from abc import ABC, abstractmethod
from collections import OrderedDict
from typing import Any, Dict, List, Optional, Tuple

from localization.i18n.models import CacheEntry, TranslationBundle
from localization.logging import get_module_logger

logger = get_module_logger()

CacheKey = Tuple[str, str]


class TranslationCache(ABC):
    """Abstract base class for translation bundle caches.

    Keys are (language, market) pairs. Implementations never raise from
    their public operations.
    """

    @abstractmethod
    def get(self, language: str, market: str) -> Optional[TranslationBundle]:
        """Get the cached bundle for a pair.

        Args:
            language: Language code.
            market: Market code.

        Returns:
            The bundle, or None if absent or expired.
        """
        pass

    @abstractmethod
    def put(
        self,
        language: str,
        market: str,
        bundle: TranslationBundle,
        ttl: Optional[float] = None,
    ) -> None:
        """Store a bundle, overwriting any existing entry for the pair.

        Args:
            language: Language code.
            market: Market code.
            bundle: Bundle to cache.
            ttl: Time-to-live in seconds (uses the cache default if None).
        """
        pass

    @abstractmethod
    def invalidate(self, language: str, market: str) -> bool:
        """Drop the entry for a pair. Returns True if one was present."""
        pass

    @abstractmethod
    def invalidate_all(self) -> None:
        pass

    @abstractmethod
    def get_stats(self) -> Dict[str, Any]:
        pass


class InMemoryTranslationCache(TranslationCache):
    """Process-local bundle cache with TTL and a capacity bound.

    Entries are kept in insertion order. When full, the entry inserted
    longest ago is evicted; reads do not refresh an entry's position.
    Expired entries are removed lazily on read or by purge_expired().

    Attributes:
        default_ttl: TTL applied when put() gets no explicit ttl.
        max_entries: Maximum number of cached pairs.
    """

    def __init__(self, default_ttl: float = 3600, max_entries: int = 500):
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self.default_ttl = default_ttl
        self.max_entries = max_entries
        self._entries: "OrderedDict[CacheKey, CacheEntry]" = OrderedDict()
        self._hits = 0
        self._misses = 0
        self._evictions = 0
        logger.info(
            "initialized_translation_cache",
            default_ttl=default_ttl,
            max_entries=max_entries,
        )

    def get(self, language: str, market: str) -> Optional[TranslationBundle]:
        key = (language, market)
        entry = self._entries.get(key)
        if entry is None:
            self._misses += 1
            return None

        if not entry.is_fresh(time.time()):
            del self._entries[key]
            self._misses += 1
            logger.debug("translation_cache_expired", language=language, market=market)
            return None

        self._hits += 1
        return entry.bundle

    def put(
        self,
        language: str,
        market: str,
        bundle: TranslationBundle,
        ttl: Optional[float] = None,
    ) -> None:
        key = (language, market)
        # Overwrites move to the end of the insertion order
        self._entries.pop(key, None)

        while len(self._entries) >= self.max_entries:
            evicted, _ = self._entries.popitem(last=False)
            self._evictions += 1
            logger.debug(
                "translation_cache_evicted", language=evicted[0], market=evicted[1]
            )

        self._entries[key] = CacheEntry(
            bundle=bundle,
            inserted_at=time.time(),
            ttl=self.default_ttl if ttl is None else ttl,
        )

    def invalidate(self, language: str, market: str) -> bool:
        return self._entries.pop((language, market), None) is not None

    def invalidate_all(self) -> None:
        count = len(self._entries)
        self._entries.clear()
        logger.info("translation_cache_cleared", entries_removed=count)

    def purge_expired(self) -> int:
        """Remove every expired entry.

        Returns:
            Number of entries removed.
        """
        now = time.time()
        expired = [key for key, entry in self._entries.items() if not entry.is_fresh(now)]
        for key in expired:
            del self._entries[key]
        if expired:
            logger.debug("translation_cache_purged", entries_removed=len(expired))
        return len(expired)

    def keys(self) -> List[CacheKey]:
        """Cached pairs in insertion order, expired ones included."""
        return list(self._entries.keys())

    def get_stats(self) -> Dict[str, Any]:
        return {
            "size": len(self._entries),
            "max_entries": self.max_entries,
            "hits": self._hits,
            "misses": self._misses,
            "evictions": self._evictions,
            "default_ttl": self.default_ttl,
        }
