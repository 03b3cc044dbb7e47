"""In-process search result cache with a fixed TTL.

Entries are checked for staleness on read; nothing is evicted in the
background, so memory grows with the number of distinct searches until
clear() is called.
"""

import logging
import time
from collections.abc import Callable

from itdocs.application.dtos.search import SearchCacheKey, SearchResult
from itdocs.infrastructure.cache.keys import search_key

logger = logging.getLogger(__name__)


class MemorySearchCache:
    """Dict-backed cache: key -> (stored_at, results).

    clock is injectable so tests can move time without sleeping.
    """

    def __init__(
        self,
        ttl_seconds: float = 30.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self.clock = clock
        self._entries: dict[str, tuple[float, list[SearchResult]]] = {}

    def __len__(self) -> int:
        return len(self._entries)

    async def get(self, key: SearchCacheKey) -> list[SearchResult] | None:
        cache_key = search_key(key)
        entry = self._entries.get(cache_key)
        if entry is None:
            logger.debug("Cache MISS: %s", cache_key)
            return None
        stored_at, results = entry
        if self.clock() - stored_at >= self.ttl_seconds:
            logger.debug("Cache STALE: %s", cache_key)
            return None
        logger.debug("Cache HIT: %s", cache_key)
        return list(results)

    async def set(self, key: SearchCacheKey, results: list[SearchResult]) -> None:
        cache_key = search_key(key)
        self._entries[cache_key] = (self.clock(), list(results))
        logger.debug("Cache SET: %s (TTL: %ss)", cache_key, self.ttl_seconds)

    async def clear(self) -> None:
        count = len(self._entries)
        self._entries.clear()
        logger.info("Cache INVALIDATE: memory (%s keys)", count)
