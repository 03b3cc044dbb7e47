"""Redis-backed search result cache.

Shares cached searches across worker processes. Results are stored as JSON
(SearchResult.to_dict) with SETEX so Redis expires them after the TTL.
Every Redis failure degrades to a cache miss; search never fails because
the cache is down.
"""

from __future__ import annotations

import json
import logging

import redis.asyncio as redis

from itdocs.application.dtos.search import SearchCacheKey, SearchResult
from itdocs.core.config import get_settings
from itdocs.infrastructure.cache.keys import SEARCH_KEY_PATTERN, search_key

logger = logging.getLogger(__name__)

UNLINK_CHUNK_SIZE = 500


class RedisSearchCache:
    """Async Redis search cache with TTL.

    Uses itdocs.core.config for connection settings. Call connect() at
    startup and disconnect() at shutdown.
    """

    def __init__(
        self, ttl_seconds: int = 30, redis_client: redis.Redis | None = None
    ) -> None:
        """Initialize cache.

        Args:
            ttl_seconds: Lifetime of a cached search.
            redis_client: Optional Redis client for testing or DI.
        """
        self.ttl_seconds = ttl_seconds
        self.redis = redis_client
        self.settings = get_settings()
        self._connected = redis_client is not None

    async def connect(self) -> None:
        """Establish Redis connection. Call on app startup."""
        if self.redis is None:
            try:
                self.redis = redis.Redis(
                    host=self.settings.redis_host,
                    port=self.settings.redis_port,
                    db=self.settings.redis_db,
                    password=self.settings.redis_password.get_secret_value()
                    if self.settings.redis_password
                    else None,
                    decode_responses=True,
                    socket_connect_timeout=5,
                    socket_keepalive=True,
                )
                await self.redis.ping()
                self._connected = True
                logger.info(
                    "Redis search cache connected: %s:%s",
                    self.settings.redis_host,
                    self.settings.redis_port,
                )
            except (redis.ConnectionError, redis.TimeoutError) as e:
                logger.warning("Redis connection failed: %s. Search cache disabled.", e)
                self._connected = False
                self.redis = None

    async def disconnect(self) -> None:
        """Close Redis connection. Call on app shutdown."""
        if self.redis:
            await self.redis.aclose()
            self.redis = None
            self._connected = False
            logger.info("Redis search cache disconnected")

    def is_available(self) -> bool:
        """Return True if Redis is connected and usable."""
        return self._connected and self.redis is not None

    async def get(self, key: SearchCacheKey) -> list[SearchResult] | None:
        """Return cached results or None if missing, unavailable, or unreadable."""
        if not self.is_available() or self.redis is None:
            return None
        cache_key = search_key(key)
        try:
            value = await self.redis.get(cache_key)
        except redis.RedisError:
            logger.exception("Cache get error for key %s", cache_key)
            return None
        if value is None:
            logger.debug("Cache MISS: %s", cache_key)
            return None
        try:
            results = [SearchResult.from_dict(item) for item in json.loads(value)]
        except (ValueError, KeyError, TypeError):
            logger.warning("Discarding unreadable cache entry %s", cache_key)
            return None
        logger.debug("Cache HIT: %s", cache_key)
        return results

    async def set(self, key: SearchCacheKey, results: list[SearchResult]) -> None:
        """Store results with the configured TTL; failures are logged and ignored."""
        if not self.is_available() or self.redis is None:
            return
        cache_key = search_key(key)
        try:
            serialized = json.dumps([r.to_dict() for r in results], default=str)
            await self.redis.setex(cache_key, self.ttl_seconds, serialized)
            logger.debug("Cache SET: %s (TTL: %ss)", cache_key, self.ttl_seconds)
        except redis.RedisError:
            logger.exception("Cache set error for key %s", cache_key)

    async def clear(self) -> None:
        """Delete every search key using SCAN + batched UNLINK (non-blocking)."""
        if not self.is_available() or self.redis is None:
            return
        deleted = 0
        try:
            chunk: list[str] = []
            async for cache_key in self.redis.scan_iter(match=SEARCH_KEY_PATTERN):
                chunk.append(cache_key)
                if len(chunk) >= UNLINK_CHUNK_SIZE:
                    deleted += await self._unlink(chunk)
                    chunk = []
            if chunk:
                deleted += await self._unlink(chunk)
            logger.info("Cache INVALIDATE: %s (%s keys)", SEARCH_KEY_PATTERN, deleted)
        except redis.RedisError:
            logger.exception("Cache clear error for %s", SEARCH_KEY_PATTERN)

    async def _unlink(self, keys: list[str]) -> int:
        assert self.redis is not None
        async with self.redis.pipeline(transaction=False) as pipe:
            pipe.unlink(*keys)
            results = await pipe.execute()
        return sum(int(r or 0) for r in results)
