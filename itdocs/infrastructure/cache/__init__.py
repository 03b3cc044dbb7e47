"""Search result caches (in-process and Redis) and key builders."""

from itdocs.infrastructure.cache.keys import SEARCH_KEY_PATTERN, search_key
from itdocs.infrastructure.cache.memory_cache import MemorySearchCache
from itdocs.infrastructure.cache.redis_cache import RedisSearchCache

__all__ = [
    "MemorySearchCache",
    "RedisSearchCache",
    "SEARCH_KEY_PATTERN",
    "search_key",
]
