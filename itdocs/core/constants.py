"""Core constants: cache key prefixes and shared literal values.

Single source of truth for cache key structure (DRY). Used by the search
cache backends and key builders.
"""

# Cache key prefixes
CACHE_PREFIX_SEARCH = "search"

# Delimiter for composite keys
CACHE_KEY_SEP = ":"
