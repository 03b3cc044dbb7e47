"""Cache key builders. Single place for key format (DRY).

Search keys embed the query text verbatim, so components are JSON-encoded
as a list rather than joined with CACHE_KEY_SEP: a query containing the
separator cannot collide with another key.
"""

import json

from itdocs.application.dtos.search import SearchCacheKey
from itdocs.core.constants import CACHE_KEY_SEP, CACHE_PREFIX_SEARCH

SEARCH_KEY_PATTERN = f"{CACHE_PREFIX_SEARCH}{CACHE_KEY_SEP}*"


def search_key(key: SearchCacheKey) -> str:
    """Cache key for one search (query, scope, organization id, filters)."""
    components = json.dumps(
        [key.query, key.scope, key.organization_id, key.filters_token],
        ensure_ascii=False,
        separators=(",", ":"),
    )
    return f"{CACHE_PREFIX_SEARCH}{CACHE_KEY_SEP}{components}"
