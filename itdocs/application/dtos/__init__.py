"""Application DTOs (no ORM dependency)."""

from itdocs.application.dtos.search import (
    DateRange,
    SearchCacheKey,
    SearchFilters,
    SearchResult,
)
from itdocs.application.dtos.table_query import RowQuery

__all__ = [
    "DateRange",
    "RowQuery",
    "SearchCacheKey",
    "SearchFilters",
    "SearchResult",
]
