"""Service interfaces (ports) for the application layer.

Protocols define contracts for search collaborators (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from itdocs.application.dtos.search import SearchCacheKey, SearchResult
    from itdocs.domain.enums import SearchResultType, SearchScope


class ISearcher(Protocol):
    """One per-source searcher (sidebar items, contacts, documents, ...)."""

    result_type: SearchResultType

    @property
    def name(self) -> str:
        """Short source name for logs and spans."""

    async def search(
        self,
        query: str,
        scope: SearchScope,
        organization_id: str | None = None,
    ) -> list[SearchResult]:
        """Return results for query; never raises (failures yield [])."""


class ISearchCache(Protocol):
    """Short-lived store of computed result lists keyed by search parameters."""

    async def get(self, key: SearchCacheKey) -> list[SearchResult] | None:
        """Return the cached list, or None when missing or stale."""

    async def set(self, key: SearchCacheKey, results: list[SearchResult]) -> None:
        """Store results under key with the cache's TTL."""

    async def clear(self) -> None:
        """Drop every cached entry."""
