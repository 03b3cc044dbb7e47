"""Federated search use case: fan out, merge, filter, rank, cache.

SearchService runs every per-source searcher concurrently, merges results in
the searchers' fixed order, applies user filters, sorts by relevance (stable
for ties), caches the ranked list for a short TTL and returns the first
`limit` results. Nothing raises past perform_search: failures are logged
and turn into fewer or zero results.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from itdocs.application.dtos.search import SearchCacheKey, SearchFilters, SearchResult
from itdocs.application.use_cases.search.filters import apply_filters, sort_by_relevance
from itdocs.domain.enums import SearchScope
from itdocs.shared.telemetry.tracing import search_span

if TYPE_CHECKING:
    from itdocs.application.interfaces.services import ISearchCache, ISearcher

logger = logging.getLogger(__name__)


class SearchService:
    """Federated (deep) and single-table (legacy) search over organization content."""

    def __init__(
        self,
        searchers: Sequence["ISearcher"],
        cache: "ISearchCache",
        *,
        legacy_searcher: "ISearcher | None" = None,
        min_query_length: int = 2,
    ) -> None:
        """Initialize with searchers in merge order and a result cache.

        Args:
            searchers: Per-source searchers; their order decides tie-breaking.
            cache: Result cache (memory or Redis).
            legacy_searcher: Single source used by legacy_search; defaults to
                the first searcher (sidebar items).
            min_query_length: Queries shorter than this (after trim) return [].
        """
        self.searchers = list(searchers)
        self.cache = cache
        self.legacy_searcher = legacy_searcher or (self.searchers[0] if self.searchers else None)
        self.min_query_length = min_query_length

    def _is_searchable(self, query: str | None) -> bool:
        return bool(query) and len(query.strip()) >= self.min_query_length

    async def perform_search(
        self,
        query: str,
        scope: SearchScope = SearchScope.GLOBAL,
        organization_id: str | None = None,
        filters: SearchFilters | None = None,
        limit: int = 50,
        fuzzy: bool = True,
    ) -> list[SearchResult]:
        """Search every source and return up to limit results ranked by relevance.

        Args:
            query: Raw search text; fewer than min_query_length characters
                after trimming short-circuits to [] without touching the
                cache or any source.
            scope: GLOBAL (all tenants) or ORGANIZATION.
            organization_id: Tenant to restrict to when scope is ORGANIZATION.
            filters: Optional content type / organization / category / date filters.
            limit: Maximum number of results returned.
            fuzzy: Accepted for API compatibility; matching is always substring-based.

        Returns:
            Ranked results, or [] on any failure.
        """
        if not self._is_searchable(query):
            return []
        text = query.strip()
        try:
            key = SearchCacheKey.build(text, SearchScope(scope).value, organization_id, filters)
            cached = await self.cache.get(key)
            if cached is not None:
                logger.debug("Using cached search results for %r", text)
                return cached[:limit]

            logger.info(
                "Performing deep search: query=%r scope=%s organization_id=%s",
                text,
                SearchScope(scope).value,
                organization_id,
            )
            merged = await self._fan_out(text, SearchScope(scope), organization_id)
            ranked = sort_by_relevance(apply_filters(merged, filters))
            await self.cache.set(key, ranked)
            results = ranked[:limit]
            logger.info("Deep search completed: %d results for %r", len(results), text)
            return results
        except Exception:
            logger.exception("Deep search failed for %r", text)
            return []

    async def legacy_search(
        self,
        query: str,
        scope: SearchScope = SearchScope.GLOBAL,
        organization_id: str | None = None,
        limit: int = 50,
    ) -> list[SearchResult]:
        """Single-table search over sidebar items (no fan-out, no cache)."""
        if not self._is_searchable(query) or self.legacy_searcher is None:
            return []
        text = query.strip()
        try:
            results = await self.legacy_searcher.search(text, SearchScope(scope), organization_id)
            return sort_by_relevance(results)[:limit]
        except Exception:
            logger.exception("Legacy search failed for %r", text)
            return []

    async def clear_cache(self) -> None:
        """Drop all cached search results (call after writes to searchable data)."""
        await self.cache.clear()
        logger.info("Search cache cleared")

    async def _fan_out(
        self, query: str, scope: SearchScope, organization_id: str | None
    ) -> list[SearchResult]:
        """Run all searchers concurrently; merge successes in searcher order, log failures."""
        outcomes = await asyncio.gather(
            *(self._run_searcher(s, query, scope, organization_id) for s in self.searchers),
            return_exceptions=True,
        )
        merged: list[SearchResult] = []
        for searcher, outcome in zip(self.searchers, outcomes):
            if isinstance(outcome, Exception):
                logger.error("Search source %s failed: %s", searcher.name, outcome)
                continue
            if isinstance(outcome, BaseException):
                raise outcome
            merged.extend(outcome)
        return merged

    async def _run_searcher(
        self,
        searcher: "ISearcher",
        query: str,
        scope: SearchScope,
        organization_id: str | None,
    ) -> list[SearchResult]:
        async with search_span(
            "search.source", {"search.source": searcher.name, "search.scope": scope.value}
        ) as span:
            results = await searcher.search(query, scope, organization_id)
            span.set_attribute("search.result_count", len(results))
            return results
