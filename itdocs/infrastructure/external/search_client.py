"""Async HTTP client for the global search endpoint.

Used by dashboards and other services that call GET /api/search/global.
Every call is numbered; an outcome is flagged superseded when a newer call
was started before its response arrived, so type-ahead callers can drop it.
The client never raises: non-2xx responses, transport errors and malformed
bodies are logged and produce an empty result list.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from itdocs.application.dtos.search import SearchFilters, SearchResult
from itdocs.domain.enums import SearchResultType, SearchScope, SearchType
from itdocs.shared.utils.datetime import parse_datetime

logger = logging.getLogger(__name__)

SEARCH_PATH = "/api/search/global"


@dataclass(frozen=True)
class SearchOutcome:
    """Result of one client call."""

    sequence: int
    results: list[SearchResult] = field(default_factory=list)
    search_type: SearchType | None = None
    superseded: bool = False


def _filters_param(filters: SearchFilters) -> str:
    date_range = None
    if filters.date_range is not None:
        date_range = {
            "start": filters.date_range.start.isoformat(),
            "end": filters.date_range.end.isoformat(),
        }
    return json.dumps(
        {
            "contentTypes": list(filters.content_types),
            "organizationIds": list(filters.organization_ids),
            "categories": list(filters.categories),
            "dateRange": date_range,
        }
    )


def result_from_payload(item: dict[str, Any]) -> SearchResult:
    """Build a SearchResult from one camelCase response item."""
    return SearchResult(
        id=str(item["id"]),
        title=item["title"],
        type=SearchResultType(item["type"]),
        description=item.get("description"),
        subtype=item.get("subtype"),
        organization_id=item.get("organizationId"),
        organization_name=item.get("organizationName"),
        category=item.get("category"),
        url=item.get("url"),
        matched_fields=list(item.get("matchedFields") or []),
        matched_text=item.get("matchedText") or "",
        relevance_score=int(item.get("relevanceScore") or 0),
        metadata=dict(item.get("metadata") or {}),
        created_at=parse_datetime(item.get("createdAt")),
        updated_at=parse_datetime(item.get("updatedAt")),
    )


class GlobalSearchClient:
    """Client for the federated search API."""

    def __init__(
        self,
        base_url: str,
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._http = (
            http_client
            if http_client is not None
            else httpx.AsyncClient(base_url=base_url, timeout=timeout)
        )
        self._owns_http = http_client is None
        self._sequence = 0

    @property
    def latest_sequence(self) -> int:
        return self._sequence

    async def aclose(self) -> None:
        """Close the HTTP client only if we created it (do not close injected client)."""
        if self._owns_http:
            await self._http.aclose()

    async def search(
        self,
        query: str,
        *,
        scope: SearchScope = SearchScope.GLOBAL,
        organization_id: str | None = None,
        deep: bool = True,
        filters: SearchFilters | None = None,
        limit: int | None = None,
    ) -> SearchOutcome:
        """Call the search endpoint; failures yield an outcome with no results."""
        self._sequence += 1
        sequence = self._sequence

        params: dict[str, Any] = {
            "q": query,
            "scope": SearchScope(scope).value,
            "deep": "true" if deep else "false",
        }
        if organization_id:
            params["organization_id"] = organization_id
        if filters is not None and not filters.is_empty():
            params["filters"] = _filters_param(filters)
        if limit is not None:
            params["limit"] = limit

        results: list[SearchResult] = []
        search_type: SearchType | None = None
        try:
            response = await self._http.get(SEARCH_PATH, params=params)
            response.raise_for_status()
            body = response.json()
            results = [result_from_payload(item) for item in body["results"]]
            search_type = SearchType(body["searchType"])
        except httpx.HTTPStatusError as e:
            logger.error(
                "Search request failed with status %s: %s",
                e.response.status_code,
                e.response.text[:200],
            )
        except httpx.HTTPError as e:
            logger.error("Search request failed: %s", e)
        except (ValueError, KeyError, TypeError) as e:
            logger.error("Malformed search response: %s", e)
            results = []

        return SearchOutcome(
            sequence=sequence,
            results=results,
            search_type=search_type,
            superseded=sequence != self._sequence,
        )
