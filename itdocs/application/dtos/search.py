"""DTOs for federated search (no dependency on ORM).

SearchResult is the normalized projection every source maps its rows to.
It is built fresh per search call and never persisted; caches store lists
of results, serialized with to_dict()/from_dict() when they leave the
process.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from itdocs.domain.enums import SearchResultType
from itdocs.shared.utils.datetime import ensure_utc, parse_datetime


@dataclass(frozen=True)
class DateRange:
    """Inclusive creation-time window for filtering results."""

    start: datetime
    end: datetime

    def contains(self, value: datetime) -> bool:
        """Return True if value falls inside [start, end] (UTC-normalized)."""
        return ensure_utc(self.start) <= ensure_utc(value) <= ensure_utc(self.end)


@dataclass(frozen=True)
class SearchFilters:
    """User-selected post-fetch filters. Empty tuples mean no restriction."""

    content_types: tuple[str, ...] = ()
    organization_ids: tuple[str, ...] = ()
    categories: tuple[str, ...] = ()
    date_range: DateRange | None = None

    def is_empty(self) -> bool:
        """Return True when no filter restricts the result set."""
        return not (
            self.content_types
            or self.organization_ids
            or self.categories
            or self.date_range
        )

    def cache_token(self) -> str:
        """Canonical JSON used as the filter component of a cache key."""
        date_range = None
        if self.date_range is not None:
            date_range = [
                ensure_utc(self.date_range.start).isoformat(),
                ensure_utc(self.date_range.end).isoformat(),
            ]
        return json.dumps(
            {
                "categories": sorted(self.categories),
                "content_types": sorted(self.content_types),
                "date_range": date_range,
                "organization_ids": sorted(self.organization_ids),
            },
            sort_keys=True,
            separators=(",", ":"),
        )


@dataclass(frozen=True)
class SearchResult:
    """Single federated search hit (read-model)."""

    id: str
    title: str
    type: SearchResultType
    description: str | None = None
    subtype: str | None = None
    organization_id: str | None = None  # None for organization results (tenant root)
    organization_name: str | None = None
    category: str | None = None
    url: str | None = None
    matched_fields: list[str] = field(default_factory=list)
    matched_text: str = ""
    relevance_score: int = 0
    metadata: dict[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dict (datetimes as ISO 8601)."""
        return {
            "id": self.id,
            "title": self.title,
            "type": self.type.value,
            "description": self.description,
            "subtype": self.subtype,
            "organization_id": self.organization_id,
            "organization_name": self.organization_name,
            "category": self.category,
            "url": self.url,
            "matched_fields": list(self.matched_fields),
            "matched_text": self.matched_text,
            "relevance_score": self.relevance_score,
            "metadata": self.metadata,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SearchResult":
        """Rebuild a result from to_dict() output."""
        return cls(
            id=data["id"],
            title=data["title"],
            type=SearchResultType(data["type"]),
            description=data.get("description"),
            subtype=data.get("subtype"),
            organization_id=data.get("organization_id"),
            organization_name=data.get("organization_name"),
            category=data.get("category"),
            url=data.get("url"),
            matched_fields=list(data.get("matched_fields") or []),
            matched_text=data.get("matched_text") or "",
            relevance_score=int(data.get("relevance_score") or 0),
            metadata=dict(data.get("metadata") or {}),
            created_at=parse_datetime(data.get("created_at")),
            updated_at=parse_datetime(data.get("updated_at")),
        )


@dataclass(frozen=True)
class SearchCacheKey:
    """Identity of a cached search: (query, scope, organization id or "", filters)."""

    query: str
    scope: str
    organization_id: str
    filters_token: str

    @classmethod
    def build(
        cls,
        query: str,
        scope: str,
        organization_id: str | None,
        filters: SearchFilters | None,
    ) -> "SearchCacheKey":
        return cls(
            query=query,
            scope=scope,
            organization_id=organization_id or "",
            filters_token=(filters or SearchFilters()).cache_token(),
        )
