"""Search API schemas.

Responses are camelCase on the wire (organizationId, relevanceScore, ...);
the filters query parameter accepts camelCase or snake_case keys.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from itdocs.application.dtos.search import DateRange, SearchFilters, SearchResult
from itdocs.domain.enums import SearchResultType, SearchType
from itdocs.domain.exceptions import ValidationException


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DateRangeIn(CamelModel):
    start: datetime
    end: datetime


class SearchFiltersIn(CamelModel):
    """JSON body of the filters query parameter. Missing or empty lists mean no restriction."""

    content_types: list[str] = Field(default_factory=list)
    organization_ids: list[str] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)
    date_range: DateRangeIn | None = None

    @classmethod
    def parse(cls, raw: str | None) -> SearchFilters | None:
        """Parse the raw query parameter; None when absent.

        Raises:
            ValidationException: If raw is not a JSON object of the expected shape.
        """
        if raw is None or not raw.strip():
            return None
        try:
            parsed = cls.model_validate_json(raw)
        except ValidationError as e:
            raise ValidationException(
                f"Invalid filters: {e.error_count()} error(s)", field="filters"
            ) from e
        return parsed.to_filters()

    def to_filters(self) -> SearchFilters:
        date_range = None
        if self.date_range is not None:
            date_range = DateRange(start=self.date_range.start, end=self.date_range.end)
        return SearchFilters(
            content_types=tuple(self.content_types),
            organization_ids=tuple(self.organization_ids),
            categories=tuple(self.categories),
            date_range=date_range,
        )


class SearchResultResponse(CamelModel):
    """Single federated search hit."""

    id: str
    title: str
    type: SearchResultType = Field(..., description=f"One of {SearchResultType.values()}")
    description: str | None = None
    subtype: str | None = None
    organization_id: str | None = None
    organization_name: str | None = None
    category: str | None = None
    url: str | None = None
    matched_fields: list[str] = Field(default_factory=list)
    matched_text: str = ""
    relevance_score: int = 0
    metadata: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_result(cls, result: SearchResult) -> "SearchResultResponse":
        return cls(
            id=result.id,
            title=result.title,
            type=result.type,
            description=result.description,
            subtype=result.subtype,
            organization_id=result.organization_id,
            organization_name=result.organization_name,
            category=result.category,
            url=result.url,
            matched_fields=list(result.matched_fields),
            matched_text=result.matched_text,
            relevance_score=result.relevance_score,
            metadata=result.metadata,
            created_at=result.created_at,
            updated_at=result.updated_at,
        )


class GlobalSearchResponse(CamelModel):
    """Response for GET /api/search/global."""

    results: list[SearchResultResponse]
    search_type: SearchType = Field(..., description="legacy | deep")
