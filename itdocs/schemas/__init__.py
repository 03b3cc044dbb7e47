"""Pydantic request/response schemas for the API."""

from itdocs.schemas.health import HealthResponse
from itdocs.schemas.search import (
    GlobalSearchResponse,
    SearchFiltersIn,
    SearchResultResponse,
)

__all__ = [
    "GlobalSearchResponse",
    "HealthResponse",
    "SearchFiltersIn",
    "SearchResultResponse",
]
