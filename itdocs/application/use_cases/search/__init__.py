"""Federated search use case: per-source searchers, filters, orchestration."""

from itdocs.application.use_cases.search.filters import apply_filters, sort_by_relevance
from itdocs.application.use_cases.search.searchers import (
    EntitySearcher,
    SidebarItemSearcher,
    build_searchers,
)
from itdocs.application.use_cases.search.service import SearchService

__all__ = [
    "EntitySearcher",
    "SearchService",
    "SidebarItemSearcher",
    "apply_filters",
    "build_searchers",
    "sort_by_relevance",
]
