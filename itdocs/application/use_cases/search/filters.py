"""Post-fetch filtering and ordering of merged search results."""

from itdocs.application.dtos.search import SearchFilters, SearchResult


def apply_filters(
    results: list[SearchResult], filters: SearchFilters | None
) -> list[SearchResult]:
    """Keep results allowed by every non-empty filter; relative order is preserved.

    Results without an organization id or category are dropped by the
    corresponding filter; results without created_at always pass the date
    range.
    """
    if filters is None or filters.is_empty():
        return list(results)

    filtered = results
    if filters.content_types:
        allowed_types = set(filters.content_types)
        filtered = [r for r in filtered if r.type.value in allowed_types]
    if filters.organization_ids:
        allowed_orgs = set(filters.organization_ids)
        filtered = [r for r in filtered if r.organization_id in allowed_orgs]
    if filters.categories:
        allowed_categories = set(filters.categories)
        filtered = [r for r in filtered if r.category in allowed_categories]
    if filters.date_range is not None:
        date_range = filters.date_range
        filtered = [
            r
            for r in filtered
            if r.created_at is None or date_range.contains(r.created_at)
        ]
    return list(filtered)


def sort_by_relevance(results: list[SearchResult]) -> list[SearchResult]:
    """Return results by descending relevance_score; equal scores keep merge order."""
    return sorted(results, key=lambda r: r.relevance_score, reverse=True)
