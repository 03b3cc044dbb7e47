"""Search API: federated (deep) and sidebar-only (legacy) search, cache reset."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, Response, status

from itdocs.api.dependencies import get_search_service
from itdocs.application.use_cases.search import SearchService
from itdocs.core.config import MAX_SEARCH_LIMIT, get_settings
from itdocs.core.limiter import limit_search
from itdocs.domain.enums import SearchScope, SearchType
from itdocs.domain.exceptions import ValidationException
from itdocs.schemas.search import (
    GlobalSearchResponse,
    SearchFiltersIn,
    SearchResultResponse,
)

router = APIRouter()


@router.get("/global", response_model=GlobalSearchResponse)
@limit_search
async def global_search(
    request: Request,
    search_svc: Annotated[SearchService, Depends(get_search_service)],
    q: str = Query(..., min_length=1, max_length=500),
    scope: SearchScope = Query(SearchScope.GLOBAL, description="global | organization"),
    organization_id: str | None = Query(None, description="Required when scope=organization"),
    deep: bool = Query(True, description="Federated search across all sources"),
    filters: str | None = Query(None, description="JSON-encoded search filters"),
    limit: int | None = Query(
        None, ge=1, le=MAX_SEARCH_LIMIT, description="Defaults to SEARCH_DEFAULT_LIMIT"
    ),
) -> GlobalSearchResponse:
    """Search organization content; results are ranked by relevance.

    Queries shorter than the configured minimum return an empty list.
    """
    if scope == SearchScope.ORGANIZATION and not organization_id:
        raise ValidationException(
            "organization_id is required when scope is organization",
            field="organization_id",
        )
    parsed_filters = SearchFiltersIn.parse(filters)
    if limit is None:
        limit = get_settings().search_default_limit

    if deep:
        results = await search_svc.perform_search(
            q,
            scope=scope,
            organization_id=organization_id,
            filters=parsed_filters,
            limit=limit,
        )
        search_type = SearchType.DEEP
    else:
        results = await search_svc.legacy_search(
            q, scope=scope, organization_id=organization_id, limit=limit
        )
        search_type = SearchType.LEGACY

    return GlobalSearchResponse(
        results=[SearchResultResponse.from_result(r) for r in results],
        search_type=search_type,
    )


@router.delete("/cache", status_code=status.HTTP_204_NO_CONTENT)
async def clear_search_cache(
    search_svc: Annotated[SearchService, Depends(get_search_service)],
) -> Response:
    """Drop cached search results (e.g. after bulk imports)."""
    await search_svc.clear_cache()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
