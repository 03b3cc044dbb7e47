"""FastAPI dependencies (composition root).

The search service is built once in the lifespan and stored on app.state;
endpoints receive it through Depends so tests can override it.
"""

from fastapi import Request

from itdocs.application.use_cases.search import SearchService
from itdocs.domain.exceptions import SqlNotConfiguredException


def get_search_service(request: Request) -> SearchService:
    """Federated search service from app.state.

    Raises:
        SqlNotConfiguredException: When no database is configured (503).
    """
    service = getattr(request.app.state, "search_service", None)
    if service is None:
        raise SqlNotConfiguredException()
    return service
