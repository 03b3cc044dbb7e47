"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic (SRP). Used by main.py; no
business logic here, only wiring of infrastructure (search cache, SQL
table source, search service, telemetry, DB engine dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from itdocs.application.interfaces.repositories import ITableSource
from itdocs.application.interfaces.services import ISearchCache
from itdocs.application.use_cases.search import SearchService, build_searchers
from itdocs.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


def build_search_service(
    source: ITableSource, cache: ISearchCache, settings: Settings
) -> SearchService:
    """Wire every searcher over source into a SearchService."""
    return SearchService(
        build_searchers(
            source, page_content_scan_limit=settings.search_page_content_scan_limit
        ),
        cache,
        min_query_length=settings.search_min_query_length,
    )


async def _create_search_cache(settings: Settings) -> ISearchCache:
    if settings.search_cache_backend == "redis":
        from itdocs.infrastructure.cache.redis_cache import RedisSearchCache

        cache = RedisSearchCache(ttl_seconds=settings.search_cache_ttl_seconds)
        await cache.connect()
        return cache

    from itdocs.infrastructure.cache.memory_cache import MemorySearchCache

    return MemorySearchCache(ttl_seconds=float(settings.search_cache_ttl_seconds))


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: search cache, search service (only when DATABASE_URL is
    set). Shutdown order: cache disconnect, telemetry flush (started in
    create_app), SQL engine dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    cache = await _create_search_cache(settings)
    app.state.search_cache = cache

    if settings.database_url:
        from itdocs.infrastructure.persistence.database import get_session_factory
        from itdocs.infrastructure.persistence.repositories import SqlTableSource

        source = SqlTableSource(get_session_factory())
        app.state.search_service = build_search_service(source, cache, settings)
        logger.info(
            "Search service ready (cache=%s, ttl=%ss)",
            settings.search_cache_backend,
            settings.search_cache_ttl_seconds,
        )
    else:
        app.state.search_service = None
        logger.warning("DATABASE_URL not set; search endpoints will answer 503")

    yield

    # ---- Shutdown ----
    disconnect = getattr(app.state.search_cache, "disconnect", None)
    if disconnect is not None:
        await disconnect()
        logger.info("Search cache disconnected")

    from itdocs.shared.telemetry.telemetry import get_telemetry, set_telemetry

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)

    from itdocs.infrastructure.persistence.database import dispose_engine

    await dispose_engine()
