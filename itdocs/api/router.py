"""API router aggregation. Mounted under /api by itdocs.main."""

from fastapi import APIRouter

from itdocs.api.endpoints import health, search

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(search.router, prefix="/search", tags=["search"])
