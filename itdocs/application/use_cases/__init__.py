"""Application use cases: one entry point per workflow."""

from itdocs.application.use_cases.search import SearchService

__all__ = ["SearchService"]
