"""Application layer: DTOs, interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (table sources, caches).
"""

from itdocs.application.interfaces import ISearchCache, ISearcher, ITableSource
from itdocs.application.use_cases.search import SearchService

__all__ = [
    "ISearchCache",
    "ISearcher",
    "ITableSource",
    "SearchService",
]
