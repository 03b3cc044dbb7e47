"""Application interfaces (ports). Implementations live in infrastructure."""

from itdocs.application.interfaces.repositories import ITableSource
from itdocs.application.interfaces.services import ISearchCache, ISearcher

__all__ = [
    "ISearchCache",
    "ISearcher",
    "ITableSource",
]
