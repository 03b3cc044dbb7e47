"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from itdocs.application.dtos.table_query import RowQuery


class ITableSource(Protocol):
    """Generic tabular read port used by every searcher.

    Supports select-with-projection, OR-combined case-insensitive contains
    across several fields, equality filters (tenant column, flags) and a
    row limit. Relational databases, document stores or in-memory tables
    can all satisfy it.
    """

    async def fetch(self, query: RowQuery) -> list[dict[str, Any]]:
        """Return matching rows as dicts keyed by query.columns (dotted paths verbatim).

        Raises:
            SourceQueryException: If the backend fails or the table is unknown.
        """
