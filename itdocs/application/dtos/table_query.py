"""DTO describing one read against a tabular source (projection, filters, limit)."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RowQuery:
    """Select-with-projection against one table.

    columns and equals keys may be dotted paths that follow many-to-one
    relations (e.g. "organization.name", "sidebar_item.organization_id").
    search_fields are matched case-insensitively with "contains" semantics
    and combined with OR; they are skipped when text is empty.
    """

    table: str
    columns: tuple[str, ...]
    search_fields: tuple[str, ...] = ()
    text: str = ""
    equals: tuple[tuple[str, Any], ...] = ()
    order_by: str | None = None
    descending: bool = True
    limit: int = 10

    @property
    def relations(self) -> list[tuple[str, ...]]:
        """Relation chains needed to resolve dotted columns, deduplicated, in column order."""
        chains: list[tuple[str, ...]] = []
        for column in self.columns:
            parts = tuple(column.split("."))[:-1]
            if parts and parts not in chains:
                chains.append(parts)
        return chains
