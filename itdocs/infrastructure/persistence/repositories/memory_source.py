"""In-memory ITableSource.

Rows are plain dicts; dotted columns are resolved through a relation map
(relation name -> (foreign key column, target table)). Used for local
demos and tests, and records every RowQuery it receives in `calls`.
"""

from __future__ import annotations

from typing import Any

from itdocs.application.dtos.table_query import RowQuery
from itdocs.domain.exceptions import SourceQueryException
from itdocs.shared.utils import generate_cuid, utc_now

ORGANIZATION_TABLES = (
    "organization_sidebar_items",
    "contacts",
    "locations",
    "documents",
    "passwords",
    "configurations",
    "domains",
    "assets",
    "custom_fields",
)

DEFAULT_RELATIONS: dict[tuple[str, str], tuple[str, str]] = {
    **{(t, "organization"): ("organization_id", "organizations") for t in ORGANIZATION_TABLES},
    ("page_contents", "sidebar_item"): ("sidebar_item_id", "organization_sidebar_items"),
}


class InMemoryTableSource:
    """Dict-of-lists table store satisfying ITableSource."""

    def __init__(
        self,
        tables: dict[str, list[dict[str, Any]]] | None = None,
        relations: dict[tuple[str, str], tuple[str, str]] | None = None,
    ) -> None:
        self.tables: dict[str, list[dict[str, Any]]] = {
            "organizations": [],
            "page_contents": [],
            **{t: [] for t in ORGANIZATION_TABLES},
        }
        for name, rows in (tables or {}).items():
            self.tables[name] = list(rows)
        self.relations = relations if relations is not None else DEFAULT_RELATIONS
        self.failing_tables: set[str] = set()
        self.calls: list[RowQuery] = []

    def insert(self, table: str, **values: Any) -> dict[str, Any]:
        """Append a row (id and timestamps filled in when missing) and return it."""
        if table not in self.tables:
            raise SourceQueryException(table, "unknown table")
        now = utc_now()
        row = {"id": generate_cuid(), "created_at": now, "updated_at": now, **values}
        self.tables[table].append(row)
        return row

    def _get_row(self, table: str, row_id: Any) -> dict[str, Any] | None:
        for row in self.tables.get(table, []):
            if row.get("id") == row_id:
                return row
        return None

    def resolve(self, table: str, row: dict[str, Any], path: str) -> Any:
        """Value at a dotted path, following relations; None if a hop is missing."""
        head, _, rest = path.partition(".")
        if not rest:
            return row.get(head)
        relation = self.relations.get((table, head))
        if relation is None:
            raise SourceQueryException(table, f"unknown relation {head!r}")
        fk_column, target_table = relation
        target = self._get_row(target_table, row.get(fk_column))
        if target is None:
            return None
        return self.resolve(target_table, target, rest)

    def _matches_text(self, query: RowQuery, row: dict[str, Any]) -> bool:
        if not query.text or not query.search_fields:
            return True
        needle = query.text.lower()
        return any(
            needle in str(value).lower()
            for value in (self.resolve(query.table, row, f) for f in query.search_fields)
            if value is not None
        )

    async def fetch(self, query: RowQuery) -> list[dict[str, Any]]:
        self.calls.append(query)
        if query.table in self.failing_tables:
            raise SourceQueryException(query.table, "simulated failure")
        if query.table not in self.tables:
            raise SourceQueryException(query.table, "unknown table")

        rows = [
            row
            for row in self.tables[query.table]
            if self._matches_text(query, row)
            and all(self.resolve(query.table, row, path) == value for path, value in query.equals)
        ]
        if query.order_by:
            present = [r for r in rows if r.get(query.order_by) is not None]
            missing = [r for r in rows if r.get(query.order_by) is None]
            present.sort(key=lambda r: r[query.order_by], reverse=query.descending)
            rows = present + missing
        return [
            {column: self.resolve(query.table, row, column) for column in query.columns}
            for row in rows[: query.limit]
        ]
