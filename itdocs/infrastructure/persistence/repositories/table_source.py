"""SQLAlchemy implementation of ITableSource.

Translates a RowQuery into one SELECT: dotted columns become joined eager
loads along many-to-one relations, search fields become OR-combined
ILIKE '%text%' conditions and dotted equality filters become EXISTS
(relationship.has) clauses. Each fetch opens its own session, so the
searchers of one federated search can run concurrently.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import ColumnElement, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import joinedload

from itdocs.application.dtos.table_query import RowQuery
from itdocs.domain.exceptions import SourceQueryException
from itdocs.infrastructure.persistence.database import Base
from itdocs.infrastructure.persistence.models import MODELS_BY_TABLE

logger = logging.getLogger(__name__)

LIKE_ESCAPE = "\\"


def contains_pattern(text: str) -> str:
    """ILIKE pattern matching text anywhere, with LIKE wildcards escaped."""
    escaped = (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )
    return f"%{escaped}%"


def _attribute(model: type[Base], name: str) -> Any:
    attr = getattr(model, name, None)
    if attr is None or not hasattr(attr, "property"):
        raise SourceQueryException(model.__tablename__, f"unknown column {name!r}")
    return attr


def _related_model(attr: Any) -> type[Base]:
    return attr.property.mapper.class_


def _equality(model: type[Base], path: str, value: Any) -> ColumnElement[bool]:
    """column == value, following dotted relations with relationship.has()."""
    head, _, rest = path.partition(".")
    attr = _attribute(model, head)
    if not rest:
        return attr == value
    return attr.has(_equality(_related_model(attr), rest, value))


def _resolve(row: Any, path: str) -> Any:
    """Walk a dotted path on a loaded ORM object; None if any hop is missing."""
    value = row
    for part in path.split("."):
        if value is None:
            return None
        value = getattr(value, part)
    return value


class SqlTableSource:
    """ITableSource backed by the async SQLAlchemy session factory."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        models: dict[str, type[Base]] | None = None,
    ) -> None:
        self.session_factory = session_factory
        self.models = models if models is not None else MODELS_BY_TABLE

    def build_statement(self, query: RowQuery) -> Any:
        """Return the SELECT for query (exposed for tests)."""
        model = self.models.get(query.table)
        if model is None:
            raise SourceQueryException(query.table, "unknown table")

        stmt = select(model)
        for chain in query.relations:
            current = model
            option = None
            for name in chain:
                attr = _attribute(current, name)
                option = joinedload(attr) if option is None else option.joinedload(attr)
                current = _related_model(attr)
            stmt = stmt.options(option)

        if query.text and query.search_fields:
            pattern = contains_pattern(query.text)
            stmt = stmt.where(
                or_(
                    *(
                        _attribute(model, f).ilike(pattern, escape=LIKE_ESCAPE)
                        for f in query.search_fields
                    )
                )
            )
        for path, value in query.equals:
            stmt = stmt.where(_equality(model, path, value))
        if query.order_by:
            column = _attribute(model, query.order_by)
            stmt = stmt.order_by(column.desc() if query.descending else column.asc())
        return stmt.limit(query.limit)

    async def fetch(self, query: RowQuery) -> list[dict[str, Any]]:
        stmt = self.build_statement(query)
        try:
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                rows = result.scalars().unique().all()
                return [
                    {column: _resolve(row, column) for column in query.columns}
                    for row in rows
                ]
        except SQLAlchemyError as e:
            logger.warning("Query against %s failed: %s", query.table, e)
            raise SourceQueryException(query.table, str(e)) from e
