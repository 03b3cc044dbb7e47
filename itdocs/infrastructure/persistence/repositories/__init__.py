"""Tabular sources (ITableSource implementations) for federated search."""

from itdocs.infrastructure.persistence.repositories.memory_source import InMemoryTableSource
from itdocs.infrastructure.persistence.repositories.table_source import SqlTableSource

__all__ = ["InMemoryTableSource", "SqlTableSource"]
