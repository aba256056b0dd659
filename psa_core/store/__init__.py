"""Row stores backing the repositories."""

from psa_core.store.base import Row, RowStore
from psa_core.store.memory import InMemoryRowStore
from psa_core.store.schema import TABLE_ORDER, TABLES, TableSpec

__all__ = ["InMemoryRowStore", "Row", "RowStore", "TABLES", "TABLE_ORDER", "TableSpec"]
