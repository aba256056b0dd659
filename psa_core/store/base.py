"""Row store boundary consumed by the repositories."""

from abc import ABC, abstractmethod
from typing import Any

Row = dict[str, Any]


class RowStore(ABC):
    """Durable rows per entity table.

    Rows are flat dicts of the columns declared in
    :mod:`psa_core.store.schema`; ``id`` is generated by the store on insert
    and returned on every read. Implementations must be safe to call from
    several worker threads and are responsible for rejecting duplicate
    unique keys with :class:`~psa_core.exceptions.ConstraintViolationError`.
    """

    @abstractmethod
    def create_tables(self) -> None:
        """Create every table if it does not exist yet."""

    @abstractmethod
    def insert(self, table: str, row: Row) -> int:
        """Insert ``row`` and return its generated id."""

    @abstractmethod
    def get(self, table: str, row_id: int) -> Row | None:
        """Return the row with primary key ``row_id``, or ``None``."""

    @abstractmethod
    def get_by(self, table: str, column: str, value: Any) -> Row | None:
        """Return the row whose unique ``column`` equals ``value``, or ``None``."""

    @abstractmethod
    def scan(self, table: str, where: dict[str, Any] | None = None) -> list[Row]:
        """Return all rows, optionally only those matching every ``where`` column."""

    @abstractmethod
    def update(self, table: str, row_id: int, row: Row) -> bool:
        """Replace the columns of ``row_id``; return ``False`` if it does not exist."""

    @abstractmethod
    def delete(self, table: str, row_id: int) -> bool:
        """Delete ``row_id``; return ``False`` if it does not exist."""

    @abstractmethod
    def count(self, table: str) -> int:
        """Return the number of rows in ``table``."""

    def close(self) -> None:
        """Release resources held by the store."""

    def summary(self) -> dict[str, int]:
        """Return row counts of all tables."""
        from psa_core.store.schema import TABLE_ORDER

        return {table: self.count(table) for table in TABLE_ORDER}
