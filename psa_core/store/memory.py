"""In-memory row store with unique indexes and foreign key checks."""

import itertools
import threading
from typing import Any

from psa_core.exceptions import ConstraintViolationError, StorageError
from psa_core.store.base import Row, RowStore
from psa_core.store.schema import TABLES, TableSpec


class InMemoryRowStore(RowStore):
    """Thread-safe dict-backed store.

    Mirrors the relational schema: ids come from a per-table counter, unique
    columns are indexed, and foreign keys are enforced with RESTRICT
    semantics (a referenced row cannot be deleted).
    """

    def __init__(self, tables: dict[str, TableSpec] | None = None) -> None:
        self._specs = tables or TABLES
        self._lock = threading.Lock()
        self._rows: dict[str, dict[int, Row]] = {}
        self._ids: dict[str, itertools.count] = {}
        # table -> column -> value -> row id
        self._unique: dict[str, dict[str, dict[Any, int]]] = {}
        self.create_tables()

    def create_tables(self) -> None:
        with self._lock:
            for name, spec in self._specs.items():
                if name in self._rows:
                    continue
                self._rows[name] = {}
                self._ids[name] = itertools.count(1)
                self._unique[name] = {column: {} for column in spec.unique}

    def insert(self, table: str, row: Row) -> int:
        spec = self._spec(table)
        values = self._project(spec, row)
        with self._lock:
            self._check_unique(spec, values)
            self._check_foreign_keys(spec, values)
            row_id = next(self._ids[table])
            self._rows[table][row_id] = values
            for column in spec.unique:
                self._unique[table][column][values[column]] = row_id
        return row_id

    def get(self, table: str, row_id: int) -> Row | None:
        self._spec(table)
        with self._lock:
            values = self._rows[table].get(row_id)
            return self._with_id(row_id, values) if values is not None else None

    def get_by(self, table: str, column: str, value: Any) -> Row | None:
        spec = self._spec(table)
        if column not in spec.unique:
            raise StorageError(f"{table}.{column} is not a unique column")
        with self._lock:
            row_id = self._unique[table][column].get(value)
            if row_id is None:
                return None
            return self._with_id(row_id, self._rows[table][row_id])

    def scan(self, table: str, where: dict[str, Any] | None = None) -> list[Row]:
        self._spec(table)
        where = where or {}
        with self._lock:
            return [
                self._with_id(row_id, values)
                for row_id, values in self._rows[table].items()
                if all(values.get(column) == expected for column, expected in where.items())
            ]

    def update(self, table: str, row_id: int, row: Row) -> bool:
        spec = self._spec(table)
        values = self._project(spec, row)
        with self._lock:
            current = self._rows[table].get(row_id)
            if current is None:
                return False
            self._check_unique(spec, values, exclude_id=row_id)
            self._check_foreign_keys(spec, values)
            for column in spec.unique:
                index = self._unique[table][column]
                index.pop(current[column], None)
                index[values[column]] = row_id
            self._rows[table][row_id] = values
        return True

    def delete(self, table: str, row_id: int) -> bool:
        self._spec(table)
        with self._lock:
            current = self._rows[table].get(row_id)
            if current is None:
                return False
            self._check_not_referenced(table, row_id)
            del self._rows[table][row_id]
            for column, index in self._unique[table].items():
                index.pop(current[column], None)
        return True

    def count(self, table: str) -> int:
        self._spec(table)
        with self._lock:
            return len(self._rows[table])

    # --- Internal helpers (callers hold the lock where noted) ---

    def _spec(self, table: str) -> TableSpec:
        spec = self._specs.get(table)
        if spec is None:
            raise StorageError(f"Unknown table {table!r}")
        return spec

    @staticmethod
    def _project(spec: TableSpec, row: Row) -> Row:
        missing = [column for column in spec.column_names if column not in row]
        if missing:
            raise StorageError(f"{spec.name} row is missing columns: {', '.join(missing)}")
        return {column: row[column] for column in spec.column_names}

    @staticmethod
    def _with_id(row_id: int, values: Row) -> Row:
        return {"id": row_id, **values}

    def _check_unique(self, spec: TableSpec, values: Row, exclude_id: int | None = None) -> None:
        # lock held
        for column in spec.unique:
            owner = self._unique[spec.name][column].get(values[column])
            if owner is not None and owner != exclude_id:
                raise ConstraintViolationError(
                    f"{spec.name}.{column} {values[column]!r} already exists"
                )

    def _check_foreign_keys(self, spec: TableSpec, values: Row) -> None:
        # lock held
        for column, parent in spec.foreign_keys.items():
            if values[column] not in self._rows[parent]:
                raise StorageError(
                    f"{spec.name}.{column} references missing {parent} row {values[column]!r}"
                )

    def _check_not_referenced(self, table: str, row_id: int) -> None:
        # lock held
        for child in self._specs.values():
            for column, parent in child.foreign_keys.items():
                if parent != table:
                    continue
                if any(values[column] == row_id for values in self._rows[child.name].values()):
                    raise StorageError(
                        f"{table} row {row_id} is still referenced by {child.name}.{column}"
                    )
