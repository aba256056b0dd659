"""PostgreSQL row store (psycopg 3)."""

import logging
import threading
from typing import Any

import psycopg
from psycopg import sql
from psycopg.errors import UniqueViolation
from psycopg.rows import dict_row

from psa_core.exceptions import ConstraintViolationError, StorageError
from psa_core.store.base import Row, RowStore
from psa_core.store.schema import TABLE_ORDER, TABLES, TableSpec

logger = logging.getLogger(__name__)


class PostgresRowStore(RowStore):
    """Row store backed by PostgreSQL.

    Each worker thread gets its own connection, opened lazily on first use,
    so concurrent repository calls never share a transaction. Every statement
    commits on success and rolls back on failure. Unique violations are
    reported as :class:`ConstraintViolationError`; any other database error
    propagates unchanged.

    Parameters
    ----------
    connection_string : str
        libpq connection string or URL.
    """

    def __init__(self, connection_string: str) -> None:
        self.connection_string = connection_string
        self._local = threading.local()
        self._connections: list[psycopg.Connection] = []
        self._connections_lock = threading.Lock()

    @property
    def conn(self) -> psycopg.Connection:
        """Connection owned by the calling thread."""
        conn = getattr(self._local, "conn", None)
        if conn is None or conn.closed:
            conn = psycopg.connect(self.connection_string, row_factory=dict_row)
            self._local.conn = conn
            with self._connections_lock:
                self._connections.append(conn)
            logger.debug("Opened PostgreSQL connection for %s", threading.current_thread().name)
        return conn

    def create_tables(self) -> None:
        """Create all tables in FK order."""
        statements = [self._create_table_sql(TABLES[name]) for name in TABLE_ORDER]
        ddl = sql.SQL(";\n").join(statements)
        self._execute(ddl)
        logger.info("PostgreSQL tables ready: %s", ", ".join(TABLE_ORDER))

    def insert(self, table: str, row: Row) -> int:
        spec = self._spec(table)
        columns = spec.column_names
        query = sql.SQL("INSERT INTO {table} ({columns}) VALUES ({values}) RETURNING id").format(
            table=sql.Identifier(table),
            columns=sql.SQL(", ").join(map(sql.Identifier, columns)),
            values=sql.SQL(", ").join(sql.Placeholder() * len(columns)),
        )
        result = self._execute(query, [row[column] for column in columns], fetch="one")
        return result["id"]

    def get(self, table: str, row_id: int) -> Row | None:
        self._spec(table)
        query = sql.SQL("SELECT * FROM {table} WHERE id = %s").format(table=sql.Identifier(table))
        return self._execute(query, [row_id], fetch="one")

    def get_by(self, table: str, column: str, value: Any) -> Row | None:
        spec = self._spec(table)
        if column not in spec.unique:
            raise StorageError(f"{table}.{column} is not a unique column")
        query = sql.SQL("SELECT * FROM {table} WHERE {column} = %s").format(
            table=sql.Identifier(table),
            column=sql.Identifier(column),
        )
        return self._execute(query, [value], fetch="one")

    def scan(self, table: str, where: dict[str, Any] | None = None) -> list[Row]:
        spec = self._spec(table)
        query = sql.SQL("SELECT * FROM {table}").format(table=sql.Identifier(table))
        params: list[Any] = []
        if where:
            unknown = [column for column in where if column not in spec.columns and column != "id"]
            if unknown:
                raise StorageError(f"Unknown {table} columns: {', '.join(unknown)}")
            conditions = [
                sql.SQL("{} = %s").format(sql.Identifier(column)) for column in where
            ]
            query = sql.SQL("{query} WHERE {conditions}").format(
                query=query,
                conditions=sql.SQL(" AND ").join(conditions),
            )
            params = list(where.values())
        return self._execute(query, params, fetch="all")

    def update(self, table: str, row_id: int, row: Row) -> bool:
        spec = self._spec(table)
        columns = spec.column_names
        assignments = sql.SQL(", ").join(
            sql.SQL("{} = %s").format(sql.Identifier(column)) for column in columns
        )
        query = sql.SQL("UPDATE {table} SET {assignments} WHERE id = %s RETURNING id").format(
            table=sql.Identifier(table),
            assignments=assignments,
        )
        result = self._execute(query, [row[column] for column in columns] + [row_id], fetch="one")
        return result is not None

    def delete(self, table: str, row_id: int) -> bool:
        self._spec(table)
        query = sql.SQL("DELETE FROM {table} WHERE id = %s RETURNING id").format(
            table=sql.Identifier(table)
        )
        return self._execute(query, [row_id], fetch="one") is not None

    def count(self, table: str) -> int:
        self._spec(table)
        query = sql.SQL("SELECT COUNT(*) AS n FROM {table}").format(table=sql.Identifier(table))
        return self._execute(query, fetch="one")["n"]

    def truncate_tables(self) -> None:
        """Truncate all tables (children first) and reset id sequences."""
        tables = sql.SQL(", ").join(map(sql.Identifier, reversed(TABLE_ORDER)))
        self._execute(sql.SQL("TRUNCATE {tables} RESTART IDENTITY CASCADE").format(tables=tables))
        logger.info("Truncated all tables")

    def close(self) -> None:
        """Close every connection opened by this store."""
        with self._connections_lock:
            connections, self._connections = self._connections, []
        for conn in connections:
            if not conn.closed:
                conn.close()
        logger.debug("Closed %d PostgreSQL connection(s)", len(connections))

    # --- Internal helpers ---

    @staticmethod
    def _spec(table: str) -> TableSpec:
        spec = TABLES.get(table)
        if spec is None:
            raise StorageError(f"Unknown table {table!r}")
        return spec

    @staticmethod
    def _create_table_sql(spec: TableSpec) -> sql.Composed:
        definitions = [sql.SQL("id SERIAL PRIMARY KEY")]
        for column, column_type in spec.columns.items():
            definition = sql.SQL("{} {}").format(sql.Identifier(column), sql.SQL(column_type))
            if column in spec.unique:
                definition = sql.SQL("{} UNIQUE").format(definition)
            parent = spec.foreign_keys.get(column)
            if parent is not None:
                definition = sql.SQL("{} REFERENCES {} (id)").format(
                    definition, sql.Identifier(parent)
                )
            definitions.append(definition)
        return sql.SQL("CREATE TABLE IF NOT EXISTS {table} (\n    {definitions}\n)").format(
            table=sql.Identifier(spec.name),
            definitions=sql.SQL(",\n    ").join(definitions),
        )

    def _execute(
        self,
        query: sql.Composable,
        params: list[Any] | None = None,
        fetch: str | None = None,
    ) -> Any:
        conn = self.conn
        try:
            with conn.cursor() as cur:
                cur.execute(query, params)
                if fetch == "one":
                    result = cur.fetchone()
                elif fetch == "all":
                    result = cur.fetchall()
                else:
                    result = None
            conn.commit()
        except UniqueViolation as e:
            conn.rollback()
            raise ConstraintViolationError(str(e).strip()) from e
        except Exception:
            conn.rollback()
            raise
        return result
