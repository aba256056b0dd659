"""Asynchronous repository contract shared by every entity."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from concurrent.futures import Executor, Future
from dataclasses import replace
from typing import Any, Callable, ClassVar, Generic, TypeVar

from psa_core.exceptions import (
    EntityNotFoundError,
    InvalidEntityError,
    ParentNotFoundError,
    StorageError,
)
from psa_core.store.base import Row, RowStore

logger = logging.getLogger(__name__)

E = TypeVar("E")


class Repository(ABC, Generic[E]):
    """CRUD over one entity table, executed on a worker pool.

    Every public method returns a :class:`~concurrent.futures.Future`
    immediately; the store call runs on ``executor``. Children are loaded
    together with their parents, which are read through the parent
    repositories inside the same worker call. Loaded parents are snapshots:
    later writes to a parent do not reach objects already handed out.

    Parameters
    ----------
    store : RowStore
        Row storage for all tables.
    executor : Executor
        Thread pool that runs the store calls.
    """

    table: ClassVar[str]
    entity_name: ClassVar[str]

    def __init__(self, store: RowStore, executor: Executor) -> None:
        self._store = store
        self._executor = executor

    # --- Public asynchronous API ---

    def get_by_id(self, entity_id: int) -> Future[E | None]:
        """Look up an entity by id; resolves to ``None`` when absent."""
        return self._submit(self._load, entity_id)

    def get_all(self) -> Future[list[E]]:
        """Return every stored entity, in no particular order."""
        return self._submit(self._load_all)

    def add(self, entity: E) -> Future[E]:
        """Persist a new entity and resolve to a copy carrying its id."""
        return self._submit(self._add, entity)

    def update(self, entity: E) -> Future[E]:
        """Replace all mutable fields of the stored entity with ``entity``'s."""
        return self._submit(self._update, entity)

    def delete(self, entity_id: int) -> Future[E]:
        """Remove an entity and resolve to its pre-deletion snapshot."""
        return self._submit(self._delete, entity_id)

    # --- Mapping, implemented per entity ---

    @abstractmethod
    def _to_row(self, entity: E) -> Row:
        """Flatten ``entity`` into table columns (parents become ids)."""

    @abstractmethod
    def _hydrate(self, row: Row) -> E:
        """Build an entity from a stored row, loading its parents."""

    def _parents(self) -> dict[str, Repository[Any]]:
        """Map each foreign key column to the repository owning the parent."""
        return {}

    # --- Synchronous bodies, run on a worker ---

    def _submit(self, fn: Callable[..., Any], *args: Any) -> Future[Any]:
        return self._executor.submit(fn, *args)

    def _load(self, entity_id: int) -> E | None:
        row = self._store.get(self.table, entity_id)
        return self._hydrate(row) if row is not None else None

    def _load_all(self, where: dict[str, Any] | None = None) -> list[E]:
        return [self._hydrate(row) for row in self._store.scan(self.table, where)]

    def _add(self, entity: E) -> E:
        if getattr(entity, "id", None) is not None:
            raise InvalidEntityError(
                f"{self.entity_name} already has id {entity.id}; ids are assigned on insert"
            )
        row_id = self._store.insert(self.table, self._to_row(entity))
        logger.debug("Inserted %s %d", self.entity_name, row_id)
        return replace(entity, id=row_id)

    def _update(self, entity: E) -> E:
        entity_id = getattr(entity, "id", None)
        if entity_id is None:
            raise InvalidEntityError(f"{self.entity_name} has no id to update")
        current = self._store.get(self.table, entity_id)
        if current is None:
            raise EntityNotFoundError(f"{self.entity_name} not found with id: {entity_id}")

        row = self._to_row(entity)
        for column, parents in self._parents().items():
            if row[column] != current[column] and parents._load(row[column]) is None:
                raise ParentNotFoundError(
                    f"{parents.entity_name} with ID {row[column]} not found"
                )

        if not self._store.update(self.table, entity_id, row):
            raise EntityNotFoundError(f"{self.entity_name} not found with id: {entity_id}")
        logger.debug("Updated %s %d", self.entity_name, entity_id)
        return self._hydrate({**row, "id": entity_id})

    def _delete(self, entity_id: int) -> E:
        snapshot = self._load(entity_id)
        if snapshot is None:
            raise EntityNotFoundError(f"{self.entity_name} not found with id: {entity_id}")
        # A concurrent delete may win between the lookup and this call
        if not self._store.delete(self.table, entity_id):
            raise EntityNotFoundError(f"{self.entity_name} not found with id: {entity_id}")
        logger.debug("Deleted %s %d", self.entity_name, entity_id)
        return snapshot

    # --- Helpers for subclasses ---

    def _parent_id(self, parent: Any, label: str) -> int:
        parent_id = getattr(parent, "id", None)
        if parent_id is None:
            raise InvalidEntityError(f"{self.entity_name} references an unsaved {label}")
        return parent_id

    def _resolve_parent(self, repository: Repository[Any], parent_id: int) -> Any:
        parent = repository._load(parent_id)
        if parent is None:
            raise StorageError(
                f"{self.entity_name} row references missing {repository.entity_name} {parent_id}"
            )
        return parent


class KeyedRepository(Repository[E]):
    """Repository for entities with a unique secondary lookup key."""

    secondary_key: ClassVar[str]

    def get_by_secondary_key(self, key: Any) -> Future[E | None]:
        """Look up an entity by its secondary key; resolves to ``None`` when absent."""
        return self._submit(self._load_by_key, key)

    def _load_by_key(self, key: Any) -> E | None:
        row = self._store.get_by(self.table, self.secondary_key, key)
        return self._hydrate(row) if row is not None else None
