"""Shared plumbing for create-command handlers."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from concurrent.futures import Future
from typing import Any, Generic, TypeVar

from psa_core.exceptions import ParentNotFoundError
from psa_core.futures import then
from psa_core.repositories.base import Repository

logger = logging.getLogger(__name__)

C = TypeVar("C")
E = TypeVar("E")


class CommandHandler(ABC, Generic[C, E]):
    """Turns a create command into a persisted entity.

    ``handle`` returns immediately. Parent lookups, validation and the final
    insert are chained on the returned future, so any failure (a missing
    parent, invalid input, a duplicate key) surfaces as a failed future and
    nothing is persisted.
    """

    @abstractmethod
    def handle(self, command: C) -> Future[E]:
        """Start handling ``command``."""


def resolve_parent(repository: Repository[Any], parent_id: int) -> Future[Any]:
    """Look up ``parent_id`` and fail with :class:`ParentNotFoundError` when absent."""

    def _require(parent: Any) -> Any:
        if parent is None:
            logger.warning("%s with ID %s not found", repository.entity_name, parent_id)
            raise ParentNotFoundError(f"{repository.entity_name} with ID {parent_id} not found")
        return parent

    return then(repository.get_by_id(parent_id), _require)


def log_created(future: Future[E], entity_name: str) -> Future[E]:
    """Log the outcome of an insert chain and pass its result through."""

    def _done(done: Future[E]) -> None:
        try:
            entity = done.result()
        except Exception as exc:
            logger.warning("%s creation rejected: %s", entity_name, exc)
        else:
            logger.info("Created %s %s", entity_name, getattr(entity, "id", None))

    future.add_done_callback(_done)
    return future
