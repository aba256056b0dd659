"""Occurrence repository with activity and author filters."""

from __future__ import annotations

from concurrent.futures import Executor, Future
from typing import Any

from psa_core.models import Intensity, Occurrence
from psa_core.repositories.base import Repository
from psa_core.repositories.geo import AddressRepository
from psa_core.repositories.user import UserRepository
from psa_core.store.base import Row, RowStore


class OccurrenceRepository(Repository[Occurrence]):
    """Occurrences are filtered by activity flag or by authoring user."""

    table = "occurrences"
    entity_name = "Occurrence"

    def __init__(
        self,
        store: RowStore,
        executor: Executor,
        addresses: AddressRepository,
        users: UserRepository,
    ) -> None:
        super().__init__(store, executor)
        self._addresses = addresses
        self._users = users

    def get_all_filtered(
        self,
        *,
        active: bool | None = None,
        user_id: int | None = None,
    ) -> Future[list[Occurrence]]:
        """Return occurrences matching exactly one filter dimension.

        Parameters
        ----------
        active : bool, optional
            Keep occurrences whose ``active`` flag equals this value.
        user_id : int, optional
            Keep occurrences authored by this user id. An unknown id
            yields an empty list.

        Raises
        ------
        ValueError
            If both or neither filter is given.
        """
        if (active is None) == (user_id is None):
            raise ValueError("Exactly one of 'active' or 'user_id' must be given")
        where = {"active": bool(active)} if active is not None else {"user_id": user_id}
        return self._submit(self._load_all, where)

    def get_by_active(self, active: bool) -> Future[list[Occurrence]]:
        return self.get_all_filtered(active=active)

    def get_by_user_id(self, user_id: int) -> Future[list[Occurrence]]:
        return self.get_all_filtered(user_id=user_id)

    def _parents(self) -> dict[str, Repository[Any]]:
        return {"address_id": self._addresses, "user_id": self._users}

    def _to_row(self, entity: Occurrence) -> Row:
        return {
            "name": entity.name,
            "description": entity.description,
            "date_start": entity.date_start,
            "date_end": entity.date_end,
            "date_update": entity.date_update,
            "active": entity.active,
            "intensity": Intensity(entity.intensity).value,
            "address_id": self._parent_id(entity.address, "Address"),
            "user_id": self._parent_id(entity.user, "User"),
        }

    def _hydrate(self, row: Row) -> Occurrence:
        return Occurrence(
            name=row["name"],
            description=row["description"],
            date_start=row["date_start"],
            date_end=row["date_end"],
            date_update=row["date_update"],
            active=row["active"],
            intensity=Intensity(row["intensity"]),
            address=self._resolve_parent(self._addresses, row["address_id"]),
            user=self._resolve_parent(self._users, row["user_id"]),
            id=row["id"],
        )
