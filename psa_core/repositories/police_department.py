"""Police department repository."""

from __future__ import annotations

from concurrent.futures import Executor, Future
from typing import Any

from psa_core.models import PoliceDepartment
from psa_core.repositories.base import KeyedRepository, Repository
from psa_core.repositories.geo import AddressRepository
from psa_core.store.base import Row, RowStore

_SCALAR_FIELDS = (
    "overpass_id",
    "name",
    "short_name",
    "operator",
    "ownership",
    "phone",
    "email",
    "latitude",
    "longitude",
)


class PoliceDepartmentRepository(KeyedRepository[PoliceDepartment]):
    table = "police_departments"
    entity_name = "PoliceDepartment"
    secondary_key = "overpass_id"

    def __init__(self, store: RowStore, executor: Executor, addresses: AddressRepository) -> None:
        super().__init__(store, executor)
        self._addresses = addresses

    def get_by_overpass_id(self, overpass_id: str) -> Future[PoliceDepartment | None]:
        return self.get_by_secondary_key(overpass_id)

    def _parents(self) -> dict[str, Repository[Any]]:
        return {"address_id": self._addresses}

    def _to_row(self, entity: PoliceDepartment) -> Row:
        row = {name: getattr(entity, name) for name in _SCALAR_FIELDS}
        row["address_id"] = self._parent_id(entity.address, "Address")
        return row

    def _hydrate(self, row: Row) -> PoliceDepartment:
        return PoliceDepartment(
            **{name: row[name] for name in _SCALAR_FIELDS},
            address=self._resolve_parent(self._addresses, row["address_id"]),
            id=row["id"],
        )
