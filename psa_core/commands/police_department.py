"""Create command for police departments."""

from __future__ import annotations

from concurrent.futures import Future
from dataclasses import dataclass

from psa_core.commands.base import CommandHandler, log_created, resolve_parent
from psa_core.futures import then
from psa_core.models import Address, PoliceDepartment
from psa_core.repositories import AddressRepository, PoliceDepartmentRepository


@dataclass(frozen=True)
class CreatePoliceDepartmentCommand:
    overpass_id: str
    name: str
    short_name: str
    operator: str
    ownership: str
    phone: str
    email: str
    latitude: str
    longitude: str
    address_id: int


class CreatePoliceDepartmentCommandHandler(
    CommandHandler[CreatePoliceDepartmentCommand, PoliceDepartment]
):
    def __init__(
        self,
        police_departments: PoliceDepartmentRepository,
        addresses: AddressRepository,
    ) -> None:
        self._police_departments = police_departments
        self._addresses = addresses

    def handle(self, command: CreatePoliceDepartmentCommand) -> Future[PoliceDepartment]:
        def _add(address: Address) -> Future[PoliceDepartment]:
            department = PoliceDepartment.create(
                overpass_id=command.overpass_id,
                name=command.name,
                short_name=command.short_name,
                operator=command.operator,
                ownership=command.ownership,
                phone=command.phone,
                email=command.email,
                latitude=command.latitude,
                longitude=command.longitude,
                address=address,
            )
            return self._police_departments.add(department)

        added = then(resolve_parent(self._addresses, command.address_id), _add)
        return log_created(added, "PoliceDepartment")
