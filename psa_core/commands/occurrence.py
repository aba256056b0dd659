"""Create command for occurrences."""

from __future__ import annotations

from concurrent.futures import Future
from dataclasses import dataclass
from datetime import datetime

from psa_core.commands.base import CommandHandler, log_created, resolve_parent
from psa_core.futures import then
from psa_core.models import Address, Intensity, Occurrence, User
from psa_core.repositories import AddressRepository, OccurrenceRepository, UserRepository


@dataclass(frozen=True)
class CreateOccurrenceCommand:
    name: str
    description: str
    date_start: datetime
    date_end: datetime | None
    date_update: datetime | None
    active: bool
    intensity: Intensity | str
    address_id: int
    user_id: int


class CreateOccurrenceCommandHandler(CommandHandler[CreateOccurrenceCommand, Occurrence]):
    """Resolves the address, then the user, then inserts the occurrence.

    The lookups run one after the other; if the address is missing the user
    is never looked up.
    """

    def __init__(
        self,
        occurrences: OccurrenceRepository,
        addresses: AddressRepository,
        users: UserRepository,
    ) -> None:
        self._occurrences = occurrences
        self._addresses = addresses
        self._users = users

    def handle(self, command: CreateOccurrenceCommand) -> Future[Occurrence]:
        def _with_user(address: Address) -> Future[tuple[Address, User]]:
            return then(
                resolve_parent(self._users, command.user_id),
                lambda user: (address, user),
            )

        def _add(parents: tuple[Address, User]) -> Future[Occurrence]:
            address, user = parents
            occurrence = Occurrence.create(
                name=command.name,
                description=command.description,
                date_start=command.date_start,
                date_end=command.date_end,
                date_update=command.date_update,
                active=command.active,
                intensity=command.intensity,
                address=address,
                user=user,
            )
            return self._occurrences.add(occurrence)

        parents = then(resolve_parent(self._addresses, command.address_id), _with_user)
        return log_created(then(parents, _add), "Occurrence")
