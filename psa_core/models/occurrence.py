"""Occurrence model."""

from dataclasses import dataclass
from datetime import datetime

from psa_core.models.base import coerce_enum, require_persisted, require_present, require_text
from psa_core.models.enums import Intensity
from psa_core.models.geo import Address
from psa_core.models.user import User


@dataclass
class Occurrence:
    """Reported incident with a time window, activity flag and severity."""

    name: str
    description: str
    date_start: datetime
    date_end: datetime | None  # None while the incident is open
    date_update: datetime | None
    active: bool
    intensity: Intensity
    address: Address
    user: User
    id: int | None = None

    @classmethod
    def create(
        cls,
        name: str,
        description: str,
        date_start: datetime,
        date_end: datetime | None,
        date_update: datetime | None,
        active: bool,
        intensity: Intensity | str,
        address: Address,
        user: User,
    ) -> "Occurrence":
        """Validate creation input and build an unsaved occurrence."""
        return cls(
            name=require_text(name, "Name"),
            description=require_text(description, "Description"),
            date_start=require_present(date_start, "Date start"),
            date_end=date_end,
            date_update=date_update,
            active=bool(active),
            intensity=coerce_enum(Intensity, intensity, "Intensity"),
            address=require_persisted(address, "Address"),
            user=require_persisted(user, "User"),
        )
