"""Police department model."""

from dataclasses import dataclass

from psa_core.models.base import require_persisted, require_text
from psa_core.models.geo import Address


@dataclass
class PoliceDepartment:
    """Static police facility imported from OpenStreetMap (Overpass)."""

    overpass_id: str  # e.g. "way/123456789", unique
    name: str
    short_name: str
    operator: str
    ownership: str
    phone: str
    email: str
    latitude: str  # decimal string, never parsed
    longitude: str
    address: Address
    id: int | None = None

    @classmethod
    def create(
        cls,
        overpass_id: str,
        name: str,
        short_name: str,
        operator: str,
        ownership: str,
        phone: str,
        email: str,
        latitude: str,
        longitude: str,
        address: Address,
    ) -> "PoliceDepartment":
        """Validate creation input and build an unsaved police department."""
        return cls(
            overpass_id=require_text(overpass_id, "Overpass ID"),
            name=require_text(name, "Name"),
            short_name=require_text(short_name, "Short name"),
            operator=require_text(operator, "Operator"),
            ownership=require_text(ownership, "Ownership"),
            phone=require_text(phone, "Phone"),
            email=require_text(email, "Email"),
            latitude=require_text(latitude, "Latitude"),
            longitude=require_text(longitude, "Longitude"),
            address=require_persisted(address, "Address"),
        )
