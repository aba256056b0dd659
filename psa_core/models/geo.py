"""Geographic hierarchy: Country -> State -> City -> Address."""

from dataclasses import dataclass

from psa_core.models.base import coerce_enum, require_persisted, require_text
from psa_core.models.enums import Region


@dataclass
class Country:
    """Root of the geographic hierarchy."""

    name: str
    short_name: str
    iso_code: str  # ISO 3166-1 alpha-3, unique
    id: int | None = None

    @classmethod
    def create(cls, name: str, short_name: str, iso_code: str) -> "Country":
        """Validate creation input and build an unsaved country."""
        return cls(
            name=require_text(name, "Name"),
            short_name=require_text(short_name, "Short name"),
            iso_code=require_text(iso_code, "ISO code"),
        )


@dataclass
class State:
    """Federative unit belonging to a country."""

    name: str
    short_name: str
    region: Region
    ibge_code: str  # unique
    country: Country
    id: int | None = None

    @classmethod
    def create(
        cls,
        name: str,
        short_name: str,
        region: Region | str,
        ibge_code: str,
        country: Country,
    ) -> "State":
        """Validate creation input and build an unsaved state."""
        return cls(
            name=require_text(name, "Name"),
            short_name=require_text(short_name, "Short name"),
            region=coerce_enum(Region, region, "Region"),
            ibge_code=require_text(ibge_code, "IBGE code"),
            country=require_persisted(country, "Country"),
        )


@dataclass
class City:
    """Municipality belonging to a state."""

    name: str
    short_name: str
    ibge_code: str  # unique
    state: State
    id: int | None = None

    @classmethod
    def create(cls, name: str, short_name: str, ibge_code: str, state: State) -> "City":
        """Validate creation input and build an unsaved city."""
        return cls(
            name=require_text(name, "Name"),
            short_name=require_text(short_name, "Short name"),
            ibge_code=require_text(ibge_code, "IBGE code"),
            state=require_persisted(state, "State"),
        )


@dataclass
class Address:
    """Street address inside a city.

    Attachment point for occurrences and police departments. Addresses have
    no secondary key and are looked up by id only.
    """

    street: str
    number: str
    complement: str
    neighborhood: str
    city: City
    id: int | None = None

    @classmethod
    def create(
        cls,
        street: str,
        number: str,
        complement: str,
        neighborhood: str,
        city: City,
    ) -> "Address":
        """Validate creation input and build an unsaved address."""
        return cls(
            street=require_text(street, "Street"),
            number=require_text(number, "Number"),
            complement=require_text(complement, "Complement"),
            neighborhood=require_text(neighborhood, "Neighborhood"),
            city=require_persisted(city, "City"),
        )
