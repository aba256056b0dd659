"""Repositories for the geographic hierarchy."""

from __future__ import annotations

from concurrent.futures import Executor, Future
from typing import Any

from psa_core.models import Address, City, Country, Region, State
from psa_core.repositories.base import KeyedRepository, Repository
from psa_core.store.base import Row, RowStore


class CountryRepository(KeyedRepository[Country]):
    table = "countries"
    entity_name = "Country"
    secondary_key = "iso_code"

    def get_by_iso_code(self, iso_code: str) -> Future[Country | None]:
        return self.get_by_secondary_key(iso_code)

    def _to_row(self, entity: Country) -> Row:
        return {
            "name": entity.name,
            "short_name": entity.short_name,
            "iso_code": entity.iso_code,
        }

    def _hydrate(self, row: Row) -> Country:
        return Country(
            name=row["name"],
            short_name=row["short_name"],
            iso_code=row["iso_code"],
            id=row["id"],
        )


class StateRepository(KeyedRepository[State]):
    table = "states"
    entity_name = "State"
    secondary_key = "ibge_code"

    def __init__(self, store: RowStore, executor: Executor, countries: CountryRepository) -> None:
        super().__init__(store, executor)
        self._countries = countries

    def get_by_ibge_code(self, ibge_code: str) -> Future[State | None]:
        return self.get_by_secondary_key(ibge_code)

    def _parents(self) -> dict[str, Repository[Any]]:
        return {"country_id": self._countries}

    def _to_row(self, entity: State) -> Row:
        return {
            "name": entity.name,
            "short_name": entity.short_name,
            "region": Region(entity.region).value,
            "ibge_code": entity.ibge_code,
            "country_id": self._parent_id(entity.country, "Country"),
        }

    def _hydrate(self, row: Row) -> State:
        return State(
            name=row["name"],
            short_name=row["short_name"],
            region=Region(row["region"]),
            ibge_code=row["ibge_code"],
            country=self._resolve_parent(self._countries, row["country_id"]),
            id=row["id"],
        )


class CityRepository(KeyedRepository[City]):
    table = "cities"
    entity_name = "City"
    secondary_key = "ibge_code"

    def __init__(self, store: RowStore, executor: Executor, states: StateRepository) -> None:
        super().__init__(store, executor)
        self._states = states

    def get_by_ibge_code(self, ibge_code: str) -> Future[City | None]:
        return self.get_by_secondary_key(ibge_code)

    def _parents(self) -> dict[str, Repository[Any]]:
        return {"state_id": self._states}

    def _to_row(self, entity: City) -> Row:
        return {
            "name": entity.name,
            "short_name": entity.short_name,
            "ibge_code": entity.ibge_code,
            "state_id": self._parent_id(entity.state, "State"),
        }

    def _hydrate(self, row: Row) -> City:
        return City(
            name=row["name"],
            short_name=row["short_name"],
            ibge_code=row["ibge_code"],
            state=self._resolve_parent(self._states, row["state_id"]),
            id=row["id"],
        )


class AddressRepository(Repository[Address]):
    """Addresses are looked up by id only."""

    table = "addresses"
    entity_name = "Address"

    def __init__(self, store: RowStore, executor: Executor, cities: CityRepository) -> None:
        super().__init__(store, executor)
        self._cities = cities

    def _parents(self) -> dict[str, Repository[Any]]:
        return {"city_id": self._cities}

    def _to_row(self, entity: Address) -> Row:
        return {
            "street": entity.street,
            "number": entity.number,
            "complement": entity.complement,
            "neighborhood": entity.neighborhood,
            "city_id": self._parent_id(entity.city, "City"),
        }

    def _hydrate(self, row: Row) -> Address:
        return Address(
            street=row["street"],
            number=row["number"],
            complement=row["complement"],
            neighborhood=row["neighborhood"],
            city=self._resolve_parent(self._cities, row["city_id"]),
            id=row["id"],
        )
