"""Create commands for the geographic hierarchy."""

from __future__ import annotations

from concurrent.futures import Future
from dataclasses import dataclass

from psa_core.commands.base import CommandHandler, log_created, resolve_parent
from psa_core.futures import completed, then
from psa_core.models import Address, City, Country, Region, State
from psa_core.repositories import (
    AddressRepository,
    CityRepository,
    CountryRepository,
    StateRepository,
)


@dataclass(frozen=True)
class CreateCountryCommand:
    name: str
    short_name: str
    iso_code: str


@dataclass(frozen=True)
class CreateStateCommand:
    name: str
    short_name: str
    region: Region | str
    ibge_code: str
    country_id: int


@dataclass(frozen=True)
class CreateCityCommand:
    name: str
    short_name: str
    ibge_code: str
    state_id: int


@dataclass(frozen=True)
class CreateAddressCommand:
    street: str
    number: str
    complement: str
    neighborhood: str
    city_id: int


class CreateCountryCommandHandler(CommandHandler[CreateCountryCommand, Country]):
    def __init__(self, countries: CountryRepository) -> None:
        self._countries = countries

    def handle(self, command: CreateCountryCommand) -> Future[Country]:
        def _add(command: CreateCountryCommand) -> Future[Country]:
            country = Country.create(command.name, command.short_name, command.iso_code)
            return self._countries.add(country)

        return log_created(then(completed(command), _add), "Country")


class CreateStateCommandHandler(CommandHandler[CreateStateCommand, State]):
    def __init__(self, states: StateRepository, countries: CountryRepository) -> None:
        self._states = states
        self._countries = countries

    def handle(self, command: CreateStateCommand) -> Future[State]:
        def _add(country: Country) -> Future[State]:
            state = State.create(
                command.name,
                command.short_name,
                command.region,
                command.ibge_code,
                country,
            )
            return self._states.add(state)

        added = then(resolve_parent(self._countries, command.country_id), _add)
        return log_created(added, "State")


class CreateCityCommandHandler(CommandHandler[CreateCityCommand, City]):
    def __init__(self, cities: CityRepository, states: StateRepository) -> None:
        self._cities = cities
        self._states = states

    def handle(self, command: CreateCityCommand) -> Future[City]:
        def _add(state: State) -> Future[City]:
            city = City.create(command.name, command.short_name, command.ibge_code, state)
            return self._cities.add(city)

        added = then(resolve_parent(self._states, command.state_id), _add)
        return log_created(added, "City")


class CreateAddressCommandHandler(CommandHandler[CreateAddressCommand, Address]):
    def __init__(self, addresses: AddressRepository, cities: CityRepository) -> None:
        self._addresses = addresses
        self._cities = cities

    def handle(self, command: CreateAddressCommand) -> Future[Address]:
        def _add(city: City) -> Future[Address]:
            address = Address.create(
                command.street,
                command.number,
                command.complement,
                command.neighborhood,
                city,
            )
            return self._addresses.add(address)

        added = then(resolve_parent(self._cities, command.city_id), _add)
        return log_created(added, "Address")
