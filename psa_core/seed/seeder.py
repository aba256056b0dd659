"""Development database seeding through the create-command handlers."""

from __future__ import annotations

import logging
import random
from concurrent.futures import Future
from datetime import datetime, timezone
from typing import Any, TypeVar

from psa_core.commands import (
    CreateAddressCommand,
    CreateCityCommand,
    CreateCountryCommand,
    CreateOccurrenceCommand,
    CreatePoliceDepartmentCommand,
    CreateStateCommand,
    CreateUserCommand,
)
from psa_core.context import CoreContext
from psa_core.exceptions import EntityNotFoundError
from psa_core.generators import (
    AddressGenerator,
    OccurrenceGenerator,
    PoliceDepartmentGenerator,
    UserGenerator,
)
from psa_core.models import Address, User
from psa_core.seed import fixtures

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DatabaseSeeder:
    """Populate a store with the development fixture set.

    Every entity is created through the context's create-command handlers,
    so fixture data passes the same validation as client input. Parents are
    looked up by their secondary keys.

    Parameters
    ----------
    context : CoreContext
        Wired repositories and handlers.
    seed : int | None
        Random seed for :meth:`seed_synthetic`.
    locale : str
        Faker locale for :meth:`seed_synthetic`.
    """

    def __init__(
        self,
        context: CoreContext,
        seed: int | None = None,
        locale: str = "pt_BR",
    ) -> None:
        self.context = context
        self.seed_value = seed
        self.locale = locale

    def is_seeded(self) -> bool:
        """Return ``True`` when countries already exist."""
        return len(self.context.countries.get_all().result()) > 0

    def seed(self) -> bool:
        """Create the fixture set unless the store already holds countries.

        Returns
        -------
        bool
            ``True`` if data was created, ``False`` if seeding was skipped.
        """
        if self.is_seeded():
            logger.info("Database already seeded, skipping")
            return False

        logger.info("Starting database seeding...")
        self._seed_countries()
        self._seed_states()
        self._seed_cities()
        addresses = self._seed_addresses()
        users = self._seed_users()
        self._seed_police_departments(addresses)
        self._seed_occurrences(addresses, users)
        logger.info("Database seeding completed: %s", self.context.store.summary())
        return True

    def seed_synthetic(self, count: int) -> dict[str, int]:
        """Add ``count`` generated occurrences with their own addresses and users.

        Addresses are spread over the cities already stored; roughly one
        police department is added per five occurrences.

        Parameters
        ----------
        count : int
            Number of occurrences to generate.

        Returns
        -------
        dict[str, int]
            Number of created entities per kind.
        """
        if count <= 0:
            return {"addresses": 0, "users": 0, "police_departments": 0, "occurrences": 0}

        city_ids = [city.id for city in self.context.cities.get_all().result()]
        if not city_ids:
            raise EntityNotFoundError("No cities stored; run seed() before seed_synthetic()")

        address_gen = AddressGenerator(seed=self.seed_value, locale=self.locale)
        user_gen = UserGenerator(seed=self.seed_value, locale=self.locale)
        department_gen = PoliceDepartmentGenerator(seed=self.seed_value, locale=self.locale)
        occurrence_gen = OccurrenceGenerator(seed=self.seed_value, locale=self.locale)

        address_count = max(1, count // 2)
        user_count = max(1, count // 3)
        department_count = count // 5

        addresses = self._wait(
            [
                self.context.create_address.handle(command)
                for command in address_gen.generate_batch(address_count, city_ids)
            ]
        )
        existing_cognito_ids = {user.cognito_id for user in self.context.users.get_all().result()}
        user_commands = []
        while len(user_commands) < user_count:
            command = user_gen.generate()
            if command.cognito_id not in existing_cognito_ids:
                user_commands.append(command)
        users = self._wait([self.context.create_user.handle(command) for command in user_commands])

        self._wait(
            [
                self.context.create_police_department.handle(
                    department_gen.generate(random.choice(addresses).id)
                )
                for _ in range(department_count)
            ]
        )
        now = datetime.now(timezone.utc)
        self._wait(
            [
                self.context.create_occurrence.handle(
                    occurrence_gen.generate(
                        random.choice(addresses).id,
                        random.choice(users).id,
                        now=now,
                    )
                )
                for _ in range(count)
            ]
        )

        created = {
            "addresses": len(addresses),
            "users": len(users),
            "police_departments": department_count,
            "occurrences": count,
        }
        logger.info("Synthetic seeding completed: %s", created)
        return created

    # --- Fixture steps ---

    def _seed_countries(self) -> None:
        logger.info("Seeding countries...")
        created = self._wait(
            [
                self.context.create_country.handle(CreateCountryCommand(name, short_name, iso_code))
                for name, short_name, iso_code in fixtures.COUNTRIES
            ]
        )
        logger.info("Seeded %d countries", len(created))

    def _seed_states(self) -> None:
        logger.info("Seeding states...")
        country = self._require(
            self.context.countries.get_by_iso_code(fixtures.STATES_COUNTRY),
            "Country",
            fixtures.STATES_COUNTRY,
        )
        created = self._wait(
            [
                self.context.create_state.handle(
                    CreateStateCommand(name, short_name, region, ibge_code, country.id)
                )
                for name, short_name, region, ibge_code in fixtures.STATES
            ]
        )
        logger.info("Seeded %d states", len(created))

    def _seed_cities(self) -> None:
        logger.info("Seeding cities...")
        states = {
            code: self._require(self.context.states.get_by_ibge_code(code), "State", code)
            for code in {state_code for *_, state_code in fixtures.CITIES}
        }
        created = self._wait(
            [
                self.context.create_city.handle(
                    CreateCityCommand(name, short_name, ibge_code, states[state_code].id)
                )
                for name, short_name, ibge_code, state_code in fixtures.CITIES
            ]
        )
        logger.info("Seeded %d cities", len(created))

    def _seed_addresses(self) -> list[Address]:
        logger.info("Seeding addresses...")
        cities = {
            code: self._require(self.context.cities.get_by_ibge_code(code), "City", code)
            for code in {city_code for *_, city_code in fixtures.ADDRESSES}
        }
        created = self._wait(
            [
                self.context.create_address.handle(
                    CreateAddressCommand(street, number, complement, neighborhood, cities[code].id)
                )
                for street, number, complement, neighborhood, code in fixtures.ADDRESSES
            ]
        )
        logger.info("Seeded %d addresses", len(created))
        return created

    def _seed_users(self) -> list[User]:
        logger.info("Seeding users...")
        created = self._wait(
            [
                self.context.create_user.handle(CreateUserCommand(cognito_id))
                for cognito_id in fixtures.USERS
            ]
        )
        logger.info("Seeded %d users", len(created))
        return created

    def _seed_police_departments(self, addresses: list[Address]) -> None:
        logger.info("Seeding police departments...")
        created = self._wait(
            [
                self.context.create_police_department.handle(
                    CreatePoliceDepartmentCommand(
                        overpass_id=overpass_id,
                        name=name,
                        short_name=short_name,
                        operator=fixtures.POLICE_OPERATOR,
                        ownership=fixtures.POLICE_OWNERSHIP,
                        phone=phone,
                        email=email,
                        latitude=latitude,
                        longitude=longitude,
                        address_id=addresses[address_index].id,
                    )
                )
                for (
                    overpass_id,
                    name,
                    short_name,
                    phone,
                    email,
                    latitude,
                    longitude,
                    address_index,
                ) in fixtures.POLICE_DEPARTMENTS
            ]
        )
        logger.info("Seeded %d police departments", len(created))

    def _seed_occurrences(self, addresses: list[Address], users: list[User]) -> None:
        logger.info("Seeding occurrences...")
        now = datetime.now(timezone.utc)
        commands = []
        for (
            name,
            description,
            start,
            end,
            update,
            active,
            intensity,
            address_index,
            user_index,
        ) in fixtures.OCCURRENCES:
            commands.append(
                CreateOccurrenceCommand(
                    name=name,
                    description=description,
                    date_start=now - start,
                    date_end=now - end if end is not None else None,
                    date_update=now - update if update is not None else None,
                    active=active,
                    intensity=intensity,
                    address_id=addresses[address_index].id,
                    user_id=users[user_index].id,
                )
            )
        created = self._wait([self.context.create_occurrence.handle(c) for c in commands])
        logger.info("Seeded %d occurrences", len(created))

    # --- Helpers ---

    @staticmethod
    def _wait(futures: list[Future[T]]) -> list[T]:
        """Block until every future resolves, preserving order."""
        return [future.result() for future in futures]

    @staticmethod
    def _require(future: Future[Any], label: str, key: Any) -> Any:
        entity = future.result()
        if entity is None:
            raise EntityNotFoundError(f"{label} with key {key} not found")
        return entity
