"""Composition root wiring store, executor, repositories and handlers."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

from psa_core.commands import (
    CreateAddressCommandHandler,
    CreateCityCommandHandler,
    CreateCountryCommandHandler,
    CreateOccurrenceCommandHandler,
    CreatePoliceDepartmentCommandHandler,
    CreateStateCommandHandler,
    CreateUserCommandHandler,
)
from psa_core.config import ExecutorConfig, PsaConfig
from psa_core.repositories import (
    AddressRepository,
    CityRepository,
    CountryRepository,
    OccurrenceRepository,
    PoliceDepartmentRepository,
    StateRepository,
    UserRepository,
)
from psa_core.store import InMemoryRowStore, RowStore

logger = logging.getLogger(__name__)


class CoreContext:
    """Owns the row store and the worker pool shared by all repositories.

    Parameters
    ----------
    store : RowStore
        Storage for every entity table. Tables must already exist.
    executor_config : ExecutorConfig | None
        Worker pool settings. Defaults to ``ExecutorConfig()``.
    """

    def __init__(self, store: RowStore, executor_config: ExecutorConfig | None = None) -> None:
        executor_config = executor_config or ExecutorConfig()
        self.store = store
        self.executor = ThreadPoolExecutor(
            max_workers=executor_config.max_workers,
            thread_name_prefix=executor_config.thread_name_prefix,
        )

        # Repositories, parents first
        self.countries = CountryRepository(store, self.executor)
        self.states = StateRepository(store, self.executor, self.countries)
        self.cities = CityRepository(store, self.executor, self.states)
        self.addresses = AddressRepository(store, self.executor, self.cities)
        self.users = UserRepository(store, self.executor)
        self.police_departments = PoliceDepartmentRepository(store, self.executor, self.addresses)
        self.occurrences = OccurrenceRepository(store, self.executor, self.addresses, self.users)

        # Create-command handlers
        self.create_country = CreateCountryCommandHandler(self.countries)
        self.create_state = CreateStateCommandHandler(self.states, self.countries)
        self.create_city = CreateCityCommandHandler(self.cities, self.states)
        self.create_address = CreateAddressCommandHandler(self.addresses, self.cities)
        self.create_user = CreateUserCommandHandler(self.users)
        self.create_police_department = CreatePoliceDepartmentCommandHandler(
            self.police_departments, self.addresses
        )
        self.create_occurrence = CreateOccurrenceCommandHandler(
            self.occurrences, self.addresses, self.users
        )

    @classmethod
    def from_config(cls, config: PsaConfig) -> "CoreContext":
        """Build a context with the storage backend named in ``config``.

        Seeds development data when ``config.seed.enabled`` is set.
        """
        if config.storage_backend == "postgres":
            from psa_core.store.postgres import PostgresRowStore

            store: RowStore = PostgresRowStore(config.postgres.connection_string)
            try:
                store.create_tables()
            except BaseException:
                store.close()
                raise
            logger.info(
                "Using PostgreSQL store at %s:%d/%s",
                config.postgres.host,
                config.postgres.port,
                config.postgres.database,
            )
        else:
            store = InMemoryRowStore()
            logger.info("Using in-memory store")
        context = cls(store, config.executor)

        if config.seed.enabled:
            from psa_core.seed import DatabaseSeeder

            seeder = DatabaseSeeder(context, seed=config.seed.seed, locale=config.seed.locale)
            try:
                seeder.seed()
                if config.seed.synthetic_occurrences > 0:
                    seeder.seed_synthetic(config.seed.synthetic_occurrences)
            except BaseException:
                context.close()
                raise
        return context

    def close(self) -> None:
        """Wait for pending work, then release the pool and the store."""
        self.executor.shutdown(wait=True)
        self.store.close()
        logger.debug("Core context closed")

    def __enter__(self) -> "CoreContext":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
