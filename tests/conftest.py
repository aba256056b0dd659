"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest

from psa_core.config import ExecutorConfig
from psa_core.context import CoreContext
from psa_core.models import Address, City, Country, Region, State, User
from psa_core.store import InMemoryRowStore


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def store() -> InMemoryRowStore:
    """Create a fresh in-memory store for each test."""
    return InMemoryRowStore()


@pytest.fixture
def context(store: InMemoryRowStore) -> Iterator[CoreContext]:
    """Wired repositories and handlers over the in-memory store."""
    ctx = CoreContext(store, ExecutorConfig(max_workers=4))
    yield ctx
    ctx.close()


@pytest.fixture
def brazil(context: CoreContext) -> Country:
    """Persisted country."""
    return context.countries.add(Country.create("Brazil", "BR", "BRA")).result()


@pytest.fixture
def sao_paulo_state(context: CoreContext, brazil: Country) -> State:
    """Persisted state of ``brazil``."""
    state = State.create("São Paulo", "SP", Region.SUDESTE, "35", brazil)
    return context.states.add(state).result()


@pytest.fixture
def sao_paulo(context: CoreContext, sao_paulo_state: State) -> City:
    """Persisted city of ``sao_paulo_state``."""
    city = City.create("São Paulo", "São Paulo", "3550308", sao_paulo_state)
    return context.cities.add(city).result()


@pytest.fixture
def paulista(context: CoreContext, sao_paulo: City) -> Address:
    """Persisted address in ``sao_paulo``."""
    address = Address.create("Avenida Paulista", "1578", "Andar 12", "Bela Vista", sao_paulo)
    return context.addresses.add(address).result()


@pytest.fixture
def user(context: CoreContext) -> User:
    """Persisted user."""
    return context.users.add(User.create(12345)).result()
