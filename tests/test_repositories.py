"""Tests for the asynchronous repositories."""

import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest

from psa_core.context import CoreContext
from psa_core.exceptions import (
    ConstraintViolationError,
    EntityNotFoundError,
    InvalidEntityError,
    ParentNotFoundError,
    StorageError,
)
from psa_core.models import (
    Address,
    City,
    Country,
    Intensity,
    Occurrence,
    PoliceDepartment,
    State,
    User,
)
from psa_core.repositories import CountryRepository
from psa_core.store import InMemoryRowStore

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def make_occurrence(
    address: Address, user: User, active: bool = True, name: str = "Alagamento"
) -> Occurrence:
    return Occurrence.create(
        name=name,
        description="Rua alagada após chuva forte",
        date_start=NOW - timedelta(hours=1),
        date_end=None if active else NOW,
        date_update=NOW,
        active=active,
        intensity=Intensity.MODERATE,
        address=address,
        user=user,
    )


def make_department(address: Address, overpass_id: str = "way/123456789") -> PoliceDepartment:
    return PoliceDepartment.create(
        overpass_id=overpass_id,
        name="1º Distrito Policial",
        short_name="1º DP",
        operator="Polícia Civil",
        ownership="public",
        phone="+5511999999999",
        email="contato@policia.sp.gov.br",
        latitude="-23.550520",
        longitude="-46.633309",
        address=address,
    )


class TestAsynchronousContract:
    def test_operations_return_pending_futures(self, store: InMemoryRowStore) -> None:
        """Results are produced on the pool, not in the caller."""
        gate = threading.Event()
        with ThreadPoolExecutor(max_workers=1) as executor:
            executor.submit(gate.wait)
            countries = CountryRepository(store, executor)

            future = countries.get_all()
            assert not future.done()

            gate.set()
            assert future.result(timeout=5) == []


class TestSecondaryKeys:
    """add followed by a secondary-key lookup, and duplicate rejection."""

    def test_country_by_iso_code(self, context: CoreContext, brazil: Country) -> None:
        assert context.countries.get_by_iso_code("BRA").result() == brazil

        with pytest.raises(ConstraintViolationError):
            context.countries.add(Country.create("Brasil", "BR", "BRA")).result()

    def test_state_by_ibge_code(self, context: CoreContext, sao_paulo_state: State) -> None:
        assert context.states.get_by_ibge_code("35").result() == sao_paulo_state

        duplicate = State.create("Outro", "OT", "SUL", "35", sao_paulo_state.country)
        with pytest.raises(ConstraintViolationError):
            context.states.add(duplicate).result()

    def test_city_by_ibge_code(self, context: CoreContext, sao_paulo: City) -> None:
        assert context.cities.get_by_ibge_code("3550308").result() == sao_paulo

        duplicate = City.create("Outra", "OT", "3550308", sao_paulo.state)
        with pytest.raises(ConstraintViolationError):
            context.cities.add(duplicate).result()
        assert len(context.cities.get_all().result()) == 1

    def test_user_by_cognito_id(self, context: CoreContext, user: User) -> None:
        assert context.users.get_by_cognito_id(12345).result() == user

        with pytest.raises(ConstraintViolationError):
            context.users.add(User.create(12345)).result()

    def test_police_department_by_overpass_id(
        self, context: CoreContext, paulista: Address
    ) -> None:
        added = context.police_departments.add(make_department(paulista)).result()

        assert context.police_departments.get_by_overpass_id("way/123456789").result() == added
        with pytest.raises(ConstraintViolationError):
            context.police_departments.add(make_department(paulista)).result()

    def test_unknown_secondary_key(self, context: CoreContext) -> None:
        assert context.countries.get_by_iso_code("XYZ").result() is None


class TestMissingIds:
    """Reads of unknown ids are empty; writes fail with NotFound."""

    def test_get_by_id_absent(self, context: CoreContext) -> None:
        assert context.countries.get_by_id(404).result() is None

    def test_update_absent(self, context: CoreContext) -> None:
        ghost = Country(name="Atlantis", short_name="AT", iso_code="ATL", id=404)

        with pytest.raises(EntityNotFoundError, match="Country not found with id: 404"):
            context.countries.update(ghost).result()

    def test_delete_absent(self, context: CoreContext) -> None:
        with pytest.raises(EntityNotFoundError, match="User not found with id: 404"):
            context.users.delete(404).result()


class TestRoundTrip:
    def test_add_then_get_by_id(self, context: CoreContext, paulista: Address, user: User) -> None:
        occurrence = make_occurrence(paulista, user)

        added = context.occurrences.add(occurrence).result()
        loaded = context.occurrences.get_by_id(added.id).result()

        assert added.id is not None
        assert occurrence.id is None
        assert loaded == replace(occurrence, id=added.id)

    def test_children_carry_loaded_parents(self, context: CoreContext, paulista: Address) -> None:
        loaded = context.addresses.get_by_id(paulista.id).result()

        assert loaded.city.state.country.iso_code == "BRA"

    def test_repeated_reads_are_identical(self, context: CoreContext, paulista: Address) -> None:
        first = context.addresses.get_by_id(paulista.id).result()
        second = context.addresses.get_by_id(paulista.id).result()

        assert first == second

    def test_add_rejects_entity_with_id(self, context: CoreContext, brazil: Country) -> None:
        with pytest.raises(InvalidEntityError, match="ids are assigned on insert"):
            context.countries.add(brazil).result()

    def test_add_rejects_unsaved_parent(self, context: CoreContext, brazil: Country) -> None:
        unsaved = Country(name="Peru", short_name="PE", iso_code="PER")
        state = State(name="X", short_name="X", region="SUL", ibge_code="99", country=unsaved)

        with pytest.raises(InvalidEntityError, match="unsaved Country"):
            context.states.add(state).result()

    def test_get_all_returns_plain_list(self, context: CoreContext, brazil: Country) -> None:
        context.countries.add(Country.create("Chile", "CL", "CHL")).result()

        countries = context.countries.get_all().result()

        assert isinstance(countries, list)
        assert {c.iso_code for c in countries} == {"BRA", "CHL"}


class TestUpdate:
    """Tests for full-replace updates."""

    def test_update_scalar_fields(self, context: CoreContext, brazil: Country) -> None:
        updated = context.countries.update(replace(brazil, name="Brasil")).result()

        assert updated.name == "Brasil"
        assert context.countries.get_by_id(brazil.id).result().name == "Brasil"

    def test_update_moves_secondary_key(self, context: CoreContext, brazil: Country) -> None:
        context.countries.update(replace(brazil, iso_code="BRZ")).result()

        assert context.countries.get_by_iso_code("BRA").result() is None
        assert context.countries.get_by_iso_code("BRZ").result().id == brazil.id

    def test_update_to_existing_key(self, context: CoreContext, brazil: Country) -> None:
        chile = context.countries.add(Country.create("Chile", "CL", "CHL")).result()

        with pytest.raises(ConstraintViolationError):
            context.countries.update(replace(chile, iso_code="BRA")).result()

    def test_update_changed_parent_must_exist(
        self, context: CoreContext, paulista: Address, sao_paulo: City
    ) -> None:
        ghost_city = replace(sao_paulo, id=999)

        with pytest.raises(ParentNotFoundError, match="City with ID 999 not found"):
            context.addresses.update(replace(paulista, city=ghost_city)).result()

    def test_update_reparents(
        self, context: CoreContext, paulista: Address, sao_paulo_state: State
    ) -> None:
        campinas = context.cities.add(
            City.create("Campinas", "Campinas", "3509502", sao_paulo_state)
        ).result()

        moved = context.addresses.update(replace(paulista, city=campinas)).result()

        assert moved.city == campinas
        assert context.addresses.get_by_id(paulista.id).result().city.ibge_code == "3509502"

    def test_parent_update_does_not_reach_loaded_children(
        self, context: CoreContext, sao_paulo: City, brazil: Country
    ) -> None:
        context.countries.update(replace(brazil, name="Brasil")).result()

        assert sao_paulo.state.country.name == "Brazil"
        reloaded = context.cities.get_by_id(sao_paulo.id).result()
        assert reloaded.state.country.name == "Brasil"

    def test_update_without_id(self, context: CoreContext) -> None:
        with pytest.raises(InvalidEntityError, match="has no id"):
            context.countries.update(Country.create("Peru", "PE", "PER")).result()


class TestDelete:
    def test_delete_returns_snapshot(self, context: CoreContext, user: User) -> None:
        snapshot = context.users.delete(user.id).result()

        assert snapshot == user
        assert context.users.get_by_id(user.id).result() is None

    def test_second_delete_fails(self, context: CoreContext, user: User) -> None:
        context.users.delete(user.id).result()

        with pytest.raises(EntityNotFoundError):
            context.users.delete(user.id).result()

    def test_racing_deletes_have_one_winner(self, context: CoreContext, user: User) -> None:
        futures = [context.users.delete(user.id) for _ in range(8)]

        outcomes = []
        for future in futures:
            try:
                outcomes.append(future.result())
            except EntityNotFoundError:
                outcomes.append(None)

        assert outcomes.count(user) == 1
        assert outcomes.count(None) == 7

    def test_referenced_parent_is_not_cascaded(
        self, context: CoreContext, paulista: Address
    ) -> None:
        with pytest.raises(StorageError, match="still referenced"):
            context.cities.delete(paulista.city.id).result()
        assert context.addresses.get_by_id(paulista.id).result() == paulista


class TestOccurrenceFilters:
    """Tests for get_all_filtered and its aliases."""

    @pytest.fixture
    def occurrences(self, context: CoreContext, paulista: Address, user: User) -> list[Occurrence]:
        other = context.users.add(User.create(67890)).result()
        return [
            context.occurrences.add(make_occurrence(paulista, user, True, "A")).result(),
            context.occurrences.add(make_occurrence(paulista, user, False, "B")).result(),
            context.occurrences.add(make_occurrence(paulista, other, True, "C")).result(),
        ]

    def test_filter_active(self, context: CoreContext, occurrences: list[Occurrence]) -> None:
        active = context.occurrences.get_all_filtered(active=True).result()

        assert sorted(o.name for o in active) == ["A", "C"]

    def test_filter_inactive(self, context: CoreContext, occurrences: list[Occurrence]) -> None:
        assert [o.name for o in context.occurrences.get_by_active(False).result()] == ["B"]

    def test_filter_user(
        self, context: CoreContext, occurrences: list[Occurrence], user: User
    ) -> None:
        mine = context.occurrences.get_by_user_id(user.id).result()

        assert sorted(o.name for o in mine) == ["A", "B"]
        assert all(o.user == user for o in mine)

    def test_filter_unknown_user(self, context: CoreContext, occurrences: list[Occurrence]) -> None:
        assert context.occurrences.get_by_user_id(999).result() == []

    @pytest.mark.parametrize("kwargs", [{}, {"active": True, "user_id": 1}])
    def test_exactly_one_filter(self, context: CoreContext, kwargs: dict) -> None:
        with pytest.raises(ValueError, match="Exactly one"):
            context.occurrences.get_all_filtered(**kwargs)
