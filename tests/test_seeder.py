"""Tests for DatabaseSeeder."""

import pytest

from psa_core.context import CoreContext
from psa_core.exceptions import EntityNotFoundError
from psa_core.models import Intensity, Region
from psa_core.seed import DatabaseSeeder
from psa_core.seed import fixtures


@pytest.fixture
def seeded(context: CoreContext) -> CoreContext:
    assert DatabaseSeeder(context).seed() is True
    return context


class TestSeed:
    """Tests for the fixture set."""

    def test_counts(self, seeded: CoreContext) -> None:
        assert seeded.store.summary() == {
            "countries": 5,
            "states": 10,
            "cities": 10,
            "addresses": 10,
            "users": 10,
            "police_departments": 5,
            "occurrences": 10,
        }

    def test_states_belong_to_brazil(self, seeded: CoreContext) -> None:
        states = seeded.states.get_all().result()

        assert {s.country.iso_code for s in states} == {"BRA"}
        assert seeded.states.get_by_ibge_code("52").result().region is Region.CENTRO_OESTE

    def test_cities_resolved_by_state_code(self, seeded: CoreContext) -> None:
        bh = seeded.cities.get_by_ibge_code("3106200").result()

        assert bh.short_name == "BH"
        assert bh.state.short_name == "MG"

    def test_police_department_addresses(self, seeded: CoreContext) -> None:
        copacabana = seeded.police_departments.get_by_overpass_id("way/456789012").result()

        assert copacabana.address.neighborhood == "Copacabana"
        assert copacabana.operator == "Polícia Civil"

    def test_occurrences(self, seeded: CoreContext) -> None:
        active = seeded.occurrences.get_by_active(True).result()
        inactive = seeded.occurrences.get_by_active(False).result()

        assert len(active) == 6
        assert len(inactive) == 4
        assert all(o.date_end is None for o in active)
        assert all(o.date_end is not None for o in inactive)

    def test_occurrence_authors(self, seeded: CoreContext) -> None:
        author = seeded.users.get_by_cognito_id(90123).result()

        (bomb,) = seeded.occurrences.get_by_user_id(author.id).result()

        assert bomb.name == "Suspeita de Bomba"
        assert bomb.intensity is Intensity.CRITICAL
        assert bomb.address.street == "Avenida Brigadeiro Faria Lima"

    def test_seed_is_idempotent(self, seeded: CoreContext) -> None:
        assert DatabaseSeeder(seeded).seed() is False
        assert seeded.store.count("countries") == len(fixtures.COUNTRIES)


class TestSeedSynthetic:
    def test_adds_generated_data(self, seeded: CoreContext, seed: int) -> None:
        created = DatabaseSeeder(seeded, seed=seed).seed_synthetic(20)

        assert created == {
            "addresses": 10,
            "users": 6,
            "police_departments": 4,
            "occurrences": 20,
        }
        assert seeded.store.count("occurrences") == 30
        assert seeded.store.count("addresses") == 20

    def test_zero_count(self, seeded: CoreContext) -> None:
        created = DatabaseSeeder(seeded).seed_synthetic(0)

        assert set(created.values()) == {0}

    def test_requires_cities(self, context: CoreContext) -> None:
        with pytest.raises(EntityNotFoundError, match="No cities stored"):
            DatabaseSeeder(context).seed_synthetic(5)
