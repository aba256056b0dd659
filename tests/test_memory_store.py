"""Tests for InMemoryRowStore."""

import threading

import pytest

from psa_core.exceptions import ConstraintViolationError, StorageError
from psa_core.store import TABLE_ORDER, TABLES, InMemoryRowStore


def country_row(iso_code: str = "BRA") -> dict:
    return {"name": "Brazil", "short_name": "BR", "iso_code": iso_code}


def state_row(country_id: int, ibge_code: str = "35") -> dict:
    return {
        "name": "São Paulo",
        "short_name": "SP",
        "region": "SUDESTE",
        "ibge_code": ibge_code,
        "country_id": country_id,
    }


class TestSchema:
    def test_table_order_lists_parents_first(self) -> None:
        for position, table in enumerate(TABLE_ORDER):
            for parent in TABLES[table].foreign_keys.values():
                assert TABLE_ORDER.index(parent) < position

    def test_every_table_is_ordered(self) -> None:
        assert sorted(TABLE_ORDER) == sorted(TABLES)


class TestInsertAndRead:
    """Tests for insert, get, get_by and scan."""

    def test_insert_assigns_increasing_ids(self, store: InMemoryRowStore) -> None:
        first = store.insert("countries", country_row("BRA"))
        second = store.insert("countries", country_row("ARG"))

        assert first == 1
        assert second == 2

    def test_get_returns_row_with_id(self, store: InMemoryRowStore) -> None:
        row_id = store.insert("countries", country_row())

        assert store.get("countries", row_id) == {"id": row_id, **country_row()}
        assert store.get("countries", 999) is None

    def test_get_returns_copy(self, store: InMemoryRowStore) -> None:
        row_id = store.insert("countries", country_row())
        store.get("countries", row_id)["name"] = "Changed"

        assert store.get("countries", row_id)["name"] == "Brazil"

    def test_get_by_unique_column(self, store: InMemoryRowStore) -> None:
        row_id = store.insert("countries", country_row("CHL"))

        assert store.get_by("countries", "iso_code", "CHL")["id"] == row_id
        assert store.get_by("countries", "iso_code", "XXX") is None

    def test_get_by_non_unique_column(self, store: InMemoryRowStore) -> None:
        with pytest.raises(StorageError, match="not a unique column"):
            store.get_by("countries", "name", "Brazil")

    def test_scan_with_predicate(self, store: InMemoryRowStore) -> None:
        brazil = store.insert("countries", country_row("BRA"))
        other = store.insert("countries", country_row("ARG"))
        store.insert("states", state_row(brazil, "35"))
        store.insert("states", state_row(brazil, "33"))
        store.insert("states", state_row(other, "02"))

        assert len(store.scan("states")) == 3
        assert {row["ibge_code"] for row in store.scan("states", {"country_id": brazil})} == {
            "35",
            "33",
        }

    def test_unknown_table(self, store: InMemoryRowStore) -> None:
        with pytest.raises(StorageError, match="Unknown table"):
            store.get("planets", 1)

    def test_missing_columns(self, store: InMemoryRowStore) -> None:
        with pytest.raises(StorageError, match="missing columns: iso_code"):
            store.insert("countries", {"name": "Brazil", "short_name": "BR"})


class TestConstraints:
    """Tests for unique and foreign key enforcement."""

    def test_duplicate_unique_key(self, store: InMemoryRowStore) -> None:
        store.insert("countries", country_row("BRA"))

        with pytest.raises(ConstraintViolationError, match="countries.iso_code 'BRA'"):
            store.insert("countries", country_row("BRA"))
        assert store.count("countries") == 1

    def test_update_to_taken_key(self, store: InMemoryRowStore) -> None:
        store.insert("countries", country_row("BRA"))
        argentina = store.insert("countries", country_row("ARG"))

        with pytest.raises(ConstraintViolationError):
            store.update("countries", argentina, country_row("BRA"))
        assert store.get("countries", argentina)["iso_code"] == "ARG"

    def test_update_keeping_own_key(self, store: InMemoryRowStore) -> None:
        row_id = store.insert("countries", country_row("BRA"))

        assert store.update("countries", row_id, {**country_row("BRA"), "name": "Brasil"})
        assert store.get("countries", row_id)["name"] == "Brasil"

    def test_update_releases_old_key(self, store: InMemoryRowStore) -> None:
        row_id = store.insert("countries", country_row("BRA"))
        store.update("countries", row_id, country_row("BRZ"))

        assert store.get_by("countries", "iso_code", "BRA") is None
        store.insert("countries", country_row("BRA"))

    def test_update_missing_row(self, store: InMemoryRowStore) -> None:
        assert store.update("countries", 42, country_row()) is False

    def test_insert_with_missing_parent(self, store: InMemoryRowStore) -> None:
        with pytest.raises(StorageError, match="references missing countries row 9"):
            store.insert("states", state_row(9))

    def test_delete_referenced_parent(self, store: InMemoryRowStore) -> None:
        country_id = store.insert("countries", country_row())
        store.insert("states", state_row(country_id))

        with pytest.raises(StorageError, match="still referenced by states.country_id"):
            store.delete("countries", country_id)
        assert store.count("countries") == 1

    def test_delete(self, store: InMemoryRowStore) -> None:
        row_id = store.insert("countries", country_row())

        assert store.delete("countries", row_id) is True
        assert store.delete("countries", row_id) is False
        assert store.get_by("countries", "iso_code", "BRA") is None


class TestConcurrency:
    def test_concurrent_duplicate_inserts_keep_one(self, store: InMemoryRowStore) -> None:
        """Only one of many racing inserts of the same key succeeds."""
        errors: list[Exception] = []

        def insert() -> None:
            try:
                store.insert("users", {"cognito_id": 777})
            except ConstraintViolationError as e:
                errors.append(e)

        threads = [threading.Thread(target=insert) for _ in range(20)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert store.count("users") == 1
        assert len(errors) == 19


class TestSummary:
    def test_summary_counts_every_table(self, store: InMemoryRowStore) -> None:
        store.insert("users", {"cognito_id": 1})

        summary = store.summary()

        assert list(summary) == TABLE_ORDER
        assert summary["users"] == 1
        assert summary["countries"] == 0
