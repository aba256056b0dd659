"""Tests for the exception hierarchy."""

import pytest

from psa_core.exceptions import (
    ConfigurationError,
    ConstraintViolationError,
    EntityNotFoundError,
    InvalidEntityError,
    ParentNotFoundError,
    PsaError,
    StorageError,
)


class TestExceptionHierarchy:
    """Tests for exception inheritance."""

    @pytest.mark.parametrize(
        "exc_class",
        [
            EntityNotFoundError,
            ParentNotFoundError,
            ConstraintViolationError,
            InvalidEntityError,
            ConfigurationError,
            StorageError,
        ],
    )
    def test_all_derive_from_psa_error(self, exc_class: type) -> None:
        """Every custom exception is a PsaError."""
        assert issubclass(exc_class, PsaError)

    def test_parent_not_found_is_not_found(self) -> None:
        """A missing parent is a specialisation of a missing entity."""
        assert issubclass(ParentNotFoundError, EntityNotFoundError)

    def test_constraint_violation_is_not_a_not_found(self) -> None:
        """Duplicates and absences are distinct kinds."""
        assert not issubclass(ConstraintViolationError, EntityNotFoundError)

    def test_catch_by_base(self) -> None:
        """Catching PsaError catches derived errors."""
        with pytest.raises(PsaError, match="Address with ID 7 not found"):
            raise ParentNotFoundError("Address with ID 7 not found")
