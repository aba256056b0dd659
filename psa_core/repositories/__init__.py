"""Asynchronous repositories, one per entity."""

from psa_core.repositories.base import KeyedRepository, Repository
from psa_core.repositories.geo import (
    AddressRepository,
    CityRepository,
    CountryRepository,
    StateRepository,
)
from psa_core.repositories.occurrence import OccurrenceRepository
from psa_core.repositories.police_department import PoliceDepartmentRepository
from psa_core.repositories.user import UserRepository

__all__ = [
    "AddressRepository",
    "CityRepository",
    "CountryRepository",
    "KeyedRepository",
    "OccurrenceRepository",
    "PoliceDepartmentRepository",
    "Repository",
    "StateRepository",
    "UserRepository",
]
