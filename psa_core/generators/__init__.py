"""Faker-based generators of create commands."""

from psa_core.generators.address import AddressGenerator
from psa_core.generators.base import BaseGenerator
from psa_core.generators.occurrence import OccurrenceGenerator
from psa_core.generators.police_department import PoliceDepartmentGenerator
from psa_core.generators.user import UserGenerator

__all__ = [
    "AddressGenerator",
    "BaseGenerator",
    "OccurrenceGenerator",
    "PoliceDepartmentGenerator",
    "UserGenerator",
]
