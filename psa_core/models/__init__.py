"""Domain models for public-safety incident reporting."""

from psa_core.models.enums import Intensity, Region
from psa_core.models.geo import Address, City, Country, State
from psa_core.models.occurrence import Occurrence
from psa_core.models.police_department import PoliceDepartment
from psa_core.models.user import User

__all__ = [
    "Address",
    "City",
    "Country",
    "Intensity",
    "Occurrence",
    "PoliceDepartment",
    "Region",
    "State",
    "User",
]
