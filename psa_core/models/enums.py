"""Enumeration types shared by the public data shape."""

from enum import Enum


class Region(str, Enum):
    NORTE = "NORTE"
    NORDESTE = "NORDESTE"
    CENTRO_OESTE = "CENTRO_OESTE"
    SUDESTE = "SUDESTE"
    SUL = "SUL"


class Intensity(str, Enum):
    """Severity of an occurrence, from least to most severe."""

    LOW = "LOW"
    MODERATE = "MODERATE"
    HIGH = "HIGH"
    SEVERE = "SEVERE"
    CRITICAL = "CRITICAL"
