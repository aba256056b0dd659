"""Police department command generator."""

from __future__ import annotations

import random

from psa_core.commands import CreatePoliceDepartmentCommand
from psa_core.generators.base import BaseGenerator


class PoliceDepartmentGenerator(BaseGenerator):
    """Generate OpenStreetMap-like police facilities.

    Coordinates fall inside Brazil's bounding box and are formatted with six
    decimals, the way Overpass exports them.
    """

    OPERATORS = ["Polícia Civil", "Polícia Militar", "Polícia Federal"]
    OPERATOR_WEIGHTS = [0.60, 0.35, 0.05]
    OSM_TYPES = ["node", "way"]

    # Brazil bounding box
    LATITUDE_RANGE = (-33.75, 5.27)
    LONGITUDE_RANGE = (-73.99, -34.79)

    def __init__(self, seed: int | None = None, locale: str = "pt_BR") -> None:
        super().__init__(seed, locale)
        self._issued: set[str] = set()
        self._sequence = 0

    def generate(self, address_id: int) -> CreatePoliceDepartmentCommand:
        """Generate a police department command located at ``address_id``."""
        self._sequence += 1
        operator = random.choices(self.OPERATORS, weights=self.OPERATOR_WEIGHTS, k=1)[0]
        if operator == "Polícia Civil":
            name, short_name = f"{self._sequence}º Distrito Policial", f"{self._sequence}º DP"
        else:
            bairro = self.fake.bairro()
            name, short_name = f"Delegacia {bairro}", f"DP {bairro}"

        return CreatePoliceDepartmentCommand(
            overpass_id=self._next_overpass_id(),
            name=name,
            short_name=short_name,
            operator=operator,
            ownership="public",
            phone=self.fake.phone_number(),
            email=self.fake.email(),
            latitude=f"{random.uniform(*self.LATITUDE_RANGE):.6f}",
            longitude=f"{random.uniform(*self.LONGITUDE_RANGE):.6f}",
            address_id=address_id,
        )

    def _next_overpass_id(self) -> str:
        overpass_id = f"{random.choice(self.OSM_TYPES)}/{random.randint(10**8, 10**10)}"
        while overpass_id in self._issued:
            overpass_id = f"{random.choice(self.OSM_TYPES)}/{random.randint(10**8, 10**10)}"
        self._issued.add(overpass_id)
        return overpass_id
