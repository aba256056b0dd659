"""Address command generator."""

from __future__ import annotations

import random
from typing import Iterator, Sequence

from psa_core.commands import CreateAddressCommand
from psa_core.generators.base import BaseGenerator


class AddressGenerator(BaseGenerator):
    """Generate Brazilian street addresses inside existing cities."""

    COMPLEMENTS = ["Apto {n}", "Casa {n}", "Sala {n}", "Bloco {n}", "Loja {n}", "Fundos"]

    def generate(self, city_id: int) -> CreateAddressCommand:
        """Generate a command for one address in ``city_id``."""
        return CreateAddressCommand(
            street=self.fake.street_name(),
            number=str(self.fake.building_number()),
            complement=random.choice(self.COMPLEMENTS).format(n=random.randint(1, 300)),
            neighborhood=self.fake.bairro(),
            city_id=city_id,
        )

    def generate_batch(self, count: int, city_ids: Sequence[int]) -> Iterator[CreateAddressCommand]:
        """Generate ``count`` address commands spread over ``city_ids``.

        Parameters
        ----------
        count : int
            Number of addresses to generate.
        city_ids : Sequence[int]
            Ids of persisted cities to pick from.

        Yields
        ------
        CreateAddressCommand
            Generated commands.
        """
        for _ in range(count):
            yield self.generate(random.choice(city_ids))
