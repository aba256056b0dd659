"""Occurrence command generator."""

from __future__ import annotations

import random
from datetime import datetime, timedelta, timezone

from psa_core.commands import CreateOccurrenceCommand
from psa_core.generators.base import BaseGenerator
from psa_core.models import Intensity


class OccurrenceGenerator(BaseGenerator):
    """Generate incident reports over the last week.

    Roughly 40% of generated occurrences are still active; closed ones get a
    ``date_end`` after ``date_start`` and an update at closing time.
    """

    INCIDENT_TYPES = [
        "Acidente de Trânsito",
        "Alagamento",
        "Assalto",
        "Furto de Veículo",
        "Incêndio",
        "Queda de Árvore",
        "Queda de Energia",
        "Perturbação do Sossego",
        "Deslizamento de Terra",
        "Manifestação",
    ]
    INTENSITIES = list(Intensity)
    INTENSITY_WEIGHTS = [0.30, 0.35, 0.20, 0.10, 0.05]
    ACTIVE_RATE = 0.40
    MAX_AGE = timedelta(days=7)

    def generate(
        self,
        address_id: int,
        user_id: int,
        now: datetime | None = None,
    ) -> CreateOccurrenceCommand:
        """Generate an occurrence command at ``address_id`` reported by ``user_id``.

        Parameters
        ----------
        address_id : int
            Id of a persisted address.
        user_id : int
            Id of a persisted user.
        now : datetime | None
            Reference time, timezone-aware. Defaults to the current UTC time.

        Returns
        -------
        CreateOccurrenceCommand
            Generated command.
        """
        now = now or datetime.now(timezone.utc)
        name = random.choice(self.INCIDENT_TYPES)
        age = timedelta(minutes=random.randint(0, int(self.MAX_AGE.total_seconds() // 60)))
        date_start = now - age
        active = random.random() < self.ACTIVE_RATE

        if active:
            date_end = None
            date_update = date_start + (now - date_start) * random.random()
        else:
            date_end = date_start + (now - date_start) * random.random()
            date_update = date_end

        return CreateOccurrenceCommand(
            name=name,
            description=f"{name} reportado no bairro {self.fake.bairro()}. {self.fake.sentence()}",
            date_start=date_start,
            date_end=date_end,
            date_update=date_update,
            active=active,
            intensity=random.choices(self.INTENSITIES, weights=self.INTENSITY_WEIGHTS, k=1)[0],
            address_id=address_id,
            user_id=user_id,
        )
