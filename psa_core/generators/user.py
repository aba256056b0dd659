"""User command generator."""

from __future__ import annotations

import random
from typing import Iterator

from psa_core.commands import CreateUserCommand
from psa_core.generators.base import BaseGenerator


class UserGenerator(BaseGenerator):
    """Generate users with distinct identity-provider ids."""

    COGNITO_ID_RANGE = (100_000, 999_999_999)

    def __init__(self, seed: int | None = None, locale: str = "pt_BR") -> None:
        super().__init__(seed, locale)
        self._issued: set[int] = set()

    def generate(self) -> CreateUserCommand:
        """Generate a user command with a cognito id not issued before."""
        cognito_id = random.randint(*self.COGNITO_ID_RANGE)
        while cognito_id in self._issued:
            cognito_id = random.randint(*self.COGNITO_ID_RANGE)
        self._issued.add(cognito_id)
        return CreateUserCommand(cognito_id=cognito_id)

    def generate_batch(self, count: int) -> Iterator[CreateUserCommand]:
        for _ in range(count):
            yield self.generate()
