"""User model."""

from dataclasses import dataclass

from psa_core.exceptions import InvalidEntityError


@dataclass
class User:
    """Reporting user, identified by the identity provider subject id."""

    cognito_id: int  # unique
    id: int | None = None

    @classmethod
    def create(cls, cognito_id: int) -> "User":
        """Validate creation input and build an unsaved user."""
        if isinstance(cognito_id, bool) or not isinstance(cognito_id, int) or cognito_id <= 0:
            raise InvalidEntityError(f"Cognito id must be a positive integer, got {cognito_id!r}")
        return cls(cognito_id=cognito_id)
