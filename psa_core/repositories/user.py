"""User repository."""

from __future__ import annotations

from concurrent.futures import Future

from psa_core.models import User
from psa_core.repositories.base import KeyedRepository
from psa_core.store.base import Row


class UserRepository(KeyedRepository[User]):
    table = "users"
    entity_name = "User"
    secondary_key = "cognito_id"

    def get_by_cognito_id(self, cognito_id: int) -> Future[User | None]:
        return self.get_by_secondary_key(cognito_id)

    def _to_row(self, entity: User) -> Row:
        return {"cognito_id": entity.cognito_id}

    def _hydrate(self, row: Row) -> User:
        return User(cognito_id=row["cognito_id"], id=row["id"])
