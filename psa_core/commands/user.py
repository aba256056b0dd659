"""Create command for users."""

from __future__ import annotations

from concurrent.futures import Future
from dataclasses import dataclass

from psa_core.commands.base import CommandHandler, log_created
from psa_core.futures import completed, then
from psa_core.models import User
from psa_core.repositories import UserRepository


@dataclass(frozen=True)
class CreateUserCommand:
    cognito_id: int


class CreateUserCommandHandler(CommandHandler[CreateUserCommand, User]):
    def __init__(self, users: UserRepository) -> None:
        self._users = users

    def handle(self, command: CreateUserCommand) -> Future[User]:
        def _add(command: CreateUserCommand) -> Future[User]:
            return self._users.add(User.create(command.cognito_id))

        return log_created(then(completed(command), _add), "User")
