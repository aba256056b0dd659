"""Create commands and their handlers."""

from psa_core.commands.base import CommandHandler
from psa_core.commands.geo import (
    CreateAddressCommand,
    CreateAddressCommandHandler,
    CreateCityCommand,
    CreateCityCommandHandler,
    CreateCountryCommand,
    CreateCountryCommandHandler,
    CreateStateCommand,
    CreateStateCommandHandler,
)
from psa_core.commands.occurrence import CreateOccurrenceCommand, CreateOccurrenceCommandHandler
from psa_core.commands.police_department import (
    CreatePoliceDepartmentCommand,
    CreatePoliceDepartmentCommandHandler,
)
from psa_core.commands.user import CreateUserCommand, CreateUserCommandHandler

__all__ = [
    "CommandHandler",
    "CreateAddressCommand",
    "CreateAddressCommandHandler",
    "CreateCityCommand",
    "CreateCityCommandHandler",
    "CreateCountryCommand",
    "CreateCountryCommandHandler",
    "CreateOccurrenceCommand",
    "CreateOccurrenceCommandHandler",
    "CreatePoliceDepartmentCommand",
    "CreatePoliceDepartmentCommandHandler",
    "CreateStateCommand",
    "CreateStateCommandHandler",
    "CreateUserCommand",
    "CreateUserCommandHandler",
]
