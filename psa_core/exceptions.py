"""Custom exception hierarchy for psa-core."""


class PsaError(Exception):
    """Base exception for all psa-core errors."""


class EntityNotFoundError(PsaError):
    """Raised when an operation addresses an id that does not exist."""


class ParentNotFoundError(EntityNotFoundError):
    """Raised when a create command references a parent that does not exist."""


class ConstraintViolationError(PsaError):
    """Raised when a write would duplicate a unique secondary key."""


class InvalidEntityError(PsaError):
    """Raised when entity input is invalid for the requested operation."""


class ConfigurationError(PsaError):
    """Raised when configuration is invalid or missing."""


class StorageError(PsaError):
    """Raised when stored rows break referential integrity."""
