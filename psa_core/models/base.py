"""Validation helpers used by the entity factories."""

from typing import Any

from psa_core.exceptions import InvalidEntityError


def require_text(value: str | None, label: str) -> str:
    """Return ``value`` stripped, rejecting ``None`` and blank strings."""
    if value is None or not str(value).strip():
        raise InvalidEntityError(f"{label} cannot be null or empty")
    return str(value).strip()


def require_present(value: Any, label: str) -> Any:
    """Return ``value``, rejecting ``None``."""
    if value is None:
        raise InvalidEntityError(f"{label} cannot be null")
    return value


def require_persisted(parent: Any, label: str) -> Any:
    """Return ``parent``, rejecting ``None`` and parents without an id."""
    require_present(parent, label)
    if getattr(parent, "id", None) is None:
        raise InvalidEntityError(f"{label} must be persisted before it can be referenced")
    return parent


def coerce_enum(enum_cls: type, value: Any, label: str) -> Any:
    """Return ``value`` as a member of ``enum_cls``, accepting raw values."""
    require_present(value, label)
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise InvalidEntityError(f"{label} must be one of {allowed}, got {value!r}") from None
