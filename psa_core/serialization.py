"""Flatten entities into JSON-ready dicts."""

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any


def to_dict(obj: Any) -> dict:
    """Convert an entity to a flat dictionary.

    Parent entities are reduced to ``<field>_id`` keys holding the parent's
    id, enums to their values and datetimes to ISO 8601 strings.

    Parameters
    ----------
    obj : Any
        An entity dataclass, or an already flat dict.

    Returns
    -------
    dict
        Serialized dictionary.
    """
    if isinstance(obj, dict):
        return {key: serialize_value(value) for key, value in obj.items()}
    if not is_dataclass(obj):
        return {"value": str(obj)}

    result: dict[str, Any] = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        if is_dataclass(value):
            result[f"{f.name}_id"] = getattr(value, "id", None)
        else:
            result[f.name] = serialize_value(value)
    return result


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value
