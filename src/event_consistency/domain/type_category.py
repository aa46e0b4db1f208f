"""
JSON type categories used for per-field type comparison.

Categories are deliberately coarse: they tell a number from a string or an
array from an object, nothing finer.
"""

from enum import Enum
from typing import Any, Mapping


class _Missing:
    """Sentinel type for a field that is absent from an event record."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


class TypeCategory(Enum):
    """Coarse kind of a JSON value."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    OBJECT = "object"
    ARRAY = "array"
    UNDEFINED = "undefined"

    def __str__(self) -> str:
        return self.value


def categorize(value: Any) -> TypeCategory:
    """
    Return the type category of a parsed JSON value.

    bool is checked before numbers since it subclasses int. Python objects
    that have no JSON counterpart fall into OBJECT.

    Args:
        value: Value taken from an event record, or MISSING

    Returns:
        TypeCategory of the value
    """
    if value is MISSING:
        return TypeCategory.UNDEFINED
    if value is None:
        return TypeCategory.NULL
    if isinstance(value, bool):
        return TypeCategory.BOOLEAN
    if isinstance(value, (int, float)):
        return TypeCategory.NUMBER
    if isinstance(value, str):
        return TypeCategory.STRING
    if isinstance(value, Mapping):
        return TypeCategory.OBJECT
    if isinstance(value, (list, tuple)):
        return TypeCategory.ARRAY
    return TypeCategory.OBJECT


def field_category(event: Mapping[str, Any], key: str) -> TypeCategory:
    """Type category of event[key], UNDEFINED when the key is absent."""
    return categorize(event.get(key, MISSING))
