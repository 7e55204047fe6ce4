"""
Runtime kind detection.

This module classifies arbitrary values into a small closed set of
kinds so argument checks can tell arrays, objects, nulls and errors
apart.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any


class Kind(str, Enum):
    """Runtime classification of a value."""
    NUMBER = "Number"
    STRING = "String"
    BOOLEAN = "Boolean"
    OBJECT = "Object"
    ARRAY = "Array"
    NULL = "Null"
    ERROR = "Error"
    OTHER = "Other"


def get_kind(value: Any) -> Kind:
    """
    Get the kind of the provided value.

    Booleans are checked before numbers because ``bool`` is a subclass
    of ``int`` in Python.

    Args:
        value: Any possible value

    Returns:
        The Kind of the value
    """
    if value is None:
        return Kind.NULL
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if isinstance(value, (int, float)):
        return Kind.NUMBER
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, Mapping):
        return Kind.OBJECT
    if isinstance(value, (list, tuple)):
        return Kind.ARRAY
    if isinstance(value, BaseException):
        return Kind.ERROR
    return Kind.OTHER


def is_kind(value: Any, kind: Kind) -> bool:
    """Check whether a value is of the given kind. Never raises."""
    return get_kind(value) == kind


def is_array_of_objects(value: Any) -> bool:
    """Check whether a value is an array whose every element is an object."""
    return is_kind(value, Kind.ARRAY) and all(is_kind(item, Kind.OBJECT) for item in value)
