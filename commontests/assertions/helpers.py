"""
Small helpers used while writing API tests.
"""

from __future__ import annotations

import random
import string
from typing import Any

from ..validation import (
    Kind,
    ValidationResult,
    check_bounds,
    check_integer,
    check_kind,
    is_array_of_objects,
    require,
)

CHARACTERS = string.ascii_uppercase + string.ascii_lowercase


def _plain_number(value: float) -> int | float:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def convert_time(time: Any) -> str:
    """
    Render a time in milliseconds in the largest fitting unit.

    Example:
        convert_time(999)   # "999ms"
        convert_time(1500)  # "1.5s"
    """
    require(check_kind(time, Kind.NUMBER, "convert_time"))
    if time >= 1000:
        return f"{_plain_number(time / 1000)}s"
    return f"{_plain_number(time)}ms"


def get_index_object_in_array(array: Any, property: Any, value: Any) -> int:
    """
    Get the index of the first object in an array whose property equals value.

    Args:
        array: List of objects to search
        property: Name of the property to match
        value: Value the property must have

    Returns:
        Index of the first matching object, or -1 if there is no match

    Raises:
        ArgumentTypeError: array is not a list of objects or property is not a string
    """
    if not is_array_of_objects(array):
        ValidationResult.type_error(
            "get_index_object_in_array", "array must be a list of objects"
        ).raise_for_error()
    require(check_kind(property, Kind.STRING, "get_index_object_in_array"))

    for index, item in enumerate(array):
        if property in item and item[property] == value:
            return index
    return -1


def generate_number(minimum: Any, maximum: Any) -> int:
    """
    Generate a random integer between minimum and maximum, both included.

    Raises:
        ArgumentTypeError: minimum or maximum is not an integer
        ArgumentRangeError: minimum is greater than maximum
    """
    require(
        check_integer(minimum, "generate_number"),
        check_integer(maximum, "generate_number"),
        check_bounds(minimum, maximum, "generate_number"),
    )
    return random.randint(int(minimum), int(maximum))


def generate_string(length: Any) -> str:
    """Generate a random string of ASCII letters of the given length."""
    require(check_integer(length, "generate_string"))
    if length < 0:
        ValidationResult.range_error(
            "generate_string", f"length must not be negative, got {length}"
        ).raise_for_error()
    return "".join(random.choice(CHARACTERS) for _ in range(int(length)))
