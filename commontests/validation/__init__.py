"""
Argument Validation

This package provides the kind detection and argument checks that run
before any assertion is registered.

Usage:
    from commontests.validation import Kind, check_kind, require

    require(check_kind(value, Kind.STRING, "check_location"))
"""

from .errors import (
    RANGE_ERROR_MESSAGE,
    TYPE_ERROR_MESSAGE,
    ArgumentError,
    ArgumentRangeError,
    ArgumentTypeError,
)
from .kinds import Kind, get_kind, is_array_of_objects, is_kind
from .validator import (
    STATUS_CODE_MAX,
    STATUS_CODE_MIN,
    ValidationResult,
    check_bounds,
    check_integer,
    check_kind,
    check_positive,
    check_status_code,
    require,
)

__all__ = [
    # Kinds
    "Kind",
    "get_kind",
    "is_kind",
    "is_array_of_objects",
    # Errors
    "ArgumentError",
    "ArgumentTypeError",
    "ArgumentRangeError",
    "TYPE_ERROR_MESSAGE",
    "RANGE_ERROR_MESSAGE",
    # Checks
    "ValidationResult",
    "check_kind",
    "check_integer",
    "check_status_code",
    "check_positive",
    "check_bounds",
    "require",
    "STATUS_CODE_MIN",
    "STATUS_CODE_MAX",
]
