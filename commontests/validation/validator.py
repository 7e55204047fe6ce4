"""
Argument validation for assertion helpers.

The predicates in this module never raise. Each one returns a
ValidationResult which is either valid or carries the ArgumentError
that the calling function should raise.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .errors import ArgumentError, ArgumentRangeError, ArgumentTypeError
from .kinds import Kind, get_kind

STATUS_CODE_MIN = 100
STATUS_CODE_MAX = 599


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of an argument check."""
    error: ArgumentError | None = None

    @property
    def is_valid(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        """Raise the carried error, if any."""
        if self.error is not None:
            raise self.error

    def __bool__(self) -> bool:
        return self.is_valid

    @classmethod
    def ok(cls) -> ValidationResult:
        return _OK

    @classmethod
    def type_error(cls, function: str, expectation: str) -> ValidationResult:
        return cls(ArgumentTypeError(function, expectation))

    @classmethod
    def range_error(cls, function: str, expectation: str) -> ValidationResult:
        return cls(ArgumentRangeError(function, expectation))


_OK = ValidationResult()


def check_kind(
    value: Any,
    kind: Kind,
    function: str,
    expectation: str | None = None,
) -> ValidationResult:
    """
    Check that a value has the expected kind.

    Args:
        value: The argument to check
        kind: The expected Kind
        function: Name of the function whose precondition this is
        expectation: Optional override for the error text

    Returns:
        ValidationResult, invalid with an ArgumentTypeError on mismatch
    """
    if get_kind(value) == kind:
        return ValidationResult.ok()
    return ValidationResult.type_error(
        function,
        expectation or f"expected {kind.value}, got {get_kind(value).value}",
    )


def check_integer(value: Any, function: str) -> ValidationResult:
    """Check that a value is an integral number."""
    result = check_kind(value, Kind.NUMBER, function)
    if not result:
        return result
    if isinstance(value, float) and not value.is_integer():
        return ValidationResult.type_error(function, f"expected an integer, got {value!r}")
    return ValidationResult.ok()


def check_status_code(value: Any, function: str) -> ValidationResult:
    """Check that a value is an existing HTTP status code (100-599)."""
    result = check_integer(value, function)
    if not result:
        return result
    if not STATUS_CODE_MIN <= value <= STATUS_CODE_MAX:
        return ValidationResult.range_error(
            function,
            f"status code must be between {STATUS_CODE_MIN} and {STATUS_CODE_MAX}, got {value}",
        )
    return ValidationResult.ok()


def check_positive(value: Any, function: str) -> ValidationResult:
    """Check that a value is a strictly positive number."""
    result = check_kind(value, Kind.NUMBER, function)
    if not result:
        return result
    if value <= 0:
        return ValidationResult.range_error(
            function, f"expected a strictly positive number, got {value}"
        )
    return ValidationResult.ok()


def check_bounds(minimum: Any, maximum: Any, function: str) -> ValidationResult:
    """Check that minimum and maximum are numbers with minimum <= maximum."""
    for value in (minimum, maximum):
        result = check_kind(value, Kind.NUMBER, function)
        if not result:
            return result
    if minimum > maximum:
        return ValidationResult.range_error(
            function, f"minimum {minimum} must not be greater than maximum {maximum}"
        )
    return ValidationResult.ok()


def require(*results: ValidationResult) -> None:
    """Raise the first error among the given results."""
    for result in results:
        result.raise_for_error()
