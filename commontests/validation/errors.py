"""
Argument error taxonomy.

Caller misuse is reported by raising one of two error kinds:

    - ArgumentTypeError: an argument has the wrong runtime kind
    - ArgumentRangeError: an argument is outside its valid domain

Both always carry the name of the function whose precondition failed.
Failures of the system under test are never raised; they are recorded
as failing assertion outcomes instead.
"""

from __future__ import annotations

TYPE_ERROR_MESSAGE = "Wrong argument type for function"
RANGE_ERROR_MESSAGE = "Argument out of range for function"


class ArgumentError(Exception):
    """Base class for argument validation errors."""

    base_message = "Invalid argument for function"

    def __init__(self, function: str, expectation: str | None = None):
        self.function = function
        self.expectation = expectation
        message = f"{self.base_message} {function}"
        if expectation:
            message = f"{message}: {expectation}"
        super().__init__(message)


class ArgumentTypeError(ArgumentError, TypeError):
    """An argument's runtime kind does not match the documented one."""

    base_message = TYPE_ERROR_MESSAGE


class ArgumentRangeError(ArgumentError, ValueError):
    """An argument's value is outside its valid domain."""

    base_message = RANGE_ERROR_MESSAGE
