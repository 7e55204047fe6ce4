"""
Assertion outcome models.

This module defines the named pass/fail records produced by the
assertion helpers, including detailed failure information.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class AssertionStatus(str, Enum):
    """Status of an assertion check."""
    PASSED = "passed"
    FAILED = "failed"


class RunDecision(str, Enum):
    """Whether the host runner should keep running queued requests."""
    CONTINUE = "continue"
    ABORT = "abort"


class ExpectationFailed(AssertionError):
    """An expectation about the response did not hold."""

    def __init__(
        self,
        message: str,
        expected: Any = None,
        actual: Any = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.expected = expected
        self.actual = actual
        self.details = details or {}


@dataclass
class AssertionOutcome:
    """
    Result of a single named check.

    Attributes:
        description: Name of the test case, e.g. "Status Code (Success)"
        status: Whether the check passed or failed
        message: Failure detail (empty when passed)
        expected: What was expected
        actual: What was actually found
        details: Additional context for debugging
    """
    description: str
    status: AssertionStatus
    message: str = ""
    expected: Any = None
    actual: Any = None
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def passed(self) -> bool:
        return self.status == AssertionStatus.PASSED

    @property
    def failed(self) -> bool:
        return self.status == AssertionStatus.FAILED

    def __str__(self) -> str:
        """Format as a human-readable string."""
        if self.passed:
            return f"✅ PASS: {self.description}"

        lines = [f"❌ FAIL: {self.description}"]
        if self.message:
            lines.append(f"   {self.message}")
        if self.expected is not None:
            lines.append(f"   Expected: {_format_value(self.expected)}")
        if self.actual is not None:
            lines.append(f"   Actual:   {_format_value(self.actual)}")
        for key, value in self.details.items():
            lines.append(f"   {key}: {_format_value(value)}")
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "status": self.status.value,
            "message": self.message,
            "expected": _safe_serialize(self.expected),
            "actual": _safe_serialize(self.actual),
            "details": {k: _safe_serialize(v) for k, v in self.details.items()},
        }

    @classmethod
    def passed_outcome(cls, description: str, actual: Any = None) -> AssertionOutcome:
        """Create a passing outcome."""
        return cls(description=description, status=AssertionStatus.PASSED, actual=actual)

    @classmethod
    def failed_outcome(
        cls,
        description: str,
        message: str,
        expected: Any = None,
        actual: Any = None,
        details: dict[str, Any] | None = None,
    ) -> AssertionOutcome:
        """Create a failing outcome."""
        return cls(
            description=description,
            status=AssertionStatus.FAILED,
            message=message,
            expected=expected,
            actual=actual,
            details=details or {},
        )


def _format_value(value: Any, max_length: int = 100) -> str:
    """Format a value for display, truncating if too long."""
    if isinstance(value, (list, dict)):
        try:
            formatted = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError):
            formatted = repr(value)
    else:
        formatted = repr(value)

    if len(formatted) > max_length:
        return formatted[: max_length - 3] + "..."
    return formatted


def _safe_serialize(value: Any) -> Any:
    """Safely serialize a value, handling non-JSON types."""
    if value is None:
        return None
    try:
        json.dumps(value)
        return value
    except (TypeError, ValueError):
        return str(value)
