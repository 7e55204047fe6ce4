"""
Assertion checks for captured HTTP responses.

Each check validates its argument first and then registers exactly one
named test case with the runner. Invalid arguments raise an
ArgumentTypeError or ArgumentRangeError and register nothing; a response
that does not meet the expectation is recorded as a failing outcome.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from jsonschema import Draft7Validator
from jsonschema.exceptions import SchemaError, best_match

from ..validation import (
    Kind,
    ValidationResult,
    check_kind,
    check_positive,
    require,
)
from ..validation import check_status_code as validate_status_code
from .helpers import convert_time
from .models import AssertionOutcome, ExpectationFailed, RunDecision

if TYPE_CHECKING:
    from ..reporting import TestRunner
    from ..transport import Response

logger = logging.getLogger(__name__)

# Responses that point at infrastructure problems rather than at the
# endpoint under test; further requests are pointless after one of these.
INFRASTRUCTURE_STATUS_CODES = frozenset({500, 502, 503, 504, 401, 403})

STATUS_CLASSES = {
    1: "Information",
    2: "Success",
    3: "Redirection",
    4: "Client Error",
    5: "Server Error",
}


def status_code_description(status_code: int) -> str:
    """
    Get the test case name for a status code, e.g. "Status Code (Success)".

    Raises:
        ArgumentTypeError: status_code is not an integer
        ArgumentRangeError: status_code is not between 100 and 599
    """
    require(validate_status_code(status_code, "check_status_code"))
    return f"Status Code ({STATUS_CLASSES[int(status_code) // 100]})"


def schema_error_path(error) -> str:
    """Render the location of a jsonschema error as a data path like "/items/0/id"."""
    if not error.absolute_path:
        return "/"
    return "/" + "/".join(str(part) for part in error.absolute_path)


class ResponseChecks:
    """
    Checks bound to one response and one runner.

    Example:
        checks = ResponseChecks(response, runner)
        decision = checks.check_status_code(200)
        checks.check_content_type("application/json")
        checks.check_json_schema(get_schema_hal(item_schema))
        checks.check_time(500)
    """

    def __init__(self, response: Response, runner: TestRunner):
        self.response = response
        self.runner = runner

    def check_status_code(self, status_code: Any) -> RunDecision:
        """
        Check that the response has the expected status code.

        When the actual status differs from the expected one and is an
        infrastructure status (401, 403, 500, 502, 503, 504), the runner
        is told to abort the remaining queued requests.

        Args:
            status_code: Expected status code (100-599)

        Returns:
            RunDecision.ABORT if the abort signal was raised, else CONTINUE
        """
        description = status_code_description(status_code)
        actual = self.response.status_code

        def check() -> None:
            if actual != status_code:
                raise ExpectationFailed(
                    f"expected response to have status code {status_code} but got {actual}",
                    expected=status_code,
                    actual=actual,
                )

        self.runner.test(description, check)

        if actual != status_code and actual in INFRASTRUCTURE_STATUS_CODES:
            self.runner.abort(
                f"status {actual} returned where {status_code} was expected"
            )
            return RunDecision.ABORT
        return RunDecision.CONTINUE

    def check_content_type(self, content_type: Any) -> AssertionOutcome:
        """Check that the Content-Type header includes the expected value."""
        require(check_kind(content_type, Kind.STRING, "check_content_type"))
        actual = self.response.header("Content-Type")

        def check() -> None:
            if actual is None:
                raise ExpectationFailed(
                    "expected response to have header Content-Type",
                    expected=content_type,
                )
            if content_type not in actual:
                raise ExpectationFailed(
                    f"expected {actual!r} to include {content_type!r}",
                    expected=content_type,
                    actual=actual,
                )

        return self.runner.test("Content Type", check)

    def check_time(self, time: Any) -> AssertionOutcome:
        """
        Check that the response arrived in less than the given time.

        Args:
            time: Maximum elapsed time in milliseconds, strictly positive
        """
        require(check_positive(time, "check_time"))
        actual = self.response.elapsed_ms

        def check() -> None:
            if not actual < time:
                raise ExpectationFailed(
                    f"expected {actual:.0f}ms to be below {time}ms",
                    expected=f"< {time}ms",
                    actual=f"{actual:.0f}ms",
                )

        return self.runner.test(f"Response Time < {convert_time(time)}", check)

    def check_json_schema(self, json_schema: Any) -> AssertionOutcome:
        """
        Check that the response body conforms to a JSON schema (draft 7).

        The test case name carries the validator's message and the failing
        data path, e.g. "JSON Schema ('id' is a required property for data path /items/0)".
        """
        require(check_kind(json_schema, Kind.OBJECT, "check_json_schema"))
        try:
            Draft7Validator.check_schema(json_schema)
        except SchemaError as e:
            ValidationResult.range_error(
                "check_json_schema", f"invalid JSON schema: {e.message}"
            ).raise_for_error()

        try:
            document = self.response.json()
        except ValueError as e:
            message = f"response body is not valid JSON: {e}"
            return self.runner.record(
                AssertionOutcome.failed_outcome(f"JSON Schema ({message})", message)
            )

        errors = list(Draft7Validator(json_schema).iter_errors(document))
        if not errors:
            return self.runner.test("JSON Schema", lambda: None)

        first = best_match(errors)
        data_path = schema_error_path(first)
        logger.debug(f"JSON schema violations: {[e.message for e in errors]}")

        def check() -> None:
            raise ExpectationFailed(
                first.message,
                details={"data_path": data_path, "error_count": len(errors)},
            )

        return self.runner.test(f"JSON Schema ({first.message} for data path {data_path})", check)

    def check_location(self, location: Any) -> AssertionOutcome:
        """Check that the Location header equals the expected value."""
        require(check_kind(location, Kind.STRING, "check_location"))
        actual = self.response.header("Location")

        def check() -> None:
            if actual != location:
                raise ExpectationFailed(
                    f"expected response to have header Location with value {location!r}",
                    expected=location,
                    actual=actual,
                )

        return self.runner.test("Location", check)

    def log_response_body(self) -> AssertionOutcome | None:
        """
        Record the response body as a passing test case so it shows up in reports.

        Nothing is recorded for an empty body.
        """
        body = self.response.text
        if not body:
            return None
        logger.debug(f"Response body: {body}")
        return self.runner.test(f"Response Body: {body}", lambda: None)


# Convenience functions taking the response and runner explicitly
def check_status_code(response: Response, runner: TestRunner, status_code: Any) -> RunDecision:
    """Check the response status code."""
    return ResponseChecks(response, runner).check_status_code(status_code)


def check_content_type(response: Response, runner: TestRunner, content_type: Any) -> AssertionOutcome:
    """Check the response Content-Type header."""
    return ResponseChecks(response, runner).check_content_type(content_type)


def check_time(response: Response, runner: TestRunner, time: Any) -> AssertionOutcome:
    """Check the response elapsed time."""
    return ResponseChecks(response, runner).check_time(time)


def check_json_schema(response: Response, runner: TestRunner, json_schema: Any) -> AssertionOutcome:
    """Check the response body against a JSON schema."""
    return ResponseChecks(response, runner).check_json_schema(json_schema)


def check_location(response: Response, runner: TestRunner, location: Any) -> AssertionOutcome:
    """Check the response Location header."""
    return ResponseChecks(response, runner).check_location(location)


def log_response_body(response: Response, runner: TestRunner) -> AssertionOutcome | None:
    """Record the response body as a test case."""
    return ResponseChecks(response, runner).log_response_body()
