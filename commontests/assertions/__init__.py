"""
Assertion Helpers for HTTP Responses

This package provides reusable checks for captured HTTP responses.
Each check registers one named test case with a TestRunner.

Supported checks:
    - status code: labelled by class, aborts the run on infrastructure errors
    - content type: Content-Type header includes the expected value
    - time: response arrived below a time limit
    - JSON schema: body conforms to a draft 7 schema
    - location: Location header equals the expected value

Usage:
    from commontests.assertions import test_common_and_time
    from commontests.reporting import TestRunner
    from commontests.schemas import get_schema_hal

    runner = TestRunner()
    test_common_and_time(
        response, runner, 200, 500, "application/json", get_schema_hal(item_schema)
    )
    for outcome in runner.outcomes:
        print(outcome)
"""

# Models
from .models import AssertionOutcome, AssertionStatus, ExpectationFailed, RunDecision

# Checks
from .engine import (
    INFRASTRUCTURE_STATUS_CODES,
    ResponseChecks,
    # Convenience functions
    check_content_type,
    check_json_schema,
    check_location,
    check_status_code,
    check_time,
    log_response_body,
    status_code_description,
)

# Composites
from .composite import test_common, test_common_and_time

# Helpers
from .helpers import convert_time, generate_number, generate_string, get_index_object_in_array

__all__ = [
    # Models
    "AssertionOutcome",
    "AssertionStatus",
    "ExpectationFailed",
    "RunDecision",
    # Checks
    "ResponseChecks",
    "INFRASTRUCTURE_STATUS_CODES",
    "status_code_description",
    "check_status_code",
    "check_content_type",
    "check_time",
    "check_json_schema",
    "check_location",
    "log_response_body",
    # Composites
    "test_common",
    "test_common_and_time",
    # Helpers
    "convert_time",
    "get_index_object_in_array",
    "generate_number",
    "generate_string",
]
