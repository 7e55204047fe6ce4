"""
Composite checks combining the common per-response assertions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .engine import ResponseChecks
from .models import RunDecision

if TYPE_CHECKING:
    from ..reporting import TestRunner
    from ..transport import Response


def test_common(
    response: Response,
    runner: TestRunner,
    status_code: Any = None,
    content_type: Any = None,
    json_schema: Any = None,
    location: Any = None,
    *,
    gate_on_status: bool = True,
    log_body: bool = False,
) -> RunDecision:
    """
    Check the commonly used aspects of a response.

    The status code is checked whenever it is given. The content type,
    JSON schema and Location checks run only for the arguments that are
    given and, with ``gate_on_status`` (the default), only when the
    response has the expected status.

    Args:
        response: The captured response
        runner: Runner the test cases are registered with
        status_code: Expected status code
        content_type: Expected Content-Type (substring match)
        json_schema: JSON schema of the response body
        location: Expected Location header
        gate_on_status: Skip the secondary checks on a status mismatch
        log_body: Also record the response body as a test case

    Returns:
        RunDecision.ABORT when the status check raised the abort signal
    """
    checks = ResponseChecks(response, runner)
    if log_body:
        checks.log_response_body()

    decision = RunDecision.CONTINUE
    if status_code is not None:
        decision = checks.check_status_code(status_code)

    if gate_on_status and status_code is not None and response.status_code != status_code:
        return decision

    if content_type is not None:
        checks.check_content_type(content_type)
    if json_schema is not None:
        checks.check_json_schema(json_schema)
    if location is not None:
        checks.check_location(location)
    return decision


test_common.__test__ = False


def test_common_and_time(
    response: Response,
    runner: TestRunner,
    status_code: Any = None,
    time: Any = None,
    content_type: Any = None,
    json_schema: Any = None,
    location: Any = None,
    *,
    gate_on_status: bool = True,
    log_body: bool = False,
) -> RunDecision:
    """Run test_common and, when a time is given, the response time check."""
    decision = test_common(
        response,
        runner,
        status_code,
        content_type,
        json_schema,
        location,
        gate_on_status=gate_on_status,
        log_body=log_body,
    )
    if time is not None:
        ResponseChecks(response, runner).check_time(time)
    return decision


test_common_and_time.__test__ = False
