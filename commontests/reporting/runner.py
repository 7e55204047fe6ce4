"""
Test runner host for assertion helpers.

The TestRunner is the host the assertion helpers register their named
test cases with. It records one outcome per registered check, groups
outcomes per request and carries the run-abort signal that tells the
caller to stop sending queued requests.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from ..assertions.models import AssertionOutcome, ExpectationFailed
from .models import RequestRecord, RequestStatus, RunReport

logger = logging.getLogger(__name__)

DEFAULT_REQUEST_ID = "default"


class TestRunner:
    """
    Records named assertion outcomes for a test run.

    Example:
        runner = TestRunner("items API")
        runner.start_request("list_items", "GET", url)
        test_common(response, runner, 200, "application/json")
        runner.finish_request(response)

        if runner.aborted:
            ...  # stop sending further requests

        report = runner.finish()
        print(report.summary())
    """

    __test__ = False  # not a pytest test class

    def __init__(self, name: str = ""):
        self.report = RunReport(name=name)
        self.report.start()
        self._current: RequestRecord | None = None

    # ─────────────────────────────────────────────────────────────────────
    # Test registration
    # ─────────────────────────────────────────────────────────────────────

    def test(self, description: str, check: Callable[[], object]) -> AssertionOutcome:
        """
        Run a zero-argument check and record it as a named test case.

        An AssertionError raised by the check is recorded as a failing
        outcome. Any other exception propagates to the caller.

        Args:
            description: Name of the test case
            check: Procedure that raises AssertionError on failure

        Returns:
            The recorded AssertionOutcome
        """
        try:
            check()
        except ExpectationFailed as e:
            outcome = AssertionOutcome.failed_outcome(
                description,
                e.message,
                expected=e.expected,
                actual=e.actual,
                details=e.details,
            )
        except AssertionError as e:
            outcome = AssertionOutcome.failed_outcome(description, str(e) or "Assertion failed")
        else:
            outcome = AssertionOutcome.passed_outcome(description)
        return self.record(outcome)

    def record(self, outcome: AssertionOutcome) -> AssertionOutcome:
        """Record a prebuilt outcome against the current request."""
        self._current_request().outcomes.append(outcome)
        if outcome.passed:
            logger.debug(f"PASS {outcome.description}")
        else:
            logger.info(f"FAIL {outcome.description}: {outcome.message}")
        return outcome

    # ─────────────────────────────────────────────────────────────────────
    # Abort signal
    # ─────────────────────────────────────────────────────────────────────

    def abort(self, reason: str) -> None:
        """Signal that queued requests should not be run. Only the first reason is kept."""
        if self.report.abort_reason is None:
            logger.warning(f"Aborting run: {reason}")
            self.report.abort_reason = reason

    @property
    def aborted(self) -> bool:
        return self.report.abort_reason is not None

    @property
    def abort_reason(self) -> str | None:
        return self.report.abort_reason

    # ─────────────────────────────────────────────────────────────────────
    # Requests
    # ─────────────────────────────────────────────────────────────────────

    def start_request(
        self,
        request_id: str,
        method: str | None = None,
        url: str | None = None,
    ) -> RequestRecord:
        """Start a new request; subsequent outcomes are recorded against it."""
        record = RequestRecord(request_id=request_id, method=method, url=url)
        record.start()
        self.report.add_request(record)
        self._current = record
        return record

    def finish_request(self, response=None) -> RequestRecord | None:
        """Complete the current request, storing the response status and timing."""
        record = self._current
        if record is None:
            return None
        if response is not None:
            record.response_status = response.status_code
            record.elapsed_ms = response.elapsed_ms
        record.complete()
        self._current = None
        return record

    def error_request(self, error_message: str) -> RequestRecord:
        """Complete the current request as errored (it could not be checked)."""
        record = self._current_request()
        record.error_message = error_message
        record.complete(RequestStatus.ERROR)
        self._current = None
        return record

    def skip_request(
        self,
        request_id: str,
        reason: str,
        method: str | None = None,
        url: str | None = None,
    ) -> RequestRecord:
        """Record a request that was not run."""
        record = RequestRecord(request_id=request_id, method=method, url=url, skip_reason=reason)
        record.complete(RequestStatus.SKIPPED)
        self.report.add_request(record)
        return record

    def _current_request(self) -> RequestRecord:
        if self._current is None:
            self.start_request(DEFAULT_REQUEST_ID)
        return self._current

    # ─────────────────────────────────────────────────────────────────────
    # Results
    # ─────────────────────────────────────────────────────────────────────

    @property
    def outcomes(self) -> list[AssertionOutcome]:
        return self.report.outcomes

    @property
    def passed(self) -> int:
        return sum(1 for o in self.outcomes if o.passed)

    @property
    def failed(self) -> int:
        return sum(1 for o in self.outcomes if o.failed)

    def finish(self) -> RunReport:
        """Complete any open request and the run, and return the report."""
        if self._current is not None:
            self.finish_request()
        self.report.complete()
        return self.report

    def save_json(self, path: str | Path) -> None:
        """Save the report to a JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.report.to_json())
