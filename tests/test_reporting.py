import json

import pytest

from commontests.assertions import AssertionStatus, ExpectationFailed
from commontests.reporting import RequestStatus, RunStatus, TestRunner


class TestTestRunner:
    """Unit tests for the test registration host."""

    def test_passing_check(self, runner):
        outcome = runner.test("always", lambda: None)
        assert outcome.status == AssertionStatus.PASSED
        assert runner.outcomes == [outcome]

    def test_assertion_error_is_a_failed_outcome(self, runner):
        def check():
            assert 1 == 2, "numbers differ"

        outcome = runner.test("numbers", check)
        assert outcome.failed
        assert "numbers differ" in outcome.message

    def test_expectation_failed_keeps_details(self, runner):
        def check():
            raise ExpectationFailed("wrong", expected=1, actual=2, details={"k": "v"})

        outcome = runner.test("detailed", check)
        assert outcome.failed
        assert (outcome.expected, outcome.actual, outcome.details) == (1, 2, {"k": "v"})

    def test_other_exceptions_propagate(self, runner):
        def check():
            raise KeyError("boom")

        with pytest.raises(KeyError):
            runner.test("broken", check)
        assert runner.outcomes == []

    def test_abort_keeps_first_reason(self, runner):
        assert not runner.aborted
        runner.abort("first")
        runner.abort("second")
        assert runner.aborted
        assert runner.abort_reason == "first"

    def test_outcomes_grouped_per_request(self, runner, make_response):
        runner.start_request("one", "GET", "https://api.example.com/a")
        runner.test("a", lambda: None)
        runner.finish_request(make_response(status_code=200, elapsed_ms=10))
        runner.start_request("two", "GET", "https://api.example.com/b")
        runner.test("b", lambda: None)
        runner.finish_request()

        report = runner.finish()
        assert [r.request_id for r in report.requests] == ["one", "two"]
        assert report.requests[0].response_status == 200
        assert report.requests[0].elapsed_ms == 10
        assert report.requests[0].status == RequestStatus.PASSED

    def test_outcomes_without_request_use_default(self, runner):
        runner.test("loose", lambda: None)
        report = runner.finish()
        assert report.requests[0].request_id == "default"


class TestRunReport:
    """Unit tests for run report status and serialization."""

    def test_passed(self, runner):
        runner.test("ok", lambda: None)
        report = runner.finish()
        assert report.status == RunStatus.PASSED
        assert (report.total_tests, report.passed_tests, report.failed_tests) == (1, 1, 0)

    def test_failed(self, runner):
        def check():
            raise AssertionError("no")

        runner.test("ok", lambda: None)
        runner.test("bad", check)
        report = runner.finish()
        assert report.status == RunStatus.FAILED
        assert report.failed_tests == 1

    def test_error_request(self, runner):
        runner.start_request("down", "GET", "https://api.example.com")
        runner.error_request("Connection failed")
        report = runner.finish()
        assert report.status == RunStatus.ERROR
        assert report.requests[0].error_message == "Connection failed"

    def test_aborted(self, runner):
        runner.start_request("first")
        runner.abort("status 503 returned where 200 was expected")
        runner.finish_request()
        runner.skip_request("second", runner.abort_reason)
        report = runner.finish()
        assert report.status == RunStatus.ABORTED
        assert report.skipped_requests == 1
        assert "Aborted" in report.summary()

    def test_json_round_trip(self, runner, tmp_path):
        runner.start_request("req", "GET", "https://api.example.com")
        runner.test("ok", lambda: None)
        runner.finish()

        path = tmp_path / "reports" / "run.json"
        runner.save_json(path)
        data = json.loads(path.read_text())
        assert data["name"] == "test run"
        assert data["status"] == "passed"
        assert data["summary"]["passed"] == 1
        assert data["requests"][0]["outcomes"][0]["description"] == "ok"


def test_runner_is_not_collected():
    assert TestRunner.__test__ is False
