"""
Reporting for API Test Runs

This package provides the TestRunner host that assertion helpers
register their named outcomes with, and the run report it builds.

Usage:
    from commontests.reporting import TestRunner

    runner = TestRunner("items API")
    runner.start_request("list_items", "GET", url)
    test_common(response, runner, 200, "application/json")
    runner.finish_request(response)

    report = runner.finish()
    print(report.summary())
    runner.save_json("reports/run.json")
"""

# Models
from .models import RequestRecord, RequestStatus, RunReport, RunStatus

# Runner
from .runner import TestRunner

__all__ = [
    # Models
    "RequestRecord",
    "RequestStatus",
    "RunReport",
    "RunStatus",
    # Runner
    "TestRunner",
]
