"""
Report data models for API test runs.

This module defines the data structures for capturing complete run
records: run metadata, one record per request and the named assertion
outcomes registered while checking that request.
"""

from __future__ import annotations

import json
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from ..assertions.models import AssertionOutcome


class RequestStatus(str, Enum):
    """Status of an individual request and its checks."""
    PENDING = "pending"
    RUNNING = "running"
    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"
    SKIPPED = "skipped"


class RunStatus(str, Enum):
    """Overall status of a test run."""
    PENDING = "pending"
    RUNNING = "running"
    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"
    ABORTED = "aborted"


@dataclass
class RequestRecord:
    """
    Record of a single request and the outcomes registered for it.
    """
    request_id: str
    method: str | None = None
    url: str | None = None
    status: RequestStatus = RequestStatus.PENDING

    # Timing
    started_at: datetime | None = None
    ended_at: datetime | None = None
    duration_ms: float | None = None

    # Response
    response_status: int | None = None
    elapsed_ms: float | None = None

    outcomes: list[AssertionOutcome] = field(default_factory=list)
    error_message: str | None = None
    skip_reason: str | None = None

    def start(self) -> None:
        """Mark the request as started."""
        self.status = RequestStatus.RUNNING
        self.started_at = datetime.now(timezone.utc)

    def complete(self, status: RequestStatus | None = None) -> None:
        """Mark the request as completed, deriving the status from outcomes if not given."""
        if status is None:
            status = RequestStatus.FAILED if self.failed_count else RequestStatus.PASSED
        self.status = status
        self.ended_at = datetime.now(timezone.utc)
        if self.started_at:
            delta = self.ended_at - self.started_at
            self.duration_ms = delta.total_seconds() * 1000

    @property
    def passed_count(self) -> int:
        return sum(1 for o in self.outcomes if o.passed)

    @property
    def failed_count(self) -> int:
        return sum(1 for o in self.outcomes if o.failed)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "request_id": self.request_id,
            "method": self.method,
            "url": self.url,
            "status": self.status.value,
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "ended_at": self.ended_at.isoformat() if self.ended_at else None,
            "duration_ms": self.duration_ms,
            "response_status": self.response_status,
            "elapsed_ms": self.elapsed_ms,
            "outcomes": [o.to_dict() for o in self.outcomes],
            "error_message": self.error_message,
            "skip_reason": self.skip_reason,
        }


@dataclass
class RunReport:
    """
    Complete record of a test run.
    """
    run_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    name: str = ""

    # Timing
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    ended_at: datetime | None = None
    duration_ms: float | None = None

    status: RunStatus = RunStatus.PENDING
    abort_reason: str | None = None

    requests: list[RequestRecord] = field(default_factory=list)

    # Summary stats
    total_tests: int = 0
    passed_tests: int = 0
    failed_tests: int = 0
    error_requests: int = 0
    skipped_requests: int = 0

    def start(self) -> None:
        """Mark the run as started."""
        self.status = RunStatus.RUNNING
        self.started_at = datetime.now(timezone.utc)

    def complete(self) -> None:
        """Mark the run as completed and calculate final status."""
        self.ended_at = datetime.now(timezone.utc)
        delta = self.ended_at - self.started_at
        self.duration_ms = delta.total_seconds() * 1000

        self.passed_tests = sum(r.passed_count for r in self.requests)
        self.failed_tests = sum(r.failed_count for r in self.requests)
        self.total_tests = self.passed_tests + self.failed_tests
        self.error_requests = sum(1 for r in self.requests if r.status == RequestStatus.ERROR)
        self.skipped_requests = sum(1 for r in self.requests if r.status == RequestStatus.SKIPPED)

        if self.abort_reason:
            self.status = RunStatus.ABORTED
        elif self.error_requests > 0:
            self.status = RunStatus.ERROR
        elif self.failed_tests > 0:
            self.status = RunStatus.FAILED
        else:
            self.status = RunStatus.PASSED

    def add_request(self, record: RequestRecord) -> None:
        self.requests.append(record)

    def get_request(self, request_id: str) -> RequestRecord | None:
        """Get a request record by ID."""
        for record in self.requests:
            if record.request_id == request_id:
                return record
        return None

    @property
    def outcomes(self) -> list[AssertionOutcome]:
        return [o for r in self.requests for o in r.outcomes]

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "run_id": self.run_id,
            "name": self.name,
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "ended_at": self.ended_at.isoformat() if self.ended_at else None,
            "duration_ms": self.duration_ms,
            "status": self.status.value,
            "abort_reason": self.abort_reason,
            "summary": {
                "total": self.total_tests,
                "passed": self.passed_tests,
                "failed": self.failed_tests,
                "errors": self.error_requests,
                "skipped": self.skipped_requests,
            },
            "requests": [r.to_dict() for r in self.requests],
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, default=str)

    def summary(self) -> str:
        """Generate a human-readable summary."""
        lines = [
            "═══════════════════════════════════════════════════════════",
            f"  Run Report: {self.name}",
            "═══════════════════════════════════════════════════════════",
            f"  Run ID:     {self.run_id}",
            f"  Status:     {_status_icon(self.status)} {self.status.value.upper()}",
            f"  Duration:   {self.duration_ms:.0f}ms" if self.duration_ms else "  Duration:   N/A",
            "───────────────────────────────────────────────────────────",
            f"  Tests: {self.passed_tests} passed, {self.failed_tests} failed"
            f" | Requests: {self.error_requests} errors, {self.skipped_requests} skipped",
            "───────────────────────────────────────────────────────────",
        ]
        if self.abort_reason:
            lines.append(f"  Aborted: {self.abort_reason}")

        for record in self.requests:
            icon = _status_icon_request(record.status)
            target = f" {record.method} {record.url}" if record.method else ""
            lines.append(f"  {icon} [{record.request_id}]{target}")
            for outcome in record.outcomes:
                mark = "✔" if outcome.passed else "✘"
                lines.append(f"      {mark} {outcome.description}")
                if outcome.failed and outcome.message:
                    lines.append(f"        └─ {outcome.message}")
            if record.error_message:
                lines.append(f"      └─ Error: {record.error_message}")
            elif record.skip_reason:
                lines.append(f"      └─ Skipped: {record.skip_reason}")

        lines.append("═══════════════════════════════════════════════════════════")
        return "\n".join(lines)


def _status_icon(status: RunStatus) -> str:
    return {
        RunStatus.PENDING: "⏳",
        RunStatus.RUNNING: "🔄",
        RunStatus.PASSED: "✅",
        RunStatus.FAILED: "❌",
        RunStatus.ERROR: "⚠️",
        RunStatus.ABORTED: "🛑",
    }.get(status, "❓")


def _status_icon_request(status: RequestStatus) -> str:
    return {
        RequestStatus.PENDING: "⏳",
        RequestStatus.RUNNING: "🔄",
        RequestStatus.PASSED: "✅",
        RequestStatus.FAILED: "❌",
        RequestStatus.ERROR: "⚠️",
        RequestStatus.SKIPPED: "⏭️",
    }.get(status, "❓")
