"""
Transport layer models for HTTP checks.

This module defines the captured HTTP response that assertion helpers
read from, and the request description used by the HTTP client.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any


class TransportError(Exception):
    """Raised when a request cannot be completed at the transport level."""

    def __init__(self, message: str, url: str | None = None):
        self.url = url
        super().__init__(f"{message} ({url})" if url else message)


@dataclass(frozen=True)
class Response:
    """
    A captured HTTP response.

    Attributes:
        status_code: Numeric HTTP status code
        headers: Response headers (lookup through header() is case-insensitive)
        text: Raw response body
        elapsed_ms: Time between sending the request and reading the body
        reason: HTTP reason phrase
        url: Final URL of the request
    """
    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    text: str = ""
    elapsed_ms: float = 0.0
    reason: str | None = None
    url: str | None = None

    def header(self, name: str) -> str | None:
        """Get a header value by case-insensitive name."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return None

    def has_header(self, name: str) -> bool:
        return self.header(name) is not None

    @property
    def content_type(self) -> str | None:
        return self.header("Content-Type")

    @property
    def location(self) -> str | None:
        return self.header("Location")

    def json(self) -> Any:
        """
        Parse the body as JSON.

        Raises:
            ValueError: The body is not valid JSON
        """
        return json.loads(self.text)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dict."""
        return {
            "status_code": self.status_code,
            "reason": self.reason,
            "url": self.url,
            "headers": dict(self.headers),
            "elapsed_ms": self.elapsed_ms,
            "text": self.text,
        }


@dataclass
class RequestSpec:
    """Description of a single HTTP request to send."""
    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    json: Any = None
    data: str | None = None
    timeout_ms: int = 30000
