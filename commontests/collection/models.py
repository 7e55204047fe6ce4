"""
Typed data structures for request collections.

This module contains the enums and dataclasses that represent the
internal typed structure of a parsed collection file.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class HTTPMethod(str, Enum):
    """Supported HTTP methods."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


# ─────────────────────────────────────────────────────────────────────────────
# Defaults
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class Defaults:
    """Default settings applied to every request."""
    timeout_ms: int = 30000
    gate_on_status: bool = True
    log_body: bool = False
    headers: dict[str, str] = field(default_factory=dict)


# ─────────────────────────────────────────────────────────────────────────────
# Requests
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class HALExpectation:
    """Expect a HAL list envelope around items of the given schema."""
    items: dict[str, Any] = field(default_factory=dict)
    strict_links: bool = False
    first_page: int = 1


@dataclass
class Expectation:
    """What the response to a request is checked against."""
    status: int | None = None
    content_type: str | None = None
    time_ms: float | None = None
    schema: dict[str, Any] | None = None
    hal: HALExpectation | None = None
    location: str | None = None


@dataclass
class RequestItem:
    """A single request in a collection."""
    id: str
    method: HTTPMethod = HTTPMethod.GET
    url: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    json: Any = None
    body: str | None = None
    timeout_ms: int | None = None  # falls back to Defaults.timeout_ms
    expect: Expectation = field(default_factory=Expectation)


# ─────────────────────────────────────────────────────────────────────────────
# Collection
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class Collection:
    """Fully parsed and validated collection."""
    version: int
    name: str
    env: dict[str, Any] = field(default_factory=dict)
    defaults: Defaults = field(default_factory=Defaults)
    requests: list[RequestItem] = field(default_factory=list)
