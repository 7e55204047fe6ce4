"""
Validation for request collections.

This module checks raw parsed YAML against the collection format and
reports every problem with its path and a helpful suggestion.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from jsonschema import Draft7Validator
from jsonschema.exceptions import SchemaError

from ..validation import STATUS_CODE_MAX, STATUS_CODE_MIN, Kind, get_kind
from .models import HTTPMethod


# ─────────────────────────────────────────────────────────────────────────────
# Validation Result Types
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class CollectionError:
    """Represents a single validation error with context."""
    path: str  # e.g., "requests[0].expect.status"
    message: str
    value: Any = None
    suggestion: str | None = None

    def __str__(self) -> str:
        parts = [f"❌ {self.path}: {self.message}"]
        if self.value is not None:
            parts.append(f"   Got: {repr(self.value)}")
        if self.suggestion:
            parts.append(f"   💡 {self.suggestion}")
        return "\n".join(parts)


@dataclass
class CollectionValidation:
    """Result of collection validation."""
    errors: list[CollectionError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def add_error(
        self,
        path: str,
        message: str,
        value: Any = None,
        suggestion: str | None = None,
    ) -> None:
        self.errors.append(CollectionError(path, message, value, suggestion))

    def __str__(self) -> str:
        if self.is_valid:
            return "✅ Collection validation passed"
        lines = [f"Collection validation failed with {len(self.errors)} error(s):\n"]
        lines.extend(str(e) for e in self.errors)
        return "\n".join(lines)


# ─────────────────────────────────────────────────────────────────────────────
# Collection Validator
# ─────────────────────────────────────────────────────────────────────────────

class CollectionValidator:
    """Validates raw parsed YAML against the collection format."""

    REQUIRED_TOP_LEVEL = {"version", "name", "requests"}
    OPTIONAL_TOP_LEVEL = {"env", "defaults"}
    REQUEST_FIELDS = {"id", "method", "url", "headers", "json", "body", "timeout_ms", "expect"}
    EXPECT_FIELDS = {"status", "content_type", "time_ms", "schema", "hal", "location"}
    VALID_METHODS = {m.value for m in HTTPMethod}

    def __init__(self, data: dict[str, Any]):
        self.data = data
        self.result = CollectionValidation()
        self.request_ids: set[str] = set()

    def validate(self) -> CollectionValidation:
        """Run all validation checks and return result."""
        self._validate_top_level()
        if not self.result.is_valid:
            return self.result

        self._validate_version()
        self._validate_name()
        self._validate_env()
        self._validate_defaults()
        self._validate_requests()

        return self.result

    def _validate_top_level(self) -> None:
        """Check required and unknown top-level keys."""
        keys = set(self.data.keys())
        missing = self.REQUIRED_TOP_LEVEL - keys
        unknown = keys - self.REQUIRED_TOP_LEVEL - self.OPTIONAL_TOP_LEVEL

        for key in sorted(missing):
            self.result.add_error(
                key,
                f"Required field '{key}' is missing",
                suggestion=f"Add '{key}:' to your collection file",
            )

        for key in sorted(unknown, key=str):
            self.result.add_error(
                str(key),
                f"Unknown top-level field '{key}'",
                suggestion=f"Valid fields are: {', '.join(sorted(self.REQUIRED_TOP_LEVEL | self.OPTIONAL_TOP_LEVEL))}",
            )

    def _validate_version(self) -> None:
        version = self.data.get("version")
        if get_kind(version) != Kind.NUMBER or not isinstance(version, int):
            self.result.add_error(
                "version",
                "Must be an integer",
                value=version,
                suggestion="Use 'version: 1'",
            )
        elif version < 1:
            self.result.add_error("version", "Must be >= 1", value=version)

    def _validate_name(self) -> None:
        name = self.data.get("name")
        if not isinstance(name, str):
            self.result.add_error("name", "Must be a string", value=name)
        elif not name.strip():
            self.result.add_error(
                "name",
                "Cannot be empty",
                suggestion="Provide a descriptive name for your collection",
            )

    def _validate_env(self) -> None:
        env = self.data.get("env")
        if env is None:
            return
        if get_kind(env) != Kind.OBJECT:
            self.result.add_error("env", "Must be an object (key-value pairs)", value=env)

    def _validate_defaults(self) -> None:
        defaults = self.data.get("defaults")
        if defaults is None:
            return
        if get_kind(defaults) != Kind.OBJECT:
            self.result.add_error("defaults", "Must be an object", value=defaults)
            return

        timeout = defaults.get("timeout_ms")
        if timeout is not None and not _is_positive_int(timeout):
            self.result.add_error(
                "defaults.timeout_ms",
                "Must be a positive integer (milliseconds)",
                value=timeout,
            )

        for flag in ("gate_on_status", "log_body"):
            value = defaults.get(flag)
            if value is not None and not isinstance(value, bool):
                self.result.add_error(f"defaults.{flag}", "Must be true or false", value=value)

        self._validate_headers("defaults.headers", defaults.get("headers"))

    def _validate_requests(self) -> None:
        requests = self.data.get("requests")
        if get_kind(requests) != Kind.ARRAY:
            self.result.add_error("requests", "Must be a list", value=requests)
            return

        if len(requests) == 0:
            self.result.add_error(
                "requests",
                "Must contain at least one request",
                suggestion="Add a request with an 'id', 'method' and 'url'",
            )
            return

        for i, request in enumerate(requests):
            self._validate_request(i, request)

    def _validate_request(self, index: int, request: Any) -> None:
        path = f"requests[{index}]"

        if get_kind(request) != Kind.OBJECT:
            self.result.add_error(path, "Request must be an object", value=request)
            return

        for key in sorted(set(request.keys()) - self.REQUEST_FIELDS, key=str):
            self.result.add_error(
                f"{path}.{key}",
                "Unknown request field",
                suggestion=f"Valid fields are: {', '.join(sorted(self.REQUEST_FIELDS))}",
            )

        request_id = request.get("id")
        if not request_id:
            self.result.add_error(
                f"{path}.id",
                "Request must have an 'id' field",
                suggestion="Add a unique identifier like 'id: list_items'",
            )
        elif not isinstance(request_id, str):
            self.result.add_error(f"{path}.id", "Request id must be a string", value=request_id)
        elif request_id in self.request_ids:
            self.result.add_error(
                f"{path}.id",
                "Duplicate request id",
                value=request_id,
                suggestion="Each request must have a unique id",
            )
        else:
            self.request_ids.add(request_id)

        method = request.get("method", HTTPMethod.GET.value)
        if not isinstance(method, str) or method.upper() not in self.VALID_METHODS:
            self.result.add_error(
                f"{path}.method",
                "Invalid HTTP method",
                value=method,
                suggestion=f"Valid methods: {', '.join(sorted(self.VALID_METHODS))}",
            )

        url = request.get("url")
        if not url:
            self.result.add_error(
                f"{path}.url",
                "Request requires a 'url' field",
                suggestion="Add 'url: \"https://...\"' or 'url: \"{{env.BASE_URL}}/...\"'",
            )
        elif not isinstance(url, str):
            self.result.add_error(f"{path}.url", "Must be a string", value=url)

        self._validate_headers(f"{path}.headers", request.get("headers"))

        if "json" in request and "body" in request:
            self.result.add_error(
                f"{path}.body",
                "'json' and 'body' cannot both be set",
                suggestion="Use 'json' for JSON payloads and 'body' for raw text",
            )
        body = request.get("body")
        if body is not None and not isinstance(body, str):
            self.result.add_error(f"{path}.body", "Must be a string", value=body)

        timeout = request.get("timeout_ms")
        if timeout is not None and not _is_positive_int(timeout):
            self.result.add_error(
                f"{path}.timeout_ms",
                "Must be a positive integer (milliseconds)",
                value=timeout,
            )

        expect = request.get("expect")
        if expect is not None:
            self._validate_expect(f"{path}.expect", expect)

    def _validate_expect(self, path: str, expect: Any) -> None:
        if get_kind(expect) != Kind.OBJECT:
            self.result.add_error(path, "Must be an object", value=expect)
            return

        for key in sorted(set(expect.keys()) - self.EXPECT_FIELDS, key=str):
            self.result.add_error(
                f"{path}.{key}",
                "Unknown expectation",
                suggestion=f"Valid expectations: {', '.join(sorted(self.EXPECT_FIELDS))}",
            )

        status = expect.get("status")
        if status is not None:
            if get_kind(status) != Kind.NUMBER or not isinstance(status, int):
                self.result.add_error(f"{path}.status", "Must be an integer", value=status)
            elif not STATUS_CODE_MIN <= status <= STATUS_CODE_MAX:
                self.result.add_error(
                    f"{path}.status",
                    f"Must be an existing status code ({STATUS_CODE_MIN}-{STATUS_CODE_MAX})",
                    value=status,
                )

        time_ms = expect.get("time_ms")
        if time_ms is not None and (get_kind(time_ms) != Kind.NUMBER or time_ms <= 0):
            self.result.add_error(
                f"{path}.time_ms",
                "Must be a strictly positive number (milliseconds)",
                value=time_ms,
            )

        for key in ("content_type", "location"):
            value = expect.get(key)
            if value is not None and not isinstance(value, str):
                self.result.add_error(f"{path}.{key}", "Must be a string", value=value)

        schema = expect.get("schema")
        hal = expect.get("hal")
        if schema is not None and hal is not None:
            self.result.add_error(
                f"{path}.hal",
                "'schema' and 'hal' cannot both be set",
                suggestion="'hal' already builds the full schema around the item schema",
            )
        if schema is not None:
            self._validate_json_schema(f"{path}.schema", schema)
        if hal is not None:
            self._validate_hal(f"{path}.hal", hal)

    def _validate_hal(self, path: str, hal: Any) -> None:
        if get_kind(hal) != Kind.OBJECT:
            self.result.add_error(
                path,
                "Must be an object",
                value=hal,
                suggestion="Use 'hal: {items: {...}}' or 'hal: {}' for any items",
            )
            return

        items = hal.get("items")
        if items is not None:
            self._validate_json_schema(f"{path}.items", items)

        strict_links = hal.get("strict_links")
        if strict_links is not None and not isinstance(strict_links, bool):
            self.result.add_error(f"{path}.strict_links", "Must be true or false", value=strict_links)

        first_page = hal.get("first_page")
        if first_page is not None and (isinstance(first_page, bool) or first_page not in (0, 1)):
            self.result.add_error(f"{path}.first_page", "Must be 0 or 1", value=first_page)

    def _validate_json_schema(self, path: str, schema: Any) -> None:
        if get_kind(schema) != Kind.OBJECT:
            self.result.add_error(path, "Must be an object (JSON schema)", value=schema)
            return
        try:
            Draft7Validator.check_schema(schema)
        except SchemaError as e:
            self.result.add_error(
                path,
                f"Invalid JSON schema: {e.message}",
                value=e.instance,
                suggestion="Check the schema against JSON Schema draft 7",
            )

    def _validate_headers(self, path: str, headers: Any) -> None:
        if headers is None:
            return
        if get_kind(headers) != Kind.OBJECT:
            self.result.add_error(path, "Must be an object (header: value)", value=headers)
            return
        for name, value in headers.items():
            if not isinstance(value, (str, int, float)) or isinstance(value, bool):
                self.result.add_error(f"{path}.{name}", "Header value must be a string", value=value)


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
