"""
Collection parser for request collections.

This module converts validated YAML data into typed Collection
structures and interpolates ``{{env.NAME}}`` placeholders.
"""

from __future__ import annotations

import re
from typing import Any

from .models import (
    Collection,
    Defaults,
    Expectation,
    HALExpectation,
    HTTPMethod,
    RequestItem,
)

# Regex for template interpolation: {{env.KEY}}
ENV_PATTERN = re.compile(r"\{\{\s*env\.(\w+)\s*\}\}")


def interpolate_value(value: Any, env: dict[str, Any]) -> Any:
    """Interpolate {{env.KEY}} placeholders in strings, dicts and lists; unknown keys are left as is."""
    if isinstance(value, str):
        def replace_env(match: re.Match) -> str:
            var_name = match.group(1)
            return str(env.get(var_name, match.group(0)))
        return ENV_PATTERN.sub(replace_env, value)
    elif isinstance(value, dict):
        return {k: interpolate_value(v, env) for k, v in value.items()}
    elif isinstance(value, list):
        return [interpolate_value(v, env) for v in value]
    return value


class CollectionParser:
    """Parses and converts validated YAML to a typed Collection."""

    def __init__(self, data: dict[str, Any]):
        self.data = data
        self.env = {str(k): v for k, v in (data.get("env") or {}).items()}

    def parse(self) -> Collection:
        """Convert validated data to a typed Collection."""
        return Collection(
            version=self.data["version"],
            name=self.data["name"],
            env=self.env,
            defaults=self._parse_defaults(),
            requests=self._parse_requests(),
        )

    def _parse_defaults(self) -> Defaults:
        defaults = self.data.get("defaults") or {}
        return Defaults(
            timeout_ms=defaults.get("timeout_ms", 30000),
            gate_on_status=defaults.get("gate_on_status", True),
            log_body=defaults.get("log_body", False),
            headers=self._parse_headers(defaults.get("headers")),
        )

    def _parse_headers(self, headers: dict | None) -> dict[str, str]:
        if not headers:
            return {}
        return {str(k): str(interpolate_value(v, self.env)) for k, v in headers.items()}

    def _parse_requests(self) -> list[RequestItem]:
        return [self._parse_request(request) for request in self.data.get("requests", [])]

    def _parse_request(self, request: dict) -> RequestItem:
        return RequestItem(
            id=request["id"],
            method=HTTPMethod(request.get("method", "GET").upper()),
            url=interpolate_value(request["url"], self.env),
            headers=self._parse_headers(request.get("headers")),
            json=interpolate_value(request.get("json"), self.env),
            body=interpolate_value(request.get("body"), self.env),
            timeout_ms=request.get("timeout_ms"),
            expect=self._parse_expect(request.get("expect") or {}),
        )

    def _parse_expect(self, expect: dict) -> Expectation:
        hal_data = expect.get("hal")
        hal = None
        if hal_data is not None:
            hal = HALExpectation(
                items=hal_data.get("items") or {},
                strict_links=hal_data.get("strict_links", False),
                first_page=hal_data.get("first_page", 1),
            )
        return Expectation(
            status=expect.get("status"),
            content_type=expect.get("content_type"),
            time_ms=expect.get("time_ms"),
            schema=expect.get("schema"),
            hal=hal,
            location=interpolate_value(expect.get("location"), self.env),
        )
