"""Shared pytest fixtures for all tests"""

import json

import pytest

from commontests.reporting import TestRunner
from commontests.transport import Response


@pytest.fixture
def runner():
    """Fresh test runner"""
    return TestRunner("test run")


@pytest.fixture
def make_response():
    """Captured response helper"""

    def _create_response(
        status_code=200,
        json_data=None,
        text=None,
        headers=None,
        elapsed_ms=120.0,
    ):
        if text is None:
            text = json.dumps(json_data) if json_data is not None else ""
        if headers is None:
            headers = {"Content-Type": "application/json; charset=utf-8"}
        return Response(
            status_code=status_code,
            headers=headers,
            text=text,
            elapsed_ms=elapsed_ms,
        )

    return _create_response


@pytest.fixture
def hal_body():
    """A valid HAL list body with two items"""
    return {
        "_links": {
            "self": {"href": "https://api.example.com/items?page=1"},
            "first": {"href": "https://api.example.com/items?page=1"},
            "last": {"href": "https://api.example.com/items?page=3"},
            "next": {"href": "https://api.example.com/items?page=2"},
            "previous": None,
        },
        "_embedded": {
            "resourceList": [
                {"id": "123e4567-e89b-12d3-a456-426614174000", "name": "first"},
                {"id": "9f8e7d6c-5b4a-4321-9876-0123456789ab", "name": "second"},
            ]
        },
        "_page": {"size": 2, "number": 1, "totalElements": 6, "totalPages": 3},
    }
