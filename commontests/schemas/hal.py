"""
JSON schema builder for HAL list responses.

Every paginated list endpoint shares the same HAL envelope: ``_links``
for navigation, ``_embedded.resourceList`` for the items and ``_page``
for the paging counters. Tests only supply the schema of one item.
"""

from __future__ import annotations

import copy
from typing import Any

from ..validation import Kind, ValidationResult, check_kind, require
from .patterns import get_regex_url

REQUIRED_LINKS = ("self", "first", "last")
NAVIGATION_LINKS = ("next", "previous")


def hal_link_schema(nullable: bool = False) -> dict[str, Any]:
    """
    Get the schema of a single HAL link object.

    Args:
        nullable: Whether the link itself may be null (next/previous)

    Returns:
        Schema requiring an ``href`` string matching the URL pattern
    """
    return {
        "type": ["object", "null"] if nullable else "object",
        "required": ["href"],
        "properties": {
            "href": {"type": "string", "pattern": get_regex_url()},
        },
    }


def _counter(minimum: int) -> dict[str, Any]:
    return {"type": "integer", "minimum": minimum}


def get_schema_hal(
    schema_resource_items: Any = None,
    *,
    strict_links: bool = False,
    first_page: int = 1,
) -> dict[str, Any]:
    """
    Get the JSON schema for a HAL list response.

    Args:
        schema_resource_items: Schema of one resource item (default: any)
        strict_links: Also require the ``next`` and ``previous`` links
        first_page: Lowest valid page number, 0 or 1

    Returns:
        A new JSON schema dict for the HAL envelope

    Raises:
        ArgumentTypeError: schema_resource_items is not an object
        ArgumentRangeError: first_page is not 0 or 1
    """
    if schema_resource_items is None:
        schema_resource_items = {}
    require(check_kind(schema_resource_items, Kind.OBJECT, "get_schema_hal"))
    if first_page not in (0, 1) or isinstance(first_page, bool):
        ValidationResult.range_error(
            "get_schema_hal", f"first_page must be 0 or 1, got {first_page!r}"
        ).raise_for_error()

    required_links = list(REQUIRED_LINKS)
    if strict_links:
        required_links.extend(NAVIGATION_LINKS)

    return {
        "type": "object",
        "required": ["_links", "_embedded", "_page"],
        "properties": {
            "_links": {
                "type": "object",
                "required": required_links,
                "properties": {
                    "self": hal_link_schema(),
                    "next": hal_link_schema(nullable=True),
                    "previous": hal_link_schema(nullable=True),
                    "first": hal_link_schema(),
                    "last": hal_link_schema(),
                },
            },
            "_embedded": {
                "type": "object",
                "required": ["resourceList"],
                "properties": {
                    "resourceList": {
                        "type": "array",
                        "items": copy.deepcopy(dict(schema_resource_items)),
                    },
                },
            },
            "_page": {
                "type": "object",
                "required": ["size", "number"],
                "properties": {
                    "size": _counter(0),
                    "totalElements": _counter(0),
                    "totalPages": _counter(0),
                    "number": _counter(first_page),
                },
            },
        },
    }
