"""
Schema Helpers

Regex patterns and schema builders for use inside JSON schemas.

Usage:
    from commontests.schemas import get_schema_hal, get_regex_guid

    item = {
        "type": "object",
        "required": ["id"],
        "properties": {"id": {"type": "string", "pattern": get_regex_guid()}},
    }
    schema = get_schema_hal(item)
"""

from .hal import get_schema_hal, hal_link_schema
from .patterns import (
    EMPTY_GUID,
    ZERO_DATETIME,
    get_regex_guid,
    get_regex_iso_datetime,
    get_regex_url,
)

__all__ = [
    # Patterns
    "get_regex_guid",
    "get_regex_iso_datetime",
    "get_regex_url",
    "EMPTY_GUID",
    "ZERO_DATETIME",
    # HAL
    "get_schema_hal",
    "hal_link_schema",
]
