"""
Regex patterns for JSON schemas.

The patterns are returned as plain strings so they can be embedded in a
schema's ``pattern`` keyword. Values that are syntactically valid but
meaningless (the empty GUID, the zero date) are rejected through a
negative lookahead. More literals can be excluded by passing them in;
they are OR-ed into the lookahead: ``(?!wrong1|wrong2|wrongN)``.
"""

from __future__ import annotations

import re

EMPTY_GUID = "00000000-0000-0000-0000-000000000000"
ZERO_DATETIME = "0001-01-01T00:00:00Z"

_GUID = "[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
_ISO_DATETIME = "[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}(\\.[0-9]+)?Z"
_URL = "^(https?://[0-9a-zA-Z-]+(\\.[0-9a-zA-Z-]+)+|https?://localhost)"


def _exclusions(defaults: tuple[str, ...], extra: tuple[str, ...]) -> str:
    # defaults hold no metacharacters and stay readable in the output
    return "|".join(defaults + tuple(re.escape(value) for value in extra))


def get_regex_guid(*excluded: str) -> str:
    """
    Get the regex pattern for GUIDs.

    Args:
        excluded: Additional GUID literals to reject

    Returns:
        Regex pattern string matching 8-4-4-4-12 hex digit groups
    """
    return f"^(?!{_exclusions((EMPTY_GUID,), excluded)})({_GUID})$"


def get_regex_iso_datetime(*excluded: str) -> str:
    """
    Get the regex pattern for ISO datetimes in UTC (``Z`` suffix).

    Args:
        excluded: Additional datetime literals to reject

    Returns:
        Regex pattern string for ``YYYY-MM-DDThh:mm:ss[.fraction]Z``
    """
    return f"^(?!{_exclusions((ZERO_DATETIME,), excluded)})({_ISO_DATETIME})$"


def get_regex_url() -> str:
    """Get the regex pattern for http(s) URLs with a dotted host or localhost."""
    return _URL
