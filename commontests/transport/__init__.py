"""
HTTP Transport

This package captures HTTP responses for the assertion helpers.

Usage:
    from commontests.transport import HTTPClient, RequestSpec

    async with HTTPClient() as client:
        response = await client.send(RequestSpec("GET", "https://api.example.com/items"))
"""

from .http import HTTPClient
from .models import RequestSpec, Response, TransportError

__all__ = [
    "HTTPClient",
    "RequestSpec",
    "Response",
    "TransportError",
]
