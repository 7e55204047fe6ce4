"""
HTTP client for capturing responses.

This module sends requests with aiohttp and turns the result into a
Response value, including the elapsed time in milliseconds.
"""

from __future__ import annotations

import asyncio
import logging
import time

import aiohttp

from .models import RequestSpec, Response, TransportError

logger = logging.getLogger(__name__)


def _merge_headers(headers) -> dict[str, str]:
    """Flatten response headers, joining repeated ones with a comma."""
    merged: dict[str, str] = {}
    for key, value in headers.items():
        merged[key] = f"{merged[key]}, {value}" if key in merged else value
    return merged


class HTTPClient:
    """
    Async HTTP client producing Response values.

    Example:
        async with HTTPClient() as client:
            response = await client.send(RequestSpec("GET", "https://api.example.com/items"))
            print(response.status_code, response.elapsed_ms)
    """

    def __init__(self, default_headers: dict[str, str] | None = None):
        self._default_headers = dict(default_headers or {})
        self._session: aiohttp.ClientSession | None = None

    @property
    def is_connected(self) -> bool:
        return self._session is not None

    async def connect(self) -> None:
        """Create the HTTP session."""
        if self._session is None:
            self._session = aiohttp.ClientSession()

    async def disconnect(self) -> None:
        """Close the HTTP session."""
        if self._session:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> HTTPClient:
        await self.connect()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.disconnect()

    async def send(self, request: RequestSpec) -> Response:
        """
        Send a request and capture the response.

        Args:
            request: The request to send

        Returns:
            Response with status, headers, body and elapsed time

        Raises:
            TransportError: Not connected, timed out, or connection failed
        """
        if not self.is_connected:
            raise TransportError("Client not connected. Call connect() first.", request.url)

        timeout = aiohttp.ClientTimeout(total=request.timeout_ms / 1000)
        headers = {**self._default_headers, **request.headers}
        logger.debug(f"{request.method} {request.url}")

        started = time.perf_counter()
        try:
            async with self._session.request(
                request.method,
                request.url,
                headers=headers,
                json=request.json,
                data=request.data,
                timeout=timeout,
                allow_redirects=False,
            ) as resp:
                text = await resp.text(errors="replace")
                elapsed_ms = (time.perf_counter() - started) * 1000
                response = Response(
                    status_code=resp.status,
                    headers=_merge_headers(resp.headers),
                    text=text,
                    elapsed_ms=elapsed_ms,
                    reason=resp.reason,
                    url=str(resp.url),
                )
        except asyncio.TimeoutError as e:
            raise TransportError(
                f"Request timed out after {request.timeout_ms}ms", request.url
            ) from e
        except aiohttp.ClientConnectorError as e:
            raise TransportError(f"Connection failed: {e}", request.url) from e
        except aiohttp.ClientError as e:
            raise TransportError(f"HTTP error: {e}", request.url) from e

        logger.info(f"{request.method} {request.url} -> {response.status_code} in {elapsed_ms:.0f}ms")
        return response

    def __repr__(self) -> str:
        status = "connected" if self.is_connected else "disconnected"
        return f"HTTPClient(status={status})"
