"""
HTTP client utilities for talking to the tone adjustment service.
"""

import asyncio
from typing import Any

import aiohttp


class AsyncHTTPClient:
    """Async HTTP client wrapping an aiohttp session."""

    def __init__(self, timeout: float = 30) -> None:
        """Initialize HTTP client."""
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.session: aiohttp.ClientSession | None = None

    async def __aenter__(self) -> "AsyncHTTPClient":
        """Enter async context manager."""
        self.session = aiohttp.ClientSession(timeout=self.timeout)
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit async context manager."""
        if self.session:
            await self.session.close()

    @staticmethod
    async def _prepare_request(coro_or_ctx: Any) -> Any:
        """Normalize aiohttp request result to an async context manager."""
        if asyncio.iscoroutine(coro_or_ctx):
            return await coro_or_ctx
        return coro_or_ctx

    @staticmethod
    async def _ensure_response_ok(response: Any) -> None:
        """Invoke raise_for_status, awaiting when necessary."""
        result = response.raise_for_status()
        if asyncio.iscoroutine(result):
            await result

    @staticmethod
    async def _read_json(response: Any) -> Any:
        """Decode a JSON body, returning None when the body is not JSON."""
        try:
            return await response.json(content_type=None)
        except (aiohttp.ContentTypeError, ValueError):
            return None

    def _require_session(self) -> aiohttp.ClientSession:
        if not self.session:
            raise RuntimeError("HTTP client not initialized. Use async context manager.")
        return self.session

    async def get(self, url: str, headers: dict[str, Any] | None = None) -> dict[str, Any]:
        """Perform GET request."""
        session = self._require_session()

        request_ctx = await self._prepare_request(session.get(url, headers=headers))
        async with request_ctx as response:
            await self._ensure_response_ok(response)
            return await response.json()

    async def post_with_status(
        self,
        url: str,
        data: dict[str, Any] | None = None,
        headers: dict[str, Any] | None = None,
    ) -> tuple[int, Any]:
        """Perform POST request and return the status with the decoded body.

        Error statuses are not raised, so callers can read the error payload
        the server sent back.
        """
        session = self._require_session()

        request_ctx = await self._prepare_request(session.post(url, json=data, headers=headers))
        async with request_ctx as response:
            return response.status, await self._read_json(response)
