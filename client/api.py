"""HTTP client for the tone adjustment endpoint."""

from __future__ import annotations

from typing import Any

import aiohttp
import pydantic

from shared.config import config
from shared.exceptions import ToneAPIError
from shared.http_client import AsyncHTTPClient
from shared.models import AdjustmentRequest, AdjustmentResponse

ADJUST_PATH = "/api/tone/adjust"
DEFAULT_ERROR = "Failed to analyze tone"


class ToneAdjustmentClient:
    """Call ``POST /api/tone/adjust`` and decode the result."""

    def __init__(self, base_url: str | None = None, timeout: float = 120) -> None:
        self.base_url = (base_url or config.get("api_url", "http://localhost:8000")).rstrip("/")
        self.timeout = timeout

    async def adjust(self, text: str, tone_level: int, style_level: int) -> AdjustmentResponse:
        """Request an adjustment; raises ToneAPIError with the server's message on failure."""
        request = AdjustmentRequest(text=text, tone_level=tone_level, style_level=style_level)
        try:
            async with AsyncHTTPClient(timeout=self.timeout) as http:
                status, body = await http.post_with_status(
                    f"{self.base_url}{ADJUST_PATH}",
                    data=request.model_dump(by_alias=True),
                )
        except aiohttp.ClientError as exc:
            raise ToneAPIError(f"Could not reach tone service: {exc}") from exc
        except TimeoutError as exc:
            raise ToneAPIError("Tone service request timed out") from exc

        if status != 200:
            raise ToneAPIError(self._error_message(body), status=status)
        if not isinstance(body, dict) or "adjustedText" not in body:
            raise ToneAPIError("Unexpected response from tone service", status=status)
        try:
            return AdjustmentResponse.model_validate(body)
        except pydantic.ValidationError as exc:
            raise ToneAPIError("Unexpected response from tone service", status=status) from exc

    async def health(self) -> dict[str, Any]:
        async with AsyncHTTPClient(timeout=self.timeout) as http:
            return await http.get(f"{self.base_url}/health")

    @staticmethod
    def _error_message(body: Any) -> str:
        if isinstance(body, dict) and body.get("error"):
            return str(body["error"])
        return DEFAULT_ERROR
