"""Driver for OpenAI-compatible chat completion APIs (Mistral by default)."""

from __future__ import annotations

from typing import Any

import openai

from shared.exceptions import UpstreamError
from shared.llm_client import create_openai_client

from .base import ToneAdjustmentDriver


class OpenAICompatibleDriver(ToneAdjustmentDriver):
    """Chat Completions implementation using the AsyncOpenAI client."""

    def __init__(self, client: Any | None = None, base_url: str | None = None):
        """Initialize client; raises ValueError when no API key is configured."""
        self.client = client or create_openai_client(base_url=base_url)

    async def adjust(self, text: str, system_prompt: str, model_config: dict[str, Any]) -> str:
        """Send one system + user exchange and return the first choice verbatim."""
        try:
            response = await self.client.chat.completions.create(
                model=model_config.get("model", "mistral-small-latest"),
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": text},
                ],
                temperature=model_config.get("temperature", 0.7),
                max_tokens=model_config.get("max_tokens", 2000),
            )
        except openai.APIStatusError as exc:
            raise UpstreamError(
                f"Language model API error: {exc.status_code} {exc.message}",
                status_code=exc.status_code,
            ) from exc
        except openai.APITimeoutError as exc:
            raise UpstreamError("Language model API request timed out") from exc
        except openai.APIConnectionError as exc:
            raise UpstreamError(f"Language model API unreachable: {exc}") from exc

        choices = getattr(response, "choices", None)
        if not choices:
            raise UpstreamError("Language model API returned no choices")

        content = choices[0].message.content
        if not content:
            raise UpstreamError("Language model API returned an empty completion")
        return content
