"""Builder for OpenAI-compatible chat completion clients.

Mistral, OpenAI and most hosted models speak the Chat Completions protocol,
so one factory covers them all by swapping the base URL.
"""

from __future__ import annotations

from openai import AsyncOpenAI

from shared.config import config

DEFAULT_BASE_URL = "https://api.mistral.ai/v1"


def create_openai_client(
    api_key: str | None = None,
    base_url: str | None = None,
    timeout: float | None = None,
) -> AsyncOpenAI:
    """
    Create an async client for an OpenAI-compatible API.

    Args:
        api_key: API key (read from LLM_API_KEY / MISTRAL_API_KEY if None)
        base_url: API base URL (defaults to the Mistral endpoint)
        timeout: Request timeout in seconds (LLM_REQUEST_TIMEOUT if None)

    Returns:
        Configured AsyncOpenAI client

    Raises:
        ValueError: If no API key is configured
    """
    api_key = api_key or config.get("llm_api_key")
    if not api_key:
        raise ValueError(
            "Language model API key not configured. "
            "Set LLM_API_KEY (or MISTRAL_API_KEY) environment variable."
        )

    base_url = base_url or config.get("llm_base_url") or DEFAULT_BASE_URL
    timeout = timeout if timeout is not None else float(config.get("llm_request_timeout", 60))

    return AsyncOpenAI(api_key=api_key, base_url=base_url, timeout=timeout)
