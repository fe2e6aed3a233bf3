from __future__ import annotations

import logging
from typing import Any

from services.tone_adjustment.config.config_loader import config as tone_config
from services.tone_adjustment.drivers import OpenAICompatibleDriver, ToneAdjustmentDriver
from services.tone_adjustment.prompts import build_system_prompt
from shared.cache import BestEffortCache, CacheBackend, create_cache_backend
from shared.config import config
from shared.exceptions import UpstreamError, ValidationError
from shared.models import AdjustmentResponse

MIN_LEVEL = 0
MAX_LEVEL = 100


def build_cache_key(text: str, tone_level: int, style_level: int, prefix: str = "tone") -> str:
    """Key on the literal request; no normalisation of the text."""
    return f"{prefix}:{text}:{tone_level}:{style_level}"


def _coerce_level(value: Any) -> int:
    # bool is an int subclass; JSON true/false is not a level
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError("Tone and style levels must be whole numbers")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValidationError("Tone and style levels must be whole numbers")
        value = int(value)
    if value < MIN_LEVEL or value > MAX_LEVEL:
        raise ValidationError(
            f"Tone and style levels must be between {MIN_LEVEL} and {MAX_LEVEL}"
        )
    return value


def validate_adjustment(
    text: Any, tone_level: Any, style_level: Any, max_length: int
) -> tuple[str, int, int]:
    """Check a raw request and return it with levels normalised to int."""
    if not isinstance(text, str) or not text.strip():
        raise ValidationError("Invalid text input")
    if len(text) > max_length:
        raise ValidationError(f"Text exceeds maximum length of {max_length} characters")
    if tone_level is None or style_level is None:
        raise ValidationError("Missing tone or style level")
    return text, _coerce_level(tone_level), _coerce_level(style_level)


class ToneAdjustmentService:
    """Cache-backed tone and style rewriting through a language model."""

    def __init__(
        self,
        logger: logging.Logger,
        driver: ToneAdjustmentDriver | None = None,
        cache_backend: CacheBackend | None = None,
    ):
        self.logger = logger
        if not tone_config.validate_config():
            raise ValueError("Invalid tone adjustment configuration")

        self.cache = BestEffortCache(
            cache_backend or create_cache_backend(config),
            ttl=int(config.get("cache_ttl_seconds", 300)),
        )
        self.key_prefix = config.get("cache_key_prefix", "tone")
        self.max_text_length = int(config.get("max_text_length", 10000))
        self.driver = driver if driver is not None else self._init_driver()
        self.logger.info(f"Tone adjustment service ready (cache backend: {self.cache.name})")

    def _init_driver(self) -> ToneAdjustmentDriver | None:
        model_config = tone_config.get_ai_model_config()
        self.logger.info(f"Initializing language model driver: {model_config.get('provider', 'openai_compatible')}")
        try:
            return OpenAICompatibleDriver(base_url=model_config.get("base_url"))
        except ValueError as e:
            self.logger.warning(f"Failed to initialize language model driver: {e}")
            return None

    async def adjust(self, text: Any, tone_level: Any, style_level: Any) -> AdjustmentResponse:
        text, tone_level, style_level = validate_adjustment(
            text, tone_level, style_level, self.max_text_length
        )
        cache_key = build_cache_key(text, tone_level, style_level, self.key_prefix)

        cached = await self.cache.get(cache_key)
        if cached is not None:
            self.logger.debug("Cache hit for tone=%s style=%s", tone_level, style_level)
            return self._response(cached, text, tone_level, style_level, cached=True)

        self.logger.debug("Cache miss for tone=%s style=%s", tone_level, style_level)
        adjusted_text = await self._call_ai_model(text, tone_level, style_level)
        await self.cache.set(cache_key, adjusted_text)
        return self._response(adjusted_text, text, tone_level, style_level, cached=False)

    async def _call_ai_model(self, text: str, tone_level: int, style_level: int) -> str:
        if not self.driver:
            raise UpstreamError("No language model driver configured")

        model_config = tone_config.get_ai_model_config()
        system_prompt = build_system_prompt(
            tone_level, style_level, tone_config.get_system_prompt_template()
        )
        self.logger.info(f"Requesting adjustment from model: {model_config.get('model')}")
        try:
            return await self.driver.adjust(text, system_prompt, model_config)
        except UpstreamError as e:
            self.logger.error(f"Language model call failed: {e!s}")
            raise

    @staticmethod
    def _response(
        adjusted_text: str, text: str, tone_level: int, style_level: int, cached: bool
    ) -> AdjustmentResponse:
        return AdjustmentResponse(
            adjusted_text=adjusted_text,
            original_text=text,
            tone_level=tone_level,
            style_level=style_level,
            cached=cached,
        )

    def dependency_status(self) -> dict[str, str]:
        return {
            "cache": self.cache.name,
            "llm_driver": "configured" if self.driver else "missing",
        }

    async def close(self) -> None:
        await self.cache.close()
