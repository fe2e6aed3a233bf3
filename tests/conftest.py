import logging
import sys
from pathlib import Path
from typing import Any, Generator

import pytest
from fastapi.testclient import TestClient

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from services.tone_adjustment.app import app as tone_app, get_tone_service
from services.tone_adjustment.drivers import ToneAdjustmentDriver
from services.tone_adjustment.service import ToneAdjustmentService
from shared.cache import DEFAULT_TTL_SECONDS, MemoryCache
from shared.config import config as service_config
from shared.exceptions import CacheError


class FakeDriver(ToneAdjustmentDriver):
    """Driver that records calls and returns a canned answer."""

    def __init__(self, result: str = "Adjusted text.", error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def adjust(self, text: str, system_prompt: str, model_config: dict[str, Any]) -> str:
        self.calls.append(
            {"text": text, "system_prompt": system_prompt, "model_config": model_config}
        )
        if self.error:
            raise self.error
        return self.result


class RecordingCache(MemoryCache):
    """Memory cache that remembers every read and write."""

    def __init__(self) -> None:
        super().__init__()
        self.get_calls: list[str] = []
        self.set_calls: list[tuple[str, str, int]] = []

    async def get(self, key: str) -> str | None:
        self.get_calls.append(key)
        return await super().get(key)

    async def set(self, key: str, value: str, ttl: int = DEFAULT_TTL_SECONDS) -> None:
        self.set_calls.append((key, value, ttl))
        await super().set(key, value, ttl)


class BrokenCache(MemoryCache):
    """Cache whose reads and writes always fail."""

    async def get(self, key: str) -> str | None:
        raise CacheError("cache unavailable")

    async def set(self, key: str, value: str, ttl: int = DEFAULT_TTL_SECONDS) -> None:
        raise CacheError("cache unavailable")


@pytest.fixture(autouse=True)
def test_environment() -> Generator[None, None, None]:
    """Pin the settings the service reads so the host environment cannot leak in."""
    overrides = {
        "cache_ttl_seconds": 300,
        "cache_key_prefix": "tone",
        "max_text_length": 10000,
        "llm_model": None,
        "llm_temperature": None,
        "llm_base_url": None,
    }
    saved = {key: service_config.config.get(key) for key in overrides}
    for key, value in overrides.items():
        service_config.set(key, value)
    try:
        yield
    finally:
        for key, value in saved.items():
            service_config.set(key, value)


@pytest.fixture
def fake_driver() -> FakeDriver:
    return FakeDriver()


@pytest.fixture
def recording_cache() -> RecordingCache:
    return RecordingCache()


@pytest.fixture
def tone_service(fake_driver: FakeDriver, recording_cache: RecordingCache) -> ToneAdjustmentService:
    return ToneAdjustmentService(
        logging.getLogger("tone-adjustment-test"),
        driver=fake_driver,
        cache_backend=recording_cache,
    )


@pytest.fixture
def api_client(tone_service: ToneAdjustmentService) -> Generator[TestClient, None, None]:
    tone_app.dependency_overrides[get_tone_service] = lambda: tone_service
    try:
        yield TestClient(tone_app)
    finally:
        tone_app.dependency_overrides.pop(get_tone_service, None)
