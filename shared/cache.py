"""
Caching utilities for the application.

Backends raise ``CacheError`` on failure; ``BestEffortCache`` wraps a backend
so that callers never see those errors.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import Any

import redis
import redis.asyncio as aioredis

from shared.exceptions import CacheError

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 300


class CacheBackend(ABC):
    """Abstract key-value store with per-entry expiry."""

    name = "abstract"

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Return the value stored under key, or None when absent or expired."""

    @abstractmethod
    async def set(self, key: str, value: str, ttl: int = DEFAULT_TTL_SECONDS) -> None:
        """Store value under key for ttl seconds."""

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove key if present."""

    async def close(self) -> None:
        """Release backend resources."""


class MemoryCache(CacheBackend):
    """Simple in-memory cache with TTL (Time To Live) support."""

    name = "memory"

    def __init__(self) -> None:
        """Initialize empty cache."""
        self._cache: dict[str, dict[str, Any]] = {}

    async def get(self, key: str) -> str | None:
        """
        Get value from cache by key.

        Args:
            key: Cache key

        Returns:
            Cached value if exists and not expired, None otherwise
        """
        if key in self._cache:
            item = self._cache[key]
            if datetime.now() < item["expires"]:
                return item["value"]
            else:
                # Remove expired item
                del self._cache[key]
        return None

    async def set(self, key: str, value: str, ttl: int = DEFAULT_TTL_SECONDS) -> None:
        """
        Set value in cache with TTL.

        Args:
            key: Cache key
            value: Value to cache
            ttl: Time to live in seconds
        """
        self._cache[key] = {"value": value, "expires": datetime.now() + timedelta(seconds=ttl)}

    async def delete(self, key: str) -> None:
        self._cache.pop(key, None)

    def clear(self) -> None:
        """Clear all cached values."""
        self._cache.clear()

    def size(self) -> int:
        """
        Get current cache size.

        Returns:
            Number of items in cache, expired ones included until cleaned up
        """
        return len(self._cache)

    def cleanup_expired(self) -> int:
        """
        Remove expired items from cache.

        Returns:
            Number of expired items removed
        """
        now = datetime.now()
        expired_keys = [key for key, item in self._cache.items() if now >= item["expires"]]

        for key in expired_keys:
            del self._cache[key]

        return len(expired_keys)


class RedisCache(CacheBackend):
    """Redis-backed cache using SET with EX and GET."""

    name = "redis"

    def __init__(
        self,
        redis_url: str | None = None,
        password: str | None = None,
        client: Any | None = None,
    ) -> None:
        if client is None:
            if not redis_url:
                raise ValueError("A Redis URL is required for the redis cache backend.")
            kwargs: dict[str, Any] = {"decode_responses": True}
            if password:
                kwargs["password"] = password
            client = aioredis.Redis.from_url(redis_url, **kwargs)
        self.redis = client

    async def get(self, key: str) -> str | None:
        try:
            value = await self.redis.get(key)
        except redis.RedisError as exc:
            raise CacheError(f"Redis GET failed: {exc}") from exc
        if value is None:
            return None
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return str(value)

    async def set(self, key: str, value: str, ttl: int = DEFAULT_TTL_SECONDS) -> None:
        try:
            await self.redis.set(key, value, ex=ttl)
        except redis.RedisError as exc:
            raise CacheError(f"Redis SET failed: {exc}") from exc

    async def delete(self, key: str) -> None:
        try:
            await self.redis.delete(key)
        except redis.RedisError as exc:
            raise CacheError(f"Redis DEL failed: {exc}") from exc

    async def close(self) -> None:
        await self.redis.aclose()


class BestEffortCache:
    """Cache wrapper that logs and absorbs backend failures.

    ``get`` reports a failure as a miss and ``set`` returns whether the write
    went through, so the cache never sits on a request's error path.
    """

    def __init__(self, backend: CacheBackend, ttl: int = DEFAULT_TTL_SECONDS) -> None:
        self.backend = backend
        self.ttl = ttl

    @property
    def name(self) -> str:
        return self.backend.name

    async def get(self, key: str) -> str | None:
        try:
            return await self.backend.get(key)
        except CacheError as exc:
            logger.warning("Cache read failed for key %r: %s", key[:64], exc)
            return None

    async def set(self, key: str, value: str, ttl: int | None = None) -> bool:
        try:
            await self.backend.set(key, value, ttl=self.ttl if ttl is None else ttl)
            return True
        except CacheError as exc:
            logger.warning("Cache write failed for key %r: %s", key[:64], exc)
            return False

    async def close(self) -> None:
        await self.backend.close()


def create_cache_backend(service_config: Any) -> CacheBackend:
    """Choose a cache backend from configuration.

    ``cache_backend`` may be ``redis``, ``memory`` or ``auto``; ``auto`` picks
    Redis when a URL is configured.
    """
    backend = str(service_config.get("cache_backend", "auto")).lower()
    redis_url = service_config.get("redis_url")

    if backend == "memory" or (backend == "auto" and not redis_url):
        return MemoryCache()
    if backend not in {"redis", "auto"}:
        logger.warning("Unknown cache backend '%s', falling back to memory", backend)
        return MemoryCache()
    try:
        return RedisCache(redis_url, password=service_config.get("redis_token"))
    except ValueError as exc:
        logger.warning("Invalid Redis configuration (%s), falling back to memory", exc)
        return MemoryCache()
