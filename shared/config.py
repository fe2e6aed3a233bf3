"""
Configuration management for services.
"""

import json
import os
from typing import Any

from dotenv import load_dotenv


class ServiceConfig:
    """Configuration management for services using environment variables."""

    def __init__(self) -> None:
        """Initialize configuration by loading environment variables."""
        # .env lives next to bootloader.py at the project root
        env_path = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.env"))
        load_dotenv(dotenv_path=env_path, override=False)
        self.config: dict[str, Any] = {}
        self.load_from_env()

    def load_from_env(self) -> None:
        """Load configuration from environment variables."""
        self.config = {
            "llm_api_key": os.getenv("LLM_API_KEY") or os.getenv("MISTRAL_API_KEY"),
            "llm_base_url": os.getenv("LLM_BASE_URL"),
            "llm_model": os.getenv("LLM_MODEL"),
            "llm_temperature": self._optional_float(os.getenv("LLM_TEMPERATURE")),
            "llm_request_timeout": float(os.getenv("LLM_REQUEST_TIMEOUT", "60")),
            "cache_backend": os.getenv("CACHE_BACKEND", "auto").lower(),
            "redis_url": os.getenv("REDIS_URL"),
            "redis_token": os.getenv("REDIS_TOKEN"),
            "cache_ttl_seconds": int(os.getenv("CACHE_TTL_SECONDS", "300")),
            "cache_key_prefix": os.getenv("CACHE_KEY_PREFIX", "tone"),
            "max_text_length": int(os.getenv("MAX_TEXT_LENGTH", "10000")),
            "allowed_origins": json.loads(os.getenv("ALLOWED_ORIGINS", '["*"]')),
            "port": int(os.getenv("PORT", "8000")),
            "log_level": os.getenv("LOG_LEVEL", "INFO"),
            "debug": os.getenv("DEBUG", "false").lower() == "true",
            "api_url": os.getenv("TONE_API_URL", "http://localhost:8000"),
        }

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value
        """
        value = self.config.get(key)
        return default if value is None else value

    def set(self, key: str, value: Any) -> None:
        """
        Set configuration value.

        Args:
            key: Configuration key
            value: Configuration value
        """
        self.config[key] = value

    def reload(self) -> None:
        """Reload configuration from environment variables."""
        self.load_from_env()

    @staticmethod
    def _optional_float(raw: str | None) -> float | None:
        if raw is None or not raw.strip():
            return None
        return float(raw)


# Global configuration instance
config = ServiceConfig()
