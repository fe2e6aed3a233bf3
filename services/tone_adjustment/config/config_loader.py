"""
Configuration loader for the tone adjustment service.
Handles loading and validation of the YAML model/prompt configuration.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from shared.config import config as service_config

logger = logging.getLogger(__name__)

ENV_OVERRIDES = {
    "model": "llm_model",
    "temperature": "llm_temperature",
    "base_url": "llm_base_url",
}


class ToneConfig:
    """Configuration manager for tone adjustment prompts and model settings."""

    def __init__(self, config_path: str | None = None):
        if config_path is None:
            config_path = os.path.join(os.path.dirname(__file__), "tone_config.yaml")

        self.config_path = Path(config_path)
        self._config = self._load_config()

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from YAML file."""
        try:
            with open(self.config_path, encoding="utf-8") as file:
                config = yaml.safe_load(file) or {}
                logger.info(f"Loaded configuration from {self.config_path}")
                return config
        except FileNotFoundError:
            logger.error(f"Configuration file not found: {self.config_path}")
            raise
        except yaml.YAMLError as e:
            logger.error(f"Error parsing YAML configuration: {e}")
            raise

    def get_ai_model_config(self) -> dict[str, Any]:
        """Get model settings, with environment overrides applied."""
        model_config = dict(self._config.get("ai_model", {}))
        for key, setting in ENV_OVERRIDES.items():
            value = service_config.get(setting)
            if value is not None:
                model_config[key] = value
        return model_config

    def get_system_prompt_template(self) -> str:
        return self._config.get("system_prompt", "")

    def validate_config(self) -> bool:
        """Validate the loaded configuration."""
        for section in ("ai_model", "system_prompt"):
            if section not in self._config:
                logger.error(f"Missing required configuration section: {section}")
                return False

        if "model" not in self._config["ai_model"]:
            logger.error("Missing required key 'model' in section 'ai_model'")
            return False

        template = self._config["system_prompt"]
        for placeholder in ("{tone}", "{style}"):
            if placeholder not in template:
                logger.error(f"System prompt is missing the {placeholder} placeholder")
                return False

        logger.info("Configuration validation passed")
        return True

    def reload_config(self):
        """Reload configuration from file."""
        self._config = self._load_config()
        logger.info("Configuration reloaded")


# Global configuration instance
config = ToneConfig()
