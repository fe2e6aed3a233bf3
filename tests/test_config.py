"""Tests for environment and YAML configuration loading."""

import pytest

from services.tone_adjustment.config.config_loader import ToneConfig
from shared.config import ServiceConfig
from shared.config import config as service_config


def test_defaults(monkeypatch):
    for name in ("CACHE_TTL_SECONDS", "CACHE_KEY_PREFIX", "MAX_TEXT_LENGTH", "CACHE_BACKEND"):
        monkeypatch.delenv(name, raising=False)

    loaded = ServiceConfig()

    assert loaded.get("cache_ttl_seconds") == 300
    assert loaded.get("cache_key_prefix") == "tone"
    assert loaded.get("max_text_length") == 10000
    assert loaded.get("cache_backend") == "auto"


def test_mistral_key_is_accepted(monkeypatch):
    monkeypatch.delenv("LLM_API_KEY", raising=False)
    monkeypatch.setenv("MISTRAL_API_KEY", "mistral-key")

    assert ServiceConfig().get("llm_api_key") == "mistral-key"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CACHE_TTL_SECONDS", "60")
    monkeypatch.setenv("ALLOWED_ORIGINS", '["http://localhost:5173"]')
    monkeypatch.setenv("LLM_TEMPERATURE", "0.2")

    loaded = ServiceConfig()

    assert loaded.get("cache_ttl_seconds") == 60
    assert loaded.get("allowed_origins") == ["http://localhost:5173"]
    assert loaded.get("llm_temperature") == 0.2


def test_get_falls_back_to_default_for_unset_values():
    loaded = ServiceConfig()
    loaded.set("llm_model", None)
    assert loaded.get("llm_model", "fallback") == "fallback"


class TestToneConfig:
    def test_bundled_config_is_valid(self):
        tone_config = ToneConfig()

        assert tone_config.validate_config()
        model = tone_config.get_ai_model_config()
        assert model["model"] == "mistral-small-latest"
        assert model["temperature"] == 0.7
        assert "{tone}" in tone_config.get_system_prompt_template()

    def test_environment_overrides_model(self):
        service_config.set("llm_model", "open-mistral-nemo")
        service_config.set("llm_temperature", 0.1)

        model = ToneConfig().get_ai_model_config()

        assert model["model"] == "open-mistral-nemo"
        assert model["temperature"] == 0.1

    def test_missing_placeholder_fails_validation(self, tmp_path):
        path = tmp_path / "tone.yaml"
        path.write_text("ai_model:\n  model: m\nsystem_prompt: Be {tone}.\n", encoding="utf-8")

        assert not ToneConfig(str(path)).validate_config()

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ToneConfig(str(tmp_path / "absent.yaml"))
