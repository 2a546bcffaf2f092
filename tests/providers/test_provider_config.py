"""Tests for provider configuration and credential loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from digipack.errors import ConfigurationError
from digipack.providers.config import (
    DEFAULT_CONFIG_PATH,
    GeminiSettings,
    ProviderConfig,
    load_provider_config,
    load_settings,
)

_KEY_VARS = ("GEMINI_API_KEY", "GOOGLE_API_KEY", "API_KEY")


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """No API key in the environment and no .env in the working directory."""
    for name in _KEY_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


class TestLoadSettings:
    """Tests for load_settings."""

    def test_missing_key_raises_configuration_error(self, clean_env):
        with pytest.raises(ConfigurationError, match="GEMINI_API_KEY"):
            load_settings()

    def test_empty_key_raises_configuration_error(self, clean_env):
        clean_env.setenv("GEMINI_API_KEY", "")

        with pytest.raises(ConfigurationError):
            load_settings()

    @pytest.mark.parametrize("name", _KEY_VARS)
    def test_reads_any_supported_variable(self, clean_env, name):
        clean_env.setenv(name, "secret-key")

        settings = load_settings()

        assert isinstance(settings, GeminiSettings)
        assert settings.api_key == "secret-key"

    def test_reads_dotenv_in_working_directory(self, clean_env, tmp_path):
        (tmp_path / ".env").write_text("GEMINI_API_KEY=from-dotenv\n", encoding="utf-8")

        assert load_settings().api_key == "from-dotenv"


class TestLoadProviderConfig:
    """Tests for load_provider_config."""

    def test_missing_file_returns_defaults(self, tmp_path):
        config = load_provider_config(tmp_path / "missing.yaml")

        assert config == ProviderConfig()
        assert config.text.model == "gemini-3-pro-preview"
        assert config.image.model == "gemini-2.5-flash-image"
        assert config.image.aspect_ratio == "3:4"
        assert config.language == "English"

    def test_empty_file_returns_defaults(self, tmp_path):
        path = tmp_path / "providers.yaml"
        path.write_text("", encoding="utf-8")

        assert load_provider_config(path) == ProviderConfig()

    def test_partial_file_overrides_only_given_values(self, tmp_path):
        path = tmp_path / "providers.yaml"
        path.write_text(
            "image:\n  aspect_ratio: \"1:1\"\nlanguage: Portuguese\n",
            encoding="utf-8",
        )

        config = load_provider_config(path)

        assert config.image.aspect_ratio == "1:1"
        assert config.image.model == "gemini-2.5-flash-image"
        assert config.text.model == "gemini-3-pro-preview"
        assert config.language == "Portuguese"

    def test_shipped_config_matches_defaults(self):
        assert DEFAULT_CONFIG_PATH.name == "providers.yaml"
        if not DEFAULT_CONFIG_PATH.exists():
            pytest.skip("running from an installed wheel without config/")

        config = load_provider_config(Path(DEFAULT_CONFIG_PATH))

        assert config.text.model == "gemini-3-pro-preview"
        assert config.image.model == "gemini-2.5-flash-image"
