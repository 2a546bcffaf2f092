"""Provider configuration loading and validation."""

from __future__ import annotations

from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import AliasChoices, BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..errors import ConfigurationError

# Load .env file
load_dotenv()

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent.parent / "config" / "providers.yaml"


class GeminiSettings(BaseSettings):
    """Credentials read from the process environment."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    api_key: str = Field(
        validation_alias=AliasChoices("GEMINI_API_KEY", "GOOGLE_API_KEY", "API_KEY"),
        min_length=1,
    )


class TextProviderConfig(BaseModel):
    """Configuration for the structured text model."""

    model: str = "gemini-3-pro-preview"
    temperature: float | None = None


class ImageProviderConfig(BaseModel):
    """Configuration for the cover image model."""

    model: str = "gemini-2.5-flash-image"
    aspect_ratio: str = "3:4"


class ProviderConfig(BaseModel):
    """Full provider configuration."""

    text: TextProviderConfig = Field(default_factory=TextProviderConfig)
    image: ImageProviderConfig = Field(default_factory=ImageProviderConfig)
    language: str = "English"


def load_settings() -> GeminiSettings:
    """Read the API credential from the environment.

    Raises:
        ConfigurationError: If no API key is configured.
    """
    try:
        return GeminiSettings()
    except ValidationError as e:
        raise ConfigurationError(
            "GEMINI_API_KEY environment variable not set"
        ) from e


def load_provider_config(config_path: Path | None = None) -> ProviderConfig:
    """Load provider configuration from YAML file."""
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        # Return default config if file doesn't exist
        return ProviderConfig()

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return ProviderConfig(**data)
