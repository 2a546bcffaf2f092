"""AI Providers - Gemini text and image generation."""

from .client import create_client
from .config import (
    GeminiSettings,
    ProviderConfig,
    load_provider_config,
    load_settings,
)
from .image import ImageProvider, InlineImage
from .text import TextProvider

__all__ = [
    "TextProvider",
    "ImageProvider",
    "InlineImage",
    "create_client",
    "GeminiSettings",
    "ProviderConfig",
    "load_provider_config",
    "load_settings",
]
