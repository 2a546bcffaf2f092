"""Shared Gemini client construction."""

from __future__ import annotations

from google import genai

from .config import GeminiSettings, load_settings


def create_client(settings: GeminiSettings | None = None) -> genai.Client:
    """Create a Gemini client from settings (or the environment).

    Raises:
        ConfigurationError: If no API key is configured.
    """
    settings = settings or load_settings()
    return genai.Client(api_key=settings.api_key)
