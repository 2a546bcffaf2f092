"""Shared test fixtures and configuration.

Provides sample packages, Gemini response doubles and mock providers so no
test ever reaches the network.
"""

from __future__ import annotations

import base64
import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from google.genai import types

from digipack.content.models import GenerationResult
from digipack.providers.config import ProviderConfig
from digipack.providers.image import InlineImage

# Minimal PNG header, enough to stand in for image bytes
PNG_BYTES = bytes([
    0x89, 0x50, 0x4E, 0x47, 0x0D, 0x0A, 0x1A, 0x0A,
    0x00, 0x00, 0x00, 0x0D, 0x49, 0x48, 0x44, 0x52,
])
PNG_BASE64 = base64.b64encode(PNG_BYTES).decode("utf-8")


def make_package_dict(
    title: str = "Freelance Focus",
    cover_prompt: str = "a minimalist orange book cover",
    chapters: int = 5,
) -> dict[str, Any]:
    """Build a package payload the way the text model returns it (camelCase)."""
    return {
        "ebook": {
            "title": title,
            "chapters": [
                {"title": f"Chapter {i}", "content": f"Content of chapter {i}."}
                for i in range(1, chapters + 1)
            ],
        },
        "posts": [f"Post {i} #freelance #productivity" for i in range(1, 6)],
        "coverPrompt": cover_prompt,
        "bonus": {"title": "Weekly Checklist", "content": "- Plan\n- Focus\n- Review"},
        "salesScript": "Stop juggling tasks. Get the Freelance Focus package today!",
    }


def make_text_response(text: str | None) -> MagicMock:
    """Stand-in for a GenerateContentResponse carrying only text."""
    response = MagicMock()
    response.text = text
    return response


def make_image_response(
    data: bytes | None = PNG_BYTES,
    mime_type: str = "image/png",
    with_text_part: bool = True,
) -> types.GenerateContentResponse:
    """Real SDK response with an optional inline image part."""
    parts: list[types.Part] = []
    if with_text_part:
        parts.append(types.Part(text="Here is your cover."))
    if data is not None:
        parts.append(types.Part(inline_data=types.Blob(mime_type=mime_type, data=data)))
    return types.GenerateContentResponse(
        candidates=[types.Candidate(content=types.Content(role="model", parts=parts))]
    )


@pytest.fixture
def package_dict() -> dict[str, Any]:
    return make_package_dict()


@pytest.fixture
def package_json(package_dict: dict[str, Any]) -> str:
    return json.dumps(package_dict)


@pytest.fixture
def provider_config() -> ProviderConfig:
    return ProviderConfig()


@pytest.fixture
def mock_genai_client() -> MagicMock:
    """Gemini client double; configure aio.models.generate_content per test."""
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock()
    return client


@pytest.fixture
def mock_text_provider(package_json: str) -> AsyncMock:
    """Create a mock TextProvider returning a valid package."""
    provider = AsyncMock()
    provider.generate_json.return_value = package_json
    return provider


@pytest.fixture
def mock_image_provider() -> AsyncMock:
    """Create a mock ImageProvider returning a PNG."""
    provider = AsyncMock()
    provider.generate.return_value = InlineImage(mime_type="image/png", data=PNG_BASE64)
    return provider


@pytest.fixture
def generation_result(package_dict: dict[str, Any]) -> GenerationResult:
    from digipack.content.responses import PackageResponse

    package = PackageResponse.model_validate(package_dict).to_package()
    return GenerationResult(
        package=package,
        cover_image_url=f"data:image/png;base64,{PNG_BASE64}",
    )


@pytest.fixture
def mock_generator(generation_result: GenerationResult) -> AsyncMock:
    """Generator double for shell, web and CLI tests."""
    generator = AsyncMock()
    generator.generate.return_value = generation_result
    return generator


@pytest.fixture
def make_package():
    """Factory for package payloads, see make_package_dict."""
    return make_package_dict


@pytest.fixture
def text_response():
    """Factory for text-only model responses."""
    return make_text_response


@pytest.fixture
def image_response():
    """Factory for image model responses."""
    return make_image_response
