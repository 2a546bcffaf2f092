"""Tests for the two-step PackageGenerator."""

from __future__ import annotations

import base64
import json
import logging
from unittest.mock import patch

import pytest

from digipack.content.generator import PackageGenerator
from digipack.content.responses import PACKAGE_SCHEMA
from digipack.errors import (
    ConfigurationError,
    EmptyTopicError,
    NoCandidatesError,
    NoContentError,
    NoImageDataError,
    PackageParseError,
)
from digipack.providers.config import GeminiSettings, ProviderConfig
from digipack.providers.image import ImageProvider
from digipack.providers.text import TextProvider

from conftest import PNG_BYTES


@pytest.fixture
def generator(mock_text_provider, mock_image_provider) -> PackageGenerator:
    return PackageGenerator(mock_text_provider, mock_image_provider)


class TestGenerate:
    """Tests for PackageGenerator.generate with mocked providers."""

    @pytest.mark.asyncio
    async def test_success_returns_package_and_data_url(self, generator, mock_text_provider, mock_image_provider):
        result = await generator.generate("productivity for freelancers")

        assert result.package.ebook.title == "Freelance Focus"
        assert result.cover_image_url == "data:image/png;base64," + base64.b64encode(PNG_BYTES).decode()
        mock_text_provider.generate_json.assert_awaited_once()
        prompt, schema = mock_text_provider.generate_json.await_args.args
        assert "productivity for freelancers" in prompt
        assert schema is PACKAGE_SCHEMA
        mock_image_provider.generate.assert_awaited_once_with(
            "a minimalist orange book cover", task="package_cover"
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("topic", ["", "   ", "\n\t"])
    async def test_empty_topic_makes_no_calls(self, generator, mock_text_provider, mock_image_provider, topic):
        with pytest.raises(EmptyTopicError):
            await generator.generate(topic)

        mock_text_provider.generate_json.assert_not_awaited()
        mock_image_provider.generate.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", [None, ""])
    async def test_no_text_skips_image(self, generator, mock_text_provider, mock_image_provider, text):
        mock_text_provider.generate_json.return_value = text

        with pytest.raises(NoContentError):
            await generator.generate("topic")

        mock_image_provider.generate.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unparsable_text_skips_image(self, generator, mock_text_provider, mock_image_provider):
        mock_text_provider.generate_json.return_value = '{"ebook": '

        with pytest.raises(PackageParseError):
            await generator.generate("topic")

        mock_image_provider.generate.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [NoCandidatesError("none"), NoImageDataError("none")])
    async def test_image_failure_discards_text(self, generator, mock_image_provider, error):
        mock_image_provider.generate.side_effect = error

        with pytest.raises(type(error)):
            await generator.generate("topic")

    @pytest.mark.asyncio
    async def test_text_provider_error_propagates(self, generator, mock_text_provider, mock_image_provider):
        mock_text_provider.generate_json.side_effect = RuntimeError("network down")

        with pytest.raises(RuntimeError, match="network down"):
            await generator.generate("topic")

        mock_image_provider.generate.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unexpected_post_count_is_logged(self, generator, mock_text_provider, package_dict, caplog):
        package_dict["posts"] = package_dict["posts"][:3]
        mock_text_provider.generate_json.return_value = json.dumps(package_dict)

        with caplog.at_level(logging.WARNING, logger="ai_calls"):
            result = await generator.generate("topic")

        assert len(result.package.posts) == 3
        assert "PACKAGE_POSTS" in caplog.text

    @pytest.mark.asyncio
    async def test_language_reaches_prompt(self, mock_text_provider, mock_image_provider):
        generator = PackageGenerator(mock_text_provider, mock_image_provider, language="Portuguese")

        await generator.generate("topic")

        prompt = mock_text_provider.generate_json.await_args.args[0]
        assert "Portuguese" in prompt


class TestEndToEnd:
    """Real providers over a mocked Gemini client."""

    @pytest.mark.asyncio
    async def test_text_then_image(self, mock_genai_client, provider_config, text_response, image_response, package_json):
        mock_genai_client.aio.models.generate_content.side_effect = [
            text_response(package_json),
            image_response(),
        ]
        generator = PackageGenerator(
            TextProvider(mock_genai_client, provider_config),
            ImageProvider(mock_genai_client, provider_config),
        )

        result = await generator.generate("productivity for freelancers")

        calls = mock_genai_client.aio.models.generate_content.await_args_list
        assert [c.kwargs["model"] for c in calls] == ["gemini-3-pro-preview", "gemini-2.5-flash-image"]
        assert calls[1].kwargs["contents"].parts[0].text == "a minimalist orange book cover"
        assert result.cover_image_url == "data:image/png;base64," + base64.b64encode(PNG_BYTES).decode()
        assert result.package.posts[0].startswith("Post 1")


class TestFromSettings:
    def test_builds_providers_on_one_client(self):
        config = ProviderConfig(language="Spanish")
        with patch("digipack.providers.client.genai.Client") as client_cls:
            generator = PackageGenerator.from_settings(
                settings=GeminiSettings(GEMINI_API_KEY="key"),
                config=config,
            )

        client_cls.assert_called_once_with(api_key="key")
        assert generator.language == "Spanish"
        assert generator.text_provider._client is generator.image_provider._client

    def test_missing_key_raises(self, monkeypatch, tmp_path):
        for name in ("GEMINI_API_KEY", "GOOGLE_API_KEY", "API_KEY"):
            monkeypatch.delenv(name, raising=False)
        monkeypatch.chdir(tmp_path)

        with pytest.raises(ConfigurationError):
            PackageGenerator.from_settings(config=ProviderConfig())
