"""Two-step digital package generation.

Step 1 asks the text model for the whole package as schema-constrained JSON,
including a cover prompt. Step 2 feeds that cover prompt to the image model.
The steps run strictly in sequence: any failure discards the whole call.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from ..errors import EmptyTopicError, NoContentError, PackageParseError
from .models import GenerationResult
from .prompts import build_package_prompt
from .responses import PACKAGE_SCHEMA, PackageResponse

if TYPE_CHECKING:
    from ..providers import GeminiSettings, ImageProvider, ProviderConfig, TextProvider
    from ..providers.text import AIEventCallback

_logger = logging.getLogger("ai_calls")

EXPECTED_POST_COUNT = 5


def parse_package_response(text: str) -> PackageResponse:
    """Parse and validate the text model output.

    Raises:
        PackageParseError: If the text is not JSON or misses required fields.
    """
    try:
        return PackageResponse.model_validate_json(text)
    except ValidationError as e:
        raise PackageParseError(f"Invalid package returned by text model: {e}") from e


class PackageGenerator:
    """Generates a digital package and its cover for a topic.

    Usage:
        generator = PackageGenerator.from_settings()
        result = await generator.generate("productivity for freelancers")
        result.package.ebook.title
        result.cover_image_url  # data:image/png;base64,...
    """

    def __init__(
        self,
        text_provider: "TextProvider",
        image_provider: "ImageProvider",
        language: str = "English",
    ):
        self.text_provider = text_provider
        self.image_provider = image_provider
        self.language = language

    @classmethod
    def from_settings(
        cls,
        settings: "GeminiSettings | None" = None,
        config: "ProviderConfig | None" = None,
        event_callback: "AIEventCallback" = None,
    ) -> "PackageGenerator":
        """Build a generator backed by a real Gemini client.

        Raises:
            ConfigurationError: If no API key is configured.
        """
        from ..providers import ImageProvider, TextProvider, create_client, load_provider_config

        config = config or load_provider_config()
        client = create_client(settings)
        return cls(
            text_provider=TextProvider(client, config, event_callback=event_callback),
            image_provider=ImageProvider(client, config, event_callback=event_callback),
            language=config.language,
        )

    async def generate(self, topic: str) -> GenerationResult:
        """Generate the package text, then its cover image.

        Raises:
            EmptyTopicError: Topic is empty or whitespace.
            NoContentError: Text model returned no text.
            PackageParseError: Text model output is not a valid package.
            NoCandidatesError: Image model returned no candidate.
            NoImageDataError: Image candidate had no inline data.
        """
        if not topic or not topic.strip():
            raise EmptyTopicError("Topic must not be empty")

        prompt = build_package_prompt(topic, self.language)
        text = await self.text_provider.generate_json(
            prompt, PACKAGE_SCHEMA, task="package_text"
        )
        if not text:
            raise NoContentError("Text generation returned no content")

        response = parse_package_response(text)
        if len(response.posts) != EXPECTED_POST_COUNT:
            _logger.warning(
                f"PACKAGE_POSTS | expected:{EXPECTED_POST_COUNT} | got:{len(response.posts)}"
            )

        image = await self.image_provider.generate(
            response.cover_prompt, task="package_cover"
        )

        return GenerationResult(
            package=response.to_package(),
            cover_image_url=image.to_data_url(),
        )
