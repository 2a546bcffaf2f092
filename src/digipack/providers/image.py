"""Image generation provider using the Gemini async client."""

from __future__ import annotations

import base64
import logging
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from google import genai
from google.genai import types

from ..errors import NoCandidatesError, NoImageDataError
from .config import ProviderConfig, load_provider_config

_logger = logging.getLogger("ai_calls")

# Type for AI event callback
AIEventCallback = Callable[[dict[str, Any]], Awaitable[None]] | None


@dataclass(frozen=True)
class InlineImage:
    """Image returned inline by the model, base64-encoded."""

    mime_type: str
    data: str

    def to_data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"


def _encode_inline_data(data: bytes | str) -> str:
    # The SDK hands back raw bytes; a str payload is already base64.
    if isinstance(data, (bytes, bytearray)):
        return base64.b64encode(data).decode("utf-8")
    return data


def extract_inline_image(response: types.GenerateContentResponse) -> InlineImage:
    """Pull the first inline image out of a generate_content response.

    Raises:
        NoCandidatesError: No first candidate, or it has no content parts.
        NoImageDataError: No part carries inline binary data.
    """
    candidates = response.candidates or []
    first = candidates[0] if candidates else None
    if first is None or first.content is None or not first.content.parts:
        raise NoCandidatesError("Image generation returned no valid candidates")

    for part in first.content.parts:
        inline = part.inline_data
        if inline and inline.data:
            return InlineImage(
                mime_type=inline.mime_type or "image/png",
                data=_encode_inline_data(inline.data),
            )

    raise NoImageDataError("Image generation returned no image data")


class ImageProvider:
    """Cover image generation through Gemini.

    Usage:
        provider = ImageProvider(client)
        image = await provider.generate("A minimalist orange book cover")
        url = image.to_data_url()
    """

    def __init__(
        self,
        client: genai.Client,
        config: ProviderConfig | None = None,
        event_callback: AIEventCallback = None,
    ):
        """Initialize image provider.

        Args:
            client: Gemini client (real or test double).
            config: Provider configuration. If None, loads from default config file.
            event_callback: Optional callback for AI events (for progress tracking).
        """
        self._client = client
        self.config = config or load_provider_config()
        self._event_callback = event_callback
        self._total_calls = 0

    async def _emit_event(self, event: dict[str, Any]) -> None:
        """Emit an AI event if callback is set."""
        if self._event_callback:
            await self._event_callback(event)

    async def generate(
        self,
        prompt: str,
        task: str | None = None,
        aspect_ratio: str | None = None,
    ) -> InlineImage:
        """Generate an image from a prompt.

        Args:
            prompt: Text description of the image.
            task: Optional task name for tracking.
            aspect_ratio: Override for the configured aspect ratio.

        Returns:
            The first inline image of the first candidate.
        """
        model_id = self.config.image.model
        ratio = aspect_ratio or self.config.image.aspect_ratio

        await self._emit_event({
            "type": "image_call",
            "model": model_id,
            "prompt_preview": prompt[:200],
            "aspect_ratio": ratio,
            "task": task,
        })

        _logger.info(
            f"AI_REQUEST_IMAGE | model:{model_id} | task:{task} | aspect_ratio:{ratio}\n"
            f"--- PROMPT ---\n{prompt}\n"
            f"--- END REQUEST ---"
        )

        start_time = time.time()
        try:
            response = await self._client.aio.models.generate_content(
                model=model_id,
                contents=types.Content(role="user", parts=[types.Part(text=prompt)]),
                config=types.GenerateContentConfig(
                    image_config=types.ImageConfig(aspect_ratio=ratio),
                ),
            )
            image = extract_inline_image(response)
        except Exception as e:
            _logger.warning(f"IMAGE_ERROR | model:{model_id} | task:{task} | error:{e}")
            await self._emit_event({
                "type": "image_error",
                "model": model_id,
                "error": str(e)[:100],
            })
            raise

        duration = time.time() - start_time
        self._total_calls += 1

        _logger.info(
            f"AI_RESPONSE_IMAGE | model:{model_id} | task:{task} | "
            f"duration:{duration:.2f}s | mime_type:{image.mime_type} | "
            f"base64_chars:{len(image.data)}"
        )

        await self._emit_event({
            "type": "image_response",
            "model": model_id,
            "duration_seconds": duration,
            "total_calls": self._total_calls,
        })

        return image

    @property
    def current_model(self) -> str:
        """Get the configured image model."""
        return self.config.image.model
