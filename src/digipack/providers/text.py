"""Text generation provider using the Gemini async client.

Structured-output calls only: the model is constrained to a response schema
and asked for JSON. Parsing the returned text is left to the caller.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Awaitable, Callable

from google import genai
from google.genai import types

from .config import ProviderConfig, load_provider_config

_logger = logging.getLogger("ai_calls")

# Type for AI event callback
AIEventCallback = Callable[[dict[str, Any]], Awaitable[None]] | None


class TextProvider:
    """Structured text generation through Gemini.

    Usage:
        provider = TextProvider(client)
        raw_json = await provider.generate_json(prompt, schema)
    """

    def __init__(
        self,
        client: genai.Client,
        config: ProviderConfig | None = None,
        event_callback: AIEventCallback = None,
    ):
        """Initialize the text provider.

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

    def _build_config(self, schema: types.Schema) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=schema,
            temperature=self.config.text.temperature,
        )

    async def generate_json(
        self,
        prompt: str,
        schema: types.Schema,
        task: str | None = None,
    ) -> str | None:
        """Generate JSON text constrained to a response schema.

        Args:
            prompt: The user prompt to send to the model.
            schema: Response schema the output must follow.
            task: Optional task name for tracking.

        Returns:
            The response text, or None when the model returned no text.
        """
        model_id = self.config.text.model

        await self._emit_event({
            "type": "text_call",
            "model": model_id,
            "prompt_preview": prompt[:200],
            "task": task,
        })

        _logger.info(
            f"AI_REQUEST_STRUCTURED | model:{model_id} | task:{task}\n"
            f"--- PROMPT ---\n{prompt}\n"
            f"--- END REQUEST ---"
        )

        start_time = time.time()
        try:
            response = await self._client.aio.models.generate_content(
                model=model_id,
                contents=prompt,
                config=self._build_config(schema),
            )
        except Exception as e:
            _logger.warning(f"STRUCTURED_ERROR | model:{model_id} | task:{task} | error:{e}")
            await self._emit_event({
                "type": "text_error",
                "model": model_id,
                "error": str(e)[:100],
            })
            raise

        duration = time.time() - start_time
        self._total_calls += 1
        result = response.text

        _logger.info(
            f"AI_RESPONSE_STRUCTURED | model:{model_id} | task:{task} | "
            f"duration:{duration:.2f}s\n"
            f"--- RESPONSE (JSON) ---\n{result or '(empty)'}\n"
            f"--- END RESPONSE ---"
        )

        await self._emit_event({
            "type": "text_response",
            "model": model_id,
            "response_preview": (result or "")[:200],
            "duration_seconds": duration,
            "total_calls": self._total_calls,
        })

        return result

    @property
    def current_model(self) -> str:
        """Get the configured text model."""
        return self.config.text.model

    @property
    def total_calls(self) -> int:
        """Number of successful calls made by this provider."""
        return self._total_calls
