"""Presentation shell: one handler per user action over a ShellState.

Handlers:
- submit: validate the topic, run one generation, store the outcome
- select_tab: switch the visible result tab
- copy: put an item's text on the clipboard and flag it as copied for a while

Only one generation runs per shell at a time; submit is ignored while loading.
Copy flags reset through one-shot timers on the running event loop, keyed by
item id so items never interfere and a repeated copy rearms its own timer.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol

from ..constants import (
    COPY_FEEDBACK_SECONDS,
    EMPTY_TOPIC_MESSAGE,
    GENERATION_FAILED_MESSAGE,
    Tab,
)
from ..content.models import GenerationResult
from .clipboard import Clipboard, NullClipboard
from .state import ShellState, copy_text_for

_logger = logging.getLogger("digipack")


class Generator(Protocol):
    async def generate(self, topic: str) -> GenerationResult: ...


class ShellController:
    """Owns the shell state and mutates it in response to user actions.

    Usage:
        shell = ShellController(PackageGenerator.from_settings())
        await shell.submit("productivity for freelancers")
        shell.state.active_tab   # Tab.COVER on success
        shell.copy("post-0")     # flag resets after COPY_FEEDBACK_SECONDS
        shell.close()
    """

    def __init__(
        self,
        generator: Generator,
        clipboard: Clipboard | None = None,
        copy_feedback_seconds: float = COPY_FEEDBACK_SECONDS,
    ):
        self._generator = generator
        self._clipboard = clipboard or NullClipboard()
        self._copy_feedback_seconds = copy_feedback_seconds
        self._timers: dict[str, asyncio.TimerHandle] = {}
        self.state = ShellState()

    @property
    def copy_feedback_seconds(self) -> float:
        return self._copy_feedback_seconds

    def set_topic(self, topic: str) -> None:
        if self.state.loading:
            return
        self.state.topic = topic

    async def submit(self, topic: str | None = None) -> ShellState:
        """Run one generation for the current (or given) topic.

        Never raises for generation failures: they end up as state.error.
        """
        if self.state.loading:
            _logger.info("Submit ignored: a generation is already in progress")
            return self.state

        if topic is not None:
            self.state.topic = topic

        if not self.state.topic.strip():
            self.state.error = EMPTY_TOPIC_MESSAGE
            return self.state

        self.state.loading = True
        self.state.error = None
        self.state.package = None
        self.state.cover_image_url = None

        try:
            result = await self._generator.generate(self.state.topic)
        except Exception:
            _logger.exception(f"Package generation failed for topic {self.state.topic!r}")
            self.state.error = GENERATION_FAILED_MESSAGE
        else:
            self.state.package = result.package
            self.state.cover_image_url = result.cover_image_url
            self.state.active_tab = Tab.COVER
            _logger.info(f"Package generated: {result.package.ebook.title!r}")
        finally:
            self.state.loading = False

        return self.state

    def select_tab(self, tab: Tab | str) -> None:
        self.state.active_tab = Tab(tab)

    def copy(self, item_id: str) -> str:
        """Copy an item's text and flag it as copied.

        Must be called from within a running event loop.

        Raises:
            UnknownCopyTargetError: If the id does not name a generated item.
        """
        text = copy_text_for(self.state.package, item_id)
        self._clipboard.copy(text)
        self.state.copied[item_id] = True
        self._arm_reset(item_id)
        return text

    def _arm_reset(self, item_id: str) -> None:
        previous = self._timers.pop(item_id, None)
        if previous is not None:
            previous.cancel()
        loop = asyncio.get_running_loop()
        self._timers[item_id] = loop.call_later(
            self._copy_feedback_seconds, self._reset_copied, item_id
        )

    def _reset_copied(self, item_id: str) -> None:
        self._timers.pop(item_id, None)
        self.state.copied[item_id] = False

    def close(self) -> None:
        """Cancel pending copy timers."""
        for handle in self._timers.values():
            handle.cancel()
        self._timers.clear()
