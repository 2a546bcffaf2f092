"""Clipboard boundary for copy actions."""

from __future__ import annotations

import logging
from typing import Protocol

import pyperclip

_logger = logging.getLogger("digipack")


class Clipboard(Protocol):
    def copy(self, text: str) -> None: ...


class PyperclipClipboard:
    """System clipboard for terminal use. Failures are logged, never raised."""

    def copy(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            _logger.warning(f"Clipboard copy failed: {e}")


class NullClipboard:
    """Used by the web surface, where the browser performs the write."""

    def copy(self, text: str) -> None:
        return None
