"""Presentation shell - view state and user action handlers."""

from .clipboard import Clipboard, NullClipboard, PyperclipClipboard
from .controller import Generator, ShellController
from .state import ShellState, copy_text_for, post_copy_id

__all__ = [
    "ShellController",
    "ShellState",
    "Generator",
    "Clipboard",
    "NullClipboard",
    "PyperclipClipboard",
    "copy_text_for",
    "post_copy_id",
]
