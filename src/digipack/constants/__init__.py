"""Global constants package for digipack.

- status.py : Shell status and tab enums
- ui.py     : User-facing strings, copy ids and timings
"""

from .status import TAB_LABELS, ShellStatus, Tab
from .ui import (
    APP_TAGLINE,
    APP_TITLE,
    COPY_FEEDBACK_SECONDS,
    COPY_ID_BONUS,
    COPY_ID_POST_PREFIX,
    COPY_ID_SCRIPT,
    EMPTY_TOPIC_MESSAGE,
    GENERATION_FAILED_MESSAGE,
    LOADING_MESSAGE,
    TOPIC_PLACEHOLDER,
)

__all__ = [
    "ShellStatus",
    "Tab",
    "TAB_LABELS",
    "COPY_FEEDBACK_SECONDS",
    "EMPTY_TOPIC_MESSAGE",
    "GENERATION_FAILED_MESSAGE",
    "LOADING_MESSAGE",
    "APP_TITLE",
    "APP_TAGLINE",
    "TOPIC_PLACEHOLDER",
    "COPY_ID_BONUS",
    "COPY_ID_SCRIPT",
    "COPY_ID_POST_PREFIX",
]
