"""Status enums for the presentation shell.

The shell is a small state machine driven by one user action (submit):

    IDLE -> LOADING -> SUCCESS
               |
               v
             ERROR

SUCCESS and ERROR both accept a new submit, which goes back to LOADING.
"""

from enum import Enum


class ShellStatus(str, Enum):
    """Where the shell is in the generate cycle."""

    IDLE = "idle"
    """Nothing generated yet and no error shown."""

    LOADING = "loading"
    """A generation request is in flight."""

    SUCCESS = "success"
    """A package and cover are available."""

    ERROR = "error"
    """The last submit failed (validation or generation)."""


class Tab(str, Enum):
    """Result viewer tabs, in display order."""

    COVER = "cover"
    EBOOK = "ebook"
    POSTS = "posts"
    BONUS = "bonus"
    SCRIPT = "script"

    @property
    def label(self) -> str:
        return TAB_LABELS[self]


TAB_LABELS: dict[Tab, str] = {
    Tab.COVER: "Cover",
    Tab.EBOOK: "Ebook",
    Tab.POSTS: "Posts",
    Tab.BONUS: "Bonus",
    Tab.SCRIPT: "Sales Script",
}
