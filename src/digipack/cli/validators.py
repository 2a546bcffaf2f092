"""Pure validation functions for CLI arguments.

The topic itself is validated by the shell, like in the browser.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

from ..constants import COPY_ID_BONUS, COPY_ID_SCRIPT, Tab
from .types import Failure, Result, Success

_POST_ID_RE = re.compile(r"^post-\d+$")


def validate_tab(tab: Optional[str]) -> Result[Optional[str]]:
    if tab is None:
        return Success(None)
    valid = [t.value for t in Tab]
    if tab not in valid:
        return Failure(f"Invalid tab: {tab}", {"valid_tabs": ", ".join(valid)})
    return Success(tab)


def validate_copy_id(copy_id: Optional[str]) -> Result[Optional[str]]:
    if copy_id is None:
        return Success(None)
    if copy_id in (COPY_ID_BONUS, COPY_ID_SCRIPT) or _POST_ID_RE.match(copy_id):
        return Success(copy_id)
    return Failure(
        f"Invalid copy target: {copy_id}",
        {"hint": "Use post-<n> (from 0), bonus or script"},
    )


def validate_config_path(config_path: Optional[Path]) -> Result[Optional[Path]]:
    if config_path is not None and not config_path.is_file():
        return Failure(f"Config file not found: {config_path}")
    return Success(config_path)


def validate_generate_args(
    tab: Optional[str],
    copy_id: Optional[str],
    config_path: Optional[Path],
) -> Result[None]:
    """Validate generate options. Returns the first failure found."""
    for result in (validate_tab(tab), validate_copy_id(copy_id), validate_config_path(config_path)):
        if isinstance(result, Failure):
            return result
    return Success(None)
