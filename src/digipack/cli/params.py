"""Immutable parameter dataclasses for CLI commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..constants import Tab


@dataclass(frozen=True)
class GenerateParams:
    """Immutable parameters for package generation."""

    topic: str
    tabs: tuple[Tab, ...]
    copy_id: Optional[str]
    output_dir: Optional[Path]
    config_path: Optional[Path]
    language: Optional[str]

    @classmethod
    def from_cli(
        cls,
        topic: str,
        tab: Optional[str] = None,
        copy_id: Optional[str] = None,
        output_dir: Optional[Path] = None,
        config_path: Optional[Path] = None,
        language: Optional[str] = None,
    ) -> "GenerateParams":
        """Create from CLI arguments. No --tab means every tab."""
        tabs = (Tab(tab),) if tab else tuple(Tab)
        return cls(
            topic=topic,
            tabs=tabs,
            copy_id=copy_id,
            output_dir=output_dir,
            config_path=config_path,
            language=language,
        )


@dataclass(frozen=True)
class ServeParams:
    """Immutable parameters for the web server."""

    host: str
    port: int
    config_path: Optional[Path]
