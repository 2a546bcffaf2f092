"""Rich console singleton for CLI output."""

import sys

from rich.console import Console

# Use safe_box on Windows to avoid Unicode encoding errors
_safe_box = sys.platform == "win32"

# Global console instance - used across all CLI modules
console = Console(safe_box=_safe_box)
