"""CLI package.

Usage:
    digipack generate "productivity for freelancers" --tab posts --copy post-0
    digipack generate "productivity for freelancers" --output output/
    digipack serve --port 8000
"""

from .app import app, main

__all__ = ["app", "main"]
