"""Services module for cross-cutting concerns.

- OutputService: Handles saving generated packages to disk
"""

from .output import OutputService, render_ebook_markdown, render_posts_markdown

__all__ = [
    "OutputService",
    "render_ebook_markdown",
    "render_posts_markdown",
]
