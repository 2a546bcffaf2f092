"""Prompt templates for package generation."""

from __future__ import annotations

PACKAGE_PROMPT = (
    "Act as a digital marketing expert and content creator. Create a complete "
    'digital package for resale on the topic: "{topic}". The package must be '
    "high quality, practical and ready to sell. Write the ebook, posts, bonus "
    "and sales script in {language}; write the cover prompt in English. "
    "Return a JSON object following the provided schema."
)


def build_package_prompt(topic: str, language: str = "English") -> str:
    """Build the instruction sent to the text model for one topic."""
    return PACKAGE_PROMPT.format(topic=topic.strip(), language=language)
