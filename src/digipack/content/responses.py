"""Response model and schema for the package generation call.

PACKAGE_SCHEMA is sent to Gemini as the structured-output schema;
PackageResponse validates what comes back.
"""

from __future__ import annotations

from google.genai import types
from pydantic import Field, field_validator

from .models import DigitalPackage


class PackageResponse(DigitalPackage):
    """Full model response: the package plus the transient cover prompt."""

    cover_prompt: str = Field(alias="coverPrompt")

    @field_validator("cover_prompt")
    @classmethod
    def _cover_prompt_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("cover prompt is empty")
        return value

    def to_package(self) -> DigitalPackage:
        """Drop the cover prompt, keeping only what is shown to the user."""
        return DigitalPackage.model_validate(
            self.model_dump(exclude={"cover_prompt"})
        )


def _text(description: str) -> types.Schema:
    return types.Schema(type=types.Type.STRING, description=description)


def _title_content(title: str, content: str) -> types.Schema:
    return types.Schema(
        type=types.Type.OBJECT,
        properties={"title": _text(title), "content": _text(content)},
        required=["title", "content"],
    )


PACKAGE_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "ebook": types.Schema(
            type=types.Type.OBJECT,
            properties={
                "title": _text("Concise, compelling title for the ebook."),
                "chapters": types.Schema(
                    type=types.Type.ARRAY,
                    description="At least 5 detailed chapters for the ebook.",
                    items=_title_content(
                        "Chapter title.",
                        "Detailed chapter content, at least 300 words.",
                    ),
                ),
            },
            required=["title", "chapters"],
        ),
        "posts": types.Schema(
            type=types.Type.ARRAY,
            description=(
                "Exactly 5 social media posts (Instagram/Facebook) promoting "
                "the ebook, including relevant hashtags."
            ),
            items=types.Schema(type=types.Type.STRING),
        ),
        "coverPrompt": _text(
            "A detailed prompt, in English, for an AI image generator to create "
            "a professional, visually striking ebook cover. Include style, "
            "colors, imagery and typography."
        ),
        "bonus": _title_content(
            "Title for the bonus material (e.g. Checklist, Quick Guide).",
            "Practical bonus content, such as a checklist or a step-by-step guide.",
        ),
        "salesScript": _text(
            "A persuasive sales script for a landing page or video, highlighting "
            "the package benefits and ending with a clear call to action."
        ),
    },
    required=["ebook", "posts", "coverPrompt", "bonus", "salesScript"],
)
