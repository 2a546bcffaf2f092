"""Data models for generated digital packages."""

from __future__ import annotations

import base64
import mimetypes
import re

from pydantic import BaseModel, ConfigDict, Field

_UNSAFE_SLUG_RE = re.compile(r"[^\w-]+")
_HYPHEN_RUN_RE = re.compile(r"-{2,}")
_DATA_URL_RE = re.compile(r"^data:(?P<mime>[^;,]+);base64,(?P<data>.*)$", re.DOTALL)


def slugify_title(title: str) -> str:
    """Lower-case a title and replace every run of non-word characters with a hyphen.

    The result is a single safe path component; titles with nothing usable
    (such as "..") become "package".
    """
    slug = _UNSAFE_SLUG_RE.sub("-", title.strip().lower())
    slug = _HYPHEN_RUN_RE.sub("-", slug).strip("-")
    return slug or "package"


def split_data_url(url: str) -> tuple[str, str]:
    """Split a base64 data URL into its MIME type and payload.

    Raises:
        ValueError: If the URL is not a base64 data URL.
    """
    match = _DATA_URL_RE.match(url)
    if match is None:
        raise ValueError("not a base64 data URL")
    return match.group("mime"), match.group("data")


class EbookChapter(BaseModel):
    """A single ebook chapter."""

    title: str
    content: str


class Ebook(BaseModel):
    """Ebook with an ordered list of chapters."""

    title: str
    chapters: list[EbookChapter] = Field(min_length=1)


class Bonus(BaseModel):
    """Bonus material shipped with the ebook (checklist, quick guide...)."""

    title: str
    content: str


class DigitalPackage(BaseModel):
    """The generated deliverable for one topic."""

    model_config = ConfigDict(populate_by_name=True)

    ebook: Ebook
    posts: list[str]
    bonus: Bonus
    sales_script: str = Field(alias="salesScript")

    @property
    def slug(self) -> str:
        """Filesystem-friendly version of the ebook title."""
        return slugify_title(self.ebook.title)

    def cover_filename(self, mime_type: str = "image/png") -> str:
        """Download filename for the cover image."""
        extension = mimetypes.guess_extension(mime_type) or ".png"
        return f"cover-{self.slug}{extension}"


class GenerationResult(BaseModel):
    """A generated package and its cover image as a data URL."""

    package: DigitalPackage
    cover_image_url: str

    @property
    def cover_mime_type(self) -> str:
        return split_data_url(self.cover_image_url)[0]

    @property
    def cover_filename(self) -> str:
        return self.package.cover_filename(self.cover_mime_type)

    def cover_image_bytes(self) -> bytes:
        """Decode the cover image from its data URL."""
        return base64.b64decode(split_data_url(self.cover_image_url)[1])
