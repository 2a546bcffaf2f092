"""Content generation - package models, prompts and the two-step generator."""

from .generator import PackageGenerator, parse_package_response
from .models import (
    Bonus,
    DigitalPackage,
    Ebook,
    EbookChapter,
    GenerationResult,
    slugify_title,
    split_data_url,
)
from .responses import PACKAGE_SCHEMA, PackageResponse

__all__ = [
    "PackageGenerator",
    "parse_package_response",
    "DigitalPackage",
    "Ebook",
    "EbookChapter",
    "Bonus",
    "GenerationResult",
    "slugify_title",
    "split_data_url",
    "PackageResponse",
    "PACKAGE_SCHEMA",
]
