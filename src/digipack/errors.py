"""Exceptions raised across digipack."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Raised when the process cannot start with the current configuration."""

    pass


# =============================================================================
# Generation errors
# =============================================================================


class GenerationError(Exception):
    """Base exception for package generation errors."""

    pass


class EmptyTopicError(GenerationError):
    """Topic was empty or whitespace only."""

    pass


class NoContentError(GenerationError):
    """Text generation returned no content."""

    pass


class PackageParseError(GenerationError):
    """Text generation returned content that is not a valid package."""

    pass


class NoCandidatesError(GenerationError):
    """Image generation returned no usable candidate."""

    pass


class NoImageDataError(GenerationError):
    """Image candidate carried no inline image data."""

    pass


# =============================================================================
# Shell errors
# =============================================================================


class UnknownCopyTargetError(KeyError):
    """Copy was requested for an item that does not exist."""

    pass
