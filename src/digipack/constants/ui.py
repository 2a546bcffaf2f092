"""User-facing strings and timings."""

from typing import Final

# Seconds a copy button shows its "copied" state before resetting.
COPY_FEEDBACK_SECONDS: Final[float] = 2.0

EMPTY_TOPIC_MESSAGE: Final[str] = "Please enter a topic for the digital package."
GENERATION_FAILED_MESSAGE: Final[str] = (
    "Something went wrong while generating the package. Please try again."
)
LOADING_MESSAGE: Final[str] = (
    "The AI is creating your digital package. This may take a moment..."
)

APP_TITLE: Final[str] = "Premium Digital Package Creator"
APP_TAGLINE: Final[str] = (
    "Enter a topic and generate a complete digital package (ebook, posts, "
    "cover, bonus and sales script) ready for resale."
)
TOPIC_PLACEHOLDER: Final[str] = "E.g. How to invest in crypto for beginners"

# Copy target identifiers
COPY_ID_BONUS: Final[str] = "bonus"
COPY_ID_SCRIPT: Final[str] = "script"
COPY_ID_POST_PREFIX: Final[str] = "post-"
