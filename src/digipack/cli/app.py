"""Typer app configuration and logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

LOG_DIR = Path(__file__).parent.parent.parent.parent / "logs"

# Create Typer app
app = typer.Typer(
    name="digipack",
    help="AI-powered digital package generator",
    add_completion=False,
)


def register_commands() -> None:
    """Register all commands."""
    from .commands import generate, serve

    app.command(name="generate")(generate)
    app.command(name="serve")(serve)


def setup_logging(log_dir: Path | None = None) -> None:
    """Configure logging for CLI.

    - Suppresses console output from libraries
    - Sets up file logging for AI calls and shell events
    """
    log_dir = log_dir or LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)

    # Remove any default console handlers from root logger
    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.setLevel(logging.CRITICAL)

    # Suppress loggers that might print to console
    for logger_name in ["httpx", "httpcore", "google_genai", "asyncio"]:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.WARNING)
        logger.propagate = False

    formatter = logging.Formatter("%(asctime)s | %(levelname)s | %(message)s")

    # ai_calls: full AI request/response logging
    ai_calls_logger = logging.getLogger("ai_calls")
    ai_calls_logger.setLevel(logging.DEBUG)
    ai_calls_logger.propagate = False
    ai_calls_logger.handlers = []
    ai_file_handler = logging.FileHandler(log_dir / "ai_calls.log", encoding="utf-8")
    ai_file_handler.setLevel(logging.DEBUG)
    ai_file_handler.setFormatter(formatter)
    ai_calls_logger.addHandler(ai_file_handler)

    # digipack: shell and web events
    app_logger = logging.getLogger("digipack")
    app_logger.setLevel(logging.INFO)
    app_logger.propagate = False
    app_logger.handlers = []
    app_file_handler = logging.FileHandler(log_dir / "digipack.log", encoding="utf-8")
    app_file_handler.setFormatter(formatter)
    app_logger.addHandler(app_file_handler)


@app.callback()
def _configure() -> None:
    """AI-powered digital package generator."""
    setup_logging()


# Register all commands
register_commands()


def main() -> None:
    """CLI entry point."""
    app()
