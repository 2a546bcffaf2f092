"""CLI commands - thin wrappers orchestrating params, validation, display and the shell."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Optional

import typer

from ..content import PackageGenerator
from ..errors import ConfigurationError, UnknownCopyTargetError
from ..providers import load_provider_config
from ..services import OutputService
from ..shell import PyperclipClipboard, ShellController, ShellState
from .console import console
from .display import (
    show_ai_event,
    show_copied,
    show_error,
    show_generate_config,
    show_package,
    show_saved,
    show_serve_config,
)
from .params import GenerateParams, ServeParams
from .validators import validate_config_path, validate_generate_args


async def _print_ai_event(event: dict[str, Any]) -> None:
    show_ai_event(console, event)


def build_generator(params: GenerateParams) -> PackageGenerator:
    """Create the generator for a CLI run.

    Raises:
        ConfigurationError: If no API key is configured.
    """
    config = load_provider_config(params.config_path)
    if params.language:
        config = config.model_copy(update={"language": params.language})
    return PackageGenerator.from_settings(config=config, event_callback=_print_ai_event)


async def _run_shell(shell: ShellController, params: GenerateParams) -> Optional[str]:
    """Submit the topic and perform the requested copy.

    Returns:
        The copy target that could not be resolved, if any.
    """
    try:
        state = await shell.submit(params.topic)
        if params.copy_id and state.has_result:
            try:
                shell.copy(params.copy_id)
            except UnknownCopyTargetError:
                return params.copy_id
        return None
    finally:
        shell.close()


def generate(
    topic: str = typer.Argument(..., help="Topic for the digital package"),
    tab: Optional[str] = typer.Option(None, "--tab", "-t", help="Only show one tab (cover, ebook, posts, bonus, script)"),
    copy_id: Optional[str] = typer.Option(None, "--copy", "-c", help="Copy an item to the clipboard (post-<n>, bonus, script)"),
    output_dir: Optional[Path] = typer.Option(None, "--output", "-o", help="Save the package under this directory"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="Provider config YAML"),
    language: Optional[str] = typer.Option(None, "--language", "-l", help="Language of the generated content"),
) -> None:
    """Generate an ebook, social posts, bonus, sales script and cover for a topic."""
    validation = validate_generate_args(tab, copy_id, config_path)
    if validation.is_failure():
        show_error(console, validation.error, validation.details)
        raise typer.Exit(1)

    params = GenerateParams.from_cli(
        topic=topic,
        tab=tab,
        copy_id=copy_id,
        output_dir=output_dir,
        config_path=config_path,
        language=language,
    )

    show_generate_config(console, params)

    try:
        generator = build_generator(params)
    except ConfigurationError as e:
        show_error(console, str(e), {"hint": "Set GEMINI_API_KEY in the environment or .env"})
        raise typer.Exit(1)

    shell = ShellController(generator, PyperclipClipboard())
    missing_copy_target = asyncio.run(_run_shell(shell, params))
    state: ShellState = shell.state

    if state.error:
        show_error(console, state.error)
        raise typer.Exit(1)

    show_package(console, state, params.tabs)

    if params.copy_id:
        if missing_copy_target:
            show_error(console, f"Nothing to copy for {missing_copy_target}")
        else:
            show_copied(console, params.copy_id)

    if params.output_dir:
        output_path = OutputService(params.output_dir).save(state.result, topic=state.topic)
        show_saved(console, output_path)


def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind"),
    port: int = typer.Option(8000, "--port", "-p", help="Port to listen on"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="Provider config YAML"),
) -> None:
    """Run the browser form."""
    import uvicorn

    from ..web import create_app

    validation = validate_config_path(config_path)
    if validation.is_failure():
        show_error(console, validation.error, validation.details)
        raise typer.Exit(1)

    params = ServeParams(host=host, port=port, config_path=validation.value)

    try:
        app = create_app(config_path=params.config_path)
    except ConfigurationError as e:
        show_error(console, str(e), {"hint": "Set GEMINI_API_KEY in the environment or .env"})
        raise typer.Exit(1)

    show_serve_config(console, params)
    uvicorn.run(app, host=params.host, port=params.port, log_level="info")
