"""Display functions for CLI commands - pure functions for Rich output."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule
from rich.text import Text

from ..constants import Tab
from ..shell import ShellState
from .params import GenerateParams, ServeParams


def show_generate_config(console: Console, params: GenerateParams) -> None:
    """Display generation configuration panel."""
    tabs = ", ".join(t.label for t in params.tabs)
    console.print(Panel(
        f"Topic: [green]{escape(params.topic) or '(empty)'}[/green]\n"
        f"Language: [yellow]{params.language or 'from config'}[/yellow]\n"
        f"Tabs: [yellow]{tabs}[/yellow]\n"
        f"Copy: [yellow]{params.copy_id or 'none'}[/yellow]\n"
        f"Output: [yellow]{params.output_dir or 'not saved'}[/yellow]",
        title="Digital Package Generation",
    ))


def show_ai_event(console: Console, event: dict[str, Any]) -> None:
    """Display one provider event as a dim progress line."""
    event_type = event.get("type")
    model = event.get("model", "?")
    if event_type == "text_call":
        console.print(f"[dim]Generating package text with {model}...[/dim]")
    elif event_type == "image_call":
        console.print(f"[dim]Generating cover with {model} ({event.get('aspect_ratio')})...[/dim]")
    elif event_type in ("text_response", "image_response"):
        console.print(f"[dim]  done in {event.get('duration_seconds', 0):.1f}s[/dim]")


def _show_cover(console: Console, state: ShellState) -> None:
    console.print(f"[bold green]{escape(state.package.ebook.title)}[/bold green]")
    console.print(f"Cover image: [cyan]{state.cover_filename}[/cyan] "
                  f"[dim]({len(state.cover_image_url)} chars data URL)[/dim]")


def _show_ebook(console: Console, state: ShellState) -> None:
    console.print(f"[bold green]{escape(state.package.ebook.title)}[/bold green]\n")
    for chapter in state.package.ebook.chapters:
        console.print(Panel(Text(chapter.content), title=escape(chapter.title), title_align="left"))


def _show_posts(console: Console, state: ShellState) -> None:
    for index, post in enumerate(state.package.posts):
        console.print(Panel(Text(post), title=f"post-{index}", title_align="left"))


def _show_bonus(console: Console, state: ShellState) -> None:
    bonus = state.package.bonus
    console.print(Panel(Text(bonus.content), title=f"{escape(bonus.title)} (bonus)", title_align="left"))


def _show_script(console: Console, state: ShellState) -> None:
    console.print(Panel(Text(state.package.sales_script), title="Sales Script (script)", title_align="left"))


_TAB_RENDERERS = {
    Tab.COVER: _show_cover,
    Tab.EBOOK: _show_ebook,
    Tab.POSTS: _show_posts,
    Tab.BONUS: _show_bonus,
    Tab.SCRIPT: _show_script,
}


def show_package(console: Console, state: ShellState, tabs: tuple[Tab, ...]) -> None:
    """Render the requested tabs of a generated package."""
    if not state.has_result:
        return
    for tab in tabs:
        console.print(Rule(tab.label))
        _TAB_RENDERERS[tab](console, state)


def show_error(console: Console, error: str, details: Optional[dict] = None) -> None:
    """Display an error."""
    console.print(f"\n[red]Error: {escape(error)}[/red]")
    if details:
        for key, value in details.items():
            console.print(f"  [dim]{key}:[/dim] [yellow]{value}[/yellow]")


def show_copied(console: Console, copy_id: str) -> None:
    console.print(f"[green]Copied {copy_id} to clipboard[/green]")


def show_saved(console: Console, output_path: Path) -> None:
    console.print(Panel(
        f"[bold green]Package saved![/bold green]\n\n[bold]Output:[/] {output_path}",
        title="Complete",
        border_style="green",
    ))


def show_serve_config(console: Console, params: ServeParams) -> None:
    console.print(Panel(
        f"Serving on [cyan]http://{params.host}:{params.port}[/cyan]\n"
        f"Config: [yellow]{params.config_path or 'default'}[/yellow]",
        title="Digital Package Studio",
    ))
