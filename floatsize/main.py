#!/usr/bin/env python3
"""
Main CLI entry point for floatsize
"""

import json
from pathlib import Path
from typing import Optional

import typer
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from floatsize import __version__
from floatsize.config import settings
from floatsize.config.ui_config import get_keymap, get_theme, set_theme
from floatsize.core.pane_index import PaneIndex
from floatsize.dispatch import CommandDispatcher, LoggingDispatcher, ZellijDispatcher
from floatsize.exceptions import ConfigurationError, InvariantViolation, SnapshotError
from floatsize.sources import JsonFileSnapshotSource, read_snapshot_file
from floatsize.utils.logging_utils import setup_logging

app = typer.Typer(help="Browse floating panes and resize them by percentage.")
console = Console()


def _snapshot_path(snapshot: Optional[Path]) -> Path:
    try:
        return snapshot or settings.get_snapshot_path()
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e


def _make_dispatcher(dry_run: bool) -> CommandDispatcher:
    name = "dry-run" if dry_run else settings.get_dispatcher_name()
    if name == "dry-run":
        return LoggingDispatcher()
    return ZellijDispatcher()


@app.command()
def run(
    snapshot: Optional[Path] = typer.Option(
        None, "--snapshot", "-s", help="Workspace snapshot JSON file (default: $FLOATSIZE_SNAPSHOT)"
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Log commands instead of sending them"),
    theme: Optional[str] = typer.Option(
        None, "--theme", "-t", help="Theme to use (floatsize-dark, floatsize-light)"
    ),
    save_theme: bool = typer.Option(False, "--save-theme", help="Remember --theme for later runs"),
    poll: Optional[float] = typer.Option(None, "--poll", help="Seconds between snapshot polls"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every key transition"),
):
    """Open the resize overlay."""
    from floatsize.ui.app import FloatsizeApp
    from floatsize.ui.themes import get_theme_names

    try:
        setup_logging("DEBUG" if verbose else settings.get_log_level())
        poll_interval = poll if poll is not None else settings.get_poll_interval()
        dispatcher = _make_dispatcher(dry_run)
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e

    if save_theme:
        if theme not in get_theme_names():
            console.print(
                f"[red]Error:[/red] --save-theme needs --theme, one of: {', '.join(get_theme_names())}"
            )
            raise typer.Exit(1)
        set_theme(theme)
        console.print(f"[green]✓[/green] Saved theme {theme}")

    overlay = FloatsizeApp(
        JsonFileSnapshotSource(_snapshot_path(snapshot)),
        dispatcher,
        poll_interval=poll_interval,
        theme_name=theme or get_theme(),
        keymap=get_keymap(),
    )
    try:
        overlay.run()
    except KeyboardInterrupt:
        pass


@app.command()
def panes(
    snapshot: Optional[Path] = typer.Option(
        None, "--snapshot", "-s", help="Workspace snapshot JSON file (default: $FLOATSIZE_SNAPSHOT)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """List the floating panes of the current session."""
    path = _snapshot_path(snapshot)
    try:
        event = read_snapshot_file(path)
        index = PaneIndex()
        index.rebuild(event.sessions)
    except (SnapshotError, InvariantViolation, OSError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e

    if as_json:
        rows = [
            {
                "key": key,
                "tab_id": pane.parent_tab.tab_id,
                "tab": pane.parent_tab.name,
                "pane_id": pane.pane_id,
                "pane_ref": pane.pane_ref,
                "is_plugin": pane.is_plugin,
                "title": pane.title,
                "columns": pane.geometry.columns,
                "rows": pane.geometry.rows,
            }
            for key, pane in index.items()
        ]
        print(json.dumps(rows, indent=2))
        return

    if not len(index):
        console.print("[yellow]No floating panes[/yellow]")
        return

    table = Table(title="Floating panes", box=box.ROUNDED)
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Tab")
    table.add_column("Pane", style="magenta")
    table.add_column("Title")
    table.add_column("Geometry", justify="right")
    for key, pane in index.items():
        table.add_row(
            str(key),
            escape(pane.parent_tab.name or str(pane.parent_tab.position)),
            pane.pane_ref,
            escape(pane.title),
            str(pane.geometry),
        )
    console.print(table)


@app.command()
def env():
    """Show floatsize environment variables."""
    table = Table(box=box.SIMPLE)
    table.add_column("Variable", style="cyan")
    table.add_column("Value")
    table.add_column("Default", style="dim")
    table.add_column("Description")
    for name, info in settings.get_env_info().items():
        value = info["value"] if info["is_set"] else "[dim]unset[/dim]"
        if not info["valid"]:
            value = f"[red]{info['value']} (invalid)[/red]"
        table.add_row(name, value, str(info["default"]), info["description"])
    console.print(table)


@app.command()
def version():
    """Show floatsize version"""
    typer.echo(f"floatsize version {__version__}")


def run_cli():
    """Entry point for the CLI"""
    app()


if __name__ == "__main__":
    run_cli()
