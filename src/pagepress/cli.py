"""pagepress CLI - publish the bookmarks and about pages."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .config import settings
from .utils.async_bridge import run_async_in_sync
from .utils.console import console
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)


def _print_panel(message: str, style: str = "blue") -> None:
    """Print a styled panel message."""
    console.print(Panel(f"[bold]{message}[/bold]", style=style))


app = typer.Typer(
    name="pagepress",
    help="Publish Pinboard bookmarks and blog previews as site pages on Dropbox",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"[bold blue]pagepress[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Also write debug logs to this file"),
    ] = None,
) -> None:
    """pagepress - keep the bookmarks and about pages fresh."""
    setup_logging(level=settings.log_level, log_file=log_file)


@app.command("run")
def run() -> None:
    """Fetch bookmarks and posts, render both pages and upload them to Dropbox."""
    from .services import run_once

    _print_panel("Publishing pages...")
    try:
        report = run_async_in_sync(run_once(settings))
    except Exception as e:
        logger.exception("Publish failed")
        console.print(f"[red]Publish failed: {e}[/red]")
        raise typer.Exit(code=1)

    console.print(f"  Bookmarks: {report.bookmark_count}")
    console.print(f"  Posts: {report.post_count}")
    for path in report.paths:
        console.print(f"  [green]Uploaded[/green] {path}")


@app.command("render")
def render(
    output_dir: Annotated[
        Path,
        typer.Option("--output-dir", "-o", help="Directory for the rendered .md files"),
    ] = Path("build"),
) -> None:
    """Fetch and render both pages locally without uploading."""
    from .services import render_pages

    try:
        pages = run_async_in_sync(render_pages(settings))
    except Exception as e:
        logger.exception("Render failed")
        console.print(f"[red]Render failed: {e}[/red]")
        raise typer.Exit(code=1)

    output_dir.mkdir(parents=True, exist_ok=True)
    for page in pages:
        output_file = output_dir / f"{page.name}.md"
        output_file.write_text(page.markdown, encoding="utf-8")
        console.print(f"  Saved to: {output_file}")


@app.command("schedule")
def schedule() -> None:
    """Run in the foreground and publish on the configured cron schedule."""
    from .scheduler import PublishScheduler

    console.print(f"[bold cyan]Publishing on schedule: {settings.schedule_cron}[/bold cyan]")
    console.print("[dim]Press Ctrl+C to stop[/dim]\n")
    try:
        run_async_in_sync(PublishScheduler(settings).run())
    except KeyboardInterrupt:
        console.print("\n[dim]Scheduler stopped.[/dim]")


@app.command("config")
def show_config() -> None:
    """Show the effective configuration with credentials masked."""
    table = Table(title="pagepress configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    rows = [
        ("PINBOARD", settings.masked_pinboard_token),
        ("DROPBOX", settings.masked_dropbox_token),
        ("pinboard_api_url", settings.pinboard_api_url),
        ("pinboard_tag", settings.pinboard_tag),
        ("blog_listing_url", settings.blog_listing_url),
        ("blog_listing_debug", str(settings.blog_listing_debug)),
        ("dropbox_root", f"/{settings.dropbox_root}/pages"),
        ("timezone", settings.timezone),
        ("schedule_cron", settings.schedule_cron),
        ("schedule_timezone", settings.schedule_timezone),
    ]
    for name, value in rows:
        table.add_row(name, value)
    console.print(table)
