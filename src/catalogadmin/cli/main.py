"""
Main CLI entry point for catalogadmin.
"""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel

from catalogadmin import __version__
from catalogadmin.cli.commands.admin import admin_app
from catalogadmin.cli.commands.api import api_app
from catalogadmin.cli.commands.db import db_app
from catalogadmin.config.logging import configure_logging
from catalogadmin.config.settings import settings

console = Console()

app = typer.Typer(
    name="catalogadmin",
    help="Video catalog administration",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Add subcommands
app.add_typer(api_app, name="api", help="API server commands")
app.add_typer(db_app, name="db", help="Database commands")
app.add_typer(admin_app, name="admin", help="Catalog browsing commands")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(
        Panel(
            f"[bold blue]catalogadmin[/bold blue] v{__version__}",
            title="Version",
            border_style="blue",
        )
    )


@app.command()
def status() -> None:
    """Show application status."""
    if settings.is_postgresql:
        database = "PostgreSQL"
    elif settings.is_sqlite:
        database = "SQLite"
    else:
        database = "unknown"
    console.print(
        Panel(
            f"[green]✓[/green] Database backend: {database}\n"
            f"[blue]i[/blue] API base URL: {settings.api_base_url}\n"
            "[blue]i[/blue] Use 'catalogadmin --help' for available commands",
            title="Status",
            border_style="green",
        )
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit"
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Override CATALOGADMIN_LOG_LEVEL"
    ),
) -> None:
    """
    catalogadmin - Video catalog administration.

    Run the catalog API, manage its database and browse categories,
    genres, cast members and videos from the terminal.
    """
    if version:
        console.print(f"catalogadmin v{__version__}")
        raise typer.Exit(code=0)

    configure_logging(log_level)

    if ctx.invoked_subcommand is None:
        console.print(
            "[yellow]Use 'catalogadmin --help' for available commands[/yellow]"
        )
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
