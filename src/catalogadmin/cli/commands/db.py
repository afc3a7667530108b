"""
Database CLI commands.

- `create`: create every table from the ORM metadata
- `drop`: drop every table
- `seed`: fill the catalog with fake data
"""

from __future__ import annotations

import asyncio
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from catalogadmin.cli.errors import ErrorCategory, display_error, get_exit_code_for_category
from catalogadmin.config.database import db_manager
from catalogadmin.exceptions import RepositoryError
from catalogadmin.services.seeder import CatalogSeeder, SeedResult

console = Console()

db_app = typer.Typer(
    name="db",
    help="Database management commands",
    no_args_is_help=True,
)


@db_app.command()
def create() -> None:
    """Create the catalog tables (use alembic for managed databases)."""

    async def _create() -> None:
        try:
            await db_manager.create_tables()
        finally:
            await db_manager.close()

    asyncio.run(_create())
    console.print("[green]✓[/green] Tables created")


@db_app.command()
def drop(
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
) -> None:
    """Drop every catalog table."""
    if not yes:
        typer.confirm("Drop all catalog tables?", abort=True)

    async def _drop() -> None:
        try:
            await db_manager.drop_tables()
        finally:
            await db_manager.close()

    asyncio.run(_drop())
    console.print("[yellow]![/yellow] Tables dropped")


@db_app.command()
def seed(
    categories: int = typer.Option(10, "--categories", min=0, help="Categories to create"),
    genres: int = typer.Option(15, "--genres", min=0, help="Genres to create"),
    cast_members: int = typer.Option(
        20, "--cast-members", min=0, help="Cast members to create"
    ),
    videos: int = typer.Option(10, "--videos", min=0, help="Videos to create"),
    random_seed: Optional[int] = typer.Option(
        None, "--seed", help="Random seed for reproducible data"
    ),
) -> None:
    """
    Seed the catalog with fake data.

    Examples:
        catalogadmin db seed
        catalogadmin db seed --videos 50 --seed 42
    """

    async def _seed() -> SeedResult:
        seeder = CatalogSeeder(seed=random_seed)
        result = SeedResult()
        try:
            async for session in db_manager.get_session():
                result = await seeder.seed(
                    session,
                    categories=categories,
                    genres=genres,
                    cast_members=cast_members,
                    videos=videos,
                )
        finally:
            await db_manager.close()
        return result

    console.print(
        Panel(
            "[blue]Seeding the catalog...[/blue]",
            title="Catalog Seeding",
            border_style="blue",
        )
    )
    try:
        result = asyncio.run(_seed())
    except RepositoryError as e:
        display_error(ErrorCategory.DATABASE, e.message)
        raise typer.Exit(code=get_exit_code_for_category(ErrorCategory.DATABASE))

    results_table = Table(title="Seeding Results")
    results_table.add_column("Entity", style="cyan")
    results_table.add_column("Created", style="green")
    results_table.add_row("Categories", str(result.categories))
    results_table.add_row("Genres", str(result.genres))
    results_table.add_row("Cast members", str(result.cast_members))
    results_table.add_row("Videos", str(result.videos))
    results_table.add_row("Failed", str(result.failed))
    results_table.add_row("Duration", f"{result.duration_seconds:.2f}s")
    console.print(results_table)

    for error in result.errors[:5]:
        console.print(f"  [red]✗[/red] {error}")
