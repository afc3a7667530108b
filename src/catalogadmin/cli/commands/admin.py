"""
Admin CLI commands: browse catalog lists in the terminal.

`admin list RESOURCE [QUERY]` reads QUERY the way the admin UI reads its
address bar, fetches the page through the catalog API and renders it.
"""

from __future__ import annotations

import asyncio
from typing import Any, List, Optional, Tuple

import typer
from rich.console import Console
from rich.table import Table

from catalogadmin.cli.errors import ErrorCategory, display_error, get_exit_code_for_category
from catalogadmin.client.controller import ListController
from catalogadmin.client.filter.manager import FilterManager, MemoryHistory
from catalogadmin.client.http import RESOURCES, CatalogClient
from catalogadmin.client.tables import TableConfig, get_table
from catalogadmin.models.enums import CastMemberType

console = Console()

admin_app = typer.Typer(
    name="admin",
    help="Browse the catalog through the API",
    no_args_is_help=True,
)


def format_cell(column: str, value: Any) -> str:
    """Render one cell value of a list row."""
    if value is None:
        return ""
    if isinstance(value, list):
        return ", ".join(str(item.get("name", "")) for item in value)
    if isinstance(value, bool):
        return "[green]✓[/green]" if value else "[red]✗[/red]"
    if column == "type":
        return CastMemberType(int(value)).label
    if column == "created_at":
        return str(value)[:10]
    return str(value)


def render_table(config: TableConfig, rows: List[dict[str, Any]], total: int) -> Table:
    """Build the Rich table of one list page."""
    table = Table(title=f"{config.title} ({total} total)")
    for column in config.columns:
        table.add_column(column.label, style="cyan" if column is config.columns[0] else None)
    for row in rows:
        table.add_row(
            *(format_cell(column.name, row.get(column.name)) for column in config.columns)
        )
    return table


async def fetch_page(
    config: TableConfig, query: str, client: CatalogClient
) -> Tuple[FilterManager, ListController, List[str]]:
    """Load the page described by ``query``; returns the notifications shown."""
    notifications: List[str] = []
    manager = config.filter_manager(MemoryHistory.from_url(f"/{config.resource}", query))
    controller = ListController(
        client.resource(config.resource),
        manager,
        debounce_time=config.debounce_time,
        notifier=lambda message, variant: notifications.append(message),
    )
    await controller.start()
    controller.close()
    return manager, controller, notifications


@admin_app.command("list")
def list_resource(
    resource: str = typer.Argument(..., help=f"One of: {', '.join(RESOURCES)}"),
    query: str = typer.Argument(
        "", help="Query string, e.g. 'search=drama&page=2&sort=name&dir=desc'"
    ),
    base_url: Optional[str] = typer.Option(
        None, "--api", help="API base URL (default: CATALOGADMIN_API_BASE_URL)"
    ),
) -> None:
    """
    Show one page of a catalog list.

    Examples:
        catalogadmin admin list categories
        catalogadmin admin list genres "categories=Movies&per_page=25"
        catalogadmin admin list cast-members "type=1&sort=name"
    """
    try:
        config = get_table(resource)
    except KeyError:
        display_error(
            ErrorCategory.VALIDATION,
            f"Unknown resource {resource}",
            hint=f"Use one of: {', '.join(RESOURCES)}",
        )
        raise typer.Exit(code=get_exit_code_for_category(ErrorCategory.VALIDATION))

    async def _run() -> Tuple[FilterManager, ListController, List[str]]:
        async with CatalogClient(base_url) as client:
            return await fetch_page(config, query.lstrip("?"), client)

    manager, controller, notifications = asyncio.run(_run())

    if notifications:
        display_error(
            ErrorCategory.API,
            notifications[-1],
            hint="Check that the API is running: catalogadmin api start",
        )
        raise typer.Exit(code=get_exit_code_for_category(ErrorCategory.API))

    console.print(render_table(config, controller.data, controller.total_records))
    location = manager.history.location
    console.print(f"[dim]{location.pathname}{location.search}[/dim]")
