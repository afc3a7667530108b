"""CLI commands for API server management."""

from __future__ import annotations

import typer

api_app = typer.Typer(
    name="api",
    help="API server management commands",
    no_args_is_help=True,
)


@api_app.command()
def start(
    port: int = typer.Option(8000, "--port", "-p", help="Port to run the server on"),
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind"),
    production: bool = typer.Option(
        False, "--production", help="Run in production mode"
    ),
) -> None:
    """
    Start the catalog API server.

    Development mode (default): Auto-reload enabled, info logging.
    Production mode: Multiple workers, warning-level logging.

    Examples:
        catalogadmin api start
        catalogadmin api start --port 3000
        catalogadmin api start --production
    """
    import uvicorn

    if production:
        uvicorn.run(
            "catalogadmin.api.main:app",
            host=host,
            port=port,
            workers=2,
            log_level="warning",
        )
    else:
        uvicorn.run(
            "catalogadmin.api.main:app",
            host=host,
            port=port,
            reload=True,
            log_level="info",
        )
