"""Server CLI command."""

import typer
from rich.panel import Panel

from src.user_service.main import serve

from .utils import console


def serve_command(
    host: str | None = typer.Option(None, help="Host to bind the server to"),
    port: int | None = typer.Option(None, help="Port to bind the server to"),
) -> None:
    """
    🚀 Start the API server.

    Host and port default to the values in config.yaml (PORT defaults to 3000).
    """
    console.print(
        Panel.fit(
            "[bold green]Starting User Service[/bold green]",
            border_style="green",
        )
    )
    serve(host=host, port=port)
