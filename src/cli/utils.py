"""Shared helpers for CLI commands."""

import typer
from rich.console import Console

from src.user_service.core.services import DbSessionService

console = Console()


def get_database_service() -> DbSessionService:
    """Build a database service from the current configuration."""
    try:
        return DbSessionService()
    except Exception as e:
        console.print(f"[red]❌ Failed to configure the database: {e}[/red]")
        raise typer.Exit(code=1) from e
