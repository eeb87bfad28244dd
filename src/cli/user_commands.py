"""User management CLI commands."""

import typer
from rich.table import Table

from src.user_service.core.exceptions import UserServiceError
from src.user_service.entities.user import UserRepository

from .utils import console, get_database_service

# Create the users subcommand app
users_app = typer.Typer(help="Inspect users stored in the database")


@users_app.command("list")
def list_users() -> None:
    """List all users in the database."""
    db_service = get_database_service()

    try:
        with db_service.session_scope() as session:
            users = UserRepository(session).list_all()
    except UserServiceError as e:
        console.print(f"[red]❌ Failed to list users: {e}[/red]")
        raise typer.Exit(code=1) from e

    if not users:
        console.print("[yellow]No users found[/yellow]")
        return

    table = Table(title="Users")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Email", style="blue")

    for user in users:
        table.add_row(str(user.id), user.name or "", user.email)

    console.print(table)
    console.print(f"\n[green]Found {len(users)} users[/green]")
