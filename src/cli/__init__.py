"""Main CLI application module."""

import typer

from .db_commands import db_app
from .serve_commands import serve_command
from .user_commands import users_app

# Create the main CLI application
app = typer.Typer(
    help="🛠️  User Service CLI - run the API and manage its data",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Register command groups
app.command(name="serve")(serve_command)
app.add_typer(db_app, name="db")
app.add_typer(users_app, name="users")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
