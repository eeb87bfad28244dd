"""Database CLI commands."""

import typer

from src.user_service.core.exceptions import UserConflictError
from src.user_service.entities.user import UserCreate, UserRepository

from .utils import console, get_database_service

db_app = typer.Typer(help="🗄️  Database commands")

SEED_USERS = [
    UserCreate(name="Emiliano", email="emiliano@example.com"),
    UserCreate(name="Ademir", email="ademir@example.com"),
    UserCreate(name="Jimena", email="jimena@example.com"),
]


@db_app.command("init")
def init_db() -> None:
    """Create all database tables."""
    db_service = get_database_service()
    db_service.create_all()
    console.print("[green]✅ Database tables created[/green]")


@db_app.command("seed")
def seed_db() -> None:
    """Insert the demo users, skipping emails that already exist."""
    db_service = get_database_service()
    db_service.create_all()

    console.print("Seeding database...")
    created = 0
    with db_service.session_scope() as session:
        repository = UserRepository(session)
        for user in SEED_USERS:
            try:
                repository.create(user)
                created += 1
            except UserConflictError:
                console.print(f"[yellow]Skipping {user.email}: already exists[/yellow]")

    console.print(f"[green]✅ Seed completed! {created} user(s) created[/green]")
