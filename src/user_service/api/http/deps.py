"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from src.user_service.api.http.app_data import ApplicationDependencies
from src.user_service.entities.user import UserRepository


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    """Get the dependencies wired by the application factory."""
    return request.app.state.app_dependencies


def get_db_session(
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> Iterator[Session]:
    """Yield a database session scoped to the current request."""
    session = app_deps.database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_user_repository(db: Session = Depends(get_db_session)) -> UserRepository:
    """Get the user access layer bound to the request's session."""
    return UserRepository(db)
