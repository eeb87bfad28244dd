from __future__ import annotations

from collections.abc import Callable, Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlmodel import Session

from src.user_service.api.http.app import create_app
from src.user_service.core.services import DbSessionService
from src.user_service.entities.user import UserRepository
from src.user_service.runtime.config.config_data import (
    AppConfig,
    ConfigData,
    DatabaseConfig,
    LoggingConfig,
)
from src.user_service.runtime.context import merge_configs

TEST_HOST = "testserver"
PROD_HOST = "api.example.com"


@pytest.fixture
def test_config() -> ConfigData:
    """Configuration accepting TestClient's default Host header, in-memory database."""
    return ConfigData(
        app=AppConfig(
            environment="test",
            allowed_host_dev=TEST_HOST,
            allowed_host_prod=PROD_HOST,
        ),
        database=DatabaseConfig(url="sqlite://"),
        logging=LoggingConfig(file=None),
    )


@pytest.fixture
def bare_db_service(test_config: ConfigData) -> Generator[DbSessionService]:
    """Separate in-memory database whose tables have not been created."""
    service = DbSessionService(test_config)
    try:
        yield service
    finally:
        service.dispose()


@pytest.fixture
def db_service(test_config: ConfigData) -> Generator[DbSessionService]:
    """Fresh in-memory database with all tables created."""
    service = DbSessionService(test_config)
    service.create_all()
    try:
        yield service
    finally:
        service.dispose()


@pytest.fixture
def session(db_service: DbSessionService) -> Generator[Session]:
    """Create a fresh database session for testing."""
    session = db_service.get_session()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def repository(session: Session) -> UserRepository:
    """User repository bound to the test session."""
    return UserRepository(session)


@pytest.fixture
def app_factory(
    test_config: ConfigData, db_service: DbSessionService
) -> Callable[..., FastAPI]:
    """Build applications sharing the test database, with optional config overrides."""

    def _make_app(
        override: ConfigData | None = None,
        database_service: DbSessionService | None = None,
    ) -> FastAPI:
        config = merge_configs(test_config, override) if override else test_config
        return create_app(config, database_service or db_service)

    return _make_app


@pytest.fixture
def app(app_factory: Callable[..., FastAPI]) -> FastAPI:
    """Application built from the test configuration."""
    return app_factory()


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient]:
    """Test client with the application's lifespan running."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def graphql(client: TestClient) -> Callable[..., dict]:
    """Post a GraphQL document and return the decoded response envelope."""

    def _execute(query: str, variables: dict | None = None) -> dict:
        payload: dict = {"query": query}
        if variables is not None:
            payload["variables"] = variables
        response = client.post("/graphql", json=payload)
        assert response.status_code == 200, response.text
        return response.json()

    return _execute
