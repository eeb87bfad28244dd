"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from sqlalchemy import StaticPool, text
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, create_engine

from src.user_service.runtime.config.config_data import ConfigData, DatabaseConfig
from src.user_service.runtime.context import get_config


class DbSessionService:
    def __init__(self, config: ConfigData | None = None):
        """Initialize the shared database engine and session factory."""

        main_config = config or get_config()
        self._db_config = main_config.database
        self._environment = main_config.app.environment

        logger.info(
            "Configuring database engine for environment: {}", self._environment
        )
        engine_kwargs = self._get_engine_kwargs(self._db_config)
        self._engine = create_engine(self._db_config.url, **engine_kwargs)

        if self._db_config.is_sqlite and self._environment == "production":
            logger.warning(
                "SQLite is not recommended for production use. "
                "Consider PostgreSQL for better performance and reliability."
            )

    @property
    def engine(self):
        return self._engine

    def _get_engine_kwargs(self, db_config: DatabaseConfig) -> dict[str, Any]:
        """Build engine arguments suited to the configured backend."""
        engine_kwargs: dict[str, Any] = {
            "echo": db_config.echo,
            "pool_pre_ping": True,
        }

        if db_config.is_sqlite:
            # Sessions are handed across FastAPI's worker threads
            engine_kwargs["connect_args"] = {
                "check_same_thread": False,
                "timeout": 20,
            }
            if db_config.is_in_memory:
                # One shared connection, otherwise every session sees an empty database
                engine_kwargs["poolclass"] = StaticPool
            return engine_kwargs

        engine_kwargs.update(
            {
                "pool_size": db_config.pool_size,
                "max_overflow": db_config.max_overflow,
                "pool_timeout": db_config.pool_timeout,
                "pool_recycle": db_config.pool_recycle,
            }
        )
        return engine_kwargs

    def create_all(self) -> None:
        """Create all database tables."""
        from src.user_service.entities.user import UserTable  # noqa: F401

        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(
            self._engine,
            expire_on_commit=False,
            autoflush=True,
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Context manager style helper for scripts and tests."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(
                "Database transaction failed",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise
        finally:
            db.close()

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except SQLAlchemyError as e:
            logger.error(
                "Database health check failed",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return False

    def dispose(self) -> None:
        self._engine.dispose()
