"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, computed_field


class AppConfig(BaseModel):
    """Application configuration model."""

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    host: str = Field(default="0.0.0.0", description="Interface the server binds to")
    port: int = Field(default=3000, description="Application port")
    allowed_host_prod: str | None = Field(
        default=None, description="Host header accepted in production"
    )
    allowed_host_dev: str | None = Field(
        default="localhost:3000",
        description="Host header accepted outside production",
    )
    host_check_exempt_paths: list[str] = Field(
        default_factory=lambda: ["/health"],
        description="Paths served regardless of the Host header",
    )

    @computed_field
    @property
    def allowed_host(self) -> str | None:
        """Host header value the gatekeeper accepts for the current environment."""
        if self.environment == "production":
            return self.allowed_host_prod
        return self.allowed_host_dev

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="plain", description="Log format")
    file: str | None = Field(
        default=None, description="Log file path; empty disables the file sink"
    )
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class DatabaseConfig(BaseModel):
    """Database configuration model."""

    url: str = Field(
        default="sqlite:///./database.db",
        description="SQLAlchemy database connection URL",
    )
    echo: bool = Field(default=False, description="Echo SQL statements")
    pool_size: int = Field(default=5, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum pool overflow")
    pool_timeout: int = Field(default=30, description="Pool timeout in seconds")
    pool_recycle: int = Field(default=1800, description="Pool recycle time in seconds")

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    @property
    def is_in_memory(self) -> bool:
        return self.is_sqlite and (
            self.url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in self.url
        )


class GraphQLConfig(BaseModel):
    """GraphQL endpoint configuration."""

    graphiql_enabled: bool = Field(
        default=True, description="Serve the GraphiQL console when its asset exists"
    )
    graphiql_asset: str | None = Field(
        default=None,
        description="Path to the GraphiQL HTML page; the bundled page when unset",
    )


class ConfigData(BaseModel):
    """Root configuration model that matches the config.yaml structure."""

    app: AppConfig = Field(
        default_factory=AppConfig, description="Application configuration"
    )
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig, description="Database configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    graphql: GraphQLConfig = Field(
        default_factory=GraphQLConfig, description="GraphQL configuration"
    )
