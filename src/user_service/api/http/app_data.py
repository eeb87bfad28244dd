from dataclasses import dataclass

from src.user_service.core.services import DbSessionService
from src.user_service.runtime.config.config_data import ConfigData


@dataclass
class ApplicationDependencies:
    config: ConfigData
    database_service: DbSessionService
    graphiql_html: str | None = None

    @property
    def graphiql_available(self) -> bool:
        return self.graphiql_html is not None

    def available_routes(self) -> dict[str, str]:
        """Route groups advertised by the index, health and 404 responses."""
        return {
            "rest": "/users",
            "graphql": "/graphql",
            "graphiql": "/graphiql" if self.graphiql_available else "not available",
            "docs": "/api-docs",
            "health": "/health",
        }
