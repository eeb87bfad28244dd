"""Health check endpoints router for monitoring service availability."""

from datetime import UTC, datetime
from typing import Any

from fastapi import APIRouter, Depends
from starlette.responses import JSONResponse

from src.user_service.api.http.app_data import ApplicationDependencies
from src.user_service.api.http.deps import get_app_dependencies

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("")
async def health(
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> dict[str, Any]:
    """Basic health check endpoint - checks if app is running.

    This is a liveness probe that returns 200 OK as long as the application
    process is running, whatever the Host header. It does not check dependencies.
    """
    endpoints = app_deps.available_routes()
    endpoints.pop("health")
    return {
        "status": "healthy",
        "timestamp": datetime.now(UTC).isoformat(),
        "endpoints": endpoints,
        "environment": app_deps.config.app.environment,
    }


@router.get("/ready", response_model=None)
def readiness(
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> dict[str, Any] | JSONResponse:
    """Readiness check - validates database connectivity.

    Returns 200 when the database answers, 503 otherwise.
    """
    db_config = app_deps.config.database
    db_healthy = app_deps.database_service.health_check()

    response = {
        "status": "ready" if db_healthy else "not_ready",
        "environment": app_deps.config.app.environment,
        "checks": {
            "database": {
                "status": "healthy" if db_healthy else "unhealthy",
                "type": "sqlite" if db_config.is_sqlite else db_config.url.split(":", 1)[0],
            }
        },
    }

    if not db_healthy:
        return JSONResponse(status_code=503, content=response)

    return response
