"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from loguru import logger
from starlette.responses import JSONResponse, RedirectResponse

from src.user_service import __version__
from src.user_service.api.graphql import build_graphql_router
from src.user_service.api.http.app_data import ApplicationDependencies
from src.user_service.api.http.errors import (
    internal_error_body,
    register_exception_handlers,
)
from src.user_service.api.http.middleware.host_check import HostCheckMiddleware
from src.user_service.api.http.routers import health, pages, users
from src.user_service.core.services import DbSessionService
from src.user_service.runtime.config.config_data import ConfigData
from src.user_service.runtime.context import get_config

DEFAULT_GRAPHIQL_ASSET = (
    Path(__file__).resolve().parents[2] / "static" / "graphiql" / "graphiql.html"
)

OPENAPI_TAGS = [
    {"name": "Users", "description": "RESTful user management"},
    {"name": "GraphQL", "description": "GraphQL endpoint and console"},
    {"name": "Health", "description": "Service status and description"},
]

API_DESCRIPTION = """
User management API exposing the same operations through two protocols:

1. **REST API** under `/users`
2. **GraphQL API** at `/graphql`, with the GraphiQL console at `/graphiql`

Both share one data layer, so a user created through one protocol is visible
through the other with identical fields.
"""


def load_graphiql_html(config: ConfigData) -> str | None:
    """Read the GraphiQL page once at startup; a missing page disables the console."""
    if not config.graphql.graphiql_enabled:
        logger.info("GraphiQL console disabled by configuration")
        return None

    asset = Path(config.graphql.graphiql_asset or DEFAULT_GRAPHIQL_ASSET)
    try:
        html = asset.read_text(encoding="utf-8")
    except OSError:
        logger.warning("GraphiQL interface not found at {}, skipping...", asset)
        return None

    logger.info("GraphiQL loaded successfully")
    return html


def _log_banner(config: ConfigData, app_deps: ApplicationDependencies) -> None:
    base = f"http://localhost:{config.app.port}"
    routes = app_deps.available_routes()
    graphiql = (
        f"{base}{routes['graphiql']}" if app_deps.graphiql_available else "Not available"
    )
    logger.info(
        "Server initialized\n"
        "REST API:    {base}/users\n"
        "GraphQL:     {base}/graphql\n"
        "GraphiQL:    {graphiql}\n"
        "API Docs:    {base}/api-docs\n"
        "Health:      {base}/health",
        base=base,
        graphiql=graphiql,
    )


def create_app(
    config: ConfigData | None = None,
    database_service: DbSessionService | None = None,
) -> FastAPI:
    """Build one fully configured application instance.

    Args:
        config: Configuration to use; the current context's when omitted.
        database_service: Database engine and session factory; built from
            ``config`` when omitted.
    """
    config = config or get_config()
    production = config.app.is_production

    app_deps = ApplicationDependencies(
        config=config,
        database_service=database_service or DbSessionService(config),
        graphiql_html=load_graphiql_html(config),
    )

    # --- Lifecycle hooks ---
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "Starting up application in {} environment", config.app.environment
        )
        app_deps.database_service.create_all()
        _log_banner(config, app_deps)
        try:
            yield
        finally:
            logger.info("Shutting down application")
            app_deps.database_service.dispose()

    app = FastAPI(
        title="User Service API",
        version=__version__,
        description=API_DESCRIPTION,
        lifespan=lifespan,
        docs_url="/api-docs",
        redoc_url=None,
        openapi_url="/api-docs/openapi.json",
        openapi_tags=OPENAPI_TAGS,
    )
    app.state.app_dependencies = app_deps

    register_exception_handlers(
        app, production=production, available_routes=app_deps.available_routes()
    )

    # --- Router registration ---
    app.include_router(users.router)
    app.include_router(
        build_graphql_router(production=production),
        prefix="/graphql",
        tags=["GraphQL"],
    )
    if app_deps.graphiql_html is not None:
        app.include_router(pages.build_graphiql_router(app_deps.graphiql_html))
    app.include_router(pages.router)
    app.include_router(health.router)

    # --- GraphQL entry: console redirect and response timing ---
    @app.middleware("http")
    async def graphql_entry(request: Request, call_next):
        if request.url.path.rstrip("/") != "/graphql":
            return await call_next(request)

        start = time.perf_counter()
        if (
            request.method == "GET"
            and not request.query_params.get("query")
            and app_deps.graphiql_available
        ):
            response = RedirectResponse("/graphiql", status_code=302)
        else:
            response = await call_next(request)

        duration_ms = (time.perf_counter() - start) * 1000
        response.headers["X-Response-Time"] = f"{duration_ms:.0f}ms"
        return response

    # --- Host gatekeeper ---
    app.add_middleware(
        HostCheckMiddleware,
        allowed_host=config.app.allowed_host,
        exempt_paths=config.app.host_check_exempt_paths,
    )

    # --- Request logging middleware (outermost) ---
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

        xff = request.headers.get("x-forwarded-for")
        client_ip = (
            xff.split(",")[0].strip()
            if xff
            else request.client.host
            if request.client
            else "unknown"
        )

        base_ctx = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "client_ip": client_ip,
            "host": request.headers.get("host", request.url.hostname or "-"),
        }

        start = time.perf_counter()

        with logger.contextualize(**base_ctx):
            try:
                logger.info("request.start")
                response = await call_next(request)

                duration_ms = (time.perf_counter() - start) * 1000
                logger.bind(
                    status_code=response.status_code,
                    duration_ms=round(duration_ms, 1),
                ).info("request.end")

                response.headers.setdefault("X-Request-ID", request_id)
                return response

            except Exception as exc:
                duration_ms = (time.perf_counter() - start) * 1000
                logger.bind(
                    status_code=500,
                    duration_ms=round(duration_ms, 1),
                    error_type=type(exc).__name__,
                ).exception("request.error")
                return JSONResponse(
                    status_code=500,
                    content=internal_error_body(exc, production=production),
                    headers={"X-Request-ID": request_id},
                )

    return app
