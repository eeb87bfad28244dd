"""Translation of domain and framework errors into REST responses."""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from loguru import logger
from pydantic import BaseModel, Field
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse

from src.user_service.core.exceptions import (
    StoreError,
    UserConflictError,
    UserNotFoundError,
)


class ErrorResponse(BaseModel):
    """Body of every REST error response."""

    error: str = Field(examples=["User not found"])


class RouteNotFoundResponse(ErrorResponse):
    availableRoutes: dict[str, str]


class InternalErrorResponse(ErrorResponse):
    message: str | None = Field(
        default=None, description="Underlying error, omitted in production"
    )


def error_body(message: str) -> dict[str, str]:
    return {"error": message}


def internal_error_body(exc: Exception, *, production: bool) -> dict[str, Any]:
    body: dict[str, Any] = {"error": "Internal server error"}
    if not production:
        body["message"] = str(exc)
    return body


def format_validation_errors(exc: RequestValidationError) -> str:
    """Collapse FastAPI's validation errors into one readable message."""
    parts = []
    for err in exc.errors():
        location = ".".join(str(loc) for loc in err.get("loc", ()) if loc != "body")
        message = err.get("msg", "Invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request"


def register_exception_handlers(
    app: FastAPI, *, production: bool, available_routes: dict[str, str]
) -> None:
    """Attach the REST error mapping to ``app``."""

    @app.exception_handler(UserNotFoundError)
    async def user_not_found_handler(request: Request, exc: UserNotFoundError):
        return JSONResponse(status_code=404, content=error_body(exc.message))

    @app.exception_handler(UserConflictError)
    async def user_conflict_handler(request: Request, exc: UserConflictError):
        return JSONResponse(status_code=409, content=error_body(exc.message))

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        logger.bind(path=request.url.path).error("Store error: {}", exc.message)
        content = error_body(
            "Internal server error" if production else exc.message
        )
        return JSONResponse(status_code=500, content=content)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400, content=error_body(format_validation_errors(exc))
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return JSONResponse(
                status_code=404,
                content={
                    "error": "Route not found",
                    "availableRoutes": available_routes,
                },
            )
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )
