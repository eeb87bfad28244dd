"""Host header gatekeeper."""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

FORBIDDEN_BODY = {"error": "Forbidden: Invalid Host"}


def is_host_allowed(host: str | None, allowed_host: str | None) -> bool:
    """Return True when the request's Host header matches the allow-listed value.

    An unconfigured allow-list accepts nothing.
    """
    return allowed_host is not None and host == allowed_host


class HostCheckMiddleware(BaseHTTPMiddleware):
    """Reject requests whose Host header differs from the allow-listed one."""

    def __init__(
        self,
        app: ASGIApp,
        allowed_host: str | None,
        exempt_paths: Iterable[str] = ("/health",),
    ) -> None:
        super().__init__(app)
        self.allowed_host = allowed_host
        self.exempt_paths = frozenset(exempt_paths)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.exempt_paths:
            return await call_next(request)

        host = request.headers.get("host")
        if not is_host_allowed(host, self.allowed_host):
            logger.bind(host=host, path=request.url.path).warning(
                "Rejected request with unexpected Host header"
            )
            return JSONResponse(status_code=403, content=FORBIDDEN_BODY)

        return await call_next(request)
