"""HTML pages: the service description page and the GraphiQL console."""

from html import escape

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from src.user_service import __version__
from src.user_service.api.http.app_data import ApplicationDependencies
from src.user_service.api.http.deps import get_app_dependencies

router = APIRouter(tags=["Health"])

_ENDPOINT_DESCRIPTIONS = {
    "rest": ("RESTful API", "GET, POST, PUT, DELETE"),
    "graphql": ("GraphQL Endpoint", "POST queries & mutations"),
    "graphiql": ("GraphiQL Interface", "Interactive GraphQL IDE"),
    "docs": ("API Documentation", "OpenAPI / Swagger UI"),
    "health": ("Health Check", "Service status"),
}

_PAGE = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8" />
  <title>User Service</title>
  <style>
    body {{ font-family: sans-serif; margin: 2rem auto; max-width: 48rem; }}
    .endpoint {{ border: 1px solid #ddd; border-radius: 6px; padding: .75rem; margin: .5rem 0; }}
    code {{ color: #555; margin-left: .5rem; }}
  </style>
</head>
<body>
  <h1>User Service <small>v{version}</small></h1>
  <p>User management over a REST API and a GraphQL API sharing one data layer.</p>
  {endpoints}
</body>
</html>
"""


def render_index(base_url: str, routes: dict[str, str]) -> str:
    """Render the service description page for ``base_url``."""
    blocks = []
    for key, path in routes.items():
        title, detail = _ENDPOINT_DESCRIPTIONS[key]
        if path.startswith("/"):
            link = f'<a href="{escape(base_url + path)}">{escape(path)}</a>'
        else:
            link = escape(path)
        blocks.append(
            f'<div class="endpoint"><strong>{title}</strong> {link}'
            f"<code>{detail}</code></div>"
        )
    return _PAGE.format(version=__version__, endpoints="\n  ".join(blocks))


@router.get("/", response_class=HTMLResponse, summary="Service description page")
async def index(
    request: Request,
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> HTMLResponse:
    """Describe the service and link every endpoint group."""
    base_url = f"{request.url.scheme}://{request.headers.get('host', request.url.netloc)}"
    return HTMLResponse(render_index(base_url, app_deps.available_routes()))


def build_graphiql_router(graphiql_html: str) -> APIRouter:
    """Router serving the preloaded GraphiQL console page."""
    graphiql_router = APIRouter(tags=["GraphQL"])

    @graphiql_router.get(
        "/graphiql", response_class=HTMLResponse, summary="GraphiQL console"
    )
    async def graphiql() -> HTMLResponse:
        """Interactive console for writing and running GraphQL queries."""
        return HTMLResponse(graphiql_html)

    return graphiql_router
