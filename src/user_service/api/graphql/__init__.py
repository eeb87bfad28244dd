"""GraphQL front-end."""

from .router import build_graphql_router
from .schema import GraphQLContext, build_schema

__all__ = ["GraphQLContext", "build_graphql_router", "build_schema"]
