"""Mounting of the GraphQL schema on FastAPI."""

from fastapi import Depends
from strawberry.fastapi import GraphQLRouter

from src.user_service.api.graphql.schema import GraphQLContext, build_schema
from src.user_service.api.http.deps import get_user_repository
from src.user_service.entities.user import UserRepository


async def get_graphql_context(
    users: UserRepository = Depends(get_user_repository),
) -> GraphQLContext:
    return GraphQLContext(users)


def build_graphql_router(*, production: bool) -> GraphQLRouter:
    """GraphQL over HTTP; the console is served separately at /graphiql."""
    return GraphQLRouter(
        build_schema(production=production),
        context_getter=get_graphql_context,
        graphql_ide=None,
    )
