"""GraphQL schema for the user API.

Resolvers call the same ``UserRepository`` as the REST router, so both
protocols share their business semantics. Repository calls run in the thread
pool, like FastAPI's sync endpoints. Access-layer failures are raised and end
up in the response's ``errors`` array with the field's data set to null.
"""

import asyncio
from collections.abc import Callable
from typing import Any, TypeVar

import strawberry
from graphql import GraphQLError
from loguru import logger
from starlette.concurrency import run_in_threadpool
from strawberry.extensions import MaskErrors
from strawberry.fastapi import BaseContext
from strawberry.types import ExecutionContext, Info

from src.user_service.core.exceptions import StoreError, UserServiceError
from src.user_service.entities.user import (
    User,
    UserCreate,
    UserRepository,
    UserUpdate,
)

T = TypeVar("T")


class GraphQLContext(BaseContext):
    """Per-request context handing the access layer to resolvers."""

    def __init__(self, users: UserRepository) -> None:
        super().__init__()
        self.users = users
        # Sibling query fields resolve concurrently but share one session
        self._session_lock = asyncio.Lock()

    async def call(self, method: Callable[..., T], *args: Any) -> T:
        """Run a repository method in the thread pool, one at a time per request."""
        async with self._session_lock:
            return await run_in_threadpool(method, *args)


UserInfo = Info[GraphQLContext, None]


@strawberry.type(name="User", description="A user registered in the system")
class UserType:
    id: strawberry.ID = strawberry.field(description="Unique user ID")
    name: str | None = strawberry.field(description="User's full name")
    email: str | None = strawberry.field(description="User's unique email")

    @classmethod
    def from_entity(cls, user: User) -> "UserType":
        return cls(id=strawberry.ID(str(user.id)), name=user.name, email=user.email)


def parse_id(value: Any) -> int:
    """Convert a GraphQL ID argument to the store's integer key."""
    try:
        return int(str(value).strip(), 10)
    except ValueError:
        raise GraphQLError(f"Invalid ID: '{value}' is not a valid integer") from None


@strawberry.type
class Query:
    @strawberry.field(description="Get a user by ID")
    async def user(self, info: UserInfo, id: strawberry.ID) -> UserType | None:
        logger.info("GraphQL - fetching user {}", id)
        user_id = parse_id(id)
        user = await info.context.call(info.context.users.get_by_id, user_id)
        return UserType.from_entity(user)

    @strawberry.field(description="Get every registered user")
    async def users(self, info: UserInfo) -> list[UserType] | None:
        logger.info("GraphQL - listing users")
        users = await info.context.call(info.context.users.list_all)
        return [UserType.from_entity(user) for user in users]

    @strawberry.field(name="userByEmail", description="Get a user by email")
    async def user_by_email(self, info: UserInfo, email: str) -> UserType | None:
        logger.info("GraphQL - fetching user by email {}", email)
        user = await info.context.call(info.context.users.get_by_email, email)
        return UserType.from_entity(user)


@strawberry.type
class Mutation:
    @strawberry.mutation(name="createUser", description="Create a user")
    async def create_user(
        self, info: UserInfo, name: str, email: str
    ) -> UserType | None:
        logger.info("GraphQL - creating user {}", email)
        # Same payload rules as the REST front-end
        try:
            data = UserCreate(name=name, email=email)
        except ValueError as e:
            raise GraphQLError("Name and email must not be empty") from e
        user = await info.context.call(info.context.users.create, data)
        return UserType.from_entity(user)

    @strawberry.mutation(
        name="updateUser",
        description="Update a user; omitted arguments keep their current value",
    )
    async def update_user(
        self,
        info: UserInfo,
        id: strawberry.ID,
        name: str | None = strawberry.UNSET,
        email: str | None = strawberry.UNSET,
    ) -> UserType | None:
        logger.info("GraphQL - updating user {}", id)
        user_id = parse_id(id)
        supplied = {
            field: value
            for field, value in (("name", name), ("email", email))
            if value is not strawberry.UNSET
        }
        try:
            changes = UserUpdate(**supplied)
        except ValueError as e:
            raise GraphQLError("email cannot be null") from e
        user = await info.context.call(info.context.users.update, user_id, changes)
        return UserType.from_entity(user)

    @strawberry.mutation(name="deleteUser", description="Delete a user")
    async def delete_user(self, info: UserInfo, id: strawberry.ID) -> UserType | None:
        logger.info("GraphQL - deleting user {}", id)
        user_id = parse_id(id)
        user = await info.context.call(info.context.users.delete, user_id)
        return UserType.from_entity(user)


def _is_expected(error: GraphQLError) -> bool:
    original = error.original_error
    if original is None or isinstance(original, GraphQLError):
        return True
    return isinstance(original, UserServiceError) and not isinstance(original, StoreError)


class UserSchema(strawberry.Schema):
    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        # Missing or duplicate users are client errors, not failures worth a traceback
        unexpected = []
        for error in errors:
            if _is_expected(error):
                logger.info("GraphQL error: {}", error.message)
            else:
                unexpected.append(error)
        if unexpected:
            super().process_errors(unexpected, execution_context)


def build_schema(*, production: bool) -> strawberry.Schema:
    """Build the schema; production hides the message of unexpected errors."""
    extensions = []
    if production:
        extensions.append(
            MaskErrors(
                should_mask_error=lambda error: not _is_expected(error),
                error_message="Internal server error",
            )
        )
    return UserSchema(query=Query, mutation=Mutation, extensions=extensions)
