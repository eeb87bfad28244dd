"""User REST router with CRUD operations."""

from fastapi import APIRouter, Depends, status

from src.user_service.api.http.deps import get_user_repository
from src.user_service.api.http.errors import ErrorResponse, InternalErrorResponse
from src.user_service.entities.user import (
    User,
    UserCreate,
    UserRepository,
    UserUpdate,
)

router = APIRouter(prefix="/users", tags=["Users"])

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "User not found"}}
_BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Invalid input"}}
_CONFLICT = {409: {"model": ErrorResponse, "description": "Email already in use"}}
_SERVER_ERROR = {500: {"model": InternalErrorResponse, "description": "Server error"}}


@router.get(
    "",
    response_model=list[User],
    summary="List all users",
    responses={**_SERVER_ERROR},
)
def list_users(repository: UserRepository = Depends(get_user_repository)) -> list[User]:
    """Return every registered user."""
    return repository.list_all()


@router.get(
    "/{user_id}",
    response_model=User,
    summary="Get a user by ID",
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_SERVER_ERROR},
)
def get_user(
    user_id: int,
    repository: UserRepository = Depends(get_user_repository),
) -> User:
    """Return the user with the given ID."""
    return repository.get_by_id(user_id)


@router.post(
    "",
    response_model=User,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
    responses={**_BAD_REQUEST, **_CONFLICT, **_SERVER_ERROR},
)
def create_user(
    user: UserCreate,
    repository: UserRepository = Depends(get_user_repository),
) -> User:
    """Create a user; ``name`` and ``email`` are both required."""
    return repository.create(user)


@router.put(
    "/{user_id}",
    response_model=User,
    summary="Update a user",
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_CONFLICT, **_SERVER_ERROR},
)
def update_user(
    user_id: int,
    changes: UserUpdate,
    repository: UserRepository = Depends(get_user_repository),
) -> User:
    """Update a user. Fields missing from the body keep their current value."""
    return repository.update(user_id, changes)


@router.delete(
    "/{user_id}",
    response_model=User,
    summary="Delete a user",
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_SERVER_ERROR},
)
def delete_user(
    user_id: int,
    repository: UserRepository = Depends(get_user_repository),
) -> User:
    """Delete a user and return its last known state."""
    return repository.delete(user_id)
