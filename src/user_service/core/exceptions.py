"""Domain errors raised by the access layer.

Front-ends translate these into their protocol's error representation; they
never inspect driver- or ORM-specific error codes.
"""


class UserServiceError(Exception):
    """Base class for every failure raised by the access layer."""

    message: str = "User service error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.message
        super().__init__(self.message)


class UserNotFoundError(UserServiceError):
    """No user matches the requested key."""

    message = "User not found"


class UserConflictError(UserServiceError):
    """A uniqueness constraint (the user's email) was violated."""

    message = "A user with this email already exists"


class StoreError(UserServiceError):
    """The store failed for a reason other than a missing or duplicate record."""

    message = "Database operation failed"
