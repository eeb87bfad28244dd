"""User domain entity and input models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class User(BaseModel):
    """User entity representing a person in the system.

    This is the domain model returned by the access layer. The identifier is
    assigned by the store and never changes after creation.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Unique identifier assigned by the store", examples=[1])
    name: str | None = Field(
        default=None, description="User's full name", examples=["Juan Pérez"]
    )
    email: str = Field(
        description="User's unique email address", examples=["juan@example.com"]
    )

    def __eq__(self, other: Any) -> bool:
        """Compare users by their business attributes."""
        if not isinstance(other, User):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.email == other.email
        )

    def __hash__(self) -> int:
        return hash((self.id, self.name, self.email))


class UserCreate(BaseModel):
    """Payload for creating a user; both fields are required and non-empty."""

    name: str = Field(min_length=1, examples=["Juan Pérez"])
    email: str = Field(min_length=1, examples=["juan@example.com"])


class UserUpdate(BaseModel):
    """Partial update payload.

    Only the fields present in ``model_fields_set`` are applied, so a field that
    was never supplied is left untouched while ``name: null`` clears the name.
    """

    name: str | None = Field(default=None, examples=["Nombre Actualizado"])
    email: str | None = Field(default=None, examples=["nuevo@example.com"])

    @field_validator("email")
    @classmethod
    def _email_not_null(cls, value: str | None) -> str:
        if value is None:
            raise ValueError("email cannot be null")
        return value

    def changes(self) -> dict[str, Any]:
        """Return only the fields the caller supplied."""
        return self.model_dump(exclude_unset=True)
