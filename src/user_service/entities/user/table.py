"""User database table model."""

from sqlmodel import Field, SQLModel


class UserTable(SQLModel, table=True):
    """Database persistence model for users.

    This represents how the User entity is stored in the database.
    It's separate from the domain entity to maintain clean architecture
    while keeping related code together.
    """

    __tablename__ = "user"
    # ids are never handed out twice, even after the highest row is deleted
    __table_args__ = {"sqlite_autoincrement": True}

    id: int | None = Field(default=None, primary_key=True)
    name: str | None = Field(default=None)
    email: str = Field(unique=True, index=True, nullable=False)
