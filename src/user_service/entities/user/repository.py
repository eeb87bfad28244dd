"""User repository: the access layer both front-ends call."""

from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from src.user_service.core.exceptions import (
    StoreError,
    UserConflictError,
    UserNotFoundError,
)
from src.user_service.entities.user.entity import User, UserCreate, UserUpdate
from src.user_service.entities.user.table import UserTable


class UserRepository:
    """Data-access layer for users.

    Every method is one independent database operation: it commits on success
    and rolls back on failure. Store failures are translated into
    ``UserNotFoundError``, ``UserConflictError`` or ``StoreError``.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @contextmanager
    def _operation(self, name: str) -> Iterator[None]:
        try:
            yield
        except IntegrityError as e:
            self._session.rollback()
            logger.info("User {} rejected by a uniqueness constraint", name)
            raise UserConflictError() from e
        except SQLAlchemyError as e:
            self._session.rollback()
            logger.error(
                "User {} failed",
                name,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise StoreError(str(e)) from e

    def _get_row(self, user_id: int) -> UserTable:
        row = self._session.get(UserTable, user_id)
        if row is None:
            raise UserNotFoundError()
        return row

    def get_by_id(self, user_id: int) -> User:
        with self._operation("lookup"):
            row = self._get_row(user_id)
        return User.model_validate(row)

    def get_by_email(self, email: str) -> User:
        statement = select(UserTable).where(UserTable.email == email)
        with self._operation("lookup"):
            row = self._session.exec(statement).first()
        if row is None:
            raise UserNotFoundError()
        return User.model_validate(row)

    def list_all(self) -> list[User]:
        statement = select(UserTable).order_by(UserTable.id)
        with self._operation("listing"):
            rows = self._session.exec(statement).all()
        return [User.model_validate(row) for row in rows]

    def create(self, data: UserCreate) -> User:
        row = UserTable(name=data.name, email=data.email)
        with self._operation("creation"):
            self._session.add(row)
            self._session.commit()
            self._session.refresh(row)
        logger.info("Created user {}", row.id)
        return User.model_validate(row)

    def update(self, user_id: int, changes: UserUpdate) -> User:
        with self._operation("update"):
            row = self._get_row(user_id)
            for field, value in changes.changes().items():
                setattr(row, field, value)
            self._session.add(row)
            self._session.commit()
            self._session.refresh(row)
        logger.info("Updated user {}", user_id)
        return User.model_validate(row)

    def delete(self, user_id: int) -> User:
        with self._operation("deletion"):
            row = self._get_row(user_id)
            deleted = User.model_validate(row)
            self._session.delete(row)
            self._session.commit()
        logger.info("Deleted user {}", user_id)
        return deleted

    def count(self) -> int:
        statement = select(func.count()).select_from(UserTable)
        with self._operation("count"):
            return self._session.exec(statement).one()
