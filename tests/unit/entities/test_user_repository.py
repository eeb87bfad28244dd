"""User repository tests against a real in-memory SQLite database."""

import pytest
from sqlmodel import Session, select

from src.user_service.core.exceptions import (
    StoreError,
    UserConflictError,
    UserNotFoundError,
)
from src.user_service.core.services import DbSessionService
from src.user_service.entities.user import (
    User,
    UserCreate,
    UserRepository,
    UserTable,
    UserUpdate,
)


def _create(repository: UserRepository, name: str = "Juan", email: str = "juan@example.com") -> User:
    return repository.create(UserCreate(name=name, email=email))


class TestUserRepositoryCreate:
    """Creation and id assignment."""

    def test_create_then_get_returns_same_fields(self, repository: UserRepository):
        """A created user can be fetched back by its id with identical fields."""
        created = _create(repository)

        fetched = repository.get_by_id(created.id)

        assert fetched == created
        assert fetched.name == "Juan"
        assert fetched.email == "juan@example.com"

    def test_create_assigns_increasing_ids(self, repository: UserRepository):
        """Should assign increasing IDs."""
        first = _create(repository, email="a@example.com")
        second = _create(repository, email="b@example.com")

        assert second.id > first.id

    def test_create_returns_domain_entity(self, repository: UserRepository):
        """Should return the User domain entity, not the table row."""
        created = _create(repository)

        assert isinstance(created, User)
        assert not isinstance(created, UserTable)

    def test_duplicate_email_conflicts_without_adding_a_row(
        self, repository: UserRepository
    ):
        """Should raise a conflict and keep the first user."""
        _create(repository, name="First", email="dup@example.com")
        before = repository.count()

        with pytest.raises(UserConflictError):
            _create(repository, name="Second", email="dup@example.com")

        assert repository.count() == before
        assert repository.get_by_email("dup@example.com").name == "First"

    def test_repository_usable_after_conflict(self, repository: UserRepository):
        """A rolled back conflict leaves the session ready for the next operation."""
        _create(repository, email="dup@example.com")
        with pytest.raises(UserConflictError):
            _create(repository, email="dup@example.com")

        other = _create(repository, email="other@example.com")

        assert repository.get_by_id(other.id).email == "other@example.com"

    def test_ids_are_not_reused_after_deletion(self, repository: UserRepository):
        """Should never hand out a deleted ID again."""
        first = _create(repository, email="a@example.com")
        second = _create(repository, email="b@example.com")
        repository.delete(second.id)

        third = _create(repository, email="c@example.com")

        assert third.id not in (first.id, second.id)


class TestUserRepositoryLookup:
    """Lookups by id and email."""

    def test_get_by_id_unknown_raises_not_found(self, repository: UserRepository):
        """Should raise not found for an unknown ID."""
        with pytest.raises(UserNotFoundError):
            repository.get_by_id(999)

    def test_get_by_email(self, repository: UserRepository):
        """Should find a user by email."""
        created = _create(repository, email="find@example.com")

        assert repository.get_by_email("find@example.com") == created

    def test_get_by_email_unknown_raises_not_found(self, repository: UserRepository):
        """Should raise not found for an unknown email."""
        with pytest.raises(UserNotFoundError):
            repository.get_by_email("nobody@example.com")

    def test_list_all_in_insertion_order(self, repository: UserRepository):
        """Should list users ordered by ID."""
        emails = ["c@example.com", "a@example.com", "b@example.com"]
        for email in emails:
            _create(repository, email=email)

        assert [user.email for user in repository.list_all()] == emails

    def test_list_all_empty(self, repository: UserRepository):
        """Should return an empty list without users."""
        assert repository.list_all() == []


class TestUserRepositoryUpdate:
    """Partial update semantics."""

    def test_update_name_only_keeps_email(self, repository: UserRepository):
        """Should keep the email when only the name changes."""
        created = _create(repository, name="Old", email="keep@example.com")

        updated = repository.update(created.id, UserUpdate(name="X"))

        assert updated.name == "X"
        assert repository.get_by_id(created.id).email == "keep@example.com"

    def test_update_email_only_keeps_name(self, repository: UserRepository):
        """Should keep the name when only the email changes."""
        created = _create(repository, name="Keep", email="old@example.com")

        updated = repository.update(created.id, UserUpdate(email="new@example.com"))

        assert updated.name == "Keep"
        assert updated.email == "new@example.com"

    def test_update_can_clear_name(self, repository: UserRepository):
        """An explicit null differs from an omitted field."""
        created = _create(repository, name="Someone")

        updated = repository.update(created.id, UserUpdate(name=None))

        assert updated.name is None

    def test_empty_update_changes_nothing(self, repository: UserRepository):
        """Should leave the user unchanged for an empty update."""
        created = _create(repository)

        assert repository.update(created.id, UserUpdate()) == created

    def test_update_unknown_raises_not_found(self, repository: UserRepository):
        """Should raise not found for an unknown ID."""
        with pytest.raises(UserNotFoundError):
            repository.update(42, UserUpdate(name="X"))

    def test_update_to_existing_email_conflicts(self, repository: UserRepository):
        """Should raise a conflict and keep the old email."""
        _create(repository, email="taken@example.com")
        other = _create(repository, name="Other", email="other@example.com")

        with pytest.raises(UserConflictError):
            repository.update(other.id, UserUpdate(email="taken@example.com"))

        assert repository.get_by_id(other.id).email == "other@example.com"


class TestUserRepositoryDelete:
    """Deletion semantics."""

    def test_delete_returns_last_state(self, repository: UserRepository):
        """Should return the user as it was before deletion."""
        created = _create(repository)

        assert repository.delete(created.id) == created

    def test_delete_then_get_raises_not_found(self, repository: UserRepository):
        """Should not find a deleted user."""
        created = _create(repository)
        repository.delete(created.id)

        with pytest.raises(UserNotFoundError):
            repository.get_by_id(created.id)

    def test_repeated_delete_raises_not_found(self, repository: UserRepository):
        """Should raise not found when deleting twice."""
        created = _create(repository)
        repository.delete(created.id)

        with pytest.raises(UserNotFoundError):
            repository.delete(created.id)

    def test_delete_removes_row(self, repository: UserRepository, session: Session):
        """Should remove the row from the table."""
        created = _create(repository)
        repository.delete(created.id)

        assert session.exec(select(UserTable)).all() == []


class TestUserRepositoryStoreErrors:
    """Translation of unexpected store failures."""

    def test_missing_table_surfaces_as_store_error(
        self, bare_db_service: DbSessionService
    ):
        """Failures other than missing/duplicate rows become StoreError."""
        with bare_db_service.get_session() as session:
            repository = UserRepository(session)

            with pytest.raises(StoreError):
                repository.list_all()
