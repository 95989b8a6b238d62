"""User repository interface."""

from abc import ABC, abstractmethod
from uuid import UUID

from app.models.user import User


class UserRepository(ABC):
    """
    Storage for user records keyed by id, with usernames unique across all users.

    Implementations enforce uniqueness themselves: a service-level existence
    check is only a fast path, ``insert`` and ``update`` are the guard.
    """

    @abstractmethod
    def find_by_id(self, user_id: UUID) -> User | None:
        """Return the user with this id, or None."""

    @abstractmethod
    def find_by_username(self, username: str) -> User | None:
        """Return the user with exactly this username (case-sensitive), or None."""

    @abstractmethod
    def exists_by_username(self, username: str) -> bool:
        """True if some user has exactly this username."""

    @abstractmethod
    def insert(self, user: User) -> None:
        """
        Store a new user.

        Raises
        ------
        ConflictError
            If the id or the username is already taken.
        """

    @abstractmethod
    def update(self, user: User) -> None:
        """
        Persist username, password hash and refresh token of an existing user.

        Raises
        ------
        NotFoundError
            If no user has ``user.id``.
        ConflictError
            If the username now collides with another user.
        """

    @abstractmethod
    def delete(self, user_id: UUID) -> None:
        """
        Remove the user permanently.

        Raises
        ------
        NotFoundError
            If no user has this id.
        """

    @abstractmethod
    def list_all(self) -> list[User]:
        """Return a fresh snapshot of all users in insertion order."""
