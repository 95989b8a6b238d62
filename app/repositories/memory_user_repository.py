"""Dict-backed UserRepository for tests and local experiments."""

from uuid import UUID

from app.core.exceptions import ConflictError, NotFoundError
from app.models.user import User
from app.repositories.user_repository import UserRepository


def _detached_copy(user: User) -> User:
    return User(
        id=user.id,
        username=user.username,
        password_hash=user.password_hash,
        refresh_token=user.refresh_token,
        created_at=user.created_at,
    )


class InMemoryUserRepository(UserRepository):
    """
    Keeps copies of users in insertion order.

    Reads hand out fresh copies, so a caller mutating a returned user changes
    nothing until it calls ``update``.
    """

    def __init__(self) -> None:
        self._users: dict[UUID, User] = {}

    def find_by_id(self, user_id: UUID) -> User | None:
        user = self._users.get(user_id)
        return _detached_copy(user) if user is not None else None

    def find_by_username(self, username: str) -> User | None:
        for user in self._users.values():
            if user.username == username:
                return _detached_copy(user)
        return None

    def exists_by_username(self, username: str) -> bool:
        return any(u.username == username for u in self._users.values())

    def insert(self, user: User) -> None:
        if user.id in self._users:
            raise ConflictError(f"User id {user.id} already exists.")
        if self.exists_by_username(user.username):
            raise ConflictError(f"Username '{user.username}' is already taken.")
        self._users[user.id] = _detached_copy(user)

    def update(self, user: User) -> None:
        if user.id not in self._users:
            raise NotFoundError(f"User {user.id} not found.")
        for other in self._users.values():
            if other.id != user.id and other.username == user.username:
                raise ConflictError(f"Username '{user.username}' is already taken.")
        # Same key, so insertion order is preserved.
        self._users[user.id] = _detached_copy(user)

    def delete(self, user_id: UUID) -> None:
        if self._users.pop(user_id, None) is None:
            raise NotFoundError(f"User {user_id} not found.")

    def list_all(self) -> list[User]:
        return [_detached_copy(u) for u in self._users.values()]
