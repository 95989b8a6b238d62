"""User management: create, read, rename, change password, delete."""

import logging
from datetime import UTC, datetime
from uuid import UUID, uuid4

from app.core.exceptions import ConflictError, InvalidArgumentError, NotFoundError
from app.core.security import (
    BCRYPT_ROUNDS,
    PASSWORD_MAX_LEN,
    USERNAME_MAX_LEN,
    hash_password,
    is_utf8_encodable,
)
from app.models.user import User
from app.repositories.user_repository import UserRepository
from app.schemas.users import UserResponse, UsersResponse

logger = logging.getLogger(__name__)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_username(username: str | None) -> str:
    """Return the username unchanged, or raise InvalidArgumentError if blank or too long."""
    if _is_blank(username):
        raise InvalidArgumentError("Username must not be empty.")
    if len(username) > USERNAME_MAX_LEN:
        raise InvalidArgumentError(
            f"Username must be at most {USERNAME_MAX_LEN} characters."
        )
    if not is_utf8_encodable(username):
        raise InvalidArgumentError("Username must be valid UTF-8 text.")
    return username


def validate_password(password: str | None) -> str:
    """Return the password unchanged, or raise InvalidArgumentError if blank or too long."""
    if _is_blank(password):
        raise InvalidArgumentError("Password must not be empty.")
    if len(password) > PASSWORD_MAX_LEN:
        raise InvalidArgumentError(
            f"Password must be at most {PASSWORD_MAX_LEN} characters."
        )
    if not is_utf8_encodable(password):
        raise InvalidArgumentError("Password must be valid UTF-8 text.")
    return password


class UserService:
    """
    Validates input and orchestrates the repository and password hashing.

    All checks run before any write; the first failing check is raised.
    Returned users are projections (id, username) and never include the hash.
    """

    def __init__(self, repository: UserRepository, bcrypt_rounds: int = BCRYPT_ROUNDS) -> None:
        self._repository = repository
        self._bcrypt_rounds = bcrypt_rounds

    def create_user(self, username: str | None, password: str | None) -> UserResponse:
        username = validate_username(username)
        password = validate_password(password)
        # Fast path only; insert() is the authoritative uniqueness guard.
        if self._repository.exists_by_username(username):
            raise ConflictError(f"Username '{username}' is already taken.")

        user = User(
            id=uuid4(),
            username=username,
            password_hash=hash_password(password, rounds=self._bcrypt_rounds),
            created_at=datetime.now(UTC),
        )
        response = UserResponse(id=user.id, username=user.username)
        self._repository.insert(user)
        logger.info("Created user %s", response.id)
        return response

    def get_user(self, user_id: UUID) -> UserResponse:
        return UserResponse.model_validate(self._get_or_raise(user_id))

    def list_users(self) -> UsersResponse:
        return UsersResponse(
            users=[UserResponse.model_validate(u) for u in self._repository.list_all()]
        )

    def delete_user(self, user_id: UUID) -> None:
        self._get_or_raise(user_id)
        self._repository.delete(user_id)
        logger.info("Deleted user %s", user_id)

    def update_username(self, user_id: UUID, new_username: str | None) -> UserResponse:
        user = self._get_or_raise(user_id)
        new_username = validate_username(new_username)
        if new_username != user.username and self._repository.exists_by_username(new_username):
            raise ConflictError(f"Username '{new_username}' is already taken.")

        user.username = new_username
        self._repository.update(user)
        logger.info("Renamed user %s", user_id)
        return UserResponse(id=user_id, username=new_username)

    def update_password(self, user_id: UUID, new_password: str | None) -> None:
        user = self._get_or_raise(user_id)
        new_password = validate_password(new_password)

        user.password_hash = hash_password(new_password, rounds=self._bcrypt_rounds)
        self._repository.update(user)
        logger.info("Changed password for user %s", user_id)

    def _get_or_raise(self, user_id: UUID) -> User:
        user = self._repository.find_by_id(user_id)
        if user is None:
            logger.debug("User %s not found", user_id)
            raise NotFoundError(f"User {user_id} not found.")
        return user
