"""SQLAlchemy implementation of UserRepository."""

import logging
from uuid import UUID

from sqlalchemy import exists
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import ConflictError, NotFoundError
from app.models.user import User
from app.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class SqlAlchemyUserRepository(UserRepository):
    """UserRepository over the ``users`` table. Each mutation commits on its own."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def find_by_id(self, user_id: UUID) -> User | None:
        return self._session.get(User, user_id)

    def find_by_username(self, username: str) -> User | None:
        return self._session.query(User).filter(User.username == username).first()

    def exists_by_username(self, username: str) -> bool:
        return bool(
            self._session.query(exists().where(User.username == username)).scalar()
        )

    def insert(self, user: User) -> None:
        if self._session.get(User, user.id) is not None:
            raise ConflictError(f"User id {user.id} already exists.")
        self._session.add(user)
        self._commit(user.id, user.username)
        logger.debug("Inserted user %s", user.id)

    def update(self, user: User) -> None:
        existing = self._session.get(User, user.id)
        if existing is None:
            raise NotFoundError(f"User {user.id} not found.")
        if existing is not user:
            existing.username = user.username
            existing.password_hash = user.password_hash
            existing.refresh_token = user.refresh_token
        self._commit(existing.id, existing.username)
        logger.debug("Updated user %s", user.id)

    def delete(self, user_id: UUID) -> None:
        user = self._session.get(User, user_id)
        if user is None:
            raise NotFoundError(f"User {user_id} not found.")
        self._session.delete(user)
        self._session.commit()
        logger.debug("Deleted user %s", user_id)

    def list_all(self) -> list[User]:
        return self._session.query(User).order_by(User.created_at, User.id).all()

    def _commit(self, user_id: UUID, username: str) -> None:
        """Commit, turning a unique-constraint violation into ConflictError."""
        try:
            self._session.commit()
        except IntegrityError as e:
            self._session.rollback()
            logger.info("Unique constraint rejected user %s: %s", user_id, e.orig)
            raise ConflictError(f"Username '{username}' is already taken.") from e
