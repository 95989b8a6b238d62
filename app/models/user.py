"""ORM model for user accounts."""

from sqlalchemy import Column, DateTime, String, Uuid, func

from app.core.security import (
    PASSWORD_HASH_MAX_LEN,
    REFRESH_TOKEN_MAX_LEN,
    USERNAME_MAX_LEN,
)
from app.models.base import Base


class User(Base):
    """
    User account: unique username, bcrypt password hash and the refresh token
    issued by the most recent successful login (if any).
    """

    __tablename__ = "users"

    id = Column(Uuid, primary_key=True)
    username = Column(String(USERNAME_MAX_LEN), nullable=False, unique=True, index=True)
    password_hash = Column(String(PASSWORD_HASH_MAX_LEN), nullable=False)
    refresh_token = Column(String(REFRESH_TOKEN_MAX_LEN), nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"User(id={self.id!s}, username={self.username!r})"
