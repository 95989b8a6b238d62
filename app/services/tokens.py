"""Login: verify credentials, sign an access token, issue and store a refresh token."""

import logging
import secrets
import uuid
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from app.core.exceptions import ConfigurationError, NotFoundError, UnauthorizedError
from app.core.security import is_utf8_encodable, verify_password
from app.core.signing import SigningConfig
from app.repositories.user_repository import UserRepository
from app.schemas.users import LoginResponse

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"
# 32 random bytes, urlsafe base64 (43 chars).
REFRESH_TOKEN_BYTES = 32


def generate_refresh_token() -> str:
    """Opaque random refresh token."""
    return secrets.token_urlsafe(REFRESH_TOKEN_BYTES)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class TokenIssuer:
    """
    Issues access/refresh token pairs.

    The signing configuration is fixed at construction and checked on every
    login, after the credentials, so a misconfigured service still rejects
    unknown users and wrong passwords the usual way.
    """

    def __init__(
        self,
        repository: UserRepository,
        signing_config: SigningConfig,
        now: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._repository = repository
        self._signing_config = signing_config
        self._now = now

    def login(self, username: str | None, password: str | None) -> LoginResponse:
        # Unencodable names cannot exist in the store.
        if username and is_utf8_encodable(username):
            user = self._repository.find_by_username(username)
        else:
            user = None
        if user is None:
            logger.info("Login failed: unknown username")
            raise NotFoundError("User not found.")
        if not password or not verify_password(password, user.password_hash):
            logger.info("Login failed: bad credentials for user %s", user.id)
            raise UnauthorizedError("Invalid username or password.")

        access_token = self.create_access_token(user.id)
        user.refresh_token = generate_refresh_token()
        self._repository.update(user)
        logger.info("Issued tokens for user %s", user.id)
        return LoginResponse(access_token=access_token, refresh_token=user.refresh_token)

    def create_access_token(self, user_id: uuid.UUID) -> str:
        """
        Sign a JWT for the user: jti, sub/id, iss, aud, iat, nbf, exp.
        Raises ConfigurationError if the signing configuration is incomplete.
        """
        config = self._signing_config
        try:
            config.validate()
        except ConfigurationError as e:
            logger.error("Token signing is misconfigured: %s", e)
            raise

        now = self._now()
        payload: dict[str, Any] = {
            "jti": str(uuid.uuid4()),
            "sub": str(user_id),
            "id": str(user_id),
            "iss": config.issuer,
            "aud": config.audience,
            "iat": now,
            "nbf": now,
            "exp": now + timedelta(seconds=config.expires_in_seconds),
        }
        return jwt.encode(payload, config.key, algorithm=JWT_ALGORITHM)
