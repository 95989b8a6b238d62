"""Immutable token signing configuration."""

from dataclasses import dataclass

from app.core.exceptions import ConfigurationError

# HS256 keys shorter than the digest size weaken the MAC.
MIN_SIGNING_KEY_BYTES = 32


@dataclass(frozen=True)
class SigningConfig:
    """Secret key and token metadata needed to sign access tokens."""

    key: str | None
    issuer: str | None
    audience: str | None
    expires_in_seconds: int | None

    def validate(self) -> None:
        """Raise ConfigurationError naming the first missing or invalid value."""
        if self.key is None or not self.key.strip():
            raise ConfigurationError("JWT_KEY is not configured")
        if len(self.key.encode("utf-8")) < MIN_SIGNING_KEY_BYTES:
            raise ConfigurationError(
                f"JWT_KEY must be at least {MIN_SIGNING_KEY_BYTES} bytes for HS256"
            )
        if self.issuer is None or not self.issuer.strip():
            raise ConfigurationError("JWT_ISSUER is not configured")
        if self.audience is None or not self.audience.strip():
            raise ConfigurationError("JWT_AUDIENCE is not configured")
        # bool is an int subclass; reject it explicitly.
        if (
            self.expires_in_seconds is None
            or isinstance(self.expires_in_seconds, bool)
            or not isinstance(self.expires_in_seconds, int)
            or self.expires_in_seconds <= 0
        ):
            raise ConfigurationError("JWT_EXPIRES_IN_SECONDS must be a positive integer")
