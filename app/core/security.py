"""Password hashing and verification (bcrypt)."""

import bcrypt

# Bcrypt cost (rounds); 12 is a good default for security vs speed.
BCRYPT_ROUNDS = 12

# bcrypt only consumes the first 72 bytes of its input.
BCRYPT_MAX_INPUT_BYTES = 72

USERNAME_MAX_LEN = 255
# Upper bound on request plaintext so hashing stays cheap to reject.
PASSWORD_MAX_LEN = 512
PASSWORD_HASH_MAX_LEN = 72
REFRESH_TOKEN_MAX_LEN = 255


def is_utf8_encodable(value: str) -> bool:
    """False for strings holding lone surrogates (valid JSON, not valid UTF-8)."""
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _encode(plain_password: str) -> bytes:
    return plain_password.encode("utf-8")[:BCRYPT_MAX_INPUT_BYTES]


def hash_password(plain_password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    return bcrypt.hashpw(_encode(plain_password), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str | None) -> bool:
    """Verify a plain password against a stored hash. Malformed hashes never match."""
    if not hashed:
        return False
    try:
        return bcrypt.checkpw(_encode(plain_password), hashed.encode("utf-8"))
    except (ValueError, TypeError):
        # UnicodeEncodeError is a ValueError: unencodable input never matches.
        return False
