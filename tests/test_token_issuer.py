"""Unit tests for app.services.tokens: login flow, JWT claims and refresh tokens."""

import unittest
import uuid
from datetime import UTC, datetime, timedelta

import jwt

from app.core.exceptions import ConfigurationError, NotFoundError, UnauthorizedError
from app.core.signing import SigningConfig
from app.repositories import InMemoryUserRepository
from app.services.tokens import JWT_ALGORITHM, TokenIssuer
from app.services.users import UserService

ROUNDS = 4
KEY = "test-signing-key-with-at-least-32-bytes!"


def _signing_config(**overrides: object) -> SigningConfig:
    values = {
        "key": KEY,
        "issuer": "keystone",
        "audience": "keystone-clients",
        "expires_in_seconds": 600,
    }
    values.update(overrides)
    return SigningConfig(**values)


def _decode(token: str) -> dict:
    return jwt.decode(
        token,
        KEY,
        algorithms=[JWT_ALGORITHM],
        audience="keystone-clients",
        issuer="keystone",
    )


class TokenIssuerTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.repo = InMemoryUserRepository()
        self.users = UserService(self.repo, bcrypt_rounds=ROUNDS)
        self.alice = self.users.create_user("alice", "Secret123")
        self.issuer = TokenIssuer(self.repo, _signing_config())


class TestLoginSuccess(TokenIssuerTestCase):
    def test_returns_both_tokens(self) -> None:
        result = self.issuer.login("alice", "Secret123")
        self.assertTrue(result.access_token)
        self.assertTrue(result.refresh_token)

    def test_refresh_token_is_stored(self) -> None:
        result = self.issuer.login("alice", "Secret123")
        stored = self.repo.find_by_id(self.alice.id)
        self.assertEqual(stored.refresh_token, result.refresh_token)
        self.assertLessEqual(len(result.refresh_token), 255)

    def test_second_login_overwrites_refresh_token(self) -> None:
        first = self.issuer.login("alice", "Secret123")
        second = self.issuer.login("alice", "Secret123")
        self.assertNotEqual(first.refresh_token, second.refresh_token)
        self.assertEqual(self.repo.find_by_id(self.alice.id).refresh_token, second.refresh_token)

    def test_access_token_claims(self) -> None:
        claims = _decode(self.issuer.login("alice", "Secret123").access_token)
        self.assertEqual(claims["sub"], str(self.alice.id))
        self.assertEqual(claims["id"], str(self.alice.id))
        self.assertEqual(claims["iss"], "keystone")
        self.assertEqual(claims["aud"], "keystone-clients")
        self.assertEqual(claims["exp"] - claims["nbf"], 600)
        uuid.UUID(claims["jti"])

    def test_token_id_is_fresh_per_login(self) -> None:
        a = _decode(self.issuer.login("alice", "Secret123").access_token)
        b = _decode(self.issuer.login("alice", "Secret123").access_token)
        self.assertNotEqual(a["jti"], b["jti"])

    def test_signed_with_hs256(self) -> None:
        token = self.issuer.login("alice", "Secret123").access_token
        self.assertEqual(jwt.get_unverified_header(token)["alg"], "HS256")
        with self.assertRaises(jwt.InvalidSignatureError):
            jwt.decode(
                token,
                "another-key-that-is-also-32-bytes-long",
                algorithms=[JWT_ALGORITHM],
                audience="keystone-clients",
            )

    def test_expiry_uses_clock(self) -> None:
        fixed = datetime(2026, 10, 19, 12, 0, tzinfo=UTC)
        issuer = TokenIssuer(self.repo, _signing_config(), now=lambda: fixed)
        token = issuer.login("alice", "Secret123").access_token
        claims = jwt.decode(
            token,
            KEY,
            algorithms=[JWT_ALGORITHM],
            audience="keystone-clients",
            options={"verify_exp": False, "verify_nbf": False, "verify_iat": False},
        )
        self.assertEqual(claims["nbf"], int(fixed.timestamp()))
        self.assertEqual(claims["exp"], int((fixed + timedelta(seconds=600)).timestamp()))

    def test_login_after_password_change(self) -> None:
        self.users.update_password(self.alice.id, "Changed456")
        self.assertTrue(self.issuer.login("alice", "Changed456").access_token)
        with self.assertRaises(UnauthorizedError):
            self.issuer.login("alice", "Secret123")


class TestLoginFailures(TokenIssuerTestCase):
    def test_unknown_username(self) -> None:
        with self.assertRaises(NotFoundError):
            self.issuer.login("bob", "x")

    def test_missing_username(self) -> None:
        with self.assertRaises(NotFoundError):
            self.issuer.login(None, "Secret123")

    def test_wrong_password(self) -> None:
        with self.assertRaises(UnauthorizedError):
            self.issuer.login("alice", "wrong")
        self.assertIsNone(self.repo.find_by_id(self.alice.id).refresh_token)

    def test_missing_password(self) -> None:
        with self.assertRaises(UnauthorizedError):
            self.issuer.login("alice", None)

    def test_lone_surrogate_credentials(self) -> None:
        with self.assertRaises(NotFoundError):
            self.issuer.login("al\ud800ice", "Secret123")
        with self.assertRaises(UnauthorizedError):
            self.issuer.login("alice", "Secret\udfff")

    def test_username_match_is_case_sensitive(self) -> None:
        with self.assertRaises(NotFoundError):
            self.issuer.login("Alice", "Secret123")

    def test_missing_signing_key_fails_even_with_valid_credentials(self) -> None:
        issuer = TokenIssuer(self.repo, _signing_config(key=None))
        with self.assertRaises(ConfigurationError):
            issuer.login("alice", "Secret123")
        self.assertIsNone(self.repo.find_by_id(self.alice.id).refresh_token)

    def test_non_positive_expiry_is_a_configuration_error(self) -> None:
        issuer = TokenIssuer(self.repo, _signing_config(expires_in_seconds=0))
        with self.assertRaises(ConfigurationError):
            issuer.login("alice", "Secret123")

    def test_credentials_checked_before_configuration(self) -> None:
        issuer = TokenIssuer(self.repo, _signing_config(issuer=None))
        with self.assertRaises(UnauthorizedError):
            issuer.login("alice", "wrong")
        with self.assertRaises(NotFoundError):
            issuer.login("bob", "Secret123")


if __name__ == "__main__":
    unittest.main()
