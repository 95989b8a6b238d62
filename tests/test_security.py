"""Unit tests for app.core.security: bcrypt hashing and verification."""

import unittest

from app.core.security import (
    BCRYPT_MAX_INPUT_BYTES,
    hash_password,
    is_utf8_encodable,
    verify_password,
)

# Lowest cost bcrypt accepts; keeps the suite fast.
ROUNDS = 4


class TestHashPassword(unittest.TestCase):
    """hash_password produces a salted bcrypt hash, never the plaintext."""

    def test_hash_differs_from_plaintext(self) -> None:
        hashed = hash_password("Secret123", rounds=ROUNDS)
        self.assertNotEqual(hashed, "Secret123")
        self.assertTrue(hashed.startswith("$2"))

    def test_hash_fits_column(self) -> None:
        self.assertLessEqual(len(hash_password("x" * 512, rounds=ROUNDS)), 72)

    def test_same_password_gets_different_salts(self) -> None:
        self.assertNotEqual(
            hash_password("Secret123", rounds=ROUNDS),
            hash_password("Secret123", rounds=ROUNDS),
        )

    def test_cost_factor_is_encoded_in_hash(self) -> None:
        self.assertIn("$04$", hash_password("Secret123", rounds=ROUNDS))


class TestVerifyPassword(unittest.TestCase):
    """verify_password accepts the right password and never raises."""

    def setUp(self) -> None:
        self.hashed = hash_password("Secret123", rounds=ROUNDS)

    def test_correct_password(self) -> None:
        self.assertTrue(verify_password("Secret123", self.hashed))

    def test_wrong_password(self) -> None:
        self.assertFalse(verify_password("secret123", self.hashed))

    def test_malformed_hash_returns_false(self) -> None:
        self.assertFalse(verify_password("Secret123", "not-a-bcrypt-hash"))

    def test_empty_or_missing_hash_returns_false(self) -> None:
        self.assertFalse(verify_password("Secret123", ""))
        self.assertFalse(verify_password("Secret123", None))

    def test_plaintext_stored_as_hash_does_not_match(self) -> None:
        self.assertFalse(verify_password("Secret123", "Secret123"))

    def test_non_ascii_password(self) -> None:
        hashed = hash_password("pässwörd-密码", rounds=ROUNDS)
        self.assertTrue(verify_password("pässwörd-密码", hashed))
        self.assertFalse(verify_password("passwort-密码", hashed))

    def test_lone_surrogate_never_matches(self) -> None:
        self.assertFalse(verify_password("Secret\ud800", self.hashed))


class TestUtf8Encodable(unittest.TestCase):
    def test_ordinary_text(self) -> None:
        self.assertTrue(is_utf8_encodable("pässwörd-密码"))
        self.assertTrue(is_utf8_encodable(""))

    def test_lone_surrogates(self) -> None:
        for value in ("x\ud800y", "\udfff", "ok\udc80"):
            with self.subTest(value=value):
                self.assertFalse(is_utf8_encodable(value))


class TestBcryptInputLimit(unittest.TestCase):
    """Only the first 72 bytes contribute to the hash."""

    def test_characters_past_limit_are_ignored(self) -> None:
        prefix = "a" * BCRYPT_MAX_INPUT_BYTES
        hashed = hash_password(prefix + "first-suffix", rounds=ROUNDS)
        self.assertTrue(verify_password(prefix + "other-suffix", hashed))

    def test_long_password_up_to_request_limit_hashes(self) -> None:
        password = "b" * 512
        hashed = hash_password(password, rounds=ROUNDS)
        self.assertTrue(verify_password(password, hashed))


if __name__ == "__main__":
    unittest.main()
