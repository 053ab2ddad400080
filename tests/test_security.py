"""Tests for stockroom.core.security: bcrypt helpers and access tokens."""

import unittest
from datetime import UTC, datetime, timedelta
from unittest.mock import patch

import jwt

from stockroom.core.config import get_settings
from stockroom.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


@patch("stockroom.core.security.BCRYPT_ROUNDS", 4)
class TestPasswords(unittest.TestCase):
    def test_hash_verifies_only_the_original(self) -> None:
        stored = hash_password("staff123")
        self.assertNotEqual(stored, "staff123")
        self.assertTrue(verify_password("staff123", stored))
        self.assertFalse(verify_password("staff124", stored))

    def test_plaintext_stored_value_never_verifies(self) -> None:
        self.assertFalse(verify_password("admin123", "admin123"))

    def test_only_first_72_bytes_count(self) -> None:
        stored = hash_password("a" * 72 + "tail")
        self.assertTrue(verify_password("a" * 72 + "other", stored))


class TestAccessTokens(unittest.TestCase):
    def test_claims_round_trip(self) -> None:
        claims = decode_access_token(create_access_token(sub=7, role="staff"))
        self.assertEqual(claims["sub"], "7")
        self.assertEqual(claims["role"], "staff")
        self.assertGreater(claims["exp"], claims["iat"])

    def test_expired_token_rejected(self) -> None:
        settings = get_settings()
        past = datetime.now(UTC) - timedelta(minutes=5)
        token = jwt.encode(
            {"sub": "1", "role": "admin", "iat": past, "exp": past},
            settings.JWT_SECRET.get_secret_value(),
            algorithm=settings.JWT_ALGORITHM,
        )
        with self.assertRaises(jwt.ExpiredSignatureError):
            decode_access_token(token)

    def test_token_signed_with_other_secret_rejected(self) -> None:
        token = jwt.encode({"sub": "1", "role": "admin"}, "some-other-secret", algorithm="HS256")
        with self.assertRaises(jwt.PyJWTError):
            decode_access_token(token)


if __name__ == "__main__":
    unittest.main()
