"""Tests for stockroom.core.config: Settings validators and normalisation."""

import unittest

from pydantic import ValidationError

from stockroom.core.config import Settings


def _settings(**overrides) -> Settings:
    # _env_file=None so a developer's local .env cannot leak into the assertions.
    return Settings(_env_file=None, **overrides)


class TestSettingsDefaults(unittest.TestCase):
    def test_defaults(self) -> None:
        s = _settings()
        self.assertEqual(s.LOW_STOCK_THRESHOLD, 10)
        self.assertEqual(s.LOGIN_MAX_ATTEMPTS, 3)
        self.assertFalse(s.PASSWORD_HASHING)
        self.assertIn(s.STORAGE_BACKEND, ("sql", "memory"))


class TestSettingsValidation(unittest.TestCase):
    def test_rejects_unsupported_database_url(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(DATABASE_URL="mysql://root@localhost/stock")

    def test_rejects_blank_database_url(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(DATABASE_URL="   ")

    def test_strips_database_url(self) -> None:
        s = _settings(DATABASE_URL="  sqlite:///./x.db ")
        self.assertEqual(s.DATABASE_URL, "sqlite:///./x.db")

    def test_log_level_is_uppercased(self) -> None:
        self.assertEqual(_settings(LOG_LEVEL="debug").LOG_LEVEL, "DEBUG")

    def test_rejects_unknown_log_level(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(LOG_LEVEL="chatty")

    def test_api_prefix_trailing_slash_removed(self) -> None:
        self.assertEqual(_settings(API_V1_PREFIX="/api/v1/").API_V1_PREFIX, "/api/v1")

    def test_api_prefix_must_start_with_slash(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(API_V1_PREFIX="api")

    def test_rejects_negative_low_stock_threshold(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(LOW_STOCK_THRESHOLD=-1)

    def test_zero_low_stock_threshold_allowed(self) -> None:
        self.assertEqual(_settings(LOW_STOCK_THRESHOLD=0).LOW_STOCK_THRESHOLD, 0)

    def test_login_attempts_range(self) -> None:
        for bad in (0, 11):
            with self.subTest(bad=bad), self.assertRaises(ValidationError):
                _settings(LOGIN_MAX_ATTEMPTS=bad)
        self.assertEqual(_settings(LOGIN_MAX_ATTEMPTS=10).LOGIN_MAX_ATTEMPTS, 10)

    def test_rejects_unknown_storage_backend(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(STORAGE_BACKEND="redis")

    def test_rejects_blank_jwt_secret(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(JWT_SECRET=" ")

    def test_jwt_expiry_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(JWT_EXPIRE_MINUTES=0)


if __name__ == "__main__":
    unittest.main()
