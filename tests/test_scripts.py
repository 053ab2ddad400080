"""Tests for the seed and create_user scripts against in-memory storage."""

import io
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import patch

from stockroom.core.config import Settings
from stockroom.scripts import create_user, seed
from stockroom.services.products import ProductService
from stockroom.services.users import UserService
from stockroom.storage.memory import InMemoryProductStore, InMemoryUserStore


def _memory_settings(**overrides) -> Settings:
    return Settings(_env_file=None, STORAGE_BACKEND="memory", **overrides)


class TestSeed(unittest.TestCase):
    def setUp(self) -> None:
        self.products = ProductService(InMemoryProductStore())
        self.users = UserService(InMemoryUserStore())

    def test_seed_loads_sample_data(self) -> None:
        users_created, products_created = seed.seed(self.products, self.users)
        self.assertEqual(users_created, len(seed.SAMPLE_USERS))
        self.assertEqual(products_created, len(seed.SAMPLE_PRODUCTS))
        self.assertIsNotNone(self.users.authenticate_user("admin", "admin123"))
        self.assertEqual(
            self.products.get_all_categories(), ["Electronics", "Furniture", "Stationery"]
        )

    def test_reseed_skips_existing_users(self) -> None:
        seed.seed(self.products, self.users)
        users_created, _ = seed.seed(self.products, self.users)
        self.assertEqual(users_created, 0)
        self.assertEqual(len(self.users.get_all_users()), len(seed.SAMPLE_USERS))

    def test_sample_products_include_low_stock(self) -> None:
        seed.seed(self.products, self.users)
        low = {p.name for p in self.products.get_low_stock_products(10)}
        self.assertIn("USB-C Cable", low)
        self.assertNotIn("Notebook", low)

    def test_main_with_memory_backend(self) -> None:
        with patch.object(seed, "get_settings", return_value=_memory_settings()):
            self.assertEqual(seed.main(), 0)


class TestCreateUser(unittest.TestCase):
    def setUp(self) -> None:
        self.user_store = InMemoryUserStore()
        patcher = patch.object(
            create_user,
            "build_stores",
            return_value=(InMemoryProductStore(), self.user_store),
        )
        patcher.start()
        self.addCleanup(patcher.stop)
        settings_patcher = patch.object(create_user, "get_settings", return_value=_memory_settings())
        settings_patcher.start()
        self.addCleanup(settings_patcher.stop)

    def test_creates_admin(self) -> None:
        out = io.StringIO()
        with redirect_stdout(out):
            code = create_user.main(["root", "s3cret", "admin"])
        self.assertEqual(code, 0)
        self.assertIn("Created user 'root' with role 'admin'", out.getvalue())
        self.assertEqual(self.user_store.get_by_username("root").role, "admin")

    def test_role_defaults_to_staff(self) -> None:
        with redirect_stdout(io.StringIO()):
            create_user.main(["dana", "pw"])
        self.assertEqual(self.user_store.get_by_username("dana").role, "staff")

    def test_duplicate_username_fails(self) -> None:
        with redirect_stdout(io.StringIO()):
            create_user.main(["dana", "pw"])
        err = io.StringIO()
        with redirect_stderr(err):
            code = create_user.main(["dana", "other"])
        self.assertEqual(code, 1)
        self.assertIn("already exists", err.getvalue())

    def test_blank_password_fails(self) -> None:
        err = io.StringIO()
        with redirect_stderr(err):
            code = create_user.main(["erin", "  "])
        self.assertEqual(code, 1)
        self.assertIn("Password cannot be null or empty", err.getvalue())


if __name__ == "__main__":
    unittest.main()
