"""Tests for stockroom.console: session state machine and a scripted menu run."""

import io
import unittest
from decimal import Decimal

from stockroom.console.menu import ConsoleMenu, format_product_row
from stockroom.console.session import Session
from stockroom.core.errors import InvalidArgument
from stockroom.schemas.product import ProductRecord
from stockroom.schemas.user import UserRecord
from stockroom.services.products import ProductService
from stockroom.services.users import UserService
from stockroom.storage.memory import InMemoryProductStore, InMemoryUserStore


def _services() -> tuple[ProductService, UserService]:
    products = ProductService(InMemoryProductStore())
    users = UserService(InMemoryUserStore())
    users.add_user(UserRecord(username="admin", password="admin123", role="admin"))
    users.add_user(UserRecord(username="staff", password="staff123", role="staff"))
    return products, users


def _menu(products: ProductService, users: UserService, lines: list[str]) -> tuple[ConsoleMenu, io.StringIO]:
    """Build a menu whose prompts are answered, in order, by lines."""
    answers = iter(lines)
    out = io.StringIO()
    menu = ConsoleMenu(
        products,
        users,
        input_fn=lambda _prompt: next(answers),
        password_fn=lambda _prompt: next(answers),
        out=out,
    )
    return menu, out


class TestSession(unittest.TestCase):
    def setUp(self) -> None:
        _, self.users = _services()
        self.session = Session(self.users)

    def test_starts_unauthenticated(self) -> None:
        self.assertFalse(self.session.is_authenticated)
        self.assertFalse(self.session.can("view_products"))

    def test_successful_login_binds_user(self) -> None:
        self.assertTrue(self.session.login("staff", "staff123"))
        self.assertTrue(self.session.is_authenticated)
        self.assertEqual(self.session.user.username, "staff")
        self.assertTrue(self.session.can("update_stock"))
        self.assertFalse(self.session.can("delete_product"))

    def test_failed_login_stays_unauthenticated(self) -> None:
        self.assertFalse(self.session.login("staff", "nope"))
        self.assertIsNone(self.session.user)

    def test_blank_login_raises(self) -> None:
        with self.assertRaises(InvalidArgument):
            self.session.login("", "x")

    def test_logout(self) -> None:
        self.session.login("admin", "admin123")
        self.session.logout()
        self.assertFalse(self.session.is_authenticated)


class TestConsoleMenu(unittest.TestCase):
    def setUp(self) -> None:
        self.products, self.users = _services()

    def test_login_fails_after_max_attempts(self) -> None:
        menu, out = _menu(self.products, self.users, ["admin", "x", "admin", "y", "", "z"])
        self.assertEqual(menu.run(), 1)
        text = out.getvalue()
        self.assertEqual(text.count("Invalid username or password."), 2)
        self.assertIn("Invalid input: Username cannot be null or empty", text)
        self.assertIn("Login failed", text)

    def test_admin_adds_and_lists_product(self) -> None:
        script = [
            "admin", "admin123",
            "1", "Laptop", "15", "999.99", "Electronics",
            "3",
            "0",
        ]
        menu, out = _menu(self.products, self.users, script)
        self.assertEqual(menu.run(), 0)
        text = out.getvalue()
        self.assertIn("Welcome, admin (admin)", text)
        self.assertIn("Product added successfully with ID: 1", text)
        self.assertIn("999.99", text)
        self.assertEqual(self.products.get_product_by_id(1).name, "Laptop")

    def test_invalid_product_reports_error_and_keeps_running(self) -> None:
        script = ["admin", "admin123", "1", "", "5", "10", "Misc", "0"]
        menu, out = _menu(self.products, self.users, script)
        self.assertEqual(menu.run(), 0)
        self.assertIn("Invalid input: Product name cannot be null or empty", out.getvalue())
        self.assertEqual(self.products.get_all_products(), [])

    def test_non_numeric_input_is_reprompted(self) -> None:
        script = ["admin", "admin123", "1", "Chair", "many", "4", "abc", "49.50", "Furniture", "0"]
        menu, out = _menu(self.products, self.users, script)
        menu.run()
        self.assertIn("Please enter a valid integer", out.getvalue())
        self.assertIn("Please enter a valid decimal number", out.getvalue())
        self.assertEqual(self.products.get_product_by_id(1).price, Decimal("49.50"))

    def test_staff_menu_hides_admin_options(self) -> None:
        menu, out = _menu(self.products, self.users, ["staff", "staff123", "5", "0"])
        menu.run()
        text = out.getvalue()
        self.assertNotIn("5. Delete Product", text)
        self.assertNotIn("11. List Users", text)
        self.assertIn("9. Update Stock Quantity", text)
        self.assertIn("Access denied", text)

    def test_staff_updates_stock_and_views_low_stock(self) -> None:
        self.products.add_product(
            ProductRecord(name="Cable", category="Electronics", quantity=50, price=Decimal("5"))
        )
        script = ["staff", "staff123", "9", "1", "2", "8", "", "0"]
        menu, out = _menu(self.products, self.users, script)
        menu.run()
        text = out.getvalue()
        self.assertIn("Stock quantity updated.", text)
        self.assertIn("Cable", text)
        self.assertEqual(self.products.get_product_by_id(1).quantity, 2)

    def test_update_keeps_blank_fields(self) -> None:
        self.products.add_product(
            ProductRecord(name="Desk", category="Furniture", quantity=4, price=Decimal("120"))
        )
        script = ["admin", "admin123", "4", "1", "", "7", "", "", "0"]
        menu, out = _menu(self.products, self.users, script)
        menu.run()
        product = self.products.get_product_by_id(1)
        self.assertEqual((product.name, product.quantity, product.price), ("Desk", 7, Decimal("120")))
        self.assertIn("Product updated successfully.", out.getvalue())

    def test_delete_requires_confirmation(self) -> None:
        self.products.add_product(
            ProductRecord(name="Desk", category="Furniture", quantity=4, price=Decimal("120"))
        )
        script = ["admin", "admin123", "5", "1", "n", "5", "1", "y", "0"]
        menu, out = _menu(self.products, self.users, script)
        menu.run()
        text = out.getvalue()
        self.assertIn("Product deletion cancelled.", text)
        self.assertIn("Product deleted successfully.", text)
        self.assertIsNone(self.products.get_product_by_id(1))

    def test_search_and_categories(self) -> None:
        for name, category in (("Laptop", "Electronics"), ("Desktop", "Electronics"), ("Notebook", "Stationery")):
            self.products.add_product(
                ProductRecord(name=name, category=category, quantity=1, price=Decimal("1"))
            )
        script = ["admin", "admin123", "7", "top", "6", "Furniture", "10", "0"]
        menu, out = _menu(self.products, self.users, script)
        menu.run()
        text = out.getvalue()
        self.assertIn("Desktop", text)
        self.assertIn("No products found in category: Furniture", text)
        self.assertIn("- Electronics", text)
        self.assertIn("- Stationery", text)

    def test_admin_manages_users(self) -> None:
        script = ["admin", "admin123", "12", "carol", "pw", "Staff", "11", "13", "1", "13", "3", "0"]
        menu, out = _menu(self.products, self.users, script)
        menu.run()
        text = out.getvalue()
        self.assertIn("User added successfully with ID: 3", text)
        self.assertIn("carol", text)
        self.assertIn("cannot delete the account you are logged in with", text)
        self.assertIn("User deleted successfully.", text)
        self.assertIsNone(self.users.get_user_by_username("carol"))

    def test_end_of_input_exits_cleanly(self) -> None:
        def eof(_prompt: str) -> str:
            raise EOFError

        menu = ConsoleMenu(self.products, self.users, input_fn=eof, password_fn=eof, out=io.StringIO())
        self.assertEqual(menu.run(), 0)
        self.assertFalse(menu.session.is_authenticated)

    def test_unknown_option(self) -> None:
        menu, out = _menu(self.products, self.users, ["admin", "admin123", "42", "0"])
        menu.run()
        self.assertIn("Invalid option.", out.getvalue())


class TestFormatProductRow(unittest.TestCase):
    def test_price_has_two_decimals(self) -> None:
        row = format_product_row(
            ProductRecord(id=3, name="Pen", category="Stationery", quantity=7, price=Decimal("1.5"))
        )
        self.assertIn("1.50", row)
        self.assertTrue(row.startswith("3"))
        self.assertTrue(row.endswith("Stationery"))


if __name__ == "__main__":
    unittest.main()
