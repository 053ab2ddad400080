"""Console menu: login, then a loop over the options the logged-in role may use."""

import logging
import sys
from collections.abc import Callable, Sequence
from decimal import Decimal, InvalidOperation
from getpass import getpass
from typing import NamedTuple, TextIO

from stockroom.console.session import Session
from stockroom.core.errors import InvalidArgument, StorageFailure
from stockroom.schemas.product import ProductRecord
from stockroom.schemas.user import UserRecord
from stockroom.services.products import ProductService
from stockroom.services.users import UserService

logger = logging.getLogger(__name__)


class MenuOption(NamedTuple):
    key: str
    label: str
    operation: str | None  # None means always available
    handler: str


MENU_OPTIONS: tuple[MenuOption, ...] = (
    MenuOption("1", "Add Product", "add_product", "add_product"),
    MenuOption("2", "View Product by ID", "view_products", "view_product"),
    MenuOption("3", "View All Products", "view_products", "list_products"),
    MenuOption("4", "Update Product", "update_product", "update_product"),
    MenuOption("5", "Delete Product", "delete_product", "delete_product"),
    MenuOption("6", "Search by Category", "search_products", "search_by_category"),
    MenuOption("7", "Search by Name", "search_products", "search_by_name"),
    MenuOption("8", "View Low Stock Products", "view_low_stock", "low_stock"),
    MenuOption("9", "Update Stock Quantity", "update_stock", "update_stock"),
    MenuOption("10", "View Categories", "view_categories", "list_categories"),
    MenuOption("11", "List Users", "manage_users", "list_users"),
    MenuOption("12", "Add User", "manage_users", "add_user"),
    MenuOption("13", "Delete User", "manage_users", "delete_user"),
    MenuOption("0", "Exit", None, "exit"),
)

PRODUCT_HEADER = f"{'ID':<6}{'Name':<28}{'Qty':>8}{'Price':>14}  {'Category'}"


def format_product_row(product: ProductRecord) -> str:
    return (
        f"{product.id!s:<6}{(product.name or '')[:27]:<28}"
        f"{product.quantity!s:>8}{product.price:>14.2f}  {product.category}"
    )


class ConsoleMenu:
    """
    Text front end over ProductService and UserService.

    input_fn and password_fn receive the prompt and return one line; out receives all output.
    Both are injectable so the menu can be driven by a script.
    """

    def __init__(
        self,
        products: ProductService,
        users: UserService,
        *,
        input_fn: Callable[[str], str] = input,
        password_fn: Callable[[str], str] = getpass,
        out: TextIO | None = None,
        low_stock_threshold: int = 10,
        max_login_attempts: int = 3,
    ) -> None:
        self.products = products
        self.users = users
        self.session = Session(users)
        self._input = input_fn
        self._password = password_fn
        self.out = out or sys.stdout
        self.low_stock_threshold = low_stock_threshold
        self.max_login_attempts = max_login_attempts
        self._options = {o.key: o for o in MENU_OPTIONS}

    def _print(self, *parts: object) -> None:
        print(*parts, file=self.out)

    def _ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def _ask_int(self, prompt: str, default: int | None = None) -> int:
        while True:
            raw = self._ask(prompt)
            if not raw and default is not None:
                return default
            try:
                return int(raw)
            except ValueError:
                self._print("Invalid input. Please enter a valid integer.")

    def _ask_decimal(self, prompt: str, default: Decimal | None = None) -> Decimal:
        while True:
            raw = self._ask(prompt)
            if not raw and default is not None:
                return default
            try:
                value = Decimal(raw)
            except InvalidOperation:
                value = None
            if value is not None and value.is_finite():
                return value
            self._print("Invalid input. Please enter a valid decimal number.")

    def _print_products(self, products: Sequence[ProductRecord], empty_message: str) -> None:
        if not products:
            self._print(empty_message)
            return
        self._print(PRODUCT_HEADER)
        self._print("-" * len(PRODUCT_HEADER))
        for product in products:
            self._print(format_product_row(product))

    def _print_product_details(self, product: ProductRecord) -> None:
        self._print(f"ID: {product.id}")
        self._print(f"Name: {product.name}")
        self._print(f"Quantity: {product.quantity}")
        self._print(f"Price: {product.price:.2f}")
        self._print(f"Category: {product.category}")

    def run(self) -> int:
        """Log in, then serve the menu until Exit. Returns a process exit code."""
        self._print("===== Stockroom Inventory =====")
        try:
            if not self.login():
                self._print("Login failed. Exiting application...")
                return 1
            self.loop()
        except (EOFError, KeyboardInterrupt):
            self._print()
        finally:
            self.session.logout()
        self._print("Goodbye.")
        return 0

    def login(self) -> bool:
        for attempt in range(1, self.max_login_attempts + 1):
            username = self._ask("Username: ")
            password = self._password("Password: ")
            try:
                if self.session.login(username, password):
                    user = self.session.user
                    self._print(f"Welcome, {user.username} ({user.role})")
                    return True
                self._print("Invalid username or password.")
            except InvalidArgument as e:
                self._print(f"Invalid input: {e.message}")
            logger.info("Console login attempt %s/%s failed", attempt, self.max_login_attempts)
        return False

    def visible_options(self) -> list[MenuOption]:
        return [o for o in MENU_OPTIONS if o.operation is None or self.session.can(o.operation)]

    def loop(self) -> None:
        while True:
            self._print()
            for option in self.visible_options():
                self._print(f"{option.key}. {option.label}")
            choice = self._ask("Select an option: ")
            option = self._options.get(choice)
            if option is None:
                self._print("Invalid option.")
                continue
            if option.operation is None:
                return
            if not self.session.can(option.operation):
                self._print(f"Access denied: {option.label} requires admin rights.")
                continue
            handler = getattr(self, f"_{option.handler}")
            try:
                handler()
            except InvalidArgument as e:
                self._print(f"Invalid input: {e.message}")
            except StorageFailure as e:
                logger.error("Storage failure in %r: %s", option.label, e.message)
                self._print(f"Storage error: {e.message}")

    def _add_product(self) -> None:
        product = ProductRecord(
            name=self._ask("Name: "),
            quantity=self._ask_int("Quantity: "),
            price=self._ask_decimal("Price: "),
            category=self._ask("Category: "),
        )
        product_id = self.products.add_product(product)
        self._print(f"Product added successfully with ID: {product_id}")

    def _view_product(self) -> None:
        product_id = self._ask_int("Product ID: ")
        product = self.products.get_product_by_id(product_id)
        if product is None:
            self._print(f"Product with ID {product_id} not found.")
            return
        self._print_product_details(product)

    def _list_products(self) -> None:
        self._print_products(self.products.get_all_products(), "No products found in inventory.")

    def _update_product(self) -> None:
        product_id = self._ask_int("Product ID: ")
        product = self.products.get_product_by_id(product_id)
        if product is None:
            self._print(f"Product with ID {product_id} not found.")
            return
        self._print_product_details(product)
        self._print("Press Enter to keep the current value.")
        product.name = self._ask("Name: ") or product.name
        product.quantity = self._ask_int("Quantity: ", default=product.quantity)
        product.price = self._ask_decimal("Price: ", default=product.price)
        product.category = self._ask("Category: ") or product.category
        if self.products.update_product(product):
            self._print("Product updated successfully.")
        else:
            self._print("Failed to update product.")

    def _delete_product(self) -> None:
        product_id = self._ask_int("Product ID: ")
        product = self.products.get_product_by_id(product_id)
        if product is None:
            self._print(f"Product with ID {product_id} not found.")
            return
        self._print_product_details(product)
        if self._ask("Delete this product? (y/n): ").lower() != "y":
            self._print("Product deletion cancelled.")
            return
        if self.products.delete_product(product_id):
            self._print("Product deleted successfully.")
        else:
            self._print("Failed to delete product.")

    def _search_by_category(self) -> None:
        category = self._ask("Category: ")
        found = self.products.search_by_category(category)
        self._print_products(found, f"No products found in category: {category}")

    def _search_by_name(self) -> None:
        fragment = self._ask("Name contains: ")
        found = self.products.search_by_name(fragment)
        self._print_products(found, f"No products found with name containing: {fragment}")

    def _low_stock(self) -> None:
        threshold = self._ask_int(
            f"Threshold [{self.low_stock_threshold}]: ", default=self.low_stock_threshold
        )
        found = self.products.get_low_stock_products(threshold)
        self._print_products(found, f"No products found with stock quantity <= {threshold}")

    def _update_stock(self) -> None:
        product_id = self._ask_int("Product ID: ")
        quantity = self._ask_int("New quantity: ")
        if self.products.update_stock_quantity(product_id, quantity):
            self._print("Stock quantity updated.")
        else:
            self._print(f"Product with ID {product_id} not found.")

    def _list_categories(self) -> None:
        categories = self.products.get_all_categories()
        if not categories:
            self._print("No categories found.")
            return
        for category in categories:
            self._print(f"- {category}")

    def _list_users(self) -> None:
        for user in self.users.get_all_users():
            self._print(f"{user.id!s:<6}{user.username:<24}{user.role}")

    def _add_user(self) -> None:
        user = UserRecord(
            username=self._ask("Username: "),
            password=self._password("Password: "),
            role=self._ask("Role (admin/staff): ").lower(),
        )
        user_id = self.users.add_user(user)
        self._print(f"User added successfully with ID: {user_id}")

    def _delete_user(self) -> None:
        user_id = self._ask_int("User ID: ")
        if self.session.user is not None and user_id == self.session.user.id:
            self._print("You cannot delete the account you are logged in with.")
            return
        if self.users.delete_user(user_id):
            self._print("User deleted successfully.")
        else:
            self._print(f"User with ID {user_id} not found.")
