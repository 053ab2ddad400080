"""Validation rules run before every create and update. Pure; the first violated rule is reported."""

from decimal import Decimal

from stockroom.core.errors import InvalidArgument
from stockroom.schemas.product import ProductRecord
from stockroom.schemas.user import UserRecord

VALID_ROLES: frozenset[str] = frozenset({"admin", "staff"})

# Column limits of the products and users tables (stockroom.models).
NAME_MAX_LEN = 100
CATEGORY_MAX_LEN = 50
USERNAME_MAX_LEN = 50
PASSWORD_MAX_LEN = 255

# price is NUMERIC(10, 2): at most 8 integer digits and 2 decimal places.
PRICE_SCALE = Decimal("0.01")
PRICE_LIMIT = Decimal(10) ** 8


def is_blank(value: str | None) -> bool:
    """True for None, empty, or whitespace-only strings."""
    return value is None or not value.strip()


def _check_length(value: str, max_len: int, label: str) -> None:
    if len(value) > max_len:
        raise InvalidArgument(f"{label} cannot exceed {max_len} characters")


def _validate_price(price: Decimal | None) -> None:
    if price is None or not price.is_finite() or price <= 0:
        raise InvalidArgument("Price must be positive")
    if price >= PRICE_LIMIT:
        raise InvalidArgument("Price must be less than 100000000")
    # Trailing zeros are fine (12.50, 12.500); anything that would be rounded is not.
    if price != price.quantize(PRICE_SCALE):
        raise InvalidArgument("Price cannot have more than 2 decimal places")


def validate_product(product: ProductRecord) -> None:
    """
    Raise InvalidArgument unless the product can be stored exactly as given.

    Name and category are non-blank and fit their columns, price is positive with at most
    two decimal places and eight integer digits, and quantity is >= 0.
    """
    if is_blank(product.name):
        raise InvalidArgument("Product name cannot be null or empty")
    _check_length(product.name, NAME_MAX_LEN, "Product name")
    _validate_price(product.price)
    if product.quantity is None or product.quantity < 0:
        raise InvalidArgument("Quantity cannot be negative")
    if is_blank(product.category):
        raise InvalidArgument("Category cannot be null or empty")
    _check_length(product.category, CATEGORY_MAX_LEN, "Category")


def validate_user(user: UserRecord) -> None:
    """Raise InvalidArgument unless username and password are non-blank and role is admin or staff."""
    if is_blank(user.username):
        raise InvalidArgument("Username cannot be null or empty")
    _check_length(user.username, USERNAME_MAX_LEN, "Username")
    if is_blank(user.password):
        raise InvalidArgument("Password cannot be null or empty")
    _check_length(user.password, PASSWORD_MAX_LEN, "Password")
    if is_blank(user.role):
        raise InvalidArgument("Role cannot be null or empty")
    if user.role not in VALID_ROLES:
        raise InvalidArgument("Role must be either 'admin' or 'staff'")
