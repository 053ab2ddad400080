"""
Load sample users and products. Run from project root:
  python -m stockroom.scripts.seed

Existing usernames are skipped, so the script can be re-run. Products are always added.
"""
import logging
import sys
from decimal import Decimal

from stockroom.core.config import get_settings
from stockroom.core.errors import StorageFailure
from stockroom.schemas.product import ProductRecord
from stockroom.schemas.user import UserRecord
from stockroom.services.products import ProductService
from stockroom.services.users import UserService
from stockroom.storage import build_stores

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

SAMPLE_USERS = (
    ("admin", "admin123", "admin"),
    ("staff", "staff123", "staff"),
)

# (name, category, price, quantity)
SAMPLE_PRODUCTS = (
    ("Laptop", "Electronics", Decimal("99999.00"), 15),
    ("Desk Chair", "Furniture", Decimal("15999.00"), 30),
    ("Wireless Mouse", "Electronics", Decimal("1499.00"), 50),
    ("Notebook", "Stationery", Decimal("99.00"), 200),
    ("Monitor Stand", "Furniture", Decimal("2499.00"), 8),
    ("USB-C Cable", "Electronics", Decimal("599.00"), 5),
    ("Ballpoint Pens (10 pack)", "Stationery", Decimal("149.00"), 3),
)


def seed(products: ProductService, users: UserService) -> tuple[int, int]:
    """Insert sample data; returns (users_created, products_created)."""
    users_created = 0
    for username, password, role in SAMPLE_USERS:
        if users.get_user_by_username(username) is not None:
            logger.info("User %r already exists; skipping.", username)
            continue
        users.add_user(UserRecord(username=username, password=password, role=role))
        users_created += 1
    for name, category, price, quantity in SAMPLE_PRODUCTS:
        products.add_product(
            ProductRecord(name=name, category=category, price=price, quantity=quantity)
        )
    return users_created, len(SAMPLE_PRODUCTS)


def main() -> int:
    settings = get_settings()
    if settings.STORAGE_BACKEND == "sql":
        from stockroom.core.database import create_tables

        create_tables()
    product_store, user_store = build_stores(settings)
    try:
        users_created, products_created = seed(
            ProductService(product_store),
            UserService(user_store, password_hashing=settings.PASSWORD_HASHING),
        )
    except StorageFailure as e:
        logger.exception("Seeding failed: %s", e.message)
        return 1
    logger.info("Seed completed: users_created=%s products_created=%s", users_created, products_created)
    return 0


if __name__ == "__main__":
    sys.exit(main())
