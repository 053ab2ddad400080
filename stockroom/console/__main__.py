"""
Console entrypoint. Run from project root:

  python -m stockroom.console

Uses the storage backend from settings (STORAGE_BACKEND, DATABASE_URL).
"""

from dotenv import load_dotenv

load_dotenv()

import logging
import sys

from stockroom.console.menu import ConsoleMenu
from stockroom.core.config import get_settings
from stockroom.services.products import ProductService
from stockroom.services.users import UserService
from stockroom.storage import build_stores

logger = logging.getLogger(__name__)


def main() -> int:
    """Wire services to the configured stores and run the menu."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
        stream=sys.stderr,
    )
    if settings.STORAGE_BACKEND == "sql" and settings.APP_ENV == "dev":
        from stockroom.core.database import create_tables

        create_tables()

    product_store, user_store = build_stores(settings)
    menu = ConsoleMenu(
        ProductService(product_store),
        UserService(user_store, password_hashing=settings.PASSWORD_HASHING),
        low_stock_threshold=settings.LOW_STOCK_THRESHOLD,
        max_login_attempts=settings.LOGIN_MAX_ATTEMPTS,
    )
    try:
        return menu.run()
    except Exception as e:
        logger.exception("Console session failed: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
