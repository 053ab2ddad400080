"""Service providers for route dependencies. Tests replace them via app.dependency_overrides."""

from functools import lru_cache

from stockroom.core.config import get_settings
from stockroom.services.products import ProductService
from stockroom.services.users import UserService
from stockroom.storage import ProductStore, UserStore, build_stores


@lru_cache
def get_stores() -> tuple[ProductStore, UserStore]:
    """Build the configured stores once per process."""
    return build_stores(get_settings())


def get_product_service() -> ProductService:
    product_store, _ = get_stores()
    return ProductService(product_store)


def get_user_service() -> UserService:
    _, user_store = get_stores()
    return UserService(user_store, password_hashing=get_settings().PASSWORD_HASHING)
