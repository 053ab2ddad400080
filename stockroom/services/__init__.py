"""Domain services: validation rules, product and user services, role capabilities."""

from stockroom.services.access import can_access
from stockroom.services.products import ProductService
from stockroom.services.users import UserService
from stockroom.services.validation import validate_product, validate_user

__all__ = [
    "ProductService",
    "UserService",
    "can_access",
    "validate_product",
    "validate_user",
]
