"""SQLAlchemy ORM models."""

from stockroom.models.base import Base
from stockroom.models.product import Product
from stockroom.models.user import User

__all__ = ["Base", "Product", "User"]
