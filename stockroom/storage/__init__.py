"""Storage contract and engines. build_stores wires the engine chosen by settings."""

from typing import TYPE_CHECKING

from stockroom.storage.base import ProductStore, UserStore
from stockroom.storage.memory import InMemoryProductStore, InMemoryUserStore

if TYPE_CHECKING:
    from stockroom.core.config import Settings


def build_stores(settings: "Settings") -> tuple[ProductStore, UserStore]:
    """
    Construct the product and user stores for settings.STORAGE_BACKEND.

    The SQL engine (and the database engine built from DATABASE_URL) is only imported
    when it is selected.
    """
    if settings.STORAGE_BACKEND == "memory":
        return InMemoryProductStore(), InMemoryUserStore()
    from stockroom.core.database import SessionLocal
    from stockroom.storage.sql import SqlProductStore, SqlUserStore

    return SqlProductStore(SessionLocal), SqlUserStore(SessionLocal)


__all__ = [
    "InMemoryProductStore",
    "InMemoryUserStore",
    "ProductStore",
    "UserStore",
    "build_stores",
]
