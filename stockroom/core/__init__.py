"""Core app configuration and error types. The database engine lives in stockroom.core.database."""

from stockroom.core.config import get_settings, settings
from stockroom.core.errors import InvalidArgument, NotInitialized, StorageFailure

__all__ = [
    "InvalidArgument",
    "NotInitialized",
    "StorageFailure",
    "get_settings",
    "settings",
]
