"""Logging of storage failures at the service boundary."""

import functools
import logging
from collections.abc import Callable
from typing import Any, TypeVar, cast

from stockroom.core.errors import StorageFailure

F = TypeVar("F", bound=Callable[..., Any])


def logs_storage_failure(method: F) -> F:
    """Log a StorageFailure raised by method on its module's logger, then re-raise it unchanged."""
    logger = logging.getLogger(method.__module__)

    @functools.wraps(method)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return method(*args, **kwargs)
        except StorageFailure as e:
            logger.exception("Storage failure in %s: %s", method.__qualname__, e.message)
            raise

    return cast(F, wrapper)
