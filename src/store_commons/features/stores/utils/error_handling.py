"""Error handling utilities for store operations."""

import functools
import logging
from typing import Any, Callable

from ....core.exceptions import (
    InvalidArgumentError,
    InvariantViolationError,
    StoreNotFoundError,
    DuplicateResourceError,
)

logger = logging.getLogger(__name__)

_DOMAIN_ERRORS = (
    InvalidArgumentError,
    InvariantViolationError,
    StoreNotFoundError,
    DuplicateResourceError,
)


def store_operation(operation_name: str, log_level: int = logging.ERROR):
    """Decorator logging failed store operations and re-raising the error.
    
    Domain errors are logged at INFO, anything else at log_level.
    
    Usage:
        @store_operation("delete store")
        async def delete_store(self, store):
            ...
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> Any:
            try:
                return await func(*args, **kwargs)
            except _DOMAIN_ERRORS as e:
                logger.info(f"Domain exception in {operation_name}: {e} | {_store_context(args, kwargs)}")
                raise
            except Exception as e:
                logger.log(log_level, f"Failed to {operation_name}: {e} | {_store_context(args, kwargs)}")
                raise
        return wrapper
    return decorator


def _store_context(args: tuple, kwargs: dict) -> str:
    # args[0] is the service instance
    candidates = list(args[1:]) + list(kwargs.values())
    for candidate in candidates:
        store_id = getattr(candidate, "id", None)
        if store_id is not None:
            return f"store_id={store_id}"
        if isinstance(candidate, str):
            return f"argument={candidate}"
    return "no context"
