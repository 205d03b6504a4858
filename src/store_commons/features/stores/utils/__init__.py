"""Store utilities."""

from .error_handling import store_operation

__all__ = ["store_operation"]
