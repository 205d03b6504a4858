"""Cache services."""

from .invalidation_service import FullClearInvalidation, PatternInvalidation

__all__ = [
    "FullClearInvalidation",
    "PatternInvalidation",
]
