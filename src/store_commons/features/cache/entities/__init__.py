"""Cache entities and protocols."""

from .protocols import Cache, CacheSerializer, CacheInvalidationStrategy, Loader

__all__ = [
    "Cache",
    "CacheSerializer",
    "CacheInvalidationStrategy",
    "Loader",
]
