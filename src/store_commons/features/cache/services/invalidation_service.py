"""Cache invalidation strategies.

A cached service calls ``invalidate(scope)`` after every write, where scope
is the key prefix the service owns. Strategies decide how much of the cache
that discards.
"""

import logging

from ..entities.protocols import Cache

logger = logging.getLogger(__name__)


class FullClearInvalidation:
    """Discard every cache entry on any write, regardless of scope.

    Never stale, at the price of losing all cache locality after a write.
    """

    def __init__(self, cache: Cache):
        self._cache = cache

    async def invalidate(self, scope: str) -> None:
        await self._cache.clear()
        logger.debug(f"Cleared entire cache after write to scope '{scope}'")


class PatternInvalidation:
    """Discard only the keys under the written scope's prefix."""

    def __init__(self, cache: Cache):
        self._cache = cache

    async def invalidate(self, scope: str) -> None:
        if not scope:
            raise ValueError("Pattern invalidation requires a non-empty scope")

        removed = await self._cache.delete_pattern(f"{scope}*")
        logger.debug(f"Invalidated {removed} cache keys under '{scope}'")
