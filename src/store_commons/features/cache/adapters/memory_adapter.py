"""Memory cache backend adapter for store-commons."""

import asyncio
import fnmatch
import inspect
import logging
import time
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..entities.protocols import Loader
from .key_locks import KeyLocks

logger = logging.getLogger(__name__)

_MISSING = object()


@dataclass
class MemoryCacheEntry:
    """Memory cache entry with metadata."""
    value: Any
    created_at: float = field(default_factory=time.time)
    expires_at: Optional[float] = None
    access_count: int = 0

    @property
    def is_expired(self) -> bool:
        """Check if entry is expired."""
        if self.expires_at is None:
            return False
        return time.time() > self.expires_at

    def access(self) -> None:
        """Record access to this entry."""
        self.access_count += 1


class MemoryCacheMetrics:
    """Hit/miss counters for the memory cache."""

    def __init__(self):
        self.hits = 0
        self.misses = 0
        self.sets = 0
        self.deletes = 0
        self.loads = 0
        self.clears = 0

    def as_dict(self) -> Dict[str, Any]:
        total_requests = self.hits + self.misses
        hit_rate = (self.hits / total_requests) if total_requests > 0 else 0.0
        return {
            "total_hits": self.hits,
            "total_misses": self.misses,
            "total_sets": self.sets,
            "total_deletes": self.deletes,
            "total_loads": self.loads,
            "total_clears": self.clears,
            "hit_rate": hit_rate,
            "total_requests": total_requests,
        }


class MemoryAdapter:
    """In-process cache with LRU eviction and optional TTL.

    Values are stored as-is (no serialization), so a cached object is
    returned by identity on every hit. Every clear, delete and pattern
    delete bumps an invalidation generation; a get_or_set load that
    started before the bump does not store its result.
    """

    def __init__(self, max_size: int = 1000, default_ttl: Optional[int] = None):
        if max_size < 1:
            raise ValueError("max_size must be at least 1")

        self.max_size = max_size
        self.default_ttl = default_ttl

        self._store: "OrderedDict[str, MemoryCacheEntry]" = OrderedDict()
        self._lock = asyncio.Lock()
        self._key_locks = KeyLocks()
        self._generation = 0
        self.metrics = MemoryCacheMetrics()

    async def get(self, key: str, default: Optional[Any] = None) -> Optional[Any]:
        """Get value by key."""
        async with self._lock:
            value = self._lookup(key)
        return default if value is _MISSING else value

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        """Set key-value pair with optional TTL."""
        async with self._lock:
            self._put(key, value, ttl)

    async def delete(self, key: str) -> bool:
        """Delete key and return whether it existed."""
        async with self._lock:
            self._generation += 1
            existed = self._store.pop(key, None) is not None
            if existed:
                self.metrics.deletes += 1
            return existed

    async def exists(self, key: str) -> bool:
        """Check if key exists (and not expired)."""
        async with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return False
            if entry.is_expired:
                del self._store[key]
                return False
            return True

    async def get_or_set(self, key: str, loader: Loader, ttl: Optional[int] = None) -> Any:
        """Get value or populate it by calling loader once per miss."""
        async with self._lock:
            value = self._lookup(key)
        if value is not _MISSING:
            return value

        async with self._key_locks.hold(key):
            # Another waiter may have populated the key while we queued
            async with self._lock:
                value = self._peek(key)
                generation = self._generation
            if value is not _MISSING:
                return value

            result = loader()
            if inspect.isawaitable(result):
                result = await result
            self.metrics.loads += 1

            if result is not None:
                async with self._lock:
                    if generation == self._generation:
                        self._put(key, result, ttl)
                    else:
                        logger.debug(f"Discarding load for '{key}': cache invalidated during load")
            return result

    async def keys(self, pattern: str = "*") -> List[str]:
        """Get keys matching pattern."""
        async with self._lock:
            self._cleanup_expired()
            if pattern == "*":
                return list(self._store.keys())
            return [key for key in self._store if fnmatch.fnmatchcase(key, pattern)]

    async def delete_pattern(self, pattern: str) -> int:
        """Delete keys matching pattern."""
        async with self._lock:
            self._generation += 1
            matching = [key for key in self._store if fnmatch.fnmatchcase(key, pattern)]
            for key in matching:
                del self._store[key]
            self.metrics.deletes += len(matching)
            return len(matching)

    async def clear(self) -> None:
        """Clear all cache entries."""
        async with self._lock:
            self._generation += 1
            self._store.clear()
            self.metrics.clears += 1

    async def size(self) -> int:
        """Get cache size (number of keys)."""
        async with self._lock:
            self._cleanup_expired()
            return len(self._store)

    async def stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        async with self._lock:
            stats = self.metrics.as_dict()
            stats["total_entries"] = len(self._store)
            stats["max_entries"] = self.max_size
            return stats

    async def health_check(self) -> bool:
        """Memory cache is healthy while the process is."""
        return True

    async def close(self) -> None:
        """Drop all entries."""
        await self.clear()

    def _peek(self, key: str) -> Any:
        entry = self._store.get(key)
        if entry is None:
            return _MISSING
        if entry.is_expired:
            del self._store[key]
            return _MISSING
        return entry.value

    def _lookup(self, key: str) -> Any:
        value = self._peek(key)
        if value is _MISSING:
            self.metrics.misses += 1
            return _MISSING

        self.metrics.hits += 1
        self._store[key].access()
        self._store.move_to_end(key)
        return value

    def _put(self, key: str, value: Any, ttl: Optional[int]) -> None:
        ttl = ttl if ttl is not None else self.default_ttl
        expires_at = time.time() + ttl if ttl and ttl > 0 else None

        self._store.pop(key, None)
        while len(self._store) >= self.max_size:
            evicted, _ = self._store.popitem(last=False)
            logger.debug(f"Evicted least recently used key '{evicted}'")

        self._store[key] = MemoryCacheEntry(value=value, expires_at=expires_at)
        self.metrics.sets += 1

    def _cleanup_expired(self) -> None:
        expired = [key for key, entry in self._store.items() if entry.is_expired]
        for key in expired:
            del self._store[key]
