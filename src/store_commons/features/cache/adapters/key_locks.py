"""Per-key asyncio locks that are released once nobody uses them."""

import asyncio
from contextlib import asynccontextmanager
from typing import Dict


class _KeyLock:
    __slots__ = ("lock", "users")

    def __init__(self):
        self.lock = asyncio.Lock()
        self.users = 0


class KeyLocks:
    """Registry of locks keyed by cache key.

    An entry exists only while at least one task holds or waits for it, so
    the registry does not grow with the number of distinct keys ever missed.
    """

    def __init__(self):
        self._locks: Dict[str, _KeyLock] = {}

    def __len__(self) -> int:
        return len(self._locks)

    @asynccontextmanager
    async def hold(self, key: str):
        entry = self._locks.get(key)
        if entry is None:
            entry = self._locks[key] = _KeyLock()
        entry.users += 1
        try:
            async with entry.lock:
                yield
        finally:
            entry.users -= 1
            if entry.users == 0 and self._locks.get(key) is entry:
                del self._locks[key]
