"""Redis cache backend adapter for store-commons."""

import inspect
import logging
from typing import Any, Dict, List, Optional

import redis.asyncio as redis
from redis.exceptions import RedisError, ConnectionError as RedisConnectionError

from ..entities.protocols import CacheSerializer, Loader
from .key_locks import KeyLocks
from .serializers import PickleSerializer
from ....core.exceptions import CacheError, CacheConnectionError

logger = logging.getLogger(__name__)


class RedisAdapter:
    """Redis-backed cache.

    Keys are stored under an optional namespace so several services can share
    one Redis database; clear() then only removes the namespace. Without a
    namespace clear() flushes the whole database.

    delete, delete_pattern and clear bump a process-local invalidation
    generation. A get_or_set load that overlaps one of them returns its
    result without writing it back. Loads running in other processes are
    not covered.
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379/0",
        client: Optional[redis.Redis] = None,
        serializer: Optional[CacheSerializer] = None,
        namespace: str = "",
        default_ttl: Optional[int] = None,
    ):
        self.redis_url = redis_url
        self.redis_client: Optional[redis.Redis] = client
        self.serializer = serializer or PickleSerializer()
        self.namespace = namespace
        self.default_ttl = default_ttl
        self._key_locks = KeyLocks()
        self._generation = 0

    async def connect(self) -> None:
        """Connect to Redis."""
        if self.redis_client is not None:
            return

        try:
            self.redis_client = redis.from_url(self.redis_url, decode_responses=False)
            await self.redis_client.ping()
            logger.info(f"Connected to Redis cache at {self.redis_url}")
        except RedisConnectionError as e:
            self.redis_client = None
            raise CacheConnectionError(f"Failed to connect to Redis: {e}")

    async def close(self) -> None:
        """Close Redis connection."""
        if self.redis_client is not None:
            await self.redis_client.aclose()
            self.redis_client = None
            logger.info("Redis cache connection closed")

    async def get(self, key: str, default: Optional[Any] = None) -> Optional[Any]:
        """Get value by key."""
        client = await self._ensure_connected()
        try:
            raw = await client.get(self._full_key(key))
        except RedisError as e:
            raise CacheError(f"Redis get error for key {key}: {e}")

        if raw is None:
            return default
        return self.serializer.deserialize(raw)

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        """Set key-value pair with optional TTL."""
        client = await self._ensure_connected()
        ttl = ttl if ttl is not None else self.default_ttl
        data = self.serializer.serialize(value)
        try:
            await client.set(self._full_key(key), data, ex=ttl if ttl and ttl > 0 else None)
        except RedisError as e:
            raise CacheError(f"Redis set error for key {key}: {e}")

    async def delete(self, key: str) -> bool:
        """Delete key and return whether it existed."""
        client = await self._ensure_connected()
        self._generation += 1
        try:
            return bool(await client.delete(self._full_key(key)))
        except RedisError as e:
            raise CacheError(f"Redis delete error for key {key}: {e}")

    async def exists(self, key: str) -> bool:
        """Check if key exists."""
        client = await self._ensure_connected()
        try:
            return bool(await client.exists(self._full_key(key)))
        except RedisError as e:
            raise CacheError(f"Redis exists error for key {key}: {e}")

    async def get_or_set(self, key: str, loader: Loader, ttl: Optional[int] = None) -> Any:
        """Get value or populate it by calling loader once per miss in this process."""
        cached = await self.get(key)
        if cached is not None:
            return cached

        async with self._key_locks.hold(key):
            generation = self._generation
            cached = await self.get(key)
            if cached is not None:
                return cached

            result = loader()
            if inspect.isawaitable(result):
                result = await result
            if result is not None:
                if generation == self._generation:
                    await self.set(key, result, ttl)
                else:
                    logger.debug(f"Discarding load for '{key}': cache invalidated during load")
            return result

    async def keys(self, pattern: str = "*") -> List[str]:
        """Get keys matching pattern (namespace stripped)."""
        client = await self._ensure_connected()
        try:
            found = [key async for key in client.scan_iter(match=self._full_key(pattern))]
        except RedisError as e:
            raise CacheError(f"Redis keys error with pattern {pattern}: {e}")

        offset = len(self.namespace)
        return [
            (key.decode() if isinstance(key, bytes) else key)[offset:]
            for key in found
        ]

    async def delete_pattern(self, pattern: str) -> int:
        """Delete keys matching pattern.

        Args:
            pattern: Redis glob pattern relative to the namespace (e.g. "stores.*")

        Returns:
            Number of keys deleted
        """
        self._generation += 1
        client = await self._ensure_connected()
        try:
            found = [key async for key in client.scan_iter(match=self._full_key(pattern))]
            if not found:
                return 0
            return await client.delete(*found)
        except RedisError as e:
            raise CacheError(f"Redis delete_pattern error with pattern {pattern}: {e}")

    async def clear(self) -> None:
        """Clear all cache entries in this adapter's namespace."""
        if self.namespace:
            await self.delete_pattern("*")
            return

        self._generation += 1
        client = await self._ensure_connected()
        try:
            await client.flushdb()
        except RedisError as e:
            raise CacheError(f"Redis clear error: {e}")

    async def size(self) -> int:
        """Get cache size (number of keys)."""
        if self.namespace:
            return len(await self.keys("*"))

        client = await self._ensure_connected()
        try:
            return await client.dbsize()
        except RedisError as e:
            raise CacheError(f"Redis size error: {e}")

    async def stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        return {
            "backend_type": "redis",
            "namespace": self.namespace,
            "total_entries": await self.size(),
        }

    async def health_check(self) -> bool:
        """Check Redis connectivity."""
        try:
            client = await self._ensure_connected()
            return bool(await client.ping())
        except (RedisError, CacheError) as e:
            logger.error(f"Redis health check failed: {e}")
            return False

    def _full_key(self, key: str) -> str:
        return f"{self.namespace}{key}"

    async def _ensure_connected(self) -> redis.Redis:
        if self.redis_client is None:
            await self.connect()
        return self.redis_client
