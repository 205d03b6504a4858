"""Cache protocols for store-commons.

This module defines the protocol interfaces for caching functionality:
the keyed cache itself, value serializers for out-of-process backends and
the pluggable invalidation strategy used by cached services.
"""

from abc import abstractmethod
from typing import (
    Any,
    Awaitable,
    Callable,
    Dict,
    List,
    Optional,
    Protocol,
    TypeVar,
    Union,
    runtime_checkable,
)

T = TypeVar('T')

Loader = Callable[[], Union[Awaitable[Any], Any]]


@runtime_checkable
class CacheSerializer(Protocol):
    """Protocol for cache value serialization."""
    
    @abstractmethod
    def serialize(self, value: Any) -> bytes:
        """Serialize value to bytes."""
        ...
    
    @abstractmethod
    def deserialize(self, data: bytes) -> Any:
        """Deserialize bytes to value."""
        ...


@runtime_checkable
class Cache(Protocol):
    """Keyed cache used by read-through services."""
    
    # Basic operations
    @abstractmethod
    async def get(self, key: str, default: Optional[T] = None) -> Optional[T]:
        """Get value by key."""
        ...
    
    @abstractmethod
    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        """Set key-value pair."""
        ...
    
    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Delete key."""
        ...
    
    @abstractmethod
    async def exists(self, key: str) -> bool:
        """Check if key exists."""
        ...
    
    # Read-through
    @abstractmethod
    async def get_or_set(self, key: str, loader: Loader, ttl: Optional[int] = None) -> Any:
        """Get value or populate it using loader.
        
        The loader runs at most once per miss of a key. A loader result of
        None is returned but not stored.
        """
        ...
    
    # Pattern operations
    @abstractmethod
    async def keys(self, pattern: str = "*") -> List[str]:
        """Get keys matching pattern."""
        ...
    
    @abstractmethod
    async def delete_pattern(self, pattern: str) -> int:
        """Delete keys matching pattern."""
        ...
    
    # Management operations
    @abstractmethod
    async def clear(self) -> None:
        """Clear all cache entries."""
        ...
    
    @abstractmethod
    async def size(self) -> int:
        """Get cache size."""
        ...
    
    @abstractmethod
    async def stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        ...
    
    @abstractmethod
    async def health_check(self) -> bool:
        """Check cache health."""
        ...
    
    @abstractmethod
    async def close(self) -> None:
        """Close cache connections."""
        ...


@runtime_checkable
class CacheInvalidationStrategy(Protocol):
    """Policy deciding what a write invalidates."""
    
    @abstractmethod
    async def invalidate(self, scope: str) -> None:
        """Invalidate cached data for the given key scope (a key prefix)."""
        ...
