"""Cache feature for store-commons.

Feature-First architecture with Redis and in-memory cache support:
- entities/: Cache protocols
- adapters/: Redis and in-memory cache implementations
- services/: Invalidation strategies
"""

from .entities.protocols import Cache, CacheSerializer, CacheInvalidationStrategy
from .adapters.memory_adapter import MemoryAdapter
from .adapters.redis_adapter import RedisAdapter
from .adapters.serializers import PickleSerializer
from .services.invalidation_service import FullClearInvalidation, PatternInvalidation

__all__ = [
    # Protocols
    "Cache",
    "CacheSerializer",
    "CacheInvalidationStrategy",
    
    # Adapters
    "MemoryAdapter",
    "RedisAdapter",
    "PickleSerializer",
    
    # Invalidation
    "FullClearInvalidation",
    "PatternInvalidation",
]
