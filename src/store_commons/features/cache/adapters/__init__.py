"""Cache backend adapters."""

from .memory_adapter import MemoryAdapter
from .redis_adapter import RedisAdapter
from .serializers import PickleSerializer

__all__ = [
    "MemoryAdapter",
    "RedisAdapter",
    "PickleSerializer",
]
