"""Event publisher adapters."""

from .memory_publisher import InMemoryEventPublisher
from .redis_publisher import RedisEventPublisher

__all__ = [
    "InMemoryEventPublisher",
    "RedisEventPublisher",
]
