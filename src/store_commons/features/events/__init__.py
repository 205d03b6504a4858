"""Events feature for store-commons.

Entity lifecycle events (inserted, updated, deleted) and the publishers
that deliver them.
"""

from .entities import DomainEvent, EntityAction, EventPublisher, EventHandler
from .services import EventPublisherService
from .adapters import InMemoryEventPublisher, RedisEventPublisher

__all__ = [
    "DomainEvent",
    "EntityAction",
    "EventPublisher",
    "EventHandler",
    "EventPublisherService",
    "InMemoryEventPublisher",
    "RedisEventPublisher",
]
