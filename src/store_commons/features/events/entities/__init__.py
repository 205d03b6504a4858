"""Event entities and protocols."""

from .domain_event import DomainEvent, EntityAction
from .protocols import EventPublisher, EventHandler

__all__ = [
    "DomainEvent",
    "EntityAction",
    "EventPublisher",
    "EventHandler",
]
