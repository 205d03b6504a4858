"""Core value objects for store-commons."""

from .identifiers import StoreId, EventId, EventType

__all__ = [
    "StoreId",
    "EventId",
    "EventType",
]
