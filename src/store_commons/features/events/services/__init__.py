"""Event services."""

from .event_publisher_service import EventPublisherService

__all__ = ["EventPublisherService"]
