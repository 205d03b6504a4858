"""Protocol interfaces for event publishing."""

from abc import abstractmethod
from typing import Awaitable, Callable, Protocol, runtime_checkable

from .domain_event import DomainEvent

EventHandler = Callable[[DomainEvent], Awaitable[None]]


@runtime_checkable
class EventPublisher(Protocol):
    """Transport that delivers domain events to subscribers."""
    
    @abstractmethod
    async def publish(self, event: DomainEvent) -> None:
        """Publish a domain event. Delivery is fire-and-forget."""
        ...
