"""In-process event publisher.

Dispatches events to subscribed coroutine handlers in the publishing task,
mediator style. A failing handler is logged and does not affect other
handlers or the publisher's caller.
"""

import fnmatch
import logging
from collections import deque
from typing import Deque, List, Tuple

from ..entities.domain_event import DomainEvent
from ..entities.protocols import EventHandler

logger = logging.getLogger(__name__)


class InMemoryEventPublisher:
    """Publisher delivering events to in-process subscribers."""
    
    def __init__(self, history_size: int = 100):
        """Initialize publisher.
        
        Args:
            history_size: Number of recently published events kept for inspection
        """
        self._subscriptions: List[Tuple[str, EventHandler]] = []
        self._history: Deque[DomainEvent] = deque(maxlen=history_size)
    
    def subscribe(self, pattern: str, handler: EventHandler) -> None:
        """Subscribe handler to event types matching pattern.
        
        Args:
            pattern: Exact event type ("store.deleted") or glob ("store.*", "*")
            handler: Coroutine function receiving the event
        """
        self._subscriptions.append((pattern, handler))
    
    def unsubscribe(self, handler: EventHandler) -> None:
        """Remove every subscription of handler."""
        self._subscriptions = [(p, h) for p, h in self._subscriptions if h is not handler]
    
    @property
    def history(self) -> List[DomainEvent]:
        """Recently published events, oldest first."""
        return list(self._history)
    
    async def publish(self, event: DomainEvent) -> None:
        """Deliver event to every matching subscriber."""
        self._history.append(event)
        
        for pattern, handler in list(self._subscriptions):
            if not fnmatch.fnmatchcase(event.event_type.value, pattern):
                continue
            try:
                await handler(event)
            except Exception as e:
                logger.error(
                    f"Event handler {getattr(handler, '__name__', handler)} failed for "
                    f"{event.event_type.value} ({event.aggregate_type}:{event.aggregate_id}): {e}"
                )
