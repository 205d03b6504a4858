"""Event publisher service for entity lifecycle events.

Builds DomainEvent objects for inserted/updated/deleted entities and hands
them to the configured EventPublisher.
"""

import logging
from typing import Any, Dict, Optional

from ..entities.domain_event import DomainEvent, EntityAction
from ..entities.protocols import EventPublisher
from ....core.value_objects import EventId, EventType

logger = logging.getLogger(__name__)


class EventPublisherService:
    """Service publishing entity lifecycle events."""
    
    def __init__(self, publisher: EventPublisher):
        """Initialize with event publisher.
        
        Args:
            publisher: Transport delivering events to subscribers
        """
        self._publisher = publisher
    
    async def entity_inserted(self, entity: Any, aggregate_type: str,
                              metadata: Optional[Dict[str, Any]] = None) -> DomainEvent:
        """Publish '<aggregate_type>.inserted' for entity."""
        return await self._publish(EntityAction.INSERTED, entity, aggregate_type, metadata)
    
    async def entity_updated(self, entity: Any, aggregate_type: str,
                             metadata: Optional[Dict[str, Any]] = None) -> DomainEvent:
        """Publish '<aggregate_type>.updated' for entity."""
        return await self._publish(EntityAction.UPDATED, entity, aggregate_type, metadata)
    
    async def entity_deleted(self, entity: Any, aggregate_type: str,
                             metadata: Optional[Dict[str, Any]] = None) -> DomainEvent:
        """Publish '<aggregate_type>.deleted' for entity."""
        return await self._publish(EntityAction.DELETED, entity, aggregate_type, metadata)
    
    def create_event(self, action: EntityAction, entity: Any, aggregate_type: str,
                     metadata: Optional[Dict[str, Any]] = None) -> DomainEvent:
        """Create a lifecycle event without publishing it."""
        entity_id = getattr(entity, "id", None)
        aggregate_id = str(getattr(entity_id, "value", entity_id))
        event_data = entity.to_dict() if hasattr(entity, "to_dict") else {}
        
        return DomainEvent(
            id=EventId.generate(),
            event_type=EventType(f"{aggregate_type}.{action.value}"),
            aggregate_id=aggregate_id,
            aggregate_type=aggregate_type,
            entity=entity,
            event_data=event_data,
            event_metadata=metadata or {},
        )
    
    async def _publish(self, action: EntityAction, entity: Any, aggregate_type: str,
                       metadata: Optional[Dict[str, Any]]) -> DomainEvent:
        event = self.create_event(action, entity, aggregate_type, metadata)
        await self._publisher.publish(event)
        logger.debug(f"Published {event.event_type.value} for {aggregate_type} {event.aggregate_id}")
        return event
