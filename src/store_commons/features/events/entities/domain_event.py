"""Domain event entity for store-commons events feature.

This module defines the DomainEvent entity that represents entity lifecycle
events (inserted, updated, deleted) published after a write commits.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from ....core.value_objects import EventId, EventType


class EntityAction(str, Enum):
    """Entity lifecycle actions."""
    INSERTED = "inserted"
    UPDATED = "updated"
    DELETED = "deleted"


@dataclass
class DomainEvent:
    """Entity lifecycle event.
    
    Carries the entity itself for in-process subscribers and a plain-data
    snapshot (event_data) for out-of-process transports.
    """
    
    # Event identification
    id: EventId
    event_type: EventType
    
    # Event source
    aggregate_id: str  # ID of the entity that triggered the event
    aggregate_type: str  # Type of entity (store, ...)
    
    # Event data
    entity: Optional[Any] = None
    event_data: Dict[str, Any] = field(default_factory=dict)
    event_metadata: Dict[str, Any] = field(default_factory=dict)
    
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    
    def __post_init__(self):
        """Post-init normalization."""
        if not self.aggregate_type or not self.aggregate_type.strip():
            raise ValueError("Aggregate type cannot be empty")
        self.aggregate_type = self.aggregate_type.strip().lower()
        
        if self.occurred_at.tzinfo is None:
            self.occurred_at = self.occurred_at.replace(tzinfo=timezone.utc)
    
    @property
    def action(self) -> EntityAction:
        """Lifecycle action encoded in the event type."""
        return EntityAction(self.event_type.action)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary representation (entity excluded)."""
        return {
            "id": str(self.id.value),
            "event_type": self.event_type.value,
            "aggregate_id": self.aggregate_id,
            "aggregate_type": self.aggregate_type,
            "event_data": self.event_data,
            "event_metadata": self.event_metadata,
            "occurred_at": self.occurred_at.isoformat(),
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DomainEvent":
        """Create DomainEvent from dictionary representation."""
        return cls(
            id=EventId(data["id"]),
            event_type=EventType(data["event_type"]),
            aggregate_id=data["aggregate_id"],
            aggregate_type=data["aggregate_type"],
            event_data=data.get("event_data", {}),
            event_metadata=data.get("event_metadata", {}),
            occurred_at=datetime.fromisoformat(data["occurred_at"]),
        )
