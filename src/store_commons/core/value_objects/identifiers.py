"""Value objects for identifiers in store-commons.

This module defines immutable value objects for the identifiers
used throughout the library.
"""

import re
from dataclasses import dataclass
from uuid import UUID, uuid4


@dataclass(frozen=True)
class StoreId:
    """Store identifier value object with basic validation.
    
    Store identities are opaque strings assigned by the caller or the
    repository; no format beyond non-emptiness is enforced.
    """
    value: str
    
    def __post_init__(self):
        if not self.value or not isinstance(self.value, str):
            raise ValueError("Store ID must be a non-empty string")
    
    @classmethod
    def generate(cls) -> "StoreId":
        """Create a new random store identifier."""
        return cls(str(uuid4()))
    
    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class EventId:
    """Event identifier value object."""
    value: UUID
    
    def __post_init__(self):
        if not isinstance(self.value, UUID):
            try:
                object.__setattr__(self, 'value', UUID(str(self.value)))
            except (ValueError, TypeError):
                raise ValueError(f"EventId must be a valid UUID, got: {self.value}")
    
    @classmethod
    def generate(cls) -> "EventId":
        """Create a new random event identifier."""
        return cls(uuid4())


@dataclass(frozen=True)
class EventType:
    """Event type value object (e.g., 'store.inserted')."""
    value: str
    
    def __post_init__(self):
        if not isinstance(self.value, str):
            raise ValueError("EventType must be a string")
        
        if not self.value or not self.value.strip():
            raise ValueError("EventType cannot be empty")
        
        # Event type format: category.action (e.g., store.inserted)
        if self.value.count('.') != 1:
            raise ValueError("EventType must be in format 'category.action'")
        
        clean_value = self.value.strip().lower()
        if not re.match(r'^[a-z_][a-z0-9_]*\.[a-z_][a-z0-9_]*$', clean_value):
            raise ValueError("EventType must contain only lowercase letters, numbers, and underscores")
        
        object.__setattr__(self, 'value', clean_value)
    
    @property
    def category(self) -> str:
        """Get event category (part before the dot)."""
        return self.value.split('.')[0]
    
    @property
    def action(self) -> str:
        """Get event action (part after the dot)."""
        return self.value.split('.')[1]
