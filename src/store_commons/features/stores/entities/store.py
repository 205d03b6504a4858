"""Store domain entity.

This module defines the Store entity: one storefront of a multi-store
commerce deployment.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Set

from ....core.value_objects import StoreId


@dataclass
class Store:
    """Store domain entity.
    
    Matches the {schema}.stores table structure. Discount associations are
    stored as a set of discount identifiers.
    """
    
    id: StoreId
    name: str
    url: str = ""
    display_order: int = 0
    applied_discounts: Set[str] = field(default_factory=set)
    
    # Audit fields
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    
    def __post_init__(self):
        """Post-initialization validation."""
        if isinstance(self.id, str):
            self.id = StoreId(self.id)
        
        if not self.name or not self.name.strip():
            raise ValueError("Store name cannot be empty")
        
        if isinstance(self.display_order, bool) or not isinstance(self.display_order, int):
            raise ValueError("Store display_order must be an integer")
        
        self.applied_discounts = set(self.applied_discounts or ())
    
    def has_discount(self, discount_id: str) -> bool:
        """Check whether discount is applied to this store."""
        return discount_id in self.applied_discounts
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert store to a JSON-friendly dictionary."""
        return {
            "id": self.id.value,
            "name": self.name,
            "url": self.url,
            "display_order": self.display_order,
            "applied_discounts": sorted(self.applied_discounts),
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Store":
        """Create store from dictionary (to_dict output or a database row)."""
        kwargs: Dict[str, Any] = {
            "id": StoreId(str(data["id"])),
            "name": data["name"],
            "url": data.get("url") or "",
            "display_order": int(data.get("display_order") or 0),
            "applied_discounts": set(data.get("applied_discounts") or ()),
        }
        for audit_field in ("created_at", "updated_at"):
            value = data.get(audit_field)
            if isinstance(value, str):
                value = datetime.fromisoformat(value)
            if value is not None:
                kwargs[audit_field] = value
        return cls(**kwargs)
