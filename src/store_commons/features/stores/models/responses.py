"""Store response models."""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field


class StoreResponse(BaseModel):
    """Store response model."""
    
    id: str = Field(..., description="Store ID")
    name: str = Field(..., description="Store display name")
    url: str = Field(..., description="Store URL")
    display_order: int = Field(..., description="Listing sort key")
    applied_discounts: List[str] = Field(default_factory=list, description="Applied discount IDs")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")
    
    @classmethod
    def from_entity(cls, store) -> "StoreResponse":
        """Create response from store entity."""
        return cls(
            id=store.id.value,
            name=store.name,
            url=store.url,
            display_order=store.display_order,
            applied_discounts=sorted(store.applied_discounts),
            created_at=store.created_at,
            updated_at=store.updated_at,
        )


class StoreListResponse(BaseModel):
    """List of stores in display order."""
    
    stores: List[StoreResponse] = Field(..., description="Stores")
    total: int = Field(..., description="Number of stores returned")
    
    @classmethod
    def from_entities(cls, stores) -> "StoreListResponse":
        items = [StoreResponse.from_entity(store) for store in stores]
        return cls(stores=items, total=len(items))
