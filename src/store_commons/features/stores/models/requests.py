"""Store request models."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from ....core.value_objects import StoreId
from ..entities.store import Store


class CreateStoreRequest(BaseModel):
    """Request model for creating a store."""
    
    id: Optional[str] = Field(None, min_length=1, max_length=100, description="Store ID (generated when omitted)")
    name: str = Field(..., min_length=1, max_length=400, description="Store display name")
    url: str = Field("", max_length=400, description="Store URL")
    display_order: int = Field(0, description="Listing sort key, ascending")
    applied_discounts: List[str] = Field(default_factory=list, description="Applied discount IDs")
    
    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name cannot be blank")
        return v.strip()
    
    def to_entity(self) -> Store:
        """Create a Store entity from the request."""
        return Store(
            id=StoreId(self.id) if self.id else StoreId.generate(),
            name=self.name,
            url=self.url,
            display_order=self.display_order,
            applied_discounts=set(self.applied_discounts),
        )


class UpdateStoreRequest(BaseModel):
    """Request model for replacing a store's fields."""
    
    name: str = Field(..., min_length=1, max_length=400, description="Store display name")
    url: str = Field("", max_length=400, description="Store URL")
    display_order: int = Field(0, description="Listing sort key, ascending")
    applied_discounts: List[str] = Field(default_factory=list, description="Applied discount IDs")
    
    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name cannot be blank")
        return v.strip()
    
    def apply_to(self, store: Store) -> Store:
        """Return a copy of store with the request's fields."""
        return Store(
            id=store.id,
            name=self.name,
            url=self.url,
            display_order=self.display_order,
            applied_discounts=set(self.applied_discounts),
            created_at=store.created_at,
        )
