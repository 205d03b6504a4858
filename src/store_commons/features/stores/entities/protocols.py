"""Protocol interfaces for the stores feature."""

from abc import abstractmethod
from typing import List, Optional, Protocol, runtime_checkable

from ....core.value_objects import StoreId
from .store import Store


@runtime_checkable
class StoreRepository(Protocol):
    """Persistence contract for stores."""
    
    @abstractmethod
    async def insert(self, store: Store) -> Store:
        """Persist a new store."""
        ...
    
    @abstractmethod
    async def update(self, store: Store) -> Store:
        """Replace an existing store with the given state."""
        ...
    
    @abstractmethod
    async def delete(self, store: Store) -> bool:
        """Remove a store while at least one other store remains.
        
        Returns:
            True if the store was removed, False if it did not exist or was
            the last remaining store
        """
        ...
    
    @abstractmethod
    async def get_by_id(self, store_id: StoreId) -> Optional[Store]:
        """Get store by ID, or None when absent."""
        ...
    
    @abstractmethod
    async def find_all_sorted(self) -> List[Store]:
        """List all stores ordered by display_order ascending (stable)."""
        ...
    
    @abstractmethod
    async def find_by_discount(self, discount_id: str) -> List[Store]:
        """List stores whose applied discounts contain discount_id."""
        ...
    
    @abstractmethod
    async def exists(self, store_id: StoreId) -> bool:
        """Check if store exists."""
        ...
