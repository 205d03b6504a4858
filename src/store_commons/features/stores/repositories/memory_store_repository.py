"""In-memory store repository."""

import asyncio
import copy
import logging
from typing import Dict, List, Optional

from ....core.exceptions import DuplicateResourceError, StoreNotFoundError
from ....core.value_objects import StoreId
from ..entities.store import Store

logger = logging.getLogger(__name__)


class InMemoryStoreRepository:
    """Store repository backed by an insertion-ordered dict.
    
    Stored entities are copies, so mutating a returned store does not change
    the repository until it is passed to update().
    """
    
    def __init__(self, stores: Optional[List[Store]] = None):
        self._stores: Dict[str, Store] = {}
        self._lock = asyncio.Lock()
        for store in stores or ():
            self._stores[store.id.value] = copy.deepcopy(store)
    
    async def insert(self, store: Store) -> Store:
        async with self._lock:
            if store.id.value in self._stores:
                raise DuplicateResourceError(
                    f"Store '{store.id.value}' already exists",
                    details={"store_id": store.id.value},
                )
            self._stores[store.id.value] = copy.deepcopy(store)
        logger.debug(f"Inserted store {store.id.value}")
        return store
    
    async def update(self, store: Store) -> Store:
        async with self._lock:
            if store.id.value not in self._stores:
                raise StoreNotFoundError(store.id.value)
            # Replacing the value keeps the key's insertion position
            self._stores[store.id.value] = copy.deepcopy(store)
        logger.debug(f"Updated store {store.id.value}")
        return store
    
    async def delete(self, store: Store) -> bool:
        async with self._lock:
            if store.id.value not in self._stores or len(self._stores) <= 1:
                return False
            del self._stores[store.id.value]
        logger.debug(f"Deleted store {store.id.value}")
        return True
    
    async def get_by_id(self, store_id: StoreId) -> Optional[Store]:
        store = self._stores.get(store_id.value)
        return copy.deepcopy(store) if store is not None else None
    
    async def find_all_sorted(self) -> List[Store]:
        # sorted() is stable, so equal display orders keep insertion order
        return sorted(
            (copy.deepcopy(store) for store in self._stores.values()),
            key=lambda store: store.display_order,
        )
    
    async def find_by_discount(self, discount_id: str) -> List[Store]:
        return [store for store in await self.find_all_sorted() if store.has_discount(discount_id)]
    
    async def exists(self, store_id: StoreId) -> bool:
        return store_id.value in self._stores
