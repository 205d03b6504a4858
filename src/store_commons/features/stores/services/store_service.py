"""Store directory service.

Read-through, write-invalidate cache in front of a StoreRepository. Reads
consult the in-process memo, then the keyed cache, then the repository.
Writes go to the repository, invalidate the cache and the memo, and then
publish a lifecycle event.
"""

import asyncio
import logging
from typing import List, Optional, Union

from ....core.exceptions import (
    InvalidArgumentError,
    InvariantViolationError,
    StoreNotFoundError,
)
from ....core.value_objects import StoreId
from ...cache.entities.protocols import Cache, CacheInvalidationStrategy
from ...cache.services.invalidation_service import FullClearInvalidation
from ...events.entities.protocols import EventPublisher
from ...events.services.event_publisher_service import EventPublisherService
from ..entities.protocols import StoreRepository
from ..entities.store import Store
from ..repositories.store_list_memo import StoreListMemo
from ..utils.error_handling import store_operation

logger = logging.getLogger(__name__)

DEFAULT_KEY_PREFIX = "stores."
LAST_STORE_MESSAGE = "You cannot delete the only configured store"


class StoreService:
    """Service for store directory operations."""
    
    AGGREGATE_TYPE = "store"
    
    def __init__(
        self,
        repository: StoreRepository,
        cache: Cache,
        publisher: EventPublisher,
        invalidation: Optional[CacheInvalidationStrategy] = None,
        memo: Optional[StoreListMemo] = None,
        key_prefix: str = DEFAULT_KEY_PREFIX,
    ):
        """Initialize service.
        
        Args:
            repository: Store persistence
            cache: Keyed cache for the all-stores and per-id lookups
            publisher: Receives store.inserted/updated/deleted events
            invalidation: Cache invalidation policy (full clear by default)
            memo: Holder of the full store list
            key_prefix: Prefix of every cache key this service writes
        """
        self._repository = repository
        self._cache = cache
        self._events = EventPublisherService(publisher)
        self._invalidation = invalidation or FullClearInvalidation(cache)
        self._memo = memo or StoreListMemo()
        self._key_prefix = key_prefix
        self._delete_lock = asyncio.Lock()
    
    @property
    def all_stores_key(self) -> str:
        return f"{self._key_prefix}all"
    
    def store_key(self, store_id: Union[StoreId, str]) -> str:
        """Cache key of a single store."""
        return f"{self._key_prefix}id-{store_id}"
    
    async def get_all_stores(self) -> List[Store]:
        """Get all stores ordered by display order.
        
        Repeated calls without an intervening write return the same list
        instance without touching the cache or the repository.
        """
        stores, generation = self._memo.snapshot()
        if stores is not None:
            return stores
        
        stores = await self._cache.get_or_set(self.all_stores_key, self._repository.find_all_sorted)
        if not self._memo.set(stores, generation):
            logger.debug("Store list invalidated while loading; not memoized")
        return stores
    
    async def get_store_by_id(self, store_id: Union[StoreId, str]) -> Optional[Store]:
        """Get store by ID, or None if it does not exist."""
        if not isinstance(store_id, StoreId):
            store_id = StoreId(store_id)
        
        return await self._cache.get_or_set(
            self.store_key(store_id),
            lambda: self._repository.get_by_id(store_id),
        )
    
    @store_operation("insert store")
    async def insert_store(self, store: Store) -> Store:
        """Insert store, invalidate caches and publish store.inserted."""
        if store is None:
            raise InvalidArgumentError("store")
        
        await self._repository.insert(store)
        await self.invalidate()
        await self._events.entity_inserted(store, self.AGGREGATE_TYPE)
        
        logger.info(f"Inserted store {store.id}")
        return store
    
    @store_operation("update store")
    async def update_store(self, store: Store) -> Store:
        """Replace store, invalidate caches and publish store.updated."""
        if store is None:
            raise InvalidArgumentError("store")
        
        await self._repository.update(store)
        await self.invalidate()
        await self._events.entity_updated(store, self.AGGREGATE_TYPE)
        
        logger.info(f"Updated store {store.id}")
        return store
    
    @store_operation("delete store")
    async def delete_store(self, store: Store) -> None:
        """Delete store, invalidate caches and publish store.deleted.
        
        Raises:
            InvalidArgumentError: store is None
            InvariantViolationError: store is the only configured store
            StoreNotFoundError: store does not exist
        """
        if store is None:
            raise InvalidArgumentError("store")
        
        async with self._delete_lock:
            stores = await self.get_all_stores()
            if len(stores) <= 1:
                raise InvariantViolationError(
                    LAST_STORE_MESSAGE,
                    details={"store_id": store.id.value},
                )
            
            if not await self._repository.delete(store):
                # Another process may have deleted stores since the list was read
                await self.invalidate()
                if await self._repository.exists(store.id):
                    raise InvariantViolationError(
                        LAST_STORE_MESSAGE,
                        details={"store_id": store.id.value},
                    )
                raise StoreNotFoundError(store.id.value)
            
            await self.invalidate()
        
        await self._events.entity_deleted(store, self.AGGREGATE_TYPE)
        logger.info(f"Deleted store {store.id}")
    
    async def get_all_stores_by_discount(self, discount_id: str) -> List[Store]:
        """Get stores with discount applied. Not cached."""
        return await self._repository.find_by_discount(discount_id)
    
    async def invalidate(self) -> None:
        """Invalidate cached store lookups and the memoized list."""
        try:
            await self._invalidation.invalidate(self._key_prefix)
        finally:
            self._memo.invalidate()
