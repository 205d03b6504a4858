"""Stores feature for store-commons.

The store directory: Store entity, repositories, the cached StoreService
and its FastAPI router.
"""

from .entities import Store, StoreRepository
from .repositories import InMemoryStoreRepository, StoreDatabaseRepository, StoreListMemo
from .services import StoreService
from .factory import build_store_service
from .routers import store_router, get_store_service

__all__ = [
    "Store",
    "StoreRepository",
    "InMemoryStoreRepository",
    "StoreDatabaseRepository",
    "StoreListMemo",
    "StoreService",
    "build_store_service",
    "store_router",
    "get_store_service",
]
