"""Store repositories."""

from .memory_store_repository import InMemoryStoreRepository
from .store_repository import StoreDatabaseRepository
from .store_list_memo import StoreListMemo

__all__ = [
    "InMemoryStoreRepository",
    "StoreDatabaseRepository",
    "StoreListMemo",
]
