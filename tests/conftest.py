"""Pytest configuration and fixtures for store-commons tests."""

import fnmatch

import pytest
from unittest.mock import AsyncMock

from store_commons.core.value_objects import StoreId
from store_commons.features.cache.adapters.memory_adapter import MemoryAdapter
from store_commons.features.events.adapters.memory_publisher import InMemoryEventPublisher
from store_commons.features.stores.entities.store import Store
from store_commons.features.stores.repositories.memory_store_repository import InMemoryStoreRepository
from store_commons.features.stores.services.store_service import StoreService


def make_store(store_id: str, name: str = None, display_order: int = 0, discounts=()) -> Store:
    return Store(
        id=StoreId(store_id),
        name=name or f"Store {store_id}",
        url=f"https://{store_id}.example.com",
        display_order=display_order,
        applied_discounts=set(discounts),
    )


@pytest.fixture
def store_factory():
    """Factory building Store entities."""
    return make_store


@pytest.fixture
def s0():
    """Default store with discount d1."""
    return make_store("s0", name="Main", display_order=1, discounts={"d1"})


@pytest.fixture
def s1():
    """Second store without discounts."""
    return make_store("s1", name="Outlet", display_order=2)


@pytest.fixture
def repository(s0, s1):
    """In-memory repository holding s0 and s1, wrapped in a spy."""
    backing = InMemoryStoreRepository([s0, s1])
    spy = AsyncMock(wraps=backing)
    return spy


@pytest.fixture
def single_store_repository(s0):
    """In-memory repository holding only s0, wrapped in a spy."""
    return AsyncMock(wraps=InMemoryStoreRepository([s0]))


@pytest.fixture
def cache():
    """Fresh in-process cache."""
    return MemoryAdapter(max_size=100)


@pytest.fixture
def publisher():
    """In-memory publisher recording published events."""
    return InMemoryEventPublisher()


@pytest.fixture
def service(repository, cache, publisher):
    """Store service over two stores."""
    return StoreService(repository=repository, cache=cache, publisher=publisher)


@pytest.fixture
def single_store_service(single_store_repository, cache, publisher):
    """Store service over exactly one store."""
    return StoreService(repository=single_store_repository, cache=cache, publisher=publisher)


@pytest.fixture
def mock_database_repository():
    """Mock DatabaseRepository for SQL repository tests."""
    mock_db = AsyncMock()
    mock_db.execute_query = AsyncMock(return_value=[])
    mock_db.execute_fetchrow = AsyncMock(return_value=None)
    mock_db.execute_fetchval = AsyncMock(return_value=None)
    mock_db.execute_command = AsyncMock(return_value="DELETE 1")
    return mock_db


class FakeRedis:
    """Dict-backed stand-in for the redis.asyncio client commands the cache uses."""
    
    def __init__(self):
        self.data = {}
    
    async def ping(self):
        return True
    
    async def get(self, key):
        return self.data.get(key)
    
    async def set(self, key, value, ex=None):
        self.data[key] = value
        return True
    
    async def delete(self, *keys):
        removed = 0
        for key in keys:
            key = key.decode() if isinstance(key, bytes) else key
            if self.data.pop(key, None) is not None:
                removed += 1
        return removed
    
    async def exists(self, key):
        return int(key in self.data)
    
    async def scan_iter(self, match="*"):
        for key in list(self.data):
            if fnmatch.fnmatchcase(key, match):
                yield key.encode()
    
    async def flushdb(self):
        self.data.clear()
    
    async def dbsize(self):
        return len(self.data)
    
    async def aclose(self):
        pass


@pytest.fixture
def fake_redis():
    """In-memory Redis client double."""
    return FakeRedis()
