"""Tests for store repositories and the store list memo."""

from datetime import datetime, timezone

import pytest

from store_commons.core.exceptions import DuplicateResourceError, QueryError, StoreNotFoundError
from store_commons.core.value_objects import StoreId
from store_commons.features.stores.entities.protocols import StoreRepository
from store_commons.features.stores.repositories.memory_store_repository import InMemoryStoreRepository
from store_commons.features.stores.repositories.store_list_memo import StoreListMemo
from store_commons.features.stores.repositories.store_repository import StoreDatabaseRepository


def store_row(store_id: str, display_order: int = 0, discounts=None):
    now = datetime(2024, 1, 1, tzinfo=timezone.utc)
    return {
        "id": store_id,
        "name": f"Store {store_id}",
        "url": "",
        "display_order": display_order,
        "applied_discounts": discounts or [],
        "created_at": now,
        "updated_at": now,
    }


class TestInMemoryStoreRepository:
    """In-memory repository behaviour."""
    
    def test_satisfies_protocol(self):
        assert isinstance(InMemoryStoreRepository(), StoreRepository)
    
    @pytest.mark.asyncio
    async def test_insert_duplicate_rejected(self, s0):
        repository = InMemoryStoreRepository([s0])
        
        with pytest.raises(DuplicateResourceError):
            await repository.insert(s0)
    
    @pytest.mark.asyncio
    async def test_update_missing_raises(self, store_factory):
        repository = InMemoryStoreRepository()
        
        with pytest.raises(StoreNotFoundError):
            await repository.update(store_factory("nope"))
    
    @pytest.mark.asyncio
    async def test_update_keeps_natural_position(self, store_factory):
        a, b = store_factory("a"), store_factory("b")
        repository = InMemoryStoreRepository([a, b])
        
        a.url = "https://changed.example.com"
        await repository.update(a)
        
        assert [s.id.value for s in await repository.find_all_sorted()] == ["a", "b"]
    
    @pytest.mark.asyncio
    async def test_returned_stores_are_copies(self, s0):
        repository = InMemoryStoreRepository([s0])
        
        loaded = await repository.get_by_id(StoreId("s0"))
        loaded.name = "Changed"
        
        assert (await repository.get_by_id(StoreId("s0"))).name == "Main"
    
    @pytest.mark.asyncio
    async def test_delete_refuses_last_store(self, s0):
        repository = InMemoryStoreRepository([s0])
        
        assert await repository.delete(s0) is False
        assert len(await repository.find_all_sorted()) == 1
    
    @pytest.mark.asyncio
    async def test_delete(self, s0, s1):
        repository = InMemoryStoreRepository([s0, s1])
        
        assert await repository.delete(s1) is True
        assert not await repository.exists(s1.id)
    
    @pytest.mark.asyncio
    async def test_find_by_discount(self, s0, s1):
        repository = InMemoryStoreRepository([s0, s1])
        
        assert [s.id for s in await repository.find_by_discount("d1")] == [s0.id]


class TestStoreDatabaseRepository:
    """SQL repository against a mocked DatabaseRepository."""
    
    @pytest.fixture
    def repository(self, mock_database_repository):
        return StoreDatabaseRepository(mock_database_repository, schema="shop")
    
    @pytest.mark.asyncio
    async def test_create_schema(self, repository, mock_database_repository):
        await repository.create_schema()
        
        command = mock_database_repository.execute_command.call_args.args[0]
        assert "CREATE TABLE IF NOT EXISTS shop.stores" in command
        assert "applied_discounts TEXT[] NOT NULL DEFAULT '{}'" in command
    
    @pytest.mark.asyncio
    async def test_find_all_sorted_maps_rows(self, repository, mock_database_repository):
        mock_database_repository.execute_query.return_value = [
            store_row("a", 1, ["d1"]),
            store_row("b", 2),
        ]
        
        stores = await repository.find_all_sorted()
        
        query = mock_database_repository.execute_query.call_args.args[0]
        assert "shop.stores" in query
        assert "ORDER BY display_order ASC" in query
        assert [s.id.value for s in stores] == ["a", "b"]
        assert stores[0].applied_discounts == {"d1"}
    
    @pytest.mark.asyncio
    async def test_find_by_discount_passes_parameter(self, repository, mock_database_repository):
        await repository.find_by_discount("d1")
        
        query, discount_id = mock_database_repository.execute_query.call_args.args
        assert "ANY(applied_discounts)" in query
        assert discount_id == "d1"
    
    @pytest.mark.asyncio
    async def test_get_by_id_absent(self, repository, mock_database_repository):
        mock_database_repository.execute_fetchrow.return_value = None
        
        assert await repository.get_by_id(StoreId("x")) is None
    
    @pytest.mark.asyncio
    async def test_insert_sends_sorted_discounts(self, repository, mock_database_repository, store_factory):
        store = store_factory("a", discounts={"z", "b"})
        mock_database_repository.execute_fetchrow.return_value = store_row("a", discounts=["b", "z"])
        
        result = await repository.insert(store)
        
        args = mock_database_repository.execute_fetchrow.call_args.args
        assert args[1] == "a"
        assert args[5] == ["b", "z"]
        assert result.applied_discounts == {"b", "z"}
    
    @pytest.mark.asyncio
    async def test_insert_unique_violation_is_duplicate(self, repository, mock_database_repository, store_factory):
        mock_database_repository.execute_fetchrow.side_effect = QueryError(
            "duplicate key", details={"sqlstate": "23505"}
        )
        
        with pytest.raises(DuplicateResourceError):
            await repository.insert(store_factory("a"))
    
    @pytest.mark.asyncio
    async def test_update_missing_raises(self, repository, mock_database_repository, store_factory):
        mock_database_repository.execute_fetchrow.return_value = None
        
        with pytest.raises(StoreNotFoundError):
            await repository.update(store_factory("a"))
    
    @pytest.mark.asyncio
    async def test_delete_uses_guarded_statement(self, repository, mock_database_repository, store_factory):
        mock_database_repository.execute_command.return_value = "DELETE 1"
        
        assert await repository.delete(store_factory("a")) is True
        
        query = mock_database_repository.execute_command.call_args.args[0]
        assert "FOR UPDATE" in query
        assert "count(*) FROM locked) > 1" in query
    
    @pytest.mark.asyncio
    async def test_delete_refused(self, repository, mock_database_repository, store_factory):
        mock_database_repository.execute_command.return_value = "DELETE 0"
        
        assert await repository.delete(store_factory("a")) is False


class TestStoreListMemo:
    """Generation-guarded memo."""
    
    def test_set_and_get(self, s0):
        memo = StoreListMemo()
        stores = [s0]
        
        assert memo.set(stores, memo.generation)
        assert memo.get() is stores
    
    def test_stale_generation_rejected(self, s0):
        memo = StoreListMemo()
        generation = memo.generation
        memo.invalidate()
        
        assert not memo.set([s0], generation)
        assert memo.get() is None
    
    def test_invalidate_clears(self, s0):
        memo = StoreListMemo()
        memo.set([s0], memo.generation)
        
        memo.invalidate()
        
        assert memo.snapshot() == (None, 1)
