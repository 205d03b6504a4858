"""Tests for the Redis cache adapter with a mocked client."""

import pytest
from unittest.mock import AsyncMock, MagicMock
from redis.exceptions import RedisError

from store_commons.core.exceptions import CacheError, CacheSerializationError
from store_commons.core.value_objects import StoreId
from store_commons.features.cache.adapters.redis_adapter import RedisAdapter
from store_commons.features.cache.adapters.serializers import PickleSerializer
from store_commons.features.stores.entities.store import Store


def scan_results(*keys):
    async def scan_iter(match=None):
        for key in keys:
            yield key
    return scan_iter


@pytest.fixture
def redis_client():
    client = AsyncMock()
    client.get.return_value = None
    return client


class TestRedisAdapter:
    """Redis adapter behaviour."""
    
    @pytest.mark.asyncio
    async def test_set_uses_namespace_and_ttl(self, redis_client):
        adapter = RedisAdapter(client=redis_client, namespace="app:", default_ttl=30)
        
        await adapter.set("stores.all", [1, 2])
        
        key, data = redis_client.set.call_args.args
        assert key == "app:stores.all"
        assert redis_client.set.call_args.kwargs["ex"] == 30
        assert PickleSerializer().deserialize(data) == [1, 2]
    
    @pytest.mark.asyncio
    async def test_get_or_set_stores_loaded_store(self, redis_client):
        adapter = RedisAdapter(client=redis_client)
        store = Store(id=StoreId("s0"), name="Main")
        loader = AsyncMock(return_value=store)
        
        result = await adapter.get_or_set("stores.id-s0", loader)
        
        assert result is store
        loader.assert_awaited_once()
        redis_client.set.assert_awaited_once()
    
    @pytest.mark.asyncio
    async def test_get_or_set_hit_skips_loader(self, redis_client):
        redis_client.get.return_value = PickleSerializer().serialize(["cached"])
        adapter = RedisAdapter(client=redis_client)
        loader = AsyncMock()
        
        assert await adapter.get_or_set("k", loader) == ["cached"]
        loader.assert_not_awaited()
    
    @pytest.mark.asyncio
    async def test_redis_failure_wrapped(self, redis_client):
        redis_client.get.side_effect = RedisError("down")
        adapter = RedisAdapter(client=redis_client)
        
        with pytest.raises(CacheError):
            await adapter.get("k")
    
    @pytest.mark.asyncio
    async def test_delete_pattern_scans_namespace(self):
        client = MagicMock()
        client.scan_iter = scan_results(b"app:stores.all", b"app:stores.id-1")
        client.delete = AsyncMock(return_value=2)
        adapter = RedisAdapter(client=client, namespace="app:")
        
        assert await adapter.delete_pattern("stores.*") == 2
        client.delete.assert_awaited_once_with(b"app:stores.all", b"app:stores.id-1")
    
    @pytest.mark.asyncio
    async def test_keys_strip_namespace(self):
        client = MagicMock()
        client.scan_iter = scan_results(b"app:stores.all")
        adapter = RedisAdapter(client=client, namespace="app:")
        
        assert await adapter.keys("stores.*") == ["stores.all"]
    
    @pytest.mark.asyncio
    async def test_clear_without_namespace_flushes(self, redis_client):
        adapter = RedisAdapter(client=redis_client)
        
        await adapter.clear()
        
        redis_client.flushdb.assert_awaited_once()
    
    @pytest.mark.asyncio
    async def test_health_check_failure(self, redis_client):
        redis_client.ping.side_effect = RedisError("down")
        adapter = RedisAdapter(client=redis_client)
        
        assert await adapter.health_check() is False
    
    @pytest.mark.asyncio
    async def test_load_overlapping_clear_not_written_back(self, fake_redis):
        adapter = RedisAdapter(client=fake_redis, namespace="app:")
        
        async def loader():
            await adapter.clear()
            return ["stale"]
        
        assert await adapter.get_or_set("stores.all", loader) == ["stale"]
        assert not await adapter.exists("stores.all")
    
    @pytest.mark.asyncio
    async def test_load_without_invalidation_written(self, fake_redis):
        adapter = RedisAdapter(client=fake_redis, namespace="app:")
        
        await adapter.get_or_set("stores.all", lambda: ["fresh"])
        
        assert list(fake_redis.data) == ["app:stores.all"]
        assert len(adapter._key_locks) == 0


class TestSerializers:
    
    def test_pickle_rejects_garbage(self):
        with pytest.raises(CacheSerializationError):
            PickleSerializer().deserialize(b"not a pickle")
    
    def test_pickle_round_trips_store(self):
        store = Store(id=StoreId("s0"), name="Main", applied_discounts={"d1"})
        serializer = PickleSerializer()
        
        assert serializer.deserialize(serializer.serialize(store)) == store
