"""Tests for settings, logging configuration and service wiring."""

import pytest

from store_commons.config.logging_config import LoggingConfig, get_log_level_from_verbosity
from store_commons.config.settings import (
    CacheBackend,
    EventBackend,
    InvalidationStrategyName,
    StoreSettings,
)
from store_commons.core.exceptions import ConfigurationError
from store_commons.features.cache.adapters.memory_adapter import MemoryAdapter
from store_commons.features.cache.adapters.redis_adapter import RedisAdapter
from store_commons.features.cache.services.invalidation_service import PatternInvalidation
from store_commons.features.events.adapters.memory_publisher import InMemoryEventPublisher
from store_commons.features.events.adapters.redis_publisher import RedisEventPublisher
from store_commons.features.stores.factory import (
    build_cache,
    build_invalidation,
    build_publisher,
    build_repository,
    build_store_service,
)
from store_commons.features.stores.repositories.memory_store_repository import InMemoryStoreRepository
from store_commons.features.stores.repositories.store_repository import StoreDatabaseRepository


class TestStoreSettings:
    
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("STORE_CACHE_BACKEND", raising=False)
        settings = StoreSettings(_env_file=None)
        
        assert settings.cache_backend == CacheBackend.MEMORY
        assert settings.cache_key_prefix == "stores."
        assert settings.invalidation_strategy == InvalidationStrategyName.FULL_CLEAR
        assert settings.event_channel == "store-events"
        assert settings.cache_ttl is None
    
    def test_environment_prefix(self, monkeypatch):
        monkeypatch.setenv("STORE_CACHE_BACKEND", "redis")
        monkeypatch.setenv("STORE_CACHE_TTL_SECONDS", "60")
        monkeypatch.setenv("STORE_DATABASE_URL", "postgresql+asyncpg://u:p@db/shop")
        
        settings = StoreSettings(_env_file=None)
        
        assert settings.cache_backend == CacheBackend.REDIS
        assert settings.cache_ttl == 60
        assert settings.database_url == "postgresql://u:p@db/shop"
    
    def test_blank_key_prefix_rejected(self):
        with pytest.raises(ValueError):
            StoreSettings(_env_file=None, cache_key_prefix="  ")


class TestLoggingConfig:
    
    def test_verbosity_mapping(self):
        assert get_log_level_from_verbosity("quiet") == "ERROR"
        assert get_log_level_from_verbosity("unknown") == "WARNING"
    
    def test_log_level_overrides_verbosity(self, monkeypatch):
        monkeypatch.setenv("LOG_VERBOSITY", "QUIET")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        
        config = LoggingConfig.build_config()
        
        assert config["root"]["level"] == "DEBUG"
        assert config["loggers"]["store_commons.features.cache.adapters"]["level"] == "DEBUG"
    
    def test_sql_logging_quieted_by_default(self, monkeypatch):
        monkeypatch.delenv("ENABLE_SQL_LOGGING", raising=False)
        
        assert LoggingConfig.build_config()["loggers"]["asyncpg"]["level"] == "WARNING"


class TestFactory:
    
    def test_memory_wiring(self):
        settings = StoreSettings(_env_file=None, cache_max_entries=7)
        
        cache = build_cache(settings)
        
        assert isinstance(cache, MemoryAdapter)
        assert cache.max_size == 7
        assert isinstance(build_publisher(settings), InMemoryEventPublisher)
    
    def test_redis_wiring(self):
        settings = StoreSettings(
            _env_file=None,
            cache_backend="redis",
            event_backend="redis",
            invalidation_strategy="pattern",
        )
        cache = build_cache(settings)
        
        assert isinstance(cache, RedisAdapter)
        assert cache.namespace == "store-commons:"
        assert isinstance(build_invalidation(settings, cache), PatternInvalidation)
        assert isinstance(build_publisher(settings), RedisEventPublisher)
        assert settings.event_backend == EventBackend.REDIS
    
    @pytest.mark.asyncio
    async def test_redis_clear_keeps_foreign_keys(self, fake_redis):
        cache = build_cache(StoreSettings(_env_file=None, cache_backend="redis"))
        cache.redis_client = fake_redis
        fake_redis.data["other-app:session"] = b"x"
        await cache.set("stores.all", [])
        
        await build_invalidation(StoreSettings(_env_file=None), cache).invalidate("stores.")
        
        assert list(fake_redis.data) == ["other-app:session"]
    
    def test_repository_requires_database_url(self):
        with pytest.raises(ConfigurationError):
            build_repository(StoreSettings(_env_file=None, database_url=None))
    
    def test_database_repository_from_url(self):
        settings = StoreSettings(_env_file=None, database_url="postgresql://u:p@db/shop", database_schema="shop")
        
        assert isinstance(build_repository(settings), StoreDatabaseRepository)
    
    @pytest.mark.asyncio
    async def test_build_store_service(self, s0, s1):
        settings = StoreSettings(_env_file=None, cache_key_prefix="shop.")
        service = build_store_service(settings, repository=InMemoryStoreRepository([s0, s1]))
        
        assert service.all_stores_key == "shop.all"
        assert len(await service.get_all_stores()) == 2
