"""Wiring of a StoreService from StoreSettings."""

import logging
from typing import Optional

from ...config.settings import (
    StoreSettings,
    CacheBackend,
    EventBackend,
    InvalidationStrategyName,
    get_settings,
)
from ...core.exceptions import ConfigurationError
from ..cache.adapters import MemoryAdapter, RedisAdapter
from ..cache.entities.protocols import Cache, CacheInvalidationStrategy
from ..cache.services import FullClearInvalidation, PatternInvalidation
from ..database.adapters import AsyncpgDatabaseRepository
from ..events.adapters import InMemoryEventPublisher, RedisEventPublisher
from ..events.entities.protocols import EventPublisher
from .entities.protocols import StoreRepository
from .repositories import StoreDatabaseRepository
from .services import StoreService

logger = logging.getLogger(__name__)


def build_cache(settings: StoreSettings) -> Cache:
    """Create the configured cache adapter."""
    if settings.cache_backend == CacheBackend.REDIS:
        return RedisAdapter(
            redis_url=settings.redis_url,
            namespace=settings.cache_namespace,
            default_ttl=settings.cache_ttl,
        )
    return MemoryAdapter(max_size=settings.cache_max_entries, default_ttl=settings.cache_ttl)


def build_invalidation(settings: StoreSettings, cache: Cache) -> CacheInvalidationStrategy:
    """Create the configured invalidation strategy."""
    if settings.invalidation_strategy == InvalidationStrategyName.PATTERN:
        return PatternInvalidation(cache)
    return FullClearInvalidation(cache)


def build_repository(settings: StoreSettings) -> StoreRepository:
    """Create a PostgreSQL-backed store repository."""
    if not settings.database_url:
        raise ConfigurationError(
            "STORE_DATABASE_URL is required when no repository is supplied",
            details={"setting": "database_url"},
        )
    
    database = AsyncpgDatabaseRepository(
        settings.database_url,
        app_name=settings.app_name,
        min_size=settings.database_pool_min_size,
        max_size=settings.database_pool_max_size,
    )
    return StoreDatabaseRepository(database, schema=settings.database_schema)


def build_publisher(settings: StoreSettings) -> EventPublisher:
    """Create the configured event publisher."""
    if settings.event_backend == EventBackend.REDIS:
        return RedisEventPublisher(redis_url=settings.redis_url, channel=settings.event_channel)
    return InMemoryEventPublisher()


def build_store_service(
    settings: Optional[StoreSettings] = None,
    repository: Optional[StoreRepository] = None,
    publisher: Optional[EventPublisher] = None,
) -> StoreService:
    """Create a StoreService wired from settings.
    
    Args:
        settings: Defaults to get_settings()
        repository: Overrides the PostgreSQL repository built from settings
        publisher: Overrides the publisher built from settings
    """
    settings = settings or get_settings()
    cache = build_cache(settings)
    
    service = StoreService(
        repository=repository or build_repository(settings),
        cache=cache,
        publisher=publisher or build_publisher(settings),
        invalidation=build_invalidation(settings, cache),
        key_prefix=settings.cache_key_prefix,
    )
    logger.info(
        f"Store service configured (cache={settings.cache_backend.value}, "
        f"invalidation={settings.invalidation_strategy.value}, events={settings.event_backend.value})"
    )
    return service
