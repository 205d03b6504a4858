"""Store-Commons - store directory library for multi-store commerce deployments.

Provides a cached store directory service (read-through, write-invalidate),
store repositories, cache adapters, lifecycle event publishers and a
FastAPI router.

Logging is not configured on import; applications call setup_logging().
"""

from .__version__ import __version__

from .config import (
    StoreSettings,
    get_settings,
    setup_logging,
)

from .core.exceptions import (
    StoreCommonsError,
    InvalidArgumentError,
    InvariantViolationError,
    StoreNotFoundError,
    get_http_status_code,
    create_error_response,
)

from .core.value_objects import StoreId

from .features.cache import MemoryAdapter, RedisAdapter, FullClearInvalidation, PatternInvalidation
from .features.events import DomainEvent, InMemoryEventPublisher, RedisEventPublisher
from .features.stores import (
    Store,
    StoreRepository,
    InMemoryStoreRepository,
    StoreDatabaseRepository,
    StoreListMemo,
    StoreService,
    build_store_service,
    store_router,
)

__all__ = [
    "__version__",
    "StoreSettings",
    "get_settings",
    "setup_logging",
    "StoreCommonsError",
    "InvalidArgumentError",
    "InvariantViolationError",
    "StoreNotFoundError",
    "get_http_status_code",
    "create_error_response",
    "StoreId",
    "MemoryAdapter",
    "RedisAdapter",
    "FullClearInvalidation",
    "PatternInvalidation",
    "DomainEvent",
    "InMemoryEventPublisher",
    "RedisEventPublisher",
    "Store",
    "StoreRepository",
    "InMemoryStoreRepository",
    "StoreDatabaseRepository",
    "StoreListMemo",
    "StoreService",
    "build_store_service",
    "store_router",
]
