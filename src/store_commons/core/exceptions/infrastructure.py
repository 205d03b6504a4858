"""Infrastructure exceptions for store-commons.

Errors raised by cache backends and event transports.
"""

from .base import StoreCommonsError


# Cache Errors
class CacheError(StoreCommonsError):
    """Base class for cache-related errors."""
    pass


class CacheConnectionError(CacheError):
    """Raised when cache connection fails."""
    pass


class CacheSerializationError(CacheError):
    """Raised when cache value serialization/deserialization fails."""
    pass


# Event Errors
class EventPublishError(StoreCommonsError):
    """Raised when an event transport rejects a published event."""
    pass
