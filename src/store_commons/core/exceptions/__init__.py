"""Exceptions module for store-commons.

This module provides the complete exception hierarchy for store-commons,
organized by domain concerns and infrastructure concerns.
"""

from .base import (
    StoreCommonsError,
    get_http_status_code,
    create_error_response,
)

from .domain import (
    ConfigurationError,
    ValidationError,
    InvalidArgumentError,
    BusinessLogicError,
    InvariantViolationError,
    ResourceNotFoundError,
    StoreNotFoundError,
    DuplicateResourceError,
    DatabaseError,
    QueryError,
)

from .infrastructure import (
    CacheError,
    CacheConnectionError,
    CacheSerializationError,
    EventPublishError,
)

__all__ = [
    # Base
    "StoreCommonsError",
    "get_http_status_code",
    "create_error_response",
    
    # Domain
    "ConfigurationError",
    "ValidationError",
    "InvalidArgumentError",
    "BusinessLogicError",
    "InvariantViolationError",
    "ResourceNotFoundError",
    "StoreNotFoundError",
    "DuplicateResourceError",
    "DatabaseError",
    "QueryError",
    
    # Infrastructure
    "CacheError",
    "CacheConnectionError",
    "CacheSerializationError",
    "EventPublishError",
]
