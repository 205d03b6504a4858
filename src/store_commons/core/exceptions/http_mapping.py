"""HTTP status code mapping for exceptions.

Maps the store-commons exception hierarchy to HTTP status codes. Lookup walks
the exception's MRO so subclasses inherit the status of their nearest mapped
ancestor.
"""

from typing import Dict, Type

from .base import StoreCommonsError
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


HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 400 Bad Request
    ValidationError: 400,
    InvalidArgumentError: 400,
    
    # 404 Not Found
    ResourceNotFoundError: 404,
    StoreNotFoundError: 404,
    
    # 409 Conflict
    BusinessLogicError: 409,
    InvariantViolationError: 409,
    DuplicateResourceError: 409,
    
    # 500 Internal Server Error
    ConfigurationError: 500,
    DatabaseError: 500,
    QueryError: 500,
    CacheError: 500,
    CacheSerializationError: 500,
    EventPublishError: 500,
    
    # 503 Service Unavailable
    CacheConnectionError: 503,
}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for an exception instance.
    
    Args:
        exception: The exception instance
        
    Returns:
        HTTP status code, 500 for anything unmapped
    """
    for exc_type in type(exception).__mro__:
        if exc_type in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[exc_type]
        if exc_type is StoreCommonsError:
            break
    return 500
