"""Domain-specific exceptions for store-commons.

This module defines exceptions that relate to business rules of the
store directory and its configuration.
"""

from .base import StoreCommonsError


# Configuration Errors
class ConfigurationError(StoreCommonsError):
    """Raised when there's a configuration issue."""
    pass


# Validation Errors
class ValidationError(StoreCommonsError):
    """Base class for input validation errors."""
    pass


class InvalidArgumentError(ValidationError):
    """Raised when a required argument is missing or unusable."""
    
    def __init__(self, argument: str, message: str = None):
        super().__init__(
            message or f"Argument '{argument}' must not be None",
            details={"argument": argument},
        )
        self.argument = argument


# Business Logic Errors
class BusinessLogicError(StoreCommonsError):
    """Base class for business rule violations."""
    pass


class InvariantViolationError(BusinessLogicError):
    """Raised when an operation would break a domain invariant."""
    pass


# Resource Errors
class ResourceNotFoundError(StoreCommonsError):
    """Raised when a requested resource does not exist."""
    pass


class StoreNotFoundError(ResourceNotFoundError):
    """Raised when a store is not found."""
    
    def __init__(self, store_id: str):
        super().__init__(
            f"Store '{store_id}' not found",
            details={"store_id": store_id},
        )
        self.store_id = store_id


class DuplicateResourceError(StoreCommonsError):
    """Raised when a resource with the same identity already exists."""
    pass


# Database Errors
class DatabaseError(StoreCommonsError):
    """Base class for database-related errors."""
    pass


class QueryError(DatabaseError):
    """Raised when database query execution fails."""
    pass
