"""Root error type of store-commons and helpers for turning errors into responses."""

from typing import Any, Dict, Optional


class StoreCommonsError(Exception):
    """Root of every error raised by store-commons.
    
    error_code defaults to the class name. details holds machine-readable
    context such as the store id, the rejected argument or a SQLSTATE.
    """
    
    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or type(self).__name__
        self.details = details or {}
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


def get_http_status_code(exception: Exception) -> int:
    """HTTP status for exception; 500 for anything unmapped."""
    # http_mapping imports the concrete error classes, which import this module
    from .http_mapping import get_http_status_code as lookup_status
    return lookup_status(exception)


def create_error_response(exception: Exception) -> Dict[str, Any]:
    """JSON body for an error response.
    
    Errors from outside the library are reported without their message.
    """
    if isinstance(exception, StoreCommonsError):
        return exception.to_dict()
    return {"error": "InternalError", "message": "Internal server error", "details": {}}
