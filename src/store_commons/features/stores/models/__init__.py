"""Store API models."""

from .requests import CreateStoreRequest, UpdateStoreRequest
from .responses import StoreResponse, StoreListResponse

__all__ = [
    "CreateStoreRequest",
    "UpdateStoreRequest",
    "StoreResponse",
    "StoreListResponse",
]
