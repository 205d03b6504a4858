"""Store routers."""

from .store_router import router as store_router
from .dependencies import get_store_service

__all__ = ["store_router", "get_store_service"]
