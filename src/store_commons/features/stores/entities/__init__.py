"""Store entities and protocols."""

from .store import Store
from .protocols import StoreRepository

__all__ = ["Store", "StoreRepository"]
