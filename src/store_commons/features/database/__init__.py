"""Database feature for store-commons."""

from .entities import DatabaseRepository
from .adapters import AsyncpgDatabaseRepository

__all__ = ["DatabaseRepository", "AsyncpgDatabaseRepository"]
