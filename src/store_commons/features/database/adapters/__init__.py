"""Database adapters."""

from .asyncpg_repository import AsyncpgDatabaseRepository

__all__ = ["AsyncpgDatabaseRepository"]
