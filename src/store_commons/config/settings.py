"""
Configuration management for store-commons.

Environment-driven settings for the store directory service, its cache
backend, its repository and its event transport.
"""
from enum import Enum
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CacheBackend(str, Enum):
    """Supported cache backend types."""
    MEMORY = "memory"
    REDIS = "redis"


class EventBackend(str, Enum):
    """Supported event transports."""
    MEMORY = "memory"
    REDIS = "redis"


class InvalidationStrategyName(str, Enum):
    """Supported cache invalidation strategies."""
    FULL_CLEAR = "full_clear"
    PATTERN = "pattern"


class StoreSettings(BaseSettings):
    """Settings for the store directory service."""
    
    model_config = SettingsConfigDict(
        env_prefix="STORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    
    # Application
    app_name: str = Field(default="store-commons")
    environment: str = Field(default="development")
    
    # Database
    database_url: Optional[str] = Field(default=None, description="PostgreSQL DSN for the store table")
    database_schema: str = Field(default="public", description="Schema holding the stores table")
    database_pool_min_size: int = Field(default=1, ge=1)
    database_pool_max_size: int = Field(default=10, ge=1)
    
    # Cache
    cache_backend: CacheBackend = Field(default=CacheBackend.MEMORY)
    redis_url: str = Field(default="redis://localhost:6379/0")
    cache_ttl_seconds: int = Field(default=0, ge=0, description="0 disables expiry")
    cache_max_entries: int = Field(default=1000, ge=1)
    cache_key_prefix: str = Field(default="stores.")
    cache_namespace: str = Field(default="store-commons:", description="Redis key namespace; empty shares the whole database")
    invalidation_strategy: InvalidationStrategyName = Field(default=InvalidationStrategyName.FULL_CLEAR)
    
    # Events
    event_backend: EventBackend = Field(default=EventBackend.MEMORY)
    event_channel: str = Field(default="store-events")
    
    @field_validator("database_url", mode="before")
    @classmethod
    def strip_driver_suffix(cls, v: Optional[str]) -> Optional[str]:
        """asyncpg expects a plain postgresql:// DSN."""
        if isinstance(v, str) and "+asyncpg" in v:
            return v.replace("+asyncpg", "", 1)
        return v
    
    @field_validator("cache_key_prefix")
    @classmethod
    def validate_key_prefix(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Cache key prefix must not be empty")
        return v.strip()
    
    @property
    def cache_ttl(self) -> Optional[int]:
        """TTL to hand to cache adapters (None when expiry is disabled)."""
        return self.cache_ttl_seconds or None
    
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"


@lru_cache
def get_settings() -> StoreSettings:
    return StoreSettings()
