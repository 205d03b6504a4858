"""Configuration for store-commons."""

from .settings import (
    StoreSettings,
    CacheBackend,
    EventBackend,
    InvalidationStrategyName,
    get_settings,
)
from .logging_config import LoggingConfig, LogLevel, LogVerbosity, setup_logging

__all__ = [
    "StoreSettings",
    "CacheBackend",
    "EventBackend",
    "InvalidationStrategyName",
    "get_settings",
    "LoggingConfig",
    "LogLevel",
    "LogVerbosity",
    "setup_logging",
]
