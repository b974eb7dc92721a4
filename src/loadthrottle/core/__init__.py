"""Core infrastructure: configuration, config stores, logging."""

from loadthrottle.core.config import (
    ActivitySettings,
    LoadThrottleSettings,
    LoggingSettings,
    StoreSettings,
    load_settings,
)
from loadthrottle.core.logging import (
    configure_logging,
    get_logger,
)
from loadthrottle.core.store import (
    ConfigStore,
    InMemoryConfigStore,
    SQLConfigStore,
)

__all__ = [
    "ActivitySettings",
    "ConfigStore",
    "InMemoryConfigStore",
    "LoadThrottleSettings",
    "LoggingSettings",
    "SQLConfigStore",
    "StoreSettings",
    "configure_logging",
    "get_logger",
    "load_settings",
]
