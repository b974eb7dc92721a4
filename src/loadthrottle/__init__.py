"""Per-activity throttling driven by load-factor limits tables.

Import pattern:
    from loadthrottle import Throttle, ThrottleStore, InMemoryConfigStore
"""

from loadthrottle.contracts import (
    InvalidLimitsError,
    KeyNotConfiguredError,
    LimitsTable,
    NoLimitsConfiguredError,
    NoLimitsInTableError,
    StoreKey,
    ThrottleError,
    ThrottleFacet,
    ThrottleStats,
)
from loadthrottle.core import (
    InMemoryConfigStore,
    LoadThrottleSettings,
    SQLConfigStore,
    configure_logging,
    load_settings,
)
from loadthrottle.throttle import (
    Throttle,
    ThrottleStore,
    build_throttle,
    find_throttle_for_load,
    validate_limits,
)

__version__ = "0.1.0"

__all__ = [
    "InMemoryConfigStore",
    "InvalidLimitsError",
    "KeyNotConfiguredError",
    "LimitsTable",
    "LoadThrottleSettings",
    "NoLimitsConfiguredError",
    "NoLimitsInTableError",
    "SQLConfigStore",
    "StoreKey",
    "Throttle",
    "ThrottleError",
    "ThrottleFacet",
    "ThrottleStats",
    "ThrottleStore",
    "__version__",
    "build_throttle",
    "configure_logging",
    "find_throttle_for_load",
    "load_settings",
    "validate_limits",
]
