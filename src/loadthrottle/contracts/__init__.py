"""Shared contracts for cross-boundary data types.

All dataclasses, enums and type aliases that cross the store/throttle
boundary are defined here.

Import pattern:
    from loadthrottle.contracts import StoreKey, LimitsTable, InvalidLimitsError
"""

from loadthrottle.contracts.enums import StoreBackend, ThrottleFacet
from loadthrottle.contracts.errors import (
    InvalidLimitsError,
    KeyNotConfiguredError,
    NoLimitsConfiguredError,
    NoLimitsInTableError,
    ThrottleError,
)
from loadthrottle.contracts.keys import StoreKey
from loadthrottle.contracts.results import (
    LimitEntry,
    LimitsTable,
    LimitsValidation,
    ThrottleStats,
)

__all__ = [
    # enums
    "StoreBackend",
    "ThrottleFacet",
    # errors
    "InvalidLimitsError",
    "KeyNotConfiguredError",
    "NoLimitsConfiguredError",
    "NoLimitsInTableError",
    "ThrottleError",
    # keys
    "StoreKey",
    # results
    "LimitEntry",
    "LimitsTable",
    "LimitsValidation",
    "ThrottleStats",
]
