# src/loadthrottle/contracts/enums.py
"""Enums shared across the store and throttle layers."""

from enum import Enum


class ThrottleFacet(str, Enum):
    """Which piece of per-activity state a store entry holds.

    Uses (str, Enum) because the value IS persisted as the key prefix and
    in the facet column of string-keyed backends.
    """

    CURRENT_DELAY = "throttle"
    LIMITS_TABLE = "throttle_limits"


class StoreBackend(str, Enum):
    """Config store backends selectable from settings."""

    MEMORY = "memory"
    DATABASE = "database"
