"""Throttle state, limits resolution, and the throttle façade."""

from loadthrottle.throttle.bootstrap import build_config_store, build_throttle
from loadthrottle.throttle.limits import (
    SENTINEL_LOAD_FACTOR,
    find_throttle_for_load,
    normalize_limits,
    validate_limits,
)
from loadthrottle.throttle.store import ThrottleStore
from loadthrottle.throttle.throttle import Sleeper, Throttle, sleep_ms

__all__ = [
    "SENTINEL_LOAD_FACTOR",
    "Sleeper",
    "Throttle",
    "ThrottleStore",
    "build_config_store",
    "build_throttle",
    "find_throttle_for_load",
    "normalize_limits",
    "sleep_ms",
    "validate_limits",
]
