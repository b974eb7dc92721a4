# src/loadthrottle/api.py
"""Process-wide throttle functions.

Thin wrappers that forward to one shared Throttle instance. The instance is
created on first use with an in-memory store, or installed explicitly with
configure() at process start:

    from loadthrottle import api

    api.configure(build_throttle(load_settings(Path("throttle.yaml"))))

    api.set_limits("solr", [(-1, 0), (100, 10)])
    api.set_throttle_by_load("solr", 150)
    api.throttle("solr")

Code that can take the Throttle as a parameter should do that instead.
"""

from __future__ import annotations

from threading import Lock

from loadthrottle.contracts import LimitsTable, ThrottleStats
from loadthrottle.core.store import InMemoryConfigStore
from loadthrottle.throttle.limits import LimitsInput
from loadthrottle.throttle.store import ThrottleStore
from loadthrottle.throttle.throttle import Throttle

_default: Throttle | None = None
_default_lock = Lock()


def configure(throttle: Throttle | None) -> None:
    """Install the process-wide Throttle (None resets to lazy default)."""
    global _default
    with _default_lock:
        _default = throttle


def get_default() -> Throttle:
    """Return the process-wide Throttle, creating it on first use."""
    global _default
    with _default_lock:
        if _default is None:
            _default = Throttle(ThrottleStore(InMemoryConfigStore()))
        return _default


def set_throttle(key: str, delay_ms: int) -> None:
    get_default().store.set_throttle(key, delay_ms)


def clear_throttle(key: str) -> None:
    get_default().store.clear_throttle(key)


def set_limits(key: str, limits: LimitsInput) -> None:
    get_default().store.set_limits(key, limits)


def clear_limits(key: str) -> None:
    get_default().store.clear_limits(key)


def set_throttle_by_load(key: str, load_factor: int) -> int:
    return get_default().set_throttle_by_load(key, load_factor)


def throttle(key: str) -> int:
    return get_default().throttle(key)


def get_throttle(key: str) -> int | None:
    return get_default().store.get_throttle(key)


def get_limits_table(key: str) -> LimitsTable | None:
    return get_default().store.get_limits_table(key)


def get_throttle_for_load(key: str, load_factor: int) -> int | None:
    return get_default().get_throttle_for_load(key, load_factor)


def get_stats(key: str) -> ThrottleStats:
    return get_default().get_stats(key)
