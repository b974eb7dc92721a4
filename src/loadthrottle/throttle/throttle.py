# src/loadthrottle/throttle/throttle.py
"""Throttling for activities that can overload other resources.

An activity's delay is either set directly, or derived from its limits
table by periodically reporting the activity's current load factor:

    throttle = Throttle(ThrottleStore(InMemoryConfigStore()))
    throttle.store.set_limits("solr", [(-1, 0), (100, 10), (1000, 250)])

    # Monitoring loop
    throttle.set_throttle_by_load("solr", queue_depth())

    # Worker, before each unit of work
    throttle.throttle("solr")

"Load factor" is whatever number the caller uses for pressure: a queue
depth, a mailbox size, requests per second to an external service. This
module never measures it and never tunes the table.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from threading import Lock

from loadthrottle.contracts import (
    KeyNotConfiguredError,
    NoLimitsConfiguredError,
    ThrottleStats,
)
from loadthrottle.core.logging import get_logger
from loadthrottle.throttle.limits import find_throttle_for_load
from loadthrottle.throttle.store import ThrottleStore

logger = get_logger(__name__)

# Receives the delay in milliseconds
Sleeper = Callable[[int], None]


def sleep_ms(delay_ms: int) -> None:
    """Block the calling thread for delay_ms milliseconds."""
    time.sleep(delay_ms / 1000)


class Throttle:
    """Resolve delays from load and apply them to callers.

    Thread-safe: state lives in the ThrottleStore, and wait statistics are
    guarded by a lock that is never held while sleeping.
    """

    def __init__(self, store: ThrottleStore, *, sleep: Sleeper = sleep_ms) -> None:
        """Initialize throttle.

        Args:
            store: Throttle state (shared by reference)
            sleep: Suspends the caller for the given milliseconds. Called even
                for a 0 delay.
        """
        self._store = store
        self._sleep = sleep
        self._stats: dict[str, ThrottleStats] = {}
        self._stats_lock = Lock()

    @property
    def store(self) -> ThrottleStore:
        return self._store

    def get_throttle_for_load(self, key: str, load_factor: int) -> int | None:
        """Delay the limits table gives for load_factor, without storing it.

        Returns:
            Resolved delay, or None if the activity has no limits table
        """
        limits = self._store.get_limits_table(key)
        if limits is None:
            return None
        return find_throttle_for_load(limits, load_factor)

    def set_throttle_by_load(self, key: str, load_factor: int) -> int:
        """Set the activity's delay from its limits table.

        The delay is the one associated with the largest load factor
        breakpoint <= load_factor.

        Args:
            key: Activity key
            load_factor: Current load, in the caller's units

        Returns:
            The delay now stored for the activity

        Raises:
            TypeError: If load_factor is not an integer
            NoLimitsConfiguredError: If the activity has no limits table
        """
        if isinstance(load_factor, bool) or not isinstance(load_factor, int):
            raise TypeError(f"load_factor must be an int, got {type(load_factor).__name__}")

        delay_ms = self.get_throttle_for_load(key, load_factor)
        if delay_ms is None:
            raise NoLimitsConfiguredError(key)

        self._store.set_throttle(key, delay_ms)
        logger.debug(
            "Throttle set by load",
            activity=key,
            load_factor=load_factor,
            delay_ms=delay_ms,
        )
        return delay_ms

    def throttle(self, key: str) -> int:
        """Sleep for the activity's current delay.

        Returns:
            The delay slept, in milliseconds

        Raises:
            KeyNotConfiguredError: If the activity has no current delay
        """
        delay_ms = self._store.get_throttle(key)
        if delay_ms is None:
            raise KeyNotConfiguredError(key)

        self._sleep(delay_ms)
        self._record_wait(key, delay_ms)
        return delay_ms

    def _record_wait(self, key: str, delay_ms: int) -> None:
        with self._stats_lock:
            stats = self._stats.setdefault(key, ThrottleStats())
            stats.throttle_calls += 1
            stats.total_throttle_time_ms += delay_ms
            if delay_ms > stats.peak_delay_ms:
                stats.peak_delay_ms = delay_ms

    def get_stats(self, key: str) -> ThrottleStats:
        """Snapshot of waits recorded for an activity in this process."""
        with self._stats_lock:
            recorded = self._stats.get(key, ThrottleStats())
            snapshot = ThrottleStats(
                throttle_calls=recorded.throttle_calls,
                total_throttle_time_ms=recorded.total_throttle_time_ms,
                peak_delay_ms=recorded.peak_delay_ms,
            )
        snapshot.current_delay_ms = self._store.get_throttle(key)
        return snapshot

    def reset_stats(self) -> None:
        """Forget all recorded waits (for testing)."""
        with self._stats_lock:
            self._stats.clear()
