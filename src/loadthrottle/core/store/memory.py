# src/loadthrottle/core/store/memory.py
"""In-memory config store.

Per-process only: each worker process gets its own independent state. Use
the database backend when several processes must share throttle values.
"""

from __future__ import annotations

import threading

from loadthrottle.contracts import StoreKey


class InMemoryConfigStore:
    """Thread-safe dict-backed config store.

    Each key has its own lock, so writers on different activities never
    wait on each other. Values are stored as given; callers are expected to
    store immutable values (ints, tuples) so readers can share them.
    """

    def __init__(self) -> None:
        self._values: dict[StoreKey, object] = {}
        self._locks: dict[StoreKey, threading.Lock] = {}

    def _lock_for(self, key: StoreKey) -> threading.Lock:
        lock = self._locks.get(key)
        if lock is None:
            # setdefault is atomic, so racing callers end up with the same lock
            lock = self._locks.setdefault(key, threading.Lock())
        return lock

    def get(self, key: StoreKey) -> object | None:
        # Absent keys get no lock, so lookups of unknown activities leave no trace
        lock = self._locks.get(key)
        if lock is None:
            return self._values.get(key)
        with lock:
            return self._values.get(key)

    def set(self, key: StoreKey, value: object) -> None:
        with self._lock_for(key):
            self._values[key] = value

    def unset(self, key: StoreKey) -> None:
        lock = self._locks.get(key)
        if lock is None:
            self._values.pop(key, None)
            return
        with lock:
            self._values.pop(key, None)
            self._locks.pop(key, None)

    def keys(self) -> list[StoreKey]:
        return sorted(self._values.copy())

    def clear(self) -> None:
        """Drop every key (for testing)."""
        for key in self.keys():
            self.unset(key)
