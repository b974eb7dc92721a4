# src/loadthrottle/core/store/base.py
"""Config store protocol.

The config store is the process-wide (or shared) key-value scope that the
throttle state lives in. It knows nothing about delays or limits tables:
it holds opaque values under typed StoreKeys.
"""

from typing import Protocol, runtime_checkable

from loadthrottle.contracts import StoreKey


@runtime_checkable
class ConfigStore(Protocol):
    """Protocol for config store backends.

    Implementations must make each call atomic with respect to other calls
    on the same key. No cross-key guarantees are required.
    """

    def get(self, key: StoreKey) -> object | None:
        """Return the value stored under key.

        Args:
            key: Store key to look up

        Returns:
            Stored value, or None if absent
        """
        ...

    def set(self, key: StoreKey, value: object) -> None:
        """Store value under key, replacing any previous value.

        Args:
            key: Store key to write
            value: JSON-compatible value
        """
        ...

    def unset(self, key: StoreKey) -> None:
        """Remove key. Does nothing if the key is absent."""
        ...

    def keys(self) -> list[StoreKey]:
        """Snapshot of keys currently present, sorted."""
        ...
