# src/loadthrottle/throttle/store.py
"""Throttle state over a config store.

Each activity owns two independent facets in the config store: its current
delay and its limits table. This module is the only place that knows how
those facets are keyed and what shape their values have.
"""

from __future__ import annotations

from collections.abc import Mapping

from loadthrottle.contracts import LimitsTable, StoreKey
from loadthrottle.core.logging import get_logger
from loadthrottle.core.store import ConfigStore
from loadthrottle.throttle.limits import LimitsInput, normalize_limits, validate_limits

logger = get_logger(__name__)


class ThrottleStore:
    """Per-activity delays and limits tables.

    Example:
        store = ThrottleStore(InMemoryConfigStore())

        store.set_limits("solr", [(-1, 0), (100, 10), (1000, 250)])
        store.set_throttle("reindex", 50)

        store.get_throttle("reindex")      # 50
        store.get_limits_table("solr")     # ((-1, 0), (100, 10), (1000, 250))
    """

    def __init__(self, config_store: ConfigStore) -> None:
        """Initialize over a config store.

        Args:
            config_store: Backend holding the state (shared by reference)
        """
        self._config_store = config_store

    @property
    def config_store(self) -> ConfigStore:
        return self._config_store

    def set_throttle(self, key: str, delay_ms: int) -> None:
        """Set the current delay for an activity.

        Args:
            key: Activity key
            delay_ms: Delay in milliseconds

        Raises:
            ValueError: If delay_ms is not a non-negative integer
        """
        if isinstance(delay_ms, bool) or not isinstance(delay_ms, int) or delay_ms < 0:
            raise ValueError(f"Throttle delay must be a non-negative integer, got {delay_ms!r}")
        self._config_store.set(StoreKey.current_delay(key), delay_ms)

    def clear_throttle(self, key: str) -> None:
        """Remove the current delay for an activity (no-op if absent)."""
        self._config_store.unset(StoreKey.current_delay(key))

    def set_limits(self, key: str, limits: LimitsInput) -> None:
        """Install a limits table for an activity.

        The table is validated in full before anything is written. It is then
        stored sorted by load factor in a single write, replacing any
        previous table.

        Args:
            key: Activity key
            limits: (load_factor, delay_ms) pairs or a load_factor -> delay_ms
                mapping. Must contain exactly one -1 entry.

        Raises:
            InvalidLimitsError: If any rule fails. State is unchanged.
        """
        # Materialize once so one-shot iterables are validated and stored alike
        entries = list(limits.items()) if isinstance(limits, Mapping) else list(limits)

        result = validate_limits(entries)
        if not result.ok:
            logger.error(
                "Invalid throttle limits",
                activity=key,
                violations=list(result.violations),
            )
        result.raise_for_violations(key)

        table = normalize_limits(entries)
        self._config_store.set(StoreKey.limits_table(key), table)
        logger.debug("Throttle limits installed", activity=key, limits=table)

    def clear_limits(self, key: str) -> None:
        """Remove the limits table for an activity (no-op if absent)."""
        self._config_store.unset(StoreKey.limits_table(key))

    def get_throttle(self, key: str) -> int | None:
        """Current delay for an activity, or None if unset."""
        value = self._config_store.get(StoreKey.current_delay(key))
        if value is None:
            return None
        return int(value)  # type: ignore[call-overload]

    def get_limits_table(self, key: str) -> LimitsTable | None:
        """Stored limits table for an activity, or None if unset."""
        value = self._config_store.get(StoreKey.limits_table(key))
        if value is None:
            return None
        # JSON-backed stores hand back lists of lists
        return tuple((int(load), int(delay)) for load, delay in value)  # type: ignore[attr-defined]

    def activities(self) -> list[str]:
        """Activity keys that have a delay or a limits table."""
        return sorted({store_key.activity for store_key in self._config_store.keys()})

