# src/loadthrottle/contracts/keys.py
"""Typed composite keys for the config store.

Every piece of throttle state is addressed by (activity, facet) rather than
by a concatenated string. StoreKey.name renders the historical
``throttle_<activity>`` and ``throttle_limits_<activity>`` names for display
only: the delay of "limits_x" and the limits table of "x" share a name, so
stores key on the pair.
"""

from dataclasses import dataclass

from loadthrottle.contracts.enums import ThrottleFacet


@dataclass(frozen=True, order=True)
class StoreKey:
    """Address of one facet of one activity's throttle state."""

    activity: str
    facet: ThrottleFacet

    def __post_init__(self) -> None:
        if not isinstance(self.activity, str):
            raise TypeError(
                f"activity key must be a str, got {type(self.activity).__name__}"
            )
        if not self.activity:
            raise ValueError("activity key must be a non-empty string")

    @property
    def name(self) -> str:
        """Namespaced string form, e.g. ``throttle_limits_solr``."""
        return f"{self.facet.value}_{self.activity}"

    @classmethod
    def current_delay(cls, activity: str) -> "StoreKey":
        return cls(activity, ThrottleFacet.CURRENT_DELAY)

    @classmethod
    def limits_table(cls, activity: str) -> "StoreKey":
        return cls(activity, ThrottleFacet.LIMITS_TABLE)
