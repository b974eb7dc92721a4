# src/loadthrottle/contracts/results.py
"""Operation outcomes and shared value shapes.

These types answer: "What did a validation or a throttle wait produce?"

IMPORTANT:
- LimitsValidation is RETURNED by the validator, never raised. Only the
  set_limits boundary converts it into InvalidLimitsError.
- LimitsTable is a tuple of tuples so a stored table can be shared between
  readers without copying.
"""

from dataclasses import dataclass, field

from loadthrottle.contracts.errors import InvalidLimitsError

# (load_factor, delay_ms)
LimitEntry = tuple[int, int]
LimitsTable = tuple[LimitEntry, ...]


@dataclass(frozen=True)
class LimitsValidation:
    """Result of validating a candidate limits table.

    Use the factory methods to create instances.
    """

    violations: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        """Whether every rule passed."""
        return not self.violations

    @classmethod
    def valid(cls) -> "LimitsValidation":
        return cls()

    @classmethod
    def invalid(cls, violations: list[str]) -> "LimitsValidation":
        """Create failed result. Must carry at least one violation."""
        if not violations:
            raise ValueError("invalid() requires at least one violation")
        return cls(violations=tuple(violations))

    def raise_for_violations(self, activity: str) -> None:
        """Raise InvalidLimitsError if any rule failed.

        Raises:
            InvalidLimitsError: With every violation message attached
        """
        if self.violations:
            raise InvalidLimitsError(activity, self.violations)


@dataclass
class ThrottleStats:
    """Accumulated throttle waits for one activity.

    Attributes:
        throttle_calls: Number of completed throttle() waits
        total_throttle_time_ms: Sum of all delays slept
        peak_delay_ms: Largest single delay slept
        current_delay_ms: Delay currently stored for the activity, if any
    """

    throttle_calls: int = 0
    total_throttle_time_ms: int = 0
    peak_delay_ms: int = 0
    current_delay_ms: int | None = field(default=None)
