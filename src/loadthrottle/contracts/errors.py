# src/loadthrottle/contracts/errors.py
"""Caller-visible throttle failures.

None of these are recovered inside the package. Misconfiguration surfaces
immediately instead of degrading to a zero delay, because silently skipping
a throttle is exactly what lets the protected resource get overloaded.

Every error carries a stable ``code`` for callers that branch on failures
without importing the classes.
"""

from __future__ import annotations

from collections.abc import Sequence


class ThrottleError(Exception):
    """Base class for throttle failures."""

    code: str = "throttle_error"


class InvalidLimitsError(ThrottleError):
    """Raised by set_limits when a limits table fails validation.

    Attributes:
        activity: Activity whose limits were rejected
        violations: Every failed rule, in rule order (never empty)
    """

    code = "invalid_limits"

    def __init__(self, activity: str, violations: Sequence[str]) -> None:
        self.activity = activity
        self.violations = tuple(violations)
        super().__init__(
            f"Invalid throttle limits for {activity!r}: {'; '.join(self.violations)}"
        )


class NoLimitsConfiguredError(ThrottleError):
    """Raised by set_throttle_by_load when the activity has no limits table."""

    code = "no_limits"

    def __init__(self, activity: str) -> None:
        self.activity = activity
        super().__init__(f"No throttle limits configured for {activity!r}")


class NoLimitsInTableError(ThrottleError):
    """Raised by the resolver when handed an empty limits table."""

    code = "no_limits_in_table"

    def __init__(self) -> None:
        super().__init__("Limits table is empty")


class KeyNotConfiguredError(ThrottleError):
    """Raised by throttle() when the activity has no current delay."""

    code = "badkey"

    def __init__(self, activity: str) -> None:
        self.activity = activity
        super().__init__(f"No throttle value configured for {activity!r}")
