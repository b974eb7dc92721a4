# src/loadthrottle/throttle/limits.py
"""Limits table validation and load-factor resolution.

A limits table maps load factor breakpoints to delays. Resolution picks the
delay of the greatest breakpoint that does not exceed the current load
factor. The mandatory -1 breakpoint is the floor: it supplies the delay for
every load factor below the next breakpoint.

Both functions here are pure. Neither touches a store.
"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable, Mapping
from typing import Any

from loadthrottle.contracts import LimitsTable, LimitsValidation, NoLimitsInTableError

SENTINEL_LOAD_FACTOR = -1

NON_NEGATIVE_INTEGERS_MESSAGE = "All throttle values must be non-negative integers"
SENTINEL_MESSAGE = "Must include exactly one -1 entry"

LimitsInput = Mapping[Any, Any] | Iterable[Any]


def _is_int(value: object) -> bool:
    # bool is an int subclass but never a meaningful load factor or delay
    return isinstance(value, int) and not isinstance(value, bool)


def _is_pair(entry: object) -> bool:
    return isinstance(entry, (tuple, list)) and len(entry) == 2


def _entries(table: LimitsInput) -> list[Any]:
    if isinstance(table, Mapping):
        return list(table.items())
    return list(table)


def _check_non_negative_integers(entries: list[Any]) -> str | None:
    for entry in entries:
        if not _is_pair(entry):
            return NON_NEGATIVE_INTEGERS_MESSAGE
        load_factor, delay = entry
        if not (_is_int(load_factor) and _is_int(delay) and delay >= 0):
            return NON_NEGATIVE_INTEGERS_MESSAGE
    return None


def _check_single_sentinel(entries: list[Any]) -> str | None:
    sentinels = [
        entry
        for entry in entries
        if _is_pair(entry) and _is_int(entry[0]) and entry[0] == SENTINEL_LOAD_FACTOR
    ]
    if len(sentinels) != 1:
        return SENTINEL_MESSAGE
    return None


def validate_limits(table: LimitsInput) -> LimitsValidation:
    """Check a candidate limits table against every rule.

    All rules run even when an earlier one fails, so the caller learns about
    every problem at once.

    Args:
        table: Sequence of (load_factor, delay_ms) pairs, or a mapping of
            load factor to delay

    Returns:
        LimitsValidation listing each violated rule in rule order
    """
    entries = _entries(table)
    checks = (_check_non_negative_integers, _check_single_sentinel)
    violations = [message for check in checks if (message := check(entries)) is not None]
    if violations:
        return LimitsValidation.invalid(violations)
    return LimitsValidation.valid()


def normalize_limits(table: LimitsInput) -> LimitsTable:
    """Return a validated table as an ascending tuple of pairs.

    Sorting is by (load_factor, delay), so duplicate non-sentinel breakpoints
    end up ordered by delay.
    """
    return tuple(sorted((load_factor, delay) for load_factor, delay in _entries(table)))


def find_throttle_for_load(limits: LimitsTable, load_factor: int) -> int:
    """Resolve the delay for a load factor.

    Args:
        limits: Ascending limits table
        load_factor: Current load, in the caller's units

    Returns:
        Delay of the greatest breakpoint <= load_factor. If every breakpoint
        is above load_factor, the delay of the first (lowest) breakpoint.

    Raises:
        NoLimitsInTableError: If limits is empty
    """
    if not limits:
        raise NoLimitsInTableError()

    breakpoints = [load for load, _ in limits]
    index = bisect_right(breakpoints, load_factor)
    if index == 0:
        # Below the lowest breakpoint: the lowest entry is the floor
        return limits[0][1]
    return limits[index - 1][1]
