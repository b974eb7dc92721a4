# tests/conftest.py
"""Shared test fixtures and helpers.

Hypothesis Configuration:
- "ci" profile: Fast tests for CI (100 examples) - default
- "nightly" profile: Thorough tests (1000 examples)
- "debug" profile: Minimal tests with verbose output (10 examples)

Set profile via environment variable:
    HYPOTHESIS_PROFILE=nightly pytest tests/
"""

import os
from collections.abc import Iterator

import pytest
from hypothesis import Phase, Verbosity, settings

from loadthrottle.core.store import ConfigStore, InMemoryConfigStore, SQLConfigStore
from loadthrottle.throttle import Throttle, ThrottleStore

# =============================================================================
# Hypothesis Configuration
# =============================================================================

settings.register_profile(
    "ci",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.register_profile(
    "nightly",
    max_examples=1000,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))


class RecordingSleeper:
    """Sleep primitive that records requested delays instead of sleeping."""

    def __init__(self) -> None:
        self.calls: list[int] = []

    def __call__(self, delay_ms: int) -> None:
        self.calls.append(delay_ms)


@pytest.fixture(params=["memory", "database"])
def config_store(request: pytest.FixtureRequest) -> Iterator[ConfigStore]:
    """Every config store backend, so domain tests cover both."""
    if request.param == "memory":
        yield InMemoryConfigStore()
        return
    store = SQLConfigStore.in_memory()
    try:
        yield store
    finally:
        store.close()


@pytest.fixture
def throttle_store(config_store: ConfigStore) -> ThrottleStore:
    return ThrottleStore(config_store)


@pytest.fixture
def sleeper() -> RecordingSleeper:
    return RecordingSleeper()


@pytest.fixture
def throttle(throttle_store: ThrottleStore, sleeper: RecordingSleeper) -> Throttle:
    return Throttle(throttle_store, sleep=sleeper)


@pytest.fixture
def example_limits() -> list[tuple[int, int]]:
    """Three-breakpoint table used across resolver and throttle tests."""
    return [(-1, 5), (10, 20), (50, 100)]
