# tests/throttle/test_store.py
"""Tests for ThrottleStore over every config store backend."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from loadthrottle.throttle import ThrottleStore


class TestSetThrottle:
    """Current delay facet."""

    def test_set_then_get(self, throttle_store: ThrottleStore) -> None:
        throttle_store.set_throttle("solr", 25)
        assert throttle_store.get_throttle("solr") == 25

    def test_zero_is_valid(self, throttle_store: ThrottleStore) -> None:
        throttle_store.set_throttle("solr", 0)
        assert throttle_store.get_throttle("solr") == 0

    def test_overwrites(self, throttle_store: ThrottleStore) -> None:
        throttle_store.set_throttle("solr", 25)
        throttle_store.set_throttle("solr", 5)
        assert throttle_store.get_throttle("solr") == 5

    def test_unset_returns_none(self, throttle_store: ThrottleStore) -> None:
        assert throttle_store.get_throttle("solr") is None

    @pytest.mark.parametrize("bad", [-1, 2.5, "10", None, True])
    def test_rejects_invalid_delay(self, throttle_store: ThrottleStore, bad: object) -> None:
        with pytest.raises(ValueError, match="non-negative integer"):
            throttle_store.set_throttle("solr", bad)  # type: ignore[arg-type]
        assert throttle_store.get_throttle("solr") is None

    def test_rejects_empty_key(self, throttle_store: ThrottleStore) -> None:
        with pytest.raises(ValueError):
            throttle_store.set_throttle("", 5)

    def test_clear_twice_is_noop(self, throttle_store: ThrottleStore) -> None:
        throttle_store.set_throttle("solr", 25)
        throttle_store.clear_throttle("solr")
        throttle_store.clear_throttle("solr")
        assert throttle_store.get_throttle("solr") is None

    @given(delay=st.integers(min_value=0, max_value=2**53))
    def test_any_non_negative_delay_round_trips(self, delay: int) -> None:
        from loadthrottle.core.store import InMemoryConfigStore

        store = ThrottleStore(InMemoryConfigStore())
        store.set_throttle("solr", delay)
        assert store.get_throttle("solr") == delay

    @given(delay=st.integers(min_value=0, max_value=2**53))
    def test_clear_always_leaves_absent(self, delay: int) -> None:
        from loadthrottle.core.store import InMemoryConfigStore

        store = ThrottleStore(InMemoryConfigStore())
        store.set_throttle("solr", delay)
        store.clear_throttle("solr")
        assert store.get_throttle("solr") is None


class TestSetLimits:
    """Limits table facet."""

    def test_stored_sorted(self, throttle_store: ThrottleStore) -> None:
        throttle_store.set_limits("solr", [(50, 100), (-1, 5), (10, 20)])
        assert throttle_store.get_limits_table("solr") == ((-1, 5), (10, 20), (50, 100))

    def test_mapping_input(self, throttle_store: ThrottleStore) -> None:
        throttle_store.set_limits("solr", {10: 20, -1: 5})
        assert throttle_store.get_limits_table("solr") == ((-1, 5), (10, 20))

    def test_generator_input(self, throttle_store: ThrottleStore) -> None:
        """One-shot iterables are consumed once and still stored whole."""
        throttle_store.set_limits("solr", ((lf, lf + 1) for lf in (-1, 10)))
        assert throttle_store.get_limits_table("solr") == ((-1, 0), (10, 11))

    def test_replaces_previous_table(self, throttle_store: ThrottleStore) -> None:
        throttle_store.set_limits("solr", [(-1, 5), (10, 20)])
        throttle_store.set_limits("solr", [(-1, 1)])
        assert throttle_store.get_limits_table("solr") == ((-1, 1),)

    def test_invalid_table_leaves_state_unchanged(self, throttle_store: ThrottleStore) -> None:
        from loadthrottle.contracts import InvalidLimitsError

        throttle_store.set_limits("solr", [(-1, 5)])

        with pytest.raises(InvalidLimitsError):
            throttle_store.set_limits("solr", [(0, 5)])

        assert throttle_store.get_limits_table("solr") == ((-1, 5),)

    def test_invalid_table_on_fresh_key_stores_nothing(
        self, throttle_store: ThrottleStore
    ) -> None:
        from loadthrottle.contracts import InvalidLimitsError

        with pytest.raises(InvalidLimitsError):
            throttle_store.set_limits("solr", [(-1, -5)])

        assert throttle_store.get_limits_table("solr") is None

    def test_error_lists_every_violation(self, throttle_store: ThrottleStore) -> None:
        from loadthrottle.contracts import InvalidLimitsError
        from loadthrottle.throttle.limits import NON_NEGATIVE_INTEGERS_MESSAGE, SENTINEL_MESSAGE

        with pytest.raises(InvalidLimitsError) as exc_info:
            throttle_store.set_limits("solr", [(10, -5)])

        assert exc_info.value.violations == (NON_NEGATIVE_INTEGERS_MESSAGE, SENTINEL_MESSAGE)

    def test_invalid_table_is_logged(
        self, throttle_store: ThrottleStore, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        from loadthrottle.contracts import InvalidLimitsError
        from loadthrottle.throttle import store as store_module

        events: list[tuple[str, dict[str, object]]] = []

        class _Recorder:
            def error(self, event: str, **kw: object) -> None:
                events.append((event, kw))

            def debug(self, event: str, **kw: object) -> None:
                pass

        monkeypatch.setattr(store_module, "logger", _Recorder())

        with pytest.raises(InvalidLimitsError):
            throttle_store.set_limits("solr", [(0, 5)])

        assert len(events) == 1
        event, fields = events[0]
        assert event == "Invalid throttle limits"
        assert fields["activity"] == "solr"
        assert fields["violations"] == ["Must include exactly one -1 entry"]

    def test_clear_twice_is_noop(self, throttle_store: ThrottleStore) -> None:
        throttle_store.set_limits("solr", [(-1, 5)])
        throttle_store.clear_limits("solr")
        throttle_store.clear_limits("solr")
        assert throttle_store.get_limits_table("solr") is None

    def test_facets_independent(self, throttle_store: ThrottleStore) -> None:
        throttle_store.set_throttle("solr", 7)
        throttle_store.set_limits("solr", [(-1, 5)])
        throttle_store.clear_limits("solr")

        assert throttle_store.get_throttle("solr") == 7

    def test_activity_named_like_other_facet_does_not_collide(
        self, throttle_store: ThrottleStore
    ) -> None:
        """The delay of "limits_x" never lands on the limits table of "x"."""
        throttle_store.set_limits("x", [(-1, 5)])
        throttle_store.set_throttle("limits_x", 7)

        assert throttle_store.get_limits_table("x") == ((-1, 5),)
        assert throttle_store.get_throttle("limits_x") == 7
        assert throttle_store.get_throttle("x") is None

        throttle_store.clear_throttle("limits_x")
        assert throttle_store.get_limits_table("x") == ((-1, 5),)
        assert throttle_store.activities() == ["x"]

    def test_activities_lists_each_key_once(self, throttle_store: ThrottleStore) -> None:
        throttle_store.set_throttle("solr", 7)
        throttle_store.set_limits("solr", [(-1, 5)])
        throttle_store.set_throttle("handoff", 0)

        assert throttle_store.activities() == ["handoff", "solr"]
