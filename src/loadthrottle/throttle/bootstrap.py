# src/loadthrottle/throttle/bootstrap.py
"""Build a ready-to-use Throttle from settings."""

from __future__ import annotations

from loadthrottle.contracts import StoreBackend
from loadthrottle.core.config import LoadThrottleSettings, StoreSettings
from loadthrottle.core.logging import get_logger
from loadthrottle.core.store import ConfigStore, InMemoryConfigStore, SQLConfigStore
from loadthrottle.throttle.store import ThrottleStore
from loadthrottle.throttle.throttle import Sleeper, Throttle, sleep_ms

logger = get_logger(__name__)


def build_config_store(settings: StoreSettings) -> ConfigStore:
    """Create the config store backend named in settings.

    Args:
        settings: Store configuration

    Returns:
        InMemoryConfigStore or SQLConfigStore
    """
    if settings.backend == StoreBackend.DATABASE:
        if settings.url is None:
            raise ValueError("store.url is required when backend is 'database'")
        return SQLConfigStore.from_url(settings.url)
    return InMemoryConfigStore()


def build_throttle(
    settings: LoadThrottleSettings,
    *,
    config_store: ConfigStore | None = None,
    sleep: Sleeper = sleep_ms,
) -> Throttle:
    """Create a Throttle and install every configured activity.

    For each activity the limits table is installed before the delay. An
    activity without a given facet leaves whatever the store already holds
    for that facet untouched.

    Args:
        settings: Validated settings
        config_store: Existing backend to use instead of building one
        sleep: Sleep primitive handed to the Throttle

    Returns:
        Configured Throttle
    """
    if config_store is None:
        config_store = build_config_store(settings.store)
    store = ThrottleStore(config_store)

    for activity, activity_settings in settings.activities.items():
        if activity_settings.limits is not None:
            store.set_limits(activity, activity_settings.limits)
        if activity_settings.delay_ms is not None:
            store.set_throttle(activity, activity_settings.delay_ms)

    logger.info(
        "Throttle configured",
        backend=settings.store.backend.value,
        activities=sorted(settings.activities),
    )
    return Throttle(store, sleep=sleep)
