"""Config store backends for throttle state.

In-memory for a single process, SQL (via SQLAlchemy) for state shared
between processes.
"""

from loadthrottle.core.store.base import ConfigStore
from loadthrottle.core.store.database import SQLConfigStore
from loadthrottle.core.store.memory import InMemoryConfigStore

__all__ = ["ConfigStore", "InMemoryConfigStore", "SQLConfigStore"]
