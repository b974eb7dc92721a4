# src/loadthrottle/core/store/schema.py
"""SQLAlchemy table definitions for the shared config store.

Uses SQLAlchemy Core (not ORM) for explicit control over queries
and compatibility with multiple database backends.
"""

from sqlalchemy import Column, DateTime, MetaData, String, Table, Text

metadata = MetaData()

# One row per (activity, facet); the two facets of an activity never share a row
throttle_settings_table = Table(
    "throttle_settings",
    metadata,
    Column("activity", String(255), primary_key=True),
    Column("facet", String(32), primary_key=True),
    Column("value_json", Text, nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)
