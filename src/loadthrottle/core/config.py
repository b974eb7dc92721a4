# src/loadthrottle/core/config.py
"""
Configuration schema and loading for loadthrottle.

Uses Pydantic for validation and Dynaconf for multi-source loading.
Settings are frozen (immutable) after construction.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, StrictInt, field_validator, model_validator

from loadthrottle.contracts import StoreBackend


class ActivitySettings(BaseModel):
    """Initial throttle state for one activity.

    Either facet may be omitted; they are independent.

    Limits may be given as a list of [load_factor, delay_ms] pairs or as a
    mapping from load factor to delay.

    Example YAML:
        activities:
          solr_indexing:
            delay_ms: 0
            limits:
              - [-1, 0]
              - [100, 10]
              - [1000, 250]
    """

    model_config = {"frozen": True}

    delay_ms: StrictInt | None = Field(
        default=None,
        ge=0,
        description="Current throttle delay in milliseconds",
    )
    # Strict: bools and floats are never load factors or delays
    limits: tuple[tuple[StrictInt, StrictInt], ...] | None = Field(
        default=None,
        description="(load factor breakpoint, delay ms) pairs; must include -1",
    )

    @field_validator("limits", mode="before")
    @classmethod
    def coerce_mapping_to_pairs(cls, v: Any) -> Any:
        if isinstance(v, Mapping):
            return [(load, delay) for load, delay in v.items()]
        return v

    @field_validator("limits")
    @classmethod
    def validate_limits_table(
        cls, v: tuple[tuple[int, int], ...] | None
    ) -> tuple[tuple[int, int], ...] | None:
        """Reject bad tables at load time, reporting every violated rule."""
        if v is None:
            return v

        from loadthrottle.throttle.limits import validate_limits

        result = validate_limits(v)
        if not result.ok:
            raise ValueError(f"Invalid throttle limits: {'; '.join(result.violations)}")
        return v


class StoreSettings(BaseModel):
    """Where throttle state lives.

    Example YAML:
        store:
          backend: database
          url: sqlite:///./throttle.db
    """

    model_config = {"frozen": True}

    backend: StoreBackend = Field(
        default=StoreBackend.MEMORY,
        description="Config store backend: memory (per process) or database (shared)",
    )
    url: str | None = Field(
        default=None,
        description="SQLAlchemy URL for the database backend",
    )

    @model_validator(mode="after")
    def validate_url_for_database(self) -> "StoreSettings":
        if self.backend == StoreBackend.DATABASE and not self.url:
            raise ValueError("store.url is required when backend is 'database'")
        return self


class LoggingSettings(BaseModel):
    """Logging output configuration."""

    model_config = {"frozen": True}

    level: str = Field(default="INFO", description="Minimum log level")
    format: Literal["console", "json"] = Field(
        default="console", description="Console renderer or JSON lines"
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        normalized = v.upper()
        if normalized not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v!r}")
        return normalized


class LoadThrottleSettings(BaseModel):
    """Top-level loadthrottle configuration.

    All settings are validated and frozen after construction.
    """

    model_config = {"frozen": True}

    store: StoreSettings = Field(
        default_factory=StoreSettings,
        description="Config store backend selection",
    )
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration",
    )
    activities: dict[str, ActivitySettings] = Field(
        default_factory=dict,
        description="Throttle state installed at startup, keyed by activity",
    )

    @field_validator("activities")
    @classmethod
    def validate_activity_keys(
        cls, v: dict[str, ActivitySettings]
    ) -> dict[str, ActivitySettings]:
        """Activity keys must be non-empty."""
        for key in v:
            if not key:
                raise ValueError("Activity keys must be non-empty strings")
        return v


def load_settings(config_path: Path) -> LoadThrottleSettings:
    """Load settings from YAML file with environment variable overrides.

    Uses Dynaconf for multi-source loading with precedence:
    1. Environment variables (LOADTHROTTLE_*) - highest priority
    2. Config file (throttle.yaml)
    3. Defaults from Pydantic schema - lowest priority

    Environment variable format: LOADTHROTTLE_STORE__URL for nested keys.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated LoadThrottleSettings instance

    Raises:
        ValidationError: If configuration fails Pydantic validation
        FileNotFoundError: If config file doesn't exist
    """
    from dynaconf import Dynaconf

    # Explicit check for file existence (Dynaconf silently accepts missing files)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    dynaconf_settings = Dynaconf(
        envvar_prefix="LOADTHROTTLE",
        settings_files=[str(config_path)],
        environments=False,
        load_dotenv=False,
        merge_enabled=True,
    )

    # Dynaconf returns uppercase keys; convert to lowercase for Pydantic
    # Also filter out internal Dynaconf settings
    internal_keys = {"LOAD_DOTENV", "ENVIRONMENTS", "SETTINGS_FILES"}
    raw_config = {
        k.lower(): v
        for k, v in dynaconf_settings.as_dict().items()
        if k not in internal_keys
    }
    return LoadThrottleSettings(**raw_config)


def resolve_config(settings: LoadThrottleSettings) -> dict[str, Any]:
    """Convert validated settings to a JSON-safe dict (for diagnostics)."""
    return settings.model_dump(mode="json")
