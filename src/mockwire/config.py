# src/mockwire/config.py
"""Configuration schema and loading for mockwire.

Uses Pydantic for validation with frozen (immutable) models.
Configuration precedence: overrides > YAML file > preset > defaults.
"""

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field

from mockwire.config_loader import list_presets as _list_presets
from mockwire.config_loader import load_config as _load_config
from mockwire.config_loader import load_preset as _load_preset
from mockwire.contracts.enums import OrderingType
from mockwire.expectation.part import DEFAULT_ASSERTION_TIME_MS


class ExpectationDefaults(BaseModel):
    """Defaults applied to expectation parts created from configuration."""

    model_config = {"frozen": True, "extra": "forbid"}

    ordering: OrderingType = Field(
        default=OrderingType.TOTAL,
        description="Ordering discipline for messages arriving at an endpoint",
    )
    endpoint_ordered: bool = Field(
        default=True,
        description="Whether endpoints hold a fixed position among other endpoints",
    )
    expected_message_count: int = Field(
        default=1,
        ge=0,
        description="Messages expected per part when not set explicitly",
    )
    assertion_time_ms: int = Field(
        default=DEFAULT_ASSERTION_TIME_MS,
        gt=0,
        description="How long the verification runtime waits for an endpoint's messages",
    )


class LoggingConfig(BaseModel):
    """Structured logging settings."""

    model_config = {"frozen": True, "extra": "forbid"}

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Root log level",
    )
    json_output: bool = Field(
        default=False,
        description="Emit JSON log lines instead of console output",
    )


class MockwireConfig(BaseModel):
    """Top-level mockwire configuration."""

    model_config = {"frozen": True, "extra": "forbid"}

    expectations: ExpectationDefaults = Field(
        default_factory=ExpectationDefaults,
        description="Expectation part defaults",
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging configuration",
    )
    preset_name: str | None = Field(
        default=None,
        description="Preset name used to build this config (if any)",
    )


# === Preset Loading ===


def _get_presets_dir() -> Path:
    return Path(__file__).parent / "presets"


def list_presets() -> list[str]:
    """List available preset names."""
    return _list_presets(_get_presets_dir())


def load_preset(preset_name: str) -> dict[str, Any]:
    """Load a bundled preset by name."""
    return _load_preset(_get_presets_dir(), preset_name)


def load_config(
    *,
    preset: str | None = None,
    config_file: Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> MockwireConfig:
    """Load mockwire configuration with precedence handling.

    Precedence (highest to lowest):
    1. overrides - Explicit overrides (CLI flags, test fixtures)
    2. config_file - User's YAML configuration file
    3. preset - Named bundled preset
    4. defaults - Built-in Pydantic defaults
    """
    return _load_config(
        MockwireConfig,
        _get_presets_dir(),
        preset=preset,
        config_file=config_file,
        overrides=overrides,
    )
