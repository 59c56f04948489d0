# src/mockwire/config_loader.py
"""YAML preset loading and layered configuration merging.

Configuration precedence is overrides > config file > preset > defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dicts, with override taking precedence.

    Returns:
        Merged configuration dict (new dict, does not mutate inputs).
    """
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def list_presets(presets_dir: Path) -> list[str]:
    """Sorted preset names (YAML file stems) found in ``presets_dir``."""
    if not presets_dir.exists():
        return []
    return sorted(p.stem for p in presets_dir.glob("*.yaml") if p.is_file())


def _read_mapping(path: Path, label: str) -> dict[str, Any]:
    with path.open() as f:
        loaded = yaml.safe_load(f)
    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise ValueError(f"{label} must be a YAML mapping, got {type(loaded).__name__}")
    return loaded


def load_preset(presets_dir: Path, preset_name: str) -> dict[str, Any]:
    """Load a preset configuration by name.

    Raises:
        FileNotFoundError: If preset does not exist.
        yaml.YAMLError: If preset YAML is malformed.
        ValueError: If preset is not a YAML mapping.
    """
    preset_path = presets_dir / f"{preset_name}.yaml"

    if not preset_path.exists():
        available = list_presets(presets_dir)
        raise FileNotFoundError(f"Preset '{preset_name}' not found. Available presets: {available}")

    return _read_mapping(preset_path, f"Preset '{preset_name}'")


def load_config[ConfigT: BaseModel](
    config_cls: type[ConfigT],
    presets_dir: Path,
    *,
    preset: str | None = None,
    config_file: Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> ConfigT:
    """Layer preset, YAML file and overrides, then validate into ``config_cls``.

    Args:
        config_cls: The Pydantic model class to validate into.
        presets_dir: Directory holding preset YAML files.
        preset: Optional preset name to use as base.
        config_file: Optional path to YAML config file.
        overrides: Optional dict of explicit overrides (e.g. CLI flags).

    Raises:
        FileNotFoundError: If preset or config_file not found.
        yaml.YAMLError: If YAML is malformed.
        ValueError: If a YAML document is not a mapping.
        pydantic.ValidationError: If final config fails validation.
    """
    config_dict: dict[str, Any] = {}

    if preset is not None:
        config_dict = load_preset(presets_dir, preset)

    if config_file is not None:
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_file}")
        config_dict = deep_merge(config_dict, _read_mapping(config_file, f"Config file '{config_file}'"))

    if overrides is not None:
        config_dict = deep_merge(config_dict, overrides)

    config_dict["preset_name"] = preset

    return config_cls(**config_dict)
