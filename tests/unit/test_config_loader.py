# tests/unit/test_config_loader.py
"""Unit tests for deep_merge, preset loading and layered config loading."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from pydantic import BaseModel, ValidationError

from mockwire.config_loader import deep_merge, list_presets, load_config, load_preset

# =============================================================================
# deep_merge
# =============================================================================


class TestDeepMerge:
    def test_flat_override(self) -> None:
        assert deep_merge({"a": 1, "b": 2}, {"b": 3, "c": 4}) == {"a": 1, "b": 3, "c": 4}

    def test_nested_merge(self) -> None:
        base = {"top": {"a": 1, "b": 2}, "flat": "value"}
        result = deep_merge(base, {"top": {"b": 3}})
        assert result == {"top": {"a": 1, "b": 3}, "flat": "value"}

    def test_override_replaces_dict_with_scalar(self) -> None:
        assert deep_merge({"a": {"nested": True}}, {"a": "flat"}) == {"a": "flat"}

    def test_does_not_mutate_inputs(self) -> None:
        base = {"a": {"b": 1}}
        override = {"a": {"c": 2}}
        deep_merge(base, override)
        assert base == {"a": {"b": 1}}
        assert override == {"a": {"c": 2}}


# =============================================================================
# Presets
# =============================================================================


class TestPresets:
    def test_nonexistent_directory(self, tmp_path: Path) -> None:
        assert list_presets(tmp_path / "no_such_dir") == []

    def test_lists_yaml_files_sorted(self, tmp_path: Path) -> None:
        (tmp_path / "strict.yaml").write_text("key: value")
        (tmp_path / "async.yaml").write_text("key: value")
        (tmp_path / "notes.txt").write_text("key: value")
        (tmp_path / "dir.yaml").mkdir()
        assert list_presets(tmp_path) == ["async", "strict"]

    def test_loads_valid_preset(self, tmp_path: Path) -> None:
        data = {"expectations": {"ordering": "none"}}
        (tmp_path / "relaxed.yaml").write_text(yaml.dump(data))
        assert load_preset(tmp_path, "relaxed") == data

    def test_missing_preset_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="not found"):
            load_preset(tmp_path, "missing")

    def test_non_mapping_raises(self, tmp_path: Path) -> None:
        (tmp_path / "bad.yaml").write_text("- item1\n- item2\n")
        with pytest.raises(ValueError, match="must be a YAML mapping"):
            load_preset(tmp_path, "bad")

    def test_empty_preset_is_empty_mapping(self, tmp_path: Path) -> None:
        """An empty preset behaves like an empty config file."""
        (tmp_path / "empty.yaml").write_text("")
        assert load_preset(tmp_path, "empty") == {}

    def test_empty_preset_loads_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "empty.yaml").write_text("")
        config = load_config(_Config, tmp_path, preset="empty")
        assert config == _Config(preset_name="empty")


# =============================================================================
# load_config
# =============================================================================


class _Inner(BaseModel):
    model_config = {"extra": "forbid"}

    a: int = 0
    b: int = 0


class _Config(BaseModel):
    model_config = {"extra": "forbid"}

    inner: _Inner = _Inner()
    preset_name: str | None = None


class TestLoadConfig:
    """Precedence: overrides > config file > preset > defaults."""

    def test_defaults(self, tmp_path: Path) -> None:
        config = load_config(_Config, tmp_path)
        assert config.inner == _Inner()
        assert config.preset_name is None

    def test_precedence(self, tmp_path: Path) -> None:
        (tmp_path / "base.yaml").write_text(yaml.dump({"inner": {"a": 1, "b": 1}}))
        config_file = tmp_path / "user.yml"
        config_file.write_text(yaml.dump({"inner": {"b": 2}}))
        config = load_config(_Config, tmp_path, preset="base", config_file=config_file, overrides={"inner": {"a": 3}})
        assert config.inner == _Inner(a=3, b=2)
        assert config.preset_name == "base"

    def test_empty_config_file_is_allowed(self, tmp_path: Path) -> None:
        config_file = tmp_path / "empty.yml"
        config_file.write_text("")
        assert load_config(_Config, tmp_path, config_file=config_file).inner == _Inner()

    def test_missing_config_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            load_config(_Config, tmp_path, config_file=tmp_path / "nope.yml")

    def test_invalid_values_fail_validation(self, tmp_path: Path) -> None:
        with pytest.raises(ValidationError):
            load_config(_Config, tmp_path, overrides={"inner": {"unknown": 1}})
