# tests/unit/test_config.py
"""Unit tests for the mockwire configuration schema and bundled presets."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from mockwire.config import ExpectationDefaults, MockwireConfig, list_presets, load_config, load_preset
from mockwire.contracts.enums import OrderingType


class TestExpectationDefaults:
    def test_defaults(self) -> None:
        defaults = ExpectationDefaults()
        assert defaults.ordering is OrderingType.TOTAL
        assert defaults.endpoint_ordered is True
        assert defaults.expected_message_count == 1
        assert defaults.assertion_time_ms == 15_000

    def test_negative_count_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ExpectationDefaults(expected_message_count=-1)

    def test_non_positive_assertion_time_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ExpectationDefaults(assertion_time_ms=0)

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ExpectationDefaults.model_validate({"orderng": "total"})

    def test_frozen(self) -> None:
        defaults = ExpectationDefaults()
        with pytest.raises(ValidationError):
            defaults.assertion_time_ms = 10  # type: ignore[misc]


class TestBundledPresets:
    def test_presets_listed(self) -> None:
        assert list_presets() == ["async", "relaxed", "strict"]

    @pytest.mark.parametrize("name", ["async", "relaxed", "strict"])
    def test_presets_validate(self, name: str) -> None:
        config = load_config(preset=name)
        assert config.preset_name == name
        assert isinstance(config, MockwireConfig)

    def test_relaxed_preset(self) -> None:
        config = load_config(preset="relaxed")
        assert config.expectations.ordering is OrderingType.NONE
        assert config.expectations.endpoint_ordered is False

    def test_async_preset(self) -> None:
        assert load_preset("async")["expectations"]["ordering"] == "partial"


class TestLoadConfig:
    def test_defaults(self) -> None:
        config = load_config()
        assert config.expectations == ExpectationDefaults()
        assert config.logging.level == "INFO"
        assert config.logging.json_output is False

    def test_file_over_preset_and_overrides_over_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / "mockwire.yaml"
        config_file.write_text(yaml.dump({"expectations": {"assertion_time_ms": 1_000}, "logging": {"level": "DEBUG"}}))
        config = load_config(
            preset="async",
            config_file=config_file,
            overrides={"logging": {"json_output": True}},
        )
        assert config.expectations.ordering is OrderingType.PARTIAL
        assert config.expectations.assertion_time_ms == 1_000
        assert config.logging.level == "DEBUG"
        assert config.logging.json_output is True

    def test_invalid_ordering_rejected(self) -> None:
        with pytest.raises(ValidationError):
            load_config(overrides={"expectations": {"ordering": "sometimes"}})
