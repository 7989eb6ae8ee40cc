"""
Unit tests for strategy parameter configuration.
"""

import json

import pytest

from src.core.config import (
    CrossoverParameters,
    RSIParameters,
    StrategyParametersConfig,
    load_strategy_parameters,
)
from src.core.exceptions.backtest import ConfigurationError


class TestParameterModels:
    """Tests for per-strategy parameter models."""

    def test_should_use_documented_defaults(self) -> None:
        """Test default parameter sets."""
        config = StrategyParametersConfig()

        assert config.moving_average_crossover.short_period == 10
        assert config.moving_average_crossover.long_period == 50
        assert config.rsi.period == 14
        assert config.bollinger_bands.standard_deviations == 2.0
        assert config.macd.slow_period == 26
        assert config.rsi_ma_combo.ma_long_period == 20
        assert config.scalping.max_hold_time == 5

    def test_should_reject_short_period_not_below_long(self) -> None:
        """Test cross-field validation."""
        with pytest.raises(ValueError, match="short_period must be less than long_period"):
            CrossoverParameters(short_period=50, long_period=10)

    def test_should_reject_threshold_out_of_range(self) -> None:
        """Test field bounds."""
        with pytest.raises(ValueError):
            RSIParameters(oversold_threshold=-5)

    def test_should_return_strategy_kwargs(self) -> None:
        """Test for_strategy."""
        assert StrategyParametersConfig().for_strategy("rsi") == {
            "period": 14,
            "oversold_threshold": 30.0,
            "overbought_threshold": 70.0,
        }

    def test_should_reject_unknown_strategy_section(self) -> None:
        """Test for_strategy with an unknown name."""
        with pytest.raises(ConfigurationError, match="No parameters configured"):
            StrategyParametersConfig().for_strategy("martingale")


class TestLoadStrategyParameters:
    """Tests for loading parameter files."""

    def test_should_return_defaults_without_path(self) -> None:
        """Test loading with no file."""
        assert load_strategy_parameters() == StrategyParametersConfig()

    def test_should_merge_partial_file_with_defaults(self, tmp_path) -> None:
        """Test that missing sections fall back to defaults."""
        path = tmp_path / "params.json"
        path.write_text(json.dumps({"rsi": {"period": 10}, "macd": {"signal_period": 5}}))

        config = load_strategy_parameters(path)

        assert config.rsi.period == 10
        assert config.rsi.oversold_threshold == 30.0
        assert config.macd.signal_period == 5
        assert config.bollinger_bands.period == 20

    def test_should_raise_for_missing_file(self, tmp_path) -> None:
        """Test a missing file."""
        with pytest.raises(ConfigurationError, match="not found"):
            load_strategy_parameters(tmp_path / "missing.json")

    def test_should_raise_for_invalid_json(self, tmp_path) -> None:
        """Test a malformed file."""
        path = tmp_path / "params.json"
        path.write_text("{not json")

        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            load_strategy_parameters(path)

    @pytest.mark.parametrize(
        "content",
        [
            {"moving_average_crossover": {"short_period": 60, "long_period": 50}},
            {"rsi": {"period": 0}},
            {"rsi": {"unknown_field": 1}},
            {"martingale": {}},
        ],
    )
    def test_should_raise_for_invalid_parameters(self, tmp_path, content: dict) -> None:
        """Test validation failures are reported as configuration errors."""
        path = tmp_path / "params.json"
        path.write_text(json.dumps(content))

        with pytest.raises(ConfigurationError, match="Invalid strategy parameters"):
            load_strategy_parameters(path)
