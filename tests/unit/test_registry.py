"""
Unit tests for the strategy registry.
"""

import pytest
from loguru import logger

from src.core.config import StrategyParametersConfig
from src.core.exceptions.backtest import ConfigurationError, UnknownStrategyError
from src.strategies import (
    BollingerBandsStrategy,
    MACDStrategy,
    MovingAverageCrossover,
    RSIMAComboStrategy,
    RSIStrategy,
    ScalpingStrategy,
    available_strategies,
    build_default_strategies,
    build_strategy,
    get_strategy_cls,
    register_strategy,
)
from src.strategies import registry


class TestStrategyLookup:
    """Tests for name lookup."""

    def test_should_register_all_strategies(self) -> None:
        """Test the built-in registrations."""
        assert available_strategies() == [
            "moving_average_crossover",
            "rsi",
            "bollinger_bands",
            "macd",
            "rsi_ma_combo",
            "scalping",
        ]
        assert get_strategy_cls("macd") is MACDStrategy

    def test_should_raise_for_unknown_name(self) -> None:
        """Test unknown names."""
        with pytest.raises(UnknownStrategyError, match="Unknown strategy: martingale"):
            get_strategy_cls("martingale")

    def test_should_register_custom_strategy(self, monkeypatch) -> None:
        """Test adding a strategy under a new name."""
        monkeypatch.setattr(registry, "_REGISTRY", dict(registry._REGISTRY))

        register_strategy("fast_rsi", RSIStrategy)

        assert get_strategy_cls("fast_rsi") is RSIStrategy
        assert "fast_rsi" in available_strategies()


class TestBuildStrategy:
    """Tests for building instances."""

    def test_should_build_from_name_and_params(self) -> None:
        """Test keyword parameters."""
        strategy = build_strategy("rsi", period=10)

        assert isinstance(strategy, RSIStrategy)
        assert strategy.parameters["period"] == 10

    def test_should_build_from_mapping(self) -> None:
        """Test a mapping with a type key and unknown keys filtered out."""
        strategy = build_strategy({"type": "moving_average_crossover", "short_period": 3, "comment": "x"})

        assert isinstance(strategy, MovingAverageCrossover)
        assert strategy.parameters == {"short_period": 3, "long_period": 50}

    def test_should_warn_about_dropped_parameters(self) -> None:
        """Test that a misspelled key is reported instead of silently ignored."""
        messages: list = []
        handler_id = logger.add(messages.append, level="WARNING", format="{level} {message}")
        try:
            strategy = build_strategy("rsi", perod=10)
        finally:
            logger.remove(handler_id)

        assert strategy.parameters["period"] == 14
        assert len(messages) == 1
        assert "WARNING Ignoring unknown parameters for RSIStrategy: perod" in str(messages[0])

    def test_should_let_keyword_params_override_mapping(self) -> None:
        """Test override order."""
        strategy = build_strategy({"type": "bollinger_bands", "period": 10}, period=30)

        assert strategy.parameters["period"] == 30

    def test_should_raise_for_mapping_without_type(self) -> None:
        """Test a mapping missing its type."""
        with pytest.raises(ConfigurationError):
            build_strategy({"period": 10})

    def test_should_build_fresh_instances(self) -> None:
        """Test that each build returns a new object."""
        assert build_strategy("scalping") is not build_strategy("scalping")


class TestBuildDefaultStrategies:
    """Tests for building the full strategy set."""

    def test_should_build_one_of_each_in_registry_order(self) -> None:
        """Test default construction."""
        strategies = build_default_strategies()

        assert [type(strategy) for strategy in strategies] == [
            MovingAverageCrossover,
            RSIStrategy,
            BollingerBandsStrategy,
            MACDStrategy,
            RSIMAComboStrategy,
            ScalpingStrategy,
        ]

    def test_should_apply_configured_parameters(self) -> None:
        """Test construction from a parameters config."""
        config = StrategyParametersConfig.model_validate({"macd": {"fast_period": 5}})

        macd = build_default_strategies(config)[3]

        assert macd.parameters["fast_period"] == 5
