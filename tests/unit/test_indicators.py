"""
Unit tests for indicator calculations.
"""

import math
from datetime import UTC, datetime

import numpy as np
import pytest

from src.core.enums import Direction
from src.core.models.candle import Candle
from src.strategies.indicators import (
    average,
    bollinger_bands,
    candle_spread,
    coefficient_of_variation,
    ema,
    macd,
    momentum,
    price_action,
    rsi,
    sma,
)


class TestMovingAverages:
    """Tests for SMA and EMA."""

    def test_should_average_last_period_values(self) -> None:
        """Test SMA over the tail."""
        assert sma([1.0, 2.0, 3.0, 4.0], 2) == pytest.approx(3.5)

    def test_should_fall_back_to_last_value_when_too_short(self) -> None:
        """Test SMA with fewer values than the period."""
        assert sma([1.0, 2.0, 3.0], 5) == 3.0

    def test_should_seed_ema_at_start_of_tail(self) -> None:
        """Test EMA recurrence over the last `period` values only."""
        # multiplier 0.5: 1 -> 1.5 -> 2.25
        assert ema([1.0, 2.0, 3.0], 3) == pytest.approx(2.25)
        assert ema([100.0, 1.0, 2.0, 3.0], 3) == pytest.approx(2.25)

    def test_should_stop_ema_at_end_index(self) -> None:
        """Test EMA ending before the last value."""
        assert ema([1.0, 2.0, 3.0, 4.0], 3, end=3) == pytest.approx(2.25)

    def test_should_return_last_value_for_short_ema(self) -> None:
        """Test EMA with fewer values than the period."""
        assert ema([5.0, 6.0], 3) == 6.0


class TestRSI:
    """Tests for RSI."""

    def test_should_return_neutral_when_history_is_short(self) -> None:
        """Test that fewer than period + 1 values read 50."""
        assert rsi([1.0] * 14, 14) == 50.0

    def test_should_return_max_when_there_are_no_losses(self) -> None:
        """Test strictly increasing closes."""
        assert rsi([float(i) for i in range(1, 16)], 14) == 100.0

    def test_should_return_zero_when_there_are_no_gains(self) -> None:
        """Test strictly decreasing closes."""
        assert rsi([float(i) for i in range(15, 0, -1)], 14) == pytest.approx(0.0)

    def test_should_balance_equal_gains_and_losses(self) -> None:
        """Test alternating closes."""
        assert rsi([1.0, 2.0, 1.0, 2.0, 1.0], 4) == pytest.approx(50.0)

    def test_should_stay_within_bounds(self) -> None:
        """Test random walks stay within [0, 100]."""
        rng = np.random.default_rng(3)
        values = list(100 + np.cumsum(rng.normal(0, 1, 300)))

        for end in range(15, len(values)):
            assert 0.0 <= rsi(values[:end], 14) <= 100.0


class TestBollingerBands:
    """Tests for Bollinger bands."""

    def test_should_use_population_standard_deviation(self) -> None:
        """Test band values on a known series."""
        bands = bollinger_bands([1.0, 2.0, 3.0, 4.0, 5.0], 5, 2.0)

        assert bands.middle == pytest.approx(3.0)
        assert bands.upper == pytest.approx(3.0 + 2 * math.sqrt(2))
        assert bands.lower == pytest.approx(3.0 - 2 * math.sqrt(2))
        assert bands.width_percent == pytest.approx(4 * math.sqrt(2) / 3 * 100)

    def test_should_collapse_on_constant_prices(self) -> None:
        """Test zero-width bands."""
        bands = bollinger_bands([100.0] * 20, 20, 2.0)

        assert bands.lower == bands.middle == bands.upper == 100.0

    def test_should_keep_bands_ordered(self) -> None:
        """Test lower <= middle <= upper on random data."""
        rng = np.random.default_rng(5)
        values = list(100 + np.cumsum(rng.normal(0, 1, 100)))

        bands = bollinger_bands(values, 20, 2.0)
        assert bands.lower <= bands.middle <= bands.upper


class TestMACD:
    """Tests for MACD."""

    def test_should_return_none_when_history_is_short(self) -> None:
        """Test the minimum length of slow + signal values."""
        assert macd([100.0] * 34, 12, 26, 9) is None

    def test_should_read_zero_on_constant_prices(self) -> None:
        """Test that a flat series has no divergence."""
        reading = macd([64.0] * 40, 3, 6, 3)

        assert reading is not None
        assert reading.macd == pytest.approx(0.0)
        assert reading.signal == pytest.approx(0.0)
        assert reading.histogram == pytest.approx(0.0)

    def test_should_read_positive_on_rising_prices(self) -> None:
        """Test that the fast EMA leads in an uptrend."""
        reading = macd([100.0 + i for i in range(40)], 12, 26, 9)

        assert reading is not None
        assert reading.macd > 0
        assert reading.histogram == pytest.approx(reading.macd - reading.signal)


class TestVolatilityHelpers:
    """Tests for averages and volatility."""

    def test_should_average_tail(self) -> None:
        """Test average with and without enough values."""
        assert average([1.0, 2.0, 3.0, 4.0], 2) == pytest.approx(3.5)
        assert average([1.0, 2.0], 20) == pytest.approx(1.5)

    def test_should_report_zero_variation_for_constant_prices(self) -> None:
        """Test coefficient of variation."""
        assert coefficient_of_variation([50.0] * 10, 10) == 0.0

    def test_should_measure_candle_spread(self) -> None:
        """Test (high - low) / close."""
        candle = Candle(datetime(2024, 1, 1, tzinfo=UTC), 99.0, 102.0, 98.0, 100.0, 1.0)
        assert candle_spread(candle) == pytest.approx(0.04)


class TestDirectionalReadings:
    """Tests for momentum and price action."""

    def test_should_detect_upward_momentum(self, candle_factory) -> None:
        """Test two up moves within a three-candle window."""
        reading = momentum(candle_factory([1.0, 2.0, 3.0]), 3)

        assert reading.direction == Direction.UP
        assert reading.strength == pytest.approx(2 / 3)

    def test_should_read_neutral_momentum_on_flat_prices(self, candle_factory) -> None:
        """Test that no moves read NEUTRAL."""
        reading = momentum(candle_factory([5.0, 5.0, 5.0, 5.0]), 3)

        assert reading.direction == Direction.NEUTRAL
        assert reading.strength == 0.0

    def test_should_detect_downward_price_action(self, candle_factory) -> None:
        """Test a large drop."""
        reading = price_action(candle_factory([100.0, 99.0]))

        assert reading.direction == Direction.DOWN
        assert reading.strength == 1.0

    def test_should_scale_price_action_strength(self, candle_factory) -> None:
        """Test strength from the tick change alone (flat body)."""
        reading = price_action(candle_factory([100.0, 100.02]))

        assert reading.direction == Direction.UP
        assert reading.strength == pytest.approx(0.4)

    def test_should_read_sideways_below_threshold(self, candle_factory) -> None:
        """Test that moves within 0.01% are ignored."""
        reading = price_action(candle_factory([100.0, 100.005]))

        assert reading.direction == Direction.SIDEWAYS
        assert reading.strength == 0.0
