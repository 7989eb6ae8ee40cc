"""
Unit tests for financial float helpers.
"""

import pytest

from src.core.types import (
    clamp,
    percent_change,
    relative_change,
    round_indicator,
    round_percentage,
    round_price,
)


class TestRounding:
    """Tests for reporting precision helpers."""

    def test_should_round_price_to_cents(self) -> None:
        """Test price rounding."""
        assert round_price(50123.456) == 50123.46

    def test_should_round_percentage_to_four_places(self) -> None:
        """Test percentage rounding."""
        assert round_percentage(12.345678) == 12.3457

    def test_should_round_indicator_to_four_places(self) -> None:
        """Test indicator rounding."""
        assert round_indicator(28.571428) == 28.5714


class TestClamp:
    """Tests for clamp."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(1.4, 0.9), (0.1, 0.5), (0.7, 0.7), (0.5, 0.5), (0.9, 0.9)],
    )
    def test_should_keep_value_within_bounds(self, value: float, expected: float) -> None:
        """Test clamping into [0.5, 0.9]."""
        assert clamp(value, 0.5, 0.9) == expected


class TestChanges:
    """Tests for relative and percent change."""

    def test_should_calculate_relative_change(self) -> None:
        """Test relative change against a reference."""
        assert relative_change(110.0, 100.0) == pytest.approx(0.1)
        assert relative_change(90.0, 100.0) == pytest.approx(-0.1)

    def test_should_calculate_percent_change(self) -> None:
        """Test percent change against a reference."""
        assert percent_change(100.15, 100.0) == pytest.approx(0.15)

    def test_should_raise_on_zero_reference(self) -> None:
        """Test that a zero reference is not silently accepted."""
        with pytest.raises(ZeroDivisionError):
            relative_change(1.0, 0.0)
