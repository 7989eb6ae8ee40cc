"""
Unit tests for validation helpers.
"""

import pytest

from src.core.exceptions.backtest import ValidationError
from src.core.utils.validation import (
    validate_non_negative,
    validate_ordered,
    validate_percentage,
    validate_period,
    validate_positive,
)


class TestValidatePositive:
    """Tests for validate_positive."""

    def test_should_return_positive_value(self) -> None:
        """Test that positive values pass through."""
        assert validate_positive(1.5, "amount") == 1.5

    @pytest.mark.parametrize("value", [0, -1, -0.01])
    def test_should_reject_non_positive_values(self, value: float) -> None:
        """Test that zero and negatives are rejected."""
        with pytest.raises(ValidationError, match="amount must be positive"):
            validate_positive(value, "amount")


class TestValidateNonNegative:
    """Tests for validate_non_negative."""

    def test_should_accept_zero(self) -> None:
        """Test that zero is allowed."""
        assert validate_non_negative(0.0, "k") == 0.0

    def test_should_reject_negative_value(self) -> None:
        """Test that negatives are rejected."""
        with pytest.raises(ValidationError, match="k must be non-negative"):
            validate_non_negative(-0.5, "k")


class TestValidatePeriod:
    """Tests for validate_period."""

    def test_should_accept_positive_integer(self) -> None:
        """Test a normal period."""
        assert validate_period(14, "period") == 14

    @pytest.mark.parametrize("value", [0, -3])
    def test_should_reject_non_positive_period(self, value: int) -> None:
        """Test that zero and negative periods are rejected."""
        with pytest.raises(ValidationError, match="period must be positive"):
            validate_period(value, "period")

    @pytest.mark.parametrize("value", [14.0, "14", True])
    def test_should_reject_non_integer_period(self, value) -> None:
        """Test that floats, strings and booleans are rejected."""
        with pytest.raises(ValidationError, match="period must be an integer"):
            validate_period(value, "period")


class TestValidatePercentage:
    """Tests for validate_percentage."""

    @pytest.mark.parametrize("value", [0, 30, 100])
    def test_should_accept_bounds_inclusive(self, value: float) -> None:
        """Test values within [0, 100]."""
        assert validate_percentage(value, "threshold") == value

    @pytest.mark.parametrize("value", [-1, 100.5])
    def test_should_reject_out_of_range(self, value: float) -> None:
        """Test values outside [0, 100]."""
        with pytest.raises(ValidationError, match="threshold must be between 0 and 100"):
            validate_percentage(value, "threshold")


class TestValidateOrdered:
    """Tests for validate_ordered."""

    def test_should_accept_strictly_ordered_values(self) -> None:
        """Test lower < upper."""
        assert validate_ordered(5, 20, "short_period", "long_period") == (5, 20)

    @pytest.mark.parametrize(("lower", "upper"), [(20, 20), (30, 20)])
    def test_should_reject_unordered_values(self, lower: int, upper: int) -> None:
        """Test lower >= upper."""
        with pytest.raises(ValidationError, match="short_period must be less than long_period"):
            validate_ordered(lower, upper, "short_period", "long_period")
