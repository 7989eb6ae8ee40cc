"""
Unit tests for enum types.
"""

import pytest

from src.core.enums import Direction, PositionSide, SignalType


class TestSignalTypeEnum:
    """Tests for SignalType enum."""

    def test_should_have_correct_values(self) -> None:
        """Test that SignalType enum has correct values."""
        assert SignalType.BUY.value == "BUY"
        assert SignalType.SELL.value == "SELL"
        assert SignalType.HOLD.value == "HOLD"

    def test_should_compare_equal_to_plain_strings(self) -> None:
        """Test that StrEnum members behave as strings."""
        assert SignalType.BUY == "BUY"
        assert f"{SignalType.SELL}" == "SELL"

    def test_should_report_actionable_types(self) -> None:
        """Test that only BUY and SELL are actionable."""
        assert SignalType.BUY.is_actionable is True
        assert SignalType.SELL.is_actionable is True
        assert SignalType.HOLD.is_actionable is False


class TestPositionSideEnum:
    """Tests for PositionSide enum."""

    def test_should_identify_long_side(self) -> None:
        """Test is_long property."""
        assert PositionSide.LONG.is_long is True
        assert PositionSide.SHORT.is_long is False

    def test_should_map_entry_and_exit_signals(self) -> None:
        """Test that each side opens and closes with opposite signals."""
        assert PositionSide.LONG.entry_signal == SignalType.BUY
        assert PositionSide.LONG.exit_signal == SignalType.SELL
        assert PositionSide.SHORT.entry_signal == SignalType.SELL
        assert PositionSide.SHORT.exit_signal == SignalType.BUY

    def test_should_convert_from_entry_signal(self) -> None:
        """Test from_signal for BUY and SELL."""
        assert PositionSide.from_signal(SignalType.BUY) == PositionSide.LONG
        assert PositionSide.from_signal(SignalType.SELL) == PositionSide.SHORT

    def test_should_raise_error_for_hold_signal(self) -> None:
        """Test that HOLD does not open a position."""
        with pytest.raises(ValueError, match="does not open a position"):
            PositionSide.from_signal(SignalType.HOLD)


class TestDirectionEnum:
    """Tests for Direction enum."""

    def test_should_have_all_directions(self) -> None:
        """Test that Direction covers price action and momentum readings."""
        assert {direction.value for direction in Direction} == {"UP", "DOWN", "SIDEWAYS", "NEUTRAL"}
