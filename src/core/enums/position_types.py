"""
Signal and position side enumerations.

This module defines the recommendation types a strategy can emit and the
sides a strategy-internal position can take.
"""

from enum import StrEnum


class SignalType(StrEnum):
    """
    Recommended actions.

    HOLD is the neutral recommendation and never latches.
    """

    BUY = "BUY"
    SELL = "SELL"
    HOLD = "HOLD"

    @property
    def is_actionable(self) -> bool:
        """Check if the signal asks for a trade."""
        return self != self.HOLD


class PositionSide(StrEnum):
    """
    Position sides tracked by strategies with their own bookkeeping.

    Defines whether a position profits from rising or falling prices.
    """

    LONG = "LONG"
    SHORT = "SHORT"

    @property
    def is_long(self) -> bool:
        """Check if position side is long."""
        return self == self.LONG

    @property
    def entry_signal(self) -> SignalType:
        """Signal that opens a position on this side."""
        return SignalType.BUY if self.is_long else SignalType.SELL

    @property
    def exit_signal(self) -> SignalType:
        """Signal that closes a position on this side."""
        return SignalType.SELL if self.is_long else SignalType.BUY

    @classmethod
    def from_signal(cls, signal_type: SignalType) -> "PositionSide":
        """
        Get the side opened by an entry signal.

        Args:
            signal_type: BUY or SELL

        Returns:
            LONG for BUY, SHORT for SELL

        Raises:
            ValueError: If signal_type is HOLD
        """
        if signal_type == SignalType.BUY:
            return cls.LONG
        if signal_type == SignalType.SELL:
            return cls.SHORT
        raise ValueError(f"{signal_type} does not open a position")
