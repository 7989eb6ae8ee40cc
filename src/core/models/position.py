"""
Strategy-internal position bookkeeping models.

These records belong to strategies that track their own entries (scalping).
They are independent of the Backtester's cash/position accounting.
"""

from dataclasses import dataclass
from datetime import datetime

from src.core.enums import PositionSide
from src.core.exceptions.backtest import ValidationError
from src.core.types.financial import ZERO, percent_change


@dataclass
class ScalpPosition:
    """An open strategy-internal position."""

    side: PositionSide
    entry_price: float
    opened_at: datetime
    candles_held: int = 0

    def __post_init__(self) -> None:
        """Validate position data after initialization."""
        if self.entry_price <= ZERO:
            raise ValidationError(f"Entry price must be positive, got {self.entry_price}")
        if self.candles_held < 0:
            raise ValidationError(f"candles_held must be non-negative, got {self.candles_held}")

    def profit_percent(self, current_price: float) -> float:
        """Calculate unrealized profit in percent for this side.

        Args:
            current_price: Current market price

        Returns:
            Percent move in the position's favour (negative when losing)
        """
        change = percent_change(current_price, self.entry_price)
        return change if self.side.is_long else -change


@dataclass(frozen=True)
class ScalpTradeRecord:
    """A closed strategy-internal trade kept in the rolling ledger."""

    timestamp: datetime
    profit: float

    @property
    def is_win(self) -> bool:
        """Check if the trade closed in profit."""
        return self.profit > ZERO
