"""
Trade domain model.

Trades are recorded only by the Backtester's own ledger.
"""

from dataclasses import dataclass
from datetime import datetime

from src.core.enums import SignalType
from src.core.exceptions.backtest import ValidationError


@dataclass
class Trade:
    """Represents an executed simulated trade."""

    type: SignalType
    price: float
    timestamp: datetime
    quantity: float

    def __post_init__(self) -> None:
        """Validate trade data after initialization."""
        if not self.type.is_actionable:
            raise ValidationError(f"Trade type must be BUY or SELL, got {self.type}")
        if self.quantity <= 0:
            raise ValidationError(f"Quantity must be positive, got {self.quantity}")
        if self.price <= 0:
            raise ValidationError(f"Price must be positive, got {self.price}")

    def notional_value(self) -> float:
        """Calculate the notional value of the trade."""
        return self.quantity * self.price

    def to_dict(self) -> dict:
        """Convert trade to dictionary."""
        return {
            "type": self.type.value,
            "price": self.price,
            "timestamp": self.timestamp.isoformat(),
            "quantity": self.quantity,
        }
