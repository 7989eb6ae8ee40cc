"""
Signal domain model.

A signal is a strategy's recommendation for the latest candle of a window.
Signals are produced fresh on every analyze() call and never stored by the
strategy that produced them.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from src.core.enums import SignalType
from src.core.exceptions.backtest import ValidationError
from src.core.types.financial import ONE, ZERO

from .candle import Candle


@dataclass
class Signal:
    """A BUY/SELL/HOLD recommendation with a confidence in [0, 1]."""

    type: SignalType
    price: float
    timestamp: datetime
    confidence: float
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate signal data after initialization."""
        if not ZERO <= self.confidence <= ONE:
            raise ValidationError(f"Confidence must be within [0, 1], got {self.confidence}")

    @property
    def is_actionable(self) -> bool:
        """Check if the signal asks for a trade."""
        return self.type.is_actionable

    @classmethod
    def hold(cls, candle: Candle, **metadata: Any) -> "Signal":
        """Create a zero-confidence HOLD priced at the candle's close."""
        return cls(
            type=SignalType.HOLD,
            price=candle.close,
            timestamp=candle.timestamp,
            confidence=ZERO,
            metadata=dict(metadata),
        )

    @classmethod
    def at_close(
        cls, signal_type: SignalType, candle: Candle, confidence: float, **metadata: Any
    ) -> "Signal":
        """Create a signal priced at the candle's close."""
        return cls(
            type=signal_type,
            price=candle.close,
            timestamp=candle.timestamp,
            confidence=confidence,
            metadata=dict(metadata),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert signal to dictionary."""
        return {
            "type": self.type.value,
            "price": self.price,
            "timestamp": self.timestamp.isoformat(),
            "confidence": self.confidence,
            "metadata": dict(self.metadata),
        }
