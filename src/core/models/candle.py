"""
Candle domain model.

A candle is one interval's open/high/low/close/volume bar. Sequences of
candles handed to strategies are expected to be ascending by timestamp;
that ordering is the caller's responsibility and is not checked here.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from src.core.exceptions.backtest import ValidationError
from src.core.types.financial import ZERO


@dataclass(frozen=True, slots=True)
class Candle:
    """Represents one OHLCV bar."""

    timestamp: datetime
    open: float
    high: float
    low: float
    close: float
    volume: float

    def __post_init__(self) -> None:
        """Validate OHLCV relationships after initialization."""
        for field_name in ("open", "high", "low", "close"):
            value = getattr(self, field_name)
            if value <= ZERO:
                raise ValidationError(f"{field_name} must be positive, got {value}")
        if self.high < max(self.open, self.close):
            raise ValidationError(
                f"high {self.high} is below max(open, close) {max(self.open, self.close)}"
            )
        if self.low > min(self.open, self.close):
            raise ValidationError(
                f"low {self.low} is above min(open, close) {min(self.open, self.close)}"
            )
        if self.volume < ZERO:
            raise ValidationError(f"volume must be non-negative, got {self.volume}")

    @property
    def body_size(self) -> float:
        """Absolute open-to-close distance."""
        return abs(self.close - self.open)


CandleWindow = Sequence[Candle]


def closes(candles: CandleWindow) -> list[float]:
    """Extract close prices in window order."""
    return [candle.close for candle in candles]


def volumes(candles: CandleWindow) -> list[float]:
    """Extract volumes in window order."""
    return [candle.volume for candle in candles]
