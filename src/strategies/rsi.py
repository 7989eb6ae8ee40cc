"""
RSI threshold-crossing strategy.
"""

from loguru import logger

from src.core.constants import (
    MAX_SIGNAL_CONFIDENCE,
    RSI_DEPTH_ANCHOR_HIGH,
    RSI_DEPTH_ANCHOR_LOW,
    RSI_DEPTH_SCALE,
    RSI_OVERBOUGHT,
    RSI_OVERSOLD,
    RSI_PERIOD,
)
from src.core.enums import SignalType
from src.core.models.candle import CandleWindow, closes
from src.core.models.signal import Signal
from src.core.types.financial import round_indicator
from src.core.utils.validation import validate_ordered, validate_percentage, validate_period

from .base import BaseStrategy
from .indicators import rsi


def rsi_status(value: float, oversold: float, overbought: float) -> str:
    """Classify an RSI reading."""
    if value < oversold:
        return "OVERSOLD"
    if value > overbought:
        return "OVERBOUGHT"
    return "NORMAL"


class RSIStrategy(BaseStrategy):
    """
    Buy the recovery out of oversold, sell the decline out of overbought.

    BUY when RSI crosses up through the oversold threshold; the deeper the
    previous reading, the higher the confidence. SELL mirrors at overbought.
    """

    def __init__(
        self,
        period: int = RSI_PERIOD,
        oversold_threshold: float = RSI_OVERSOLD,
        overbought_threshold: float = RSI_OVERBOUGHT,
    ):
        validate_period(period, "period")
        validate_percentage(oversold_threshold, "oversold_threshold")
        validate_percentage(overbought_threshold, "overbought_threshold")
        validate_ordered(
            oversold_threshold, overbought_threshold, "oversold_threshold", "overbought_threshold"
        )
        super().__init__(
            "RSI Strategy",
            {
                "period": period,
                "oversold_threshold": oversold_threshold,
                "overbought_threshold": overbought_threshold,
            },
        )
        self.period = period
        self.oversold_threshold = oversold_threshold
        self.overbought_threshold = overbought_threshold

    @property
    def min_lookback(self) -> int:
        return self.period + 1

    def calculate_rsi(self, window: CandleWindow) -> float:
        """RSI of a window using this strategy's period."""
        return rsi(closes(window[-(self.period + 1) :]), self.period)

    def _evaluate(self, window: CandleWindow) -> Signal:
        prices = closes(window[-(self.period + 2) :])
        candle = window[-1]

        current_rsi = rsi(prices, self.period)
        # Neutral 50 when the previous window is exactly `period` long
        prev_rsi = rsi(prices[:-1], self.period)
        status = rsi_status(current_rsi, self.oversold_threshold, self.overbought_threshold)

        metadata = {
            "rsi": round_indicator(current_rsi),
            "prev_rsi": round_indicator(prev_rsi),
            "status": status,
        }

        if self._should_snapshot(window):
            logger.debug(f"RSI snapshot at {len(window)} candles: {current_rsi:.2f} ({status})")

        if (
            prev_rsi <= self.oversold_threshold
            and current_rsi > self.oversold_threshold
            and self._can_emit(SignalType.BUY)
        ):
            depth = self.oversold_threshold - min(prev_rsi, RSI_DEPTH_ANCHOR_LOW)
            confidence = min(MAX_SIGNAL_CONFIDENCE, depth / RSI_DEPTH_SCALE)
            return self._emit(SignalType.BUY, candle, confidence, **metadata)

        if (
            prev_rsi >= self.overbought_threshold
            and current_rsi < self.overbought_threshold
            and self._can_emit(SignalType.SELL)
        ):
            height = max(prev_rsi, RSI_DEPTH_ANCHOR_HIGH) - self.overbought_threshold
            confidence = min(MAX_SIGNAL_CONFIDENCE, height / RSI_DEPTH_SCALE)
            return self._emit(SignalType.SELL, candle, confidence, **metadata)

        return self._hold(candle, **metadata)
