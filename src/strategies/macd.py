"""
MACD signal-line crossover strategy.
"""

from loguru import logger

from src.core.constants import (
    MACD_CONFIDENCE_MEDIUM,
    MACD_CONFIDENCE_STRONG,
    MACD_CONFIDENCE_WEAK,
    MACD_FAST_PERIOD,
    MACD_SIGNAL_PERIOD,
    MACD_SLOW_PERIOD,
    MACD_WARMUP_PADDING,
)
from src.core.enums import SignalType
from src.core.models.candle import CandleWindow, closes
from src.core.models.signal import Signal
from src.core.types.financial import round_indicator
from src.core.utils.validation import validate_ordered, validate_period

from .base import BaseStrategy
from .indicators import MACDReading, macd


def histogram_momentum(current: MACDReading, previous: MACDReading) -> str:
    """Classify the change of the histogram between two readings."""
    if current.histogram > previous.histogram:
        return "INCREASING"
    if current.histogram < previous.histogram:
        return "DECREASING"
    return "STABLE"


class MACDStrategy(BaseStrategy):
    """
    Trade crossovers of the MACD line and its signal line.

    The signal line is the simple average of the MACD values at the last
    `signal_period` candles. Confidence is tiered: 0.8 when the MACD is on
    the trade's side of zero, 0.6 when only the histogram is, else 0.4.
    """

    def __init__(
        self,
        fast_period: int = MACD_FAST_PERIOD,
        slow_period: int = MACD_SLOW_PERIOD,
        signal_period: int = MACD_SIGNAL_PERIOD,
    ):
        validate_period(fast_period, "fast_period")
        validate_period(slow_period, "slow_period")
        validate_period(signal_period, "signal_period")
        validate_ordered(fast_period, slow_period, "fast_period", "slow_period")
        super().__init__(
            "MACD Strategy",
            {"fast_period": fast_period, "slow_period": slow_period, "signal_period": signal_period},
        )
        self.fast_period = fast_period
        self.slow_period = slow_period
        self.signal_period = signal_period

    @property
    def min_lookback(self) -> int:
        return self.slow_period + self.signal_period + MACD_WARMUP_PADDING

    def calculate_macd(self, window: CandleWindow) -> MACDReading | None:
        """MACD reading for a window, None when it is too short."""
        tail = closes(window[-(self.slow_period + self.signal_period) :])
        return macd(tail, self.fast_period, self.slow_period, self.signal_period)

    def _evaluate(self, window: CandleWindow) -> Signal:
        prices = closes(window[-(self.slow_period + self.signal_period + 1) :])
        candle = window[-1]

        current = macd(prices, self.fast_period, self.slow_period, self.signal_period)
        previous = macd(prices[:-1], self.fast_period, self.slow_period, self.signal_period)
        if current is None or previous is None:
            return self._hold(candle)

        bullish_crossover = previous.macd <= previous.signal and current.macd > current.signal
        bearish_crossover = previous.macd >= previous.signal and current.macd < current.signal
        trend = "BULLISH" if current.macd > current.signal else "BEARISH"
        momentum = histogram_momentum(current, previous)

        metadata = {
            "macd": round_indicator(current.macd),
            "signal": round_indicator(current.signal),
            "histogram": round_indicator(current.histogram),
            "trend": trend,
            "momentum": momentum,
        }

        if self._should_snapshot(window):
            logger.debug(
                f"MACD snapshot: {current.macd:.4f}/{current.signal:.4f}, "
                f"histogram {current.histogram:.4f}, {trend}, {momentum}"
            )

        if bullish_crossover and self._can_emit(SignalType.BUY):
            if current.macd > 0:
                confidence = MACD_CONFIDENCE_STRONG
            elif current.histogram > 0:
                confidence = MACD_CONFIDENCE_MEDIUM
            else:
                confidence = MACD_CONFIDENCE_WEAK
            return self._emit(SignalType.BUY, candle, confidence, **metadata)

        if bearish_crossover and self._can_emit(SignalType.SELL):
            if current.macd < 0:
                confidence = MACD_CONFIDENCE_STRONG
            elif current.histogram < 0:
                confidence = MACD_CONFIDENCE_MEDIUM
            else:
                confidence = MACD_CONFIDENCE_WEAK
            return self._emit(SignalType.SELL, candle, confidence, **metadata)

        return self._hold(candle, **metadata)
