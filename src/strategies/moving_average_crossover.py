"""
Moving average crossover strategy.
"""

from loguru import logger

from src.core.constants import (
    MAC_CONFIDENCE_FLOOR,
    MAC_LONG_PERIOD,
    MAC_SHORT_PERIOD,
    MAC_SPREAD_SCALE,
    MAX_SIGNAL_CONFIDENCE,
)
from src.core.enums import SignalType
from src.core.models.candle import CandleWindow, closes
from src.core.models.signal import Signal
from src.core.types.financial import clamp, round_percentage, round_price
from src.core.utils.validation import validate_ordered, validate_period

from .base import BaseStrategy
from .indicators import sma


class MovingAverageCrossover(BaseStrategy):
    """
    Golden/death cross of two simple moving averages of the close.

    BUY when the short SMA crosses above the long SMA between the previous
    and the current candle, SELL on the opposite cross. Confidence grows with
    the relative spread between the averages, kept within [0.5, 0.9].
    """

    snapshot_interval = 50

    def __init__(self, short_period: int = MAC_SHORT_PERIOD, long_period: int = MAC_LONG_PERIOD):
        validate_period(short_period, "short_period")
        validate_period(long_period, "long_period")
        validate_ordered(short_period, long_period, "short_period", "long_period")
        super().__init__(
            "Moving Average Crossover",
            {"short_period": short_period, "long_period": long_period},
        )
        self.short_period = short_period
        self.long_period = long_period

    @property
    def min_lookback(self) -> int:
        return self.long_period

    def _evaluate(self, window: CandleWindow) -> Signal:
        prices = closes(window[-(self.long_period + 1) :])
        previous = prices[:-1]
        candle = window[-1]

        short_ma = sma(prices, self.short_period)
        long_ma = sma(prices, self.long_period)
        # A previous window shorter than long_period falls back to its last close
        prev_short_ma = sma(previous, self.short_period)
        prev_long_ma = sma(previous, self.long_period)

        spread = (short_ma - long_ma) / long_ma
        prev_spread = (prev_short_ma - prev_long_ma) / prev_long_ma
        confidence = clamp(abs(spread) * MAC_SPREAD_SCALE, MAC_CONFIDENCE_FLOOR, MAX_SIGNAL_CONFIDENCE)

        metadata = {
            "short_ma": round_price(short_ma),
            "long_ma": round_price(long_ma),
            "spread_pct": round_percentage(spread * 100),
            "prev_spread_pct": round_percentage(prev_spread * 100),
        }

        if self._should_snapshot(window):
            logger.debug(
                f"MA snapshot at {len(window)} candles: short {short_ma:.2f}, "
                f"long {long_ma:.2f}, spread {spread * 100:.3f}%"
            )

        if prev_short_ma <= prev_long_ma and short_ma > long_ma and self._can_emit(SignalType.BUY):
            return self._emit(SignalType.BUY, candle, confidence, cross="golden", **metadata)
        if prev_short_ma >= prev_long_ma and short_ma < long_ma and self._can_emit(SignalType.SELL):
            return self._emit(SignalType.SELL, candle, confidence, cross="death", **metadata)
        return self._hold(candle, **metadata)
