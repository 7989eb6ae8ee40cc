"""
RSI + moving average combination strategy.
"""

from loguru import logger

from src.core.constants import (
    COMBO_CONFIDENCE_MEDIUM,
    COMBO_CONFIDENCE_STRONG,
    COMBO_CONFIDENCE_WEAK,
    COMBO_MA_LONG_PERIOD,
    COMBO_MA_SHORT_PERIOD,
    COMBO_RSI_OVERBOUGHT,
    COMBO_RSI_OVERSOLD,
    COMBO_RSI_PERIOD,
    COMBO_TREND_STRENGTH_THRESHOLD,
    COMBO_WARMUP_PADDING,
    COMBO_WEAK_BUY_RSI_CEILING,
    COMBO_WEAK_SELL_RSI_FLOOR,
)
from src.core.enums import SignalType
from src.core.models.candle import CandleWindow, closes
from src.core.models.signal import Signal
from src.core.types.financial import round_indicator, round_percentage, round_price
from src.core.utils.validation import validate_ordered, validate_percentage, validate_period

from .base import BaseStrategy
from .indicators import rsi, sma


class RSIMAComboStrategy(BaseStrategy):
    """
    Confirm RSI threshold crossings with moving average trend.

    Each side is a priority ladder where the first matching rung wins:
    RSI recovery with a fresh MA cross (0.9), RSI recovery inside a trend
    stronger than 0.1% (0.7), MA cross with RSI not yet stretched (0.5).
    """

    def __init__(
        self,
        rsi_period: int = COMBO_RSI_PERIOD,
        rsi_oversold: float = COMBO_RSI_OVERSOLD,
        rsi_overbought: float = COMBO_RSI_OVERBOUGHT,
        ma_short_period: int = COMBO_MA_SHORT_PERIOD,
        ma_long_period: int = COMBO_MA_LONG_PERIOD,
    ):
        validate_period(rsi_period, "rsi_period")
        validate_percentage(rsi_oversold, "rsi_oversold")
        validate_percentage(rsi_overbought, "rsi_overbought")
        validate_ordered(rsi_oversold, rsi_overbought, "rsi_oversold", "rsi_overbought")
        validate_period(ma_short_period, "ma_short_period")
        validate_period(ma_long_period, "ma_long_period")
        validate_ordered(ma_short_period, ma_long_period, "ma_short_period", "ma_long_period")
        super().__init__(
            "RSI + MA Combo",
            {
                "rsi_period": rsi_period,
                "rsi_oversold": rsi_oversold,
                "rsi_overbought": rsi_overbought,
                "ma_short_period": ma_short_period,
                "ma_long_period": ma_long_period,
            },
        )
        self.rsi_period = rsi_period
        self.rsi_oversold = rsi_oversold
        self.rsi_overbought = rsi_overbought
        self.ma_short_period = ma_short_period
        self.ma_long_period = ma_long_period

    @property
    def min_lookback(self) -> int:
        return max(self.rsi_period, self.ma_long_period) + COMBO_WARMUP_PADDING

    def _evaluate(self, window: CandleWindow) -> Signal:
        tail_length = max(self.rsi_period + 2, self.ma_long_period + 1)
        prices = closes(window[-tail_length:])
        previous = prices[:-1]
        candle = window[-1]

        current_rsi = rsi(prices, self.rsi_period)
        prev_rsi = rsi(previous, self.rsi_period)
        short_ma = sma(prices, self.ma_short_period)
        long_ma = sma(prices, self.ma_long_period)
        prev_short_ma = sma(previous, self.ma_short_period)
        prev_long_ma = sma(previous, self.ma_long_period)

        bullish_trend = short_ma > long_ma
        bearish_trend = short_ma < long_ma
        trend_strength = abs((short_ma - long_ma) / long_ma)
        if bullish_trend:
            trend = "BULLISH"
        elif bearish_trend:
            trend = "BEARISH"
        else:
            trend = "SIDEWAYS"

        oversold_recovery = prev_rsi <= self.rsi_oversold and current_rsi > self.rsi_oversold
        ma_up_cross = prev_short_ma <= prev_long_ma and short_ma > long_ma
        strong_bullish = bullish_trend and trend_strength > COMBO_TREND_STRENGTH_THRESHOLD

        overbought_decline = prev_rsi >= self.rsi_overbought and current_rsi < self.rsi_overbought
        ma_down_cross = prev_short_ma >= prev_long_ma and short_ma < long_ma
        strong_bearish = bearish_trend and trend_strength > COMBO_TREND_STRENGTH_THRESHOLD

        metadata = {
            "rsi": round_indicator(current_rsi),
            "prev_rsi": round_indicator(prev_rsi),
            "short_ma": round_price(short_ma),
            "long_ma": round_price(long_ma),
            "trend": trend,
            "trend_strength_pct": round_percentage(trend_strength * 100),
        }

        if self._should_snapshot(window):
            logger.debug(
                f"Combo snapshot: RSI {current_rsi:.1f}, MA {short_ma:.2f}/{long_ma:.2f}, "
                f"{trend} ({trend_strength * 100:.2f}%)"
            )

        if self._can_emit(SignalType.BUY):
            if oversold_recovery and ma_up_cross:
                return self._emit(SignalType.BUY, candle, COMBO_CONFIDENCE_STRONG, tier="strong", **metadata)
            if oversold_recovery and strong_bullish:
                return self._emit(SignalType.BUY, candle, COMBO_CONFIDENCE_MEDIUM, tier="medium", **metadata)
            if ma_up_cross and current_rsi < COMBO_WEAK_BUY_RSI_CEILING:
                return self._emit(SignalType.BUY, candle, COMBO_CONFIDENCE_WEAK, tier="weak", **metadata)

        if self._can_emit(SignalType.SELL):
            if overbought_decline and ma_down_cross:
                return self._emit(SignalType.SELL, candle, COMBO_CONFIDENCE_STRONG, tier="strong", **metadata)
            if overbought_decline and strong_bearish:
                return self._emit(SignalType.SELL, candle, COMBO_CONFIDENCE_MEDIUM, tier="medium", **metadata)
            if ma_down_cross and current_rsi > COMBO_WEAK_SELL_RSI_FLOOR:
                return self._emit(SignalType.SELL, candle, COMBO_CONFIDENCE_WEAK, tier="weak", **metadata)

        return self._hold(candle, **metadata)
