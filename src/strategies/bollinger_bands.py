"""
Bollinger bands mean-reversion strategy.
"""

from loguru import logger

from src.core.constants import (
    BB_DISTANCE_SCALE,
    BB_PERIOD,
    BB_STANDARD_DEVIATIONS,
    MAX_SIGNAL_CONFIDENCE,
)
from src.core.enums import SignalType
from src.core.models.candle import CandleWindow, closes
from src.core.models.signal import Signal
from src.core.types.financial import round_percentage, round_price
from src.core.utils.validation import validate_non_negative, validate_period

from .base import BaseStrategy
from .indicators import BollingerBands, bollinger_bands


class BollingerBandsStrategy(BaseStrategy):
    """
    Buy at or below the lower band, sell at or above the upper band.

    Confidence is ten times the relative distance beyond the band, capped at
    0.9. A close exactly on a band fires with zero confidence.
    """

    def __init__(self, period: int = BB_PERIOD, standard_deviations: float = BB_STANDARD_DEVIATIONS):
        validate_period(period, "period")
        validate_non_negative(standard_deviations, "standard_deviations")
        super().__init__(
            "Bollinger Bands", {"period": period, "standard_deviations": standard_deviations}
        )
        self.period = period
        self.standard_deviations = standard_deviations

    @property
    def min_lookback(self) -> int:
        return self.period

    def calculate_bands(self, window: CandleWindow) -> BollingerBands:
        """Bands over the last `period` closes of a window."""
        return bollinger_bands(closes(window[-self.period :]), self.period, self.standard_deviations)

    def _evaluate(self, window: CandleWindow) -> Signal:
        bands = self.calculate_bands(window)
        candle = window[-1]
        price = candle.close

        metadata = {
            "upper_band": round_price(bands.upper),
            "middle_band": round_price(bands.middle),
            "lower_band": round_price(bands.lower),
            "band_width_pct": round_percentage(bands.width_percent),
        }

        if self._should_snapshot(window):
            if price > bands.upper:
                position = "ABOVE UPPER"
            elif price < bands.lower:
                position = "BELOW LOWER"
            else:
                position = "WITHIN BANDS"
            logger.debug(
                f"BB snapshot at {len(window)} candles: price {price:.2f}, bands "
                f"[{bands.lower:.2f}, {bands.middle:.2f}, {bands.upper:.2f}] {position}"
            )

        if price <= bands.lower and self._can_emit(SignalType.BUY):
            confidence = min(MAX_SIGNAL_CONFIDENCE, (bands.lower - price) / bands.lower * BB_DISTANCE_SCALE)
            return self._emit(SignalType.BUY, candle, confidence, **metadata)

        if price >= bands.upper and self._can_emit(SignalType.SELL):
            confidence = min(MAX_SIGNAL_CONFIDENCE, (price - bands.upper) / bands.upper * BB_DISTANCE_SCALE)
            return self._emit(SignalType.SELL, candle, confidence, **metadata)

        return self._hold(candle, **metadata)
