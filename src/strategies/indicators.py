"""
Technical indicator calculations over candle windows.

Every function reads only the tail of the values it is given, so callers may
pass either a full history or a pre-sliced tail as long as the tail is longer
than the function's own lookback.
"""

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from src.core.constants import (
    RSI_MAX,
    RSI_NEUTRAL,
    SCALP_MOMENTUM_WINDOW,
    SCALP_PRICE_ACTION_THRESHOLD,
)
from src.core.enums import Direction
from src.core.models.candle import Candle
from src.core.types.financial import relative_change


@dataclass(frozen=True)
class BollingerBands:
    """Band values for one window."""

    upper: float
    middle: float
    lower: float

    @property
    def width_percent(self) -> float:
        """Band width relative to the middle band, in percent."""
        return (self.upper - self.lower) / self.middle * 100


@dataclass(frozen=True)
class MACDReading:
    """MACD line, signal line and histogram for one window."""

    macd: float
    signal: float
    histogram: float


@dataclass(frozen=True)
class DirectionalReading:
    """Direction plus a strength in [0, 1]."""

    direction: Direction
    strength: float


def sma(values: Sequence[float], period: int) -> float:
    """
    Simple moving average of the last `period` values.

    Args:
        values: Ordered values, oldest first
        period: Averaging period

    Returns:
        The average, or the last value when fewer than `period` values exist
    """
    if len(values) < period:
        return values[-1]
    return float(np.mean(values[-period:]))


def ema(values: Sequence[float], period: int, end: int | None = None) -> float:
    """
    Exponential moving average seeded at the first value of the last `period`.

    The recurrence runs only across the trailing `period` values ending at
    `end` (exclusive); with fewer values the last value is returned.
    """
    stop = len(values) if end is None else end
    if stop < period:
        return values[stop - 1]

    multiplier = 2 / (period + 1)
    result = values[stop - period]
    for i in range(stop - period + 1, stop):
        result = values[i] * multiplier + result * (1 - multiplier)
    return result


def rsi(values: Sequence[float], period: int) -> float:
    """
    Relative strength index from simple average gains and losses.

    Uses the trailing `period` close-to-close changes. Returns the neutral
    reading (50) when fewer than period + 1 values exist and 100 when there
    were no losses.
    """
    if len(values) < period + 1:
        return RSI_NEUTRAL

    changes = np.diff(np.asarray(values[-(period + 1) :], dtype=float))
    gains = float(changes[changes > 0].sum())
    losses = float(-changes[changes <= 0].sum())

    avg_gain = gains / period
    avg_loss = losses / period
    if avg_loss == 0:
        return RSI_MAX

    rs = avg_gain / avg_loss
    return RSI_MAX - RSI_MAX / (1 + rs)


def bollinger_bands(values: Sequence[float], period: int, standard_deviations: float) -> BollingerBands:
    """Middle band SMA with bands at +- k population standard deviations."""
    recent = np.asarray(values[-period:], dtype=float)
    middle = float(recent.mean())
    deviation = float(np.sqrt(((recent - middle) ** 2).sum() / period))
    return BollingerBands(
        upper=middle + deviation * standard_deviations,
        middle=middle,
        lower=middle - deviation * standard_deviations,
    )


def macd(
    values: Sequence[float], fast_period: int, slow_period: int, signal_period: int
) -> MACDReading | None:
    """
    MACD line with a simple-average signal line.

    The signal line averages the MACD value at each of the last
    `signal_period` positions, each derived from its own prefix. Returns None
    when fewer than slow_period + signal_period values exist.
    """
    length = len(values)
    if length < slow_period + signal_period:
        return None

    line = ema(values, fast_period) - ema(values, slow_period)

    history = [
        ema(values, fast_period, end=i + 1) - ema(values, slow_period, end=i + 1)
        for i in range(length - signal_period, length)
        if i >= slow_period
    ]
    signal = sum(history) / len(history)
    return MACDReading(macd=line, signal=signal, histogram=line - signal)


def coefficient_of_variation(values: Sequence[float], period: int) -> float:
    """Population standard deviation over mean for the last `period` values."""
    recent = np.asarray(values[-period:], dtype=float)
    mean = float(recent.mean())
    return float(np.sqrt(((recent - mean) ** 2).mean())) / mean


def average(values: Sequence[float], period: int) -> float:
    """Mean of the last `period` values (or of all values when fewer exist)."""
    return float(np.mean(values[-period:]))


def momentum(candles: Sequence[Candle], window: int = SCALP_MOMENTUM_WINDOW) -> DirectionalReading:
    """
    Count up and down closes across the last `window` candles.

    Strength is |ups - downs| divided by the window length.
    """
    recent = candles[-window:]
    up_moves = 0
    down_moves = 0
    for previous, current in zip(recent, recent[1:]):
        change = current.close - previous.close
        if change > 0:
            up_moves += 1
        elif change < 0:
            down_moves += 1

    strength = abs(up_moves - down_moves) / len(recent)
    if up_moves > down_moves:
        direction = Direction.UP
    elif down_moves > up_moves:
        direction = Direction.DOWN
    else:
        direction = Direction.NEUTRAL
    return DirectionalReading(direction=direction, strength=strength)


def price_action(candles: Sequence[Candle]) -> DirectionalReading:
    """
    Direction of the latest close-to-close move.

    Strength mixes the tick change and the candle body, capped at 1. Moves
    within +-0.01% read SIDEWAYS with zero strength.
    """
    current = candles[-1]
    previous = candles[-2]

    instant_change = relative_change(current.close, previous.close)
    body_size = current.body_size / current.open
    strength = min(1.0, abs(instant_change) * 2000 + body_size * 100)

    if instant_change > SCALP_PRICE_ACTION_THRESHOLD:
        return DirectionalReading(direction=Direction.UP, strength=strength)
    if instant_change < -SCALP_PRICE_ACTION_THRESHOLD:
        return DirectionalReading(direction=Direction.DOWN, strength=strength)
    return DirectionalReading(direction=Direction.SIDEWAYS, strength=0.0)


def candle_spread(candle: Candle) -> float:
    """High-low range relative to the close."""
    return (candle.high - candle.low) / candle.close
