"""
Shared fixtures for strategy and backtesting tests.
"""

from collections.abc import Sequence
from datetime import UTC, datetime, timedelta

import pytest

from src.core.interfaces.strategy import IStrategy
from src.core.models.candle import Candle
from src.core.models.signal import Signal
from src.infrastructure.data import SampleMarketDataSource

START = datetime(2024, 1, 1, tzinfo=UTC)


def build_candles(
    closes: Sequence[float],
    volumes: Sequence[float] | None = None,
    step: timedelta = timedelta(hours=1),
) -> list[Candle]:
    """Flat-bodied candles (open == high == low == close) at fixed spacing."""
    return [
        Candle(
            timestamp=START + step * i,
            open=close,
            high=close,
            low=close,
            close=close,
            volume=1000.0 if volumes is None else volumes[i],
        )
        for i, close in enumerate(closes)
    ]


def feed_strategy(strategy: IStrategy, candles: Sequence[Candle]) -> list[Signal]:
    """Feed growing windows candles[:1], candles[:2], ... and collect signals."""
    return [strategy.analyze(candles[: i + 1]) for i in range(len(candles))]


@pytest.fixture
def candle_factory():
    """Build candles from a list of closes."""
    return build_candles


@pytest.fixture
def feed():
    """Replay growing windows through a strategy."""
    return feed_strategy


@pytest.fixture
def sample_candles() -> list[Candle]:
    """Deterministic trend-switching series."""
    return SampleMarketDataSource(seed=7).generate(600)
