"""
Deterministic synthetic market data.

Generates trend-switching candles for demos and tests. The trend is redrawn
every 100-200 candles so moving average strategies see crossovers, with
+-0.75% noise per candle on top.
"""

from datetime import UTC, datetime, timedelta

import numpy as np
from loguru import logger

from src.core.exceptions.backtest import DataError
from src.core.interfaces.data import IMarketDataSource
from src.core.models.candle import Candle

INTERVAL_SECONDS = {
    "1m": 60,
    "5m": 300,
    "15m": 900,
    "30m": 1800,
    "1h": 3600,
    "4h": 14400,
    "1d": 86400,
}

DEFAULT_START = datetime(2024, 1, 1, tzinfo=UTC)


def interval_to_timedelta(interval: str) -> timedelta:
    """
    Convert an interval label such as "5m" or "1h".

    Raises:
        DataError: If the interval is not supported
    """
    try:
        return timedelta(seconds=INTERVAL_SECONDS[interval.lower()])
    except KeyError as e:
        raise DataError(
            f"Unsupported interval: {interval}. Supported intervals: {', '.join(INTERVAL_SECONDS)}"
        ) from e


class SampleMarketDataSource(IMarketDataSource):
    """Seeded random-walk candle generator."""

    def __init__(
        self,
        seed: int = 42,
        start_price: float = 50000.0,
        start_time: datetime = DEFAULT_START,
        initial_trend: float = 0.001,
    ) -> None:
        if start_price <= 0:
            raise DataError(f"start_price must be positive, got {start_price}")
        self.seed = seed
        self.start_price = start_price
        self.start_time = start_time
        self.initial_trend = initial_trend

    async def get_candles(self, symbol: str, interval: str = "1h", limit: int = 1000) -> list[Candle]:
        """Generate `limit` candles; the symbol only labels the log line."""
        candles = self.generate(limit, interval)
        logger.info(f"Generated {len(candles)} {interval} sample candles for {symbol.upper()}")
        return candles

    def generate(self, count: int, interval: str = "1h") -> list[Candle]:
        """
        Generate a candle series.

        Args:
            count: Number of candles
            interval: Spacing between candle timestamps

        Returns:
            Candles ascending by timestamp; identical for identical seeds
        """
        if count < 0:
            raise DataError(f"count must be non-negative, got {count}")

        step = interval_to_timedelta(interval)
        rng = np.random.default_rng(self.seed)

        candles: list[Candle] = []
        price = self.start_price
        trend = self.initial_trend
        trend_counter = 0

        for i in range(count):
            trend_counter += 1
            if trend_counter > 100 + rng.random() * 100:
                trend = (rng.random() - 0.5) * 0.003
                trend_counter = 0

            change = trend + (rng.random() - 0.5) * 0.015
            open_price = price
            close_price = price * (1 + change)
            high_price = max(open_price, close_price) * (1 + rng.random() * 0.005)
            low_price = min(open_price, close_price) * (1 - rng.random() * 0.005)
            volume = 800 + rng.random() * 400

            candles.append(
                Candle(
                    timestamp=self.start_time + step * i,
                    open=open_price,
                    high=high_price,
                    low=low_price,
                    close=close_price,
                    volume=volume,
                )
            )
            price = close_price

        return candles
