"""
Data access interfaces.
"""

from abc import ABC, abstractmethod

import pandas as pd

from src.core.models.candle import Candle


class IMarketDataSource(ABC):
    """Abstract interface for market data acquisition.

    Implementations return candles ascending by timestamp with no duplicate
    timestamps.
    """

    @abstractmethod
    async def get_candles(self, symbol: str, interval: str = "1h", limit: int = 1000) -> list[Candle]:
        """Load the most recent `limit` candles for a symbol and interval."""
        pass


class IDataValidator(ABC):
    """Abstract interface for OHLCV frame validation."""

    @abstractmethod
    def validate_data(self, data: pd.DataFrame) -> bool:
        """Validate data integrity."""
        pass
