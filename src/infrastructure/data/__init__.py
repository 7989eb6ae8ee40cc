"""
Market data infrastructure.

This module provides OHLCV validation, DataFrame conversion and a synthetic
market data source.
"""

from .candle_converter import candles_from_dataframe, candles_to_dataframe
from .ohlcv_validator import OHLCVValidator
from .sample_data import SampleMarketDataSource, interval_to_timedelta

__all__ = [
    "OHLCVValidator",
    "SampleMarketDataSource",
    "candles_from_dataframe",
    "candles_to_dataframe",
    "interval_to_timedelta",
]
