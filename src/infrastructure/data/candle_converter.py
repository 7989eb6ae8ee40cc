"""
Conversion between OHLCV DataFrames and Candle sequences.
"""

from collections.abc import Sequence

import pandas as pd

from src.core.models.candle import Candle

from .ohlcv_validator import REQUIRED_COLUMNS, OHLCVValidator


def _to_timestamps(column: pd.Series) -> pd.Series:
    """Parse epoch-millisecond or datetime-like timestamps as UTC."""
    if pd.api.types.is_numeric_dtype(column):
        return pd.to_datetime(column, unit="ms", utc=True)
    return pd.to_datetime(column, utc=True)


def candles_from_dataframe(data: pd.DataFrame, validator: OHLCVValidator | None = None) -> list[Candle]:
    """
    Convert an OHLCV frame into candles.

    Args:
        data: Frame with timestamp/open/high/low/close/volume columns;
            timestamps as epoch milliseconds or datetimes
        validator: Validator to run first (a strict default if omitted)

    Returns:
        Candles in frame order

    Raises:
        ValidationError: If the frame fails validation
    """
    (validator or OHLCVValidator()).validate_data(data)
    if data.empty:
        return []

    timestamps = _to_timestamps(data["timestamp"])
    return [
        Candle(
            timestamp=timestamp.to_pydatetime(),
            open=float(row.open),
            high=float(row.high),
            low=float(row.low),
            close=float(row.close),
            volume=float(row.volume),
        )
        for timestamp, row in zip(timestamps, data.itertuples(index=False))
    ]


def candles_to_dataframe(candles: Sequence[Candle]) -> pd.DataFrame:
    """Convert candles into an OHLCV frame with a datetime timestamp column."""
    return pd.DataFrame(
        [
            {
                "timestamp": candle.timestamp,
                "open": candle.open,
                "high": candle.high,
                "low": candle.low,
                "close": candle.close,
                "volume": candle.volume,
            }
            for candle in candles
        ],
        columns=REQUIRED_COLUMNS,
    )
