"""
OHLCV frame validation.

Checks a DataFrame of candles before it is converted into Candle objects:
structure, numeric types, value ranges, OHLC relationships and ordering.
"""

import pandas as pd
from loguru import logger

from src.core.exceptions.backtest import ValidationError
from src.core.interfaces.data import IDataValidator

REQUIRED_COLUMNS = ["timestamp", "open", "high", "low", "close", "volume"]
PRICE_COLUMNS = ["open", "high", "low", "close"]


class OHLCVValidator(IDataValidator):
    """
    OHLCV data validator.

    Features:
    - Data structure validation (required columns, duplicates)
    - Data type validation for numeric columns
    - Value range validation (positive prices, non-negative volume)
    - OHLC relationship validation
    - Ordering checks (strictly ascending timestamps)
    """

    def __init__(self, require_ascending: bool = True) -> None:
        self.require_ascending = require_ascending

    def validate_data(self, data: pd.DataFrame) -> bool:
        """
        Validate OHLCV data integrity.

        Args:
            data: DataFrame with OHLCV data

        Returns:
            True if data is valid

        Raises:
            ValidationError: If data has integrity issues
        """
        if data.empty:
            return True

        self._validate_data_structure(data)
        self._validate_data_types(data)
        self._validate_data_values(data)
        self._validate_ohlc_relationships(data)
        self._validate_ordering(data)
        return True

    def _validate_data_structure(self, data: pd.DataFrame) -> None:
        missing_columns = set(REQUIRED_COLUMNS) - set(data.columns)
        if missing_columns:
            raise ValidationError(f"Missing required columns: {sorted(missing_columns)}")

        if data["timestamp"].duplicated().any():
            raise ValidationError("Duplicate timestamps found in data")

    def _validate_data_types(self, data: pd.DataFrame) -> None:
        for col in PRICE_COLUMNS + ["volume"]:
            if not pd.api.types.is_numeric_dtype(data[col]):
                raise ValidationError(f"Column {col} must be numeric")

        for col in REQUIRED_COLUMNS:
            if data[col].isna().any():
                raise ValidationError(f"Column {col} contains NaN values")

    def _validate_data_values(self, data: pd.DataFrame) -> None:
        for col in PRICE_COLUMNS:
            if (data[col] <= 0).any():
                raise ValidationError(f"Column {col} contains non-positive values")

        if (data["volume"] < 0).any():
            raise ValidationError("Volume column contains negative values")

    def _validate_ohlc_relationships(self, data: pd.DataFrame) -> None:
        invalid_ohlc = (
            (data["high"] < data["low"])
            | (data["high"] < data["open"])
            | (data["high"] < data["close"])
            | (data["low"] > data["open"])
            | (data["low"] > data["close"])
        )
        if invalid_ohlc.any():
            raise ValidationError(f"Invalid OHLC relationships found in {int(invalid_ohlc.sum())} rows")

    def _validate_ordering(self, data: pd.DataFrame) -> None:
        if data["timestamp"].is_monotonic_increasing:
            return
        if self.require_ascending:
            raise ValidationError("Timestamps are not in ascending order")
        logger.warning("Timestamps are not in ascending order")
