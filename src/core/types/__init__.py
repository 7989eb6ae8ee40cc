"""
Core type definitions and utilities.
"""

# Re-export financial utilities for easy access
from .financial import (
    HUNDRED,
    INDICATOR_DECIMALS,
    ONE,
    PERCENTAGE_DECIMALS,
    PRICE_DECIMALS,
    ZERO,
    clamp,
    percent_change,
    relative_change,
    round_indicator,
    round_percentage,
    round_price,
)

__all__ = [
    # Utility functions
    "round_price",
    "round_percentage",
    "round_indicator",
    "clamp",
    "relative_change",
    "percent_change",
    # Constants
    "PERCENTAGE_DECIMALS",
    "PRICE_DECIMALS",
    "INDICATOR_DECIMALS",
    "ZERO",
    "ONE",
    "HUNDRED",
]
