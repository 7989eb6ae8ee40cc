"""
Backtesting and strategy comparison.
"""

from .backtester import Backtester
from .comparator import StrategyComparator, rank_comparisons
from .result_frames import comparison_to_frame, trades_to_frame

__all__ = [
    "Backtester",
    "StrategyComparator",
    "comparison_to_frame",
    "rank_comparisons",
    "trades_to_frame",
]
