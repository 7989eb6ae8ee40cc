"""
Trading strategies.

Each strategy turns a growing window of candles into a BUY/SELL/HOLD signal.
"""

from .base import BaseStrategy
from .bollinger_bands import BollingerBandsStrategy
from .macd import MACDStrategy
from .moving_average_crossover import MovingAverageCrossover
from .registry import (
    available_strategies,
    build_default_strategies,
    build_strategy,
    get_strategy_cls,
    register_strategy,
)
from .rsi import RSIStrategy
from .rsi_ma_combo import RSIMAComboStrategy
from .scalping import ScalpingStrategy

__all__ = [
    "BaseStrategy",
    "BollingerBandsStrategy",
    "MACDStrategy",
    "MovingAverageCrossover",
    "RSIMAComboStrategy",
    "RSIStrategy",
    "ScalpingStrategy",
    "available_strategies",
    "build_default_strategies",
    "build_strategy",
    "get_strategy_cls",
    "register_strategy",
]
