"""
Strategy interface definition.
"""

from abc import ABC, abstractmethod
from typing import Any

from src.core.models.candle import CandleWindow
from src.core.models.signal import Signal


class IStrategy(ABC):
    """Abstract interface for trading strategies.

    Implementations are stateful: each call may update latch or position
    state, so a single instance must be fed windows that only ever grow.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable strategy name."""
        pass

    @property
    @abstractmethod
    def parameters(self) -> dict[str, Any]:
        """Parameters the strategy was constructed with."""
        pass

    @property
    @abstractmethod
    def min_lookback(self) -> int:
        """Minimum window length before indicator math runs."""
        pass

    @abstractmethod
    def analyze(self, window: CandleWindow) -> Signal:
        """Produce a signal for the last candle of a non-empty window."""
        pass
