"""
Base strategy with the warm-up guard and signal latch.

Subclasses implement `_evaluate` and go through `_emit` for every BUY/SELL,
which enforces the latch: once a BUY is emitted no further BUY is emitted
until a SELL has been, and vice versa. HOLD never latches.
"""

from abc import abstractmethod
from typing import Any

from loguru import logger

from src.core.enums import SignalType
from src.core.exceptions.backtest import ValidationError
from src.core.interfaces.strategy import IStrategy
from src.core.models.candle import Candle, CandleWindow
from src.core.models.signal import Signal


class BaseStrategy(IStrategy):
    """Common latch and warm-up handling for all strategies."""

    # Window lengths at which an indicator snapshot is logged
    snapshot_interval: int = 100

    def __init__(self, name: str, parameters: dict[str, Any]) -> None:
        self._name = name
        self._parameters = dict(parameters)
        self._last_signal = SignalType.HOLD

    @property
    def name(self) -> str:
        return self._name

    @property
    def parameters(self) -> dict[str, Any]:
        return dict(self._parameters)

    @property
    def last_signal(self) -> SignalType:
        """Last non-HOLD signal type emitted (HOLD before the first one)."""
        return self._last_signal

    def analyze(self, window: CandleWindow) -> Signal:
        """
        Produce a signal for the last candle of the window.

        Args:
            window: Non-empty candles ascending by time, ending "now"

        Returns:
            A fresh Signal; a zero-confidence HOLD during warm-up

        Raises:
            ValidationError: If the window is empty
        """
        if not window:
            raise ValidationError(f"{self._name} requires a non-empty candle window")

        if len(window) < self.min_lookback:
            return self._hold(window[-1])

        return self._evaluate(window)

    def reset(self) -> None:
        """Clear the latch so the instance can replay a new series from the start."""
        self._last_signal = SignalType.HOLD

    @abstractmethod
    def _evaluate(self, window: CandleWindow) -> Signal:
        """Run indicator math on a window at least `min_lookback` long."""
        pass

    def _hold(self, candle: Candle, **metadata: Any) -> Signal:
        return Signal.hold(candle, **metadata)

    def _can_emit(self, signal_type: SignalType) -> bool:
        return self._last_signal != signal_type

    def _emit(
        self, signal_type: SignalType, candle: Candle, confidence: float, **metadata: Any
    ) -> Signal:
        """Build a BUY/SELL signal and latch its type."""
        self._last_signal = signal_type
        logger.debug(
            f"{self._name}: {signal_type} at {candle.close:.2f} "
            f"(confidence {confidence:.3f}) {metadata}"
        )
        return Signal.at_close(signal_type, candle, confidence, **metadata)

    def _should_snapshot(self, window: CandleWindow) -> bool:
        return len(window) % self.snapshot_interval == 0

    def __repr__(self) -> str:
        params = ", ".join(f"{key}={value!r}" for key, value in self._parameters.items())
        return f"{type(self).__name__}({params})"
