"""
Short-horizon scalping strategy with its own position bookkeeping.

Unlike the other strategies this one remembers the entries it recommended
and recommends the matching exit later. That bookkeeping is separate from
any portfolio simulating its signals.
"""

import dataclasses
from datetime import timedelta
from typing import Any

import numpy as np
from loguru import logger

from src.core.constants import (
    SCALP_CONFIDENCE_AGGRESSIVE,
    SCALP_CONFIDENCE_INSTANT,
    SCALP_CONFIDENCE_MAX_HOLD,
    SCALP_CONFIDENCE_QUICK_PROFIT,
    SCALP_CONFIDENCE_REVERSAL,
    SCALP_CONFIDENCE_STOP_LOSS,
    SCALP_INSTANT_MOVE_THRESHOLD,
    SCALP_MAX_HOLD_TIME,
    SCALP_MIN_CANDLES_BEFORE_REVERSAL_EXIT,
    SCALP_MIN_VOLATILITY,
    SCALP_MOMENTUM_STRENGTH_THRESHOLD,
    SCALP_MOMENTUM_WINDOW,
    SCALP_PROFIT_TAKE_FRACTION,
    SCALP_QUICK_PROFIT_TARGET,
    SCALP_SPREAD_THRESHOLD,
    SCALP_STOP_LOSS_MULTIPLE,
    SCALP_TRADE_LEDGER_WINDOW_SECONDS,
    SCALP_VOLATILITY_PERIOD,
    SCALP_VOLUME_AVERAGE_PERIOD,
    SCALP_VOLUME_BOOST,
    SCALP_VOLUME_THRESHOLD,
    SCALP_WARMUP_PADDING,
)
from src.core.enums import Direction, PositionSide, SignalType
from src.core.models.candle import Candle, CandleWindow, closes, volumes
from src.core.models.position import ScalpPosition, ScalpTradeRecord
from src.core.models.signal import Signal
from src.core.types.financial import relative_change, round_indicator, round_percentage
from src.core.utils.validation import validate_non_negative, validate_period, validate_positive

from .base import BaseStrategy
from .indicators import average, candle_spread, coefficient_of_variation, momentum, price_action


class ScalpingStrategy(BaseStrategy):
    """
    Enter on micro moves, exit quickly.

    Each call ages open positions by one candle, then checks exits for every
    open position in order: quick profit (half the target), max hold while
    losing, momentum reversal, stop loss at twice the target. With no exit
    and nothing open, an instant micro-move detector gets the first chance to
    enter, then a coarser price action + momentum + volume heuristic.

    spread_threshold and min_volatility are reported in the signal metadata
    but do not gate entries.
    """

    def __init__(
        self,
        spread_threshold: float = SCALP_SPREAD_THRESHOLD,
        volume_threshold: float = SCALP_VOLUME_THRESHOLD,
        quick_profit_target: float = SCALP_QUICK_PROFIT_TARGET,
        max_hold_time: int = SCALP_MAX_HOLD_TIME,
        volatility_period: int = SCALP_VOLATILITY_PERIOD,
        min_volatility: float = SCALP_MIN_VOLATILITY,
    ):
        validate_non_negative(spread_threshold, "spread_threshold")
        validate_positive(volume_threshold, "volume_threshold")
        validate_positive(quick_profit_target, "quick_profit_target")
        validate_period(max_hold_time, "max_hold_time")
        validate_period(volatility_period, "volatility_period")
        validate_non_negative(min_volatility, "min_volatility")
        super().__init__(
            "Advanced Scalping Strategy",
            {
                "spread_threshold": spread_threshold,
                "volume_threshold": volume_threshold,
                "quick_profit_target": quick_profit_target,
                "max_hold_time": max_hold_time,
                "volatility_period": volatility_period,
                "min_volatility": min_volatility,
            },
        )
        self.spread_threshold = spread_threshold
        self.volume_threshold = volume_threshold
        self.quick_profit_target = quick_profit_target
        self.max_hold_time = max_hold_time
        self.volatility_period = volatility_period
        self.min_volatility = min_volatility

        self._positions: dict[PositionSide, ScalpPosition] = {}
        self._recent_trades: list[ScalpTradeRecord] = []

    @property
    def min_lookback(self) -> int:
        return self.volatility_period + SCALP_WARMUP_PADDING

    def current_positions(self) -> dict[PositionSide, ScalpPosition]:
        """Copy of the open positions keyed by side."""
        return {side: dataclasses.replace(position) for side, position in self._positions.items()}

    def recent_performance(self) -> dict[str, float]:
        """Trade count, average profit (percent) and win rate (0-1) over the rolling ledger."""
        if not self._recent_trades:
            return {"trades": 0, "avg_profit": 0.0, "win_rate": 0.0}

        total_profit = sum(trade.profit for trade in self._recent_trades)
        winning = sum(1 for trade in self._recent_trades if trade.is_win)
        count = len(self._recent_trades)
        return {
            "trades": count,
            "avg_profit": total_profit / count,
            "win_rate": winning / count,
        }

    def reset(self) -> None:
        super().reset()
        self._positions.clear()
        self._recent_trades.clear()

    def _hold(self, candle: Candle, **metadata: Any) -> Signal:
        metadata.setdefault("reason", "no_signal")
        metadata.setdefault("positions", len(self._positions))
        return super()._hold(candle, **metadata)

    def _evaluate(self, window: CandleWindow) -> Signal:
        tail = window[-(max(self.volatility_period, SCALP_VOLUME_AVERAGE_PERIOD) + 1) :]
        candle = tail[-1]

        for position in self._positions.values():
            position.candles_held += 1
        self._prune_trades(candle)

        exit_signal = self._check_exit_conditions(tail)
        if exit_signal is not None:
            return exit_signal
        return self._check_entry_conditions(tail)

    def _prune_trades(self, candle: Candle) -> None:
        cutoff = candle.timestamp - timedelta(seconds=SCALP_TRADE_LEDGER_WINDOW_SECONDS)
        self._recent_trades = [trade for trade in self._recent_trades if trade.timestamp > cutoff]

    def _check_exit_conditions(self, tail: CandleWindow) -> Signal | None:
        candle = tail[-1]
        take_profit = self.quick_profit_target * SCALP_PROFIT_TAKE_FRACTION
        stop_loss = -self.quick_profit_target * SCALP_STOP_LOSS_MULTIPLE

        for side, position in list(self._positions.items()):
            profit = position.profit_percent(candle.close)

            if profit >= take_profit:
                return self._close_position(side, candle, profit, "quick_profit", SCALP_CONFIDENCE_QUICK_PROFIT)

            if position.candles_held >= self.max_hold_time and profit <= 0:
                return self._close_position(side, candle, profit, "max_hold_losing", SCALP_CONFIDENCE_MAX_HOLD)

            trend = momentum(tail, SCALP_MOMENTUM_WINDOW)
            reversed_against = (side.is_long and trend.direction == Direction.DOWN) or (
                not side.is_long and trend.direction == Direction.UP
            )
            if (
                reversed_against
                and position.candles_held >= SCALP_MIN_CANDLES_BEFORE_REVERSAL_EXIT
                and profit < take_profit
            ):
                return self._close_position(
                    side, candle, profit, "momentum_reversal", SCALP_CONFIDENCE_REVERSAL
                )

            if profit <= stop_loss:
                return self._close_position(side, candle, profit, "stop_loss", SCALP_CONFIDENCE_STOP_LOSS)

        return None

    def _close_position(
        self, side: PositionSide, candle: Candle, profit: float, reason: str, confidence: float
    ) -> Signal:
        position = self._positions.pop(side)
        self._recent_trades.append(ScalpTradeRecord(timestamp=candle.timestamp, profit=profit))
        logger.debug(
            f"Scalp exit ({reason}): {side} {profit:.3f}% after {position.candles_held} candles"
        )
        return self._emit(
            side.exit_signal,
            candle,
            confidence,
            reason=reason,
            profit_pct=round_percentage(profit),
            hold_time=position.candles_held,
        )

    def _open_position(
        self, signal_type: SignalType, candle: Candle, confidence: float, **metadata: Any
    ) -> Signal:
        side = PositionSide.from_signal(signal_type)
        self._positions[side] = ScalpPosition(
            side=side, entry_price=candle.close, opened_at=candle.timestamp
        )
        return self._emit(signal_type, candle, confidence, **metadata)

    def _check_entry_conditions(self, tail: CandleWindow) -> Signal:
        candle = tail[-1]

        # One position at a time
        if self._positions:
            return self._hold(candle)

        instant_signal = self._instant_scalp_signal(tail)
        if instant_signal is not None:
            return instant_signal

        action = price_action(tail)
        trend = momentum(tail, SCALP_MOMENTUM_WINDOW)
        volume_spike = self._has_volume_spike(tail)
        confirmed = volume_spike or trend.strength > SCALP_MOMENTUM_STRENGTH_THRESHOLD

        metadata = {
            "price_action": action.direction.value,
            "momentum": round_indicator(trend.strength),
            "volume_spike": volume_spike,
            "volatility": round_indicator(coefficient_of_variation(closes(tail), self.volatility_period)),
            "spread": round_indicator(candle_spread(candle)),
        }

        if action.direction == Direction.UP and confirmed and self._can_emit(SignalType.BUY):
            return self._open_position(
                SignalType.BUY, candle, SCALP_CONFIDENCE_AGGRESSIVE, reason="aggressive_bullish", **metadata
            )
        if action.direction == Direction.DOWN and confirmed and self._can_emit(SignalType.SELL):
            return self._open_position(
                SignalType.SELL, candle, SCALP_CONFIDENCE_AGGRESSIVE, reason="aggressive_bearish", **metadata
            )

        return self._hold(candle, reason="", **metadata)

    def _instant_scalp_signal(self, tail: CandleWindow) -> Signal | None:
        current, previous, before = tail[-1], tail[-2], tail[-3]

        instant_change = relative_change(current.close, previous.close)
        prev_change = relative_change(previous.close, before.close)
        volume_boost = current.volume > previous.volume * SCALP_VOLUME_BOOST

        significant_move = abs(instant_change) > SCALP_INSTANT_MOVE_THRESHOLD
        accelerating = bool(
            np.sign(instant_change) == np.sign(prev_change) and abs(instant_change) > abs(prev_change)
        )
        if not (significant_move and (accelerating or volume_boost)):
            return None

        signal_type = SignalType.BUY if instant_change > 0 else SignalType.SELL
        if not self._can_emit(signal_type):
            return None

        return self._open_position(
            signal_type,
            current,
            SCALP_CONFIDENCE_INSTANT,
            reason="instant_scalp",
            price_change_pct=round_percentage(instant_change * 100),
            volume_boost=volume_boost,
            accelerating=accelerating,
        )

    def _has_volume_spike(self, tail: CandleWindow) -> bool:
        average_volume = average(volumes(tail), SCALP_VOLUME_AVERAGE_PERIOD)
        if average_volume == 0:
            return False
        return tail[-1].volume / average_volume >= self.volume_threshold
