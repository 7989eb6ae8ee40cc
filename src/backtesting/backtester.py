"""
Single-asset, fully-in-or-out backtester.

Replays a candle series through one strategy, one growing window at a time,
and simulates a cash balance plus a single long position. Strategy-internal
bookkeeping (for example scalping shorts) is ignored: only BUY-when-flat and
SELL-when-long change the simulated account.
"""

from collections.abc import Sequence

from loguru import logger

from src.core.constants import PROGRESS_LOG_INTERVAL
from src.core.enums import SignalType
from src.core.exceptions.backtest import ValidationError
from src.core.interfaces.strategy import IStrategy
from src.core.models.backtest import BacktestConfig, BacktestResult
from src.core.models.candle import Candle
from src.core.models.signal import Signal
from src.core.models.trade import Trade
from src.core.types.financial import HUNDRED, ZERO
from src.core.utils.decorators import log_run


class Backtester:
    """
    Simulates one strategy against one candle series.

    Takes either a bare initial_balance or a full BacktestConfig, not both.
    All simulated state is reset at the start of every `backtest` call, so an
    instance can be reused across runs.
    """

    def __init__(
        self,
        initial_balance: float | None = None,
        config: BacktestConfig | None = None,
    ) -> None:
        self.config = BacktestConfig.resolve(initial_balance, config)
        if not self.config.is_valid():
            raise ValidationError(f"Invalid backtest configuration: {self.config.to_dict()}")

        self._balance = self.config.initial_balance
        self._position = ZERO
        self._trades: list[Trade] = []
        self._peak_balance = self.config.initial_balance
        self._rejected_signals = 0

    @property
    def initial_balance(self) -> float:
        return self.config.initial_balance

    @property
    def balance(self) -> float:
        """Cash balance."""
        return self._balance

    @property
    def position(self) -> float:
        """Units of the asset held."""
        return self._position

    @property
    def peak_balance(self) -> float:
        """Highest cash balance observed after a SELL (initial balance before any)."""
        return self._peak_balance

    @property
    def trades(self) -> list[Trade]:
        return list(self._trades)

    def total_value(self, current_price: float) -> float:
        """Cash plus the position marked at current_price."""
        return self._balance + self._position * current_price

    def start_index(self, strategy: IStrategy) -> int:
        """
        First candle index fed to the strategy.

        The strategy's long_period parameter when it declares one, otherwise a
        flat default regardless of its actual warm-up length.
        """
        long_period = strategy.parameters.get("long_period")
        return long_period or self.config.default_start_index

    @log_run
    def backtest(self, strategy: IStrategy, candles: Sequence[Candle]) -> BacktestResult:
        """
        Run a strategy over a candle series.

        Args:
            strategy: Strategy to replay; its own state is not reset
            candles: Series ascending by timestamp

        Returns:
            Metrics and the trade ledger of the simulated run
        """
        logger.info(
            f"Starting backtest for {strategy.name} {strategy.parameters} "
            f"with balance {self.initial_balance:.2f} over {len(candles)} candles"
        )
        self._reset()

        for i in range(self.start_index(strategy), len(candles)):
            signal = strategy.analyze(candles[: i + 1])

            if signal.is_actionable:
                logger.debug(
                    f"Signal generated: {signal.type} at {signal.price:.2f} "
                    f"with confidence {signal.confidence:.3f}"
                )
                if signal.confidence > self.config.min_confidence:
                    self._execute_signal(signal)

            if i % PROGRESS_LOG_INTERVAL == 0:
                value = self.total_value(candles[i].close)
                change = (value - self.initial_balance) / self.initial_balance * HUNDRED
                logger.info(
                    f"Progress: {i}/{len(candles)} candles | value {value:.2f} ({change:.2f}%)"
                )

        if self._position > ZERO:
            last_candle = candles[-1]
            self._execute_signal(
                Signal(
                    type=SignalType.SELL,
                    price=last_candle.close,
                    timestamp=last_candle.timestamp,
                    confidence=1.0,
                    metadata={"reason": "forced_close"},
                )
            )

        if self._rejected_signals:
            logger.warning(f"{self._rejected_signals} signals did not match the account state")
        return self._calculate_results()

    def _reset(self) -> None:
        self._balance = self.config.initial_balance
        self._position = ZERO
        self._trades = []
        self._peak_balance = self.config.initial_balance
        self._rejected_signals = 0

    def _execute_signal(self, signal: Signal) -> None:
        price = signal.price

        if (
            signal.type == SignalType.BUY
            and self._balance > self.config.min_trade_balance
            and self._position == ZERO
        ):
            invested = self._balance * self.config.investment_fraction
            quantity = invested / price
            self._position = quantity
            self._balance -= invested
            self._trades.append(
                Trade(type=SignalType.BUY, price=price, timestamp=signal.timestamp, quantity=quantity)
            )
            logger.debug(
                f"BUY executed: {quantity:.6f} at {price:.2f} | total value {self.total_value(price):.2f}"
            )
        elif signal.type == SignalType.SELL and self._position > ZERO:
            quantity = self._position
            self._balance += quantity * price
            self._trades.append(
                Trade(type=SignalType.SELL, price=price, timestamp=signal.timestamp, quantity=quantity)
            )
            self._position = ZERO
            self._peak_balance = max(self._peak_balance, self._balance)
            logger.debug(f"SELL executed: {quantity:.6f} at {price:.2f} | balance {self._balance:.2f}")
        else:
            self._rejected_signals += 1
            logger.debug(
                f"{signal.type} not executed: balance {self._balance:.2f}, position {self._position:.6f}"
            )

    def _calculate_results(self) -> BacktestResult:
        buys = [trade for trade in self._trades if trade.type == SignalType.BUY]
        sells = [trade for trade in self._trades if trade.type == SignalType.SELL]

        # i-th BUY pairs with the i-th SELL
        winning_trades = sum(1 for buy, sell in zip(buys, sells) if sell.price > buy.price)
        losing_trades = min(len(buys), len(sells)) - winning_trades

        initial = self.initial_balance
        total_return = (self._balance - initial) / initial * HUNDRED
        max_drawdown = (self._peak_balance - self._balance) / self._peak_balance * HUNDRED
        win_rate = winning_trades / len(buys) * HUNDRED if buys else ZERO

        return BacktestResult(
            total_trades=len(buys),
            winning_trades=winning_trades,
            losing_trades=losing_trades,
            win_rate=win_rate,
            total_return=total_return,
            max_drawdown=max_drawdown,
            sharpe_ratio=ZERO,
            trades=list(self._trades),
            initial_balance=initial,
            final_balance=self._balance,
            peak_balance=self._peak_balance,
        )
