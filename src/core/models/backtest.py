"""
Backtest configuration, results and comparison models.
"""

from dataclasses import dataclass, field
from typing import Any

from src.core.constants import (
    DEFAULT_INITIAL_BALANCE,
    DEFAULT_START_INDEX,
    INVESTMENT_FRACTION,
    MIN_EXECUTION_CONFIDENCE,
    MIN_TRADE_BALANCE,
)
from src.core.exceptions.backtest import ValidationError

from .trade import Trade


@dataclass
class BacktestConfig:
    """Configuration for a backtest execution."""

    initial_balance: float = DEFAULT_INITIAL_BALANCE
    min_confidence: float = MIN_EXECUTION_CONFIDENCE
    investment_fraction: float = INVESTMENT_FRACTION
    min_trade_balance: float = MIN_TRADE_BALANCE
    default_start_index: int = DEFAULT_START_INDEX

    def is_valid_balance(self) -> bool:
        """Validate initial balance is positive."""
        return self.initial_balance > 0

    def is_valid_confidence(self) -> bool:
        """Validate the execution threshold lies in [0, 1)."""
        return 0.0 <= self.min_confidence < 1.0

    def is_valid_investment_fraction(self) -> bool:
        """Validate the BUY allocation lies in (0, 1]."""
        return 0.0 < self.investment_fraction <= 1.0

    def is_valid_start_index(self) -> bool:
        """Validate the fallback start index is non-negative."""
        return self.default_start_index >= 0

    def is_valid(self) -> bool:
        """Check every configuration predicate."""
        return (
            self.is_valid_balance()
            and self.is_valid_confidence()
            and self.is_valid_investment_fraction()
            and self.is_valid_start_index()
            and self.min_trade_balance >= 0
        )

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "initial_balance": self.initial_balance,
            "min_confidence": self.min_confidence,
            "investment_fraction": self.investment_fraction,
            "min_trade_balance": self.min_trade_balance,
            "default_start_index": self.default_start_index,
        }

    @classmethod
    def resolve(
        cls, initial_balance: float | None = None, config: "BacktestConfig | None" = None
    ) -> "BacktestConfig":
        """
        Pick a full config or build one from a bare balance.

        Raises:
            ValidationError: If both are given
        """
        if config is None:
            return cls() if initial_balance is None else cls(initial_balance=initial_balance)
        if initial_balance is not None:
            raise ValidationError("Pass either initial_balance or config, not both")
        return config


@dataclass
class BacktestResult:
    """Results from a backtest execution.

    total_return, max_drawdown and win_rate are percentages. sharpe_ratio is
    not computed and is always 0.0.
    """

    total_trades: int
    winning_trades: int
    losing_trades: int
    win_rate: float
    total_return: float
    max_drawdown: float
    sharpe_ratio: float
    trades: list[Trade]
    initial_balance: float = DEFAULT_INITIAL_BALANCE
    final_balance: float = DEFAULT_INITIAL_BALANCE
    peak_balance: float = DEFAULT_INITIAL_BALANCE

    @classmethod
    def empty(cls, initial_balance: float = DEFAULT_INITIAL_BALANCE) -> "BacktestResult":
        """Result of a run that never traded."""
        return cls(
            total_trades=0,
            winning_trades=0,
            losing_trades=0,
            win_rate=0.0,
            total_return=0.0,
            max_drawdown=0.0,
            sharpe_ratio=0.0,
            trades=[],
            initial_balance=initial_balance,
            final_balance=initial_balance,
            peak_balance=initial_balance,
        )

    def is_profitable(self) -> bool:
        """Check if the backtest was profitable."""
        return self.total_return > 0.0

    def performance_summary(self) -> dict:
        """Get a summary of key performance metrics."""
        return {
            "initial_balance": self.initial_balance,
            "final_balance": self.final_balance,
            "total_return": self.total_return,
            "total_trades": self.total_trades,
            "win_rate": self.win_rate,
            "max_drawdown": self.max_drawdown,
        }

    def to_dict(self) -> dict:
        """Convert results to dictionary."""
        return {
            **self.performance_summary(),
            "winning_trades": self.winning_trades,
            "losing_trades": self.losing_trades,
            "sharpe_ratio": self.sharpe_ratio,
            "peak_balance": self.peak_balance,
            "trades": [trade.to_dict() for trade in self.trades],
        }


@dataclass
class StrategyComparison:
    """One strategy's entry in a comparison run."""

    strategy_name: str
    parameters: dict[str, Any]
    results: BacktestResult
    status: str = "completed"
    error_message: str | None = None

    @property
    def succeeded(self) -> bool:
        """Check if the strategy's backtest ran to completion."""
        return self.status == "completed"


@dataclass
class ComparisonReport:
    """Best performers across a comparison run."""

    best_return: StrategyComparison | None = None
    best_win_rate: StrategyComparison | None = None
    most_active: StrategyComparison | None = None
    failed: list[StrategyComparison] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert report to dictionary of strategy names and headline values."""

        def _entry(comparison: StrategyComparison | None, metric: str) -> dict | None:
            if comparison is None:
                return None
            return {
                "strategy_name": comparison.strategy_name,
                metric: getattr(comparison.results, metric),
            }

        return {
            "best_return": _entry(self.best_return, "total_return"),
            "best_win_rate": _entry(self.best_win_rate, "win_rate"),
            "most_active": _entry(self.most_active, "total_trades"),
            "failed": [comparison.strategy_name for comparison in self.failed],
        }
