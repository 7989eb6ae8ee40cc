"""
Strategy comparison.

Runs several strategies over the same candle series, each through its own
Backtester, and ranks the outcomes.
"""

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from loguru import logger

from src.core.exceptions.backtest import StrategyError
from src.core.interfaces.strategy import IStrategy
from src.core.models.backtest import (
    BacktestConfig,
    BacktestResult,
    ComparisonReport,
    StrategyComparison,
)
from src.core.models.candle import Candle

from .backtester import Backtester


def rank_comparisons(comparisons: Sequence[StrategyComparison]) -> ComparisonReport:
    """
    Pick the best performers among completed runs.

    Each pick is a max over the input order, so ties keep the earliest entry.
    Failed runs are listed separately and never ranked.
    """
    completed = [comparison for comparison in comparisons if comparison.succeeded]
    failed = [comparison for comparison in comparisons if not comparison.succeeded]
    if not completed:
        return ComparisonReport(failed=failed)

    return ComparisonReport(
        best_return=max(completed, key=lambda comparison: comparison.results.total_return),
        best_win_rate=max(completed, key=lambda comparison: comparison.results.win_rate),
        most_active=max(completed, key=lambda comparison: comparison.results.total_trades),
        failed=failed,
    )


class StrategyComparator:
    """
    Backtests strategies independently and ranks their results.

    Args:
        initial_balance: Starting balance for every run
        config: Full backtest configuration; exclusive with initial_balance
        isolate_failures: Record a failing strategy as failed and continue
            instead of aborting the comparison
        max_workers: Run backtests on a thread pool when greater than 1;
            results keep the input order either way
    """

    def __init__(
        self,
        initial_balance: float | None = None,
        config: BacktestConfig | None = None,
        isolate_failures: bool = False,
        max_workers: int = 1,
    ) -> None:
        self.config = BacktestConfig.resolve(initial_balance, config)
        self.isolate_failures = isolate_failures
        self.max_workers = max(1, max_workers)
        self.last_report: ComparisonReport | None = None

    def compare_strategies(
        self, strategies: Sequence[IStrategy], candles: Sequence[Candle]
    ) -> list[StrategyComparison]:
        """
        Backtest every strategy over the same candles.

        Args:
            strategies: Distinct strategy instances
            candles: Shared series ascending by timestamp

        Returns:
            One comparison per strategy, in input order
        """
        logger.info(f"Starting strategy comparison with {len(strategies)} strategies")

        if self.max_workers > 1 and len(strategies) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                comparisons = list(executor.map(lambda strategy: self._run(strategy, candles), strategies))
        else:
            comparisons = [self._run(strategy, candles) for strategy in strategies]

        self.last_report = rank_comparisons(comparisons)
        self._log_best_performers(self.last_report)
        return comparisons

    def _run(self, strategy: IStrategy, candles: Sequence[Candle]) -> StrategyComparison:
        logger.info(f"Testing strategy: {strategy.name}")
        backtester = Backtester(config=self.config)

        try:
            results = backtester.backtest(strategy, candles)
        except Exception as e:
            if not self.isolate_failures:
                raise
            error = StrategyError(strategy.name, f"{type(e).__name__}: {e}")
            logger.error(str(error))
            return StrategyComparison(
                strategy_name=strategy.name,
                parameters=strategy.parameters,
                results=BacktestResult.empty(self.config.initial_balance),
                status="failed",
                error_message=error.reason,
            )

        logger.info(
            f"Results for {strategy.name}: return {results.total_return:.2f}%, "
            f"trades {results.total_trades}, win rate {results.win_rate:.2f}%, "
            f"max drawdown {results.max_drawdown:.2f}%"
        )
        return StrategyComparison(
            strategy_name=strategy.name, parameters=strategy.parameters, results=results
        )

    def _log_best_performers(self, report: ComparisonReport) -> None:
        if report.best_return is not None:
            logger.info(
                f"Highest return: {report.best_return.strategy_name} "
                f"({report.best_return.results.total_return:.2f}%)"
            )
        if report.best_win_rate is not None:
            logger.info(
                f"Best win rate: {report.best_win_rate.strategy_name} "
                f"({report.best_win_rate.results.win_rate:.2f}%)"
            )
        if report.most_active is not None:
            logger.info(
                f"Most active: {report.most_active.strategy_name} "
                f"({report.most_active.results.total_trades} trades)"
            )
        for comparison in report.failed:
            logger.warning(f"Excluded from ranking: {comparison.strategy_name} ({comparison.error_message})")
