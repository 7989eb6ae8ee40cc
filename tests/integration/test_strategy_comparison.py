"""
Integration tests for the full comparison pipeline.

Sample data -> parameter config -> registry -> comparator -> result frame.
"""

import json

import pytest

from src.backtesting import StrategyComparator, comparison_to_frame, trades_to_frame
from src.backtesting.backtester import Backtester
from src.core.config import load_strategy_parameters
from src.infrastructure.data import SampleMarketDataSource, candles_from_dataframe, candles_to_dataframe
from src.strategies import build_default_strategies


class TestStrategyComparisonPipeline:
    """End-to-end comparison of every registered strategy."""

    @pytest.fixture
    def candles(self):
        """One thousand hourly sample candles."""
        return SampleMarketDataSource(seed=42).generate(1000)

    @pytest.mark.asyncio
    async def test_should_compare_all_strategies(self, tmp_path) -> None:
        """Test a comparison driven by a parameters file."""
        candles = await SampleMarketDataSource(seed=42).get_candles("BTCUSDT", "1h", 1000)
        path = tmp_path / "params.json"
        path.write_text(json.dumps({"moving_average_crossover": {"short_period": 5, "long_period": 20}}))
        strategies = build_default_strategies(load_strategy_parameters(path))

        comparator = StrategyComparator(initial_balance=10000.0, max_workers=2)
        comparisons = comparator.compare_strategies(strategies, candles)
        frame = comparison_to_frame(comparisons)

        assert len(frame) == 6
        assert frame["status"].eq("completed").all()
        assert (frame["total_trades"] >= 0).all()
        assert frame.loc[0, "strategy_name"] == "Moving Average Crossover"
        assert comparisons[0].parameters == {"short_period": 5, "long_period": 20}

        report = comparator.last_report
        assert report.best_return.results.total_return == frame["total_return"].max()
        assert report.most_active.results.total_trades == frame["total_trades"].max()

    def test_should_backtest_from_dataframe(self, candles) -> None:
        """Test that candles survive a DataFrame round trip into a backtest."""
        restored = candles_from_dataframe(candles_to_dataframe(candles))
        strategy = build_default_strategies()[0]

        result = Backtester().backtest(strategy, restored)
        trades = trades_to_frame(result.trades)

        assert len(trades) == len(result.trades)
        assert result.total_trades == (trades["type"] == "BUY").sum()
