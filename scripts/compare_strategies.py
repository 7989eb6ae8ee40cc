#!/usr/bin/env python3
"""
Strategy Comparison Script

Backtests every registered strategy over the same deterministic sample series
and prints a ranked summary.
"""

import argparse
import asyncio
import sys

import pandas as pd
from loguru import logger

from src.backtesting import StrategyComparator, comparison_to_frame
from src.core.config import load_strategy_parameters
from src.core.constants import DEFAULT_INITIAL_BALANCE
from src.core.exceptions.backtest import BacktestException
from src.core.models.backtest import BacktestConfig
from src.infrastructure.data import SampleMarketDataSource
from src.strategies import build_default_strategies


def setup_logging(debug: bool = False):
    """Configure logging with loguru."""
    logger.remove()

    level = "DEBUG" if debug else "INFO"
    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=level,
    )


async def run_comparison(args: argparse.Namespace) -> pd.DataFrame:
    parameters = load_strategy_parameters(args.config)
    strategies = build_default_strategies(parameters)

    source = SampleMarketDataSource(seed=args.seed)
    candles = await source.get_candles(args.symbol, args.interval, args.candles)

    comparator = StrategyComparator(
        config=BacktestConfig(initial_balance=args.balance),
        isolate_failures=args.isolate_failures,
        max_workers=args.workers,
    )
    comparisons = comparator.compare_strategies(strategies, candles)
    return comparison_to_frame(comparisons)


def main():
    parser = argparse.ArgumentParser(
        description="Compare trading strategies on deterministic sample data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Compare with default parameters
  python -m scripts.compare_strategies

  # Custom parameters file, longer series, parallel runs
  python -m scripts.compare_strategies --config params.json --candles 5000 --workers 4
        """,
    )

    parser.add_argument("--config", type=str, default=None, help="JSON file with strategy parameters")

    parser.add_argument("--symbol", type=str, default="BTCUSDT", help="Symbol label (default: BTCUSDT)")

    parser.add_argument(
        "--interval",
        choices=["1m", "5m", "15m", "30m", "1h", "4h", "1d"],
        default="1h",
        help="Candle interval (default: 1h)",
    )

    parser.add_argument(
        "--candles", type=int, default=1000, help="Number of sample candles (default: 1000)"
    )

    parser.add_argument("--seed", type=int, default=42, help="Sample data seed (default: 42)")

    parser.add_argument(
        "--balance",
        type=float,
        default=DEFAULT_INITIAL_BALANCE,
        help=f"Initial balance per strategy (default: {DEFAULT_INITIAL_BALANCE})",
    )

    parser.add_argument(
        "--workers", type=int, default=1, help="Backtests to run in parallel (default: 1)"
    )

    parser.add_argument(
        "--isolate-failures",
        action="store_true",
        help="Record failing strategies and continue instead of aborting",
    )

    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    if args.candles <= 0:
        logger.error("--candles must be positive")
        return 1

    setup_logging(args.debug)

    try:
        frame = asyncio.run(run_comparison(args))
    except BacktestException as e:
        logger.error(f"Comparison failed: {e}")
        return 1

    ranked = frame.sort_values("total_return", ascending=False)
    logger.success(f"Compared {len(frame)} strategies\n{ranked.to_string(index=False)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
