"""
Tabular views of backtest output.

Converts comparison results and trade ledgers to pandas DataFrames for
downstream analysis.
"""

from collections.abc import Sequence

import pandas as pd

from src.core.models.backtest import StrategyComparison
from src.core.models.trade import Trade

COMPARISON_COLUMNS = [
    "strategy_name",
    "status",
    "total_return",
    "total_trades",
    "winning_trades",
    "losing_trades",
    "win_rate",
    "max_drawdown",
    "final_balance",
]
TRADE_COLUMNS = ["timestamp", "type", "price", "quantity", "notional_value"]


def comparison_to_frame(comparisons: Sequence[StrategyComparison]) -> pd.DataFrame:
    """One row per strategy, in comparison order."""
    rows = [
        {
            "strategy_name": comparison.strategy_name,
            "status": comparison.status,
            "total_return": comparison.results.total_return,
            "total_trades": comparison.results.total_trades,
            "winning_trades": comparison.results.winning_trades,
            "losing_trades": comparison.results.losing_trades,
            "win_rate": comparison.results.win_rate,
            "max_drawdown": comparison.results.max_drawdown,
            "final_balance": comparison.results.final_balance,
        }
        for comparison in comparisons
    ]
    return pd.DataFrame(rows, columns=COMPARISON_COLUMNS)


def trades_to_frame(trades: Sequence[Trade]) -> pd.DataFrame:
    """One row per executed trade, in ledger order."""
    rows = [
        {
            "timestamp": trade.timestamp,
            "type": trade.type.value,
            "price": trade.price,
            "quantity": trade.quantity,
            "notional_value": trade.notional_value(),
        }
        for trade in trades
    ]
    return pd.DataFrame(rows, columns=TRADE_COLUMNS)
