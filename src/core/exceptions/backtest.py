"""
Custom exception hierarchy for the strategy and backtesting platform.

This module defines domain-specific exceptions for better error handling.
"""


class BacktestException(Exception):
    """Base exception for all backtesting-related errors."""

    pass


class ValidationError(BacktestException):
    """Raised when input validation fails."""

    pass


class DataError(BacktestException):
    """Raised when market data access or processing fails."""

    pass


class ConfigurationError(BacktestException):
    """Raised when configuration is invalid."""

    pass


class StrategyError(BacktestException):
    """Raised when strategy execution fails."""

    def __init__(self, strategy_name: str, reason: str):
        self.strategy_name = strategy_name
        self.reason = reason
        super().__init__(f"Strategy '{strategy_name}' failed: {reason}")


class UnknownStrategyError(ConfigurationError):
    """Raised when a strategy name is not registered."""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = available
        super().__init__(
            f"Unknown strategy: {name}. Available strategies: {', '.join(available)}"
        )
