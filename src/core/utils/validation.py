"""
Validation utilities for strategy parameters and core domain models.

Provides consistent validation across the application.
"""

from src.core.exceptions.backtest import ValidationError


def validate_positive(value: float, param_name: str) -> float:
    """Validate that a numeric value is positive.

    Args:
        value: Value to validate
        param_name: Parameter name for error messages

    Returns:
        The validated value

    Raises:
        ValidationError: If value is not positive
    """
    if value <= 0:
        raise ValidationError(f"{param_name} must be positive, got {value}")
    return value


def validate_non_negative(value: float, param_name: str) -> float:
    """Validate that a numeric value is zero or greater.

    Raises:
        ValidationError: If value is negative
    """
    if value < 0:
        raise ValidationError(f"{param_name} must be non-negative, got {value}")
    return value


def validate_period(value: int, param_name: str = "period") -> int:
    """Validate that a lookback period is a positive integer.

    Args:
        value: Period to validate
        param_name: Parameter name for error messages

    Returns:
        The validated period

    Raises:
        ValidationError: If value is not a positive integer
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{param_name} must be an integer, got {type(value).__name__}")
    return int(validate_positive(value, param_name))


def validate_percentage(value: float, param_name: str = "percentage") -> float:
    """Validate that a value is a valid percentage (0-100).

    Raises:
        ValidationError: If value is not between 0 and 100
    """
    if value < 0 or value > 100:
        raise ValidationError(f"{param_name} must be between 0 and 100, got {value}")
    return value


def validate_ordered(
    lower: float, upper: float, lower_name: str, upper_name: str
) -> tuple[float, float]:
    """Validate that lower is strictly below upper.

    Raises:
        ValidationError: If lower >= upper
    """
    if lower >= upper:
        raise ValidationError(
            f"{lower_name} must be less than {upper_name}, got {lower} >= {upper}"
        )
    return lower, upper
