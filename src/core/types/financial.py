"""
Financial float helpers for backtesting calculations.

Backtests run on plain floats. These helpers keep rounding consistent
wherever values are reported (signal metadata, result summaries).
"""

# Reporting precision (number of decimal places)
PERCENTAGE_DECIMALS = 4
PRICE_DECIMALS = 2
INDICATOR_DECIMALS = 4

ZERO = 0.0
ONE = 1.0
HUNDRED = 100.0


def round_price(price: float) -> float:
    """Round price to reporting precision."""
    return round(price, PRICE_DECIMALS)


def round_percentage(percentage: float) -> float:
    """Round percentage to reporting precision."""
    return round(percentage, PERCENTAGE_DECIMALS)


def round_indicator(value: float) -> float:
    """Round an indicator reading to reporting precision."""
    return round(value, INDICATOR_DECIMALS)


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp value into [lower, upper].

    Examples:
        >>> clamp(1.4, 0.5, 0.9)
        0.9
        >>> clamp(0.1, 0.5, 0.9)
        0.5
    """
    return max(lower, min(upper, value))


def relative_change(current: float, reference: float) -> float:
    """Relative change of current versus reference.

    Args:
        current: New value
        reference: Base value (must be non-zero)

    Returns:
        (current - reference) / reference
    """
    return (current - reference) / reference


def percent_change(current: float, reference: float) -> float:
    """Percentage change of current versus reference."""
    return relative_change(current, reference) * HUNDRED
