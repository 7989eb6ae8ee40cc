"""
Price direction enumerations.

Used by the short-horizon price action and momentum readings.
"""

from enum import StrEnum


class Direction(StrEnum):
    """Direction of a short-horizon price move."""

    UP = "UP"
    DOWN = "DOWN"
    # Price action reports SIDEWAYS, momentum reports NEUTRAL
    SIDEWAYS = "SIDEWAYS"
    NEUTRAL = "NEUTRAL"
