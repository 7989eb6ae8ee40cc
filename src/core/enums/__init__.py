"""
Core enumerations for the strategy platform.

This module provides centralized enumerations for domain concepts
like signal types, position sides and price directions.
"""

from .directions import Direction
from .position_types import PositionSide, SignalType

__all__ = ["SignalType", "PositionSide", "Direction"]
