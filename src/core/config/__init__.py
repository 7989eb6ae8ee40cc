"""
Configuration models and loaders.
"""

from .strategy_config import (
    BollingerBandsParameters,
    CrossoverParameters,
    MACDParameters,
    RSIMAComboParameters,
    RSIParameters,
    ScalpingParameters,
    StrategyParametersConfig,
    load_strategy_parameters,
)

__all__ = [
    "BollingerBandsParameters",
    "CrossoverParameters",
    "MACDParameters",
    "RSIMAComboParameters",
    "RSIParameters",
    "ScalpingParameters",
    "StrategyParametersConfig",
    "load_strategy_parameters",
]
