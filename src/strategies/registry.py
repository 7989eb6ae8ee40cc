"""
Strategy registry: name -> strategy class.

Strategies are built from names plus keyword parameters, so callers and
parameter files never import strategy classes directly.
"""

import inspect
from collections.abc import Mapping
from typing import Any

from loguru import logger

from src.core.config.strategy_config import StrategyParametersConfig
from src.core.exceptions.backtest import UnknownStrategyError

from .base import BaseStrategy
from .bollinger_bands import BollingerBandsStrategy
from .macd import MACDStrategy
from .moving_average_crossover import MovingAverageCrossover
from .rsi import RSIStrategy
from .rsi_ma_combo import RSIMAComboStrategy
from .scalping import ScalpingStrategy

_REGISTRY: dict[str, type[BaseStrategy]] = {}


def register_strategy(name: str, cls: type[BaseStrategy]) -> None:
    _REGISTRY[name] = cls


def get_strategy_cls(name: str) -> type[BaseStrategy]:
    if name not in _REGISTRY:
        raise UnknownStrategyError(name, available_strategies())
    return _REGISTRY[name]


def available_strategies() -> list[str]:
    return list(_REGISTRY)


def _filter_init_kwargs(cls: type, params: Mapping[str, Any]) -> dict[str, Any]:
    """Keep only the parameters the constructor accepts, warning about the rest."""
    sig = inspect.signature(cls.__init__)
    allowed = {name for name in sig.parameters if name != "self"}
    dropped = [key for key in params if key not in allowed]
    if dropped:
        logger.warning(f"Ignoring unknown parameters for {cls.__name__}: {', '.join(dropped)}")
    return {key: value for key, value in params.items() if key in allowed}


def build_strategy(definition: str | Mapping[str, Any], **params: Any) -> BaseStrategy:
    """
    Build a strategy instance.

    Args:
        definition: Registry name, or a mapping with a "type" key plus parameters
        **params: Extra parameters overriding those in the mapping

    Returns:
        A fresh strategy instance

    Raises:
        UnknownStrategyError: If the name is not registered
    """
    if isinstance(definition, Mapping):
        merged = dict(definition)
        name = str(merged.pop("type", ""))
        merged.update(params)
    else:
        name = definition
        merged = dict(params)

    cls = get_strategy_cls(name)
    return cls(**_filter_init_kwargs(cls, merged))


def build_default_strategies(config: StrategyParametersConfig | None = None) -> list[BaseStrategy]:
    """Build one instance of every registered strategy from a parameters config."""
    config = config or StrategyParametersConfig()
    return [build_strategy(name, **config.for_strategy(name)) for name in available_strategies()]


register_strategy("moving_average_crossover", MovingAverageCrossover)
register_strategy("rsi", RSIStrategy)
register_strategy("bollinger_bands", BollingerBandsStrategy)
register_strategy("macd", MACDStrategy)
register_strategy("rsi_ma_combo", RSIMAComboStrategy)
register_strategy("scalping", ScalpingStrategy)
