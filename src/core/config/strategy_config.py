"""
Strategy parameter configuration.

Pydantic models describing the parameter set of every strategy, loadable
from a JSON file. Sections missing from the file fall back to defaults.
"""

import json
from pathlib import Path
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic import ValidationError as PydanticValidationError

from src.core import constants as c
from src.core.exceptions.backtest import ConfigurationError


class _ParameterModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class CrossoverParameters(_ParameterModel):
    """Moving average crossover parameters."""

    short_period: int = Field(default=c.MAC_SHORT_PERIOD, gt=0, description="Fast SMA period")
    long_period: int = Field(default=c.MAC_LONG_PERIOD, gt=0, description="Slow SMA period")

    @model_validator(mode="after")
    def validate_periods(self) -> Self:
        """Validate that the fast average is shorter than the slow one."""
        if self.short_period >= self.long_period:
            raise ValueError("short_period must be less than long_period")
        return self


class RSIParameters(_ParameterModel):
    """RSI threshold-crossing parameters."""

    period: int = Field(default=c.RSI_PERIOD, gt=0)
    oversold_threshold: float = Field(default=c.RSI_OVERSOLD, ge=0.0, le=100.0)
    overbought_threshold: float = Field(default=c.RSI_OVERBOUGHT, ge=0.0, le=100.0)

    @model_validator(mode="after")
    def validate_thresholds(self) -> Self:
        """Validate that oversold sits below overbought."""
        if self.oversold_threshold >= self.overbought_threshold:
            raise ValueError("oversold_threshold must be less than overbought_threshold")
        return self


class BollingerBandsParameters(_ParameterModel):
    """Bollinger bands parameters."""

    period: int = Field(default=c.BB_PERIOD, gt=0)
    standard_deviations: float = Field(default=c.BB_STANDARD_DEVIATIONS, ge=0.0)


class MACDParameters(_ParameterModel):
    """MACD crossover parameters."""

    fast_period: int = Field(default=c.MACD_FAST_PERIOD, gt=0)
    slow_period: int = Field(default=c.MACD_SLOW_PERIOD, gt=0)
    signal_period: int = Field(default=c.MACD_SIGNAL_PERIOD, gt=0)

    @model_validator(mode="after")
    def validate_periods(self) -> Self:
        """Validate that the fast EMA is shorter than the slow one."""
        if self.fast_period >= self.slow_period:
            raise ValueError("fast_period must be less than slow_period")
        return self


class RSIMAComboParameters(_ParameterModel):
    """RSI + moving average combo parameters."""

    rsi_period: int = Field(default=c.COMBO_RSI_PERIOD, gt=0)
    rsi_oversold: float = Field(default=c.COMBO_RSI_OVERSOLD, ge=0.0, le=100.0)
    rsi_overbought: float = Field(default=c.COMBO_RSI_OVERBOUGHT, ge=0.0, le=100.0)
    ma_short_period: int = Field(default=c.COMBO_MA_SHORT_PERIOD, gt=0)
    ma_long_period: int = Field(default=c.COMBO_MA_LONG_PERIOD, gt=0)

    @model_validator(mode="after")
    def validate_combo(self) -> Self:
        """Validate threshold and period ordering."""
        if self.rsi_oversold >= self.rsi_overbought:
            raise ValueError("rsi_oversold must be less than rsi_overbought")
        if self.ma_short_period >= self.ma_long_period:
            raise ValueError("ma_short_period must be less than ma_long_period")
        return self


class ScalpingParameters(_ParameterModel):
    """Scalping parameters. quick_profit_target is a percentage."""

    spread_threshold: float = Field(default=c.SCALP_SPREAD_THRESHOLD, ge=0.0)
    volume_threshold: float = Field(default=c.SCALP_VOLUME_THRESHOLD, gt=0.0)
    quick_profit_target: float = Field(default=c.SCALP_QUICK_PROFIT_TARGET, gt=0.0)
    max_hold_time: int = Field(default=c.SCALP_MAX_HOLD_TIME, gt=0)
    volatility_period: int = Field(default=c.SCALP_VOLATILITY_PERIOD, gt=0)
    min_volatility: float = Field(default=c.SCALP_MIN_VOLATILITY, ge=0.0)


class StrategyParametersConfig(_ParameterModel):
    """Parameter sets for all strategies, keyed by registry name."""

    moving_average_crossover: CrossoverParameters = Field(default_factory=CrossoverParameters)
    rsi: RSIParameters = Field(default_factory=RSIParameters)
    bollinger_bands: BollingerBandsParameters = Field(default_factory=BollingerBandsParameters)
    macd: MACDParameters = Field(default_factory=MACDParameters)
    rsi_ma_combo: RSIMAComboParameters = Field(default_factory=RSIMAComboParameters)
    scalping: ScalpingParameters = Field(default_factory=ScalpingParameters)

    def for_strategy(self, name: str) -> dict:
        """Get the keyword arguments for one strategy.

        Raises:
            ConfigurationError: If name is not a configured strategy
        """
        if name not in type(self).model_fields:
            raise ConfigurationError(f"No parameters configured for strategy: {name}")
        return getattr(self, name).model_dump()


def load_strategy_parameters(path: str | Path | None = None) -> StrategyParametersConfig:
    """
    Load strategy parameters from a JSON file.

    Args:
        path: JSON file path; None returns the defaults

    Returns:
        Validated parameters config

    Raises:
        ConfigurationError: If the file is missing, not JSON, or invalid
    """
    if path is None:
        return StrategyParametersConfig()

    config_path = Path(path)
    if not config_path.is_file():
        raise ConfigurationError(f"Strategy parameters file not found: {config_path}")

    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {config_path}: {e}") from e

    try:
        return StrategyParametersConfig.model_validate(raw)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid strategy parameters in {config_path}: {e}") from e
