"""
Simulation configuration: defaults, file loading and validation.
"""

from .defaults import (
    IndicatorParams,
    MarketParams,
    SimulationConfig,
    ThresholdParams,
    TradeParams,
    get_default_config,
)
from .loader import ConfigLoader, build_config, load_config
from .validation import ConfigValidator, ValidationError

__all__ = [
    "ConfigLoader",
    "ConfigValidator",
    "IndicatorParams",
    "MarketParams",
    "SimulationConfig",
    "ThresholdParams",
    "TradeParams",
    "ValidationError",
    "build_config",
    "get_default_config",
    "load_config",
]
