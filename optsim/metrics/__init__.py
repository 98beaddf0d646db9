"""Rolling indicator calculations over the simulated price path"""

from .calculator import IndicatorCalculator
from .moving_average import moving_average
from .volatility import log_returns, realized_volatility

__all__ = [
    "IndicatorCalculator",
    "log_returns",
    "moving_average",
    "realized_volatility",
]
