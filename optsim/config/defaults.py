"""Default simulation parameters."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class MarketParams:
    """Underlying price process parameters."""
    initial_price: float = 100.0          # Price at tick 0
    drift: float = 0.0001                 # GBM drift per tick
    volatility: float = 0.01              # GBM volatility per tick
    time_step: float = 1.0                # dt
    total_ticks: int = 10000              # Length of the price path
    seed: Optional[int] = None            # None draws fresh OS entropy


@dataclass(frozen=True)
class IndicatorParams:
    """Rolling indicator windows, in ticks."""
    short_window: int = 5
    long_window: int = 20
    volatility_window: int = 5


@dataclass(frozen=True)
class ThresholdParams:
    """Realized volatility thresholds for the volatility-driven strategies."""
    volatility_high: float = 0.01             # Straddle entry
    volatility_low: float = 0.005             # Straddle exit, butterfly entry
    strangle_volatility_high: float = 0.012   # Strangle entry
    strangle_volatility_low: float = 0.007    # Strangle exit


@dataclass(frozen=True)
class TradeParams:
    """Trade lifecycle parameters shared by every strategy."""
    hold_period: int = 10                 # Ticks before a forced close
    strike_offset: float = 0.05           # Strike distance as a fraction of entry price
    volume: int = 10                      # Contracts per trade


@dataclass(frozen=True)
class SimulationConfig:
    """Complete simulation configuration."""
    market: MarketParams
    indicators: IndicatorParams
    thresholds: ThresholdParams
    trading: TradeParams


def get_default_config() -> SimulationConfig:
    """Get the default configuration instance."""
    return SimulationConfig(
        market=MarketParams(),
        indicators=IndicatorParams(),
        thresholds=ThresholdParams(),
        trading=TradeParams(),
    )
