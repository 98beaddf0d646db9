"""Pytest configuration and shared fixtures."""

from dataclasses import replace

import pytest

from optsim.config.defaults import SimulationConfig, get_default_config
from optsim.logging.config import configure_logging
from optsim.models.indicators import IndicatorSnapshot


class FixedDrawSource:
    """Deterministic normal draw source cycling through a fixed sequence."""

    def __init__(self, draws):
        self.draws = list(draws)
        self.draw_count = 0

    def draw(self) -> float:
        value = self.draws[self.draw_count % len(self.draws)]
        self.draw_count += 1
        return value


@pytest.fixture
def default_config() -> SimulationConfig:
    """Default simulation configuration."""
    return get_default_config()


@pytest.fixture
def flat_market_config(default_config) -> SimulationConfig:
    """Zero drift, zero volatility: the price never leaves its initial value."""
    return replace(
        default_config,
        market=replace(default_config.market, drift=0.0, volatility=0.0, seed=123),
    )


@pytest.fixture
def seeded_config(default_config) -> SimulationConfig:
    """Default parameters with a fixed seed and a shorter path."""
    return replace(
        default_config,
        market=replace(default_config.market, seed=42, total_ticks=3000),
    )


@pytest.fixture
def fixed_source_factory():
    """Build deterministic draw sources from a list of draws."""
    return FixedDrawSource


@pytest.fixture
def make_snapshot():
    """Build indicator snapshots with sensible defaults."""
    def _make(volatility: float = 0.0, short_ma: float = 100.0,
              long_ma: float = 100.0, tick: int = 10) -> IndicatorSnapshot:
        return IndicatorSnapshot(
            tick=tick,
            short_moving_average=short_ma,
            long_moving_average=long_ma,
            volatility=volatility,
        )
    return _make


@pytest.fixture(autouse=True, scope="session")
def quiet_logging():
    """Keep per-trade debug records out of long simulation runs."""
    configure_logging(level="WARNING")
