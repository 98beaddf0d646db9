"""Geometric Brownian motion price generation."""

import math
from collections.abc import Sequence
from typing import overload

from .random_source import NormalDrawSource


def next_price(
    previous_price: float,
    drift: float,
    volatility: float,
    time_step: float,
    normal_draw: float
) -> float:
    """
    Advance a price by one GBM step.

    new = previous * exp((drift - 0.5 * volatility^2) * dt
                         + volatility * sqrt(dt) * z)

    Args:
        previous_price: Price at the previous tick (> 0)
        drift: Drift per unit time
        volatility: Volatility per unit time (>= 0)
        time_step: dt (> 0)
        normal_draw: One standard normal draw

    Returns:
        Next price, strictly positive for any finite draw
    """
    exponent = ((drift - 0.5 * volatility * volatility) * time_step
                + volatility * math.sqrt(time_step) * normal_draw)
    return previous_price * math.exp(exponent)


class PricePath(Sequence):
    """Append-only price history, one price per tick starting at tick 0."""

    def __init__(self, initial_price: float):
        self._prices: list[float] = [initial_price]

    def append(self, price: float) -> None:
        self._prices.append(price)

    @property
    def prices(self) -> tuple[float, ...]:
        return tuple(self._prices)

    @property
    def latest(self) -> float:
        return self._prices[-1]

    @property
    def last_tick(self) -> int:
        return len(self._prices) - 1

    @overload
    def __getitem__(self, index: int) -> float: ...

    @overload
    def __getitem__(self, index: slice) -> list[float]: ...

    def __getitem__(self, index):
        return self._prices[index]

    def __len__(self) -> int:
        return len(self._prices)

    def __repr__(self) -> str:
        return f"PricePath(ticks={len(self._prices)}, latest={self.latest:.4f})"


class PricePathGenerator:
    """Binds the GBM parameters and the draw source for one run."""

    def __init__(self, drift: float, volatility: float, time_step: float,
                 source: NormalDrawSource):
        self.drift = drift
        self.volatility = volatility
        self.time_step = time_step
        self.source = source

    def next(self, previous_price: float) -> float:
        """Consume one draw and return the price following previous_price."""
        return next_price(
            previous_price,
            self.drift,
            self.volatility,
            self.time_step,
            self.source.draw(),
        )

    def advance(self, path: PricePath) -> float:
        """Append the next price to path and return it."""
        price = self.next(path.latest)
        path.append(price)
        return price
