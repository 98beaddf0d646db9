"""Indicator snapshot for one tick"""

from dataclasses import dataclass


@dataclass(frozen=True)
class IndicatorSnapshot:
    """Rolling statistics recomputed fresh at each tick"""
    tick: int
    short_moving_average: float
    long_moving_average: float
    volatility: float

    @property
    def trend(self) -> int:
        """+1 when the short average is above the long one, -1 below, 0 level"""
        if self.short_moving_average > self.long_moving_average:
            return 1
        if self.short_moving_average < self.long_moving_average:
            return -1
        return 0

    def to_dict(self) -> dict:
        return {
            "tick": self.tick,
            "short_moving_average": self.short_moving_average,
            "long_moving_average": self.long_moving_average,
            "volatility": self.volatility,
        }
