"""Indicator calculator coordinating the rolling statistics for one tick"""

from collections.abc import Sequence
from typing import Optional

from ..config.defaults import IndicatorParams
from ..errors import IndicatorCalculationError
from ..models.indicators import IndicatorSnapshot
from .moving_average import moving_average
from .volatility import realized_volatility


class IndicatorCalculator:
    """
    Computes the per-tick indicator snapshot from the price history
    """

    def __init__(self, params: Optional[IndicatorParams] = None):
        self.params = params or IndicatorParams()

    def calculate(self, history: Sequence[float], tick: Optional[int] = None) -> IndicatorSnapshot:
        """
        Calculate short/long moving averages and realized volatility

        Args:
            history: Full price history generated so far
            tick: Target tick; defaults to the last recorded tick

        Returns:
            IndicatorSnapshot for the tick

        Raises:
            IndicatorCalculationError: If tick lies outside the history
        """
        if tick is None:
            tick = len(history) - 1

        if tick < 0 or tick >= len(history):
            raise IndicatorCalculationError(
                f"Tick {tick} outside price history of length {len(history)}",
                indicator_name="snapshot",
                tick=tick,
                history_length=len(history),
            )

        return IndicatorSnapshot(
            tick=tick,
            short_moving_average=moving_average(history, tick, self.params.short_window),
            long_moving_average=moving_average(history, tick, self.params.long_window),
            volatility=realized_volatility(history, tick, self.params.volatility_window),
        )
