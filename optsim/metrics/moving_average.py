"""Simple moving average over the price history"""

from collections.abc import Sequence


def moving_average(history: Sequence[float], tick: int, window: int) -> float:
    """
    Arithmetic mean of the `window` prices ending at `tick`, inclusive

    During warm-up (fewer than `window` prices up to `tick`) the price at
    `tick` itself is returned, so early averages are biased toward the
    latest price.

    Args:
        history: Price history indexed by tick
        tick: Index of the last price in the window
        window: Number of prices to average

    Returns:
        Moving average value
    """
    if tick < window - 1:
        return history[tick]

    total = 0.0
    for i in range(tick - window + 1, tick + 1):
        total += history[i]
    return total / window
