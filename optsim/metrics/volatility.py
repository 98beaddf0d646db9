"""Realized volatility from log-returns"""

import math
from collections.abc import Sequence


def log_returns(history: Sequence[float], tick: int, window: int) -> list[float]:
    """
    Log-returns ln(p_i / p_{i-1}) for the `window` ticks ending at `tick`

    Requires tick >= window so every return has a predecessor price.
    """
    return [
        math.log(history[i] / history[i - 1])
        for i in range(tick - window + 1, tick + 1)
    ]


def realized_volatility(history: Sequence[float], tick: int, window: int) -> float:
    """
    Population standard deviation of the `window` most recent log-returns

    Variance uses the number of returns as divisor. During warm-up
    (tick < window, i.e. fewer than `window` returns available) 0.0 is
    returned.

    Args:
        history: Price history indexed by tick
        tick: Index of the last price in the window
        window: Number of log-returns to use

    Returns:
        Realized volatility per tick
    """
    if tick < window:
        return 0.0

    returns = log_returns(history, tick, window)
    mean = sum(returns) / len(returns)
    variance = sum((r - mean) ** 2 for r in returns) / len(returns)
    return math.sqrt(variance)
