"""
Per-strategy signal rules.

Straddle and strangle have a neutral band between their thresholds. The
spread strategies are binary: every tick yields ENTER or EXIT.
"""

from ..config.defaults import ThresholdParams
from ..models.indicators import IndicatorSnapshot
from .models import Signal


def _band_signal(volatility: float, high: float, low: float) -> Signal:
    if volatility > high:
        return Signal.ENTER
    if volatility < low:
        return Signal.EXIT
    return Signal.HOLD


def straddle_signal(snapshot: IndicatorSnapshot, thresholds: ThresholdParams) -> Signal:
    """Long volatility: enter when realized volatility is high."""
    return _band_signal(snapshot.volatility, thresholds.volatility_high,
                        thresholds.volatility_low)


def strangle_signal(snapshot: IndicatorSnapshot, thresholds: ThresholdParams) -> Signal:
    return _band_signal(snapshot.volatility, thresholds.strangle_volatility_high,
                        thresholds.strangle_volatility_low)


def bull_spread_signal(snapshot: IndicatorSnapshot, thresholds: ThresholdParams) -> Signal:
    """Upward momentum: short average above long average."""
    if snapshot.trend > 0:
        return Signal.ENTER
    return Signal.EXIT


def bear_spread_signal(snapshot: IndicatorSnapshot, thresholds: ThresholdParams) -> Signal:
    if snapshot.trend < 0:
        return Signal.ENTER
    return Signal.EXIT


def butterfly_spread_signal(snapshot: IndicatorSnapshot, thresholds: ThresholdParams) -> Signal:
    """Short volatility: enter when realized volatility is low."""
    if snapshot.volatility < thresholds.volatility_low:
        return Signal.ENTER
    return Signal.EXIT
