"""Signal generation from an indicator snapshot."""

from typing import Optional

from ..config.defaults import ThresholdParams
from ..models.indicators import IndicatorSnapshot
from ..strategies.descriptors import STRATEGY_DESCRIPTORS
from ..strategies.models import StrategyId
from .models import Signal

SignalSet = dict[StrategyId, Signal]


class SignalGenerator:
    """Stateless mapping from one IndicatorSnapshot to one SignalSet."""

    def __init__(self, thresholds: Optional[ThresholdParams] = None):
        self.thresholds = thresholds or ThresholdParams()

    def generate(self, snapshot: IndicatorSnapshot) -> SignalSet:
        return {
            strategy: descriptor.signal_rule(snapshot, self.thresholds)
            for strategy, descriptor in STRATEGY_DESCRIPTORS.items()
        }
