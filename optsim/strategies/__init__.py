"""Strategy identifiers, payoff library, strike rules and descriptor table."""

from .descriptors import STRATEGY_DESCRIPTORS, StrategyDescriptor, get_descriptor
from .models import StrategyId

__all__ = [
    "STRATEGY_DESCRIPTORS",
    "StrategyDescriptor",
    "StrategyId",
    "get_descriptor",
]
