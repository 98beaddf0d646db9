"""
Strategy descriptor table.

Each strategy is fully described by three rules: how it reads the indicator
snapshot (signal rule), where it puts its strikes at entry (strike rule) and
what it pays at settlement (payoff). The trade ledger and signal generator
are driven from this table instead of per-strategy code paths.
"""

from collections.abc import Callable
from dataclasses import dataclass

from ..config.defaults import ThresholdParams
from ..models.indicators import IndicatorSnapshot
from ..signals import rules
from ..signals.models import Signal
from . import payoffs, strikes
from .models import StrategyId

SignalRule = Callable[[IndicatorSnapshot, ThresholdParams], Signal]
StrikeRule = Callable[[float, float], tuple[float, ...]]
PayoffFunction = Callable[..., float]


@dataclass(frozen=True)
class StrategyDescriptor:
    """Rules defining one strategy's behaviour."""
    strategy: StrategyId
    signal_rule: SignalRule
    strike_rule: StrikeRule
    payoff: PayoffFunction

    def strikes_for(self, entry_price: float, offset: float) -> tuple[float, ...]:
        return self.strike_rule(entry_price, offset)

    def settle(self, settlement_price: float, strike_prices: tuple[float, ...]) -> float:
        """Intrinsic payoff per unit of volume."""
        return self.payoff(settlement_price, *strike_prices)


STRATEGY_DESCRIPTORS: dict[StrategyId, StrategyDescriptor] = {
    StrategyId.STRADDLE: StrategyDescriptor(
        strategy=StrategyId.STRADDLE,
        signal_rule=rules.straddle_signal,
        strike_rule=strikes.straddle_strikes,
        payoff=payoffs.straddle,
    ),
    StrategyId.STRANGLE: StrategyDescriptor(
        strategy=StrategyId.STRANGLE,
        signal_rule=rules.strangle_signal,
        strike_rule=strikes.strangle_strikes,
        payoff=payoffs.strangle,
    ),
    StrategyId.BULL_SPREAD: StrategyDescriptor(
        strategy=StrategyId.BULL_SPREAD,
        signal_rule=rules.bull_spread_signal,
        strike_rule=strikes.bull_spread_strikes,
        payoff=payoffs.bull_spread,
    ),
    StrategyId.BEAR_SPREAD: StrategyDescriptor(
        strategy=StrategyId.BEAR_SPREAD,
        signal_rule=rules.bear_spread_signal,
        strike_rule=strikes.bear_spread_strikes,
        payoff=payoffs.bear_spread,
    ),
    StrategyId.BUTTERFLY_SPREAD: StrategyDescriptor(
        strategy=StrategyId.BUTTERFLY_SPREAD,
        signal_rule=rules.butterfly_spread_signal,
        strike_rule=strikes.butterfly_spread_strikes,
        payoff=payoffs.butterfly_spread,
    ),
}


def get_descriptor(strategy: StrategyId) -> StrategyDescriptor:
    return STRATEGY_DESCRIPTORS[strategy]
