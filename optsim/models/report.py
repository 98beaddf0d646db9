"""Final report of a simulation run"""

from dataclasses import dataclass, field
from typing import Any, Optional

from ..state.models import Trade
from ..strategies.models import StrategyId


@dataclass(frozen=True)
class StrategySummary:
    """Outcome of one strategy over a run"""
    strategy: StrategyId
    cumulative_pnl: float
    trades_opened: int
    trades_closed: int
    open_trade: Optional[Trade] = None   # Still open at the final tick, never settled

    def to_dict(self) -> dict[str, Any]:
        return {
            "strategy": self.strategy.value,
            "cumulative_pnl": self.cumulative_pnl,
            "trades_opened": self.trades_opened,
            "trades_closed": self.trades_closed,
            "open_trade": self.open_trade.to_dict() if self.open_trade else None,
        }


@dataclass(frozen=True)
class SimulationReport:
    """Per-strategy and aggregate PnL of one run"""
    strategies: dict[StrategyId, StrategySummary]
    total_ticks: int
    final_price: float
    seed: Optional[int] = None
    closed_trades: list[Trade] = field(default_factory=list)

    @property
    def pnl_by_strategy(self) -> dict[StrategyId, float]:
        return {strategy: summary.cumulative_pnl for strategy, summary in self.strategies.items()}

    @property
    def total_pnl(self) -> float:
        return sum(summary.cumulative_pnl for summary in self.strategies.values())

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_ticks": self.total_ticks,
            "final_price": self.final_price,
            "seed": self.seed,
            "strategies": {
                strategy.value: summary.to_dict()
                for strategy, summary in self.strategies.items()
            },
            "total_pnl": self.total_pnl,
        }
