"""
Trade lifecycle data models.

This module defines the per-strategy slot state, the Trade record owned by
the ledger, and the transition result reported for each tick.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ..strategies.models import StrategyId


class SlotState(str, Enum):
    """Per-strategy trade slot state."""
    FLAT = "flat"
    OPEN = "open"


class TransitionTrigger(str, Enum):
    """What caused a slot to change state."""
    ENTER_SIGNAL = "enter_signal"
    HOLD_PERIOD = "hold_period"
    EXIT_SIGNAL = "exit_signal"


@dataclass
class Trade:
    """One position for a single strategy.

    Mutated only by the ledger: opened with its entry fields, later closed
    with exit tick, exit price and realized payoff.
    """

    strategy: StrategyId
    entry_tick: int
    entry_price: float
    strikes: tuple[float, ...]
    volume: int

    # Filled at closure
    exit_tick: Optional[int] = None
    exit_price: Optional[float] = None
    payoff: Optional[float] = None              # Already multiplied by volume

    @property
    def is_open(self) -> bool:
        return self.exit_tick is None

    def ticks_held(self, tick: int) -> int:
        return tick - self.entry_tick

    def close(self, tick: int, price: float, payoff: float) -> None:
        self.exit_tick = tick
        self.exit_price = price
        self.payoff = payoff

    def to_dict(self) -> dict:
        return {
            "strategy": self.strategy.value,
            "entry_tick": self.entry_tick,
            "entry_price": self.entry_price,
            "strikes": list(self.strikes),
            "volume": self.volume,
            "exit_tick": self.exit_tick,
            "exit_price": self.exit_price,
            "payoff": self.payoff,
        }


@dataclass(frozen=True)
class TradeTransition:
    """Represents one slot transition applied during a tick."""

    strategy: StrategyId
    tick: int
    from_state: SlotState
    to_state: SlotState
    trigger: TransitionTrigger
    trade: Trade


@dataclass
class StrategyBook:
    """Per-strategy ledger slot: open trade, running PnL and counters."""

    strategy: StrategyId
    open_trade: Optional[Trade] = None
    cumulative_pnl: float = 0.0
    opened: int = 0
    closed: int = 0
    closed_trades: list[Trade] = field(default_factory=list)

    @property
    def state(self) -> SlotState:
        return SlotState.OPEN if self.open_trade is not None else SlotState.FLAT
