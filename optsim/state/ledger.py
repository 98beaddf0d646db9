"""
Trade ledger: one FLAT/OPEN state machine per strategy.

Every tick each strategy slot is evaluated once, in priority order:

1. FLAT and ENTER signal -> open a trade at the settlement price.
2. OPEN and (holding period elapsed or EXIT signal) -> settle the intrinsic
   payoff times volume into cumulative PnL and go FLAT.
3. Otherwise nothing changes.

A slot makes at most one transition per tick, so a trade closed on a tick
is never reopened on that same tick.
"""

from collections.abc import Mapping
from typing import Optional

from ..config.defaults import TradeParams
from ..errors import StateTransitionError
from ..logging.config import get_ledger_logger, log_trade_transition
from ..signals.models import Signal
from ..strategies.descriptors import STRATEGY_DESCRIPTORS, StrategyDescriptor
from ..strategies.models import StrategyId
from .models import (
    SlotState,
    StrategyBook,
    Trade,
    TradeTransition,
    TransitionTrigger,
)

ledger_logger = get_ledger_logger(__name__)


class TradeLedger:
    """Owns the open-trade slot and cumulative PnL of every strategy."""

    def __init__(
        self,
        params: Optional[TradeParams] = None,
        descriptors: Optional[Mapping[StrategyId, StrategyDescriptor]] = None,
        keep_history: bool = True
    ):
        self.params = params or TradeParams()
        self.descriptors = dict(descriptors or STRATEGY_DESCRIPTORS)
        self.keep_history = keep_history
        self.books: dict[StrategyId, StrategyBook] = {
            strategy: StrategyBook(strategy=strategy) for strategy in self.descriptors
        }

    # ─── Tick processing ──────────────────────────────────────────────────────

    def step(
        self,
        tick: int,
        settlement_price: float,
        signals: Mapping[StrategyId, Signal]
    ) -> list[TradeTransition]:
        """
        Apply one tick of lifecycle rules to every strategy slot.

        Args:
            tick: Current tick index
            settlement_price: Price every strategy settles against this tick
            signals: Signal per strategy for this tick; missing entries hold

        Returns:
            Transitions applied this tick, in descriptor order
        """
        transitions = []
        for strategy, descriptor in self.descriptors.items():
            signal = signals.get(strategy, Signal.HOLD)
            transition = self._evaluate_slot(
                self.books[strategy], descriptor, tick, settlement_price, signal
            )
            if transition is not None:
                transitions.append(transition)
        return transitions

    def _evaluate_slot(
        self,
        book: StrategyBook,
        descriptor: StrategyDescriptor,
        tick: int,
        price: float,
        signal: Signal
    ) -> Optional[TradeTransition]:
        if book.open_trade is None:
            if signal == Signal.ENTER:
                return self._open(book, descriptor, tick, price)
            return None

        trade = book.open_trade
        if trade.ticks_held(tick) >= self.params.hold_period:
            return self._close(book, descriptor, tick, price, TransitionTrigger.HOLD_PERIOD)
        if signal == Signal.EXIT:
            return self._close(book, descriptor, tick, price, TransitionTrigger.EXIT_SIGNAL)
        return None

    def _open(
        self,
        book: StrategyBook,
        descriptor: StrategyDescriptor,
        tick: int,
        price: float
    ) -> TradeTransition:
        if book.open_trade is not None:
            raise StateTransitionError(
                f"{book.strategy.value} already has an open trade",
                current_state=SlotState.OPEN.value,
                attempted_transition="open",
                context={"tick": tick, "entry_tick": book.open_trade.entry_tick},
            )

        trade = Trade(
            strategy=book.strategy,
            entry_tick=tick,
            entry_price=price,
            strikes=descriptor.strikes_for(price, self.params.strike_offset),
            volume=self.params.volume,
        )
        book.open_trade = trade
        book.opened += 1

        log_trade_transition(
            ledger_logger,
            strategy=book.strategy.value,
            from_state=SlotState.FLAT.value,
            to_state=SlotState.OPEN.value,
            trigger=TransitionTrigger.ENTER_SIGNAL.value,
            context={
                "tick": tick,
                "entry_price": price,
                "strikes": list(trade.strikes),
                "volume": trade.volume,
            }
        )

        return TradeTransition(
            strategy=book.strategy,
            tick=tick,
            from_state=SlotState.FLAT,
            to_state=SlotState.OPEN,
            trigger=TransitionTrigger.ENTER_SIGNAL,
            trade=trade,
        )

    def _close(
        self,
        book: StrategyBook,
        descriptor: StrategyDescriptor,
        tick: int,
        price: float,
        trigger: TransitionTrigger
    ) -> TradeTransition:
        trade = book.open_trade
        if trade is None:
            raise StateTransitionError(
                f"{book.strategy.value} has no open trade to close",
                current_state=SlotState.FLAT.value,
                attempted_transition="close",
                context={"tick": tick},
            )

        payoff = descriptor.settle(price, trade.strikes) * trade.volume
        trade.close(tick, price, payoff)
        book.cumulative_pnl += payoff
        book.closed += 1
        book.open_trade = None
        if self.keep_history:
            book.closed_trades.append(trade)

        log_trade_transition(
            ledger_logger,
            strategy=book.strategy.value,
            from_state=SlotState.OPEN.value,
            to_state=SlotState.FLAT.value,
            trigger=trigger.value,
            context={
                "tick": tick,
                "entry_tick": trade.entry_tick,
                "exit_price": price,
                "payoff": payoff,
                "cumulative_pnl": book.cumulative_pnl,
            }
        )

        return TradeTransition(
            strategy=book.strategy,
            tick=tick,
            from_state=SlotState.OPEN,
            to_state=SlotState.FLAT,
            trigger=trigger,
            trade=trade,
        )

    # ─── Queries ──────────────────────────────────────────────────────────────

    def state_of(self, strategy: StrategyId) -> SlotState:
        return self.books[strategy].state

    def open_trade(self, strategy: StrategyId) -> Optional[Trade]:
        return self.books[strategy].open_trade

    def cumulative_pnl(self) -> dict[StrategyId, float]:
        """Running PnL per strategy."""
        return {strategy: book.cumulative_pnl for strategy, book in self.books.items()}

    def total_pnl(self) -> float:
        return sum(book.cumulative_pnl for book in self.books.values())

    def closed_trades(self, strategy: Optional[StrategyId] = None) -> list[Trade]:
        """Closed trade history, for one strategy or all of them."""
        if strategy is not None:
            return list(self.books[strategy].closed_trades)
        trades = []
        for book in self.books.values():
            trades.extend(book.closed_trades)
        return sorted(trades, key=lambda t: (t.exit_tick, t.entry_tick))

    def open_trades(self) -> list[Trade]:
        return [book.open_trade for book in self.books.values() if book.open_trade is not None]
