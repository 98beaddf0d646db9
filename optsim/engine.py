"""
Main simulation engine coordinator.

Drives the per-tick pipeline over one simulated price path:
Price generation → Indicators → Signals → Trade ledger transitions,
and folds the ledger into a final report.
"""

from collections.abc import Iterable
from dataclasses import asdict, replace
from typing import Optional

from .config.defaults import SimulationConfig, get_default_config
from .config.validation import ConfigValidator
from .errors import ConfigurationError
from .logging.config import get_engine_logger
from .market.price_path import PricePath, PricePathGenerator
from .market.random_source import NormalDrawSource, create_normal_source
from .metrics.calculator import IndicatorCalculator
from .models.indicators import IndicatorSnapshot
from .models.report import SimulationReport, StrategySummary
from .signals.generator import SignalGenerator, SignalSet
from .state.ledger import TradeLedger
from .state.models import TradeTransition

logger = get_engine_logger(__name__)


class SimulationEngine:
    """
    Coordinator for one options-strategy simulation run.

    Single-threaded: each tick's full pipeline completes before the next
    begins, since indicators read the whole history accumulated so far.
    Independent replicas are the unit of repetition (see run_replicas).
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        source: Optional[NormalDrawSource] = None,
        keep_history: bool = True
    ) -> None:
        """
        Initialize the engine.

        Args:
            config: Simulation parameters; defaults when omitted
            source: Standard-normal draw source; when omitted a seeded numpy
                source is created per run from config.market.seed
            keep_history: Keep closed trades for the report

        Raises:
            ConfigurationError: If the configuration violates its contract
        """
        self.config = config or get_default_config()
        validate_config(self.config)

        self.logger = logger
        self.source = source
        self.keep_history = keep_history

        self.indicator_calculator = IndicatorCalculator(self.config.indicators)
        self.signal_generator = SignalGenerator(self.config.thresholds)

        # Per-run state, rebuilt by reset()
        self.price_path: PricePath = PricePath(self.config.market.initial_price)
        self.ledger: TradeLedger = TradeLedger(self.config.trading, keep_history=keep_history)
        self.price_generator: Optional[PricePathGenerator] = None

    def reset(self, source: Optional[NormalDrawSource] = None) -> None:
        """Start a fresh run: new price path, empty ledger, new draw source."""
        market = self.config.market
        run_source = source or self.source or create_normal_source(market.seed)

        self.price_path = PricePath(market.initial_price)
        self.ledger = TradeLedger(self.config.trading, keep_history=self.keep_history)
        self.price_generator = PricePathGenerator(
            drift=market.drift,
            volatility=market.volatility,
            time_step=market.time_step,
            source=run_source,
        )

    def process_tick(self) -> tuple[IndicatorSnapshot, SignalSet, list[TradeTransition]]:
        """
        Run the full pipeline for the next tick.

        Returns:
            The tick's indicator snapshot, signal set and ledger transitions
        """
        if self.price_generator is None:
            self.reset()

        price = self.price_generator.advance(self.price_path)
        tick = self.price_path.last_tick

        snapshot = self.indicator_calculator.calculate(self.price_path, tick)
        signals = self.signal_generator.generate(snapshot)
        transitions = self.ledger.step(tick, price, signals)

        return snapshot, signals, transitions

    def run(self, source: Optional[NormalDrawSource] = None) -> SimulationReport:
        """
        Run a full simulation of config.market.total_ticks ticks.

        Tick 0 is the initial price; ticks 1..total_ticks-1 are simulated.
        Trades still open after the last tick are reported but not settled.

        Args:
            source: Draw source for this run only

        Returns:
            SimulationReport with per-strategy and total PnL
        """
        market = self.config.market
        self.reset(source)

        self.logger.info(
            "Simulation started",
            total_ticks=market.total_ticks,
            initial_price=market.initial_price,
            seed=market.seed
        )

        for _ in range(1, market.total_ticks):
            self.process_tick()

        report = self.build_report()

        self.logger.info(
            "Simulation finished",
            final_price=report.final_price,
            total_pnl=report.total_pnl,
            pnl_by_strategy={s.value: pnl for s, pnl in report.pnl_by_strategy.items()},
            open_trades=len(self.ledger.open_trades())
        )

        return report

    def run_replicas(self, seeds: Iterable[Optional[int]]) -> list[SimulationReport]:
        """
        Run independent replicas of the configured simulation, one per seed.

        Each replica gets its own price path, ledger and draw source.
        """
        reports = []
        for seed in seeds:
            replica = SimulationEngine(
                replace(self.config, market=replace(self.config.market, seed=seed)),
                keep_history=self.keep_history,
            )
            reports.append(replica.run())
        return reports

    def build_report(self) -> SimulationReport:
        """Fold the current ledger state into a SimulationReport."""
        summaries = {
            strategy: StrategySummary(
                strategy=strategy,
                cumulative_pnl=book.cumulative_pnl,
                trades_opened=book.opened,
                trades_closed=book.closed,
                open_trade=book.open_trade,
            )
            for strategy, book in self.ledger.books.items()
        }

        return SimulationReport(
            strategies=summaries,
            total_ticks=len(self.price_path),
            final_price=self.price_path.latest,
            seed=self.config.market.seed,
            closed_trades=self.ledger.closed_trades(),
        )


def validate_config(config: SimulationConfig) -> None:
    """
    Reject a configuration that violates its contract.

    Raises:
        ConfigurationError: Listing every offending field
    """
    errors = ConfigValidator.validate_config(asdict(config))
    if errors:
        error_msgs = [f"{err.field}: {err.message} (got: {err.value!r})" for err in errors]
        logger.error("Simulation configuration rejected", errors=error_msgs)
        raise ConfigurationError(
            "Invalid simulation configuration: " + "; ".join(error_msgs),
            errors=errors,
        )
