#!/usr/bin/env python3
"""
Basic Usage Example - OptSim

This script demonstrates the basic usage of the simulation engine:
- Load configuration with overrides
- Run a seeded simulation
- Step through ticks manually to inspect indicators, signals and trades

Run: python examples/basic_usage.py
"""

from optsim.config.loader import load_config
from optsim.delivery.stdout_delivery import StdoutReportDelivery
from optsim.engine import SimulationEngine
from optsim.logging.config import configure_logging


def run_full_simulation() -> None:
    """Run a complete seeded simulation and print the PnL table."""
    config = load_config(overrides={"market": {"seed": 7, "total_ticks": 2000}})
    engine = SimulationEngine(config)
    report = engine.run()

    StdoutReportDelivery().deliver([report])
    print(f"Closed trades: {len(report.closed_trades)}")


def step_through_ticks(ticks: int = 30) -> None:
    """Drive the pipeline tick by tick and print every ledger transition."""
    config = load_config(overrides={"market": {"seed": 11}})
    engine = SimulationEngine(config)
    engine.reset()

    for _ in range(ticks):
        snapshot, signals, transitions = engine.process_tick()
        for transition in transitions:
            print(
                f"tick {transition.tick:>3} {transition.strategy.label:<16} "
                f"{transition.from_state.value} -> {transition.to_state.value} "
                f"({transition.trigger.value}) vol={snapshot.volatility:.4f}"
            )


def main() -> None:
    configure_logging(level="WARNING")
    print("=== Full run ===")
    run_full_simulation()
    print("\n=== First ticks ===")
    step_through_ticks()


if __name__ == "__main__":
    main()
