#!/usr/bin/env python3
"""Run the options strategy simulation and print the PnL report.

Usage:
    python scripts/run_simulation.py
    python scripts/run_simulation.py --seed 42 --ticks 5000
    python scripts/run_simulation.py --seed 1 --replicas 10 --format json
"""

import argparse
import sys
from pathlib import Path
from typing import Any, Optional

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from optsim.config.loader import load_config
from optsim.delivery.stdout_delivery import FORMATS, StdoutReportDelivery
from optsim.engine import SimulationEngine
from optsim.errors import ConfigurationError
from optsim.logging.config import LOG_LEVELS, configure_logging, get_logger


def build_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Turn command-line flags into a configuration override mapping."""
    market: dict[str, Any] = {}
    if args.seed is not None:
        market["seed"] = args.seed
    if args.ticks is not None:
        market["total_ticks"] = args.ticks
    return {"market": market} if market else {}


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Options strategy tick simulator")
    parser.add_argument("--config-dir", type=Path, default=None,
                        help="Directory holding simulation.yaml (default: ./config)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the normal draw stream; first replica seed with --replicas")
    parser.add_argument("--ticks", type=int, default=None, help="Total tick count")
    parser.add_argument("--replicas", type=positive_int, default=1,
                        help="Number of independent runs with consecutive seeds")
    parser.add_argument("--format", choices=FORMATS, default="pretty", dest="output_format")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default="WARNING")
    parser.add_argument("--log-json", action="store_true")
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(level=args.log_level, format_json=args.log_json)
    logger = get_logger("run_simulation")

    try:
        config = load_config(args.config_dir, build_overrides(args))
        engine = SimulationEngine(config)
    except ConfigurationError as e:
        logger.error("Configuration rejected", error=str(e), fields=e.fields)
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    if args.replicas > 1:
        first_seed = config.market.seed if config.market.seed is not None else 0
        reports = engine.run_replicas(range(first_seed, first_seed + args.replicas))
    else:
        reports = [engine.run()]

    StdoutReportDelivery(output_format=args.output_format).deliver(reports)

    if len(reports) > 1:
        mean_total = sum(r.total_pnl for r in reports) / len(reports)
        logger.info("Replica summary", replicas=len(reports), mean_total_pnl=mean_total)
    return 0


if __name__ == "__main__":
    sys.exit(main())
