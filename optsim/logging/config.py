"""
Centralized logging configuration for the simulator.

Every component logs through structlog. Reports are printed to stdout, so
log records always go to stderr. Module-level loggers are lazy proxies and
pick up whatever configure_logging sets, even when created at import time.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def configure_logging(level: str = "INFO", format_json: bool = False) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level, one of LOG_LEVELS (case-insensitive)
        format_json: If True, output JSON format; otherwise human-readable

    Raises:
        ValueError: If level is not a known logging level
    """
    if level.upper() not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {level}")
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stderr,
        format="%(message)s",
        force=True
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
    ]

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_ledger_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger for trade lifecycle transitions.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger carrying the trade ledger subsystem as initial context
    """
    return structlog.get_logger(name, subsystem="trade_ledger", audit_trail=True)


def get_engine_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger for the simulation driver.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger carrying the simulation engine subsystem as initial context
    """
    return structlog.get_logger(name, subsystem="simulation_engine")


def log_trade_transition(
    logger: FilteringBoundLogger,
    strategy: str,
    from_state: str,
    to_state: str,
    trigger: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a trade lifecycle transition with standardized format.

    Args:
        logger: Structlog logger instance
        strategy: Strategy identifier owning the trade slot
        from_state: Slot state before the transition
        to_state: Slot state after the transition
        trigger: What triggered the transition (enter_signal, hold_period, exit_signal)
        context: Additional context data (tick, prices, strikes, payoff)
    """
    bound_logger = logger.bind(
        strategy=strategy,
        from_state=from_state,
        to_state=to_state,
        trigger=trigger,
    )

    if context:
        bound_logger = bound_logger.bind(**context)

    bound_logger.debug("Trade transition")
