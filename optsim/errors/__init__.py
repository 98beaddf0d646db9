"""
Error classification for the simulator.

Configuration problems are rejected before a run starts. System failures
signal a broken invariant inside the simulation loop and are never expected
under a validated configuration.
"""

from .configuration import ConfigurationError
from .recovery import UnrecoverableError
from .system_failures import (
    SystemFailureError,
    IndicatorCalculationError,
    StateTransitionError,
)

__all__ = [
    # Configuration
    "ConfigurationError",
    # System Failures
    "SystemFailureError",
    "IndicatorCalculationError",
    "StateTransitionError",
    # Recovery Categories
    "UnrecoverableError",
]
