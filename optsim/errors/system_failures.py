"""
System failure error classifications.

These represent broken invariants inside the simulation loop. They cannot
occur under a validated configuration and are raised instead of silently
corrupting ledger state.
"""

from typing import Any, Optional


class SystemFailureError(Exception):
    """Base class for unrecoverable system failures."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class IndicatorCalculationError(SystemFailureError):
    """Indicator requested for a tick outside the recorded price history."""

    def __init__(self, message: str, indicator_name: Optional[str] = None,
                 tick: Optional[int] = None, history_length: Optional[int] = None,
                 **kwargs):
        super().__init__(message, **kwargs)
        self.indicator_name = indicator_name
        self.tick = tick
        self.history_length = history_length


class StateTransitionError(SystemFailureError):
    """Invalid trade lifecycle transition that would corrupt the ledger."""

    def __init__(self, message: str, current_state: Optional[str] = None,
                 attempted_transition: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.current_state = current_state
        self.attempted_transition = attempted_transition
