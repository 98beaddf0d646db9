"""Trading signal values."""

from enum import IntEnum


class Signal(IntEnum):
    """Per-tick, per-strategy decision."""
    EXIT = -1
    HOLD = 0
    ENTER = 1
