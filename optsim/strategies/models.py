"""Strategy identifiers."""

from enum import Enum


class StrategyId(str, Enum):
    """The five option strategy shapes traded by the simulator."""
    STRADDLE = "straddle"
    STRANGLE = "strangle"
    BULL_SPREAD = "bull_spread"
    BEAR_SPREAD = "bear_spread"
    BUTTERFLY_SPREAD = "butterfly_spread"

    @property
    def label(self) -> str:
        """Human readable name, e.g. 'Bull Spread'."""
        return self.value.replace("_", " ").title()
