"""Standard-normal draw sources injected into the price generator."""

from typing import Optional, Protocol

import numpy as np


class NormalDrawSource(Protocol):
    """Anything producing independent N(0, 1) draws one at a time."""

    def draw(self) -> float:
        ...


class SeededNormalSource:
    """N(0, 1) stream backed by a numpy Generator.

    Created once per simulation run; the same seed reproduces the same
    stream, and a seed of None pulls fresh entropy from the OS.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)
        self.draw_count = 0

    def draw(self) -> float:
        self.draw_count += 1
        return float(self._rng.standard_normal())


def create_normal_source(seed: Optional[int] = None) -> SeededNormalSource:
    """Create the normal draw source for one simulation run."""
    return SeededNormalSource(seed)
