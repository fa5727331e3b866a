# flip_source
# -> Random outcome source for the coin flip simulator (seeded once, never reseeded).

import time
from enum import IntEnum
from typing import Optional

import numpy as np


class Outcome(IntEnum):
    HEADS = 0
    TAILS = 1

    @property
    def label(self) -> str:
        return self.name


def outcome_label(value) -> str:
    """Convert a stored flip value (0 or 1) to its text label"""
    try:
        return Outcome(int(value)).label
    except ValueError:
        return "UNKNOWN"


def wall_clock_seed() -> int:
    return int(time.time())            # whole seconds, like a classic time() seed


class RandomOutcomeSource:
    def __init__(self, seed: Optional[int] = None):
        """
        Wrap a numpy generator seeded once from the given seed,
        or from the current wall-clock time when no seed is given
        """
        self.seed = wall_clock_seed() if seed is None else seed
        self._rng = np.random.default_rng(self.seed)

    def next_outcome(self) -> Outcome:
        return Outcome(int(self._rng.integers(0, 2)))

    def draw(self, count: int) -> np.ndarray:
        """Draw `count` independent outcomes as a uint8 array (0 = heads, 1 = tails)"""
        return self._rng.integers(0, 2, size=count, dtype=np.uint8)
