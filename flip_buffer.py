# flip_buffer
# -> Session object owning the current flip buffer.

from typing import Optional

import numpy as np

from flip_source import RandomOutcomeSource

# =========================
# CONFIG
# =========================

MIN_FLIPS = 1
MAX_FLIPS = 100000


class AllocationError(MemoryError):
    """Storage for the requested number of flips could not be obtained"""

    def __init__(self, count: int):
        super().__init__(f"Memory allocation error! ({count} flips)")
        self.count = count


class FlipSession:
    """
    Holds the one flip buffer of a running simulator.

    The buffer is replaced wholesale by generate() and dropped by release().
    Used as a context manager, the buffer is also released when the block
    exits, whether normally or through an exception.
    """

    def __init__(self, source: RandomOutcomeSource):
        self.source = source
        self.buffer: Optional[np.ndarray] = None

    @property
    def num_flips(self) -> int:
        return 0 if self.buffer is None else len(self.buffer)

    def generate(self, count: int) -> np.ndarray:
        if not MIN_FLIPS <= count <= MAX_FLIPS:
            raise ValueError(f"Flip count must be between {MIN_FLIPS} and {MAX_FLIPS}, got {count}")

        self.release()                 # old buffer goes before the new one is drawn

        try:
            flips = self.source.draw(count)
        except MemoryError as e:
            raise AllocationError(count) from e

        self.buffer = flips
        return flips

    def release(self):
        self.buffer = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
        return False
