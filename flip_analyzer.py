"""
Coin flip sequence statistics.

analyze() is the statistics shown by the simulator: heads/tails distribution
and the number of runs that reach SEQUENCE_LENGTH identical outcomes.
randomness_checks() adds the bitstream tests (monobit, runs, entropy) for
the extended report.
"""

from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np
from scipy.special import erfc

from flip_source import Outcome

SEQUENCE_LENGTH = 5


@dataclass(frozen=True)
class StatisticsReport:
    total_heads: int
    total_tails: int
    heads_run_count: int
    tails_run_count: int

    @property
    def total(self) -> int:
        return self.total_heads + self.total_tails

    @property
    def heads_pct(self) -> float:
        return self.total_heads / self.total * 100

    @property
    def tails_pct(self) -> float:
        return self.total_tails / self.total * 100

    @property
    def total_runs(self) -> int:
        return self.heads_run_count + self.tails_run_count


def analyze(buffer, sequence_length: int = SEQUENCE_LENGTH) -> Optional[StatisticsReport]:
    """
    Single pass over the flips.

    A run is counted once, at the flip where its streak reaches exactly
    `sequence_length`; longer runs keep growing the streak without counting
    again. Returns None when there are no flips.
    """
    if buffer is None or len(buffer) == 0:
        return None

    total_heads = 0
    total_tails = 0
    heads_streak = 0
    tails_streak = 0
    heads_runs = 0
    tails_runs = 0

    for flip in buffer:
        if flip == Outcome.HEADS:
            total_heads += 1
            heads_streak += 1
            tails_streak = 0
            if heads_streak == sequence_length:
                heads_runs += 1
        else:
            total_tails += 1
            tails_streak += 1
            heads_streak = 0
            if tails_streak == sequence_length:
                tails_runs += 1

    return StatisticsReport(
        total_heads=total_heads,
        total_tails=total_tails,
        heads_run_count=heads_runs,
        tails_run_count=tails_runs,
    )


# ==================== RANDOMNESS CHECKS ====================

def _run_lengths(bits: np.ndarray):
    """Start values and lengths of the maximal runs in `bits`"""
    starts = np.concatenate(([0], np.flatnonzero(np.diff(bits)) + 1))
    lengths = np.diff(np.concatenate((starts, [len(bits)])))
    return bits[starts], lengths


def randomness_checks(buffer) -> Dict:
    """Monobit test, runs test, Shannon entropy and longest runs"""
    if buffer is None or len(buffer) == 0:
        return {"error": "No flips available"}

    bits = np.asarray(buffer, dtype=np.int64)
    n = len(bits)
    ones = int(np.sum(bits))
    zeros = n - ones

    # Monobit
    s_obs = abs(ones - zeros) / np.sqrt(n)
    p_value_monobit = float(erfc(s_obs / np.sqrt(2)))

    # Shannon entropy
    p = ones / n
    if p in (0, 1):
        entropy = 0.0
    else:
        entropy = float(-p * np.log2(p) - (1 - p) * np.log2(1 - p))

    # Runs test
    values, lengths = _run_lengths(bits)
    runs = len(lengths)
    expected_runs = 2 * n * p * (1 - p)
    variance_runs = 2 * n * p * (1 - p) * (1 - 2 * p * (1 - p))
    if variance_runs > 0:
        z_runs = float((runs - expected_runs) / np.sqrt(variance_runs))
        p_value_runs = float(erfc(abs(z_runs) / np.sqrt(2)))
    else:
        z_runs = None
        p_value_runs = None

    heads_lengths = lengths[values == int(Outcome.HEADS)]
    tails_lengths = lengths[values == int(Outcome.TAILS)]

    return {
        "n": n,
        "monobit": {
            "heads": zeros,
            "tails": ones,
            "z_score": float(s_obs),
            "p_value": p_value_monobit,
        },
        "runs": {
            "observed": runs,
            "expected": float(expected_runs),
            "z_score": z_runs,
            "p_value": p_value_runs,
        },
        "entropy": entropy,
        "longest_heads_run": int(heads_lengths.max()) if len(heads_lengths) else 0,
        "longest_tails_run": int(tails_lengths.max()) if len(tails_lengths) else 0,
    }
