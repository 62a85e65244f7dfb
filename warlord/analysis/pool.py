"""
Candidate-pool statistics: how much is left, how much was eliminated, and
how spread out the remaining letters are.

Entropy here is over the distinct-letter coverage distribution:
  p(letter) = (candidates containing letter) / (remaining candidates)
  H = -sum(p * log2(p))
It is a quick uncertainty gauge for the pool, not an expected-information
score for a guess. With <= 1 candidate left it is 0.0.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from warlord.ranking.coverage import coverage_counts


@dataclass(frozen=True)
class PoolStats:
    total_remaining: int
    eliminated_percentage: float
    entropy: float


def pool_entropy(candidates: Sequence[str]) -> float:
    n = len(candidates)
    if n <= 1:
        return 0.0
    counts = np.fromiter(coverage_counts(candidates).values(), dtype=float)
    p = counts / n
    return float(-(p * np.log2(p)).sum())


def solution_pool_stats(full_dictionary: Sequence[str], candidates: Sequence[str]) -> PoolStats:
    remaining = len(candidates)
    if full_dictionary:
        eliminated = (1.0 - remaining / len(full_dictionary)) * 100.0
    else:
        eliminated = 0.0
    return PoolStats(
        total_remaining=remaining,
        eliminated_percentage=eliminated,
        entropy=pool_entropy(candidates),
    )
