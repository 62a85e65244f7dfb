"""
Per-position letter statistics over the candidate pool.

For every slot: which letters still occur there (most frequent first), how
often, and whether the slot is settled (a single letter across the pool).
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence


@dataclass(frozen=True)
class PositionAnalysis:
    possible_letters: List[List[str]]
    position_frequencies: List[Dict[str, int]]
    solved_positions: List[Optional[str]]

    def is_solved(self, pos: int) -> bool:
        return self.solved_positions[pos] is not None


def position_analysis(candidates: Sequence[str], word_length: int) -> PositionAnalysis:
    counts = [Counter() for _ in range(word_length)]
    for w in candidates:
        if len(w) != word_length:
            continue
        for i, ch in enumerate(w):
            counts[i][ch] += 1

    # Counter preserves first-seen order, and sorted() is stable, so ties
    # stay in the order the letters were first observed.
    possible = [sorted(c, key=lambda ch, c=c: c[ch], reverse=True) for c in counts]
    solved = [letters[0] if len(letters) == 1 else None for letters in possible]

    return PositionAnalysis(
        possible_letters=possible,
        position_frequencies=[dict(c) for c in counts],
        solved_positions=solved,
    )
