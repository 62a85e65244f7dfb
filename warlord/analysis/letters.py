from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Sequence

from warlord.ranking.coverage import coverage_counts


@dataclass(frozen=True)
class LetterAnalysis:
    frequencies: Dict[str, int]   # letter -> candidates containing it
    total_words: int
    max_frequency: int            # for bar scaling; 0 on an empty pool


def letter_analysis(candidates: Sequence[str]) -> LetterAnalysis:
    counts = coverage_counts(candidates)
    return LetterAnalysis(
        frequencies=dict(counts),
        total_words=len(candidates),
        max_frequency=max(counts.values(), default=0),
    )
