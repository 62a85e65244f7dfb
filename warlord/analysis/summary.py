"""
Constraint summary: a human-readable replay of the guess history.

This is an explanation layer only. Filtering is decided by
engine.constraints.matches; nothing here feeds back into it.

Count bounds are per guess, the same way matches() treats each guess:
  - lower bound for a letter = the largest Exact+Displaced count any single
    guess gave it (repeating a guess does not raise it);
  - upper bound for an excluded letter = the smallest Exact+Displaced count
    among the guesses where some occurrence of it came back Absent.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, NamedTuple, Sequence

from warlord.engine.constraints import Guess
from warlord.engine.feedback import ABSENT, DISPLACED, EXACT


class ExactMark(NamedTuple):
    letter: str
    position: int
    guess: str


class DisplacedMark(NamedTuple):
    letter: str
    positions: List[int]
    guess: str


@dataclass(frozen=True)
class ConstraintSummary:
    exact: List[ExactMark]
    displaced: List[DisplacedMark]
    excluded: List[str]
    min_counts: Dict[str, int]
    max_counts: Dict[str, int]


def constraint_summary(history: Sequence[Guess]) -> ConstraintSummary:
    exact: List[ExactMark] = []
    seen_exact = set()
    displaced: Dict[str, DisplacedMark] = {}
    min_counts: Dict[str, int] = {}
    max_counts: Dict[str, int] = {}

    for g in history:
        marked: Counter = Counter()
        for pos, (ch, fb) in enumerate(zip(g.word, g.feedback)):
            if fb is EXACT:
                marked[ch] += 1
                if (ch, pos) not in seen_exact:
                    seen_exact.add((ch, pos))
                    exact.append(ExactMark(ch, pos, g.word))
            elif fb is DISPLACED:
                marked[ch] += 1
                entry = displaced.setdefault(ch, DisplacedMark(ch, [], g.word))
                if pos not in entry.positions:
                    entry.positions.append(pos)

        for ch, n in marked.items():
            min_counts[ch] = max(min_counts.get(ch, 0), n)

        absent_letters = {ch for ch, fb in zip(g.word, g.feedback) if fb is ABSENT}
        for ch in absent_letters:
            n = marked[ch]
            max_counts[ch] = min(max_counts.get(ch, n), n)

    return ConstraintSummary(
        exact=exact,
        displaced=list(displaced.values()),
        excluded=sorted(max_counts),
        min_counts=min_counts,
        max_counts=max_counts,
    )
