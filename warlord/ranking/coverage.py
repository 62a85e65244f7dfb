"""
Letter-coverage ranking (distinct letters).

Idea:
  - For each letter, count how many CANDIDATES contain it at least once.
  - Score each word as the sum of those counts over its DISTINCT letters,
    plus a flat bonus when the word is a plausible final answer.
  - Sort descending; ties keep input order.

Why it works:
  - Early turns: favors words that cover common letters (shrinks space fast).
  - Later turns: the bonus pulls real answers above obscure dictionary words.

Notes:
  - Ignores positions (see analysis.positions for slot-specific counts).
  - A word with a repeated letter scores as if the letter occurred once.
"""

from __future__ import annotations

from collections import Counter
from typing import Collection, Iterable, List, Sequence, Tuple

# Flat bonus for words in the plausible-solution set.
SOLUTION_BONUS = 10


def coverage_counts(candidates: Iterable[str]) -> Counter:
    """letter -> number of candidates containing it at least once."""
    counts: Counter = Counter()
    for w in candidates:
        counts.update(set(w))
    return counts


def score_word(word: str, counts: Counter, plausible_solutions: Collection[str] = ()) -> int:
    """Sum of coverage counts over the word's distinct letters (+ bonus)."""
    s = sum(counts[ch] for ch in set(word))
    if word in plausible_solutions:
        s += SOLUTION_BONUS
    return s


def score_and_sort(candidates: Sequence[str],
                   plausible_solutions: Collection[str] = ()) -> List[Tuple[str, int]]:
    """
    Rank candidates by distinct-letter coverage.

    Args:
      candidates          : the current candidate pool (already filtered)
      plausible_solutions : words that earn SOLUTION_BONUS; pass a set for
                            large pools

    Returns:
      List of (word, score), highest first, stable on ties.
    """
    if not candidates:
        return []
    counts = coverage_counts(candidates)
    scored = [(w, score_word(w, counts, plausible_solutions)) for w in candidates]
    return sorted(scored, key=lambda ws: ws[1], reverse=True)


def top_suggestions(candidates: Sequence[str], plausible_solutions: Collection[str] = (),
                    n: int = 10) -> List[Tuple[str, int]]:
    return score_and_sort(candidates, plausible_solutions)[:n]
