"""
Candidate filtering given guess history.

Given:
  - a dictionary of words (ordered, duplicates tolerated)
  - a history of (guess, feedback) pairs
  - the session word length N

Return:
  - words that are consistent with ALL feedback seen so far.

The consistency check works straight from the feedback (it never re-scores
the candidate), in three ordered passes:
  1) Exact positions must hold the guessed letter.
  2) Displaced letters must sit elsewhere in the candidate.
  3) Absent letters cap the candidate's count of that letter at the number
     of Exact/Displaced marks the same guess gave it.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from .feedback import (
    ABSENT, DISPLACED, EXACT, ContractViolation, FeedbackSymbol, format_pattern,
)


@dataclass(frozen=True)
class Guess:
    word: str
    feedback: Tuple[FeedbackSymbol, ...]

    @property
    def pattern(self) -> str:
        return format_pattern(self.feedback)


def matches(candidate: str, guess: str, feedback: Sequence[FeedbackSymbol]) -> bool:
    """
    Is `candidate` still possible after `guess` received `feedback`?

    Examples:
      matches("dusky", "daisy", parse_pattern("GXXYG")) -> True
      matches("label", "allot", parse_pattern("XYXXX")) -> False
    """
    if len(candidate) != len(guess) or len(guess) != len(feedback):
        return False

    counts = Counter(candidate)
    required: Counter[str] = Counter()

    # Pass 1: exact positions
    for i, (g, fb) in enumerate(zip(guess, feedback)):
        if fb is EXACT:
            if candidate[i] != g:
                return False
            required[g] += 1

    # Pass 2: displaced letters are present, but not here
    for i, (g, fb) in enumerate(zip(guess, feedback)):
        if fb is DISPLACED:
            if candidate[i] == g or g not in counts:
                return False
            required[g] += 1

    for ch, need in required.items():
        if counts[ch] < need:
            return False

    # Pass 3: absent caps the count at what passes 1-2 justified
    for g, fb in zip(guess, feedback):
        if fb is ABSENT and counts[g] > required[g]:
            return False

    return True


def filter_words(words: Iterable[str], guess: str,
                 feedback: Sequence[FeedbackSymbol]) -> List[str]:
    """Keep words of the guess's length that are consistent with one guess."""
    n = len(guess)
    return [w for w in words if len(w) == n and matches(w, guess, feedback)]


class ConstraintEngine:
    """
    Ordered guess history for one session of fixed word length.

    Guesses are only ever removed last-in-first-out via pop_guess().
    """

    def __init__(self, word_length: int):
        if word_length <= 0:
            raise ContractViolation(f"word length must be positive, got {word_length}")
        self._word_length = int(word_length)
        self._guesses: List[Guess] = []

    @property
    def word_length(self) -> int:
        return self._word_length

    @property
    def guesses(self) -> Tuple[Guess, ...]:
        return tuple(self._guesses)

    def __len__(self) -> int:
        return len(self._guesses)

    def add_guess(self, word: str, feedback: Sequence[FeedbackSymbol]) -> Guess:
        word = word.lower()
        if len(word) != self._word_length or len(feedback) != self._word_length:
            raise ContractViolation(
                f"guess {word!r} with {len(feedback)} feedback symbols does not fit "
                f"word length {self._word_length}")
        g = Guess(word, tuple(feedback))
        self._guesses.append(g)
        return g

    def pop_guess(self) -> Optional[Guess]:
        if not self._guesses:
            return None
        return self._guesses.pop()

    def is_consistent(self, candidate: str) -> bool:
        return all(matches(candidate, g.word, g.feedback) for g in self._guesses)

    def filter(self, dictionary: Iterable[str]) -> List[str]:
        """
        Return the candidate pool: dictionary entries of the session length
        consistent with every stored guess, in dictionary order.
        """
        n = self._word_length
        return [w for w in dictionary if len(w) == n and self.is_consistent(w)]
