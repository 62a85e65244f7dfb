"""
Wordle-style feedback symbols, pattern strings and feedback generation.

Conventions:
  - 'G'  : Exact     = correct letter in the correct position (green)
  - 'Y'  : Displaced = letter present in the target, wrong position (yellow)
  - 'X'  : Absent    = letter not present (or present fewer times than guessed)

Pattern strings are case-insensitive on input and upper-case on output.
Event records persist feedback as the long labels 'green' / 'yellow' / 'gray'.

generate_feedback is the two-pass canonical Wordle scorer:
  1) First pass marks all exact positions and consumes them from the
     target's letter pool.
  2) Second pass marks displaced letters only while the letter still has
     remaining availability; everything else is absent.
"""

from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import Iterable, List, Sequence


class ContractViolation(AssertionError):
    """Caller misuse (e.g. word/feedback length mismatch). Not recoverable."""


class PatternParseError(ValueError):
    """A feedback pattern contained a character outside G/Y/X."""

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"invalid pattern character: {char!r} at position {position}")


class FeedbackSymbol(Enum):
    EXACT = "G"
    DISPLACED = "Y"
    ABSENT = "X"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def from_label(cls, label: str) -> "FeedbackSymbol":
        for sym, name in _LABELS.items():
            if name == label:
                return sym
        raise ValueError(f"unknown feedback label: {label!r}")


_LABELS = {
    FeedbackSymbol.EXACT: "green",
    FeedbackSymbol.DISPLACED: "yellow",
    FeedbackSymbol.ABSENT: "gray",
}

EXACT = FeedbackSymbol.EXACT
DISPLACED = FeedbackSymbol.DISPLACED
ABSENT = FeedbackSymbol.ABSENT


def parse_pattern(pattern: str) -> List[FeedbackSymbol]:
    """
    Parse a code string like "gxxYg" into FeedbackSymbols.

    Raises PatternParseError naming the first unrecognized character.
    """
    out: List[FeedbackSymbol] = []
    for i, ch in enumerate(pattern):
        try:
            out.append(FeedbackSymbol(ch.upper()))
        except ValueError:
            raise PatternParseError(ch, i) from None
    return out


def format_pattern(feedback: Iterable[FeedbackSymbol]) -> str:
    """Inverse of parse_pattern: [EXACT, ABSENT] -> "GX"."""
    return "".join(fb.value for fb in feedback)


def to_labels(feedback: Iterable[FeedbackSymbol]) -> List[str]:
    return [fb.label for fb in feedback]


def from_labels(labels: Iterable[str]) -> List[FeedbackSymbol]:
    return [FeedbackSymbol.from_label(s) for s in labels]


def is_solved(feedback: Sequence[FeedbackSymbol]) -> bool:
    """True when every position is exact (and there is at least one)."""
    return bool(feedback) and all(fb is EXACT for fb in feedback)


def generate_feedback(target: str, guess: str) -> List[FeedbackSymbol]:
    """
    Compute feedback for `guess` against a known `target`.

    Preconditions:
      - len(guess) == len(target)  (ContractViolation otherwise)

    Examples:
      format_pattern(generate_feedback("apple", "allay")) -> "GYXXX"
      format_pattern(generate_feedback("level", "belle")) -> "XGYYY"
    """
    target = target.strip().lower()
    guess = guess.strip().lower()
    if len(guess) != len(target):
        raise ContractViolation(
            f"guess and target must be the same length ({len(guess)} != {len(target)})")

    result = [ABSENT] * len(guess)

    # Pass 1: exact positions consume from the target's multiset
    remaining = Counter(target)
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            result[i] = EXACT
            remaining[g] -= 1

    # Pass 2: displaced only while availability remains
    for i, g in enumerate(guess):
        if result[i] is EXACT:
            continue
        if remaining[g] > 0:
            result[i] = DISPLACED
            remaining[g] -= 1

    return result
