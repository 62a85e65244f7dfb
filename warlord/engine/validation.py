"""
Boundary checks for a submitted guess.

This module answers two questions:
  - "Is this word an acceptable guess?" (validate_guess, boolean)
  - "Turn this raw (word, pattern) pair into engine input, or say why not"
    (parse_submission, raises)

Nothing here touches engine state, so a rejected submission leaves the
session exactly as it was.
"""

from __future__ import annotations

from typing import Iterable, List, Set, Tuple

from .feedback import FeedbackSymbol, parse_pattern


def validate_guess(word: str, allowed: Iterable[str], N: int) -> bool:
    """
    Return True if `word` is alphabetic, has length N, and is in `allowed`.

    Notes:
      - `allowed` may be a large list; a local set is built for membership.
        Pass a set if you call this in a loop.
    """
    if not isinstance(word, str):
        return False

    w = word.strip().lower()
    if len(w) != N or not w.isalpha():
        return False

    allowed_set: Set[str] = allowed if isinstance(allowed, set) else {a.strip().lower() for a in allowed}
    return w in allowed_set


def parse_submission(word: str, pattern: str, N: int) -> Tuple[str, List[FeedbackSymbol]]:
    """
    Normalize a (word, pattern) pair typed by a user.

    Raises:
      ValueError         : word is not N letters, or lengths differ
      PatternParseError  : pattern holds a character other than G/Y/X
    """
    w = word.strip().lower()
    p = pattern.strip()
    if len(w) != N or not w.isalpha():
        raise ValueError(f"guess must be {N} letters a-z, got {word!r}")
    if len(p) != len(w):
        raise ValueError("guess and pattern must be the same length")
    return w, parse_pattern(p)
