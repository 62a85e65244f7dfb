"""
Per-guess records and aggregate statistics for solver/game sessions.

A SolverGuessRecord captures one committed guess:
  pool_size_before / pool_size_after : candidate pool around the guess
  entropy                            : pool entropy after the guess
  optimal_word / optimal_score       : top coverage suggestion for the
                                       pool before the guess
  deviation                          : submitted word's coverage score on
                                       that same pool minus optimal_score;
                                       positive only for a word scoring
                                       above every pool word
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import numpy as np

from warlord.engine import ConstraintEngine, parse_pattern

# Session outcomes. Solver sessions finish "completed"; games "won"/"lost".
COMPLETED = "completed"
WON = "won"
LOST = "lost"
ABANDONED = "abandoned"
FINISHED_OUTCOMES = (COMPLETED, WON)


@dataclass(frozen=True)
class SolverGuessRecord:
    word: str
    pool_size_before: int
    pool_size_after: int
    entropy: float
    optimal_word: str
    optimal_score: int
    deviation: int

    @property
    def was_optimal(self) -> bool:
        return self.deviation >= 0


@dataclass
class SessionSummary:
    """One session as reconstructed from its event records."""
    session_id: str
    mode: str
    word_length: int
    started_at: str
    target: Optional[str] = None
    guesses: List[Tuple[str, str]] = field(default_factory=list)   # (word, pattern)
    records: List[SolverGuessRecord] = field(default_factory=list)
    outcome: str = ABANDONED
    undo_count: int = 0

    @property
    def guess_count(self) -> int:
        return len(self.guesses)

    def to_engine(self) -> ConstraintEngine:
        """Rebuild the constraint engine this session ended with."""
        engine = ConstraintEngine(self.word_length)
        for word, pattern in self.guesses:
            engine.add_guess(word, parse_pattern(pattern))
        return engine

    def optimal_adherence(self) -> float:
        """Percentage of guesses that matched the top suggestion (100 when none)."""
        if not self.records:
            return 100.0
        return 100.0 * sum(r.was_optimal for r in self.records) / len(self.records)

    def average_deviation(self) -> float:
        return _mean([r.deviation for r in self.records])

    def average_entropy(self) -> float:
        return _mean([r.entropy for r in self.records])


@dataclass
class SolverStats:
    total_sessions: int = 0
    completed_sessions: int = 0
    abandoned_sessions: int = 0
    average_guesses: float = 0.0
    average_entropy: float = 0.0
    optimal_adherence: float = 0.0
    average_deviation: float = 0.0

    @classmethod
    def from_sessions(cls, sessions: Sequence[SessionSummary]) -> "SolverStats":
        if not sessions:
            return cls()

        finished = [s for s in sessions if s.outcome in FINISHED_OUTCOMES]
        records = [r for s in sessions for r in s.records]

        return cls(
            total_sessions=len(sessions),
            completed_sessions=len(finished),
            abandoned_sessions=sum(s.outcome == ABANDONED for s in sessions),
            average_guesses=_mean([s.guess_count for s in finished]),
            average_entropy=_mean([r.entropy for r in records]),
            optimal_adherence=(100.0 * sum(r.was_optimal for r in records) / len(records)) if records else 0.0,
            average_deviation=_mean([r.deviation for r in records]),
        )


def _mean(xs: Sequence[float]) -> float:
    return float(np.mean(xs)) if len(xs) else 0.0
