"""
Session primitives.

- SolverSession: drives the constraint engine for one user session; every
  submitted guess re-derives the candidate pool, the ranking and the pool
  statistics, and is recorded as a typed event.
- play_game:     simulate one game against a hidden target, always playing
                 the top coverage suggestion.
- run_batch:     play many targets in sequence.

These are UI-agnostic so a CLI, a notebook or a TUI can drive them.
"""

from __future__ import annotations

import logging
import random
import time
import uuid
from dataclasses import dataclass
from typing import Collection, Dict, List, Optional, Sequence, Tuple, Union

from warlord.analysis import (
    ConstraintSummary, LetterAnalysis, PoolStats, PositionAnalysis,
    constraint_summary, letter_analysis, position_analysis, solution_pool_stats,
)
from warlord.engine import (
    ConstraintEngine, FeedbackSymbol, Guess, filter_words, format_pattern,
    generate_feedback, is_solved, parse_submission, to_labels,
)
from warlord.ranking import coverage_counts, score_and_sort, score_word

from .events import Event, GuessCommitted, GuessUndone, SessionCompleted, SessionStarted
from .stats import ABANDONED, COMPLETED, LOST, WON, SolverGuessRecord

log = logging.getLogger(__name__)

# Single source of truth for Wordle turn budget.
WORDLE_MAX_TURNS = 6

SOLVER_MODE = "solver"
GAME_MODE = "game"


@dataclass(frozen=True)
class Analysis:
    """The four analysis snapshots for one pool, recomputed together."""
    letters: LetterAnalysis
    positions: PositionAnalysis
    constraints: ConstraintSummary
    pool: PoolStats


class SolverSession:
    """
    One solving session over a fixed dictionary.

    The current pool is narrowed incrementally on submit (guesses are ANDed,
    so this equals a full re-filter) and rebuilt from the dictionary on undo.
    """

    def __init__(
            self,
            dictionary: Sequence[str],
            solutions: Collection[str] = (),
            word_length: int = 5,
            *,
            mode: str = SOLVER_MODE,
            target: Optional[str] = None,
            session_id: Optional[str] = None,
    ):
        self.dictionary = list(dictionary)
        self.solutions = frozenset(solutions)
        self.engine = ConstraintEngine(word_length)
        self.mode = mode
        self.target = target
        self.session_id = session_id or uuid.uuid4().hex[:12]
        self.records: List[SolverGuessRecord] = []
        self.entropy_history: List[float] = []
        self.outcome: Optional[str] = None
        self.events: List[Event] = [
            SessionStarted(self.session_id, mode, word_length, target)
        ]
        self._pool = self.engine.filter(self.dictionary)
        self._ranked: Optional[List[Tuple[str, int]]] = None
        log.info("session %s started (%s, N=%d, pool=%d)",
                 self.session_id, mode, word_length, len(self._pool))

    @property
    def word_length(self) -> int:
        return self.engine.word_length

    @property
    def guesses(self) -> Tuple[Guess, ...]:
        return self.engine.guesses

    @property
    def finished(self) -> bool:
        return self.outcome is not None

    def candidates(self) -> List[str]:
        return list(self._pool)

    def ranking(self) -> List[Tuple[str, int]]:
        """Coverage ranking of the current pool, computed once per pool."""
        if self._ranked is None:
            self._ranked = score_and_sort(self._pool, self.solutions)
        return self._ranked

    def suggestions(self, n: int = 10) -> List[Tuple[str, int]]:
        """Top-n ranked pool words; empty until the first guess is in."""
        if not self.engine.guesses:
            return []
        return self.ranking()[:n]

    def analyze(self) -> Analysis:
        pool = self._pool
        return Analysis(
            letters=letter_analysis(pool),
            positions=position_analysis(pool, self.word_length),
            constraints=constraint_summary(self.engine.guesses),
            pool=solution_pool_stats(self.dictionary, pool),
        )

    def submit(self, word: str,
               feedback: Union[str, Sequence[FeedbackSymbol]]) -> SolverGuessRecord:
        """
        Commit a guess. `feedback` is a pattern string ("GXXYG") or symbols.

        Raises ValueError / PatternParseError for a bad pattern string
        (nothing is changed), ContractViolation for mis-sized symbols.
        """
        if isinstance(feedback, str):
            word, feedback = parse_submission(word, feedback, self.word_length)
        else:
            word = word.strip().lower()

        before = self._pool
        ranked = self.ranking()
        if ranked:
            optimal_word, optimal_score = ranked[0]
            actual = score_word(word, coverage_counts(before), self.solutions)
        else:
            optimal_word, optimal_score, actual = word, 0, 0

        guess = self.engine.add_guess(word, feedback)
        self._pool = filter_words(before, guess.word, guess.feedback)
        self._ranked = None
        stats = solution_pool_stats(self.dictionary, self._pool)

        record = SolverGuessRecord(
            word=guess.word,
            pool_size_before=len(before),
            pool_size_after=len(self._pool),
            entropy=stats.entropy,
            optimal_word=optimal_word,
            optimal_score=optimal_score,
            deviation=actual - optimal_score,
        )
        self.records.append(record)
        self.entropy_history.append(stats.entropy)
        self.events.append(GuessCommitted(
            self.session_id, guess.word, guess.pattern, tuple(to_labels(guess.feedback)), record))
        log.info("guess %s %s (pool: %d->%d, entropy: %.2f, optimal: %s, deviation: %d)",
                 guess.word, guess.pattern, record.pool_size_before, record.pool_size_after,
                 record.entropy, optimal_word, record.deviation)

        if not self._pool:
            log.info("no consistent word left in session %s", self.session_id)
        if is_solved(guess.feedback):
            self.complete(WON if self.mode == GAME_MODE else COMPLETED)
        return record

    def undo(self) -> Optional[Guess]:
        """Remove the most recent guess; None when there is nothing to undo."""
        g = self.engine.pop_guess()
        if g is None:
            return None
        self.records.pop()
        self.outcome = None
        self._pool = self.engine.filter(self.dictionary)
        self._ranked = None
        self.rebuild_entropy_history()
        self.events.append(GuessUndone(self.session_id, g.word))
        log.info("undo: removed guess %s", g.word)
        return g

    def rebuild_entropy_history(self) -> None:
        """Replay the guesses on a fresh engine, one pool entropy per guess."""
        self.entropy_history.clear()
        replay = ConstraintEngine(self.word_length)
        for g in self.engine.guesses:
            replay.add_guess(g.word, g.feedback)
            stats = solution_pool_stats(self.dictionary, replay.filter(self.dictionary))
            self.entropy_history.append(stats.entropy)

    def complete(self, outcome: str = ABANDONED) -> None:
        if self.outcome is not None:
            return
        self.outcome = outcome
        self.events.append(SessionCompleted(self.session_id, outcome))
        log.info("session %s %s after %d guess(es)", self.session_id, outcome, len(self.engine))


def _pick(ranked: List[Tuple[str, int]], rng: Optional[random.Random]) -> str:
    """Top-scoring word; seeded RNG breaks ties when given."""
    best = ranked[0][1]
    ties = [w for w, s in ranked if s == best]
    return rng.choice(ties) if rng is not None else ties[0]


def play_game(
        target: str,
        *,
        dictionary: Sequence[str],
        solutions: Collection[str] = (),
        N: int = 5,
        max_turns: int = WORDLE_MAX_TURNS,
        seed: int | None = None,
) -> Dict:
    """
    Play one game until solved or the turn budget is exhausted.

    Returns:
        dict with keys: answer, success, guesses, time_ms,
        history (list[(guess, pattern)]), records, events
    """
    if max_turns != WORDLE_MAX_TURNS:
        raise ValueError(f"max_turns must be {WORDLE_MAX_TURNS} for Wordle-like rules; got {max_turns}")
    target = target.strip().lower()
    if len(target) != N:
        raise ValueError(f"target {target!r} is not {N} letters")

    rng = random.Random(seed) if seed is not None else None
    session = SolverSession(dictionary, solutions, N, mode=GAME_MODE, target=target)

    t0 = time.perf_counter()
    for _ in range(max_turns):
        ranked = session.ranking()
        if not ranked:
            # Target is not in the dictionary; nothing consistent to play.
            break
        guess = _pick(ranked, rng)
        session.submit(guess, generate_feedback(target, guess))
        if session.finished:
            break

    if not session.finished:
        session.complete(LOST)

    return {
        "answer": target,
        "success": session.outcome == WON,
        "guesses": len(session.engine),
        "time_ms": (time.perf_counter() - t0) * 1000.0,
        "history": [(g.word, format_pattern(g.feedback)) for g in session.guesses],
        "records": list(session.records),
        "events": list(session.events),
    }


def run_batch(
        targets: Sequence[str],
        *,
        dictionary: Sequence[str],
        solutions: Collection[str] = (),
        N: int = 5,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Play many targets back-to-back. 'sample' keeps only the first K targets
    of length N. Each game's seed is seed + index so runs are reproducible.
    """
    pool = [t for t in targets if len(t) == N]
    if sample is not None:
        pool = pool[:sample]
    sol = frozenset(solutions)

    out: List[Dict] = []
    for idx, target in enumerate(pool, start=1):
        case_seed = None if seed is None else seed + idx
        out.append(play_game(target, dictionary=dictionary, solutions=sol, N=N, seed=case_seed))
    return out
