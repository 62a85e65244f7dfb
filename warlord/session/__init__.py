from .core import (
    Analysis, SolverSession, play_game, run_batch,
    WORDLE_MAX_TURNS, SOLVER_MODE, GAME_MODE,
)
from .events import (
    SessionStarted, GuessCommitted, GuessUndone, SessionCompleted,
    to_dict, event_from_dict, write_events, read_events, replay_events,
)
from .stats import (
    SolverGuessRecord, SessionSummary, SolverStats,
    COMPLETED, WON, LOST, ABANDONED,
)
from .io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown

__all__ = [
    "Analysis", "SolverSession", "play_game", "run_batch",
    "WORDLE_MAX_TURNS", "SOLVER_MODE", "GAME_MODE",
    "SessionStarted", "GuessCommitted", "GuessUndone", "SessionCompleted",
    "to_dict", "event_from_dict", "write_events", "read_events", "replay_events",
    "SolverGuessRecord", "SessionSummary", "SolverStats",
    "COMPLETED", "WON", "LOST", "ABANDONED",
    "write_csv", "write_manifest", "timestamp_id", "git_commit_or_unknown",
]
