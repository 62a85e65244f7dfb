"""
Structured session event records.

Every state change of a session is written as one typed event:
  - SessionStarted    : mode ("solver" | "game"), word length, game target
  - GuessCommitted    : word, feedback pattern and labels, its SolverGuessRecord
  - GuessUndone       : the word removed by a LIFO undo
  - SessionCompleted  : outcome ("completed" | "won" | "lost" | "abandoned")

Events serialize to flat JSON objects with a "type" discriminator and are
stored one per line (JSON lines). replay_events() folds a stream back into
SessionSummary objects, so history is rebuilt from records rather than by
re-reading log text.
"""

from __future__ import annotations

import datetime as dt
import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import ClassVar, Dict, Iterable, List, Optional, Tuple, Union

from warlord.engine import format_pattern, from_labels, to_labels

from .stats import ABANDONED, SessionSummary, SolverGuessRecord

log = logging.getLogger(__name__)


def utc_now() -> str:
    return dt.datetime.now(dt.timezone.utc).isoformat()


@dataclass(frozen=True)
class SessionStarted:
    type: ClassVar[str] = "session_started"
    session_id: str
    mode: str
    word_length: int
    target: Optional[str] = None
    timestamp: str = field(default_factory=utc_now)


@dataclass(frozen=True)
class GuessCommitted:
    type: ClassVar[str] = "guess_committed"
    session_id: str
    word: str
    pattern: str
    labels: Tuple[str, ...]
    record: SolverGuessRecord
    timestamp: str = field(default_factory=utc_now)


@dataclass(frozen=True)
class GuessUndone:
    type: ClassVar[str] = "guess_undone"
    session_id: str
    word: str
    timestamp: str = field(default_factory=utc_now)


@dataclass(frozen=True)
class SessionCompleted:
    type: ClassVar[str] = "session_completed"
    session_id: str
    outcome: str
    timestamp: str = field(default_factory=utc_now)


Event = Union[SessionStarted, GuessCommitted, GuessUndone, SessionCompleted]

EVENT_TYPES = {cls.type: cls for cls in (SessionStarted, GuessCommitted, GuessUndone, SessionCompleted)}


def to_dict(event: Event) -> Dict:
    d = asdict(event)
    d["type"] = event.type
    return d


def event_from_dict(d: Dict) -> Event:
    d = dict(d)
    kind = d.pop("type", None)
    try:
        cls = EVENT_TYPES[kind]
    except KeyError:
        raise ValueError(f"unknown event type: {kind!r}") from None
    if cls is GuessCommitted:
        feedback = from_labels(d["labels"])
        if format_pattern(feedback) != d["pattern"]:
            raise ValueError(f"labels {d['labels']} do not match pattern {d['pattern']!r}")
        d["labels"] = tuple(to_labels(feedback))
        d["record"] = SolverGuessRecord(**d["record"])
    return cls(**d)


def write_events(events: Iterable[Event], path: str, append: bool = True) -> str:
    """Write events as JSON lines; appends by default so sessions accumulate."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("a" if append else "w", encoding="utf-8") as f:
        for ev in events:
            f.write(json.dumps(to_dict(ev)) + "\n")
    return str(p)


def read_events(path: str) -> List[Event]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(p)
    out: List[Event] = []
    with p.open("r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            try:
                out.append(event_from_dict(json.loads(line)))
            except (ValueError, TypeError, KeyError) as e:
                raise ValueError(f"{p}:{lineno}: bad event record: {e}") from e
    return out


def replay_events(events: Iterable[Event]) -> List[SessionSummary]:
    """
    Rebuild sessions from an event stream, in start order.

    Undo removes the most recent committed guess of its session. Sessions
    with no SessionCompleted event stay "abandoned".
    """
    sessions: Dict[str, SessionSummary] = {}

    for ev in events:
        if isinstance(ev, SessionStarted):
            sessions[ev.session_id] = SessionSummary(
                session_id=ev.session_id,
                mode=ev.mode,
                word_length=ev.word_length,
                started_at=ev.timestamp,
                target=ev.target,
            )
            continue

        s = sessions.get(ev.session_id)
        if s is None:
            log.warning("event %s for unknown session %s skipped", ev.type, ev.session_id)
            continue

        if isinstance(ev, GuessCommitted):
            s.guesses.append((ev.word, ev.pattern))
            s.records.append(ev.record)
        elif isinstance(ev, GuessUndone):
            if s.guesses:
                s.guesses.pop()
                s.records.pop()
                s.undo_count += 1
                s.outcome = ABANDONED
        elif isinstance(ev, SessionCompleted):
            s.outcome = ev.outcome

    return list(sessions.values())
