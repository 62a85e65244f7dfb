# apps/cli/history.py
"""
Summarize past sessions from a JSON-lines event log.

Usage:
    python -m apps.cli.history --events sessions.jsonl
"""

from __future__ import annotations

import argparse
import sys

from warlord.session import SolverStats, read_events, replay_events


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="wordle-warlord: session history and statistics")
    ap.add_argument("--events", required=True, help="JSON-lines event log")
    ap.add_argument("--last", type=int, default=10, help="list this many most recent sessions")
    args = ap.parse_args(argv)

    try:
        sessions = replay_events(read_events(args.events))
    except (FileNotFoundError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    for s in sessions[-args.last:]:
        path = " ".join(f"{w}:{p}" for w, p in s.guesses) or "-"
        print(f"{s.started_at[:19]} {s.mode:6} {s.outcome:9} {s.guess_count} guess(es) "
              f"adherence {s.optimal_adherence():5.1f}% | {path}")

    st = SolverStats.from_sessions(sessions)
    print(f"\nSessions: {st.total_sessions} (completed {st.completed_sessions}, abandoned {st.abandoned_sessions})")
    print(f"Average guesses: {st.average_guesses:.2f} | average entropy: {st.average_entropy:.2f}")
    print(f"Optimal adherence: {st.optimal_adherence:.1f}% | average deviation: {st.average_deviation:.2f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
