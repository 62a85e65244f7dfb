# apps/cli/solve.py
"""
CLI entry point for solving a puzzle from guesses you already made.

This script:
  1) Loads the dictionary and the solution list.
  2) Applies each --guess WORD PATTERN in order (G=exact, Y=displaced, X=absent).
  3) Prints the ranked suggestions and, with --analysis, the letter,
     position, constraint and pool breakdowns.
  4) Optionally appends the session's event records to a JSON-lines log.

Usage:
    python -m apps.cli.solve --guess daisy GXXYG --guess dusty GGXGG --analysis
"""

from __future__ import annotations

import argparse
import logging
import sys

from warlord.datasets import DEFAULT_DICTIONARY_PATH, DEFAULT_SOLUTIONS_PATH, load_words
from warlord.engine import PatternParseError
from warlord.ranking import top_suggestions
from warlord.session import Analysis, SolverSession, write_events

BAR_WIDTH = 30


def _print_analysis(a: Analysis) -> None:
    print(f"\nPool: {a.pool.total_remaining} left | "
          f"{a.pool.eliminated_percentage:.1f}% eliminated | entropy {a.pool.entropy:.2f} bits")

    print("\nLetters (candidates containing):")
    for ch, n in sorted(a.letters.frequencies.items(), key=lambda kv: (-kv[1], kv[0])):
        width = round(BAR_WIDTH * n / a.letters.max_frequency) if a.letters.max_frequency else 0
        print(f"  {ch} {'#' * width} {n}")

    print("\nPositions:")
    for i, letters in enumerate(a.positions.possible_letters):
        solved = a.positions.solved_positions[i]
        shown = solved.upper() if solved else " ".join(letters) or "-"
        print(f"  {i + 1}: {shown}")

    c = a.constraints
    print("\nConstraints:")
    for m in c.exact:
        print(f"  {m.letter.upper()} at {m.position + 1} (from {m.guess})")
    for m in c.displaced:
        where = ", ".join(str(p + 1) for p in m.positions)
        print(f"  {m.letter.upper()} not at {where} (from {m.guess})")
    for ch in c.excluded:
        lo, hi = c.min_counts.get(ch, 0), c.max_counts[ch]
        print(f"  {ch.upper()}: excluded" if hi == 0 else f"  {ch.upper()}: {lo}..{hi} occurrence(s)")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="wordle-warlord: narrow and rank candidates")
    ap.add_argument("--guess", nargs=2, action="append", default=[], metavar=("WORD", "PATTERN"),
                    help="a guess and its feedback pattern, e.g. --guess crane XYXXG (repeatable)")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--dictionary", default=DEFAULT_DICTIONARY_PATH, help="path to the dictionary")
    ap.add_argument("--solutions", default=DEFAULT_SOLUTIONS_PATH,
                    help="path to plausible answers (ranking bonus)")
    ap.add_argument("--top", type=int, default=20, help="how many suggestions to print")
    ap.add_argument("--analysis", action="store_true", help="print the pool analysis")
    ap.add_argument("--events", help="append session event records to this JSON-lines file")
    ap.add_argument("--verbose", action="store_true", help="log engine activity to stderr")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        dictionary = load_words(args.dictionary)
        solutions = load_words(args.solutions)
    except FileNotFoundError as e:
        print(f"error: word list not found: {e}", file=sys.stderr)
        return 2
    session = SolverSession(dictionary, solutions, args.N)

    for word, pattern in args.guess:
        try:
            session.submit(word, pattern)
        except PatternParseError as e:
            print(f"error: {word} {pattern}: {e}", file=sys.stderr)
            return 2
        except ValueError as e:
            print(f"error: {e}", file=sys.stderr)
            return 2

    remaining = session.candidates()
    if not remaining:
        print("No consistent word: the guesses contradict each other.")
    else:
        # Before any guess the session offers nothing; rank the opening pool here.
        ranked = session.suggestions(args.top) if session.guesses else top_suggestions(remaining, session.solutions, args.top)
        for word, score in ranked:
            print(f"{word} ({score})")

    if args.analysis:
        _print_analysis(session.analyze())

    if args.events:
        session.complete()
        print(f"Wrote: {write_events(session.events, args.events)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
