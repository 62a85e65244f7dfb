# apps/cli/simulate.py
"""
CLI entry point for simulated games.

This script:
  1) Validates the word lists (prints counts + SHA, checks solutions ⊆ dictionary).
  2) Plays every (or a sampled subset of) solution word as a hidden target,
     always guessing the top coverage suggestion, with a progress bar.
  3) Writes:
       - CSV:   per-game results + guess/pattern history columns
       - JSON:  manifest with config, word-list hashes, git commit, summary
       - JSONL: (optional) every game's session event records
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

from tqdm import tqdm

from warlord.datasets import (
    DEFAULT_DICTIONARY_PATH, DEFAULT_SOLUTIONS_PATH, load_words, pretty_summary, validate_wordlists,
)
from warlord.session import (
    WORDLE_MAX_TURNS, SolverStats, git_commit_or_unknown, play_game, replay_events,
    timestamp_id, write_csv, write_events, write_manifest,
)


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="wordle-warlord: simulate games with the coverage ranking")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--dictionary", default=DEFAULT_DICTIONARY_PATH, help="path to the dictionary")
    ap.add_argument("--solutions", default=DEFAULT_SOLUTIONS_PATH, help="path to solution words (targets)")
    ap.add_argument("--sample", type=int, help="play only a random subset of targets (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--events", action="store_true", help="also write session event records (JSONL)")
    ap.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    ap.add_argument("--verbose", action="store_true", help="log engine activity to stderr")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # 1) Validate and load
    rep = validate_wordlists(args.N, args.solutions, args.dictionary)
    print(pretty_summary(rep))
    try:
        dictionary = load_words(args.dictionary)
        solutions = load_words(args.solutions)
    except FileNotFoundError as e:
        print(f"error: word list not found: {e}", file=sys.stderr)
        return 2
    solution_set = frozenset(solutions)

    # 2) Choose targets (deterministic sample by seed)
    targets = [w for w in solutions if len(w) == args.N]
    if args.sample and args.sample < len(targets):
        rng = random.Random(args.seed)
        rng.shuffle(targets)
        targets = targets[: args.sample]

    # 3) Play
    results = []
    for idx, target in enumerate(tqdm(targets, ncols=80, desc="Playing", unit="game",
                                      disable=args.no_progress), 1):
        results.append(play_game(target, dictionary=dictionary, solutions=solution_set,
                                 N=args.N, seed=args.seed + idx))

    events = [ev for r in results for ev in r["events"]]
    stats = SolverStats.from_sessions(replay_events(events))
    print(f"Won {stats.completed_sessions}/{stats.total_sessions} | "
          f"avg guesses {stats.average_guesses:.2f} | avg entropy {stats.average_entropy:.2f}")

    # 4) Outputs
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = write_csv(results, str(outdir / f"sim_{run_id}.csv"), max_turns=WORDLE_MAX_TURNS, N=args.N)
    manifest_path = write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": rep,
        "num_cases": len(results),
        "summary": vars(stats),
    }, str(outdir / f"sim_{run_id}_manifest.json"))
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")

    if args.events:
        print(f"Wrote: {write_events(events, str(outdir / f'sim_{run_id}_events.jsonl'), append=False)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
