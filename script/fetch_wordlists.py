"""
Download the public Wordle word lists and write clean local copies.

What it does:
- Downloads the full guess dictionary and the historical answer list.
- Lowercases, keeps only N-letter alphabetic tokens, de-duplicates while
  preserving order, and writes one word per line.
- Skips a file that already exists unless --force is given.

Usage:
    python -m script.fetch_wordlists
    python -m script.fetch_wordlists --outdir data --force
"""

import argparse
import logging
from pathlib import Path

import requests

from warlord.datasets import write_lines

WORDLIST_URL = "https://raw.githubusercontent.com/tabatkins/wordle-list/main/words"
SOLUTIONS_URL = ("https://gist.githubusercontent.com/cfreshman/a03ef2cba789d8cf00c08f767e0fad7b"
                 "/raw/wordle-answers-alphabetical.txt")

log = logging.getLogger("fetch_wordlists")


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def fetch_words(url: str, N: int) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    words = [t.strip().lower() for t in r.text.split()]
    return unique_preserve_order(w for w in words if len(w) == N and w.isalpha())


def ensure_file(path: Path, url: str, N: int, force: bool = False) -> bool:
    """Download `url` into `path` if it is missing (or forced). True if written."""
    if path.exists() and not force:
        log.info("%s exists, skipping", path)
        return False
    log.info("downloading %s", url)
    words = fetch_words(url, N)
    write_lines(words, path)
    log.info("wrote %d words to %s", len(words), path)
    return True


def main():
    ap = argparse.ArgumentParser(description="Download the Wordle dictionary and solution list.")
    ap.add_argument("--outdir", default="data", help="output directory")
    ap.add_argument("--N", type=int, default=5, help="word length to keep")
    ap.add_argument("--force", action="store_true", help="re-download even if files exist")
    args = ap.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    outdir = Path(args.outdir)
    ensure_file(outdir / "words.txt", WORDLIST_URL, args.N, args.force)
    ensure_file(outdir / "solutions.txt", SOLUTIONS_URL, args.N, args.force)


if __name__ == "__main__":
    main()
