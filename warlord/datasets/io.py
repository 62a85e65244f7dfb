from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Iterable, List, Sequence

log = logging.getLogger(__name__)

DEFAULT_DICTIONARY_PATH = "data/words.txt"
DEFAULT_SOLUTIONS_PATH = "data/solutions.txt"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def load_words(p: Path | str) -> List[str]:
    """
    Read a newline-separated word list, normalize to lowercase, drop blanks.
    Order and duplicates are kept.
    """
    words = [w.strip().lower() for w in read_lines(p) if w.strip()]
    log.debug("loaded %d words from %s", len(words), p)
    return words


def select_random_word(words: Sequence[str], N: int, rng: random.Random | None = None) -> str:
    """Pick a random N-letter word; ValueError if there is none."""
    pool = [w for w in words if len(w) == N]
    if not pool:
        raise ValueError(f"no {N}-letter words available")
    return (rng or random.Random()).choice(pool)
