"""
Word-list validator.

What this module does:
- Validate a pair of word lists: solutions (plausible final answers) and the
  dictionary (every word the solver may filter and suggest).
- Enforce formatting rules (lowercase, a-z only, exact length N, one per line).
- Count duplicates and invalid lines; compute SHA-256 of the raw files.
- Check that solutions are a subset of the dictionary.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Duplicates are reported but do not fail validation: the solver tolerates
them, they only repeat a word in the suggestion list.

Typical use:
    from warlord.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists(5, "data/solutions.txt", "data/words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib
import logging

log = logging.getLogger(__name__)


@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str
    exists: bool
    count: int           # valid words after cleaning
    sha256: str          # of raw bytes; empty if missing
    unique_count: int
    invalid_lines: int


@dataclass
class ValidationReport:
    """Validation result for the (solutions, dictionary) pair."""
    N: int
    solutions: FileReport
    dictionary: FileReport
    solutions_subset_dictionary: bool
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Return (valid_words, invalid_count). Blank lines count as invalid;
    valid words are already-lowercase, alphabetic and exactly N long.
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w == w.lower() and w.isalpha() and len(w) == N:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def _file_report(path: Path, words: List[str], invalid: int) -> FileReport:
    return FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )


def validate_wordlists(N: int, solutions_path: str, dictionary_path: str) -> Dict:
    """
    Validate the solutions/dictionary word lists for length N.

    Returns
    -------
    Dict
        JSON-serializable ValidationReport. `passed` requires both files
        non-empty, no invalid lines, and solutions within the dictionary.
    """
    issues: List[str] = []
    sol_p = Path(solutions_path)
    dic_p = Path(dictionary_path)

    if not sol_p.exists() or not dic_p.exists():
        if not sol_p.exists():
            issues.append(f"solutions file not found: {solutions_path}")
        if not dic_p.exists():
            issues.append(f"dictionary file not found: {dictionary_path}")
        rep = ValidationReport(
            N=N,
            solutions=FileReport(solutions_path, sol_p.exists(), 0, "", 0, 0),
            dictionary=FileReport(dictionary_path, dic_p.exists(), 0, "", 0, 0),
            solutions_subset_dictionary=False,
            passed=False,
            issues=issues,
        )
        log.warning("word lists missing: %s", "; ".join(issues))
        return asdict(rep)

    solutions, sol_invalid = _load_and_check(sol_p, N)
    dictionary, dic_invalid = _load_and_check(dic_p, N)
    sol_report = _file_report(sol_p, solutions, sol_invalid)
    dic_report = _file_report(dic_p, dictionary, dic_invalid)

    missing = set(solutions) - set(dictionary)
    subset_ok = not missing
    if not subset_ok:
        issues.append(f"solutions not subset of dictionary (e.g., {sorted(missing)[:5]})")

    for name, rep_ in (("solutions", sol_report), ("dictionary", dic_report)):
        if rep_.count == 0:
            issues.append(f"{name} file contains 0 valid words")
        if rep_.invalid_lines:
            issues.append(f"{name} has {rep_.invalid_lines} invalid line(s)")
        if rep_.count != rep_.unique_count:
            issues.append(f"{name} contains {rep_.count - rep_.unique_count} duplicate line(s)")

    passed = (
        subset_ok
        and sol_invalid == 0
        and dic_invalid == 0
        and sol_report.count > 0
        and dic_report.count > 0
    )

    rep = ValidationReport(
        N=N,
        solutions=sol_report,
        dictionary=dic_report,
        solutions_subset_dictionary=subset_ok,
        passed=passed,
        issues=issues,
    )
    if issues:
        log.info("word list issues: %s", "; ".join(issues))
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    One-liner for the console, e.g.:
        N=5 | solutions=2315 (uniq=2315, sha=abc123...) | dictionary=14855 (uniq=14855, sha=def456...) | solutions⊆dictionary=True | OK
    """
    s = report["solutions"]
    d = report["dictionary"]
    status = "OK" if report["passed"] else "FAIL"
    return (
        f"N={report['N']} | solutions={s['count']} (uniq={s['unique_count']}, sha={(s.get('sha256') or '')[:12]}) "
        f"| dictionary={d['count']} (uniq={d['unique_count']}, sha={(d.get('sha256') or '')[:12]}) "
        f"| solutions⊆dictionary={report['solutions_subset_dictionary']} | {status}"
    )
