"""
Word-list loading rules and validator for wordmastermind.

What this module does:
- Read the raw entries of a word list: a JSON array of strings, a JSON object
  keyed by word (the usual scrabble-dictionary.json shape), or a plain text
  file with one word per line.
- Normalize entries the way the dictionary stores them (stripped, lowercase,
  alphabetic only) and count the ones that had to be dropped.
- Produce a machine-readable report (counts, SHA-256, per-length histogram,
  duplicates, invalid entries) plus a pretty one-line summary.

Typical use:
    from wordmastermind.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("words/scrabble-dictionary.json", min_length=2)
    print(pretty_summary(rep))
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, Iterable, List, Tuple
import hashlib
import json

from wordmastermind.errors import DictionaryFormatError
from .io import read_json, read_lines


# -----------------------------
# Dataclass for structured reports
# -----------------------------

@dataclass
class WordListReport:
    """Diagnostics and metadata for one word-list file."""
    path: str                 # file path (as given)
    exists: bool              # did the file exist on disk?
    format: str               # "json" or "text"
    count: int                # number of VALID words after cleaning
    unique_count: int         # unique valid words (after dedupe)
    invalid_entries: int      # entries dropped as non-alphabetic / wrong type
    out_of_range: int         # valid words outside [min_length, max_length]
    sha256: str               # SHA-256 of raw file bytes (empty string if missing)
    lengths: Dict[int, int] = field(default_factory=dict)  # word length -> unique words
    passed: bool = False
    issues: List[str] = field(default_factory=list)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def source_format(path: Path | str) -> str:
    """`json` for *.json files, `text` for everything else."""
    return "json" if Path(path).suffix.lower() == ".json" else "text"


def read_entries(path: Path | str) -> List[object]:
    """
    Read the raw entries of a word list without normalizing them.

    Raises:
      FileNotFoundError     : path does not exist
      DictionaryFormatError : not UTF-8, unparsable JSON or unexpected top-level shape
    """
    path = Path(path)
    try:
        if source_format(path) == "text":
            return list(read_lines(path))
        data = read_json(path)
    except UnicodeDecodeError as e:
        raise DictionaryFormatError(f"Word list is not valid UTF-8: {path} ({e})") from e
    except json.JSONDecodeError as e:
        raise DictionaryFormatError(f"Word list is not valid JSON: {path} ({e})") from e

    # {"word": "definition", ...} -> keys are the words
    if isinstance(data, dict):
        return list(data.keys())
    if isinstance(data, list):
        return data
    raise DictionaryFormatError(
        f"Word list must be a JSON array or object, got {type(data).__name__}: {path}")


def clean_entries(entries: Iterable[object]) -> Tuple[List[str], int]:
    """
    Normalize raw entries into dictionary words.

    Rules:
      - strip surrounding whitespace and lowercase
      - blank entries are skipped (not counted)
      - non-strings and non-alphabetic tokens are INVALID

    Returns:
      (valid_words, invalid_count); valid_words keeps duplicates and order.
    """
    valid: List[str] = []
    invalid = 0

    for raw in entries:
        if not isinstance(raw, str):
            invalid += 1
            continue
        w = raw.strip().lower()
        if not w:
            continue
        if w.isalpha():
            valid.append(w)
        else:
            invalid += 1

    return valid, invalid


def _as_dict(rep: WordListReport) -> Dict:
    """Dataclass → plain dict (stable ordering)."""
    return asdict(rep)


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(path: str, min_length: int = 1, max_length: int | None = None) -> Dict:
    """
    Validate a word list before handing it to the dictionary.

    Parameters
    ----------
    path : str
        Word list location (.json array/object, or one word per line).
    min_length, max_length : int
        Length range the game intends to use; words outside it are reported
        but do not fail validation on their own. `max_length=None` = no cap.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordListReport schema). `passed`
        requires: file readable, non-empty, no invalid entries, no duplicates,
        and at least one word inside the requested length range.
    """
    p = Path(path)
    fmt = source_format(p)

    if not p.exists():
        rep = WordListReport(path=path, exists=False, format=fmt, count=0, unique_count=0,
                             invalid_entries=0, out_of_range=0, sha256="",
                             issues=[f"word list not found: {path}"])
        return _as_dict(rep)

    sha = _sha256_file(p)
    try:
        entries = read_entries(p)
    except DictionaryFormatError as e:
        rep = WordListReport(path=str(p), exists=True, format=fmt, count=0, unique_count=0,
                             invalid_entries=0, out_of_range=0, sha256=sha, issues=[str(e)])
        return _as_dict(rep)

    words, invalid = clean_entries(entries)
    unique = set(words)
    lengths = Counter(len(w) for w in unique)

    def in_range(n: int) -> bool:
        return n >= min_length and (max_length is None or n <= max_length)

    out_of_range = sum(c for n, c in lengths.items() if not in_range(n))
    in_range_count = len(unique) - out_of_range

    issues: List[str] = []
    if not words:
        issues.append("word list contains 0 valid words")
    elif in_range_count == 0:
        upper = "∞" if max_length is None else max_length
        issues.append(f"no words with length in [{min_length}, {upper}]")
    if invalid:
        issues.append(f"word list has {invalid} invalid entr{'y' if invalid == 1 else 'ies'}")
    if len(words) != len(unique):
        issues.append("word list contains duplicate entries")

    passed = bool(words) and in_range_count > 0 and invalid == 0 and len(words) == len(unique)

    rep = WordListReport(
        path=str(p),
        exists=True,
        format=fmt,
        count=len(words),
        unique_count=len(unique),
        invalid_entries=invalid,
        out_of_range=out_of_range,
        sha256=sha,
        lengths=dict(sorted(lengths.items())),
        passed=passed,
        issues=issues,
    )
    return _as_dict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        scrabble-dictionary.json | words=1200 (uniq=1200, sha=abc123...) | lengths=2..15 | invalid=0 | OK
    """
    name = Path(report["path"]).name
    lengths = report.get("lengths") or {}
    span = f"{min(lengths)}..{max(lengths)}" if lengths else "-"
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"{name} | words={report['count']} (uniq={report['unique_count']}, sha={sha}) "
        f"| lengths={span} | invalid={report['invalid_entries']} | {status}"
    )
