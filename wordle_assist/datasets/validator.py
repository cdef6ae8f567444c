"""
Dictionary validator.

What this module does:
- Validate a word list (the guessable dictionary, whitespace-delimited).
- Enforce formatting rules (lowercase, a–z only, exactly five letters).
- Detect duplicates and invalid tokens; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordle_assist.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from .io import is_word


# -----------------------------
# Dataclass for structured reports
# -----------------------------

@dataclass
class WordlistReport:
    """Diagnostics and metadata for one word list."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID tokens
    unique_count: int    # unique valid words (after dedupe)
    invalid_tokens: int  # number of invalid tokens encountered
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


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


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Split a file on whitespace and check every token.

    Unlike load_words, nothing is lowercased here: "CRANE" is reported as
    invalid so the file can be fixed at the source.

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0
    for tok in path.read_text(encoding="utf-8").split():
        if is_word(tok):
            valid.append(tok)
        else:
            invalid += 1
    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(path: str) -> Dict:
    """
    Validate a guessable word list.

    Returns a JSON-serializable dict (WordlistReport schema). `passed` is
    strict: the file must exist, be non-empty and contain no invalid tokens.
    Duplicates are reported but do not fail validation (load_words drops them).
    """
    p = Path(path)
    if not p.exists():
        rep = WordlistReport(path, False, 0, 0, 0, "", False,
                             [f"word list not found: {path}"])
        return asdict(rep)

    words, invalid = _load_and_check(p)
    unique = len(set(words))

    issues: List[str] = []
    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid token(s)")
    if unique != len(words):
        issues.append(f"word list contains {len(words) - unique} duplicate(s)")

    rep = WordlistReport(
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=unique,
        invalid_tokens=invalid,
        sha256=_sha256_file(p),
        passed=bool(words) and invalid == 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words=12972 (uniq=12972, invalid=0, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    line = (
        f"words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_tokens']}, sha={sha}) | {status}"
    )
    if report["issues"]:
        line += " | " + "; ".join(report["issues"])
    return line
