"""
Word-list report.

What this module does:
- Inspect one word list (e.g. a system dictionary) for a word length N.
- Count lines that yield a usable candidate (ASCII a–z after lowercasing,
  exact length N) and lines that are skipped.
- Detect duplicates among usable words; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Unlike a curated answers list, a general dictionary is expected to have many
skipped lines (proper nouns, other lengths, punctuation); only an empty
result fails the check.

Typical use:
    from packages.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist(5, "/usr/share/dict/american-english")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from packages.engine.validation import is_candidate


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class WordlistReport:
    """Diagnostics and metadata for one word list."""
    N: int
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # usable lines
    unique_count: int    # usable words after dedupe
    skipped_lines: int   # lines that are not a usable candidate
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


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Load words from a text file, one per line.

    Returns:
      (usable_words, skipped_count)
    """
    usable: List[str] = []
    skipped = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            if is_candidate(raw, N):
                usable.append(raw.strip().lower())
            else:
                skipped += 1

    return usable, skipped


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(N: int, path: str) -> Dict:
    """
    Report on the word list at `path` for word length N.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordlistReport schema). `passed`
        is True iff the file exists and yields at least one usable word.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"word list not found: {path}")
        rep = WordlistReport(N, path, False, 0, 0, 0, "", False, issues)
        return asdict(rep)

    words, skipped = _load_and_check(p, N)
    unique_count = len(set(words))

    if not words:
        issues.append(f"word list contains 0 usable {N}-letter words")
    if unique_count != len(words):
        issues.append(f"{len(words) - unique_count} duplicate word(s) will be dropped")

    rep = WordlistReport(
        N=N,
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=unique_count,
        skipped_lines=skipped,
        sha256=_sha256_file(p),
        passed=bool(words),
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | words=4594 (uniq=4594, skipped=97527, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} (uniq={report['unique_count']}, "
        f"skipped={report['skipped_lines']}, sha={sha}) | {status}"
    )
