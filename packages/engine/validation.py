"""
Candidate hygiene.

A word is a usable candidate iff:
  - it is a string
  - it is ASCII alphabetic only (positions index single characters)
  - it has exact length N

`clean_candidates` lowercases, drops anything unusable and dedupes while
keeping the first occurrence, so the scorer always sees a clean list.
"""

from __future__ import annotations
from typing import Iterable, List

from .rules import WORD_LENGTH


def is_candidate(word, N: int = WORD_LENGTH) -> bool:
    """Return True if `word` (after strip/lower) is a usable N-letter candidate."""
    if not isinstance(word, str):
        return False

    w = word.strip().lower()
    return len(w) == N and w.isascii() and w.isalpha()


def clean_candidates(words: Iterable[str], N: int = WORD_LENGTH) -> List[str]:
    """
    Normalize and filter `words` to unique N-letter ASCII candidates,
    order preserved.
    """
    seen = set()
    out: List[str] = []
    for w in words:
        if not is_candidate(w, N):
            continue
        w = w.strip().lower()
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out
