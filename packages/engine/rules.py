"""
Structured filter rules.

A rule is one of two frozen records:
  - LetterAbsent      : the letter occurs nowhere in the word
  - LetterAtPosition  : the letter occurs in the word and is (must_match=True)
                        or is not (must_match=False) at a 1-based position

Rules are plain values; the filtering code in `constraints.py` dispatches on
the two types in one place.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Union

from .errors import OutOfRangeError

# Fixed puzzle word length; every N-aware function defaults to this.
WORD_LENGTH = 5


@dataclass(frozen=True)
class LetterAbsent:
    letter: str


@dataclass(frozen=True)
class LetterAtPosition:
    letter: str
    position: int      # 1-based
    must_match: bool   # True = right spot, False = present but wrong spot


FilterRule = Union[LetterAbsent, LetterAtPosition]


def make_position_rule(letter: str, position: int, must_match: bool,
                       N: int = WORD_LENGTH) -> LetterAtPosition:
    """Build a LetterAtPosition after checking `position` lies in [1, N]."""
    if position < 1 or position > N:
        raise OutOfRangeError(position, N)
    return LetterAtPosition(letter, position, must_match)
