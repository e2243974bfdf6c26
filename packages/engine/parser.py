"""
Filter-argument parsing.

One argument token turns into zero or more FilterRule objects:

  - pure letters            "abc"     -> LetterAbsent(a), LetterAbsent(b), LetterAbsent(c)
  - letter + position run   "a12-3"   -> (a,1,right) (a,2,right) (a,3,wrong)
                            "d+34-1"  -> (d,3,right) (d,4,right) (d,1,wrong)

Inside a position run every digit is one 1-based position. The run starts in
"right spot" mode; '-' switches to "wrong spot" and '+' switches back, each
holding until the next sign.

Anything in a token that neither pattern consumes (stray signs, punctuation,
digits without a letter) produces no rule. It is logged as a warning so it
can be told apart from a real validation error (OutOfRangeError).
"""

from __future__ import annotations
import logging
import re
from typing import Iterable, List, Tuple

from .rules import WORD_LENGTH, FilterRule, LetterAbsent, make_position_rule

logger = logging.getLogger(__name__)

ABSENT_RE = re.compile(r"^[a-z]+$")
GROUP_RE = re.compile(r"([a-z])((?:[-+]?\d+)+)")


def _unconsumed(token: str, spans: List[Tuple[int, int]]) -> List[str]:
    """Return the pieces of `token` not covered by any (start, end) span."""
    pieces: List[str] = []
    pos = 0
    for start, end in spans:
        if start > pos:
            pieces.append(token[pos:start])
        pos = end
    if pos < len(token):
        pieces.append(token[pos:])
    return pieces


def parse_filter_argument(argument: str, N: int = WORD_LENGTH) -> List[FilterRule]:
    """
    Parse a single filter argument into FilterRule objects.

    Raises:
      OutOfRangeError if any position lies outside [1, N].
    """
    token = argument.strip().lower()
    rules: List[FilterRule] = []

    # Absent letters: the whole token must be letters. One rule per distinct letter.
    if ABSENT_RE.match(token):
        for ch in dict.fromkeys(token):
            rules.append(LetterAbsent(ch))
        return rules

    # Position groups: letter followed by a signed run of digits.
    spans: List[Tuple[int, int]] = []
    for m in GROUP_RE.finditer(token):
        letter, run = m.group(1), m.group(2)
        spans.append(m.span())

        right_spot = True
        for ch in run:
            if ch == "-":
                right_spot = False
            elif ch == "+":
                right_spot = True
            else:
                rules.append(make_position_rule(letter, int(ch), right_spot, N))

    for piece in _unconsumed(token, spans):
        logger.warning("ignoring unrecognized fragment %r in filter %r", piece, argument)

    return rules


def parse_filter_arguments(arguments: Iterable[str], N: int = WORD_LENGTH) -> List[FilterRule]:
    """Parse many tokens; rules are concatenated in input order."""
    out: List[FilterRule] = []
    for arg in arguments:
        out.extend(parse_filter_argument(arg, N))
    return out
