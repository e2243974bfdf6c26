"""
Feedback for a single (guess, target) pair, expressed as filter rules.

For every position i of the guess:
  - letter nowhere in the target     -> LetterAbsent(letter)
  - otherwise                        -> LetterAtPosition(letter, i, target[i] == letter)

This is the per-position reading of feedback: a repeated guess letter that
the target holds once still yields a LetterAtPosition rule for each copy.

For traces and reports a round's rules can be rendered with the usual
pattern characters:
  'G' right spot, 'Y' present but wrong spot, '-' absent.
"""

from __future__ import annotations
from typing import List, Sequence

from .rules import FilterRule, LetterAbsent, LetterAtPosition


def get_filters_from_guess(guess: str, target: str) -> List[FilterRule]:
    """
    Derive one rule per position of `guess` by comparing it to `target`.

    Examples:
      get_filters_from_guess("slate", "crane") ->
        [LetterAbsent('s'), LetterAbsent('l'), LetterAtPosition('a', 3, True),
         LetterAbsent('t'), LetterAtPosition('e', 5, True)]
    """
    assert len(guess) == len(target), "Guess and target must be the same length"

    rules: List[FilterRule] = []
    for i, ch in enumerate(guess, start=1):
        if ch not in target:
            rules.append(LetterAbsent(ch))
        else:
            rules.append(LetterAtPosition(ch, i, target[i - 1] == ch))
    return rules


def pattern_from_filters(rules: Sequence[FilterRule]) -> str:
    """
    Render the rules of one round (one rule per position, in order) as a
    pattern string, e.g. "--G-G".
    """
    out = []
    for rule in rules:
        if isinstance(rule, LetterAbsent):
            out.append("-")
        elif isinstance(rule, LetterAtPosition):
            out.append("G" if rule.must_match else "Y")
        else:
            raise TypeError(f"unknown filter rule: {rule!r}")
    return "".join(out)
