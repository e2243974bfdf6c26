"""
Candidate filtering over a scored collection.

Given:
  - a scored collection (dict word -> score)
  - one FilterRule, or a sequence of them

Return:
  - a NEW dict holding only the words that satisfy the rule(s), with their
    scores unchanged. The input dict is never modified, so a full collection
    can be filtered again from scratch as often as needed.

Applying several rules is a left-to-right fold. Each step only removes
words, so the result is the same for any order and applying a rule twice
changes nothing.
"""

from __future__ import annotations
from typing import Dict, Iterable

from .rules import FilterRule, LetterAbsent, LetterAtPosition

Scored = Dict[str, float]


def _keep(word: str, rule: FilterRule) -> bool:
    if isinstance(rule, LetterAbsent):
        return rule.letter not in word
    if isinstance(rule, LetterAtPosition):
        at_spot = word[rule.position - 1] == rule.letter
        return rule.letter in word and at_spot == rule.must_match
    raise TypeError(f"unknown filter rule: {rule!r}")


def apply_filter_rule(scored: Scored, rule: FilterRule) -> Scored:
    """Keep the entries of `scored` whose word satisfies `rule`."""
    return {w: s for w, s in scored.items() if _keep(w, rule)}


def apply_filter_rules(scored: Scored, rules: Iterable[FilterRule]) -> Scored:
    """
    Apply every rule in turn.

    Always returns a new dict, even when `rules` is empty.
    """
    out = dict(scored)
    for rule in rules:
        out = apply_filter_rule(out, rule)
    return out
