"""
Guess-usefulness scoring for a candidate list.

Each word gets a score in [0, 1], the mean of two components:

  1) letter frequency : sum of the word's letter frequencies (share of ALL
     letter occurrences in the corpus, repeats counted per occurrence),
     divided by the highest such sum in the corpus.
  2) letter diversity : distinct letters / word length.

High scores favor words that test common letters and avoid repeats, a cheap
greedy stand-in for computing expected information over all outcomes.

The frequency table is rebuilt from whatever list is passed in, so scoring a
narrowed list reflects the narrowed letter distribution.
"""

from __future__ import annotations
from collections import Counter
from typing import Dict, Iterable, List

from .errors import EmptyCorpusError


def score_letters(words: Iterable[str]) -> Dict[str, float]:
    """
    Letter frequency table: count of each letter / total letter occurrences.

    Example:
      score_letters(["aab"]) -> {"a": 0.666..., "b": 0.333...}
    """
    counts = Counter()
    for w in words:
        counts.update(w)
    total = sum(counts.values())
    if total == 0:
        return {}
    return {ch: n / total for ch, n in counts.items()}


def score_words(words: Iterable[str]) -> Dict[str, float]:
    """
    Score every distinct word in `words`.

    Returns:
      a new dict word -> combined score in [0, 1].

    Raises:
      EmptyCorpusError if there is nothing to score
      ValueError if the words do not share one length
    """
    # Dedupe, first occurrence wins
    unique: List[str] = list(dict.fromkeys(words))
    if not unique:
        raise EmptyCorpusError()
    if len({len(w) for w in unique}) != 1:
        raise ValueError("candidate words must all have the same length")

    letter_scores = score_letters(unique)

    raw = {w: sum(letter_scores[ch] for ch in w) for w in unique}
    top = max(raw.values())
    if top <= 0:
        raise EmptyCorpusError("candidate words contain no letters")

    return {
        w: (raw[w] / top + len(set(w)) / len(w)) / 2.0
        for w in unique
    }
