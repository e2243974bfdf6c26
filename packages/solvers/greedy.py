"""
Greedy best-score solver.

Idea:
  - The scored collection handed in each turn is already narrowed by all
    feedback so far. Guess the word with the highest score in it.

Tie-break:
  - Among words sharing the top score, pick the lexicographically smallest.
    This makes every run reproducible without a seed.
"""

from __future__ import annotations
from typing import Dict


def pick_guess(scored: Dict[str, float]) -> str:
    """
    Highest-scoring word in `scored`; ties go to the alphabetically first.

    Raises ValueError on an empty collection (there is nothing to guess).
    """
    if not scored:
        raise ValueError("no candidates left to guess from")
    return min(scored, key=lambda w: (-scored[w], w))


class GreedySolver:
    id = "greedy"
    name = "Greedy best score"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        """
        Decide the next guess from `state["candidates"]` (a scored dict).
        """
        return pick_guess(state["candidates"])
