"""
Solving harness.

- run_case:  play one target to the end against a full scored collection.
- run_batch: play many targets, each from the same full collection.
- summarize: aggregate a batch of results into headline statistics.

A game has no turn limit: every round removes at least the wrong guess, so
the loop ends with the target found or with nothing left to guess.
Running out of candidates is an outcome (found=False), not an error.

These functions are UI-agnostic; the CLI decides what to print.
"""

from __future__ import annotations
import logging
import time
from collections import Counter
from typing import Dict, Iterable, List, Tuple

from tqdm import tqdm

from packages.engine import apply_filter_rules, get_filters_from_guess, pattern_from_filters
from packages.engine.rules import FilterRule
from packages.solvers import GreedySolver

logger = logging.getLogger(__name__)

# Classic Wordle turn budget; only used for reporting, never to stop a game.
WORDLE_MAX_TURNS = 6


def run_case(
        answer: str,
        scored: Dict[str, float],
        *,
        solver=None,
) -> Dict:
    """
    Execute one game until the guess equals `answer` or no candidates remain.

    Args:
        answer:  the target word
        scored:  the FULL scored collection; never modified
        solver:  object with next_guess(state); defaults to GreedySolver

    Returns:
        dict with keys:
            answer (str), found (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern)]), remaining (list[int])
    """
    solver = solver or GreedySolver()

    history: List[Tuple[str, str]] = []
    remaining: List[int] = []
    rules: List[FilterRule] = []
    candidates = scored
    found = False

    t0 = time.perf_counter()
    turn = 0
    while candidates:
        turn += 1
        state = {
            "turn": turn,
            "history": list(history),
            "candidates": candidates,
            "N": len(answer),
        }
        guess = solver.next_guess(state)

        new_rules = get_filters_from_guess(guess, answer)
        history.append((guess, pattern_from_filters(new_rules)))

        if guess == answer:
            remaining.append(len(candidates))
            found = True
            break

        # Re-derive from the full collection with every rule seen so far
        rules.extend(new_rules)
        candidates = apply_filter_rules(scored, rules)
        remaining.append(len(candidates))
        logger.debug("%s turn %d: %s %s -> %d left", answer, turn, guess, history[-1][1],
                     len(candidates))

    dt = (time.perf_counter() - t0) * 1000.0
    if not found:
        logger.info("no solution found for %s after %d guesses", answer, len(history))

    return {
        "answer": answer, "found": found, "guesses": len(history), "time_ms": dt,
        "history": history, "remaining": remaining,
    }


def run_batch(
        answers: Iterable[str],
        scored: Dict[str, float],
        *,
        solver=None,
        progress: bool = False,
) -> List[Dict]:
    """
    Run one case per answer. Cases share nothing but the read-only `scored`
    collection, so results do not depend on the order of `answers`.
    """
    solver = solver or GreedySolver()
    pool = list(answers)
    iterator = tqdm(pool, ncols=80, desc="Solving", unit="word") if progress else pool

    out: List[Dict] = []
    for ans in iterator:
        r = run_case(ans, scored, solver=solver)
        r["solver_id"] = solver.id
        out.append(r)
    return out


def summarize(results: List[Dict]) -> Dict:
    """
    Headline numbers for a batch:
      total, found, exhausted, mean_guesses / max_guesses (found games only),
      within_max_turns (found in <= 6), distribution {guess_count: n}.
    """
    solved = [r["guesses"] for r in results if r["found"]]
    return {
        "total": len(results),
        "found": len(solved),
        "exhausted": len(results) - len(solved),
        "mean_guesses": (sum(solved) / len(solved)) if solved else 0.0,
        "max_guesses": max(solved) if solved else 0,
        "within_max_turns": sum(1 for g in solved if g <= WORDLE_MAX_TURNS),
        "distribution": dict(sorted(Counter(solved).items())),
    }
