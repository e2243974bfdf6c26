# apps/cli/run.py
"""
CLI entry point for wordle-narrow.

Three modes against the same scored collection:
  1) filter (default): apply the positional filter arguments and print the
     surviving words sorted ascending by score, "<word> <score>".
  2) --target-word WORD: solve one target with the greedy solver.
  3) --everything: solve every candidate as a target and print statistics;
     with --outdir also write a CSV + JSON manifest.

Filter syntax:
  abc       a, b and c are not in the word
  a12-3     a is at positions 1 and 2, and in the word but not at 3
  d+34-1    d is at 3 and 4, and not at 1
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List

from packages.datasets import DICTIONARY_FILE, load_words, validate_wordlist, pretty_summary
from packages.engine import (
    WORD_LENGTH, EmptyCorpusError, OutOfRangeError,
    apply_filter_rules, is_candidate, parse_filter_arguments, score_words,
)
from packages.harness import run_case, run_batch, summarize
from packages.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown


def _configure_logging(level_name: str) -> None:
    """Send `packages.*` log records to stderr at `level_name`, isolated from root."""
    pkg_logger = logging.getLogger("packages")
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    pkg_logger.handlers[:] = [handler]
    pkg_logger.propagate = False
    pkg_logger.setLevel(getattr(logging, level_name))


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="wordle-narrow: score, filter and solve five-letter word puzzles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "filter syntax:\n"
            "  abc       a, b and c are not in the word\n"
            "  a12-3     a is at 1 and 2, and in the word but not at 3\n"
            "  d+34-1    d is at 3 and 4, and not at 1"
        ),
    )
    ap.add_argument("filters", nargs="*", help="filter arguments (see syntax below)")
    mode = ap.add_mutually_exclusive_group()
    mode.add_argument("-t", "--target-word", help="solve for this word")
    mode.add_argument("-e", "--everything", action="store_true",
                      help="solve every candidate word and present statistics")
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="print word-list summary and each guess of a solve")
    ap.add_argument("--dictionary", default=DICTIONARY_FILE,
                    help=f"word list, one word per line (default: {DICTIONARY_FILE})")
    ap.add_argument("--N", type=int, default=WORD_LENGTH, help="word length")
    ap.add_argument("--outdir", help="with --everything, write CSV + manifest here")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "off"],
        default="auto",
        help="progress bar for --everything (auto=bar when stderr is a terminal)",
    )
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def _print_trace(result: Dict) -> None:
    for (guess, patt), left in zip(result["history"], result["remaining"]):
        print(f"  {guess} {patt} {left}")


def _print_outcome(result: Dict) -> None:
    if result["found"]:
        print(f"{result['answer']}: found in {result['guesses']} guesses")
    else:
        print(f"no solution found for {result['answer']}")


def _run_everything(args, scored: Dict[str, float], wordlist_report: Dict) -> None:
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "off"

    targets = sorted(scored)
    results = run_batch(targets, scored, progress=(mode == "bar"))

    for r in results:
        if args.verbose:
            print(r["answer"])
            _print_trace(r)
        if not r["found"]:
            _print_outcome(r)

    stats = summarize(results)
    dist = " ".join(f"{k}:{v}" for k, v in stats["distribution"].items())
    print(
        f"solved {stats['found']}/{stats['total']} | mean {stats['mean_guesses']:.3f} "
        f"| max {stats['max_guesses']} | within 6: {stats['within_max_turns']} | {dist}"
    )

    if args.outdir:
        run_id = timestamp_id()
        outdir = Path(args.outdir)
        csv_path = write_csv(results, str(outdir / f"run_{run_id}.csv"))
        manifest_path = write_manifest({
            "run_id": run_id,
            "git_commit": git_commit_or_unknown(),
            "config": vars(args),
            "wordlist": wordlist_report,
            "summary": stats,
        }, str(outdir / f"run_{run_id}_manifest.json"))
        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")


def main(argv: List[str] | None = None) -> int:
    """
    Parse CLI args, load and score the word list, then filter or solve.
    """
    ap = _build_parser()
    args = ap.parse_args(argv)
    _configure_logging(args.log_level)

    # 1) Filter arguments first: a bad position should fail before any I/O
    try:
        rules = parse_filter_arguments(args.filters, args.N)
    except OutOfRangeError as e:
        ap.error(str(e))

    if args.target_word is not None and not is_candidate(args.target_word, args.N):
        ap.error(f"target word must be {args.N} ASCII letters; got {args.target_word!r}")

    # 2) Load and score the candidates
    wordlist_report = validate_wordlist(args.N, args.dictionary)
    if args.verbose:
        print(pretty_summary(wordlist_report), file=sys.stderr)
    try:
        scored = score_words(load_words(args.dictionary, args.N))
    except (FileNotFoundError, EmptyCorpusError) as e:
        ap.error(f"cannot use word list {args.dictionary}: {e}")

    # 3) Dispatch on mode
    if args.everything:
        _run_everything(args, scored, wordlist_report)
    elif args.target_word is not None:
        result = run_case(args.target_word.strip().lower(), scored)
        if args.verbose:
            _print_trace(result)
        _print_outcome(result)
    else:
        for word, s in sorted(apply_filter_rules(scored, rules).items(),
                              key=lambda kv: (kv[1], kv[0])):
            print(f"{word} {s:.2f}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
