from packages.engine import score_words
from packages.harness import run_case, run_batch, summarize
from packages.solvers import GreedySolver, pick_guess

CORPUS = ["crane", "slate", "trace", "place"]


def test_pick_guess_tie_break_is_lexicographic():
    assert pick_guess({"bravo": 0.5, "alpha": 0.5, "charm": 0.1}) == "alpha"
    assert GreedySolver().next_guess({"candidates": {"zebra": 0.9, "alpha": 0.2}}) == "zebra"


def test_run_case_finds_target():
    scored = score_words(CORPUS)
    r = run_case("crane", scored)
    assert r["found"] is True
    assert r["guesses"] >= 1
    assert r["history"][0][0] == pick_guess(scored) == "trace"
    assert r["history"] == [("trace", "-GGYG"), ("crane", "GGGGG")]
    assert r["remaining"] == [1, 1]


def test_run_case_exhausts_on_unknown_target():
    scored = score_words(CORPUS)
    r = run_case("zzzzz", scored)
    assert r["found"] is False
    assert r["remaining"][-1] == 0
    assert r["guesses"] == len(r["history"]) == 1


def test_run_batch_isolated_and_summary():
    scored = score_words(CORPUS)
    before = dict(scored)
    results = run_batch(CORPUS + ["zzzzz"], scored)
    assert scored == before
    assert [r["answer"] for r in results] == CORPUS + ["zzzzz"]
    assert all(r["found"] for r in results[:4])

    # Same trail regardless of what ran before
    assert run_case("crane", scored)["history"] == results[0]["history"]

    stats = summarize(results)
    assert stats["total"] == 5
    assert stats["found"] == 4
    assert stats["exhausted"] == 1
    assert stats["within_max_turns"] == 4
    assert sum(stats["distribution"].values()) == 4
