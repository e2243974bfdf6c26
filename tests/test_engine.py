import itertools
import logging

import pytest
from packages.engine import (
    EmptyCorpusError, LetterAbsent, LetterAtPosition, OutOfRangeError,
    apply_filter_rule, apply_filter_rules, clean_candidates, get_filters_from_guess,
    is_candidate, parse_filter_argument, parse_filter_arguments, pattern_from_filters,
    score_letters, score_words,
)

WORDS = ["crane", "slate", "trace", "place", "lemon", "level", "scoop"]


# --- parsing ---
@pytest.mark.parametrize("token,expected", [
    ("abc", [LetterAbsent("a"), LetterAbsent("b"), LetterAbsent("c")]),
    ("ABA", [LetterAbsent("a"), LetterAbsent("b")]),
    ("a12-3", [LetterAtPosition("a", 1, True), LetterAtPosition("a", 2, True),
               LetterAtPosition("a", 3, False)]),
    ("d+34-1", [LetterAtPosition("d", 3, True), LetterAtPosition("d", 4, True),
                LetterAtPosition("d", 1, False)]),
    ("e-5", [LetterAtPosition("e", 5, False)]),
    ("e-2+5", [LetterAtPosition("e", 2, False), LetterAtPosition("e", 5, True)]),
    ("a1b-2", [LetterAtPosition("a", 1, True), LetterAtPosition("b", 2, False)]),
])
def test_parse_filter_argument_golden(token, expected):
    assert parse_filter_argument(token) == expected


def test_parse_out_of_range():
    with pytest.raises(OutOfRangeError):
        parse_filter_argument("a6")
    with pytest.raises(OutOfRangeError):
        parse_filter_argument("b-0")
    # Wider puzzles accept wider positions
    assert parse_filter_argument("a6", N=6) == [LetterAtPosition("a", 6, True)]


def test_parse_skips_malformed_fragments_with_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="packages.engine.parser"):
        rules = parse_filter_argument("a1-")
    assert rules == [LetterAtPosition("a", 1, True)]
    assert any("'-'" in rec.getMessage() for rec in caplog.records)

    with caplog.at_level(logging.WARNING, logger="packages.engine.parser"):
        assert parse_filter_argument("12") == []


def test_parse_filter_arguments_concatenates_in_order():
    rules = parse_filter_arguments(["st", "a3"])
    assert rules == [LetterAbsent("s"), LetterAbsent("t"), LetterAtPosition("a", 3, True)]


# --- scoring ---
def test_score_letters_pooled_frequency():
    table = score_letters(["aab"])
    assert table["a"] == pytest.approx(2 / 3)
    assert table["b"] == pytest.approx(1 / 3)


def test_scores_in_unit_interval_and_deduped():
    scored = score_words(WORDS + ["crane"])
    assert set(scored) == set(WORDS)
    assert all(0.0 <= s <= 1.0 for s in scored.values())


def test_top_score_below_one_when_maxima_differ():
    # aaaaa has the highest letter-frequency sum, bcdea the most distinct letters
    scored = score_words(["aaaaa", "bcdea"])
    assert scored["aaaaa"] == pytest.approx(0.6)
    assert scored["bcdea"] == pytest.approx((1 / 3 + 1) / 2)
    assert max(scored.values()) < 1.0


def test_top_score_is_one_when_maxima_coincide():
    scored = score_words(["crane", "slate", "trace", "place"])
    assert scored["trace"] == pytest.approx(1.0)
    assert scored["crane"] == pytest.approx((14 / 15 + 1) / 2)


def test_score_words_rejects_empty_and_mixed_lengths():
    with pytest.raises(EmptyCorpusError):
        score_words([])
    with pytest.raises(ValueError):
        score_words(["crane", "cranes"])


# --- filtering ---
def test_apply_filter_rule_semantics():
    scored = score_words(WORDS)
    assert set(apply_filter_rule(scored, LetterAbsent("e"))) == {"scoop"}
    assert set(apply_filter_rule(scored, LetterAtPosition("l", 1, True))) == {"lemon", "level"}
    # level has an l at 1, so it fails even though it has another l
    assert set(apply_filter_rule(scored, LetterAtPosition("l", 1, False))) == {"slate", "place"}


def test_apply_does_not_mutate_and_keeps_scores():
    scored = score_words(WORDS)
    before = dict(scored)
    out = apply_filter_rules(scored, [LetterAbsent("s"), LetterAtPosition("a", 3, True)])
    assert scored == before
    assert out == {w: before[w] for w in ("crane", "trace", "place")}


def test_apply_idempotent_and_order_independent():
    scored = score_words(WORDS)
    rules = [LetterAbsent("o"), LetterAtPosition("e", 5, True), LetterAtPosition("c", 1, False)]
    once = apply_filter_rule(scored, rules[0])
    assert apply_filter_rule(once, rules[0]) == once

    results = [apply_filter_rules(scored, perm) for perm in itertools.permutations(rules)]
    assert all(r == results[0] for r in results)
    assert set(results[0]) == {"trace", "place"}


def test_unknown_rule_type_is_rejected():
    with pytest.raises(TypeError):
        apply_filter_rule({"crane": 1.0}, "not a rule")


# --- feedback ---
def test_get_filters_from_guess_and_pattern():
    rules = get_filters_from_guess("trace", "crane")
    assert rules == [LetterAbsent("t"), LetterAtPosition("r", 2, True),
                     LetterAtPosition("a", 3, True), LetterAtPosition("c", 4, False),
                     LetterAtPosition("e", 5, True)]
    assert pattern_from_filters(rules) == "-GGYG"


@pytest.mark.parametrize("w", WORDS)
def test_self_feedback_keeps_word(w):
    scored = score_words(WORDS)
    rules = get_filters_from_guess(w, w)
    assert pattern_from_filters(rules) == "GGGGG"
    assert w in apply_filter_rules(scored, rules)


# --- candidate hygiene ---
def test_is_candidate_n5():
    assert is_candidate("CRANE") is True
    assert is_candidate("cranes") is False
    assert is_candidate("cr4ne") is False
    assert is_candidate("naïve") is False
    assert is_candidate(None) is False


def test_clean_candidates_dedupes_in_order():
    assert clean_candidates(["Crane", "slate", "crane", "it's", "x"]) == ["crane", "slate"]
