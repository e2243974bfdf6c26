from .rules import WORD_LENGTH, FilterRule, LetterAbsent, LetterAtPosition
from .errors import OutOfRangeError, EmptyCorpusError
from .parser import parse_filter_argument, parse_filter_arguments
from .scoring import score_letters, score_words
from .constraints import apply_filter_rule, apply_filter_rules
from .feedback import get_filters_from_guess, pattern_from_filters
from .validation import is_candidate, clean_candidates

__all__ = [
    "WORD_LENGTH", "FilterRule", "LetterAbsent", "LetterAtPosition",
    "OutOfRangeError", "EmptyCorpusError",
    "parse_filter_argument", "parse_filter_arguments",
    "score_letters", "score_words",
    "apply_filter_rule", "apply_filter_rules",
    "get_filters_from_guess", "pattern_from_filters",
    "is_candidate", "clean_candidates",
]
