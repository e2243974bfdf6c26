from .validator import validate_wordlist, pretty_summary
from .io import read_lines, load_words, DICTIONARY_FILE

__all__ = ["validate_wordlist", "pretty_summary", "read_lines", "load_words", "DICTIONARY_FILE"]
