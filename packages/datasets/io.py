from __future__ import annotations
from pathlib import Path
from typing import List

from packages.engine.rules import WORD_LENGTH
from packages.engine.validation import clean_candidates

# System word list used when no --dictionary is given.
DICTIONARY_FILE = "/usr/share/dict/american-english"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def load_words(p: Path | str = DICTIONARY_FILE, N: int = WORD_LENGTH) -> List[str]:
    """
    Load candidate words from a word list: lowercase, ASCII alphabetic,
    exactly N letters, deduplicated in file order.
    """
    return clean_candidates(read_lines(p), N)
