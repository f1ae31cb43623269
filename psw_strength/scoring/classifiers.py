"""
Per-character classifiers used by the Comprehensive8 heuristic.

Case is decided by Unicode general category (Lu / Ll), so uppercase and
lowercase letters from any script are recognised, not only ASCII. Digits are
ASCII 0-9 only. Symbols are a fixed literal set, not a Unicode category.
"""

from __future__ import annotations

import unicodedata
from typing import Callable

# Literal set; includes backtick (U+0060), acute accent (U+00B4) and section sign (U+00A7).
SYMBOLS = frozenset("!=?\"'#%$§/\\()[]{}+-.,;:_<>*`´^~|")

ASCII_DIGITS = frozenset("0123456789")


def is_upper(ch: str) -> bool:
    if len(ch) != 1:
        return False
    return unicodedata.category(ch) == "Lu"


def is_lower(ch: str) -> bool:
    if len(ch) != 1:
        return False
    return unicodedata.category(ch) == "Ll"


def is_digit(ch: str) -> bool:
    return len(ch) == 1 and ch in ASCII_DIGITS


def is_symbol(ch: str) -> bool:
    return len(ch) == 1 and ch in SYMBOLS


def count_matching(text: str, predicate: Callable[[str], bool], unique: bool = False) -> int:
    """
    Count characters of text for which predicate holds.

    With unique=True every distinct character value counts once, so "!!!"
    yields 1 symbol while "A" and "a" remain different characters.
    """
    chars = set(text) if unique else text
    return sum(1 for ch in chars if predicate(ch))
