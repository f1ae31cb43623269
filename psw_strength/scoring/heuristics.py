"""
Basic16 and Comprehensive8 scoring heuristics.

Basic16 yields 4 points for each of the first 7 characters and 8 points for
every character after that, so 16 characters score exactly 100.

Comprehensive8 yields 4 points per character plus a staircase bonus for each
of the uppercase, digit and symbol classes: 17 for the first unique
character, 8 more for a second and 4 more for a third. Text without any
lowercase character loses 17 points, and text that is not in the known-weak
word list gains 17. No floor is applied, so short all-uppercase dictionary
words can go negative.
"""

from __future__ import annotations

from psw_strength.psw_logging import get_logger
from psw_strength.scoring.classifiers import (
    count_matching,
    is_digit,
    is_lower,
    is_symbol,
    is_upper,
)
from psw_strength.wordlist.base import WordList

logger = get_logger(__name__)

BASIC16_HEAD_CHARS = 7
BASIC16_HEAD_POINTS = 4
BASIC16_TAIL_POINTS = 8

COMP8_POINTS_PER_CHAR = 4
# Cumulative bonus awarded at 1, 2 and 3 unique characters of a class.
UNIQUE_TIER_POINTS = ((1, 17), (2, 8), (3, 4))
NO_LOWERCASE_PENALTY = 17
NOVELTY_BONUS = 17


def calc_basic16(text: str) -> int:
    length = len(text)
    score = min(length, BASIC16_HEAD_CHARS) * BASIC16_HEAD_POINTS
    if length > BASIC16_HEAD_CHARS:
        score += (length - BASIC16_HEAD_CHARS) * BASIC16_TAIL_POINTS
    return score


def unq_points(num: int) -> int:
    """Staircase bonus for num unique characters of one class: 0, 17, 25, then 29."""
    return sum(points for threshold, points in UNIQUE_TIER_POINTS if num >= threshold)


def check_wordlist(text: str, wordlist: WordList | None) -> bool:
    """
    Return True when text is NOT a known weak word (novelty bonus applies).

    Membership is tested on the lowercased text. A missing or not yet loaded
    word list counts as "not found".
    """
    if wordlist is None:
        return True
    try:
        return not wordlist.contains(text.lower())
    except Exception as e:
        logger.warning("wordlist_lookup_failed", error=str(e), error_type=type(e).__name__)
        return True


def calc_comp8(text: str, wordlist: WordList | None = None) -> int:
    score = len(text) * COMP8_POINTS_PER_CHAR

    score += unq_points(count_matching(text, is_upper, unique=True))
    score += unq_points(count_matching(text, is_digit, unique=True))
    score += unq_points(count_matching(text, is_symbol, unique=True))

    if count_matching(text, is_lower) == 0:
        score -= NO_LOWERCASE_PENALTY

    if check_wordlist(text, wordlist):
        score += NOVELTY_BONUS

    return score
