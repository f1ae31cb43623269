"""
Tests for Basic16 and Comprehensive8 heuristics.
"""

from __future__ import annotations

import pytest

from psw_strength.scoring.heuristics import (
    calc_basic16,
    calc_comp8,
    check_wordlist,
    unq_points,
)
from psw_strength.wordlist import StaticWordList, WordListLoader


# -----------------------------------------------------------------------------
# Basic16
# -----------------------------------------------------------------------------

def test_basic16_known_values():
    assert calc_basic16("") == 0
    assert calc_basic16("a") == 4
    assert calc_basic16("1234567") == 28
    assert calc_basic16("12345678") == 36
    assert calc_basic16("x" * 16) == 100


def test_basic16_monotonic_in_length():
    scores = [calc_basic16("q" * n) for n in range(0, 40)]
    assert scores == sorted(scores)


def test_basic16_ignores_character_classes():
    assert calc_basic16("aaaaaaaaa") == calc_basic16("A1!ÄßΩ€x@")


# -----------------------------------------------------------------------------
# Unique-character staircase
# -----------------------------------------------------------------------------

@pytest.mark.parametrize(
    "n,expected",
    [(0, 0), (1, 17), (2, 25), (3, 29), (4, 29), (50, 29)],
)
def test_unq_points_staircase(n, expected):
    assert unq_points(n) == expected


# -----------------------------------------------------------------------------
# Comprehensive8
# -----------------------------------------------------------------------------

def test_comp8_all_lowercase_not_in_wordlist(weak_words):
    """Lowercase present -> no penalty; novel -> +17."""
    assert calc_comp8("abcdefg", weak_words) == 7 * 4 + 17


def test_comp8_all_lowercase_in_wordlist_is_length_only(weak_words):
    assert calc_comp8("password", weak_words) == 8 * 4
    assert calc_comp8("dragon", weak_words) == 6 * 4


def test_comp8_regression_fixture():
    """'Abc123!@': 32 + upper 17 + digits 29 + symbol '!' 17 + novel 17; '@' is not a symbol."""
    assert calc_comp8("Abc123!@") == 112


def test_comp8_no_lowercase_penalty(weak_words):
    # 8 chars, 7 unique uppercase, no lowercase, dictionary hit
    assert calc_comp8("PASSWORD", weak_words) == 32 + 29 - 17
    assert calc_comp8("PASSWORD") == 32 + 29 - 17 + 17


def test_comp8_wordlist_lookup_is_case_insensitive(weak_words):
    # "PassWord" lowercases to "password"
    assert calc_comp8("PassWord", weak_words) == 32 + 25
    assert calc_comp8("PassWord") == 32 + 25 + 17


def test_comp8_repeated_symbols_count_once():
    assert calc_comp8("!!!!") == 16 + 17 - 17 + 17
    assert calc_comp8("!?#") == 12 + 29 - 17 + 17


def test_comp8_non_latin_uppercase_counts():
    assert calc_comp8("ÄÖÜ") == 12 + 29 - 17 + 17


def test_comp8_unclassified_characters_only_count_for_length():
    # '@', ' ' and '€' match no class
    assert calc_comp8("@ €") == 12 - 17 + 17


def test_comp8_can_be_negative():
    words = StaticWordList(["€€"])
    assert calc_comp8("€€", words) == 8 - 17


# -----------------------------------------------------------------------------
# Word-list check
# -----------------------------------------------------------------------------

def test_check_wordlist_none_and_empty_count_as_not_found():
    assert check_wordlist("password", None) is True
    assert check_wordlist("password", StaticWordList()) is True


def test_check_wordlist_unloaded_loader_counts_as_not_found():
    loader = WordListLoader()
    assert loader.is_loaded is False
    assert check_wordlist("password", loader) is True


def test_check_wordlist_found(weak_words):
    assert check_wordlist("Password", weak_words) is False
    assert check_wordlist("password1", weak_words) is True


def test_check_wordlist_broken_lookup_does_not_raise():
    class Broken:
        def contains(self, lowercased_text: str) -> bool:
            raise RuntimeError("backend gone")

    assert check_wordlist("password", Broken()) is True
