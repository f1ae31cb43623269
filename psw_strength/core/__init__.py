"""
Core utilities — shared exceptions used by scoring, word-list loading and the API.
"""

from psw_strength.core.exceptions import (
    InvalidScoreBandsError,
    PswStrengthError,
    WordListError,
    WordListFetchError,
    WordListFormatError,
)

__all__ = [
    "InvalidScoreBandsError",
    "PswStrengthError",
    "WordListError",
    "WordListFetchError",
    "WordListFormatError",
]
