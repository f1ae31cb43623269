"""
Application-level exceptions.

The scoring core never raises for string or None input; these cover the
word-list collaborator and static configuration (score bands).
"""

from __future__ import annotations


class PswStrengthError(Exception):
    """Base class for all psw_strength errors."""


class WordListError(PswStrengthError):
    """Word list could not be obtained or used."""


class WordListFormatError(WordListError):
    """Word-list document is not a {"wordlist": [...]} JSON object."""


class WordListFetchError(WordListError):
    """Word-list source could not be read (HTTP error, missing file, timeout)."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Error loading '{source}': {reason}")
        self.source = source
        self.reason = reason


class InvalidScoreBandsError(PswStrengthError):
    """Score bands overlap, leave gaps, or are not in ascending order."""
