"""
WordList contract and an immutable in-memory implementation.

The scorer only needs contains(lowercased_text). The source format is a JSON
object with a "wordlist" array of lowercase strings.
"""

from __future__ import annotations

import json
from typing import Any, Iterable, Protocol, runtime_checkable

from psw_strength.core.exceptions import WordListFormatError


@runtime_checkable
class WordList(Protocol):
    def contains(self, lowercased_text: str) -> bool:
        """Exact, case-sensitive membership test; callers lowercase first."""
        ...


class StaticWordList:
    """Frozen set of known weak words. Entries are stripped and lowercased."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._words = frozenset(str(w).strip().lower() for w in words if w and str(w).strip())

    def contains(self, lowercased_text: str) -> bool:
        return lowercased_text in self._words

    def __contains__(self, item: object) -> bool:
        return item in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"StaticWordList(size={len(self._words)})"


def parse_wordlist_document(data: Any) -> frozenset[str]:
    """
    Parse {"wordlist": [...]} given as dict, JSON str or JSON bytes.

    Raises WordListFormatError on invalid JSON, a missing or non-list
    "wordlist" key, or non-string entries.
    """
    if isinstance(data, (bytes, bytearray)):
        try:
            data = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise WordListFormatError(f"Word list is not valid UTF-8: {e}") from e
    if isinstance(data, str):
        try:
            data = json.loads(data)
        except json.JSONDecodeError as e:
            raise WordListFormatError(f"Error parsing word list: {e}") from e
    if not isinstance(data, dict):
        raise WordListFormatError(f"Word list must be a JSON object, got {type(data).__name__}")
    words = data.get("wordlist")
    if not isinstance(words, list):
        raise WordListFormatError('Word list document has no "wordlist" array')
    if not all(isinstance(w, str) for w in words):
        raise WordListFormatError('"wordlist" entries must be strings')
    return frozenset(w.strip().lower() for w in words if w.strip())
