"""
Word-list collaborator — the set of known weak words the scorer checks against.
"""

from psw_strength.wordlist.base import StaticWordList, WordList, parse_wordlist_document
from psw_strength.wordlist.loader import WordListLoader, WordListLoaderConfig

__all__ = [
    "StaticWordList",
    "WordList",
    "WordListLoader",
    "WordListLoaderConfig",
    "parse_wordlist_document",
]
