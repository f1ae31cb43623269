"""
Password strength scoring — combinator and orchestrator.

analyze(text) -> calc_score -> max(Basic16, Comprehensive8) -> score_meaning.
Pure and reentrant: the only external input is the WordList passed in,
queried as a lookup. No I/O happens here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from psw_strength.psw_logging import get_logger
from psw_strength.scoring import classifiers
from psw_strength.scoring.bands import score_meaning
from psw_strength.scoring.heuristics import calc_basic16, calc_comp8
from psw_strength.wordlist.base import WordList

logger = get_logger(__name__)


@dataclass
class AnalysisResult:
    """Score plus label and "#RRGGBB" color; meaning and color are "" for empty input."""

    score: int
    meaning: str
    color: str

    def to_dict(self) -> dict[str, Any]:
        return {"score": self.score, "meaning": self.meaning, "color": self.color}


def calc_score(text: str | None, wordlist: WordList | None = None) -> int:
    """Return 0 for None or empty text, else the larger of Basic16 and Comprehensive8."""
    if text is None or len(text) == 0:
        return 0
    return max(calc_basic16(text), calc_comp8(text, wordlist))


def analyze(text: str | None, wordlist: WordList | None = None) -> AnalysisResult:
    score = calc_score(text, wordlist)
    meaning, color = score_meaning(score)
    logger.debug(
        "password_analyzed",
        length=len(text) if text else 0,
        score=score,
        meaning=meaning,
    )
    return AnalysisResult(score=score, meaning=meaning, color=color)


class StrengthScorer:
    """
    Scorer bound to one WordList.

    Holds no per-call state; every method delegates to the module-level pure
    functions, so a single instance can serve concurrent callers.
    """

    is_upper = staticmethod(classifiers.is_upper)
    is_lower = staticmethod(classifiers.is_lower)
    is_digit = staticmethod(classifiers.is_digit)
    is_symbol = staticmethod(classifiers.is_symbol)
    calc_basic16 = staticmethod(calc_basic16)
    score_meaning = staticmethod(score_meaning)

    def __init__(self, wordlist: WordList | None = None) -> None:
        self.wordlist = wordlist

    def analyze(self, text: str | None) -> AnalysisResult:
        return analyze(text, self.wordlist)

    def calc_score(self, text: str | None) -> int:
        return calc_score(text, self.wordlist)

    def calc_comp8(self, text: str) -> int:
        return calc_comp8(text, self.wordlist)
