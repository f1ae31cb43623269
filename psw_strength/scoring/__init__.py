"""
Scoring package — character classifiers, heuristics, score bands and the
orchestrating analyze() entrypoint.
"""

from psw_strength.scoring.bands import (
    NO_SCORE,
    SCORE_BANDS,
    ScoreBand,
    score_meaning,
    validate_bands,
)
from psw_strength.scoring.classifiers import (
    SYMBOLS,
    count_matching,
    is_digit,
    is_lower,
    is_symbol,
    is_upper,
)
from psw_strength.scoring.heuristics import (
    calc_basic16,
    calc_comp8,
    check_wordlist,
    unq_points,
)
from psw_strength.scoring.scorer import (
    AnalysisResult,
    StrengthScorer,
    analyze,
    calc_score,
)

__all__ = [
    "NO_SCORE",
    "SCORE_BANDS",
    "ScoreBand",
    "score_meaning",
    "validate_bands",
    "SYMBOLS",
    "count_matching",
    "is_digit",
    "is_lower",
    "is_symbol",
    "is_upper",
    "calc_basic16",
    "calc_comp8",
    "check_wordlist",
    "unq_points",
    "AnalysisResult",
    "StrengthScorer",
    "analyze",
    "calc_score",
]
