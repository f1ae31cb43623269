"""
psw_strength — password and passphrase strength meter.

Scores a candidate password with two independent heuristics (Basic16 and
Comprehensive8), keeps the larger of the two, and maps the score to a
human-readable label and color. The known-weak word list is a separate
collaborator that can be fetched, cached and refreshed without touching
the scoring core.
"""

from psw_strength.scoring import AnalysisResult, StrengthScorer, analyze, calc_score

__version__ = "0.1.0"

__all__ = ["AnalysisResult", "StrengthScorer", "analyze", "calc_score", "__version__"]
