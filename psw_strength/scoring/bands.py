"""
Score bands: map a numeric score to a label and a hex color.

Eight contiguous bands, lower bound exclusive and upper bound inclusive:
dreadful (1-16), bad (17-33), poor (34-50), fair (51-67), good (68-84),
great (85-99), excellent (100-115), fantastic (116+). Scores of 0 or below
map to the ("", "") sentinel, which means "no input" rather than a band.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from psw_strength.core.exceptions import InvalidScoreBandsError

NO_SCORE: tuple[str, str] = ("", "")


@dataclass(frozen=True)
class ScoreBand:
    lower_exclusive: int
    upper_inclusive: int | None
    """None means open-ended (+inf)."""
    label: str
    color: str

    def contains(self, score: int) -> bool:
        if score <= self.lower_exclusive:
            return False
        return self.upper_inclusive is None or score <= self.upper_inclusive


SCORE_BANDS: tuple[ScoreBand, ...] = (
    ScoreBand(0, 16, "Dreadful", "#FF0000"),
    ScoreBand(16, 33, "Bad", "#FF6600"),
    ScoreBand(33, 50, "Poor", "#FF9900"),
    ScoreBand(50, 67, "Fair", "#FFCC00"),
    ScoreBand(67, 84, "Good", "#FFFF00"),
    ScoreBand(84, 99, "Great", "#CCFF00"),
    ScoreBand(99, 115, "Excellent", "#99FF00"),
    ScoreBand(115, None, "Fantastic", "#00FF00"),
)


def validate_bands(bands: Sequence[ScoreBand]) -> None:
    """
    Check bands cover (0, +inf) exactly once.

    Raises InvalidScoreBandsError when the first band does not start at 0,
    a band is empty, two neighbours leave a gap or overlap, or the last band
    is not open-ended.
    """
    if not bands:
        raise InvalidScoreBandsError("No score bands defined")
    if bands[0].lower_exclusive != 0:
        raise InvalidScoreBandsError(
            f"First band must start after 0, got {bands[0].lower_exclusive}"
        )
    for prev, band in zip(bands, bands[1:]):
        if prev.upper_inclusive is None:
            raise InvalidScoreBandsError(f"Open-ended band {prev.label!r} must be last")
        if band.lower_exclusive != prev.upper_inclusive:
            raise InvalidScoreBandsError(
                f"Band {band.label!r} starts after {band.lower_exclusive}, "
                f"expected {prev.upper_inclusive}"
            )
    for band in bands:
        if band.upper_inclusive is not None and band.upper_inclusive <= band.lower_exclusive:
            raise InvalidScoreBandsError(f"Band {band.label!r} is empty")
    if bands[-1].upper_inclusive is not None:
        raise InvalidScoreBandsError(f"Last band {bands[-1].label!r} must be open-ended")


validate_bands(SCORE_BANDS)


def score_meaning(score: int, bands: Sequence[ScoreBand] = SCORE_BANDS) -> tuple[str, str]:
    """Return (label, color) for score, or ("", "") when no band captures it."""
    for band in bands:
        if band.contains(score):
            return band.label, band.color
    return NO_SCORE
