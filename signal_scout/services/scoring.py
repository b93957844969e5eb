"""Signal score: weighted engagement, log-damped, scaled onto a shared 0-10 band."""

import math
from typing import Iterable, NamedTuple

from signal_scout.models import PlatformId, Result

MAX_SCORE = 10.0


class ScoringProfile(NamedTuple):
    primary: str
    secondary: str
    primary_weight: float
    secondary_weight: float
    # Weighted engagement that maps to the top of the band
    ceiling: float


SCORING_PROFILES: dict[PlatformId, ScoringProfile] = {
    PlatformId.REDDIT: ScoringProfile("upvotes", "comments", 0.7, 0.3, ceiling=5000.0),
    PlatformId.HACKERNEWS: ScoringProfile("points", "comments", 0.7, 0.3, ceiling=1000.0),
    PlatformId.DEVTO: ScoringProfile("reactions", "comments", 0.7, 0.3, ceiling=400.0),
}


def _metric(result: Result, key: str) -> float:
    value = result.metadata.get(key, 0)
    try:
        value = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


def score_result(result: Result) -> float:
    """
    Calculate the signal score for one result.

    Formula:
        weighted = w1 * primary + w2 * secondary   (missing or negative -> 0)
        score = round(min(10, 10 * ln(1 + weighted) / ln(1 + ceiling)), 1)

    The per-platform ceiling calibrates each platform so that a typical
    strong post lands around 7-8 on every platform.
    """
    profile = SCORING_PROFILES.get(result.platform)
    if profile is None:
        return 0.0

    weighted = (
        profile.primary_weight * _metric(result, profile.primary)
        + profile.secondary_weight * _metric(result, profile.secondary)
    )
    damped = math.log1p(weighted)
    scaled = MAX_SCORE * damped / math.log1p(profile.ceiling)
    return round(max(0.0, min(MAX_SCORE, scaled)), 1)


def apply_scores(results: Iterable[Result]) -> list[Result]:
    """Return copies of ``results`` with ``score`` filled in."""
    return [result.model_copy(update={"score": score_result(result)}) for result in results]
