"""Build the final SearchResponse envelope."""

from datetime import datetime, timezone
from typing import Sequence

from signal_scout.models import PlatformId, Result, SearchMeta, SearchResponse


def average_score(results: Sequence[Result]) -> float:
    if not results:
        return 0.0
    return round(sum(r.score for r in results) / len(results), 1)


def assemble_response(
    query: str,
    ranked_results: Sequence[Result],
    attempted: Sequence[PlatformId],
    recommended_angles: Sequence[str],
    next_prompts: Sequence[str],
    generated_at: datetime | None = None,
) -> SearchResponse:
    """Combine pipeline outputs into a response stamped with the assembly time."""
    meta = SearchMeta(
        query=query,
        generated_at=generated_at or datetime.now(timezone.utc),
        platforms=list(attempted),
        recommended_angles=list(recommended_angles),
        next_prompts=list(next_prompts),
        average_score=average_score(ranked_results),
    )
    return SearchResponse(results=list(ranked_results), meta=meta)
