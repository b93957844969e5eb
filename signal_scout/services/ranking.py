"""Deterministic ranking of scored results."""

from typing import Sequence

from signal_scout.models import PLATFORM_PRECEDENCE, Result


def rank_results(results: Sequence[Result], limit: int | None = None) -> list[Result]:
    """
    Sort by score descending, then platform precedence, then original order.

    ``limit`` truncates after the full sort so a lower-scored item never
    displaces a higher-scored one.
    """
    indexed = list(enumerate(results))
    indexed.sort(
        key=lambda pair: (
            -pair[1].score,
            PLATFORM_PRECEDENCE.get(pair[1].platform, len(PLATFORM_PRECEDENCE)),
            pair[0],
        )
    )
    ranked = [result for _, result in indexed]
    if limit is not None:
        ranked = ranked[: max(limit, 0)]
    return ranked
