"""Signal Scout pipeline: validate, aggregate, score, rank, synthesize, assemble."""

import logging
from typing import Any

from signal_scout.exceptions import InternalError
from signal_scout.models import SearchRequest, SearchResponse
from signal_scout.services.assembler import assemble_response
from signal_scout.services.insights import synthesize
from signal_scout.services.orchestrator import Orchestrator
from signal_scout.services.ranking import rank_results
from signal_scout.services.scoring import apply_scores
from signal_scout.services.validator import parse_search_request

logger = logging.getLogger(__name__)


class SignalScoutService:
    """Service for scouting a topic across community platforms."""

    def __init__(self, orchestrator: Orchestrator, max_results: int = 40):
        self.orchestrator = orchestrator
        self.max_results = max_results

    async def handle(self, payload: Any) -> SearchResponse:
        """
        Run the full pipeline for an untrusted payload.

        Raises:
            ValidationError: Bad or missing query/platforms; no network call is made.
            AggregationError: Every selected platform failed.
            InternalError: An invariant was violated (a defect).
        """
        request = parse_search_request(payload)
        try:
            return await self.search(request)
        except InternalError:
            logger.exception(f"Internal error while scouting query: {request.query[:50]}")
            raise

    async def search(self, request: SearchRequest) -> SearchResponse:
        outcome = await self.orchestrator.run(request)

        scored = apply_scores(outcome.results)
        ranked = rank_results(scored, limit=self.max_results)
        angles, prompts = synthesize(request.query, ranked, outcome.attempted)

        return assemble_response(
            query=request.query,
            ranked_results=ranked,
            attempted=outcome.attempted,
            recommended_angles=angles,
            next_prompts=prompts,
        )
