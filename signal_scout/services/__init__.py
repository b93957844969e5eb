"""Search pipeline services."""

from .assembler import assemble_response
from .insights import synthesize
from .orchestrator import AggregationOutcome, Orchestrator
from .ranking import rank_results
from .scoring import apply_scores, score_result
from .scout import SignalScoutService
from .validator import parse_search_request

__all__ = [
    "AggregationOutcome",
    "Orchestrator",
    "SignalScoutService",
    "apply_scores",
    "assemble_response",
    "parse_search_request",
    "rank_results",
    "score_result",
    "synthesize",
]
