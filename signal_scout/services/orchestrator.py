"""Concurrent fan-out to platform adapters with per-platform isolation."""

import asyncio
import logging
import time
from dataclasses import dataclass, field

from signal_scout.exceptions import AdapterError, AdapterFailure, AggregationError, InternalError
from signal_scout.models import PlatformId, Result, SearchRequest
from signal_scout.platforms.base import PlatformAdapter
from signal_scout.platforms.registry import AdapterRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AggregationOutcome:
    """Merged results plus which platforms were attempted and which failed."""

    results: list[Result]
    attempted: list[PlatformId]
    failures: list[AdapterError] = field(default_factory=list)


class Orchestrator:
    """Runs the selected adapters concurrently and merges their results."""

    def __init__(self, registry: AdapterRegistry, adapter_timeout: float = 8.0):
        self.registry = registry
        self.adapter_timeout = adapter_timeout

    async def run(self, request: SearchRequest) -> AggregationOutcome:
        """
        Search every requested platform and merge the successes.

        All adapter calls are launched together and joined before returning,
        so ``attempted`` always reflects every call made. Results are merged
        in platform precedence order, independent of completion order.

        Raises:
            InternalError: If a requested platform has no registered adapter.
            AggregationError: If every attempted platform failed.
        """
        attempted = sorted(request.platforms, key=list(PlatformId).index)
        adapters = [(platform, self.registry.get(platform)) for platform in attempted]

        start_time = time.time()
        outcomes = await asyncio.gather(
            *(self._search_one(platform, adapter, request.query) for platform, adapter in adapters)
        )

        results: list[Result] = []
        failures: list[AdapterError] = []
        for platform, outcome in zip(attempted, outcomes):
            if isinstance(outcome, AdapterError):
                failures.append(outcome)
                logger.warning(
                    f"Platform {platform.value} failed: {outcome}",
                    extra={"platform": platform.value, "cause": outcome.cause.value},
                )
                continue
            results.extend(outcome)

        elapsed = time.time() - start_time
        if attempted and len(failures) == len(attempted):
            logger.error(f"All {len(attempted)} platforms failed for query: {request.query[:50]}")
            raise AggregationError(failures)

        logger.info(
            f"Aggregation completed in {elapsed:.2f}s, {len(results)} results "
            f"from {len(attempted) - len(failures)}/{len(attempted)} platforms",
            extra={"query": request.query[:50], "result_count": len(results)},
        )
        return AggregationOutcome(results=results, attempted=attempted, failures=failures)

    async def _search_one(
        self, platform: PlatformId, adapter: PlatformAdapter, query: str
    ) -> list[Result] | AdapterError:
        """Run one adapter under the time budget; failures are returned, never raised."""
        try:
            results = await asyncio.wait_for(adapter.search(query), timeout=self.adapter_timeout)
        except asyncio.TimeoutError:
            return AdapterError(
                platform.value,
                AdapterFailure.TIMEOUT,
                f"No response within {self.adapter_timeout}s",
            )
        except AdapterError as e:
            return e
        except Exception as e:
            logger.exception(f"Unexpected error from {platform.value} adapter")
            return AdapterError(platform.value, AdapterFailure.MALFORMED_RESPONSE, str(e))

        for result in results:
            if result.platform != platform:
                return AdapterError(
                    platform.value,
                    AdapterFailure.MALFORMED_RESPONSE,
                    f"Adapter returned a {result.platform.value} result",
                )
        return results
