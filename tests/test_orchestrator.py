"""Tests for concurrent aggregation across platform adapters."""

import asyncio

import pytest

from signal_scout.exceptions import AdapterFailure, AggregationError, InternalError
from signal_scout.models import PlatformId, SearchRequest
from signal_scout.platforms.registry import AdapterRegistry
from signal_scout.services.orchestrator import Orchestrator

from conftest import FakeAdapter, failing, make_result

ALL_PLATFORMS = (PlatformId.REDDIT, PlatformId.HACKERNEWS, PlatformId.DEVTO)


def request_for(*platforms):
    return SearchRequest(query="climate fintech", platforms=platforms or ALL_PLATFORMS)


@pytest.mark.asyncio
async def test_partial_failure_keeps_successful_results(reddit_results):
    registry = AdapterRegistry(
        {
            PlatformId.REDDIT: FakeAdapter(reddit_results),
            PlatformId.HACKERNEWS: FakeAdapter(delay=5.0),
            PlatformId.DEVTO: FakeAdapter([]),
        }
    )
    outcome = await Orchestrator(registry, adapter_timeout=0.05).run(request_for())

    assert [r.id for r in outcome.results] == ["reddit:a1", "reddit:a2"]
    assert outcome.attempted == list(ALL_PLATFORMS)
    assert len(outcome.failures) == 1
    assert outcome.failures[0].platform == "hackernews"
    assert outcome.failures[0].cause == AdapterFailure.TIMEOUT


@pytest.mark.asyncio
async def test_total_failure_raises_aggregation_error():
    registry = AdapterRegistry(
        {
            PlatformId.REDDIT: failing(PlatformId.REDDIT, AdapterFailure.RATE_LIMITED),
            PlatformId.HACKERNEWS: FakeAdapter(delay=5.0),
            PlatformId.DEVTO: failing(PlatformId.DEVTO, AdapterFailure.MALFORMED_RESPONSE),
        }
    )

    with pytest.raises(AggregationError) as excinfo:
        await Orchestrator(registry, adapter_timeout=0.05).run(request_for())

    failures = {(f.platform, f.cause) for f in excinfo.value.failures}
    assert failures == {
        ("reddit", AdapterFailure.RATE_LIMITED),
        ("hackernews", AdapterFailure.TIMEOUT),
        ("devto", AdapterFailure.MALFORMED_RESPONSE),
    }


@pytest.mark.asyncio
async def test_empty_success_is_not_a_failure():
    registry = AdapterRegistry(
        {
            PlatformId.REDDIT: failing(PlatformId.REDDIT),
            PlatformId.DEVTO: FakeAdapter([]),
        }
    )
    outcome = await Orchestrator(registry).run(request_for(PlatformId.REDDIT, PlatformId.DEVTO))

    assert outcome.results == []
    assert outcome.attempted == [PlatformId.REDDIT, PlatformId.DEVTO]


@pytest.mark.asyncio
async def test_unexpected_adapter_exception_is_isolated(reddit_results):
    class Exploding(FakeAdapter):
        async def search(self, query):
            raise RuntimeError("kaboom")

    registry = AdapterRegistry(
        {PlatformId.REDDIT: FakeAdapter(reddit_results), PlatformId.DEVTO: Exploding()}
    )
    outcome = await Orchestrator(registry).run(request_for(PlatformId.REDDIT, PlatformId.DEVTO))

    assert len(outcome.results) == 2
    assert outcome.failures[0].platform == "devto"


@pytest.mark.asyncio
async def test_merge_order_ignores_completion_order():
    hn = make_result(PlatformId.HACKERNEWS, "h1")
    devto = make_result(PlatformId.DEVTO, "d1")
    reddit = make_result(PlatformId.REDDIT, "r1")
    registry = AdapterRegistry(
        {
            PlatformId.REDDIT: FakeAdapter([reddit], delay=0.03),
            PlatformId.HACKERNEWS: FakeAdapter([hn], delay=0.02),
            PlatformId.DEVTO: FakeAdapter([devto]),
        }
    )
    outcome = await Orchestrator(registry).run(
        request_for(PlatformId.DEVTO, PlatformId.HACKERNEWS, PlatformId.REDDIT)
    )

    assert [r.id for r in outcome.results] == ["reddit:r1", "hackernews:h1", "devto:d1"]
    assert outcome.attempted == list(ALL_PLATFORMS)


@pytest.mark.asyncio
async def test_adapters_run_concurrently():
    registry = AdapterRegistry({p: FakeAdapter(delay=0.2) for p in ALL_PLATFORMS})
    loop = asyncio.get_running_loop()

    start = loop.time()
    await Orchestrator(registry).run(request_for())
    assert loop.time() - start < 0.5


@pytest.mark.asyncio
async def test_only_requested_adapters_are_called(reddit_results):
    reddit = FakeAdapter(reddit_results)
    devto = FakeAdapter([])
    registry = AdapterRegistry({PlatformId.REDDIT: reddit, PlatformId.DEVTO: devto})

    await Orchestrator(registry).run(request_for(PlatformId.REDDIT))

    assert reddit.calls == ["climate fintech"]
    assert devto.calls == []


@pytest.mark.asyncio
async def test_unregistered_platform_is_internal_error():
    registry = AdapterRegistry({PlatformId.REDDIT: FakeAdapter([])})

    with pytest.raises(InternalError):
        await Orchestrator(registry).run(request_for(PlatformId.REDDIT, PlatformId.DEVTO))


@pytest.mark.asyncio
async def test_duplicate_platforms_are_searched_once(reddit_results):
    reddit = FakeAdapter(reddit_results)
    registry = AdapterRegistry({PlatformId.REDDIT: reddit})
    request = SearchRequest(query="  climate fintech ", platforms=(PlatformId.REDDIT, PlatformId.REDDIT))

    outcome = await Orchestrator(registry).run(request)

    assert reddit.calls == ["climate fintech"]
    assert [r.id for r in outcome.results] == ["reddit:a1", "reddit:a2"]
    assert outcome.attempted == [PlatformId.REDDIT]
