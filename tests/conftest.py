"""Shared fixtures for Signal Scout tests."""

import asyncio

import pytest

from signal_scout.exceptions import AdapterError, AdapterFailure
from signal_scout.models import PlatformId, Result
from signal_scout.platforms.registry import AdapterRegistry
from signal_scout.services.orchestrator import Orchestrator
from signal_scout.services.scout import SignalScoutService


def make_result(platform: PlatformId, native_id: str, title: str = "", excerpt: str = "", **metrics) -> Result:
    return Result(
        id=f"{platform.value}:{native_id}",
        platform=platform,
        title=title or f"{platform.value} post {native_id}",
        url=f"https://example.com/{platform.value}/{native_id}",
        excerpt=excerpt,
        author="tester",
        metadata=metrics,
    )


class FakeAdapter:
    """Stands in for a PlatformAdapter; returns canned results or fails."""

    def __init__(self, results=None, error: AdapterError | None = None, delay: float = 0.0):
        self.results = list(results or [])
        self.error = error
        self.delay = delay
        self.calls: list[str] = []

    async def search(self, query: str) -> list[Result]:
        self.calls.append(query)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        return list(self.results)


def failing(platform: PlatformId, cause: AdapterFailure = AdapterFailure.TRANSPORT) -> FakeAdapter:
    return FakeAdapter(error=AdapterError(platform.value, cause, "boom"))


@pytest.fixture
def reddit_results():
    return [
        make_result(PlatformId.REDDIT, "a1", "Best budgeting app for Gen Z?", upvotes=850, comments=210),
        make_result(PlatformId.REDDIT, "a2", "Green investing is overhyped", upvotes=40, comments=12),
    ]


@pytest.fixture
def make_service():
    """Build a SignalScoutService over fake adapters."""

    def _make(adapters: dict, adapter_timeout: float = 1.0, max_results: int = 40) -> SignalScoutService:
        orchestrator = Orchestrator(AdapterRegistry(adapters), adapter_timeout=adapter_timeout)
        return SignalScoutService(orchestrator, max_results=max_results)

    return _make
