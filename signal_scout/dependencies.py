"""FastAPI dependencies."""

from functools import lru_cache

from signal_scout.config import get_settings
from signal_scout.platforms.registry import AdapterRegistry, build_registry
from signal_scout.services.orchestrator import Orchestrator
from signal_scout.services.scout import SignalScoutService


@lru_cache
def get_registry() -> AdapterRegistry:
    """Get the adapter registry built from settings."""
    return build_registry(get_settings())


def get_scout_service() -> SignalScoutService:
    """Get Signal Scout service instance via dependency injection."""
    settings = get_settings()
    orchestrator = Orchestrator(get_registry(), adapter_timeout=settings.adapter_timeout)
    return SignalScoutService(orchestrator, max_results=settings.max_results)
