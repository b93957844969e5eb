"""Adapter registry: the source of truth for supported platforms."""

import logging

import httpx

from signal_scout.config import Settings
from signal_scout.exceptions import InternalError
from signal_scout.models import PlatformId, PlatformInfo
from signal_scout.platforms.base import PlatformAdapter
from signal_scout.platforms.devto import DevToAdapter
from signal_scout.platforms.hackernews import HackerNewsAdapter
from signal_scout.platforms.reddit import RedditAdapter

logger = logging.getLogger(__name__)

PLATFORM_CATALOG: tuple[PlatformInfo, ...] = (
    PlatformInfo(
        id=PlatformId.REDDIT,
        label="Reddit",
        highlight="Deep community threads and candid pain points",
    ),
    PlatformInfo(
        id=PlatformId.HACKERNEWS,
        label="Hacker News",
        highlight="Builder and investor debate on emerging tech",
    ),
    PlatformInfo(
        id=PlatformId.DEVTO,
        label="Dev.to",
        highlight="Practitioner write-ups and tooling tutorials",
    ),
)


def platform_label(platform: PlatformId) -> str:
    for info in PLATFORM_CATALOG:
        if info.id == platform:
            return info.label
    return platform.value


class AdapterRegistry:
    """Maps a PlatformId to the adapter that serves it."""

    def __init__(self, adapters: dict[PlatformId, PlatformAdapter] | None = None):
        self._adapters: dict[PlatformId, PlatformAdapter] = {}
        for platform, adapter in (adapters or {}).items():
            self.register(platform, adapter)

    def register(self, platform: PlatformId, adapter: PlatformAdapter) -> None:
        self._adapters[PlatformId(platform)] = adapter

    def get(self, platform: PlatformId) -> PlatformAdapter:
        """Return the adapter for ``platform``; a miss is a defect, not user error."""
        try:
            return self._adapters[platform]
        except KeyError:
            raise InternalError(f"No adapter registered for platform '{platform}'") from None

    def __contains__(self, platform: object) -> bool:
        return platform in self._adapters

    @property
    def platforms(self) -> list[PlatformId]:
        """Registered platforms in precedence order."""
        return [p for p in PlatformId if p in self._adapters]


def build_registry(settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> AdapterRegistry:
    """Build the default registry with one adapter per supported platform."""
    common = {
        "http_timeout": settings.http_timeout,
        "max_items": settings.max_items_per_platform,
        "excerpt_length": settings.excerpt_length,
        "retry_backoff": settings.retry_backoff,
        "transport": transport,
    }
    registry = AdapterRegistry(
        {
            PlatformId.REDDIT: RedditAdapter(
                base_url=settings.reddit_base_url,
                user_agent=settings.reddit_user_agent,
                **common,
            ),
            PlatformId.HACKERNEWS: HackerNewsAdapter(base_url=settings.hackernews_base_url, **common),
            PlatformId.DEVTO: DevToAdapter(
                base_url=settings.devto_base_url,
                api_key=settings.devto_api_key,
                **common,
            ),
        }
    )
    logger.debug(f"Adapter registry built for: {[p.value for p in registry.platforms]}")
    return registry
