"""Platform search adapters."""

from .base import PlatformAdapter
from .devto import DevToAdapter
from .hackernews import HackerNewsAdapter
from .reddit import RedditAdapter
from .registry import PLATFORM_CATALOG, AdapterRegistry, build_registry, platform_label

__all__ = [
    "PlatformAdapter",
    "RedditAdapter",
    "HackerNewsAdapter",
    "DevToAdapter",
    "AdapterRegistry",
    "PLATFORM_CATALOG",
    "build_registry",
    "platform_label",
]
