"""Hacker News search adapter (Algolia HN Search API)."""

from typing import Any

from signal_scout.models import PlatformId, Result
from signal_scout.platforms.base import PlatformAdapter
from signal_scout.utils.text import as_count, clean_text

HN_ITEM_URL = "https://news.ycombinator.com/item?id={id}"


class HackerNewsAdapter(PlatformAdapter):
    """Adapter for stories returned by ``/search`` on the Algolia HN API."""

    platform = PlatformId.HACKERNEWS

    def __init__(self, base_url: str = "https://hn.algolia.com/api/v1", **kwargs: Any):
        super().__init__(base_url, **kwargs)

    def build_request(self, query: str) -> tuple[str, dict[str, Any]]:
        params = {
            "query": query,
            "tags": "story",
            "hitsPerPage": self.max_items,
        }
        return f"{self.base_url}/search", params

    def extract_items(self, payload: Any) -> list[dict[str, Any]]:
        hits = payload.get("hits") if isinstance(payload, dict) else None
        if not isinstance(hits, list):
            raise self.malformed("Missing hits array")
        return hits

    def normalize(self, item: dict[str, Any]) -> Result | None:
        native_id = item.get("objectID") or item.get("story_id")
        title = clean_text(item.get("title") or item.get("story_title"))
        if not native_id or not title:
            return None

        discussion_url = HN_ITEM_URL.format(id=native_id)
        return Result(
            id=self.make_id(native_id),
            platform=self.platform,
            title=title,
            url=item.get("url") or item.get("story_url") or discussion_url,
            excerpt=self.make_excerpt(
                item.get("story_text"),
                item.get("comment_text"),
                f"Discussion on Hacker News: {discussion_url}",
            ),
            author=item.get("author") or None,
            metadata={
                "points": as_count(item.get("points")),
                "comments": as_count(item.get("num_comments")),
            },
        )
