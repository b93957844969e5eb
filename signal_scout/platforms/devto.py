"""Dev.to search adapter."""

from typing import Any

from signal_scout.models import PlatformId, Result
from signal_scout.platforms.base import PlatformAdapter
from signal_scout.utils.text import as_count, clean_text, safe_get


class DevToAdapter(PlatformAdapter):
    """
    Adapter for Dev.to article search.

    Uses the site's ``/search/feed_content`` endpoint, which accepts free
    text; the documented ``/api/articles`` listing only filters by tag.
    ``/search/feed_content`` is undocumented and not part of the Forem API,
    so its path and response shape may change without notice. Both the
    ``{"result": [...]}`` shape and a plain ``/api/articles`` list are
    understood by ``extract_items``.
    """

    platform = PlatformId.DEVTO

    def __init__(self, base_url: str = "https://dev.to", api_key: str = "", **kwargs: Any):
        super().__init__(base_url, **kwargs)
        self.api_key = api_key

    def _headers(self) -> dict[str, str]:
        headers = super()._headers()
        if self.api_key:
            headers["api-key"] = self.api_key
        return headers

    def build_request(self, query: str) -> tuple[str, dict[str, Any]]:
        params = {
            "per_page": self.max_items,
            "page": 0,
            "search_fields": query,
            "class_name": "Article",
        }
        return f"{self.base_url}/search/feed_content", params

    def extract_items(self, payload: Any) -> list[dict[str, Any]]:
        if isinstance(payload, list):
            return payload
        items = payload.get("result") if isinstance(payload, dict) else None
        if not isinstance(items, list):
            raise self.malformed("Missing result array")
        return items

    def normalize(self, item: dict[str, Any]) -> Result | None:
        native_id = item.get("id")
        title = clean_text(item.get("title"))
        if not native_id or not title:
            return None

        path = item.get("path") or ""
        url = item.get("url") or (f"{self.base_url}{path}" if path else self.base_url)
        tags = item.get("tag_list") or []
        if isinstance(tags, str):
            tags = [t.strip() for t in tags.split(",") if t.strip()]

        reactions = item.get("public_reactions_count", item.get("positive_reactions_count"))
        return Result(
            id=self.make_id(native_id),
            platform=self.platform,
            title=title,
            url=url,
            excerpt=self.make_excerpt(
                item.get("description"),
                item.get("body_text"),
                tags and "Tagged " + ", ".join(f"#{t}" for t in tags),
            ),
            author=safe_get(item, "user", "name") or safe_get(item, "user", "username"),
            metadata={
                "reactions": as_count(reactions),
                "comments": as_count(item.get("comments_count")),
            },
        )
