"""Reddit search adapter."""

from typing import Any

from signal_scout.exceptions import AdapterFailure
from signal_scout.models import PlatformId, Result
from signal_scout.platforms.base import PlatformAdapter
from signal_scout.utils.text import as_count, clean_text, safe_get


class RedditAdapter(PlatformAdapter):
    """
    Adapter for Reddit's public ``search.json`` listing.

    No OAuth is needed for public search, but Reddit throttles or rejects
    requests without a descriptive User-Agent, so an empty one is treated
    as missing credentials.
    """

    platform = PlatformId.REDDIT

    def __init__(self, base_url: str = "https://www.reddit.com", user_agent: str = "", **kwargs: Any):
        super().__init__(base_url, **kwargs)
        self.user_agent = user_agent

    def check_credentials(self) -> None:
        if not self.user_agent.strip():
            raise self.error(AdapterFailure.EMPTY_CREDENTIALS, "REDDIT_USER_AGENT is not configured")

    def build_request(self, query: str) -> tuple[str, dict[str, Any]]:
        params = {
            "q": query,
            "sort": "relevance",
            "t": "year",
            "limit": self.max_items,
            "raw_json": 1,
        }
        return f"{self.base_url}/search.json", params

    def extract_items(self, payload: Any) -> list[dict[str, Any]]:
        children = safe_get(payload, "data", "children")
        if not isinstance(children, list):
            raise self.malformed("Missing data.children listing")
        return [child.get("data") for child in children if isinstance(child, dict) and child.get("data")]

    def normalize(self, item: dict[str, Any]) -> Result | None:
        native_id = item.get("id")
        title = clean_text(item.get("title"))
        if not native_id or not title:
            return None

        permalink = item.get("permalink") or ""
        url = f"{self.base_url}{permalink}" if permalink else item.get("url") or self.base_url
        subreddit = item.get("subreddit_name_prefixed") or ""

        return Result(
            id=self.make_id(native_id),
            platform=self.platform,
            title=title,
            url=url,
            excerpt=self.make_excerpt(item.get("selftext"), subreddit and f"Posted in {subreddit}"),
            author=item.get("author") or None,
            metadata={
                "upvotes": as_count(item.get("ups", item.get("score"))),
                "comments": as_count(item.get("num_comments")),
            },
        )
