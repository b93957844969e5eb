"""Base class for platform search adapters."""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx

from signal_scout.exceptions import AdapterError, AdapterFailure
from signal_scout.models import PlatformId, Result
from signal_scout.utils.text import clean_text, truncate

logger = logging.getLogger(__name__)

MAX_RETRIES = 1


class PlatformAdapter(ABC):
    """
    Async adapter for one platform's public search endpoint.

    Subclasses describe the request and own the mapping from the platform's
    native item shape into ``Result``; the base class performs the HTTP
    call, the single retry, and error classification.
    """

    platform: PlatformId
    user_agent: str = "signal-scout/1.0"

    def __init__(
        self,
        base_url: str,
        http_timeout: float = 6.0,
        max_items: int = 25,
        excerpt_length: int = 280,
        retry_backoff: float = 0.5,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.http_timeout = http_timeout
        self.max_items = max_items
        self.excerpt_length = excerpt_length
        self.retry_backoff = retry_backoff
        self.transport = transport

    def _headers(self) -> dict[str, str]:
        """Get request headers."""
        return {
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        }

    def check_credentials(self) -> None:
        """Raise ``empty_credentials`` when required configuration is missing."""

    @abstractmethod
    def build_request(self, query: str) -> tuple[str, dict[str, Any]]:
        """Return the (url, params) pair for a search."""

    @abstractmethod
    def extract_items(self, payload: Any) -> list[dict[str, Any]]:
        """Pull the list of native items out of a decoded response."""

    @abstractmethod
    def normalize(self, item: dict[str, Any]) -> Result | None:
        """Map one native item to a Result, or None to skip it."""

    async def search(self, query: str) -> list[Result]:
        """Search the platform and return at most ``max_items`` normalized results."""
        self.check_credentials()
        items = await self.fetch(query)

        results: list[Result] = []
        seen: set[str] = set()
        for item in items:
            if len(results) >= self.max_items:
                break
            if not isinstance(item, dict):
                continue
            try:
                result = self.normalize(item)
            except (ValueError, TypeError, OverflowError) as e:
                logger.warning(
                    f"Skipping malformed {self.platform.value} item: {e}",
                    extra={"platform": self.platform.value},
                )
                continue
            if result is None or result.id in seen:
                continue
            seen.add(result.id)
            results.append(result)

        logger.info(
            f"{self.platform.value} returned {len(results)} results for query: {query[:50]}",
            extra={"platform": self.platform.value, "result_count": len(results)},
        )
        return results

    async def fetch(self, query: str) -> list[dict[str, Any]]:
        """Issue the search call and return raw platform items."""
        url, params = self.build_request(query)
        payload = await self._get_json(url, params)
        return self.extract_items(payload)

    async def _get_json(self, url: str, params: dict[str, Any]) -> Any:
        attempt = 0
        while True:
            try:
                return await self._request_json(url, params)
            except AdapterError as e:
                if attempt >= MAX_RETRIES or not e.retryable:
                    raise
                attempt += 1
                logger.info(
                    f"{self.platform.value} {e.cause.value}, retrying in {self.retry_backoff}s",
                    extra={"platform": self.platform.value, "cause": e.cause.value},
                )
                await asyncio.sleep(self.retry_backoff)

    async def _request_json(self, url: str, params: dict[str, Any]) -> Any:
        logger.debug(f"{self.platform.value} request: {url} with params: {params}")

        async with httpx.AsyncClient(
            timeout=self.http_timeout,
            headers=self._headers(),
            follow_redirects=True,
            transport=self.transport,
        ) as client:
            try:
                response = await client.get(url, params=params)
                response.raise_for_status()
            except httpx.TimeoutException as e:
                raise self.error(AdapterFailure.TIMEOUT, f"Timed out calling {url}") from e
            except httpx.HTTPStatusError as e:
                status = e.response.status_code
                if status == 429:
                    raise self.error(AdapterFailure.RATE_LIMITED, "Rate limit hit") from e
                raise self.error(
                    AdapterFailure.TRANSPORT,
                    f"API returned {status}",
                    transient=status >= 500,
                ) from e
            except httpx.TransportError as e:
                raise self.error(AdapterFailure.TRANSPORT, f"Network error: {e}", transient=True) from e
            except httpx.HTTPError as e:
                raise self.error(AdapterFailure.TRANSPORT, f"HTTP error: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise self.error(AdapterFailure.MALFORMED_RESPONSE, "Response body is not JSON") from e

    def error(self, cause: AdapterFailure, message: str = "", transient: bool = False) -> AdapterError:
        return AdapterError(self.platform.value, cause, message, transient=transient)

    def malformed(self, message: str) -> AdapterError:
        return self.error(AdapterFailure.MALFORMED_RESPONSE, message)

    def make_id(self, native_id: Any) -> str:
        return f"{self.platform.value}:{native_id}"

    def make_excerpt(self, *candidates: Any) -> str:
        """Plain-text, length-capped excerpt from the first non-empty candidate."""
        for candidate in candidates:
            text = clean_text(candidate)
            if text:
                return truncate(text, self.excerpt_length)
        return ""
