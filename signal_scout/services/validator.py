"""Turn an untrusted search payload into a validated SearchRequest."""

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from signal_scout.exceptions import ValidationError
from signal_scout.models import PlatformId, SearchRequest

_SUPPORTED = ", ".join(p.value for p in PlatformId)


def parse_search_request(payload: Any) -> SearchRequest:
    """
    Validate a decoded request body.

    Type and platform checks happen here so the caller gets a readable
    message; trimming, duplicate collapsing and emptiness are enforced by
    ``SearchRequest`` itself.

    Raises:
        ValidationError: With a human-readable message describing the problem.
    """
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object with 'query' and 'platforms'")

    query = payload.get("query")
    if not isinstance(query, str):
        raise ValidationError("'query' must be a string")

    raw_platforms = payload.get("platforms")
    if raw_platforms is None:
        raise ValidationError("'platforms' is required")
    if not isinstance(raw_platforms, list):
        raise ValidationError("'platforms' must be an array")

    supported = {p.value for p in PlatformId}
    unknown = [repr(v) for v in raw_platforms if not (isinstance(v, str) and v in supported)]
    if unknown:
        raise ValidationError(
            f"Unsupported platform(s): {', '.join(unknown)}. Supported platforms: {_SUPPORTED}"
        )

    try:
        return SearchRequest(query=query, platforms=tuple(PlatformId(v) for v in raw_platforms))
    except PydanticValidationError as e:
        fields = {str(err["loc"][0]) for err in e.errors() if err.get("loc")}
        if "query" in fields:
            raise ValidationError("Enter a topic to scout for signals") from None
        raise ValidationError("Select at least one platform") from None
