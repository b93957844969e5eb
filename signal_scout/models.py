"""Pydantic models for data structures."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class PlatformId(str, Enum):
    """Supported platforms, in tie-break precedence order."""

    REDDIT = "reddit"
    HACKERNEWS = "hackernews"
    DEVTO = "devto"


PLATFORM_PRECEDENCE: dict[PlatformId, int] = {platform: idx for idx, platform in enumerate(PlatformId)}


class PlatformInfo(BaseModel):
    """Display information for a supported platform."""

    model_config = ConfigDict(frozen=True)

    id: PlatformId
    label: str
    highlight: str


class SearchRequest(BaseModel):
    """Validated search request: query is trimmed, platforms are distinct."""

    model_config = ConfigDict(frozen=True)

    query: str = Field(..., min_length=1, description="Trimmed research topic")
    platforms: tuple[PlatformId, ...] = Field(..., min_length=1, description="Distinct platforms to query")

    @field_validator("query", mode="before")
    @classmethod
    def _strip_query(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("platforms")
    @classmethod
    def _collapse_duplicates(cls, value: tuple[PlatformId, ...]) -> tuple[PlatformId, ...]:
        # first-seen order
        return tuple(dict.fromkeys(value))


class Result(BaseModel):
    """A normalized search result from any platform."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Platform-prefixed source id, e.g. 'reddit:abc123'")
    platform: PlatformId
    title: str
    url: str
    excerpt: str = ""
    author: str | None = None
    metadata: dict[str, int | float] = Field(default_factory=dict, description="Engagement metrics")
    score: float = Field(default=0.0, ge=0.0, description="Signal score (0-10)")


class SearchMeta(BaseModel):
    """Response metadata and research suggestions."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    query: str
    generated_at: datetime
    platforms: list[PlatformId]
    recommended_angles: list[str] = Field(default_factory=list)
    next_prompts: list[str] = Field(default_factory=list)
    average_score: float = 0.0


class SearchResponse(BaseModel):
    """Search response envelope."""

    model_config = ConfigDict(frozen=True)

    results: list[Result] = Field(default_factory=list)
    meta: SearchMeta
