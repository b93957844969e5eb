"""Text helpers for cleaning and coercing platform payload fields."""

from html import unescape
import re
from typing import Any

_HTML_TAG_RE = re.compile(r"<[^>]+>")
_MARKDOWN_LINK_RE = re.compile(r"\[([^\]]*)\]\([^)]*\)")
_WHITESPACE_RE = re.compile(r"\s+")


def clean_text(value: Any) -> str:
    """Convert potentially HTML- or markdown-rich text to readable plain text."""
    if not value:
        return ""
    text = unescape(str(value))
    if "<" in text and ">" in text:
        text = _HTML_TAG_RE.sub(" ", text)
    text = _MARKDOWN_LINK_RE.sub(r"\1", text)
    return _WHITESPACE_RE.sub(" ", text).strip()


def truncate(text: str, limit: int) -> str:
    """Cut text to at most ``limit`` characters on a word boundary."""
    if len(text) <= limit:
        return text
    cut = text[: limit - 3]
    if " " in cut:
        cut = cut.rsplit(" ", 1)[0]
    return cut.rstrip(" ,;:.-") + "..."


def safe_get(d: Any, *keys, default=None):
    cur = d
    for k in keys:
        if isinstance(cur, dict) and k in cur:
            cur = cur[k]
        else:
            return default
    return cur


def as_count(value: Any) -> int:
    """Coerce a platform engagement field to a non-negative int."""
    try:
        count = int(value)
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(count, 0)
