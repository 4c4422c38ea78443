"""
Shared handler plumbing: payload models, TTL conventions and the
read-through cache helper every lookup goes through.
"""

from datetime import timedelta
from typing import Any, Awaitable, Callable, Literal

from pydantic import BaseModel

from flowdocs.services.cache import CacheManager

Payload = dict[str, Any]
Handler = Callable[[dict[str, Any], CacheManager], Awaitable[Payload]]

# Cache lifetimes
DETAIL_TTL = timedelta(minutes=30)  # single component/hook/type/utility/example
LISTING_TTL = timedelta(minutes=60)  # category listings and docs topics
SEARCH_TTL = timedelta(minutes=15)


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """Tool payload: an ordered list of text blocks."""

    content: list[TextContent]


def text_result(text: str) -> Payload:
    """Wrap markdown text in the tool payload shape."""
    return ToolResult(content=[TextContent(text=text)]).model_dump()


async def cached_lookup(
    cache: CacheManager,
    key: str,
    ttl: timedelta,
    render: Callable[[], str],
) -> Payload:
    """
    Return the payload for key, rendering and caching its text on a miss.

    Only the rendered text is stored. Every call builds a fresh payload, so
    callers may mutate what they get back. Not-found texts are cached like
    any other result.
    """
    text = await cache.get(key)
    if text is None:
        text = render()
        await cache.set(key, text, ttl)
    return text_result(text)


def capitalize_first(word: str) -> str:
    """Upper-case the first letter only ("edgeChanges" -> "EdgeChanges")."""
    return word[:1].upper() + word[1:]
