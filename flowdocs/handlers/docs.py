"""Documentation topic handler."""

import re
from typing import Any

from loguru import logger

from flowdocs.catalog import DOC_TOPICS
from flowdocs.handlers.base import LISTING_TTL, Payload, cached_lookup
from flowdocs.services.cache import CacheManager

_WHITESPACE = re.compile(r"\s+")


def _docs_info(topic: str) -> str:
    doc = DOC_TOPICS.get(_WHITESPACE.sub("-", topic.lower()))
    if doc is None:
        available = "\n".join(f"- **{key}**: {d.title}" for key, d in DOC_TOPICS.items())
        return (
            f'Documentation topic "{topic}" not found. Available topics:\n\n'
            f"{available}"
            "\n\nUse `get_docs` with one of these topic names."
        )
    return doc.content


async def get_docs(params: dict[str, Any], cache: CacheManager) -> Payload:
    topic = params["topic"]
    logger.info(f"Getting React Flow docs: {topic}")

    key = f"react-flow-docs-{topic.lower()}"
    return await cached_lookup(cache, key, LISTING_TTL, lambda: _docs_info(topic))
