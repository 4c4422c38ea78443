"""Example lookup and keyword search handlers."""

import re
from typing import Any

from loguru import logger

from flowdocs.catalog import EXAMPLE_INDEX, EXAMPLES
from flowdocs.catalog.models import ExampleSummary
from flowdocs.handlers.base import (
    DETAIL_TTL,
    SEARCH_TTL,
    Payload,
    cached_lookup,
)
from flowdocs.handlers.formatter import (
    format_example,
    format_no_search_results,
    format_search_results,
)
from flowdocs.services.cache import CacheManager

_WHITESPACE = re.compile(r"\s+")


def normalize_example_type(example_type: str) -> str:
    """Lower-case and hyphenate: "Basic Flow" -> "basic-flow"."""
    return _WHITESPACE.sub("-", example_type.lower())


def search_index(query: str) -> list[ExampleSummary]:
    """Examples whose name, description or tags contain every query term."""
    terms = query.lower().split()
    return [
        example
        for example in EXAMPLE_INDEX
        if all(term in example.searchable_text for term in terms)
    ]


def _example_info(example_type: str) -> str:
    example = EXAMPLES.get(normalize_example_type(example_type))
    if example is None:
        available = "\n".join(
            f"- **{key}**: {ex.description}" for key, ex in EXAMPLES.items()
        )
        return (
            f'Example "{example_type}" not found. Available examples:\n\n{available}'
        )
    return format_example(example)


def _search_examples(query: str) -> str:
    matches = search_index(query)
    if not matches:
        return format_no_search_results(query)
    return format_search_results(query, matches)


async def get_example(params: dict[str, Any], cache: CacheManager) -> Payload:
    example_type = params["exampleType"]
    logger.info(f"Getting React Flow example: {example_type}")

    key = f"react-flow-example-{example_type.lower()}"
    return await cached_lookup(cache, key, DETAIL_TTL, lambda: _example_info(example_type))


async def search_examples(params: dict[str, Any], cache: CacheManager) -> Payload:
    query = params["query"]
    logger.info(f"Searching React Flow examples for: {query}")

    key = f"react-flow-example-search-{query.lower()}"
    return await cached_lookup(cache, key, SEARCH_TTL, lambda: _search_examples(query))
