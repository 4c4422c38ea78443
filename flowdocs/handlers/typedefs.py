"""TypeScript type lookup and listing handlers."""

from typing import Any

from loguru import logger

from flowdocs.catalog import TYPE_CATEGORIES, TYPES
from flowdocs.handlers.base import (
    DETAIL_TTL,
    LISTING_TTL,
    Payload,
    cached_lookup,
)
from flowdocs.handlers.formatter import (
    format_listing,
    format_not_found,
    format_type,
    format_unknown_category,
)
from flowdocs.services.cache import CacheManager


def normalize_type_name(name: str) -> str:
    """Angle brackets are dropped, the generic parameter is kept."""
    return name.lower().replace("<", "").replace(">", "")


def _type_info(type_name: str) -> str:
    type_doc = TYPES.get(normalize_type_name(type_name))
    if type_doc is None:
        return format_not_found("type", "types", type_name, (t.name for t in TYPES.values()))
    return format_type(type_doc)


def _types_list(category: str | None) -> str:
    if category:
        normalized = category.lower()
        if normalized not in TYPE_CATEGORIES:
            return format_unknown_category(category, TYPE_CATEGORIES)
        groups = {normalized: TYPE_CATEGORIES[normalized]}
    else:
        groups = TYPE_CATEGORIES

    return format_listing("React Flow Types", "Types", "type", groups, "get_type")


async def get_type(params: dict[str, Any], cache: CacheManager) -> Payload:
    type_name = params["typeName"]
    logger.info(f"Getting React Flow type: {type_name}")

    key = f"react-flow-type-{type_name.lower()}"
    return await cached_lookup(cache, key, DETAIL_TTL, lambda: _type_info(type_name))


async def list_types(params: dict[str, Any], cache: CacheManager) -> Payload:
    category = params.get("category")
    logger.info(
        "Listing React Flow types" + (f" in category: {category}" if category else "")
    )

    key = f"react-flow-types-list-{category or 'all'}"
    return await cached_lookup(cache, key, LISTING_TTL, lambda: _types_list(category))
