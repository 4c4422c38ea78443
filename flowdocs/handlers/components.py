"""Component lookup and listing handlers."""

import re
from typing import Any

from loguru import logger

from flowdocs.catalog import COMPONENT_CATEGORIES, COMPONENTS
from flowdocs.handlers.base import (
    DETAIL_TTL,
    LISTING_TTL,
    Payload,
    cached_lookup,
)
from flowdocs.handlers.formatter import (
    format_component,
    format_listing,
    format_not_found,
    format_unknown_category,
)
from flowdocs.services.cache import CacheManager

_STRIP = re.compile(r"[<>/\s]")


def normalize_component_name(name: str) -> str:
    """Drop angle brackets, slashes and whitespace: "<ReactFlow />" -> "reactflow"."""
    return _STRIP.sub("", name.lower())


def _component_info(component_name: str) -> str:
    component = COMPONENTS.get(normalize_component_name(component_name))
    if component is None:
        return format_not_found(
            "component",
            "components",
            component_name,
            (c.name for c in COMPONENTS.values()),
        )
    return format_component(component)


def _components_list(category: str | None) -> str:
    if category:
        normalized = category.lower()
        if normalized not in COMPONENT_CATEGORIES:
            return format_unknown_category(category, COMPONENT_CATEGORIES)
        groups = {normalized: COMPONENT_CATEGORIES[normalized]}
    else:
        groups = COMPONENT_CATEGORIES

    return format_listing(
        "React Flow Components", "Components", "component", groups, "get_component"
    )


async def get_component(params: dict[str, Any], cache: CacheManager) -> Payload:
    component_name = params["componentName"]
    logger.info(f"Getting React Flow component: {component_name}")

    key = f"react-flow-component-{component_name.lower()}"
    return await cached_lookup(
        cache, key, DETAIL_TTL, lambda: _component_info(component_name)
    )


async def list_components(params: dict[str, Any], cache: CacheManager) -> Payload:
    category = params.get("category")
    logger.info(
        "Listing React Flow components"
        + (f" in category: {category}" if category else "")
    )

    key = f"react-flow-components-list-{category or 'all'}"
    return await cached_lookup(cache, key, LISTING_TTL, lambda: _components_list(category))
