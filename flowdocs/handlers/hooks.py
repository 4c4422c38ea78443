"""Hook lookup and listing handlers."""

from typing import Any

from loguru import logger

from flowdocs.catalog import HOOK_CATEGORIES, HOOKS
from flowdocs.handlers.base import (
    DETAIL_TTL,
    LISTING_TTL,
    Payload,
    cached_lookup,
)
from flowdocs.handlers.formatter import (
    format_hook,
    format_listing,
    format_not_found,
    format_unknown_category,
)
from flowdocs.services.cache import CacheManager


def normalize_hook_name(name: str) -> str:
    return name.lower().replace("(", "").replace(")", "")


def _hook_info(hook_name: str) -> str:
    hook = HOOKS.get(normalize_hook_name(hook_name))
    if hook is None:
        return format_not_found("hook", "hooks", hook_name, (h.name for h in HOOKS.values()))
    return format_hook(hook)


def _hooks_list(category: str | None) -> str:
    if category:
        normalized = category.lower()
        if normalized not in HOOK_CATEGORIES:
            return format_unknown_category(category, HOOK_CATEGORIES)
        groups = {normalized: HOOK_CATEGORIES[normalized]}
    else:
        groups = HOOK_CATEGORIES

    return format_listing("React Flow Hooks", "Hooks", "hook", groups, "get_hook")


async def get_hook(params: dict[str, Any], cache: CacheManager) -> Payload:
    hook_name = params["hookName"]
    logger.info(f"Getting React Flow hook: {hook_name}")

    key = f"react-flow-hook-{hook_name.lower()}"
    return await cached_lookup(cache, key, DETAIL_TTL, lambda: _hook_info(hook_name))


async def list_hooks(params: dict[str, Any], cache: CacheManager) -> Payload:
    category = params.get("category")
    logger.info(
        "Listing React Flow hooks" + (f" in category: {category}" if category else "")
    )

    key = f"react-flow-hooks-list-{category or 'all'}"
    return await cached_lookup(cache, key, LISTING_TTL, lambda: _hooks_list(category))
