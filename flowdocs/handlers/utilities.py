"""Utility function lookup and listing handlers."""

from typing import Any

from loguru import logger

from flowdocs.catalog import UTILITIES, UTILITY_GROUPS
from flowdocs.handlers.base import (
    DETAIL_TTL,
    LISTING_TTL,
    Payload,
    cached_lookup,
)
from flowdocs.handlers.formatter import format_listing, format_not_found, format_utility
from flowdocs.services.cache import CacheManager

UTILITIES_LIST_KEY = "react-flow-utilities-list"


def normalize_utility_name(name: str) -> str:
    return name.lower().replace("(", "").replace(")", "")


def _utility_info(utility_name: str) -> str:
    utility = UTILITIES.get(normalize_utility_name(utility_name))
    if utility is None:
        return format_not_found(
            "utility",
            "utilities",
            utility_name,
            (u.name for u in UTILITIES.values()),
        )
    return format_utility(utility)


def _utilities_list() -> str:
    return format_listing(
        "React Flow Utilities", "Utilities", "utility", UTILITY_GROUPS, "get_utility"
    )


async def get_utility(params: dict[str, Any], cache: CacheManager) -> Payload:
    utility_name = params["utilityName"]
    logger.info(f"Getting React Flow utility: {utility_name}")

    key = f"react-flow-utility-{utility_name.lower()}"
    return await cached_lookup(cache, key, DETAIL_TTL, lambda: _utility_info(utility_name))


async def list_utilities(params: dict[str, Any], cache: CacheManager) -> Payload:
    logger.info("Listing React Flow utilities")
    return await cached_lookup(cache, UTILITIES_LIST_KEY, LISTING_TTL, _utilities_list)
