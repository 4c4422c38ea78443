"""Prompt rendering for the guided React Flow tasks."""

from types import MappingProxyType
from typing import Any, Callable, Mapping

from loguru import logger

from flowdocs.catalog.reference import (
    BEST_PRACTICES,
    COMPONENT_USAGE_TEMPLATE,
    DEFAULT_COMPONENT,
    DEFAULT_PRACTICE,
    DEFAULT_TUTORIAL,
    TUTORIALS,
)
from flowdocs.handlers.base import Payload
from flowdocs.services.cache import CacheManager
from flowdocs.services.errors import PromptNotFoundError


def component_usage(arguments: Mapping[str, Any]) -> str:
    name = arguments.get("name") or DEFAULT_COMPONENT
    return COMPONENT_USAGE_TEMPLATE.format(name=name)


def flow_tutorial(arguments: Mapping[str, Any]) -> str:
    task = arguments.get("task") or DEFAULT_TUTORIAL
    return TUTORIALS.get(str(task), TUTORIALS[DEFAULT_TUTORIAL])


def best_practices(arguments: Mapping[str, Any]) -> str:
    topic = arguments.get("topic") or DEFAULT_PRACTICE
    return BEST_PRACTICES.get(str(topic), BEST_PRACTICES[DEFAULT_PRACTICE])


PROMPT_RENDERERS: Mapping[str, Callable[[Mapping[str, Any]], str]] = MappingProxyType(
    {
        "component_usage": component_usage,
        "flow_tutorial": flow_tutorial,
        "best_practices": best_practices,
    }
)


def user_message(text: str) -> dict[str, Any]:
    return {"role": "user", "content": {"type": "text", "text": text}}


async def get_prompt(params: dict[str, Any], cache: CacheManager) -> Payload:
    name = params["name"]
    logger.info(f"Rendering prompt: {name}")

    render = PROMPT_RENDERERS.get(name)
    if render is None:
        raise PromptNotFoundError(name)

    return {"messages": [user_message(render(params.get("arguments") or {}))]}
