"""
Operation handlers.

HANDLERS maps each operation name to its coroutine. Every handler takes the
validated params and the shared cache and returns the wire payload.
"""

from types import MappingProxyType
from typing import Mapping

from flowdocs.handlers.base import Handler, Payload, ToolResult, text_result
from flowdocs.handlers.components import get_component, list_components
from flowdocs.handlers.docs import get_docs
from flowdocs.handlers.examples import get_example, search_examples
from flowdocs.handlers.hooks import get_hook, list_hooks
from flowdocs.handlers.prompts import get_prompt
from flowdocs.handlers.resources import read_resource
from flowdocs.handlers.typedefs import get_type, list_types
from flowdocs.handlers.utilities import get_utility, list_utilities

HANDLERS: Mapping[str, Handler] = MappingProxyType(
    {
        "get_component": get_component,
        "list_components": list_components,
        "get_hook": get_hook,
        "list_hooks": list_hooks,
        "get_type": get_type,
        "list_types": list_types,
        "get_utility": get_utility,
        "list_utilities": list_utilities,
        "get_example": get_example,
        "search_examples": search_examples,
        "get_docs": get_docs,
        "read_resource": read_resource,
        "get_prompt": get_prompt,
    }
)

TOOL_OPERATIONS: tuple[str, ...] = tuple(
    name for name in HANDLERS if name not in ("read_resource", "get_prompt")
)

__all__ = [
    "HANDLERS",
    "TOOL_OPERATIONS",
    "Handler",
    "Payload",
    "ToolResult",
    "text_result",
]
