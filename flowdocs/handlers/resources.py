"""
Resource reads: the static API reference and the three URI templates.

Resource reads are cheap string building and are not cached.
"""

import re
from typing import Any

from loguru import logger

from flowdocs.catalog.reference import API_REFERENCE, API_REFERENCE_URI
from flowdocs.handlers.base import Payload
from flowdocs.services.cache import CacheManager
from flowdocs.services.errors import ResourceNotFoundError

MIME_TYPE = "text/plain"

_COMPONENT_URI = re.compile(r"^reactflow://component/(.+)$")
_HOOK_URI = re.compile(r"^reactflow://hook/(.+)$")
_EXAMPLE_URI = re.compile(r"^reactflow://example/(.+)$")


def component_reference(component_name: str) -> str:
    return f"""\
# React Flow Component: {component_name}

Use the 'get_component' tool with componentName="{component_name}" to get detailed information about this component.

Quick reference for {component_name}:
- Import: import {{ {component_name} }} from '@xyflow/react';
- Usage: <{component_name} ... />

For full documentation including props, examples, and best practices, use the tool mentioned above."""


def hook_reference(hook_name: str) -> str:
    return f"""\
# React Flow Hook: {hook_name}

Use the 'get_hook' tool with hookName="{hook_name}" to get detailed information about this hook.

Quick reference for {hook_name}:
- Import: import {{ {hook_name} }} from '@xyflow/react';
- Usage: const result = {hook_name}();

For full documentation including parameters, return values, and examples, use the tool mentioned above."""


def example_reference(example_type: str) -> str:
    return f"""\
# React Flow Example: {example_type}

Use the 'get_example' tool with exampleType="{example_type}" to get the complete code for this example.

This example demonstrates: {example_type.replace("-", " ")}

For the full implementation with code, styling, and explanations, use the tool mentioned above."""


_TEMPLATES = (
    (_COMPONENT_URI, component_reference),
    (_HOOK_URI, hook_reference),
    (_EXAMPLE_URI, example_reference),
)


def render_resource(uri: str) -> str:
    """
    Resolve a resource URI to its text.

    Raises:
        ResourceNotFoundError: If the URI is neither the API reference nor a
            template match
    """
    if uri == API_REFERENCE_URI:
        return API_REFERENCE

    for pattern, render in _TEMPLATES:
        match = pattern.match(uri)
        if match:
            return render(match.group(1))

    raise ResourceNotFoundError(uri)


async def read_resource(params: dict[str, Any], cache: CacheManager) -> Payload:
    uri = params["uri"]
    logger.info(f"Reading resource: {uri}")

    return {"contents": [{"uri": uri, "mimeType": MIME_TYPE, "text": render_resource(uri)}]}
