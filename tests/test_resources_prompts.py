"""Tests for resource reads and prompt rendering."""

import pytest

from flowdocs.catalog.reference import (
    API_REFERENCE,
    API_REFERENCE_URI,
    BEST_PRACTICES,
    PROMPTS,
    TUTORIALS,
)
from flowdocs.handlers.prompts import PROMPT_RENDERERS, get_prompt
from flowdocs.handlers.resources import read_resource, render_resource
from flowdocs.services.errors import PromptNotFoundError, ResourceNotFoundError


async def test_api_reference_resource(cache):
    payload = await read_resource({"uri": API_REFERENCE_URI}, cache)

    assert payload == {
        "contents": [
            {"uri": API_REFERENCE_URI, "mimeType": "text/plain", "text": API_REFERENCE}
        ]
    }


def test_api_reference_points_at_tools():
    assert API_REFERENCE.startswith("# React Flow API Reference")
    for tool in ("get_component", "get_hook", "get_type", "get_utility", "get_docs"):
        assert f"- {tool} - " in API_REFERENCE


def test_component_template():
    text = render_resource("reactflow://component/Handle")

    assert text.startswith("# React Flow Component: Handle")
    assert "import { Handle } from '@xyflow/react';" in text
    assert "- Usage: <Handle ... />" in text
    assert 'componentName="Handle"' in text


def test_hook_template():
    text = render_resource("reactflow://hook/useNodes")

    assert text.startswith("# React Flow Hook: useNodes")
    assert "- Usage: const result = useNodes();" in text


def test_example_template_describes_example():
    text = render_resource("reactflow://example/drag-and-drop")
    assert "This example demonstrates: drag and drop" in text


@pytest.mark.parametrize(
    "uri",
    ["reactflow://widget/Handle", "reactflow://component/", "resource:other", ""],
)
def test_unknown_resource_raises(uri):
    with pytest.raises(ResourceNotFoundError) as exc_info:
        render_resource(uri)
    assert exc_info.value.uri == uri


def test_every_prompt_has_a_renderer():
    assert set(PROMPTS) == set(PROMPT_RENDERERS)


async def test_component_usage_prompt(cache):
    payload = await get_prompt(
        {"name": "component_usage", "arguments": {"name": "MiniMap"}}, cache
    )

    (message,) = payload["messages"]
    assert message["role"] == "user"
    assert message["content"]["type"] == "text"
    assert message["content"]["text"].startswith(
        "Show me how to use the MiniMap component/hook in React Flow."
    )


async def test_component_usage_defaults_to_react_flow(cache):
    payload = await get_prompt({"name": "component_usage", "arguments": None}, cache)
    assert "the ReactFlow component/hook" in payload["messages"][0]["content"]["text"]


async def test_flow_tutorial_prompt(cache):
    payload = await get_prompt(
        {"name": "flow_tutorial", "arguments": {"task": "drag-drop"}}, cache
    )
    assert payload["messages"][0]["content"]["text"] == TUTORIALS["drag-drop"]


async def test_unknown_tutorial_falls_back_to_basic_setup(cache):
    payload = await get_prompt(
        {"name": "flow_tutorial", "arguments": {"task": "time-travel"}}, cache
    )
    assert payload["messages"][0]["content"]["text"] == TUTORIALS["basic-setup"]


async def test_unknown_practice_falls_back_to_general(cache):
    payload = await get_prompt(
        {"name": "best_practices", "arguments": {"topic": "vibes"}}, cache
    )
    assert payload["messages"][0]["content"]["text"] == BEST_PRACTICES["general"]


async def test_unknown_prompt_raises(cache):
    with pytest.raises(PromptNotFoundError) as exc_info:
        await get_prompt({"name": "haiku", "arguments": {}}, cache)
    assert exc_info.value.name == "haiku"


async def test_prompt_errors_count_against_breaker(dispatcher):
    with pytest.raises(PromptNotFoundError):
        await dispatcher.dispatch("get_prompt", {"name": "haiku"})
    assert dispatcher.breaker.consecutive_failures == 1
