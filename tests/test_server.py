"""Tests for the MCP binding built by create_server."""

import pytest

from flowdocs.catalog.reference import API_REFERENCE, API_REFERENCE_URI, TUTORIALS
from flowdocs.handlers import TOOL_OPERATIONS
from flowdocs.protocol import create_server
from flowdocs.services.errors import PromptNotFoundError


@pytest.fixture
def server(dispatcher):
    return create_server(dispatcher)


async def test_registers_one_tool_per_operation(server):
    tools = await server.list_tools()
    assert sorted(tool.name for tool in tools) == sorted(TOOL_OPERATIONS)


async def test_tool_schemas_mark_required_arguments(server):
    tools = {tool.name: tool for tool in await server.list_tools()}

    assert tools["get_component"].inputSchema["required"] == ["componentName"]
    assert "category" in tools["list_hooks"].inputSchema["properties"]
    assert not tools["list_hooks"].inputSchema.get("required")


async def test_lists_static_resource_and_templates(server):
    resources = await server.list_resources()
    templates = await server.list_resource_templates()

    assert [str(r.uri) for r in resources] == [API_REFERENCE_URI]
    assert sorted(t.uriTemplate for t in templates) == [
        "reactflow://component/{componentName}",
        "reactflow://example/{exampleType}",
        "reactflow://hook/{hookName}",
    ]


async def test_reads_resources(server):
    (static,) = list(await server.read_resource(API_REFERENCE_URI))
    (templated,) = list(await server.read_resource("reactflow://hook/useEdges"))

    assert static.content == API_REFERENCE
    assert static.mime_type == "text/plain"
    assert templated.content.startswith("# React Flow Hook: useEdges")


async def test_open_breaker_blocks_resource_reads(server, dispatcher):
    for _ in range(3):
        with pytest.raises(PromptNotFoundError):
            await dispatcher.dispatch("get_prompt", {"name": "haiku"})

    with pytest.raises(Exception, match="Circuit breaker open"):
        await server.read_resource(API_REFERENCE_URI)


async def test_lists_prompts_with_required_arguments(server):
    prompts = {p.name: p for p in await server.list_prompts()}

    assert set(prompts) == {"component_usage", "flow_tutorial", "best_practices"}
    (task,) = prompts["flow_tutorial"].arguments
    assert task.name == "task"
    assert task.required


async def test_get_prompt_renders_user_message(server):
    result = await server.get_prompt("flow_tutorial", {"task": "layout"})

    (message,) = result.messages
    assert message.role == "user"
    assert message.content.text == TUTORIALS["layout"]


async def test_listings_are_answered_while_breaker_is_open(server, dispatcher):
    for _ in range(3):
        with pytest.raises(PromptNotFoundError):
            await dispatcher.dispatch("get_prompt", {"name": "haiku"})

    assert len(await server.list_tools()) == len(TOOL_OPERATIONS)
    assert len(await server.list_prompts()) == 3
    assert len(await server.list_resource_templates()) == 3
