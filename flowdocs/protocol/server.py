"""
MCP binding for the request dispatcher.

Every tool call, resource read and prompt request is forwarded to
RequestDispatcher.dispatch, so validation, the circuit breaker and the cache
apply to the protocol surface exactly as they do to direct calls. Exceptions
raised by the dispatcher are left to FastMCP, which reports them to the
client as errors.
"""

from typing import Annotated, Any

from mcp.server.fastmcp import FastMCP
from mcp.types import TextContent
from pydantic import Field

from flowdocs.catalog.reference import (
    API_REFERENCE_URI,
    PROMPTS,
    RESOURCE_TEMPLATES,
    RESOURCES,
    ResourceTemplateInfo,
)
from flowdocs.handlers import Payload
from flowdocs.services.dispatcher import RequestDispatcher
from flowdocs.settings import Settings, global_settings

INSTRUCTIONS = (
    "Reference documentation for the React Flow (@xyflow/react) library. "
    "Use the list_* tools to discover components, hooks, types and utilities, "
    "the get_* tools for details, search_examples and get_example for "
    "complete code, and get_docs for guides."
)


def _text_blocks(payload: Payload) -> list[TextContent]:
    return [TextContent(type="text", text=block["text"]) for block in payload["content"]]


def _template(uri_template: str) -> ResourceTemplateInfo:
    return next(t for t in RESOURCE_TEMPLATES if t.uri_template == uri_template)


def create_server(
    dispatcher: RequestDispatcher, settings: Settings = global_settings
) -> FastMCP:
    """
    Build a FastMCP server whose tools, resources and prompts all route
    through the given dispatcher.
    """
    mcp = FastMCP(name=settings.server_name, instructions=INSTRUCTIONS)

    async def call_tool(operation: str, **arguments: Any) -> list[TextContent]:
        params = {k: v for k, v in arguments.items() if v is not None}
        return _text_blocks(await dispatcher.dispatch(operation, params))

    async def read_text(uri: str) -> str:
        payload = await dispatcher.dispatch("read_resource", {"uri": uri})
        return payload["contents"][0]["text"]

    async def prompt_messages(name: str, **arguments: Any) -> list[dict[str, Any]]:
        payload = await dispatcher.dispatch(
            "get_prompt", {"name": name, "arguments": arguments}
        )
        return payload["messages"]

    # ========================================================================
    # Tools
    # ========================================================================

    @mcp.tool(structured_output=False)
    async def get_component(
        componentName: Annotated[
            str,
            Field(
                description=(
                    'Name of the React Flow component (e.g., "ReactFlow", '
                    '"Handle", "Background")'
                )
            ),
        ],
    ) -> list[TextContent]:
        """Get detailed information about a specific React Flow component"""
        return await call_tool("get_component", componentName=componentName)

    @mcp.tool(structured_output=False)
    async def list_components(
        category: Annotated[
            str | None,
            Field(description="Filter by category (core, helper, node, edge)"),
        ] = None,
    ) -> list[TextContent]:
        """List all available React Flow components"""
        return await call_tool("list_components", category=category)

    @mcp.tool(structured_output=False)
    async def get_hook(
        hookName: Annotated[
            str,
            Field(
                description=(
                    'Name of the React Flow hook (e.g., "useReactFlow", '
                    '"useNodes", "useEdges")'
                )
            ),
        ],
    ) -> list[TextContent]:
        """Get detailed information about a specific React Flow hook"""
        return await call_tool("get_hook", hookName=hookName)

    @mcp.tool(structured_output=False)
    async def list_hooks(
        category: Annotated[
            str | None,
            Field(
                description=(
                    "Filter by category (state, viewport, connection, "
                    "selection, store, utility)"
                )
            ),
        ] = None,
    ) -> list[TextContent]:
        """List all available React Flow hooks"""
        return await call_tool("list_hooks", category=category)

    @mcp.tool(structured_output=False)
    async def get_type(
        typeName: Annotated[
            str,
            Field(
                description=(
                    'Name of the React Flow type (e.g., "Node", "Edge", "Viewport")'
                )
            ),
        ],
    ) -> list[TextContent]:
        """Get detailed information about a specific React Flow type"""
        return await call_tool("get_type", typeName=typeName)

    @mcp.tool(structured_output=False)
    async def list_types(
        category: Annotated[
            str | None,
            Field(
                description=(
                    "Filter by category (core, geometry, change, enum, "
                    "configuration, callback)"
                )
            ),
        ] = None,
    ) -> list[TextContent]:
        """List all available React Flow types"""
        return await call_tool("list_types", category=category)

    @mcp.tool(structured_output=False)
    async def get_utility(
        utilityName: Annotated[
            str,
            Field(
                description=(
                    'Name of the utility function (e.g., "addEdge", '
                    '"applyNodeChanges", "getBezierPath")'
                )
            ),
        ],
    ) -> list[TextContent]:
        """Get detailed information about a specific React Flow utility function"""
        return await call_tool("get_utility", utilityName=utilityName)

    @mcp.tool(structured_output=False)
    async def list_utilities() -> list[TextContent]:
        """List all available React Flow utility functions"""
        return await call_tool("list_utilities")

    @mcp.tool(structured_output=False)
    async def get_example(
        exampleType: Annotated[
            str,
            Field(
                description=(
                    'Type of example (e.g., "basic-flow", "custom-node", '
                    '"drag-and-drop")'
                )
            ),
        ],
    ) -> list[TextContent]:
        """Get a complete code example for a specific React Flow use case"""
        return await call_tool("get_example", exampleType=exampleType)

    @mcp.tool(structured_output=False)
    async def search_examples(
        query: Annotated[
            str,
            Field(description='Search query (e.g., "drag", "custom", "layout")'),
        ],
    ) -> list[TextContent]:
        """Search React Flow examples by keyword"""
        return await call_tool("search_examples", query=query)

    @mcp.tool(structured_output=False)
    async def get_docs(
        topic: Annotated[
            str,
            Field(
                description=(
                    'Documentation topic (e.g., "getting-started", "concepts", '
                    '"performance")'
                )
            ),
        ],
    ) -> list[TextContent]:
        """Get documentation for React Flow concepts and features"""
        return await call_tool("get_docs", topic=topic)

    # ========================================================================
    # Resources
    # ========================================================================

    api = RESOURCES[0]

    @mcp.resource(
        api.uri, name=api.name, description=api.description, mime_type=api.mime_type
    )
    async def api_reference() -> str:
        return await read_text(API_REFERENCE_URI)

    component = _template("reactflow://component/{componentName}")

    @mcp.resource(
        component.uri_template,
        name=component.name,
        description=component.description,
        mime_type=component.mime_type,
    )
    async def component_resource(componentName: str) -> str:
        return await read_text(f"reactflow://component/{componentName}")

    hook = _template("reactflow://hook/{hookName}")

    @mcp.resource(
        hook.uri_template,
        name=hook.name,
        description=hook.description,
        mime_type=hook.mime_type,
    )
    async def hook_resource(hookName: str) -> str:
        return await read_text(f"reactflow://hook/{hookName}")

    example = _template("reactflow://example/{exampleType}")

    @mcp.resource(
        example.uri_template,
        name=example.name,
        description=example.description,
        mime_type=example.mime_type,
    )
    async def example_resource(exampleType: str) -> str:
        return await read_text(f"reactflow://example/{exampleType}")

    # ========================================================================
    # Prompts
    # ========================================================================

    @mcp.prompt(
        name="component_usage", description=PROMPTS["component_usage"].description
    )
    async def component_usage(
        name: Annotated[
            str, Field(description=PROMPTS["component_usage"].arguments[0].description)
        ],
    ) -> list[dict[str, Any]]:
        return await prompt_messages("component_usage", name=name)

    @mcp.prompt(name="flow_tutorial", description=PROMPTS["flow_tutorial"].description)
    async def flow_tutorial(
        task: Annotated[
            str, Field(description=PROMPTS["flow_tutorial"].arguments[0].description)
        ],
    ) -> list[dict[str, Any]]:
        return await prompt_messages("flow_tutorial", task=task)

    @mcp.prompt(
        name="best_practices", description=PROMPTS["best_practices"].description
    )
    async def best_practices(
        topic: Annotated[
            str, Field(description=PROMPTS["best_practices"].arguments[0].description)
        ],
    ) -> list[dict[str, Any]]:
        return await prompt_messages("best_practices", topic=topic)

    return mcp
