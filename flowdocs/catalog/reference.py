"""
Static resources, resource templates and prompt texts.
"""

from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict

API_REFERENCE_URI = "resource:get_react_flow_api"


class ResourceInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    uri: str
    name: str
    description: str
    mime_type: str = "text/plain"


class ResourceTemplateInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    uri_template: str
    name: str
    description: str
    mime_type: str = "text/plain"


class PromptArgument(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    required: bool = True


class PromptInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    arguments: tuple[PromptArgument, ...] = ()


API_REFERENCE = """\
# React Flow API Reference

## Components

### Core Components
- <ReactFlow /> - Main component for rendering interactive node-based graphs
- <ReactFlowProvider /> - Context provider for using hooks outside the main component

### Helper Components
- <Background /> - Renders customizable background patterns (dots, lines, cross)
- <Controls /> - Renders zoom and fit-view controls
- <MiniMap /> - Renders a small overview map for navigation
- <Panel /> - Helper component to render content at specific positions
- <ViewportPortal /> - Renders content in the viewport coordinate system
- <ControlButton /> - Custom button for the Controls panel

### Node Components
- <Handle /> - Connection point for edges on custom nodes
- <NodeResizer /> - Adds resize handles to custom nodes
- <NodeResizeControl /> - Individual resize control
- <NodeToolbar /> - Toolbar that appears when a node is selected

### Edge Components
- <BaseEdge /> - Base component for creating custom edges
- <EdgeLabelRenderer /> - Renders edge labels outside SVG for better styling

## Hooks

### State Hooks
- useNodes() - Returns the current nodes array
- useEdges() - Returns the current edges array
- useNodesState() - Convenience hook for nodes state management
- useEdgesState() - Convenience hook for edges state management
- useNodesData() - Returns data of specified nodes

### Viewport Hooks
- useViewport() - Returns current viewport (x, y, zoom)
- useOnViewportChange() - Register viewport change callbacks

### Connection Hooks
- useConnection() - Returns info about current connection being made
- useHandleConnections() - Returns connections for a specific handle
- useNodeConnections() - Returns all connections for the current node

### Selection Hooks
- useOnSelectionChange() - Register selection change callback

### Store Hooks
- useStore() - Access internal zustand store with selector
- useStoreApi() - Returns store API for reading without subscribing

### Utility Hooks
- useReactFlow() - Returns React Flow instance with control methods
- useNodeId() - Returns ID of current node (inside custom nodes)
- useUpdateNodeInternals() - Function to update node handle positions
- useNodesInitialized() - Returns true when all nodes are measured
- useInternalNode() - Returns internal node data with dimensions
- useKeyPress() - Returns whether a key is pressed

## Types

### Core Types
- Node<T> - Represents a node in the flow
- Edge<T> - Represents an edge connecting nodes
- Connection - Represents a connection between handles
- Viewport - Current view state (x, y, zoom)

### Geometry Types
- XYPosition - Simple x/y coordinate pair
- Rect - Rectangle with position and dimensions
- Dimensions - Width and height
- CoordinateExtent - Bounding box

### Change Types
- NodeChange - Union type for all node changes
- EdgeChange - Union type for all edge changes

### Enum Types
- Position - Handle positions (Top, Bottom, Left, Right)
- MarkerType - Edge markers (Arrow, ArrowClosed)
- ConnectionMode - Connection behavior (Strict, Loose)
- PanelPosition - Panel positions

### Callback Types
- OnConnect - Connection created callback
- OnNodesChange - Nodes changed callback
- OnEdgesChange - Edges changed callback

## Utility Functions

### Edge Utilities
- addEdge() - Add a new edge to an array
- reconnectEdge() - Update an edge with new connection

### Node/Edge Change Utilities
- applyNodeChanges() - Apply changes to nodes array
- applyEdgeChanges() - Apply changes to edges array

### Path Utilities
- getBezierPath() - Calculate bezier curve path
- getSimpleBezierPath() - Calculate simple bezier path
- getSmoothStepPath() - Calculate smooth step path
- getStraightPath() - Calculate straight line path

### Graph Utilities
- getConnectedEdges() - Get edges connected to nodes
- getIncomers() - Get nodes with edges to target
- getOutgoers() - Get nodes target points to

### Layout Utilities
- getNodesBounds() - Calculate bounding box for nodes
- getViewportForBounds() - Calculate viewport to fit bounds

### Validation Utilities
- isNode() - Type guard for Node
- isEdge() - Type guard for Edge

---

For detailed information about any item, use the corresponding tool:
- get_component - Component details
- get_hook - Hook details
- get_type - Type details
- get_utility - Utility details

For code examples:
- get_example - Get complete examples
- search_examples - Search examples

For documentation:
- get_docs - Get guides and tutorials
"""

RESOURCES: tuple[ResourceInfo, ...] = (
    ResourceInfo(
        uri=API_REFERENCE_URI,
        name="React Flow API Reference",
        description="Overview of all React Flow components, hooks, types, and utilities",
    ),
)

RESOURCE_TEMPLATES: tuple[ResourceTemplateInfo, ...] = (
    ResourceTemplateInfo(
        uri_template="reactflow://component/{componentName}",
        name="React Flow Component",
        description="Get detailed information about a specific React Flow component",
    ),
    ResourceTemplateInfo(
        uri_template="reactflow://hook/{hookName}",
        name="React Flow Hook",
        description="Get detailed information about a specific React Flow hook",
    ),
    ResourceTemplateInfo(
        uri_template="reactflow://example/{exampleType}",
        name="React Flow Example",
        description="Get a complete code example for a specific use case",
    ),
)

# ============================================================================
# Prompts
# ============================================================================

PROMPTS: Mapping[str, PromptInfo] = MappingProxyType(
    {
        "component_usage": PromptInfo(
            name="component_usage",
            description="Get usage examples for a specific React Flow component or hook",
            arguments=(
                PromptArgument(
                    name="name",
                    description=(
                        "Name of the component or hook (e.g., 'ReactFlow', "
                        "'useReactFlow', 'Handle')"
                    ),
                ),
            ),
        ),
        "flow_tutorial": PromptInfo(
            name="flow_tutorial",
            description="Get a step-by-step tutorial for common React Flow tasks",
            arguments=(
                PromptArgument(
                    name="task",
                    description=(
                        "Task type (e.g., 'custom-node', 'drag-drop', 'layout', "
                        "'save-restore')"
                    ),
                ),
            ),
        ),
        "best_practices": PromptInfo(
            name="best_practices",
            description="Get best practices and tips for React Flow development",
            arguments=(
                PromptArgument(
                    name="topic",
                    description=(
                        "Topic (e.g., 'performance', 'state-management', "
                        "'typescript', 'accessibility')"
                    ),
                ),
            ),
        ),
    }
)

DEFAULT_COMPONENT = "ReactFlow"
DEFAULT_TUTORIAL = "basic-setup"
DEFAULT_PRACTICE = "general"

COMPONENT_USAGE_TEMPLATE = """\
Show me how to use the {name} component/hook in React Flow. Include:
1. Import statement
2. Basic usage example
3. Common props/parameters
4. A practical example with code"""

TUTORIALS: Mapping[str, str] = MappingProxyType(
    {
        "basic-setup": """\
Create a step-by-step tutorial for setting up a basic React Flow application:
1. Installing dependencies
2. Creating the component structure
3. Defining nodes and edges
4. Adding interactivity (drag, connect, select)
5. Styling the flow

Include complete code examples.""",
        "custom-node": """\
Create a step-by-step tutorial for creating custom nodes in React Flow:
1. Creating the custom node component
2. Using Handle components for connections
3. Registering custom node types
4. Styling custom nodes
5. Adding interactivity to custom nodes

Include complete code examples with TypeScript types.""",
        "drag-drop": """\
Create a step-by-step tutorial for implementing drag-and-drop to add nodes:
1. Setting up the sidebar with draggable items
2. Handling drag events
3. Converting screen coordinates to flow coordinates
4. Creating nodes on drop
5. Best practices for drag-and-drop UX

Include complete code examples.""",
        "layout": """\
Create a step-by-step tutorial for implementing automatic layout in React Flow:
1. Understanding layout requirements
2. Using elkjs or dagre for layout
3. Calculating node positions
4. Applying layout on demand
5. Animating layout changes

Include complete code examples.""",
        "save-restore": """\
Create a step-by-step tutorial for saving and restoring flow state:
1. Understanding the flow state structure
2. Converting to/from JSON
3. Saving to localStorage
4. Saving to a backend API
5. Restoring state including viewport

Include complete code examples.""",
        "validation": """\
Create a step-by-step tutorial for implementing connection validation:
1. Understanding connection flow
2. Using isValidConnection prop
3. Validating by node types
4. Preventing cycles
5. Custom validation logic

Include complete code examples.""",
    }
)

BEST_PRACTICES: Mapping[str, str] = MappingProxyType(
    {
        "performance": """\
Explain React Flow performance best practices:
1. Memoizing components and nodeTypes/edgeTypes
2. Using selectors efficiently with useStore
3. Handling large graphs (1000+ nodes)
4. Optimizing custom nodes
5. Profiling and debugging performance issues

Include code examples for each practice.""",
        "state-management": """\
Explain state management best practices for React Flow:
1. Controlled vs uncontrolled mode
2. Using useNodesState and useEdgesState
3. Integrating with Zustand
4. Integrating with Redux
5. Managing complex state updates

Include code examples for each approach.""",
        "typescript": """\
Explain TypeScript best practices for React Flow:
1. Typing node and edge data
2. Creating typed custom nodes
3. Using generic types effectively
4. Typing callbacks and handlers
5. Common TypeScript patterns

Include code examples with proper types.""",
        "accessibility": """\
Explain accessibility best practices for React Flow:
1. Keyboard navigation
2. ARIA labels and roles
3. Focus management
4. Screen reader support
5. Reduced motion support

Include code examples for accessible implementations.""",
        "general": """\
Explain general best practices for React Flow development:
1. Project structure and organization
2. Error handling
3. Testing strategies
4. Code organization for custom nodes/edges
5. Common pitfalls to avoid

Include practical tips and examples.""",
    }
)
