"""
React Flow TypeScript type reference.
"""

from types import MappingProxyType
from typing import Mapping

from flowdocs.catalog.models import (
    ListingEntry,
    TypeDoc,
    entry,
    enum_value,
    prop,
    variant,
)

TYPES: Mapping[str, TypeDoc] = MappingProxyType(
    {
        "node": TypeDoc(
            name="Node<T>",
            type="Core Type",
            description="Represents a node in the flow. Generic type T defines the data shape.",
            properties=(
                prop("id", "string", "Unique identifier for the node", required=True),
                prop("position", "XYPosition", "Position of the node { x, y }", required=True),
                prop("data", "T", "Custom data object for the node", required=True),
                prop("type", "string", "Node type (references nodeTypes)", default='"default"'),
                prop("style", "CSSProperties", "Inline styles for the node wrapper"),
                prop("className", "string", "CSS class name"),
                prop("sourcePosition", "Position", "Default position for source handles"),
                prop("targetPosition", "Position", "Default position for target handles"),
                prop("hidden", "boolean", "Hide the node"),
                prop("selected", "boolean", "Selection state"),
                prop("dragging", "boolean", "Dragging state"),
                prop("draggable", "boolean", "Override global draggable setting"),
                prop("selectable", "boolean", "Override global selectable setting"),
                prop("connectable", "boolean", "Override global connectable setting"),
                prop("deletable", "boolean", "Whether node can be deleted"),
                prop("dragHandle", "string", "CSS selector for drag handle"),
                prop("width", "number", "Node width (for layout)"),
                prop("height", "number", "Node height (for layout)"),
                prop("parentId", "string", "ID of parent node (for sub-flows)"),
                prop("extent", 'CoordinateExtent | "parent"', "Bounds for node movement"),
                prop("expandParent", "boolean", "Expand parent when node exceeds bounds"),
                prop("zIndex", "number", "Z-index for rendering order"),
                prop("ariaLabel", "string", "Accessibility label"),
                prop("focusable", "boolean", "Whether node can receive focus"),
                prop("resizing", "boolean", "Resizing state (when using NodeResizer)"),
            ),
            example="""\
const node: Node<{ label: string; value: number }> = {
  id: 'node-1',
  type: 'custom',
  position: { x: 100, y: 200 },
  data: { label: 'My Node', value: 42 },
  draggable: true,
  selectable: true,
};""",
        ),
        "edge": TypeDoc(
            name="Edge<T>",
            type="Core Type",
            description=(
                "Represents an edge (connection) between two nodes. Generic type T "
                "defines the data shape."
            ),
            properties=(
                prop("id", "string", "Unique identifier for the edge", required=True),
                prop("source", "string", "ID of the source node", required=True),
                prop("target", "string", "ID of the target node", required=True),
                prop("sourceHandle", "string | null", "ID of source handle"),
                prop("targetHandle", "string | null", "ID of target handle"),
                prop("type", "string", "Edge type (references edgeTypes)", default='"default"'),
                prop("data", "T", "Custom data object for the edge"),
                prop("style", "CSSProperties", "Inline styles for the edge"),
                prop("className", "string", "CSS class name"),
                prop("label", "string | ReactNode", "Edge label"),
                prop("labelStyle", "CSSProperties", "Styles for the label"),
                prop("labelShowBg", "boolean", "Show background behind label"),
                prop("labelBgStyle", "CSSProperties", "Styles for label background"),
                prop("labelBgPadding", "[number, number]", "Padding for label background"),
                prop("labelBgBorderRadius", "number", "Border radius of label background"),
                prop("hidden", "boolean", "Hide the edge"),
                prop("selected", "boolean", "Selection state"),
                prop("animated", "boolean", "Animate the edge (dashed line animation)"),
                prop("selectable", "boolean", "Override global selectable setting"),
                prop("deletable", "boolean", "Whether edge can be deleted"),
                prop("focusable", "boolean", "Whether edge can receive focus"),
                prop("markerStart", "EdgeMarker", "Marker at start of edge"),
                prop("markerEnd", "EdgeMarker", "Marker at end of edge"),
                prop("zIndex", "number", "Z-index for rendering order"),
                prop("ariaLabel", "string", "Accessibility label"),
                prop("interactionWidth", "number", "Width of interaction area"),
                prop("reconnectable", 'boolean | "source" | "target"', "Allow reconnecting the edge"),
            ),
            example="""\
const edge: Edge<{ weight: number }> = {
  id: 'edge-1',
  source: 'node-1',
  target: 'node-2',
  sourceHandle: 'output',
  targetHandle: 'input',
  type: 'smoothstep',
  data: { weight: 0.5 },
  animated: true,
  label: 'Connection',
  markerEnd: { type: MarkerType.ArrowClosed },
};""",
        ),
        "connection": TypeDoc(
            name="Connection",
            type="Core Type",
            description=(
                "Represents a connection being made or a completed connection between handles."
            ),
            properties=(
                prop("source", "string", "ID of the source node", required=True),
                prop("target", "string", "ID of the target node", required=True),
                prop("sourceHandle", "string | null", "ID of source handle"),
                prop("targetHandle", "string | null", "ID of target handle"),
            ),
            example="""\
const connection: Connection = {
  source: 'node-1',
  target: 'node-2',
  sourceHandle: 'output-1',
  targetHandle: 'input-1',
};""",
        ),
        "viewport": TypeDoc(
            name="Viewport",
            type="Core Type",
            description="Represents the current view state of the flow canvas.",
            properties=(
                prop("x", "number", "X position of the viewport"),
                prop("y", "number", "Y position of the viewport"),
                prop("zoom", "number", "Zoom level of the viewport"),
            ),
            example="""\
const viewport: Viewport = {
  x: 0,
  y: 0,
  zoom: 1,
};""",
        ),
        "xyposition": TypeDoc(
            name="XYPosition",
            type="Geometry Type",
            description="A simple x/y coordinate pair.",
            properties=(
                prop("x", "number", "X coordinate"),
                prop("y", "number", "Y coordinate"),
            ),
            example="const position: XYPosition = { x: 100, y: 200 };",
        ),
        "rect": TypeDoc(
            name="Rect",
            type="Geometry Type",
            description="A rectangle with position and dimensions.",
            properties=(
                prop("x", "number", "X position"),
                prop("y", "number", "Y position"),
                prop("width", "number", "Width"),
                prop("height", "number", "Height"),
            ),
            example="const rect: Rect = { x: 0, y: 0, width: 200, height: 100 };",
        ),
        "nodechange": TypeDoc(
            name="NodeChange",
            type="Change Type",
            description=(
                "Union type representing all possible node changes. Used with "
                "onNodesChange callback."
            ),
            variants=(
                variant("NodeAddChange", "A node was added", '{ type: "add", item: Node }'),
                variant("NodeRemoveChange", "A node was removed", '{ type: "remove", id: string }'),
                variant("NodeResetChange", "All nodes reset", '{ type: "reset", item: Node }'),
                variant(
                    "NodePositionChange",
                    "Node position changed",
                    '{ type: "position", id: string, position?: XYPosition, dragging?: boolean }',
                ),
                variant(
                    "NodeDimensionChange",
                    "Node dimensions changed",
                    '{ type: "dimensions", id: string, dimensions?: Dimensions, resizing?: boolean }',
                ),
                variant(
                    "NodeSelectionChange",
                    "Node selection changed",
                    '{ type: "select", id: string, selected: boolean }',
                ),
            ),
            example="""\
const onNodesChange: OnNodesChange = (changes) => {
  changes.forEach((change) => {
    switch (change.type) {
      case 'position':
        console.log(`Node ${change.id} moved to`, change.position);
        break;
      case 'select':
        console.log(`Node ${change.id} selected: ${change.selected}`);
        break;
    }
  });
  setNodes((nds) => applyNodeChanges(changes, nds));
};""",
        ),
        "edgechange": TypeDoc(
            name="EdgeChange",
            type="Change Type",
            description=(
                "Union type representing all possible edge changes. Used with "
                "onEdgesChange callback."
            ),
            variants=(
                variant("EdgeAddChange", "An edge was added", '{ type: "add", item: Edge }'),
                variant("EdgeRemoveChange", "An edge was removed", '{ type: "remove", id: string }'),
                variant("EdgeResetChange", "All edges reset", '{ type: "reset", item: Edge }'),
                variant(
                    "EdgeSelectionChange",
                    "Edge selection changed",
                    '{ type: "select", id: string, selected: boolean }',
                ),
            ),
            example="""\
const onEdgesChange: OnEdgesChange = (changes) => {
  setEdges((eds) => applyEdgeChanges(changes, eds));
};""",
        ),
        "position": TypeDoc(
            name="Position",
            type="Enum Type",
            description="Enum for handle and toolbar positions.",
            values=(
                enum_value("Position.Top", '"top"'),
                enum_value("Position.Bottom", '"bottom"'),
                enum_value("Position.Left", '"left"'),
                enum_value("Position.Right", '"right"'),
            ),
            example="""\
import { Handle, Position } from '@xyflow/react';

<Handle type="source" position={Position.Right} />
<Handle type="target" position={Position.Left} />""",
        ),
        "markertype": TypeDoc(
            name="MarkerType",
            type="Enum Type",
            description="Enum for edge marker types.",
            values=(
                enum_value("MarkerType.Arrow", '"arrow"', "Open arrow marker"),
                enum_value("MarkerType.ArrowClosed", '"arrowclosed"', "Filled arrow marker"),
            ),
            example="""\
import { MarkerType } from '@xyflow/react';

const edge = {
  id: 'e1-2',
  source: '1',
  target: '2',
  markerEnd: { type: MarkerType.ArrowClosed, color: '#333' },
};""",
        ),
        "connectionmode": TypeDoc(
            name="ConnectionMode",
            type="Enum Type",
            description="Enum for connection mode behavior.",
            values=(
                enum_value("ConnectionMode.Strict", '"strict"', "Only allow source-to-target connections"),
                enum_value("ConnectionMode.Loose", '"loose"', "Allow connections in any direction"),
            ),
            example="""\
import { ReactFlow, ConnectionMode } from '@xyflow/react';

<ReactFlow
  nodes={nodes}
  edges={edges}
  connectionMode={ConnectionMode.Loose}
/>""",
        ),
        "panelposition": TypeDoc(
            name="PanelPosition",
            type="Enum Type",
            description="Positions for Panel, Controls, and MiniMap components.",
            values=(
                enum_value("top-left", '"top-left"'),
                enum_value("top-center", '"top-center"'),
                enum_value("top-right", '"top-right"'),
                enum_value("bottom-left", '"bottom-left"'),
                enum_value("bottom-center", '"bottom-center"'),
                enum_value("bottom-right", '"bottom-right"'),
            ),
            example="""\
<Panel position="top-right">Content</Panel>
<Controls position="bottom-left" />
<MiniMap position="bottom-right" />""",
        ),
        "nodetypes": TypeDoc(
            name="NodeTypes",
            type="Configuration Type",
            description="Record type mapping node type names to custom node components.",
            example="""\
import { NodeTypes } from '@xyflow/react';

const nodeTypes: NodeTypes = {
  custom: CustomNode,
  input: InputNode,
  output: OutputNode,
  group: GroupNode,
};

<ReactFlow nodeTypes={nodeTypes} ... />""",
        ),
        "edgetypes": TypeDoc(
            name="EdgeTypes",
            type="Configuration Type",
            description="Record type mapping edge type names to custom edge components.",
            example="""\
import { EdgeTypes } from '@xyflow/react';

const edgeTypes: EdgeTypes = {
  custom: CustomEdge,
  bidirectional: BidirectionalEdge,
};

<ReactFlow edgeTypes={edgeTypes} ... />""",
        ),
        "onconnect": TypeDoc(
            name="OnConnect",
            type="Callback Type",
            description="Callback type for when a new connection is created.",
            signature="(connection: Connection) => void",
            example="""\
const onConnect: OnConnect = useCallback(
  (params) => setEdges((eds) => addEdge(params, eds)),
  [setEdges]
);""",
        ),
        "onnodeschange": TypeDoc(
            name="OnNodesChange",
            type="Callback Type",
            description="Callback type for node change events.",
            signature="(changes: NodeChange[]) => void",
            example="""\
const onNodesChange: OnNodesChange = useCallback(
  (changes) => setNodes((nds) => applyNodeChanges(changes, nds)),
  [setNodes]
);""",
        ),
        "onedgeschange": TypeDoc(
            name="OnEdgesChange",
            type="Callback Type",
            description="Callback type for edge change events.",
            signature="(changes: EdgeChange[]) => void",
            example="""\
const onEdgesChange: OnEdgesChange = useCallback(
  (changes) => setEdges((eds) => applyEdgeChanges(changes, eds)),
  [setEdges]
);""",
        ),
    }
)

TYPE_CATEGORIES: Mapping[str, tuple[ListingEntry, ...]] = MappingProxyType(
    {
        "core": (
            entry("Node<T>", "Represents a node in the flow with custom data type T"),
            entry("Edge<T>", "Represents an edge connecting two nodes"),
            entry("Connection", "Represents a connection between handles"),
            entry("Viewport", "Current view state (x, y, zoom) of the canvas"),
        ),
        "geometry": (
            entry("XYPosition", "Simple x/y coordinate pair"),
            entry("Rect", "Rectangle with position and dimensions"),
            entry("Dimensions", "Width and height dimensions"),
            entry("CoordinateExtent", "Bounding box for node movement"),
        ),
        "change": (
            entry("NodeChange", "Union type for all node changes"),
            entry("EdgeChange", "Union type for all edge changes"),
            entry("NodeAddChange", "Node was added"),
            entry("NodeRemoveChange", "Node was removed"),
            entry("NodePositionChange", "Node position changed"),
            entry("NodeDimensionChange", "Node dimensions changed"),
            entry("NodeSelectionChange", "Node selection changed"),
        ),
        "enum": (
            entry("Position", "Handle and toolbar positions (Top, Bottom, Left, Right)"),
            entry("MarkerType", "Edge marker types (Arrow, ArrowClosed)"),
            entry("ConnectionMode", "Connection mode (Strict, Loose)"),
            entry("PanelPosition", "Panel positions (top-left, bottom-right, etc.)"),
            entry("BackgroundVariant", "Background patterns (Dots, Lines, Cross)"),
            entry("SelectionMode", "Selection behavior (Partial, Full)"),
        ),
        "configuration": (
            entry("NodeTypes", "Record mapping node type names to components"),
            entry("EdgeTypes", "Record mapping edge type names to components"),
            entry("FitViewOptions", "Options for fitView behavior"),
            entry("DefaultEdgeOptions", "Default options for all edges"),
            entry("ProOptions", "React Flow Pro options"),
        ),
        "callback": (
            entry("OnConnect", "Callback when a connection is created"),
            entry("OnNodesChange", "Callback when nodes change"),
            entry("OnEdgesChange", "Callback when edges change"),
            entry("OnNodeDrag", "Callback during node drag"),
            entry("OnSelectionChange", "Callback when selection changes"),
            entry("OnMove", "Callback when viewport moves"),
            entry("OnInit", "Callback when React Flow initializes"),
            entry("IsValidConnection", "Function to validate connections"),
        ),
    }
)
