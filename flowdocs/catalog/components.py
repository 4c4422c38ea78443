"""
React Flow component reference.
"""

from types import MappingProxyType
from typing import Mapping

from flowdocs.catalog.models import ComponentDoc, ListingEntry, entry, prop

COMPONENTS: Mapping[str, ComponentDoc] = MappingProxyType(
    {
        "reactflow": ComponentDoc(
            name="<ReactFlow />",
            type="Core Component",
            description=(
                "The main component for rendering interactive node-based graphs. "
                "It handles panning, zooming, selecting, and connecting nodes."
            ),
            props=(
                prop("nodes", "Node[]", "Array of nodes to render", required=True),
                prop("edges", "Edge[]", "Array of edges connecting nodes", required=True),
                prop("onNodesChange", "OnNodesChange", "Callback when nodes change (move, select, remove)"),
                prop("onEdgesChange", "OnEdgesChange", "Callback when edges change (select, remove)"),
                prop("onConnect", "OnConnect", "Callback when a new connection is made"),
                prop("nodeTypes", "NodeTypes", "Custom node type components"),
                prop("edgeTypes", "EdgeTypes", "Custom edge type components"),
                prop("defaultViewport", "Viewport", "Initial viewport position and zoom"),
                prop("minZoom", "number", "Minimum zoom level", default="0.5"),
                prop("maxZoom", "number", "Maximum zoom level", default="2"),
                prop("fitView", "boolean", "Fit all nodes in view on load", default="false"),
                prop("snapToGrid", "boolean", "Snap nodes to grid when dragging", default="false"),
                prop("snapGrid", "[number, number]", "Grid size for snapping", default="[15, 15]"),
                prop("connectionMode", "ConnectionMode", "How connections can be made (strict or loose)"),
                prop("panOnDrag", "boolean | number[]", "Enable panning on drag", default="true"),
                prop("selectionOnDrag", "boolean", "Enable selection box on drag", default="false"),
                prop("panOnScroll", "boolean", "Enable panning on scroll", default="false"),
                prop("zoomOnScroll", "boolean", "Enable zoom on scroll", default="true"),
                prop("zoomOnPinch", "boolean", "Enable zoom on pinch gesture", default="true"),
                prop("zoomOnDoubleClick", "boolean", "Enable zoom on double click", default="true"),
                prop("preventScrolling", "boolean", "Prevent page scrolling when over flow", default="true"),
                prop("nodesDraggable", "boolean", "Allow nodes to be dragged", default="true"),
                prop("nodesConnectable", "boolean", "Allow nodes to be connected", default="true"),
                prop("elementsSelectable", "boolean", "Allow elements to be selected", default="true"),
                prop("proOptions", "ProOptions", "React Flow Pro options (remove attribution, etc.)"),
            ),
            example="""\
import { ReactFlow, useNodesState, useEdgesState, addEdge } from '@xyflow/react';
import '@xyflow/react/dist/style.css';

const initialNodes = [
  { id: '1', position: { x: 0, y: 0 }, data: { label: 'Node 1' } },
  { id: '2', position: { x: 200, y: 100 }, data: { label: 'Node 2' } },
];

const initialEdges = [
  { id: 'e1-2', source: '1', target: '2' },
];

function Flow() {
  const [nodes, setNodes, onNodesChange] = useNodesState(initialNodes);
  const [edges, setEdges, onEdgesChange] = useEdgesState(initialEdges);

  const onConnect = useCallback(
    (params) => setEdges((eds) => addEdge(params, eds)),
    [setEdges]
  );

  return (
    <ReactFlow
      nodes={nodes}
      edges={edges}
      onNodesChange={onNodesChange}
      onEdgesChange={onEdgesChange}
      onConnect={onConnect}
      fitView
    />
  );
}""",
        ),
        "reactflowprovider": ComponentDoc(
            name="<ReactFlowProvider />",
            type="Provider Component",
            description=(
                "Context provider that enables React Flow hooks to be used outside of the "
                "ReactFlow component. Required when using hooks like useReactFlow() in "
                "parent components."
            ),
            example="""\
import { ReactFlow, ReactFlowProvider, useReactFlow } from '@xyflow/react';

function FlowControls() {
  const { zoomIn, zoomOut, fitView } = useReactFlow();

  return (
    <div>
      <button onClick={() => zoomIn()}>Zoom In</button>
      <button onClick={() => zoomOut()}>Zoom Out</button>
      <button onClick={() => fitView()}>Fit View</button>
    </div>
  );
}

function App() {
  return (
    <ReactFlowProvider>
      <FlowControls />
      <ReactFlow nodes={nodes} edges={edges} />
    </ReactFlowProvider>
  );
}""",
        ),
        "background": ComponentDoc(
            name="<Background />",
            type="Helper Component",
            description="Renders a customizable background pattern (dots, lines, or cross) behind the flow.",
            props=(
                prop("variant", '"dots" | "lines" | "cross"', "Background pattern type", default='"dots"'),
                prop("gap", "number | [number, number]", "Gap between pattern elements", default="20"),
                prop("size", "number", "Size of pattern elements", default="1"),
                prop("color", "string", "Color of the background pattern"),
                prop("bgColor", "string", "Background color of the canvas"),
                prop("lineWidth", "number", "Width of lines (for lines/cross variants)", default="1"),
            ),
            example="""\
import { ReactFlow, Background, BackgroundVariant } from '@xyflow/react';

function Flow() {
  return (
    <ReactFlow nodes={nodes} edges={edges}>
      <Background variant={BackgroundVariant.Dots} gap={12} size={1} />
    </ReactFlow>
  );
}""",
        ),
        "controls": ComponentDoc(
            name="<Controls />",
            type="Helper Component",
            description="Renders zoom and fit-view controls for the flow.",
            props=(
                prop("showZoom", "boolean", "Show zoom in/out buttons", default="true"),
                prop("showFitView", "boolean", "Show fit view button", default="true"),
                prop("showInteractive", "boolean", "Show interactive toggle button", default="true"),
                prop("position", "PanelPosition", "Position of controls panel", default='"bottom-left"'),
                prop("fitViewOptions", "FitViewOptions", "Options for fit view behavior"),
                prop("onZoomIn", "() => void", "Callback when zoom in is clicked"),
                prop("onZoomOut", "() => void", "Callback when zoom out is clicked"),
                prop("onFitView", "() => void", "Callback when fit view is clicked"),
                prop("onInteractiveChange", "(interactive: boolean) => void", "Callback when interactive mode changes"),
            ),
            example="""\
import { ReactFlow, Controls } from '@xyflow/react';

function Flow() {
  return (
    <ReactFlow nodes={nodes} edges={edges}>
      <Controls showInteractive={false} />
    </ReactFlow>
  );
}""",
        ),
        "minimap": ComponentDoc(
            name="<MiniMap />",
            type="Helper Component",
            description="Renders a small overview map of the entire flow for navigation.",
            props=(
                prop("nodeColor", "string | (node: Node) => string", "Color of nodes in minimap"),
                prop("nodeStrokeColor", "string | (node: Node) => string", "Stroke color of nodes"),
                prop("nodeBorderRadius", "number", "Border radius of nodes", default="5"),
                prop("nodeStrokeWidth", "number", "Stroke width of nodes", default="2"),
                prop("maskColor", "string", "Color of the mask overlay"),
                prop("maskStrokeColor", "string", "Stroke color of viewport indicator"),
                prop("maskStrokeWidth", "number", "Stroke width of viewport indicator"),
                prop("position", "PanelPosition", "Position of minimap", default='"bottom-right"'),
                prop("pannable", "boolean", "Allow panning via minimap", default="false"),
                prop("zoomable", "boolean", "Allow zooming via minimap", default="false"),
                prop("inversePan", "boolean", "Invert panning direction", default="false"),
            ),
            example="""\
import { ReactFlow, MiniMap } from '@xyflow/react';

function Flow() {
  return (
    <ReactFlow nodes={nodes} edges={edges}>
      <MiniMap
        nodeColor={(node) => node.type === 'input' ? 'blue' : 'gray'}
        pannable
        zoomable
      />
    </ReactFlow>
  );
}""",
        ),
        "panel": ComponentDoc(
            name="<Panel />",
            type="Helper Component",
            description="A helper component to render content on top of the flow at specific positions.",
            props=(
                prop("position", "PanelPosition", "Position of the panel", required=True),
                prop("children", "ReactNode", "Content to render in the panel"),
                prop("className", "string", "CSS class name"),
                prop("style", "CSSProperties", "Inline styles"),
            ),
            example="""\
import { ReactFlow, Panel } from '@xyflow/react';

function Flow() {
  return (
    <ReactFlow nodes={nodes} edges={edges}>
      <Panel position="top-right">
        <button>Custom Button</button>
      </Panel>
    </ReactFlow>
  );
}""",
        ),
        "handle": ComponentDoc(
            name="<Handle />",
            type="Node Component",
            description="Connection point for edges on custom nodes. Handles define where edges can connect.",
            props=(
                prop("type", '"source" | "target"', "Handle type (outgoing or incoming)", required=True),
                prop("position", "Position", "Position on node (Top, Bottom, Left, Right)", required=True),
                prop("id", "string", "Unique identifier for multiple handles"),
                prop("isConnectable", "boolean", "Whether handle can be connected", default="true"),
                prop("isConnectableStart", "boolean", "Can start connections from handle"),
                prop("isConnectableEnd", "boolean", "Can end connections at handle"),
                prop("onConnect", "(connection: Connection) => void", "Callback when connection made"),
                prop("isValidConnection", "(connection: Connection) => boolean", "Validate connection"),
            ),
            example="""\
import { Handle, Position } from '@xyflow/react';

function CustomNode({ data }) {
  return (
    <div className="custom-node">
      <Handle type="target" position={Position.Top} />
      <div>{data.label}</div>
      <Handle type="source" position={Position.Bottom} id="a" />
      <Handle type="source" position={Position.Bottom} id="b" style={{ left: 10 }} />
    </div>
  );
}""",
        ),
        "baseedge": ComponentDoc(
            name="<BaseEdge />",
            type="Edge Component",
            description="Base component for creating custom edges. Renders the SVG path for an edge.",
            props=(
                prop("path", "string", "SVG path string for the edge", required=True),
                prop("labelX", "number", "X position of edge label"),
                prop("labelY", "number", "Y position of edge label"),
                prop("label", "ReactNode", "Edge label content"),
                prop("labelStyle", "CSSProperties", "Styles for the label"),
                prop("labelShowBg", "boolean", "Show background behind label", default="true"),
                prop("labelBgStyle", "CSSProperties", "Styles for label background"),
                prop("labelBgPadding", "[number, number]", "Padding for label background", default="[2, 4]"),
                prop("labelBgBorderRadius", "number", "Border radius of label background", default="2"),
                prop("style", "CSSProperties", "Styles for the edge path"),
                prop("markerEnd", "string", "Marker at end of edge"),
                prop("markerStart", "string", "Marker at start of edge"),
                prop("interactionWidth", "number", "Width of interaction area", default="20"),
            ),
            example="""\
import { BaseEdge, getSmoothStepPath } from '@xyflow/react';

function CustomEdge({ sourceX, sourceY, targetX, targetY, ...props }) {
  const [edgePath, labelX, labelY] = getSmoothStepPath({
    sourceX,
    sourceY,
    targetX,
    targetY,
  });

  return (
    <BaseEdge path={edgePath} labelX={labelX} labelY={labelY} {...props} />
  );
}""",
        ),
        "edgelabelrenderer": ComponentDoc(
            name="<EdgeLabelRenderer />",
            type="Edge Component",
            description=(
                "Renders edge labels outside the SVG context for better styling "
                "capabilities and performance."
            ),
            example="""\
import { BaseEdge, EdgeLabelRenderer, getStraightPath } from '@xyflow/react';

function CustomEdge({ sourceX, sourceY, targetX, targetY, label }) {
  const [edgePath, labelX, labelY] = getStraightPath({
    sourceX, sourceY, targetX, targetY
  });

  return (
    <>
      <BaseEdge path={edgePath} />
      <EdgeLabelRenderer>
        <div
          style={{
            position: 'absolute',
            transform: `translate(-50%, -50%) translate(${labelX}px, ${labelY}px)`,
            pointerEvents: 'all',
          }}
          className="edge-label"
        >
          {label}
        </div>
      </EdgeLabelRenderer>
    </>
  );
}""",
        ),
        "noderesizer": ComponentDoc(
            name="<NodeResizer />",
            type="Node Component",
            description="Adds resize handles to custom nodes, allowing users to resize nodes interactively.",
            props=(
                prop("minWidth", "number", "Minimum width of node", default="10"),
                prop("minHeight", "number", "Minimum height of node", default="10"),
                prop("maxWidth", "number", "Maximum width of node"),
                prop("maxHeight", "number", "Maximum height of node"),
                prop("keepAspectRatio", "boolean", "Maintain aspect ratio while resizing", default="false"),
                prop("shouldResize", "(event, params) => boolean", "Control whether resize should happen"),
                prop("onResizeStart", "(event, params) => void", "Callback when resize starts"),
                prop("onResize", "(event, params) => void", "Callback during resize"),
                prop("onResizeEnd", "(event, params) => void", "Callback when resize ends"),
                prop("isVisible", "boolean", "Show resizer handles", default="true"),
                prop("lineClassName", "string", "Class for resize lines"),
                prop("handleClassName", "string", "Class for resize handles"),
            ),
            example="""\
import { Handle, Position, NodeResizer } from '@xyflow/react';

function ResizableNode({ data }) {
  return (
    <>
      <NodeResizer minWidth={100} minHeight={50} />
      <Handle type="target" position={Position.Top} />
      <div style={{ padding: 10 }}>{data.label}</div>
      <Handle type="source" position={Position.Bottom} />
    </>
  );
}""",
        ),
        "nodetoolbar": ComponentDoc(
            name="<NodeToolbar />",
            type="Node Component",
            description="Renders a toolbar that appears when a node is selected.",
            props=(
                prop("nodeId", "string | string[]", "ID(s) of node(s) to attach toolbar to"),
                prop("isVisible", "boolean", "Control visibility"),
                prop("position", "Position", "Position relative to node", default="Position.Top"),
                prop("offset", "number", "Offset from node", default="10"),
                prop("align", '"center" | "start" | "end"', "Alignment of toolbar", default='"center"'),
            ),
            example="""\
import { Handle, Position, NodeToolbar } from '@xyflow/react';

function NodeWithToolbar({ data }) {
  return (
    <>
      <NodeToolbar>
        <button>Edit</button>
        <button>Delete</button>
      </NodeToolbar>
      <Handle type="target" position={Position.Top} />
      <div>{data.label}</div>
      <Handle type="source" position={Position.Bottom} />
    </>
  );
}""",
        ),
        "viewportportal": ComponentDoc(
            name="<ViewportPortal />",
            type="Helper Component",
            description=(
                "Renders content in the viewport coordinate system, useful for custom "
                "overlays that should transform with the viewport."
            ),
            example="""\
import { ReactFlow, ViewportPortal } from '@xyflow/react';

function Flow() {
  return (
    <ReactFlow nodes={nodes} edges={edges}>
      <ViewportPortal>
        <div style={{ transform: 'translate(100px, 100px)' }}>
          This content moves with the viewport
        </div>
      </ViewportPortal>
    </ReactFlow>
  );
}""",
        ),
        "controlbutton": ComponentDoc(
            name="<ControlButton />",
            type="Helper Component",
            description="A button component for adding custom buttons to the Controls panel.",
            props=(
                prop("children", "ReactNode", "Button content"),
                prop("onClick", "() => void", "Click handler"),
                prop("className", "string", "CSS class name"),
                prop("title", "string", "Button title/tooltip"),
            ),
            example="""\
import { ReactFlow, Controls, ControlButton } from '@xyflow/react';
import { FaCamera } from 'react-icons/fa';

function Flow() {
  const onScreenshot = () => {
    // Take screenshot logic
  };

  return (
    <ReactFlow nodes={nodes} edges={edges}>
      <Controls>
        <ControlButton onClick={onScreenshot} title="Take Screenshot">
          <FaCamera />
        </ControlButton>
      </Controls>
    </ReactFlow>
  );
}""",
        ),
    }
)

COMPONENT_CATEGORIES: Mapping[str, tuple[ListingEntry, ...]] = MappingProxyType(
    {
        "core": (
            entry("<ReactFlow />", "Main component for rendering interactive node-based graphs"),
            entry("<ReactFlowProvider />", "Context provider for using React Flow hooks outside the main component"),
        ),
        "helper": (
            entry("<Background />", "Renders a customizable background pattern (dots, lines, cross)"),
            entry("<Controls />", "Renders zoom and fit-view controls"),
            entry("<MiniMap />", "Renders a small overview map for navigation"),
            entry("<Panel />", "Helper component to render content at specific positions"),
            entry("<ViewportPortal />", "Renders content in the viewport coordinate system"),
            entry("<ControlButton />", "Custom button component for the Controls panel"),
        ),
        "node": (
            entry("<Handle />", "Connection point for edges on custom nodes"),
            entry("<NodeResizer />", "Adds resize handles to custom nodes"),
            entry("<NodeResizeControl />", "Individual resize control for custom positioning"),
            entry("<NodeToolbar />", "Toolbar that appears when a node is selected"),
        ),
        "edge": (
            entry("<BaseEdge />", "Base component for creating custom edges"),
            entry("<EdgeLabelRenderer />", "Renders edge labels outside SVG for better styling"),
            entry("<EdgeToolbar />", "Toolbar that appears when an edge is selected"),
        ),
    }
)
