"""
React Flow utility function reference.
"""

from types import MappingProxyType
from typing import Mapping

from flowdocs.catalog.models import ListingEntry, UtilityDoc, entry, param

_SOURCE_X = param("sourceX", "number", "X position of source")
_SOURCE_Y = param("sourceY", "number", "Y position of source")
_SOURCE_POSITION = param("sourcePosition", "Position", "Position of source handle")
_TARGET_X = param("targetX", "number", "X position of target")
_TARGET_Y = param("targetY", "number", "Y position of target")
_TARGET_POSITION = param("targetPosition", "Position", "Position of target handle")

UTILITIES: Mapping[str, UtilityDoc] = MappingProxyType(
    {
        "addedge": UtilityDoc(
            name="addEdge()",
            type="Edge Utility",
            description="Adds a new edge to an existing array of edges. Prevents duplicate edges.",
            signature="addEdge(edgeParams: Edge | Connection, edges: Edge[]): Edge[]",
            parameters=(
                param("edgeParams", "Edge | Connection", "The edge or connection to add"),
                param("edges", "Edge[]", "Current edges array"),
            ),
            returns="Edge[] - Updated edges array with the new edge",
            example="""\
import { addEdge, useEdgesState } from '@xyflow/react';

function Flow() {
  const [edges, setEdges, onEdgesChange] = useEdgesState([]);

  const onConnect = useCallback(
    (params) => setEdges((eds) => addEdge(params, eds)),
    [setEdges]
  );

  return <ReactFlow edges={edges} onConnect={onConnect} />;
}""",
        ),
        "applynodechanges": UtilityDoc(
            name="applyNodeChanges()",
            type="Node Utility",
            description=(
                "Applies an array of node changes to an existing array of nodes. Handles "
                "position, selection, dimensions, and removal."
            ),
            signature="applyNodeChanges(changes: NodeChange[], nodes: Node[]): Node[]",
            parameters=(
                param("changes", "NodeChange[]", "Array of changes to apply"),
                param("nodes", "Node[]", "Current nodes array"),
            ),
            returns="Node[] - Updated nodes array",
            example="""\
import { applyNodeChanges, useCallback, useState } from '@xyflow/react';

function Flow() {
  const [nodes, setNodes] = useState(initialNodes);

  const onNodesChange = useCallback(
    (changes) => setNodes((nds) => applyNodeChanges(changes, nds)),
    [setNodes]
  );

  return <ReactFlow nodes={nodes} onNodesChange={onNodesChange} />;
}""",
        ),
        "applyedgechanges": UtilityDoc(
            name="applyEdgeChanges()",
            type="Edge Utility",
            description=(
                "Applies an array of edge changes to an existing array of edges. Handles "
                "selection and removal."
            ),
            signature="applyEdgeChanges(changes: EdgeChange[], edges: Edge[]): Edge[]",
            parameters=(
                param("changes", "EdgeChange[]", "Array of changes to apply"),
                param("edges", "Edge[]", "Current edges array"),
            ),
            returns="Edge[] - Updated edges array",
            example="""\
import { applyEdgeChanges, useCallback, useState } from '@xyflow/react';

function Flow() {
  const [edges, setEdges] = useState(initialEdges);

  const onEdgesChange = useCallback(
    (changes) => setEdges((eds) => applyEdgeChanges(changes, eds)),
    [setEdges]
  );

  return <ReactFlow edges={edges} onEdgesChange={onEdgesChange} />;
}""",
        ),
        "reconnectedge": UtilityDoc(
            name="reconnectEdge()",
            type="Edge Utility",
            description=(
                "Updates an edge with a new connection. Used when implementing edge reconnection."
            ),
            signature="reconnectEdge(oldEdge: Edge, newConnection: Connection, edges: Edge[]): Edge[]",
            parameters=(
                param("oldEdge", "Edge", "The edge being reconnected"),
                param("newConnection", "Connection", "The new connection"),
                param("edges", "Edge[]", "Current edges array"),
            ),
            returns="Edge[] - Updated edges array",
            example="""\
import { reconnectEdge } from '@xyflow/react';

const onReconnect = useCallback(
  (oldEdge, newConnection) =>
    setEdges((eds) => reconnectEdge(oldEdge, newConnection, eds)),
  [setEdges]
);

<ReactFlow
  edges={edges}
  onReconnect={onReconnect}
  onReconnectStart={onReconnectStart}
  onReconnectEnd={onReconnectEnd}
/>""",
        ),
        "getbezierpath": UtilityDoc(
            name="getBezierPath()",
            type="Path Utility",
            description=(
                "Calculates a bezier curve path between two points. Returns path string "
                "and label position."
            ),
            signature=(
                "getBezierPath(params: BezierPathParams): [path: string, labelX: number, "
                "labelY: number, offsetX: number, offsetY: number]"
            ),
            parameters=(
                _SOURCE_X,
                _SOURCE_Y,
                _SOURCE_POSITION,
                _TARGET_X,
                _TARGET_Y,
                _TARGET_POSITION,
                param("curvature", "number", "Curve intensity (optional)", default="0.25"),
            ),
            returns="[path, labelX, labelY, offsetX, offsetY]",
            example="""\
import { getBezierPath, BaseEdge } from '@xyflow/react';

function CustomEdge({ sourceX, sourceY, targetX, targetY, sourcePosition, targetPosition }) {
  const [edgePath, labelX, labelY] = getBezierPath({
    sourceX,
    sourceY,
    sourcePosition,
    targetX,
    targetY,
    targetPosition,
  });

  return <BaseEdge path={edgePath} />;
}""",
        ),
        "getsimplebezierpath": UtilityDoc(
            name="getSimpleBezierPath()",
            type="Path Utility",
            description="Calculates a simple bezier path (single control point) between two points.",
            signature="getSimpleBezierPath(params): [path: string, labelX: number, labelY: number]",
            parameters=(_SOURCE_X, _SOURCE_Y, _TARGET_X, _TARGET_Y),
            returns="[path, labelX, labelY]",
            example="""\
import { getSimpleBezierPath } from '@xyflow/react';

const [path, labelX, labelY] = getSimpleBezierPath({
  sourceX: 0,
  sourceY: 0,
  targetX: 100,
  targetY: 100,
});""",
        ),
        "getsmoothsteppath": UtilityDoc(
            name="getSmoothStepPath()",
            type="Path Utility",
            description="Calculates a smooth step path (rounded corners) between two points.",
            signature=(
                "getSmoothStepPath(params): [path: string, labelX: number, labelY: number, "
                "offsetX: number, offsetY: number]"
            ),
            parameters=(
                _SOURCE_X,
                _SOURCE_Y,
                _SOURCE_POSITION,
                _TARGET_X,
                _TARGET_Y,
                _TARGET_POSITION,
                param("borderRadius", "number", "Corner radius", default="5"),
                param("offset", "number", "Path offset", default="20"),
            ),
            returns="[path, labelX, labelY, offsetX, offsetY]",
            example="""\
import { getSmoothStepPath, BaseEdge } from '@xyflow/react';

function SmoothStepEdge(props) {
  const [edgePath, labelX, labelY] = getSmoothStepPath({
    ...props,
    borderRadius: 10,
  });

  return <BaseEdge path={edgePath} labelX={labelX} labelY={labelY} {...props} />;
}""",
        ),
        "getstraightpath": UtilityDoc(
            name="getStraightPath()",
            type="Path Utility",
            description="Calculates a straight line path between two points.",
            signature="getStraightPath(params): [path: string, labelX: number, labelY: number]",
            parameters=(_SOURCE_X, _SOURCE_Y, _TARGET_X, _TARGET_Y),
            returns="[path, labelX, labelY]",
            example="""\
import { getStraightPath, BaseEdge } from '@xyflow/react';

function StraightEdge({ sourceX, sourceY, targetX, targetY }) {
  const [edgePath, labelX, labelY] = getStraightPath({
    sourceX,
    sourceY,
    targetX,
    targetY,
  });

  return <BaseEdge path={edgePath} />;
}""",
        ),
        "getconnectededges": UtilityDoc(
            name="getConnectedEdges()",
            type="Graph Utility",
            description="Returns all edges connected to a set of nodes.",
            signature="getConnectedEdges(nodes: Node[], edges: Edge[]): Edge[]",
            parameters=(
                param("nodes", "Node[]", "Nodes to find connected edges for"),
                param("edges", "Edge[]", "All edges in the flow"),
            ),
            returns="Edge[] - Edges connected to any of the provided nodes",
            example="""\
import { getConnectedEdges, useNodes, useEdges } from '@xyflow/react';

function DeleteSelected() {
  const nodes = useNodes();
  const edges = useEdges();
  const { deleteElements } = useReactFlow();

  const onDeleteSelected = () => {
    const selectedNodes = nodes.filter((n) => n.selected);
    const connectedEdges = getConnectedEdges(selectedNodes, edges);
    deleteElements({ nodes: selectedNodes, edges: connectedEdges });
  };
}""",
        ),
        "getincomers": UtilityDoc(
            name="getIncomers()",
            type="Graph Utility",
            description="Returns all nodes that have edges pointing to the target node.",
            signature="getIncomers(node: Node, nodes: Node[], edges: Edge[]): Node[]",
            parameters=(
                param("node", "Node", "Target node"),
                param("nodes", "Node[]", "All nodes in the flow"),
                param("edges", "Edge[]", "All edges in the flow"),
            ),
            returns="Node[] - Nodes with edges pointing to the target",
            example="""\
import { getIncomers } from '@xyflow/react';

function NodeInfo({ node, nodes, edges }) {
  const incomers = getIncomers(node, nodes, edges);

  return (
    <div>
      Incoming connections from: {incomers.map(n => n.id).join(', ')}
    </div>
  );
}""",
        ),
        "getoutgoers": UtilityDoc(
            name="getOutgoers()",
            type="Graph Utility",
            description="Returns all nodes that the source node has edges pointing to.",
            signature="getOutgoers(node: Node, nodes: Node[], edges: Edge[]): Node[]",
            parameters=(
                param("node", "Node", "Source node"),
                param("nodes", "Node[]", "All nodes in the flow"),
                param("edges", "Edge[]", "All edges in the flow"),
            ),
            returns="Node[] - Nodes the source has edges pointing to",
            example="""\
import { getOutgoers } from '@xyflow/react';

function NodeInfo({ node, nodes, edges }) {
  const outgoers = getOutgoers(node, nodes, edges);

  return (
    <div>
      Outgoing connections to: {outgoers.map(n => n.id).join(', ')}
    </div>
  );
}""",
        ),
        "getnodesbounds": UtilityDoc(
            name="getNodesBounds()",
            type="Layout Utility",
            description="Calculates the bounding box that contains all provided nodes.",
            signature="getNodesBounds(nodes: Node[]): Rect",
            parameters=(param("nodes", "Node[]", "Nodes to calculate bounds for"),),
            returns="Rect - { x, y, width, height }",
            example="""\
import { getNodesBounds, useNodes } from '@xyflow/react';

function FlowBounds() {
  const nodes = useNodes();
  const bounds = getNodesBounds(nodes);

  return (
    <div>
      Flow bounds: {bounds.width}x{bounds.height}
    </div>
  );
}""",
        ),
        "getviewportforbounds": UtilityDoc(
            name="getViewportForBounds()",
            type="Layout Utility",
            description=(
                "Calculates the viewport settings needed to fit given bounds in a container."
            ),
            signature=(
                "getViewportForBounds(bounds: Rect, width: number, height: number, "
                "minZoom: number, maxZoom: number, padding?: number): Viewport"
            ),
            parameters=(
                param("bounds", "Rect", "Bounds to fit"),
                param("width", "number", "Container width"),
                param("height", "number", "Container height"),
                param("minZoom", "number", "Minimum zoom level"),
                param("maxZoom", "number", "Maximum zoom level"),
                param("padding", "number", "Padding around bounds", default="0.1"),
            ),
            returns="Viewport - { x, y, zoom }",
            example="""\
import { getNodesBounds, getViewportForBounds } from '@xyflow/react';

const bounds = getNodesBounds(nodes);
const viewport = getViewportForBounds(bounds, 800, 600, 0.5, 2, 0.2);
// Use viewport with setViewport()""",
        ),
        "isnode": UtilityDoc(
            name="isNode()",
            type="Validation Utility",
            description="Type guard to check if an element is a Node.",
            signature="isNode(element: Node | Edge): element is Node",
            parameters=(param("element", "Node | Edge", "Element to check"),),
            returns="boolean - True if element is a Node",
            example="""\
import { isNode } from '@xyflow/react';

function processElement(element: Node | Edge) {
  if (isNode(element)) {
    console.log('Node position:', element.position);
  } else {
    console.log('Edge source:', element.source);
  }
}""",
        ),
        "isedge": UtilityDoc(
            name="isEdge()",
            type="Validation Utility",
            description="Type guard to check if an element is an Edge.",
            signature="isEdge(element: Node | Edge): element is Edge",
            parameters=(param("element", "Node | Edge", "Element to check"),),
            returns="boolean - True if element is an Edge",
            example="""\
import { isEdge } from '@xyflow/react';

function processElement(element: Node | Edge) {
  if (isEdge(element)) {
    console.log('Edge connects:', element.source, '->', element.target);
  }
}""",
        ),
    }
)

UTILITY_GROUPS: Mapping[str, tuple[ListingEntry, ...]] = MappingProxyType(
    {
        "edge": (
            entry("addEdge()", "Add a new edge to an existing array"),
            entry("reconnectEdge()", "Update an edge with a new connection"),
        ),
        "node": (entry("applyNodeChanges()", "Apply node changes to nodes array"),),
        "edgeChanges": (entry("applyEdgeChanges()", "Apply edge changes to edges array"),),
        "path": (
            entry("getBezierPath()", "Calculate bezier curve path"),
            entry("getSimpleBezierPath()", "Calculate simple bezier path"),
            entry("getSmoothStepPath()", "Calculate smooth step path with rounded corners"),
            entry("getStraightPath()", "Calculate straight line path"),
        ),
        "graph": (
            entry("getConnectedEdges()", "Get all edges connected to nodes"),
            entry("getIncomers()", "Get nodes with edges pointing to target"),
            entry("getOutgoers()", "Get nodes that source points to"),
        ),
        "layout": (
            entry("getNodesBounds()", "Calculate bounding box for nodes"),
            entry("getViewportForBounds()", "Calculate viewport to fit bounds"),
        ),
        "validation": (
            entry("isNode()", "Type guard for Node"),
            entry("isEdge()", "Type guard for Edge"),
        ),
    }
)
