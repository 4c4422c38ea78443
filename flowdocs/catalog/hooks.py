"""
React Flow hook reference.
"""

from types import MappingProxyType
from typing import Mapping

from flowdocs.catalog.models import HookDoc, ListingEntry, entry, method, param

HOOKS: Mapping[str, HookDoc] = MappingProxyType(
    {
        "usereactflow": HookDoc(
            name="useReactFlow()",
            type="Core Hook",
            description=(
                "Returns the React Flow instance with methods for programmatic control. "
                "Must be used within ReactFlowProvider."
            ),
            returns="ReactFlowInstance",
            methods=(
                method("getNodes()", "Node[]", "Get all nodes"),
                method("getEdges()", "Edge[]", "Get all edges"),
                method("getNode(id)", "Node | undefined", "Get a node by ID"),
                method("getEdge(id)", "Edge | undefined", "Get an edge by ID"),
                method("setNodes(nodes)", "void", "Replace all nodes"),
                method("setEdges(edges)", "void", "Replace all edges"),
                method("addNodes(nodes)", "void", "Add nodes to the flow"),
                method("addEdges(edges)", "void", "Add edges to the flow"),
                method("deleteElements({ nodes, edges })", "void", "Delete specified nodes and edges"),
                method("zoomIn(options?)", "void", "Zoom in the viewport"),
                method("zoomOut(options?)", "void", "Zoom out the viewport"),
                method("zoomTo(level, options?)", "void", "Zoom to a specific level"),
                method("setViewport(viewport, options?)", "void", "Set viewport position and zoom"),
                method("getViewport()", "Viewport", "Get current viewport"),
                method("fitView(options?)", "void", "Fit all nodes in view"),
                method("fitBounds(bounds, options?)", "void", "Fit specific bounds in view"),
                method("screenToFlowPosition(position)", "XYPosition", "Convert screen to flow coordinates"),
                method("flowToScreenPosition(position)", "XYPosition", "Convert flow to screen coordinates"),
                method("getIntersectingNodes(node)", "Node[]", "Get nodes intersecting with a node"),
                method("isNodeIntersecting(node, area)", "boolean", "Check if node intersects area"),
                method("updateNode(id, nodeUpdate)", "void", "Update a node partially"),
                method("updateNodeData(id, dataUpdate)", "void", "Update only node data"),
            ),
            example="""\
import { useReactFlow } from '@xyflow/react';

function FlowControls() {
  const {
    zoomIn,
    zoomOut,
    fitView,
    addNodes,
    deleteElements,
    screenToFlowPosition
  } = useReactFlow();

  const onAddNode = useCallback(() => {
    const position = screenToFlowPosition({ x: 200, y: 200 });
    addNodes({
      id: `node-${Date.now()}`,
      position,
      data: { label: 'New Node' }
    });
  }, [addNodes, screenToFlowPosition]);

  return (
    <div className="controls">
      <button onClick={() => zoomIn()}>Zoom In</button>
      <button onClick={() => zoomOut()}>Zoom Out</button>
      <button onClick={() => fitView()}>Fit View</button>
      <button onClick={onAddNode}>Add Node</button>
    </div>
  );
}""",
        ),
        "usenodes": HookDoc(
            name="useNodes()",
            type="State Hook",
            description="Returns the current nodes array. Re-renders when nodes change.",
            returns="Node[]",
            example="""\
import { useNodes } from '@xyflow/react';

function NodeCounter() {
  const nodes = useNodes();
  return <div>Total nodes: {nodes.length}</div>;
}""",
        ),
        "useedges": HookDoc(
            name="useEdges()",
            type="State Hook",
            description="Returns the current edges array. Re-renders when edges change.",
            returns="Edge[]",
            example="""\
import { useEdges } from '@xyflow/react';

function EdgeCounter() {
  const edges = useEdges();
  return <div>Total connections: {edges.length}</div>;
}""",
        ),
        "usenodesstate": HookDoc(
            name="useNodesState(initialNodes)",
            type="State Hook",
            description=(
                "A convenience hook that returns nodes state, setter, and change handler. "
                "Useful for quick setup."
            ),
            parameters=(param("initialNodes", "Node[]", "Initial nodes array"),),
            returns="[Node[], Dispatch<SetStateAction<Node[]>>, OnNodesChange]",
            example="""\
import { ReactFlow, useNodesState, useEdgesState } from '@xyflow/react';

const initialNodes = [
  { id: '1', position: { x: 0, y: 0 }, data: { label: 'Node 1' } },
  { id: '2', position: { x: 200, y: 100 }, data: { label: 'Node 2' } },
];

function Flow() {
  const [nodes, setNodes, onNodesChange] = useNodesState(initialNodes);
  const [edges, setEdges, onEdgesChange] = useEdgesState([]);

  return (
    <ReactFlow
      nodes={nodes}
      edges={edges}
      onNodesChange={onNodesChange}
      onEdgesChange={onEdgesChange}
    />
  );
}""",
        ),
        "useedgesstate": HookDoc(
            name="useEdgesState(initialEdges)",
            type="State Hook",
            description=(
                "A convenience hook that returns edges state, setter, and change handler. "
                "Useful for quick setup."
            ),
            parameters=(param("initialEdges", "Edge[]", "Initial edges array"),),
            returns="[Edge[], Dispatch<SetStateAction<Edge[]>>, OnEdgesChange]",
            example="""\
import { ReactFlow, useNodesState, useEdgesState, addEdge } from '@xyflow/react';

const initialEdges = [{ id: 'e1-2', source: '1', target: '2' }];

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
    />
  );
}""",
        ),
        "usenodeid": HookDoc(
            name="useNodeId()",
            type="Node Hook",
            description="Returns the ID of the current node. Only works inside custom node components.",
            returns="string | null",
            example="""\
import { Handle, Position, useNodeId } from '@xyflow/react';

function CustomNode({ data }) {
  const nodeId = useNodeId();

  return (
    <div className="custom-node">
      <Handle type="target" position={Position.Top} />
      <div>ID: {nodeId}</div>
      <div>{data.label}</div>
      <Handle type="source" position={Position.Bottom} />
    </div>
  );
}""",
        ),
        "usenodesdata": HookDoc(
            name="useNodesData(nodeIds)",
            type="Data Hook",
            description=(
                "Returns the data of specified nodes. Useful for accessing data from "
                "multiple nodes efficiently."
            ),
            parameters=(param("nodeIds", "string | string[]", "Node ID(s) to get data for"),),
            returns='Pick<Node, "id" | "type" | "data">[] | Pick<Node, "id" | "type" | "data"> | null',
            example="""\
import { useNodesData } from '@xyflow/react';

function NodeDataDisplay({ nodeIds }) {
  const nodesData = useNodesData(nodeIds);

  return (
    <div>
      {nodesData?.map((node) => (
        <div key={node.id}>
          {node.id}: {JSON.stringify(node.data)}
        </div>
      ))}
    </div>
  );
}""",
        ),
        "useconnection": HookDoc(
            name="useConnection()",
            type="Connection Hook",
            description="Returns information about the current connection being made by the user.",
            returns=(
                "{ startHandle: HandleElement | null, endHandle: HandleElement | null, "
                "status: ConnectionStatus | null }"
            ),
            example="""\
import { useConnection } from '@xyflow/react';

function ConnectionIndicator() {
  const connection = useConnection();

  if (!connection.startHandle) {
    return null;
  }

  return (
    <div>
      Connecting from: {connection.startHandle.nodeId}
      {connection.endHandle && ` to ${connection.endHandle.nodeId}`}
    </div>
  );
}""",
        ),
        "usehandleconnections": HookDoc(
            name="useHandleConnections({ type, id })",
            type="Connection Hook",
            description=(
                "Returns all connections for a specific handle. Useful in custom nodes "
                "to know what is connected."
            ),
            parameters=(
                param("type", '"source" | "target"', "Handle type"),
                param("id", "string", "Handle ID (optional)"),
            ),
            returns="HandleConnection[]",
            example="""\
import { Handle, Position, useHandleConnections } from '@xyflow/react';

function CustomNode({ data }) {
  const connections = useHandleConnections({ type: 'target' });

  return (
    <div className="custom-node">
      <Handle type="target" position={Position.Top} />
      <div>{data.label}</div>
      <div>Incoming connections: {connections.length}</div>
      <Handle type="source" position={Position.Bottom} />
    </div>
  );
}""",
        ),
        "usenodeconnections": HookDoc(
            name="useNodeConnections({ type })",
            type="Connection Hook",
            description=(
                "Returns all connections for the current node. Only works inside custom "
                "node components."
            ),
            parameters=(
                param("type", '"source" | "target"', "Filter by connection type (optional)"),
            ),
            returns="NodeConnection[]",
            example="""\
import { Handle, Position, useNodeConnections } from '@xyflow/react';

function CustomNode({ data }) {
  const incomingConnections = useNodeConnections({ type: 'target' });
  const outgoingConnections = useNodeConnections({ type: 'source' });

  return (
    <div className="custom-node">
      <Handle type="target" position={Position.Top} />
      <div>{data.label}</div>
      <div>In: {incomingConnections.length} | Out: {outgoingConnections.length}</div>
      <Handle type="source" position={Position.Bottom} />
    </div>
  );
}""",
        ),
        "useviewport": HookDoc(
            name="useViewport()",
            type="Viewport Hook",
            description="Returns the current viewport (x, y, zoom). Re-renders on viewport changes.",
            returns="Viewport ({ x: number, y: number, zoom: number })",
            example="""\
import { useViewport } from '@xyflow/react';

function ViewportInfo() {
  const { x, y, zoom } = useViewport();

  return (
    <div>
      Position: ({x.toFixed(2)}, {y.toFixed(2)})
      Zoom: {(zoom * 100).toFixed(0)}%
    </div>
  );
}""",
        ),
        "useonviewportchange": HookDoc(
            name="useOnViewportChange({ onStart, onChange, onEnd })",
            type="Viewport Hook",
            description="Registers callbacks for viewport change events without re-rendering.",
            parameters=(
                param("onStart", "(viewport: Viewport) => void", "Called when viewport change starts"),
                param("onChange", "(viewport: Viewport) => void", "Called during viewport change"),
                param("onEnd", "(viewport: Viewport) => void", "Called when viewport change ends"),
            ),
            returns="void",
            example="""\
import { useOnViewportChange } from '@xyflow/react';

function ViewportLogger() {
  useOnViewportChange({
    onStart: (viewport) => console.log('Start:', viewport),
    onChange: (viewport) => console.log('Change:', viewport),
    onEnd: (viewport) => console.log('End:', viewport),
  });

  return null;
}""",
        ),
        "useonselectionchange": HookDoc(
            name="useOnSelectionChange({ onChange })",
            type="Selection Hook",
            description="Registers a callback for selection changes without re-rendering.",
            parameters=(
                param("onChange", "({ nodes, edges }) => void", "Called when selection changes"),
            ),
            returns="void",
            example="""\
import { useOnSelectionChange } from '@xyflow/react';

function SelectionHandler() {
  useOnSelectionChange({
    onChange: ({ nodes, edges }) => {
      console.log('Selected nodes:', nodes.map(n => n.id));
      console.log('Selected edges:', edges.map(e => e.id));
    },
  });

  return null;
}""",
        ),
        "usekeypress": HookDoc(
            name="useKeyPress(keyCode)",
            type="Interaction Hook",
            description="Returns whether a key is currently pressed.",
            parameters=(param("keyCode", "KeyCode | KeyCode[] | null", "Key(s) to watch"),),
            returns="boolean",
            example="""\
import { useKeyPress } from '@xyflow/react';

function DeleteHandler() {
  const deletePressed = useKeyPress('Delete');
  const shiftPressed = useKeyPress('Shift');

  useEffect(() => {
    if (deletePressed) {
      // Handle delete action
    }
  }, [deletePressed]);

  return null;
}""",
        ),
        "usestore": HookDoc(
            name="useStore(selector)",
            type="Store Hook",
            description="Access the internal zustand store with a selector for fine-grained subscriptions.",
            parameters=(param("selector", "(state: ReactFlowState) => T", "Selector function"),),
            returns="T",
            example="""\
import { useStore } from '@xyflow/react';

function CustomComponent() {
  const transform = useStore((state) => state.transform);
  const [x, y, zoom] = transform;

  return (
    <div>
      Transform: x={x}, y={y}, zoom={zoom}
    </div>
  );
}""",
        ),
        "usestoreapi": HookDoc(
            name="useStoreApi()",
            type="Store Hook",
            description="Returns the store API for reading state without subscribing to changes.",
            returns="StoreApi<ReactFlowState>",
            example="""\
import { useStoreApi } from '@xyflow/react';

function StoreReader() {
  const store = useStoreApi();

  const logState = () => {
    const state = store.getState();
    console.log('Current nodes:', state.nodes);
    console.log('Current edges:', state.edges);
  };

  return <button onClick={logState}>Log State</button>;
}""",
        ),
        "useupdatenodeinternals": HookDoc(
            name="useUpdateNodeInternals()",
            type="Utility Hook",
            description=(
                "Returns a function to update node internals (handle positions). Useful "
                "when handles change dynamically."
            ),
            returns="(nodeId: string | string[]) => void",
            example="""\
import { useUpdateNodeInternals } from '@xyflow/react';

function DynamicHandleNode({ id, data }) {
  const updateNodeInternals = useUpdateNodeInternals();
  const [handleCount, setHandleCount] = useState(1);

  const addHandle = () => {
    setHandleCount(c => c + 1);
    // Must update internals after handles change
    updateNodeInternals(id);
  };

  return (
    <div>
      {Array.from({ length: handleCount }).map((_, i) => (
        <Handle key={i} type="source" position={Position.Right} id={`handle-${i}`} />
      ))}
      <button onClick={addHandle}>Add Handle</button>
    </div>
  );
}""",
        ),
        "usenodesinitialized": HookDoc(
            name="useNodesInitialized(options?)",
            type="Utility Hook",
            description="Returns true when all nodes have been measured and have dimensions.",
            parameters=(
                param(
                    "includeHiddenNodes",
                    "boolean",
                    "Include hidden nodes in check",
                    default="false",
                ),
            ),
            returns="boolean",
            example="""\
import { useNodesInitialized, useReactFlow } from '@xyflow/react';

function FitViewOnInit() {
  const nodesInitialized = useNodesInitialized();
  const { fitView } = useReactFlow();

  useEffect(() => {
    if (nodesInitialized) {
      fitView();
    }
  }, [nodesInitialized, fitView]);

  return null;
}""",
        ),
        "useinternalnode": HookDoc(
            name="useInternalNode(nodeId)",
            type="Utility Hook",
            description=(
                "Returns internal node data including computed dimensions. Useful for "
                "advanced customizations."
            ),
            parameters=(param("nodeId", "string", "Node ID to get internal data for"),),
            returns="InternalNode | undefined",
            example="""\
import { useInternalNode } from '@xyflow/react';

function NodeDimensions({ nodeId }) {
  const internalNode = useInternalNode(nodeId);

  if (!internalNode) return null;

  return (
    <div>
      Width: {internalNode.measured.width}
      Height: {internalNode.measured.height}
    </div>
  );
}""",
        ),
    }
)

HOOK_CATEGORIES: Mapping[str, tuple[ListingEntry, ...]] = MappingProxyType(
    {
        "state": (
            entry("useNodes()", "Returns the current nodes array"),
            entry("useEdges()", "Returns the current edges array"),
            entry("useNodesState()", "Convenience hook for nodes state management"),
            entry("useEdgesState()", "Convenience hook for edges state management"),
            entry("useNodesData()", "Returns data of specified nodes"),
        ),
        "viewport": (
            entry("useViewport()", "Returns current viewport (x, y, zoom)"),
            entry("useOnViewportChange()", "Register viewport change callbacks"),
        ),
        "connection": (
            entry("useConnection()", "Returns info about current connection being made"),
            entry("useHandleConnections()", "Returns connections for a specific handle"),
            entry("useNodeConnections()", "Returns all connections for the current node"),
        ),
        "selection": (
            entry("useOnSelectionChange()", "Register selection change callback"),
        ),
        "store": (
            entry("useStore()", "Access internal zustand store with selector"),
            entry("useStoreApi()", "Returns store API for reading without subscribing"),
        ),
        "utility": (
            entry("useReactFlow()", "Returns React Flow instance with control methods"),
            entry("useNodeId()", "Returns ID of current node (inside custom nodes)"),
            entry("useUpdateNodeInternals()", "Function to update node handle positions"),
            entry("useNodesInitialized()", "Returns true when all nodes are measured"),
            entry("useInternalNode()", "Returns internal node data with dimensions"),
            entry("useKeyPress()", "Returns whether a key is pressed"),
        ),
    }
)
