"""React Flow JSON parser.

The editor stores workflows in React Flow's shape: every node carries its
step kind, label and config under ``data``, and edges carry extra ids and
handles. This module turns that JSON into a WorkflowGraph and back.
"""

import json
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, ValidationError

from flowrun.core.graph import GraphEdge, GraphNode, WorkflowGraph
from flowrun.utils.errors import GraphValidationError


class ReactFlowNodeData(BaseModel):
    """Schema for the ``data`` payload of an editor node."""

    type: str
    label: Optional[str] = None
    config: Optional[Dict[str, Any]] = None


class ReactFlowNode(BaseModel):
    """Schema for a node in React Flow JSON."""

    id: str
    type: Optional[str] = None
    data: ReactFlowNodeData
    position: Optional[Dict[str, float]] = None


class ReactFlowEdge(BaseModel):
    """Schema for an edge in React Flow JSON."""

    id: Optional[str] = None
    source: str
    target: str
    source_handle: Optional[str] = Field(None, alias="sourceHandle")
    target_handle: Optional[str] = Field(None, alias="targetHandle")

    class Config:
        populate_by_name = True


class ReactFlowJSON(BaseModel):
    """Schema for a saved editor canvas."""

    nodes: List[ReactFlowNode] = Field(default_factory=list)
    edges: List[ReactFlowEdge] = Field(default_factory=list)
    viewport: Optional[Dict[str, float]] = None


class ReactFlowParser:
    """Parse React Flow JSON into a WorkflowGraph.

    Example:
        >>> parser = ReactFlowParser()
        >>> graph = parser.parse({
        ...     "nodes": [{"id": "1", "type": "custom",
        ...                "data": {"type": "trigger", "label": "Start"}}],
        ...     "edges": [],
        ... })
    """

    NODE_COMPONENT = "custom"

    def parse(self, json_data: Union[str, Dict[str, Any]]) -> WorkflowGraph:
        """Parse React Flow JSON.

        Args:
            json_data: React Flow JSON dictionary or string

        Returns:
            WorkflowGraph snapshot

        Raises:
            GraphValidationError: If the JSON structure is invalid
            UnknownNodeType: If a node's ``data.type`` is not a known step kind
        """
        if isinstance(json_data, str):
            try:
                json_data = json.loads(json_data)
            except json.JSONDecodeError as e:
                raise GraphValidationError(f"Invalid React Flow JSON: {e}") from e

        try:
            flow_data = ReactFlowJSON.model_validate(json_data)
        except ValidationError as e:
            raise GraphValidationError(f"Invalid React Flow JSON: {e}") from e

        nodes = [
            GraphNode(
                id=node.id,
                type=node.data.type,
                label=node.data.label or "",
                config=node.data.config or {},
            )
            for node in flow_data.nodes
        ]
        edges = [GraphEdge(source=edge.source, target=edge.target) for edge in flow_data.edges]

        return WorkflowGraph.from_nodes_and_edges(nodes, edges)

    def to_react_flow(
        self,
        graph: WorkflowGraph,
        positions: Optional[Dict[str, Dict[str, float]]] = None,
    ) -> Dict[str, Any]:
        """Render a WorkflowGraph back into editor JSON.

        Args:
            graph: Graph to render
            positions: Optional node positions keyed by node id

        Returns:
            React Flow JSON dictionary
        """
        positions = positions or {}
        nodes = []
        for index, node in enumerate(graph.nodes):
            nodes.append(
                {
                    "id": node.id,
                    "type": self.NODE_COMPONENT,
                    "position": positions.get(node.id, {"x": 0.0, "y": index * 100.0}),
                    "data": {
                        "type": node.type.value,
                        "label": node.label,
                        "config": dict(node.config),
                    },
                }
            )
        edges = [
            {"id": f"e{edge.source}-{edge.target}", "source": edge.source, "target": edge.target}
            for edge in graph.edges
        ]
        return {"nodes": nodes, "edges": edges}
