"""Core graph data structures for flowrun.

A workflow is a directed graph of typed steps. The editor hands the engine a
snapshot of its nodes and edges; ``WorkflowGraph`` copies that snapshot so
edits made while a run is in progress are never observed.
"""

import copy
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from flowrun.utils.errors import GraphValidationError, UnknownNodeType


class NodeType(str, Enum):
    """Closed set of step kinds a workflow node can have.

    Values are the wire strings used by the editor.
    """

    TRIGGER = "trigger"
    AI_TEXT_GEN = "aiTextGen"
    AI_IMAGE_GEN = "aiImageGen"
    AI_ANALYSIS = "aiAnalysis"
    NOTION = "notion"
    DATABASE = "database"
    SEND_EMAIL = "sendEmail"
    API_CALL = "apiCall"
    CONDITION = "condition"
    DELAY = "delay"


class GraphNode(BaseModel):
    """A single step in the workflow.

    Attributes:
        id: Unique node identifier
        type: Step kind, fixed once created
        label: Display name (defaults to the catalog label for the type)
        config: Step settings edited in the properties panel
    """

    id: str
    type: NodeType
    label: str = ""
    config: Dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _default_label(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("label"):
            from flowrun.nodes.catalog import default_label

            data = dict(data)
            data["label"] = default_label(data.get("type"))
        return data

    @field_validator("type", mode="before")
    @classmethod
    def _check_type(cls, value: Any) -> NodeType:
        if isinstance(value, NodeType):
            return value
        try:
            return NodeType(value)
        except ValueError:
            raise UnknownNodeType(str(value), [t.value for t in NodeType]) from None

    @field_validator("config", mode="before")
    @classmethod
    def _none_config(cls, value: Any) -> Any:
        return {} if value is None else value


class GraphEdge(BaseModel):
    """Directed connection between two nodes.

    Extra editor fields (ids, handles, styling) are ignored.
    """

    source: str
    target: str


NodeLike = Union[GraphNode, Mapping[str, Any]]
EdgeLike = Union[GraphEdge, Mapping[str, Any]]


@dataclass(frozen=True)
class WorkflowGraph:
    """Immutable snapshot of nodes and edges for one execution run.

    Node and edge order is insertion order and is significant: triggers run
    in node order and successors are visited in edge order.

    Attributes:
        nodes: Nodes in insertion order
        edges: Edges in connection order
        children: Mapping of node IDs to target IDs, one entry per edge
    """

    nodes: Tuple[GraphNode, ...]
    edges: Tuple[GraphEdge, ...]
    children: Dict[str, List[str]]

    @classmethod
    def from_nodes_and_edges(
        cls, nodes: Iterable[NodeLike], edges: Iterable[EdgeLike]
    ) -> "WorkflowGraph":
        """Factory method building a graph from nodes and edges.

        Inputs are deep-copied, so the caller may keep editing its own
        collections afterwards.

        Args:
            nodes: GraphNode instances or node dictionaries
            edges: GraphEdge instances or edge dictionaries

        Returns:
            WorkflowGraph snapshot

        Raises:
            GraphValidationError: If a node or edge is malformed or node ids repeat
            UnknownNodeType: If a node type is outside NodeType
        """
        built_nodes = tuple(_to_node(node) for node in nodes)
        built_edges = tuple(_to_edge(edge) for edge in edges)

        seen = set()
        for node in built_nodes:
            if node.id in seen:
                raise GraphValidationError(f"Duplicate node id: {node.id}")
            seen.add(node.id)

        # Dangling edges are kept; they resolve to no successor at run time
        children: Dict[str, List[str]] = {}
        for edge in built_edges:
            children.setdefault(edge.source, []).append(edge.target)

        return cls(nodes=built_nodes, edges=built_edges, children=children)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "WorkflowGraph":
        """Build a graph from ``{"nodes": [...], "edges": [...]}``."""
        return cls.from_nodes_and_edges(data.get("nodes") or [], data.get("edges") or [])

    def triggers(self) -> List[GraphNode]:
        """Trigger nodes in node order."""
        return [node for node in self.nodes if node.type == NodeType.TRIGGER]

    def get_node(self, node_id: str) -> Optional[GraphNode]:
        """Get a node by ID, or None if it does not exist."""
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def has_node(self, node_id: str) -> bool:
        """Check if a node exists in the graph."""
        return self.get_node(node_id) is not None

    def get_successors(self, node_id: str) -> List[GraphNode]:
        """Get the nodes targeted by edges leaving ``node_id``.

        Order follows the edge collection. Edges pointing at missing nodes
        are skipped, and a repeated edge yields the target twice.
        """
        successors = []
        for target in self.children.get(node_id, []):
            node = self.get_node(target)
            if node is not None:
                successors.append(node)
        return successors

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the ``{"nodes", "edges"}`` wire shape."""
        return {
            "nodes": [node.model_dump(mode="json") for node in self.nodes],
            "edges": [edge.model_dump(mode="json") for edge in self.edges],
        }


def _to_node(node: NodeLike) -> GraphNode:
    if isinstance(node, GraphNode):
        return node.model_copy(deep=True)
    try:
        return GraphNode.model_validate(copy.deepcopy(dict(node)))
    except ValidationError as e:
        raise GraphValidationError(f"Invalid node: {e}") from e


def _to_edge(edge: EdgeLike) -> GraphEdge:
    if isinstance(edge, GraphEdge):
        return edge.model_copy()
    try:
        return GraphEdge.model_validate(dict(edge))
    except ValidationError as e:
        raise GraphValidationError(f"Invalid edge: {e}") from e
