"""Fluent builder for workflow graphs.

Node ids are generated by the builder instance that creates them, never by
module-level state, so two builders never share a counter.
"""

import itertools
from typing import Any, Callable, Dict, List, Optional, Union

from flowrun.core.graph import GraphEdge, GraphNode, NodeType, WorkflowGraph
from flowrun.nodes.catalog import default_config, default_label
from flowrun.utils.errors import GraphValidationError, UnknownNodeType

NodeIdFactory = Callable[[NodeType], str]


class WorkflowBuilder:
    """Build a WorkflowGraph step by step.

    Example:
        >>> builder = WorkflowBuilder()
        >>> trigger = builder.add_node(NodeType.TRIGGER)
        >>> summary = builder.add_node("aiTextGen", config={"prompt": "Summarize {{text}}"})
        >>> builder.connect(trigger, summary)
        >>> graph = builder.build()
    """

    def __init__(self, id_factory: Optional[NodeIdFactory] = None):
        """Initialize empty builder.

        Args:
            id_factory: Produces a node id for a type; defaults to
                ``"{type}-{n}"`` with a counter owned by this builder
        """
        self._nodes: Dict[str, GraphNode] = {}
        self._edges: List[GraphEdge] = []
        self._counter = itertools.count(1)
        self._id_factory = id_factory or self._next_id

    def _next_id(self, node_type: NodeType) -> str:
        return f"{node_type.value}-{next(self._counter)}"

    def add_node(
        self,
        node_type: Union[NodeType, str],
        label: Optional[str] = None,
        config: Optional[Dict[str, Any]] = None,
        node_id: Optional[str] = None,
    ) -> str:
        """Add a node with the catalog defaults for its type.

        Args:
            node_type: Step kind
            label: Display name (defaults to the catalog label)
            config: Settings merged over the type's default config
            node_id: Explicit id (defaults to the builder's id factory)

        Returns:
            The new node's id

        Raises:
            UnknownNodeType: If the type is outside NodeType
            GraphValidationError: If the id is already used
        """
        try:
            node_type = NodeType(node_type)
        except ValueError:
            raise UnknownNodeType(str(node_type), [t.value for t in NodeType]) from None

        node = GraphNode(
            id=node_id or self._id_factory(node_type),
            type=node_type,
            label=label or default_label(node_type),
            config={**default_config(node_type), **(config or {})},
        )
        if node.id in self._nodes:
            raise GraphValidationError(f"Duplicate node id: {node.id}")
        self._nodes[node.id] = node
        return node.id

    def connect(self, source: str, target: str) -> "WorkflowBuilder":
        """Add a directed edge between two nodes.

        Args:
            source: Source node ID
            target: Target node ID

        Returns:
            Self for method chaining

        Raises:
            GraphValidationError: If either node has not been added
        """
        for node_id in (source, target):
            if node_id not in self._nodes:
                raise GraphValidationError(f"Edge references non-existent node: {node_id}")
        self._edges.append(GraphEdge(source=source, target=target))
        return self

    def chain(self, *node_ids: str) -> "WorkflowBuilder":
        """Connect nodes one after another."""
        for source, target in zip(node_ids, node_ids[1:]):
            self.connect(source, target)
        return self

    def build(self) -> WorkflowGraph:
        """Snapshot the nodes and edges added so far."""
        return WorkflowGraph.from_nodes_and_edges(self._nodes.values(), self._edges)
