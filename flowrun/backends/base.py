"""Base protocol for workflow storage backends.

Stores persist saved workflows (name, description and the editor's nodes and
edges). The engine never reads or writes a store; callers load a record and
hand ``record.to_graph()`` to the engine.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from flowrun.core.graph import WorkflowGraph


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class WorkflowRecord:
    """A saved workflow.

    Attributes:
        id: Unique identifier
        name: Display name
        description: Optional description
        nodes: Editor nodes as plain dictionaries
        edges: Editor edges as plain dictionaries
        created_at: Creation time
        updated_at: Last save time
    """

    name: str
    nodes: List[Dict[str, Any]] = field(default_factory=list)
    edges: List[Dict[str, Any]] = field(default_factory=list)
    description: Optional[str] = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    @classmethod
    def from_graph(
        cls, name: str, graph: WorkflowGraph, description: Optional[str] = None
    ) -> "WorkflowRecord":
        """Create a record from a graph."""
        data = graph.to_dict()
        return cls(name=name, nodes=data["nodes"], edges=data["edges"], description=description)

    def to_graph(self) -> WorkflowGraph:
        """Build the graph snapshot for this record."""
        return WorkflowGraph.from_nodes_and_edges(self.nodes, self.edges)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize record to dictionary for storage."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "nodes": self.nodes,
            "edges": self.edges,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WorkflowRecord":
        """Deserialize record from dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            description=data.get("description"),
            nodes=list(data.get("nodes") or []),
            edges=list(data.get("edges") or []),
            created_at=datetime.fromisoformat(data["created_at"]),
            updated_at=datetime.fromisoformat(data["updated_at"]),
        )


@runtime_checkable
class WorkflowStore(Protocol):
    """Protocol for workflow storage backends."""

    async def save(self, record: WorkflowRecord) -> None:
        """Insert or update a workflow.

        Args:
            record: Workflow to persist
        """
        ...

    async def load(self, workflow_id: str) -> Optional[WorkflowRecord]:
        """Load a workflow.

        Args:
            workflow_id: Workflow identifier

        Returns:
            WorkflowRecord or None if not found
        """
        ...

    async def delete(self, workflow_id: str) -> None:
        """Delete a workflow.

        Args:
            workflow_id: Workflow identifier
        """
        ...

    async def exists(self, workflow_id: str) -> bool:
        """Check if a workflow exists."""
        ...

    async def list_workflows(self) -> List[WorkflowRecord]:
        """List workflows, most recently created first."""
        ...
