"""In-memory workflow store for testing and development.

Workflows are lost when the process terminates.
"""

import copy
from typing import Dict, List, Optional

from flowrun.backends.base import WorkflowRecord, _now


class MemoryWorkflowStore:
    """In-memory workflow storage backend."""

    def __init__(self):
        """Initialize memory store with empty storage."""
        self._storage: Dict[str, WorkflowRecord] = {}

    async def save(self, record: WorkflowRecord) -> None:
        """Save a workflow, keeping its original creation time on update."""
        stored = copy.deepcopy(record)
        existing = self._storage.get(record.id)
        if existing is not None:
            stored.created_at = existing.created_at
            stored.updated_at = _now()
        self._storage[record.id] = stored

    async def load(self, workflow_id: str) -> Optional[WorkflowRecord]:
        # Return a copy to avoid external mutations
        record = self._storage.get(workflow_id)
        return copy.deepcopy(record) if record is not None else None

    async def delete(self, workflow_id: str) -> None:
        self._storage.pop(workflow_id, None)

    async def exists(self, workflow_id: str) -> bool:
        return workflow_id in self._storage

    async def list_workflows(self) -> List[WorkflowRecord]:
        records = sorted(self._storage.values(), key=lambda r: r.created_at, reverse=True)
        return [copy.deepcopy(record) for record in records]

    def clear_all(self) -> None:
        """Clear all stored workflows.

        Useful for testing and cleanup.
        """
        self._storage.clear()

    def __repr__(self) -> str:
        return f"MemoryWorkflowStore(workflows={len(self._storage)})"
