"""Workflow storage backends."""

from flowrun.backends.base import WorkflowStore, WorkflowRecord
from flowrun.backends.memory import MemoryWorkflowStore
from flowrun.backends.sqlite import SQLiteWorkflowStore

__all__ = [
    "WorkflowStore",
    "WorkflowRecord",
    "MemoryWorkflowStore",
    "SQLiteWorkflowStore",
]
