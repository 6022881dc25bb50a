"""Core execution engine components."""

from flowrun.core.graph import NodeType, GraphNode, GraphEdge, WorkflowGraph
from flowrun.core.state import Credentials
from flowrun.core.log import LogStatus, ExecutionLogEntry, ExecutionLog
from flowrun.core.engine import WorkflowEngine, VisitItem

__all__ = [
    "NodeType",
    "GraphNode",
    "GraphEdge",
    "WorkflowGraph",
    "Credentials",
    "LogStatus",
    "ExecutionLogEntry",
    "ExecutionLog",
    "WorkflowEngine",
    "VisitItem",
]
