"""
flowrun: Visual workflow execution engine

Runs a directed graph of typed steps (triggers, AI generation calls,
conditions, delays, external API calls) once, passing each step's output to
the steps its edges point to and recording a timestamped execution log.

Example:
    >>> from flowrun import WorkflowBuilder, WorkflowEngine, Credentials, NodeType
    >>> from flowrun.remote import OpenAIRemoteCaller
    >>>
    >>> builder = WorkflowBuilder()
    >>> trigger = builder.add_node(NodeType.TRIGGER)
    >>> summary = builder.add_node(NodeType.AI_TEXT_GEN, config={"prompt": "Write a haiku"})
    >>> builder.connect(trigger, summary)
    >>>
    >>> engine = WorkflowEngine(remote=OpenAIRemoteCaller())
    >>> await engine.execute(
    ...     builder.build(),
    ...     Credentials.from_env(),
    ...     on_log=lambda entries: print(entries[-1].message),
    ... )
"""

import logging

__version__ = "0.1.0"

# Core components
from flowrun.core.graph import NodeType, GraphNode, GraphEdge, WorkflowGraph
from flowrun.core.state import Credentials
from flowrun.core.log import LogStatus, ExecutionLogEntry, ExecutionLog
from flowrun.core.engine import WorkflowEngine, VisitItem

# Handlers
from flowrun.nodes.base import NodeHandler
from flowrun.nodes.catalog import NODE_CATALOG, NodeTypeSpec
from flowrun.utils.registry import HandlerRegistry

# Network
from flowrun.remote.transport import RemoteCaller, HttpRemoteCaller
from flowrun.remote.openai_caller import OpenAIRemoteCaller

# Builders and parsers
from flowrun.builders.workflow import WorkflowBuilder
from flowrun.parsers.react_flow import ReactFlowParser

# Storage
from flowrun.backends.base import WorkflowStore, WorkflowRecord
from flowrun.backends.memory import MemoryWorkflowStore
from flowrun.backends.sqlite import SQLiteWorkflowStore

# Utilities
from flowrun.utils.interpolation import interpolate
from flowrun.utils.errors import (
    WorkflowError,
    GraphValidationError,
    NoTriggerFound,
    UnknownNodeType,
    NodeHandlerError,
    MissingCredential,
    RemoteCallFailed,
    InvalidNodeConfig,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Core
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
    # Handlers
    "NodeHandler",
    "NODE_CATALOG",
    "NodeTypeSpec",
    "HandlerRegistry",
    # Network
    "RemoteCaller",
    "HttpRemoteCaller",
    "OpenAIRemoteCaller",
    # Builders and parsers
    "WorkflowBuilder",
    "ReactFlowParser",
    # Storage
    "WorkflowStore",
    "WorkflowRecord",
    "MemoryWorkflowStore",
    "SQLiteWorkflowStore",
    # Utilities
    "interpolate",
    "WorkflowError",
    "GraphValidationError",
    "NoTriggerFound",
    "UnknownNodeType",
    "NodeHandlerError",
    "MissingCredential",
    "RemoteCallFailed",
    "InvalidNodeConfig",
]
