"""Custom error classes for flowrun."""

from typing import Iterable, Optional


class WorkflowError(Exception):
    """Base exception for all flowrun errors."""

    pass


class GraphValidationError(WorkflowError):
    """Raised when a workflow graph cannot be constructed."""

    pass


class NoTriggerFound(WorkflowError):
    """Raised when a run is started on a graph without trigger nodes."""

    def __init__(self, message: str = "No trigger node found"):
        super().__init__(message)


class UnknownNodeType(WorkflowError):
    """Raised when a node type has no handler or is outside the node type enum."""

    def __init__(self, node_type: str, available: Optional[Iterable[str]] = None):
        self.node_type = node_type
        message = f"Unknown node type: {node_type}"
        if available:
            message += f". Available types: {', '.join(available)}"
        super().__init__(message)


class NodeHandlerError(WorkflowError):
    """Base class for failures raised by node handlers."""

    pass


class MissingCredential(NodeHandlerError):
    """Raised when a handler needs a credential that was not supplied."""

    def __init__(self, credential: str, message: str):
        self.credential = credential
        super().__init__(message)


class RemoteCallFailed(NodeHandlerError):
    """Raised when a remote call fails or reports non-success."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        status_text: Optional[str] = None,
    ):
        self.status_code = status_code
        self.status_text = status_text
        super().__init__(message)


class InvalidNodeConfig(NodeHandlerError):
    """Raised when a node's config is missing a required value."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)
