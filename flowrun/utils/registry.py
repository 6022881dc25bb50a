"""Handler registry for node dispatch.

This module maps every node type to the handler that runs it. The engine
looks handlers up here by ``node.type``.
"""

from typing import Dict, List, Optional, Union

from flowrun.core.graph import NodeType
from flowrun.nodes.base import NodeHandler
from flowrun.remote.transport import HttpRemoteCaller, RemoteCaller
from flowrun.utils.errors import UnknownNodeType


class HandlerRegistry:
    """Registry of node handlers keyed by node type.

    The registry allows you to:
    - Build the default set of handlers around a remote caller
    - Replace a handler for one node type (for tests or custom behavior)
    - Check that every node type is covered

    Example:
        >>> registry = HandlerRegistry.default(OpenAIRemoteCaller())
        >>> registry.register(MyNotionHandler())
        >>> handler = registry.get(NodeType.NOTION)
    """

    def __init__(self):
        """Initialize empty registry."""
        self._handlers: Dict[NodeType, NodeHandler] = {}

    @classmethod
    def default(cls, remote: Optional[RemoteCaller] = None) -> "HandlerRegistry":
        """Create a registry with the built-in handler for every node type.

        Args:
            remote: Network capability used by AI and API call handlers
                (defaults to HttpRemoteCaller configured from the environment)

        Returns:
            Validated HandlerRegistry
        """
        from flowrun.nodes.ai import AIAnalysisHandler, AIImageGenHandler, AITextGenHandler
        from flowrun.nodes.api_call import ApiCallHandler
        from flowrun.nodes.condition import ConditionHandler
        from flowrun.nodes.delay import DelayHandler
        from flowrun.nodes.mock import DatabaseHandler, NotionHandler, SendEmailHandler
        from flowrun.nodes.trigger import TriggerHandler

        remote = remote or HttpRemoteCaller()
        registry = cls()
        for handler in (
            TriggerHandler(),
            AITextGenHandler(remote),
            AIImageGenHandler(remote),
            AIAnalysisHandler(remote),
            NotionHandler(),
            DatabaseHandler(),
            SendEmailHandler(),
            ApiCallHandler(remote),
            ConditionHandler(),
            DelayHandler(),
        ):
            registry.register(handler)
        registry.validate()
        return registry

    def register(self, handler: NodeHandler) -> None:
        """Register a handler, replacing any existing one for its type.

        Args:
            handler: Handler instance with ``node_type`` set
        """
        self._handlers[NodeType(handler.node_type)] = handler

    def get(self, node_type: Union[NodeType, str]) -> NodeHandler:
        """Get the handler for a node type.

        Args:
            node_type: Node type or its wire string

        Returns:
            Handler instance

        Raises:
            UnknownNodeType: If no handler covers the type
        """
        try:
            key = NodeType(node_type)
        except ValueError:
            raise UnknownNodeType(str(node_type), self.list_node_types()) from None
        if key not in self._handlers:
            raise UnknownNodeType(key.value, self.list_node_types())
        return self._handlers[key]

    def has(self, node_type: Union[NodeType, str]) -> bool:
        """Check if a handler is registered for a node type."""
        try:
            return NodeType(node_type) in self._handlers
        except ValueError:
            return False

    def list_node_types(self) -> List[str]:
        """List all covered node types."""
        return [node_type.value for node_type in self._handlers]

    def missing_node_types(self) -> List[str]:
        """List node types without a handler."""
        return [t.value for t in NodeType if t not in self._handlers]

    def validate(self) -> None:
        """Check that every node type has a handler.

        Raises:
            UnknownNodeType: Naming the uncovered types
        """
        missing = self.missing_node_types()
        if missing:
            raise UnknownNodeType(", ".join(missing), self.list_node_types())

    def __repr__(self) -> str:
        return f"HandlerRegistry(handlers={len(self._handlers)})"
