"""Base node handler interface.

Every node type is served by exactly one handler. A handler receives the
node's config, the output of the node that led to it, and the run's
credentials, and returns an output that is passed opaquely to successors.
Handlers make a single attempt; there is no retry.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from flowrun.core.graph import NodeType
from flowrun.core.state import Credentials


class NodeHandler(ABC):
    """Base implementation shared by all node handlers.

    Subclasses set ``node_type`` and implement ``handle()``. Success
    messages default to ``success_text`` and can be overridden when they
    depend on the output.
    """

    node_type: NodeType
    success_text: str = "Completed"

    @abstractmethod
    async def handle(
        self,
        config: Dict[str, Any],
        previous_output: Any,
        credentials: Credentials,
    ) -> Any:
        """Run the step.

        Args:
            config: Node configuration
            previous_output: Output of the node that led here (None for triggers)
            credentials: Run credentials

        Returns:
            Output passed to successor nodes

        Raises:
            NodeHandlerError: If the step fails
        """
        pass

    def success_message(self, config: Dict[str, Any], output: Any) -> str:
        """Message recorded in the execution log after a successful run."""
        return self.success_text

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(node_type='{self.node_type.value}')"
