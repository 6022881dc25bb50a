"""Stack-based workflow engine.

This module implements the traversal that runs a workflow graph once:
every trigger starts a depth-first walk, each node is dispatched to the
handler for its type, and each node's output becomes the input of the nodes
its edges point to.

Execution is strictly sequential. A node's whole subtree finishes before its
next sibling starts, and each trigger's tree finishes before the next
trigger starts. The first handler failure aborts the run.
"""

import copy
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, List, Mapping, Optional, Union

from flowrun.core.graph import GraphNode, WorkflowGraph
from flowrun.core.log import ExecutionLog, ExecutionLogEntry, IdFactory, LogListener, LogStatus
from flowrun.core.state import Credentials
from flowrun.remote.transport import RemoteCaller
from flowrun.utils.errors import NoTriggerFound, WorkflowError

if TYPE_CHECKING:
    from flowrun.utils.registry import HandlerRegistry

logger = logging.getLogger(__name__)

SYSTEM_NODE_ID = "system"
SYSTEM_NODE_LABEL = "System"


@dataclass
class VisitItem:
    """Item on the work stack.

    Attributes:
        node: Node to run
        previous_output: Output of the node whose edge led here (None for triggers)
    """

    node: GraphNode
    previous_output: Any = None


class WorkflowEngine:
    """Run workflow graphs and record an execution log.

    The engine walks the graph with an explicit LIFO stack of ``VisitItem``
    entries. Successors are pushed in reverse edge order so they pop in edge
    order, which gives the same depth-first, left-to-right order as a
    recursive walk without the recursion limit.

    Key behaviors:
    - Triggers run in node order, each seeded with no input
    - A node reached along two paths runs once per path; inputs are never merged
    - Condition results do not prune successors
    - Cycles are not detected unless ``max_visits`` is set

    One engine instance runs one workflow at a time; the log is reset at the
    start of every ``execute()`` call.

    Example:
        >>> engine = WorkflowEngine(remote=OpenAIRemoteCaller())
        >>> await engine.execute(
        ...     {"nodes": nodes, "edges": edges},
        ...     Credentials(openai_api_key="sk-..."),
        ...     on_log=lambda entries: render(entries),
        ... )
    """

    def __init__(
        self,
        registry: Optional["HandlerRegistry"] = None,
        remote: Optional[RemoteCaller] = None,
        id_factory: Optional[IdFactory] = None,
        max_visits: Optional[int] = None,
    ):
        """Initialize engine.

        Args:
            registry: Handler registry (defaults to the built-in handlers)
            remote: Remote caller for the default registry; ignored when
                ``registry`` is given
            id_factory: Produces log entry ids from node ids
            max_visits: Optional safety limit on node visits per run
        """
        if registry is None:
            from flowrun.utils.registry import HandlerRegistry

            registry = HandlerRegistry.default(remote)
        self.registry = registry
        self.log = ExecutionLog(id_factory)
        self.max_visits = max_visits

    @property
    def logs(self) -> List[ExecutionLogEntry]:
        """Entries recorded by the current or most recent run."""
        return self.log.entries

    async def execute(
        self,
        graph: Union[WorkflowGraph, Mapping[str, Any]],
        credentials: Union[Credentials, Mapping[str, Any], None] = None,
        on_log: Optional[LogListener] = None,
    ) -> None:
        """Run every trigger tree of the graph.

        Args:
            graph: WorkflowGraph or ``{"nodes", "edges"}`` mapping; copied
                at call time
            credentials: Credentials or mapping; never mutated
            on_log: Called with the full log after every append

        Raises:
            GraphValidationError: If the graph is malformed; logged as a
                ``system`` error entry
            UnknownNodeType: If a node type is outside NodeType; logged the
                same way
            NoTriggerFound: If no node has type ``trigger``
            NodeHandlerError: Re-raised from the first failing handler
            WorkflowError: If ``max_visits`` is exceeded
        """
        self.log.reset()
        if on_log is not None:
            self.log.subscribe(on_log)

        try:
            try:
                snapshot = self._snapshot(graph)
            except WorkflowError as e:
                self.log.append(SYSTEM_NODE_ID, SYSTEM_NODE_LABEL, LogStatus.ERROR, f"Error: {e}")
                raise
            await self._run(snapshot, Credentials.coerce(credentials))
        finally:
            if on_log is not None:
                self.log.unsubscribe(on_log)

    async def _run(self, graph: WorkflowGraph, credentials: Credentials) -> None:
        triggers = graph.triggers()
        if not triggers:
            self.log.append(
                SYSTEM_NODE_ID,
                SYSTEM_NODE_LABEL,
                LogStatus.ERROR,
                "No trigger node found",
            )
            raise NoTriggerFound()

        logger.info(
            "Starting workflow run: %d nodes, %d edges, %d triggers",
            len(graph.nodes),
            len(graph.edges),
            len(triggers),
        )

        stack: List[VisitItem] = [VisitItem(node=node) for node in reversed(triggers)]
        visits = 0

        while stack:
            current = stack.pop()

            visits += 1
            if self.max_visits is not None and visits > self.max_visits:
                raise WorkflowError(
                    f"Execution exceeded maximum node visits ({self.max_visits})"
                )

            output = await self._visit(current, credentials)

            successors = graph.get_successors(current.node.id)
            stack.extend(
                VisitItem(node=child, previous_output=output)
                for child in reversed(successors)
            )

        logger.info("Workflow run finished after %d node visits", visits)

    async def _visit(self, item: VisitItem, credentials: Credentials) -> Any:
        """Run one node, recording running and success or error entries.

        Handler failures are logged and re-raised unchanged.
        """
        node = item.node
        self.log.append(node.id, node.label, LogStatus.RUNNING, f"Executing {node.label}...")

        try:
            handler = self.registry.get(node.type)
            logger.debug("Dispatching node %s (%s) to %r", node.id, node.type.value, handler)
            config = copy.deepcopy(node.config)
            output = await handler.handle(config, item.previous_output, credentials)
            message = handler.success_message(config, output)
        except Exception as e:
            self.log.append(node.id, node.label, LogStatus.ERROR, f"Error: {e}")
            logger.info("Node %s failed: %s", node.id, e)
            raise

        self.log.append(node.id, node.label, LogStatus.SUCCESS, message, output)
        return output

    @staticmethod
    def _snapshot(graph: Union[WorkflowGraph, Mapping[str, Any]]) -> WorkflowGraph:
        if isinstance(graph, WorkflowGraph):
            return WorkflowGraph.from_nodes_and_edges(graph.nodes, graph.edges)
        return WorkflowGraph.from_dict(graph)

    def __repr__(self) -> str:
        return f"WorkflowEngine(registry={self.registry!r})"
