"""Execution log for workflow runs.

The log is an append-only list of node lifecycle entries. After every
append each listener receives the entire accumulated list rather than the
new entry alone, so an observer can replace its view wholesale instead of
reconciling diffs.
"""

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)


class LogStatus(str, Enum):
    """Lifecycle status of a log entry."""

    RUNNING = "running"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class ExecutionLogEntry:
    """One entry in the execution log.

    A node normally produces two entries: ``running`` and then ``success``
    or ``error``. A run that finds no trigger produces a single entry with
    ``node_id="system"``.
    """

    id: str
    node_id: str
    node_label: str
    status: LogStatus
    message: str
    output: Optional[Any] = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        """Convert entry to the camelCase shape the editor renders."""
        payload = {
            "id": self.id,
            "nodeId": self.node_id,
            "nodeLabel": self.node_label,
            "timestamp": self.timestamp.isoformat(),
            "status": self.status.value,
            "message": self.message,
        }
        if self.output is not None:
            payload["output"] = self.output
        return payload


LogListener = Callable[[List[ExecutionLogEntry]], None]
IdFactory = Callable[[str], str]


def default_entry_id(node_id: str) -> str:
    return f"{node_id}-{uuid.uuid4().hex}"


class ExecutionLog:
    """Append-only log with full-snapshot listeners.

    Example:
        >>> log = ExecutionLog()
        >>> log.subscribe(lambda entries: print(len(entries)))
        >>> entry = log.append("n1", "Trigger", LogStatus.RUNNING, "Executing Trigger...")
        1
    """

    def __init__(self, id_factory: Optional[IdFactory] = None):
        """Initialize an empty log.

        Args:
            id_factory: Callable producing a unique entry id from a node id
        """
        self._entries: List[ExecutionLogEntry] = []
        self._listeners: List[LogListener] = []
        self._id_factory = id_factory or default_entry_id

    @property
    def entries(self) -> List[ExecutionLogEntry]:
        return list(self._entries)

    def subscribe(self, listener: LogListener) -> None:
        """Register a listener called with the full log after each append."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: LogListener) -> None:
        """Remove a listener."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def reset(self) -> None:
        """Drop all entries. Listeners stay registered."""
        self._entries = []

    def append(
        self,
        node_id: str,
        node_label: str,
        status: LogStatus,
        message: str,
        output: Any = None,
    ) -> ExecutionLogEntry:
        """Append an entry and publish the full log to every listener.

        Args:
            node_id: Node the entry belongs to
            node_label: Node display name
            status: Lifecycle status
            message: Human-readable message
            output: Handler output, for success entries

        Returns:
            The appended entry
        """
        entry = ExecutionLogEntry(
            id=self._id_factory(node_id),
            node_id=node_id,
            node_label=node_label,
            status=status,
            message=message,
            output=output,
        )
        self._entries.append(entry)

        for listener in list(self._listeners):
            try:
                listener(list(self._entries))
            except Exception as e:
                # Listener failures are logged, not raised
                logger.warning("Error in log listener %r: %s", listener, e)

        return entry

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ExecutionLog(entries={len(self._entries)}, listeners={len(self._listeners)})"
