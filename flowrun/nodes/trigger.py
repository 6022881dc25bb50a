"""Trigger node handler.

The trigger is the entry point of a workflow. It takes no input and emits a
marker with the time the run started.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from flowrun.core.graph import NodeType
from flowrun.core.state import Credentials
from flowrun.nodes.base import NodeHandler


class TriggerHandler(NodeHandler):
    """Start a workflow run."""

    node_type = NodeType.TRIGGER
    success_text = "Workflow triggered"

    async def handle(
        self,
        config: Dict[str, Any],
        previous_output: Any,
        credentials: Credentials,
    ) -> Dict[str, Any]:
        timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
        return {"triggered": True, "timestamp": timestamp.replace("+00:00", "Z")}
