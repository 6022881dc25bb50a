"""Delay node handler.

Suspends the current branch for a number of seconds of wall-clock time.
"""

import asyncio
from typing import Any, Dict, Union

from flowrun.core.graph import NodeType
from flowrun.core.state import Credentials
from flowrun.nodes.base import NodeHandler
from flowrun.utils.interpolation import to_display_string

DEFAULT_SECONDS = 1


def delay_seconds(config: Dict[str, Any]) -> Union[int, float]:
    """Configured delay, falling back to the default when unset or invalid."""
    raw = config.get("seconds")
    if raw is None or raw == "":
        return DEFAULT_SECONDS
    try:
        seconds = float(raw)
    except (TypeError, ValueError):
        return DEFAULT_SECONDS
    if seconds < 0 or seconds != seconds:
        return DEFAULT_SECONDS
    return int(seconds) if seconds.is_integer() else seconds


class DelayHandler(NodeHandler):
    """Wait before continuing to successor nodes."""

    node_type = NodeType.DELAY

    async def handle(
        self,
        config: Dict[str, Any],
        previous_output: Any,
        credentials: Credentials,
    ) -> Dict[str, Any]:
        seconds = delay_seconds(config)
        await asyncio.sleep(seconds)
        return {"delayed": seconds}

    def success_message(self, config: Dict[str, Any], output: Any) -> str:
        return f"Delayed for {to_display_string(output['delayed'])}s"
