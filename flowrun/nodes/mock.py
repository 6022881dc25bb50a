"""Mocked integration handlers.

Notion, database and email steps acknowledge their input without any real
network or transport. They never fail.
"""

from typing import Any, Dict

from flowrun.core.graph import NodeType
from flowrun.core.state import Credentials
from flowrun.nodes.base import NodeHandler
from flowrun.utils.interpolation import interpolate

MOCKED = "mocked"


class NotionHandler(NodeHandler):
    node_type = NodeType.NOTION
    success_text = "Notion action completed"

    async def handle(
        self,
        config: Dict[str, Any],
        previous_output: Any,
        credentials: Credentials,
    ) -> Dict[str, Any]:
        return {
            "action": config.get("action"),
            "database": config.get("database"),
            "data": previous_output,
            "status": MOCKED,
            "message": "Notion integration (mock)",
        }


class DatabaseHandler(NodeHandler):
    node_type = NodeType.DATABASE
    success_text = "Database action completed"

    async def handle(
        self,
        config: Dict[str, Any],
        previous_output: Any,
        credentials: Credentials,
    ) -> Dict[str, Any]:
        return {
            "action": config.get("action"),
            "table": config.get("table"),
            "data": previous_output,
            "status": MOCKED,
            "message": "Database operation (mock)",
        }


class SendEmailHandler(NodeHandler):
    """Render an email from the previous output without sending it."""

    node_type = NodeType.SEND_EMAIL
    success_text = "Email sent"

    async def handle(
        self,
        config: Dict[str, Any],
        previous_output: Any,
        credentials: Credentials,
    ) -> Dict[str, Any]:
        return {
            "to": interpolate(config.get("to") or "", previous_output),
            "subject": interpolate(config.get("subject") or "", previous_output),
            "body": interpolate(config.get("body") or "", previous_output),
            "status": MOCKED,
            "message": "Email sent (mock)",
        }
