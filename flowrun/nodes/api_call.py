"""API call node handler.

Makes one HTTP request to a user-supplied URL and returns the parsed JSON
response. The URL supports ``{{key}}`` placeholders filled from the previous
node's output; for methods other than GET the previous output is sent as the
JSON body.

Output is the response body as-is, so successors can reference its keys
directly.
"""

import logging
from typing import Any, Dict

from flowrun.core.graph import NodeType
from flowrun.core.state import Credentials
from flowrun.nodes.base import NodeHandler
from flowrun.remote.transport import RemoteCaller, is_absolute_url
from flowrun.utils.errors import InvalidNodeConfig
from flowrun.utils.interpolation import interpolate

logger = logging.getLogger(__name__)


class ApiCallHandler(NodeHandler):
    """Call an external HTTP API.

    Config:
        url: Request URL (required, supports {{variables}})
        method: HTTP method (default GET)
        headers: Request headers

    Example:
        >>> handler = ApiCallHandler(HttpRemoteCaller())
        >>> await handler.handle(
        ...     {"url": "https://api.example.com/users/{{user_id}}"},
        ...     {"user_id": 7},
        ...     Credentials(),
        ... )
    """

    node_type = NodeType.API_CALL
    success_text = "API call completed"

    def __init__(self, remote: RemoteCaller):
        self.remote = remote

    async def handle(
        self,
        config: Dict[str, Any],
        previous_output: Any,
        credentials: Credentials,
    ) -> Any:
        url = interpolate(config.get("url") or "", previous_output).strip()
        method = str(config.get("method") or "GET").upper()

        if not url:
            raise InvalidNodeConfig("url", "API URL is required")
        if not is_absolute_url(url):
            raise InvalidNodeConfig("url", f"API URL must start with http:// or https://: {url}")

        body = previous_output if method != "GET" else None
        logger.debug("API call %s %s", method, url)

        # Response status is not checked; the body is returned whatever it is
        return await self.remote.call(
            url,
            body,
            method=method,
            headers=config.get("headers") or {},
            check_status=False,
        )
