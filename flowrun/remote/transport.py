"""Network egress for node handlers.

Handlers never talk to the network directly. They go through a
``RemoteCaller``, which takes an endpoint and a payload and returns parsed
JSON or raises ``RemoteCallFailed`` with a human-readable message.

Endpoints are either absolute URLs, requested as-is, or bare function names
such as ``"openai-text"`` that resolve against the hosted functions base URL.
"""

import json
import logging
from typing import Any, Dict, Optional, Protocol, runtime_checkable

import httpx

from flowrun.utils.config import (
    get_functions_anon_key,
    get_functions_url,
    get_request_timeout,
)
from flowrun.utils.errors import RemoteCallFailed

logger = logging.getLogger(__name__)


@runtime_checkable
class RemoteCaller(Protocol):
    """Protocol for the single network capability used by handlers."""

    async def call(
        self,
        endpoint: str,
        payload: Any = None,
        *,
        method: str = "POST",
        headers: Optional[Dict[str, str]] = None,
        check_status: bool = True,
    ) -> Any:
        """Perform one request and return the parsed JSON response.

        Args:
            endpoint: Absolute URL or hosted function name
            payload: JSON-serializable body, omitted when None
            method: HTTP method
            headers: Extra request headers
            check_status: Raise on non-2xx responses

        Returns:
            Parsed JSON value

        Raises:
            RemoteCallFailed: If the request fails or the body is not JSON
        """
        ...


def is_absolute_url(endpoint: str) -> bool:
    return endpoint.strip().lower().startswith(("http://", "https://"))


class HttpRemoteCaller:
    """RemoteCaller backed by httpx.

    Example:
        >>> remote = HttpRemoteCaller(functions_url="https://xyz.functions.example")
        >>> data = await remote.call("openai-text", {"apiKey": "...", "prompt": "Hi"})
    """

    FUNCTIONS_PATH = "/functions/v1/"

    def __init__(
        self,
        functions_url: Optional[str] = None,
        anon_key: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the caller.

        Args:
            functions_url: Base URL for hosted functions (env: FLOWRUN_FUNCTIONS_URL)
            anon_key: Bearer token for hosted functions (env: FLOWRUN_FUNCTIONS_ANON_KEY)
            timeout: Request timeout in seconds (env: FLOWRUN_REQUEST_TIMEOUT)
            transport: Optional httpx transport, used to stub the network in tests
        """
        self.functions_url = (functions_url or get_functions_url() or "").rstrip("/")
        self.anon_key = anon_key if anon_key is not None else get_functions_anon_key()
        self.timeout = timeout if timeout is not None else get_request_timeout()
        self.transport = transport

    def resolve(self, endpoint: str) -> str:
        """Resolve an endpoint to the URL that will be requested.

        Raises:
            RemoteCallFailed: If a function name is used without a functions URL
        """
        if is_absolute_url(endpoint):
            return endpoint.strip()
        if not self.functions_url:
            raise RemoteCallFailed(
                f"Cannot call '{endpoint}': functions URL is not configured. "
                "Set FLOWRUN_FUNCTIONS_URL."
            )
        return self.functions_url + self.FUNCTIONS_PATH + endpoint.lstrip("/")

    def _build_headers(self, endpoint: str, headers: Optional[Dict[str, str]]) -> Dict[str, str]:
        built: Dict[str, str] = {}
        if not is_absolute_url(endpoint):
            built["Content-Type"] = "application/json"
            if self.anon_key:
                built["Authorization"] = f"Bearer {self.anon_key}"
        if headers:
            built.update({str(k): str(v) for k, v in headers.items()})
        return built

    async def call(
        self,
        endpoint: str,
        payload: Any = None,
        *,
        method: str = "POST",
        headers: Optional[Dict[str, str]] = None,
        check_status: bool = True,
    ) -> Any:
        url = self.resolve(endpoint)
        method = method.upper()
        content = json.dumps(payload, default=str) if payload is not None else None

        logger.debug("Remote %s %s", method, url)

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.request(
                    method=method,
                    url=url,
                    headers=self._build_headers(endpoint, headers),
                    content=content,
                )
        except httpx.TimeoutException as e:
            raise RemoteCallFailed(
                f"Request timed out after {self.timeout} seconds. URL: {url}"
            ) from e
        except httpx.HTTPError as e:
            raise RemoteCallFailed(f"Request failed: {e}. URL: {url}") from e

        if check_status and not response.is_success:
            status_text = response.reason_phrase or str(response.status_code)
            raise RemoteCallFailed(
                status_text,
                status_code=response.status_code,
                status_text=status_text,
            )

        try:
            return response.json()
        except (json.JSONDecodeError, ValueError) as e:
            raise RemoteCallFailed(f"Invalid JSON response from {url}: {e}") from e

    def __repr__(self) -> str:
        return f"HttpRemoteCaller(functions_url='{self.functions_url}')"
