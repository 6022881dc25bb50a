"""AI generation node handlers.

Text generation, image generation and analysis all go through the remote
caller using the run's OpenAI key. Prompts support ``{{key}}`` placeholders
filled from the previous node's output.
"""

import json
import logging
from typing import Any, Dict

from flowrun.core.graph import NodeType
from flowrun.core.state import Credentials
from flowrun.nodes.base import NodeHandler
from flowrun.remote.transport import RemoteCaller
from flowrun.utils.errors import MissingCredential, RemoteCallFailed
from flowrun.utils.interpolation import interpolate, is_empty_value

logger = logging.getLogger(__name__)

DEFAULT_TEXT_MODEL = "gpt-3.5-turbo"
DEFAULT_IMAGE_SIZE = "1024x1024"


class AIHandler(NodeHandler):
    """Shared plumbing for handlers that call an OpenAI endpoint.

    Subclasses set ``endpoint`` and build the request payload in
    ``build_payload()``.
    """

    endpoint: str

    def __init__(self, remote: RemoteCaller):
        self.remote = remote

    def build_payload(self, config: Dict[str, Any], previous_output: Any) -> Dict[str, Any]:
        raise NotImplementedError

    async def handle(
        self,
        config: Dict[str, Any],
        previous_output: Any,
        credentials: Credentials,
    ) -> Any:
        if not credentials.openai_api_key:
            raise MissingCredential("openai_api_key", "OpenAI API key not configured")

        payload = {"apiKey": credentials.openai_api_key}
        payload.update(self.build_payload(config, previous_output))

        try:
            return await self.remote.call(self.endpoint, payload)
        except RemoteCallFailed as e:
            if e.status_code is None:
                raise
            raise RemoteCallFailed(
                f"OpenAI API error: {e.status_text or e}",
                status_code=e.status_code,
                status_text=e.status_text,
            ) from e


class AITextGenHandler(AIHandler):
    """Generate text from a prompt."""

    node_type = NodeType.AI_TEXT_GEN
    success_text = "Text generated"
    endpoint = "openai-text"

    def build_payload(self, config: Dict[str, Any], previous_output: Any) -> Dict[str, Any]:
        return {
            "prompt": interpolate(config.get("prompt") or "", previous_output),
            "model": config.get("model") or DEFAULT_TEXT_MODEL,
        }


class AIImageGenHandler(AIHandler):
    """Generate an image from a prompt."""

    node_type = NodeType.AI_IMAGE_GEN
    success_text = "Image generated"
    endpoint = "openai-image"

    def build_payload(self, config: Dict[str, Any], previous_output: Any) -> Dict[str, Any]:
        return {
            "prompt": interpolate(config.get("prompt") or "", previous_output),
            "size": config.get("size") or DEFAULT_IMAGE_SIZE,
        }


class AIAnalysisHandler(AIHandler):
    """Ask the model about the previous node's output.

    The serialized previous output is appended to the prompt as context.
    """

    node_type = NodeType.AI_ANALYSIS
    success_text = "Analysis completed"
    endpoint = "openai-text"

    def build_payload(self, config: Dict[str, Any], previous_output: Any) -> Dict[str, Any]:
        prompt = interpolate(config.get("prompt") or "", previous_output)
        context = json.dumps(
            {} if is_empty_value(previous_output) else previous_output,
            separators=(",", ":"),
            default=str,
        )
        return {
            "prompt": f"{prompt}\n\nContext: {context}",
            "model": config.get("model") or DEFAULT_TEXT_MODEL,
        }
