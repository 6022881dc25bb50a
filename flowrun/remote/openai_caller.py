"""RemoteCaller that serves the AI endpoints with the OpenAI SDK.

The hosted ``openai-text`` and ``openai-image`` functions are thin proxies
around OpenAI. This caller performs the same work in-process, so a workflow
can run without the hosted functions. Any other endpoint is passed on to
plain HTTP.
"""

import logging
from typing import Any, Callable, Dict, Optional

from flowrun.remote.transport import HttpRemoteCaller
from flowrun.utils.errors import RemoteCallFailed

logger = logging.getLogger(__name__)

TEXT_ENDPOINT = "openai-text"
IMAGE_ENDPOINT = "openai-image"


def _default_client_factory(api_key: str):
    from openai import AsyncOpenAI

    return AsyncOpenAI(api_key=api_key)


class OpenAIRemoteCaller(HttpRemoteCaller):
    """Serve AI endpoints directly against OpenAI.

    Responses:
        openai-text:  {"text": <completion>, "model": <model>}
        openai-image: {"imageUrl": <url>, "prompt": <prompt>, "size": <size>}

    Example:
        >>> remote = OpenAIRemoteCaller()
        >>> engine = WorkflowEngine(remote=remote)
    """

    def __init__(
        self,
        client_factory: Optional[Callable[[str], Any]] = None,
        **kwargs,
    ):
        """Initialize the caller.

        Args:
            client_factory: Builds an AsyncOpenAI-compatible client from an API key
            **kwargs: Passed to HttpRemoteCaller for non-AI endpoints
        """
        super().__init__(**kwargs)
        self.client_factory = client_factory or _default_client_factory

    async def call(
        self,
        endpoint: str,
        payload: Any = None,
        *,
        method: str = "POST",
        headers: Optional[Dict[str, str]] = None,
        check_status: bool = True,
    ) -> Any:
        name = endpoint.strip("/")
        if name not in (TEXT_ENDPOINT, IMAGE_ENDPOINT):
            return await super().call(
                endpoint,
                payload,
                method=method,
                headers=headers,
                check_status=check_status,
            )

        payload = payload or {}
        api_key = payload.get("apiKey")
        prompt = payload.get("prompt")
        if not api_key:
            raise RemoteCallFailed("API key is required", status_code=400, status_text="API key is required")
        if not prompt:
            raise RemoteCallFailed("Prompt is required", status_code=400, status_text="Prompt is required")

        from openai import APIError

        client = self.client_factory(api_key)
        try:
            if name == TEXT_ENDPOINT:
                return await self._generate_text(client, prompt, payload.get("model") or "gpt-3.5-turbo")
            return await self._generate_image(client, prompt, payload.get("size") or "1024x1024")
        except APIError as e:
            status_code = getattr(e, "status_code", None)
            raise RemoteCallFailed(str(e), status_code=status_code, status_text=str(e)) from e

    async def _generate_text(self, client: Any, prompt: str, model: str) -> Dict[str, Any]:
        logger.debug("OpenAI completion with model %s", model)
        completion = await client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": prompt}],
        )
        text = ""
        if completion.choices:
            text = completion.choices[0].message.content or ""
        return {"text": text, "model": model}

    async def _generate_image(self, client: Any, prompt: str, size: str) -> Dict[str, Any]:
        logger.debug("OpenAI image generation at size %s", size)
        response = await client.images.generate(prompt=prompt, n=1, size=size)
        image_url = ""
        if response.data:
            image_url = response.data[0].url or ""
        return {"imageUrl": image_url, "prompt": prompt, "size": size}

    def __repr__(self) -> str:
        return "OpenAIRemoteCaller()"
