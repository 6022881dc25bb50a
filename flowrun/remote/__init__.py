"""Network egress used by node handlers."""

from flowrun.remote.transport import RemoteCaller, HttpRemoteCaller
from flowrun.remote.openai_caller import OpenAIRemoteCaller

__all__ = [
    "RemoteCaller",
    "HttpRemoteCaller",
    "OpenAIRemoteCaller",
]
