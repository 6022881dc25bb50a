"""Pytest configuration and fixtures for flowrun tests."""

from typing import Any, Dict, List, Optional

import pytest

from flowrun import Credentials, HandlerRegistry, WorkflowEngine
from flowrun.core.log import ExecutionLogEntry
from flowrun.utils.errors import RemoteCallFailed


class FakeRemote:
    """RemoteCaller stand-in that records calls and returns canned responses."""

    def __init__(self, responses: Optional[Dict[str, Any]] = None, fail_with: Optional[Exception] = None):
        self.responses = responses or {}
        self.fail_with = fail_with
        self.calls: List[Dict[str, Any]] = []

    async def call(self, endpoint, payload=None, *, method="POST", headers=None, check_status=True):
        self.calls.append(
            {
                "endpoint": endpoint,
                "payload": payload,
                "method": method,
                "headers": headers,
                "check_status": check_status,
            }
        )
        if self.fail_with is not None:
            raise self.fail_with
        if endpoint not in self.responses:
            raise RemoteCallFailed(f"No canned response for {endpoint}")
        return self.responses[endpoint]


class LogRecorder:
    """on_log listener that keeps every snapshot it receives."""

    def __init__(self):
        self.snapshots: List[List[ExecutionLogEntry]] = []

    def __call__(self, entries: List[ExecutionLogEntry]) -> None:
        self.snapshots.append(entries)

    @property
    def latest(self) -> List[ExecutionLogEntry]:
        return self.snapshots[-1] if self.snapshots else []


@pytest.fixture
def make_remote():
    """Factory for fake remote callers."""
    return FakeRemote


@pytest.fixture
def remote():
    """Fake remote caller with AI and API responses."""
    return FakeRemote(
        responses={
            "openai-text": {"text": "generated", "model": "gpt-3.5-turbo"},
            "openai-image": {"imageUrl": "https://img.example/1.png", "prompt": "p", "size": "1024x1024"},
            "https://api.example.com/status": {"status": "ok", "count": 3},
        }
    )


@pytest.fixture
def registry(remote):
    """Default handler registry wired to the fake remote."""
    return HandlerRegistry.default(remote)


@pytest.fixture
def engine(registry):
    """Engine with deterministic log entry ids."""
    counter = iter(range(1, 10_000))
    return WorkflowEngine(registry=registry, id_factory=lambda node_id: f"{node_id}-{next(counter)}")


@pytest.fixture
def credentials():
    return Credentials(openai_api_key="sk-test")


@pytest.fixture
def recorder():
    return LogRecorder()
