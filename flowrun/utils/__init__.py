"""Utility functions and helpers."""

from flowrun.utils.interpolation import interpolate
from flowrun.utils.config import load_env, get_openai_api_key, ensure_api_key
from flowrun.utils.errors import (
    WorkflowError,
    GraphValidationError,
    NoTriggerFound,
    UnknownNodeType,
    NodeHandlerError,
    MissingCredential,
    RemoteCallFailed,
    InvalidNodeConfig,
)

__all__ = [
    "interpolate",
    "load_env",
    "get_openai_api_key",
    "ensure_api_key",
    "WorkflowError",
    "GraphValidationError",
    "NoTriggerFound",
    "UnknownNodeType",
    "NodeHandlerError",
    "MissingCredential",
    "RemoteCallFailed",
    "InvalidNodeConfig",
]
