"""Parsers for editor graph formats."""

from flowrun.parsers.react_flow import ReactFlowParser

__all__ = ["ReactFlowParser"]
