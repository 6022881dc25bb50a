"""Programmatic graph builders."""

from flowrun.builders.workflow import WorkflowBuilder

__all__ = ["WorkflowBuilder"]
