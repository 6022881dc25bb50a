"""Tests for the handler registry."""

import pytest

from flowrun import HandlerRegistry, NodeType, UnknownNodeType
from flowrun.nodes import NotionHandler, TriggerHandler


def test_default_registry_covers_every_node_type(remote):
    registry = HandlerRegistry.default(remote)

    assert registry.missing_node_types() == []
    assert sorted(registry.list_node_types()) == sorted(t.value for t in NodeType)
    registry.validate()


def test_get_by_enum_or_wire_string(registry):
    assert registry.get(NodeType.TRIGGER) is registry.get("trigger")
    assert registry.has("apiCall")
    assert not registry.has("webhook")


def test_get_unknown_type_raises(registry):
    with pytest.raises(UnknownNodeType, match="Unknown node type: webhook") as exc_info:
        registry.get("webhook")

    assert exc_info.value.node_type == "webhook"


def test_get_unregistered_type_raises():
    registry = HandlerRegistry()
    registry.register(TriggerHandler())

    with pytest.raises(UnknownNodeType, match="Available types: trigger"):
        registry.get(NodeType.NOTION)


def test_register_replaces_existing(registry):
    replacement = NotionHandler()

    registry.register(replacement)

    assert registry.get(NodeType.NOTION) is replacement


def test_validate_names_missing_types():
    registry = HandlerRegistry()
    registry.register(TriggerHandler())

    with pytest.raises(UnknownNodeType) as exc_info:
        registry.validate()

    assert "aiTextGen" in str(exc_info.value)
    assert "trigger" not in exc_info.value.node_type
