"""Tests for graph data structures."""

import pytest

from flowrun.core.graph import GraphEdge, GraphNode, NodeType, WorkflowGraph
from flowrun.utils.errors import GraphValidationError, UnknownNodeType


def test_create_simple_graph():
    """Test creating a simple graph."""
    nodes = [
        GraphNode(id="start", type=NodeType.TRIGGER),
        GraphNode(id="end", type=NodeType.NOTION),
    ]
    edges = [GraphEdge(source="start", target="end")]

    graph = WorkflowGraph.from_nodes_and_edges(nodes, edges)

    assert len(graph.nodes) == 2
    assert len(graph.edges) == 1
    assert [node.id for node in graph.triggers()] == ["start"]
    assert [node.id for node in graph.get_successors("start")] == ["end"]


def test_nodes_from_dictionaries():
    """Test that plain editor dictionaries are accepted."""
    graph = WorkflowGraph.from_dict(
        {
            "nodes": [{"id": "t", "type": "trigger", "label": "Go", "config": {"triggerType": "manual"}}],
            "edges": [{"id": "e1", "source": "t", "target": "x", "animated": True}],
        }
    )

    node = graph.get_node("t")
    assert node.type == NodeType.TRIGGER
    assert node.label == "Go"
    assert node.config == {"triggerType": "manual"}
    assert graph.edges[0] == GraphEdge(source="t", target="x")


def test_label_defaults_to_catalog_label():
    """Test that an empty label falls back to the node type's display name."""
    node = GraphNode(id="n", type="aiTextGen")

    assert node.label == "AI Text Gen"


def test_none_config_becomes_empty():
    node = GraphNode(id="n", type="delay", config=None)

    assert node.config == {}


def test_unknown_node_type_rejected():
    """Test that types outside the closed set are rejected."""
    with pytest.raises(UnknownNodeType, match="Unknown node type: webhook"):
        WorkflowGraph.from_nodes_and_edges([{"id": "w", "type": "webhook"}], [])


def test_duplicate_node_ids_rejected():
    nodes = [{"id": "a", "type": "trigger"}, {"id": "a", "type": "notion"}]

    with pytest.raises(GraphValidationError, match="Duplicate node id: a"):
        WorkflowGraph.from_nodes_and_edges(nodes, [])


def test_malformed_node_and_edge_rejected():
    with pytest.raises(GraphValidationError, match="Invalid node"):
        WorkflowGraph.from_nodes_and_edges([{"type": "trigger"}], [])

    with pytest.raises(GraphValidationError, match="Invalid edge"):
        WorkflowGraph.from_nodes_and_edges([{"id": "a", "type": "trigger"}], [{"source": "a"}])


def test_triggers_in_node_order():
    """Test that triggers keep node collection order."""
    graph = WorkflowGraph.from_dict(
        {
            "nodes": [
                {"id": "b", "type": "trigger"},
                {"id": "x", "type": "notion"},
                {"id": "a", "type": "trigger"},
            ],
            "edges": [],
        }
    )

    assert [node.id for node in graph.triggers()] == ["b", "a"]


def test_successors_follow_edge_order():
    """Test successor order, dangling targets and duplicate edges."""
    graph = WorkflowGraph.from_dict(
        {
            "nodes": [
                {"id": "t", "type": "trigger"},
                {"id": "a", "type": "notion"},
                {"id": "b", "type": "database"},
            ],
            "edges": [
                {"source": "t", "target": "b"},
                {"source": "t", "target": "ghost"},
                {"source": "t", "target": "a"},
                {"source": "t", "target": "b"},
            ],
        }
    )

    assert [node.id for node in graph.get_successors("t")] == ["b", "a", "b"]
    assert graph.get_successors("a") == []
    assert graph.get_successors("ghost") == []


def test_get_node_and_has_node():
    graph = WorkflowGraph.from_dict({"nodes": [{"id": "t", "type": "trigger"}], "edges": []})

    assert graph.has_node("t")
    assert not graph.has_node("missing")
    assert graph.get_node("missing") is None


def test_inputs_are_copied():
    """Test that later edits to the input collections are not observed."""
    nodes = [{"id": "t", "type": "trigger", "config": {"items": [1]}}]
    edges = [{"source": "t", "target": "t2"}]

    graph = WorkflowGraph.from_nodes_and_edges(nodes, edges)
    nodes[0]["config"]["items"].append(2)
    nodes.append({"id": "t2", "type": "trigger"})
    edges.clear()

    assert graph.get_node("t").config == {"items": [1]}
    assert len(graph.nodes) == 1
    assert len(graph.edges) == 1


def test_to_dict_round_trip_shape():
    data = {
        "nodes": [{"id": "t", "type": "trigger", "label": "Start", "config": {}}],
        "edges": [{"source": "t", "target": "t"}],
    }

    assert WorkflowGraph.from_dict(data).to_dict() == data


def test_empty_graph():
    graph = WorkflowGraph.from_dict({})

    assert graph.nodes == ()
    assert graph.triggers() == []
