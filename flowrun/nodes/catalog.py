"""Node palette definitions.

Each node type has a display label, a short description and the config a
freshly dropped node starts with.
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from flowrun.core.graph import NodeType


@dataclass(frozen=True)
class NodeTypeSpec:
    """Palette entry for one node type."""

    type: NodeType
    label: str
    description: str
    default_config: Dict[str, Any] = field(default_factory=dict)


NODE_CATALOG: List[NodeTypeSpec] = [
    NodeTypeSpec(NodeType.TRIGGER, "Trigger", "Start the workflow", {"triggerType": "manual"}),
    NodeTypeSpec(
        NodeType.AI_TEXT_GEN,
        "AI Text Gen",
        "Generate text using OpenAI",
        {"prompt": "", "model": "gpt-3.5-turbo"},
    ),
    NodeTypeSpec(
        NodeType.AI_IMAGE_GEN,
        "AI Image Gen",
        "Generate images using DALL-E",
        {"prompt": "", "size": "1024x1024"},
    ),
    NodeTypeSpec(
        NodeType.AI_ANALYSIS,
        "AI Analysis",
        "Analyze data with AI",
        {"prompt": "", "model": "gpt-3.5-turbo"},
    ),
    NodeTypeSpec(NodeType.NOTION, "Notion", "Integrate with Notion", {"action": "create", "database": ""}),
    NodeTypeSpec(NodeType.DATABASE, "Database", "Store or retrieve data", {"action": "insert", "table": ""}),
    NodeTypeSpec(
        NodeType.SEND_EMAIL,
        "Send Email",
        "Send email notifications",
        {"to": "", "subject": "", "body": ""},
    ),
    NodeTypeSpec(NodeType.API_CALL, "API Call", "Make HTTP API requests", {"method": "GET", "url": ""}),
    NodeTypeSpec(
        NodeType.CONDITION,
        "Condition",
        "Conditional branching",
        {"condition": "", "operator": "equals"},
    ),
    NodeTypeSpec(NodeType.DELAY, "Delay", "Wait for specified time", {"seconds": 5}),
]


def get_node_type_spec(node_type: Union[NodeType, str]) -> Optional[NodeTypeSpec]:
    """Look up the palette entry for a node type, or None."""
    for spec in NODE_CATALOG:
        if spec.type == node_type:
            return spec
    return None


def default_label(node_type: Any) -> str:
    """Catalog label for a type, or the raw type string when unknown."""
    spec = get_node_type_spec(node_type)
    if spec is not None:
        return spec.label
    if isinstance(node_type, NodeType):
        return node_type.value
    return str(node_type) if node_type is not None else ""


def default_config(node_type: Union[NodeType, str]) -> Dict[str, Any]:
    """Fresh copy of the starting config for a type."""
    spec = get_node_type_spec(node_type)
    return copy.deepcopy(spec.default_config) if spec else {}
