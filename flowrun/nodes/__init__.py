"""Node handler implementations."""

from flowrun.nodes.base import NodeHandler
from flowrun.nodes.trigger import TriggerHandler
from flowrun.nodes.ai import AITextGenHandler, AIImageGenHandler, AIAnalysisHandler
from flowrun.nodes.mock import NotionHandler, DatabaseHandler, SendEmailHandler
from flowrun.nodes.api_call import ApiCallHandler
from flowrun.nodes.condition import ConditionHandler
from flowrun.nodes.delay import DelayHandler
from flowrun.nodes.catalog import NODE_CATALOG, NodeTypeSpec, get_node_type_spec

__all__ = [
    "NodeHandler",
    "TriggerHandler",
    "AITextGenHandler",
    "AIImageGenHandler",
    "AIAnalysisHandler",
    "NotionHandler",
    "DatabaseHandler",
    "SendEmailHandler",
    "ApiCallHandler",
    "ConditionHandler",
    "DelayHandler",
    "NODE_CATALOG",
    "NodeTypeSpec",
    "get_node_type_spec",
]
