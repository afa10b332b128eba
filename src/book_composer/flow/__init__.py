"""Content-flow engine: cross-page moves, item splitting and page operations."""

from .content_flow import TABLE_OPERATIONS, ContentFlowEngine
from .item_factory import ITEM_TEMPLATES, create_item, create_placeholder_heading
from .splitter import CONTENT_GROUP_ORDER, ItemSplitter, SplitOutcome

__all__ = [
    "TABLE_OPERATIONS",
    "ContentFlowEngine",
    "ITEM_TEMPLATES",
    "create_item",
    "create_placeholder_heading",
    "CONTENT_GROUP_ORDER",
    "ItemSplitter",
    "SplitOutcome",
]
