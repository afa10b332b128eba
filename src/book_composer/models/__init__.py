"""Data models and enums for the book composer."""

from .enums import (
    Alignment,
    ContentField,
    Direction,
    ItemType,
    SplitPolicy,
    StyleKey,
)
from .settings import DEFAULT_GLOBAL_STYLES, Margins, PageSize, Settings, merge_settings
from .document import Document, Item, NameEntry, Page
from .selection import FlowResult, Selection, parse_name_key

__all__ = [
    # Enums
    "Alignment",
    "ContentField",
    "Direction",
    "ItemType",
    "SplitPolicy",
    "StyleKey",
    # Settings
    "DEFAULT_GLOBAL_STYLES",
    "Margins",
    "PageSize",
    "Settings",
    "merge_settings",
    # Document models
    "Document",
    "Item",
    "NameEntry",
    "Page",
    # Selection
    "FlowResult",
    "Selection",
    "parse_name_key",
]
