"""
Book Composer

Document model and content-flow engine for a multilingual
(Arabic/Urdu/English) book layout editor.
"""

__version__ = "0.1.0"

# Export main components
from .models.enums import (
    Alignment,
    ContentField,
    Direction,
    ItemType,
    SplitPolicy,
    StyleKey,
)
from .models.document import Document, Item, NameEntry, Page
from .models.selection import FlowResult, Selection
from .models.settings import Settings, merge_settings
from .styles import StyleResolver, resolve_style
from .config import (
    ConfigurationManager,
    ConfigurationError,
    EditorConfiguration,
    ValidationResult,
)
from .parsers import (
    BulkTOCParser,
    DocumentLoader,
    DocumentLoadError,
    DocumentSerializer,
    deserialize_document,
    document_to_json,
    load_document,
    parse_bulk_toc,
    serialize_document,
)
from .flow import ContentFlowEngine, ItemSplitter
from .history import HistoryManager
from .interfaces import IDocumentExporter, IPageRenderer
from .session import EditorSession

__all__ = [
    "Alignment",
    "ContentField",
    "Direction",
    "ItemType",
    "SplitPolicy",
    "StyleKey",
    "Document",
    "Item",
    "NameEntry",
    "Page",
    "FlowResult",
    "Selection",
    "Settings",
    "merge_settings",
    "StyleResolver",
    "resolve_style",
    "ConfigurationManager",
    "ConfigurationError",
    "EditorConfiguration",
    "ValidationResult",
    "BulkTOCParser",
    "DocumentLoader",
    "DocumentLoadError",
    "DocumentSerializer",
    "deserialize_document",
    "document_to_json",
    "load_document",
    "parse_bulk_toc",
    "serialize_document",
    "ContentFlowEngine",
    "ItemSplitter",
    "HistoryManager",
    "IDocumentExporter",
    "IPageRenderer",
    "EditorSession",
]
