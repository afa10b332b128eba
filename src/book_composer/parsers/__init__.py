"""Loading, serialization and bulk import for book documents."""

from .bulk_toc import BulkTOCParser, parse_bulk_toc
from .document_loader import DocumentLoader, item_from_dict, load_document
from .exceptions import DocumentLoadError
from .script_detector import contains_arabic_script, detect_script
from .serialization import (
    DocumentSerializer,
    deserialize_document,
    document_to_json,
    serialize_document,
)

__all__ = [
    "BulkTOCParser",
    "parse_bulk_toc",
    "DocumentLoader",
    "item_from_dict",
    "load_document",
    "DocumentLoadError",
    "contains_arabic_script",
    "detect_script",
    "DocumentSerializer",
    "deserialize_document",
    "document_to_json",
    "serialize_document",
]
