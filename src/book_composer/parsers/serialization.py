"""Serialization and deserialization utilities for book documents."""

import copy
import json
from typing import Any, Optional

from ..config.models import EditorConfiguration
from ..models.document import Document, Item, Page
from ..models.settings import Settings
from .document_loader import DocumentLoader
from .exceptions import DocumentLoadError


class DocumentSerializer:
    """
    Handles serialization and deserialization of Document structures.

    The dictionary form is the persisted project file: ``{pages, settings}``
    with the editor's camelCase keys. Loading a serialized document yields an
    equivalent document: the loader's legacy conversions and chunking are all
    idempotent on serializer output.
    """

    @staticmethod
    def to_dict(doc: Document) -> dict[str, Any]:
        """Structural dump of a Document."""
        return {
            "pages": [DocumentSerializer._page_to_dict(p) for p in doc.pages],
            "settings": doc.settings.to_dict(),
        }

    @staticmethod
    def serialize(doc: Document) -> str:
        """
        Serialize a Document to a JSON string.

        Args:
            doc: The Document to serialize.

        Returns:
            JSON string representation of the document.
        """
        return json.dumps(
            DocumentSerializer.to_dict(doc),
            ensure_ascii=False,
            indent=2
        )

    @staticmethod
    def decode(json_str: str, source: Optional[str] = None) -> Any:
        """
        Parse JSON text, reporting failures as DocumentLoadError.

        Raises:
            DocumentLoadError: If the text is not valid JSON.
        """
        try:
            return json.loads(json_str)
        except json.JSONDecodeError as e:
            raise DocumentLoadError(
                message=f"Invalid JSON: {str(e)}",
                source=source,
                details={"line": e.lineno, "column": e.colno},
            )

    @staticmethod
    def deserialize(
        json_str: str,
        config: Optional[EditorConfiguration] = None,
        source: Optional[str] = None,
        base_settings: Optional[Settings] = None,
    ) -> Document:
        """
        Deserialize a JSON string to a Document.

        Args:
            json_str: JSON string to deserialize.
            config: Editor configuration for the loader.
            source: Optional label for error messages (e.g. a file name).
            base_settings: Settings the persisted settings are merged over.

        Returns:
            Document reconstructed from the JSON.

        Raises:
            DocumentLoadError: If the text is not valid JSON.
        """
        data = DocumentSerializer.decode(json_str, source=source)
        return DocumentLoader(config).load(data, base_settings=base_settings)

    @staticmethod
    def _page_to_dict(page: Page) -> dict[str, Any]:
        """Convert Page to dictionary."""
        data: dict[str, Any] = {
            "id": page.id,
            "pageNumber": page.page_number,
        }
        if page.section_title is not None:
            data["sectionTitle"] = page.section_title
        if page.background_color is not None:
            data["backgroundColor"] = page.background_color
        if page.background_image is not None:
            data["backgroundImage"] = page.background_image
        data["items"] = [DocumentSerializer._item_to_dict(i) for i in page.items]
        return data

    @staticmethod
    def _item_to_dict(item: Item) -> dict[str, Any]:
        """Convert Item to dictionary."""
        data: dict[str, Any] = {"id": item.id, "type": item.type}
        data.update(copy.deepcopy(item.fields))
        if item.names is not None:
            data["names"] = [n.to_dict() for n in item.names]
        if item.styles:
            data["styles"] = copy.deepcopy(item.styles)
        return data


def serialize_document(doc: Document) -> dict[str, Any]:
    """Convenience function for the persistence snapshot of a Document."""
    return DocumentSerializer.to_dict(doc)


def document_to_json(doc: Document) -> str:
    """Convenience function to serialize a Document to JSON text."""
    return DocumentSerializer.serialize(doc)


def deserialize_document(
    json_str: str,
    config: Optional[EditorConfiguration] = None,
) -> Document:
    """Convenience function to deserialize a Document."""
    return DocumentSerializer.deserialize(json_str, config=config)
