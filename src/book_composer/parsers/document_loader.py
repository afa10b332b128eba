"""Loader that turns raw JSON-like book data into the document model.

Accepts either a bare list of page records or a ``{pages, settings}``
envelope. Legacy shapes are normalized on the way in: table-of-contents pages
become ``toc_entry`` items, a page-level ``section`` string becomes a movable
``section_title`` item, and over-long names collections are chunked into
sibling items. Every page and item leaves the loader with a unique id.
"""

import copy
import logging
from typing import Any, Dict, List, Mapping, Optional, Set, Tuple

from ..config.models import EditorConfiguration
from ..models.document import Document, Item, NameEntry, Page
from ..models.enums import ItemType
from ..models.settings import Settings, merge_settings

logger = logging.getLogger(__name__)

RESERVED_ITEM_KEYS = ("id", "type", "styles", "names")


def item_from_dict(data: Mapping[str, Any], item_id: str) -> Item:
    """
    Build an Item from a raw mapping.

    Every key other than id/type/styles/names lands in the field bag, in
    input order; None values are dropped since absence already means unset.
    """
    fields = {
        key: copy.deepcopy(value)
        for key, value in data.items()
        if key not in RESERVED_ITEM_KEYS and value is not None
    }

    raw_names = data.get("names")
    names = [NameEntry.from_dict(n) for n in raw_names] if isinstance(raw_names, list) else None

    raw_styles = data.get("styles")
    styles = copy.deepcopy(dict(raw_styles)) if isinstance(raw_styles, Mapping) else {}

    raw_type = data.get("type")
    item_type = raw_type if isinstance(raw_type, str) and raw_type else ItemType.TEXT.value

    return Item(id=item_id, type=item_type, fields=fields, names=names, styles=styles)


def _page_number(value: Any) -> Optional[int]:
    """Positive page number from an int or a digit string, else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int) and value > 0:
        return value
    if isinstance(value, str) and value.strip().isdecimal() and int(value) > 0:
        return int(value)
    return None


def _text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value else None


class DocumentLoader:
    """
    Builds a Document from untyped input without ever raising on odd shapes.
    """

    def __init__(self, config: Optional[EditorConfiguration] = None):
        """
        Initialize the loader.

        Args:
            config: Editor configuration; supplies the names chunk size.
        """
        self.config = config or EditorConfiguration()

    @property
    def chunk_size(self) -> int:
        return max(1, self.config.names_chunk_size)

    def load(self, raw: Any, base_settings: Optional[Settings] = None) -> Document:
        """
        Load raw data into a Document.

        Args:
            raw: A list of page records or a ``{pages, settings}`` mapping.
            base_settings: Settings the envelope's settings are merged over.
                Defaults to the built-in settings.

        Returns:
            The loaded Document. Unusable input yields an empty document.
        """
        pages_data, settings_patch = self._unwrap(raw)

        if settings_patch is not None:
            settings = merge_settings(base_settings, settings_patch)
        else:
            settings = copy.deepcopy(base_settings) if base_settings else Settings()

        seen_page_ids: Set[str] = set()
        seen_item_ids: Set[str] = set()
        pages: List[Page] = []

        for index, raw_page in enumerate(pages_data):
            if not isinstance(raw_page, Mapping):
                logger.warning(f"Skipping page record {index}: expected a mapping, got {type(raw_page).__name__}")
                continue
            pages.append(self._load_page(raw_page, index, seen_page_ids, seen_item_ids))

        logger.info(f"Loaded {len(pages)} pages with {len(seen_item_ids)} items")
        return Document(pages=pages, settings=settings)

    def _unwrap(self, raw: Any) -> Tuple[List[Any], Optional[Any]]:
        """Split input into page records and an optional settings patch."""
        if isinstance(raw, list):
            return raw, None

        if isinstance(raw, Mapping) and "pages" in raw:
            pages = raw["pages"]
            if not isinstance(pages, list):
                logger.warning("Envelope 'pages' is not a list; loading an empty document")
                pages = []
            return pages, raw.get("settings")

        logger.warning(f"Unrecognized document shape {type(raw).__name__}; loading an empty document")
        return [], None

    def _load_page(
        self,
        raw: Mapping[str, Any],
        index: int,
        seen_page_ids: Set[str],
        seen_item_ids: Set[str],
    ) -> Page:
        page_id = self._claim_id(_text(raw.get("id")) or f"page-{index}", seen_page_ids)
        page_number = (
            _page_number(raw.get("pageNumber"))
            or _page_number(raw.get("book_page_number"))
            or index + 1
        )
        legacy_section = _text(raw.get("section"))

        raw_items = raw.get("items")
        if not isinstance(raw_items, list):
            raw_items = []

        entries = raw.get("entries")
        if raw.get("type") == ItemType.TABLE_OF_CONTENTS.value and isinstance(entries, list):
            raw_items = self._toc_entries_to_items(entries, page_id)

        items: List[Item] = []
        if legacy_section:
            items.append(Item(
                id=self._claim_id(f"{page_id}-section-title", seen_item_ids),
                type=ItemType.SECTION_TITLE.value,
                fields={"heading_urdu": legacy_section},
            ))

        for position, raw_item in enumerate(raw_items):
            if not isinstance(raw_item, Mapping):
                logger.warning(f"Skipping item {position} on page '{page_id}': not a mapping")
                continue
            source_id = _text(raw_item.get("id")) or f"{page_id}-item-{position}"
            item = item_from_dict(raw_item, source_id)
            items.extend(self._chunk(item, seen_item_ids))

        return Page(
            id=page_id,
            page_number=page_number,
            items=items,
            section_title=_text(raw.get("sectionTitle")) or legacy_section,
            background_color=_text(raw.get("backgroundColor")),
            background_image=_text(raw.get("backgroundImage")),
        )

    def _toc_entries_to_items(self, entries: List[Any], page_id: str) -> List[Dict[str, Any]]:
        """Normalize a legacy table-of-contents page into toc_entry records."""
        records = []
        for i, entry in enumerate(entries):
            if not isinstance(entry, Mapping):
                continue
            records.append({
                "type": ItemType.TOC_ENTRY.value,
                "urdu": entry.get("topic") or entry.get("section"),
                "english": entry.get("topic_english"),
                "toc_page": entry.get("page"),
                "id": _text(entry.get("id")) or f"{page_id}-toc-{i}",
            })
        return records

    def _chunk(self, item: Item, seen_item_ids: Set[str]) -> List[Item]:
        """Split an over-long names item into bounded siblings."""
        size = self.chunk_size
        if item.type != ItemType.NAMES_OF_ALLAH.value or not item.names or len(item.names) <= size:
            item.id = self._claim_id(item.id, seen_item_ids)
            return [item]

        chunks = []
        for offset in range(0, len(item.names), size):
            chunks.append(Item(
                id=self._claim_id(f"{item.id}-chunk-{offset}", seen_item_ids),
                type=item.type,
                fields=copy.deepcopy(item.fields),
                names=item.names[offset:offset + size],
                styles=copy.deepcopy(item.styles),
            ))
        logger.debug(f"Chunked names item '{item.id}' into {len(chunks)} items")
        return chunks

    @staticmethod
    def _claim_id(candidate: str, seen: Set[str]) -> str:
        """Reserve ``candidate``, deriving a new id if it is already taken."""
        if candidate not in seen:
            seen.add(candidate)
            return candidate

        suffix = 1
        while f"{candidate}-dup-{suffix}" in seen:
            suffix += 1
        derived = f"{candidate}-dup-{suffix}"
        logger.warning(f"Duplicate id '{candidate}' reassigned to '{derived}'")
        seen.add(derived)
        return derived


def load_document(
    raw: Any,
    config: Optional[EditorConfiguration] = None,
    base_settings: Optional[Settings] = None,
) -> Document:
    """Convenience function to load raw data into a Document."""
    return DocumentLoader(config).load(raw, base_settings=base_settings)
