"""Document-related data models for the book composer."""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from .enums import ItemType
from .settings import Settings


NAME_PARTS = ("arabic", "roman", "urdu", "english")


@dataclass
class NameEntry:
    """One entry of a composite names collection, in all four scripts."""
    arabic: str = ""
    roman: str = ""
    urdu: str = ""
    english: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {part: getattr(self, part) for part in NAME_PARTS}

    @classmethod
    def from_dict(cls, data: Any) -> "NameEntry":
        if not isinstance(data, dict):
            return cls()
        return cls(**{
            part: "" if data.get(part) is None else str(data.get(part))
            for part in NAME_PARTS
        })


@dataclass
class Item:
    """
    One unit of content on a page.

    Content lives in a sparse, ordered field bag: a key that is absent means
    "not set", which is distinct from a key holding an empty string. Field
    values are never None. Composite names are kept apart from the bag
    because they split at name granularity rather than field granularity.
    """
    id: str
    type: str
    fields: Dict[str, Any] = field(default_factory=dict)
    names: Optional[List[NameEntry]] = None
    styles: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.fields is None:
            self.fields = {}
        if self.styles is None:
            self.styles = {}

    @property
    def type_tag(self) -> Optional[ItemType]:
        """Known type tag, or None for a forward-compatible unknown type."""
        try:
            return ItemType(self.type)
        except ValueError:
            return None

    @property
    def is_heading(self) -> bool:
        return self.type == ItemType.HEADING.value

    @property
    def has_content(self) -> bool:
        """True if any content field or name is populated."""
        return bool(self.fields) or bool(self.names)

    def has(self, key: str) -> bool:
        return key in self.fields

    def get(self, key: str, default: Any = None) -> Any:
        return self.fields.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set a content field; None removes it."""
        if value is None:
            self.fields.pop(key, None)
        else:
            self.fields[key] = value

    def remove(self, key: str) -> bool:
        """Remove a content field. Returns True if it was present."""
        return self.fields.pop(key, None) is not None

    def copy(self) -> "Item":
        return copy.deepcopy(self)


@dataclass
class Page:
    """
    An ordered container of items.

    ``id`` is permanent; ``page_number`` is positional and rewritten by
    :meth:`Document.renumber` after any structural page operation.
    """
    id: str
    page_number: int
    items: List[Item] = field(default_factory=list)
    section_title: Optional[str] = None
    background_color: Optional[str] = None
    background_image: Optional[str] = None

    def __post_init__(self):
        if self.items is None:
            self.items = []

    @property
    def is_empty(self) -> bool:
        return len(self.items) == 0

    def item_at(self, index: Optional[int]) -> Optional[Item]:
        """Return the item at ``index`` or None when out of range."""
        if index is None or index < 0 or index >= len(self.items):
            return None
        return self.items[index]

    def index_of(self, item_id: str) -> int:
        for i, item in enumerate(self.items):
            if item.id == item_id:
                return i
        return -1


@dataclass
class Document:
    """
    The whole book: ordered pages plus the session settings record.
    """
    pages: List[Page] = field(default_factory=list)
    settings: Settings = field(default_factory=Settings)

    def __post_init__(self):
        if self.pages is None:
            self.pages = []
        if self.settings is None:
            self.settings = Settings()

    def find_page_index(self, page_id: Optional[str]) -> int:
        """Position of the page with ``page_id``, or -1."""
        if page_id is None:
            return -1
        for i, page in enumerate(self.pages):
            if page.id == page_id:
                return i
        return -1

    def get_page(self, page_id: Optional[str]) -> Optional[Page]:
        index = self.find_page_index(page_id)
        return self.pages[index] if index >= 0 else None

    def page_by_number(self, page_number: int) -> Optional[Page]:
        for page in self.pages:
            if page.page_number == page_number:
                return page
        return None

    def renumber(self) -> None:
        """Rewrite page numbers as the dense 1-based position sequence."""
        for i, page in enumerate(self.pages):
            page.page_number = i + 1

    def iter_items(self) -> Iterator[Item]:
        for page in self.pages:
            yield from page.items

    def item_ids(self) -> List[str]:
        return [item.id for item in self.iter_items()]

    def snapshot(self) -> "Document":
        """Detached deep copy handed to renderers, exporters and history."""
        return copy.deepcopy(self)
