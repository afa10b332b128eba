"""Selection and operation result models used by the content-flow engine."""

import re
from dataclasses import dataclass
from typing import Optional, Tuple

_NAME_KEY = re.compile(r"^name-(\d+)(?:-([a-z_]+))?$")

HEADING_GROUP = ("heading_urdu", "heading_english")


@dataclass(frozen=True)
class Selection:
    """
    What the editor is pointing at.

    ``sub_field`` is a content field key, the synthetic ``"heading"`` key
    (both heading fields), ``"name-N"`` (one entry of a names collection) or
    ``"name-N-<part>"`` (one script of that entry).
    """
    page_id: str
    item_index: Optional[int] = None
    sub_field: Optional[str] = None

    @property
    def has_item(self) -> bool:
        return self.item_index is not None

    def at_item(self, item_index: int) -> "Selection":
        return Selection(self.page_id, item_index)


def parse_name_key(sub_field: Optional[str]) -> Optional[Tuple[int, Optional[str]]]:
    """Parse ``name-N`` / ``name-N-part`` into ``(N, part)``, else None."""
    if not sub_field:
        return None
    match = _NAME_KEY.match(sub_field)
    if not match:
        return None
    return int(match.group(1)), match.group(2)


def matches_sub_field(key: str, sub_field: str) -> bool:
    """True if content key ``key`` belongs to the selected sub-field."""
    if sub_field == "heading":
        return key in HEADING_GROUP
    return key == sub_field


@dataclass
class FlowResult:
    """Outcome of a content-flow operation; ``changed`` is False for no-ops."""
    changed: bool
    selection: Optional[Selection] = None
    page_id: Optional[str] = None

    @classmethod
    def declined(cls) -> "FlowResult":
        return cls(changed=False)
