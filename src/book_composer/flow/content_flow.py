"""Content-flow engine: moves, splits and page operations on a Document.

Every operation mutates the document in place and reports what happened as a
FlowResult. Operations whose preconditions fail (no selection, a selection
pointing at a page or item that no longer exists, a boundary) change nothing
and return ``FlowResult.declined()``; they never raise. Page-structure
operations renumber all pages before returning.
"""

import logging
from typing import Any, List, Optional, Sequence, Tuple, Union

from ..config.models import EditorConfiguration
from ..models.document import Document, Item, Page
from ..models.enums import Direction
from ..models.identity import generate_id
from ..models.selection import HEADING_GROUP, FlowResult, Selection, parse_name_key
from .item_factory import create_item, create_placeholder_heading
from .splitter import ItemSplitter

logger = logging.getLogger(__name__)

TABLE_OPERATIONS = ("add_row", "add_column", "remove_row", "remove_column")


def _decline(operation: str, reason: str) -> FlowResult:
    logger.debug(f"{operation} declined: {reason}")
    return FlowResult.declined()


def _is_blank(value: Any) -> bool:
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, dict)):
        return len(value) == 0
    return value is None


class ContentFlowEngine:
    """
    Relocates content across page boundaries at item and sub-field
    granularity, and performs page insert/delete/move with renumbering.
    """

    def __init__(self, config: Optional[EditorConfiguration] = None):
        """
        Initialize the engine.

        Args:
            config: Editor configuration; supplies the split policy.
        """
        self.config = config or EditorConfiguration()
        self.splitter = ItemSplitter(self.config.split_policy)

    # =========================================================================
    # Lookup helpers
    # =========================================================================

    @staticmethod
    def _locate(
        document: Document,
        selection: Optional[Selection],
    ) -> Optional[Tuple[int, Page, Item]]:
        """Resolve a selection to (page index, page, item), or None."""
        if selection is None or not selection.has_item:
            return None
        page_index = document.find_page_index(selection.page_id)
        if page_index < 0:
            return None
        page = document.pages[page_index]
        item = page.item_at(selection.item_index)
        if item is None:
            return None
        return page_index, page, item

    @staticmethod
    def _append_trailing_page(document: Document, source: Page) -> Page:
        """Create the page after the last one, inheriting the section title."""
        page = Page(
            id=generate_id("page"),
            page_number=source.page_number + 1,
            section_title=source.section_title,
        )
        document.pages.append(page)
        document.renumber()
        logger.debug(f"Created trailing page '{page.id}'")
        return page

    # =========================================================================
    # Page-boundary flow
    # =========================================================================

    def push_to_next(self, document: Document, selection: Optional[Selection]) -> FlowResult:
        """
        Move the selected item and everything after it to the head of the
        next page, creating that page if the current one is last.
        """
        located = self._locate(document, selection)
        if located is None:
            return _decline("push_to_next", "no valid item selection")
        page_index, page, _ = located

        moving = page.items[selection.item_index:]
        del page.items[selection.item_index:]

        if page_index + 1 < len(document.pages):
            target = document.pages[page_index + 1]
        else:
            target = self._append_trailing_page(document, page)
        target.items[0:0] = moving

        logger.debug(f"Pushed {len(moving)} items from page '{page.id}' to '{target.id}'")
        return FlowResult(changed=True, selection=Selection(target.id, 0), page_id=target.id)

    def pull_from_previous(self, document: Document, selection: Optional[Selection]) -> FlowResult:
        """
        Move the first item of a page to the end of the previous page.

        Only valid when the selection is the item at index 0 of a page that
        is not the first.
        """
        located = self._locate(document, selection)
        if located is None:
            return _decline("pull_from_previous", "no valid item selection")
        page_index, page, _ = located
        if page_index == 0 or selection.item_index != 0:
            return _decline("pull_from_previous", "selection is not the head of a non-first page")

        previous = document.pages[page_index - 1]
        previous.items.append(page.items.pop(0))

        return FlowResult(
            changed=True,
            selection=Selection(previous.id, len(previous.items) - 1),
            page_id=previous.id,
        )

    def move_item_to_page(
        self,
        document: Document,
        selection: Optional[Selection],
        direction: Union[Direction, int],
    ) -> FlowResult:
        """
        Move the selected item, or the selected part of it, to the adjacent page.

        Without a sub-field the item moves intact. With one, the item is split
        into a remainder that stays in place and a fragment that moves; if
        either would be empty the item moves intact. Forward moves land at
        the head of the next page (created if needed), backward moves at the
        tail of the previous page.
        """
        try:
            direction = Direction(direction)
        except ValueError:
            return _decline("move_item_to_page", f"invalid direction {direction!r}")

        located = self._locate(document, selection)
        if located is None:
            return _decline("move_item_to_page", "no valid item selection")
        page_index, page, item = located

        if direction is Direction.BACKWARD and page_index == 0:
            return _decline("move_item_to_page", "cannot move before the first page")

        if direction is Direction.FORWARD and page_index == len(document.pages) - 1:
            target = self._append_trailing_page(document, page)
        else:
            target = document.pages[page_index + direction.value]

        outcome = self.splitter.split(item, selection.sub_field, direction)

        if outcome.keep is not None:
            page.items[selection.item_index] = outcome.keep
        else:
            del page.items[selection.item_index]

        if direction is Direction.BACKWARD:
            target.items.append(outcome.move)
            new_index = len(target.items) - 1
        else:
            target.items.insert(0, outcome.move)
            new_index = 0

        logger.debug(
            f"Moved {'fragment' if outcome.is_split else 'item'} '{outcome.move.id}' "
            f"from page '{page.id}' to '{target.id}'"
        )
        return FlowResult(changed=True, selection=Selection(target.id, new_index), page_id=target.id)

    # =========================================================================
    # Item operations
    # =========================================================================

    def delete_item(self, document: Document, selection: Optional[Selection]) -> FlowResult:
        """
        Delete the selected item, or only its selected sub-field.

        The ``"heading"`` sub-field removes both heading fields and a
        ``"name-N"`` sub-field removes that name. An item emptied this way is
        kept; the returned selection points at it while it still has content
        and is None otherwise.
        """
        located = self._locate(document, selection)
        if located is None:
            return _decline("delete_item", "no valid item selection")
        _, page, item = located

        sub_field = selection.sub_field
        if not sub_field:
            del page.items[selection.item_index]
            return FlowResult(changed=True, selection=None, page_id=page.id)

        name_key = parse_name_key(sub_field)
        if name_key is not None and item.names:
            name_index = name_key[0]
            if name_index >= len(item.names):
                return _decline("delete_item", f"no name at index {name_index}")
            del item.names[name_index]
            removed = True
        elif sub_field == "heading":
            removed = False
            for key in HEADING_GROUP:
                removed = item.remove(key) or removed
        else:
            removed = item.remove(sub_field)

        if not removed:
            return _decline("delete_item", f"field '{sub_field}' not present")

        next_selection = selection.at_item(selection.item_index) if item.has_content else None
        return FlowResult(changed=True, selection=next_selection, page_id=page.id)

    def is_deletion_safe(self, document: Document, selection: Optional[Selection]) -> bool:
        """
        True if deleting the selection would discard no content.

        A page selection (no item) is safe when the page has no items; an item
        when it has no populated content; a sub-field when it is absent or
        blank. A selection that resolves to nothing is trivially safe.
        """
        if selection is None:
            return True
        page = document.get_page(selection.page_id)
        if page is None:
            return True
        if not selection.has_item:
            return page.is_empty

        item = page.item_at(selection.item_index)
        if item is None:
            return True
        if not selection.sub_field:
            return not item.has_content

        name_key = parse_name_key(selection.sub_field)
        if name_key is not None and item.names:
            if name_key[0] >= len(item.names):
                return True
            return all(_is_blank(v) for v in item.names[name_key[0]].to_dict().values())

        keys = HEADING_GROUP if selection.sub_field == "heading" else (selection.sub_field,)
        return all(_is_blank(item.get(key)) for key in keys)

    def add_item(self, document: Document, page_id: Optional[str], kind: str) -> FlowResult:
        """Append a placeholder item of ``kind`` to a page and select it."""
        if not isinstance(kind, str) or not kind:
            return _decline("add_item", f"invalid item kind {kind!r}")
        page = document.get_page(page_id)
        if page is None:
            return _decline("add_item", f"page '{page_id}' not found")

        page.items.append(create_item(kind))
        return FlowResult(
            changed=True,
            selection=Selection(page.id, len(page.items) - 1),
            page_id=page.id,
        )

    def append_items(self, document: Document, page_id: Optional[str], items: Sequence[Item]) -> FlowResult:
        """Append a batch of items to a page, re-identifying any id already in use."""
        page = document.get_page(page_id)
        if page is None:
            return _decline("append_items", f"page '{page_id}' not found")
        if not items:
            return _decline("append_items", "nothing to append")

        used_ids = set(document.item_ids())
        for item in items:
            if item.id in used_ids:
                item.id = generate_id("item")
            used_ids.add(item.id)
            page.items.append(item)

        return FlowResult(changed=True, page_id=page.id)

    def reorder_items(self, document: Document, page_id: Optional[str], item_ids: Sequence[str]) -> FlowResult:
        """Apply a new item order to a page; ``item_ids`` must be a permutation."""
        page = document.get_page(page_id)
        if page is None:
            return _decline("reorder_items", f"page '{page_id}' not found")

        current_ids = [item.id for item in page.items]
        if len(item_ids) != len(current_ids) or set(item_ids) != set(current_ids):
            return _decline("reorder_items", "ids are not a permutation of the page's items")
        if list(item_ids) == current_ids:
            return _decline("reorder_items", "order unchanged")

        by_id = {item.id: item for item in page.items}
        page.items = [by_id[item_id] for item_id in item_ids]
        return FlowResult(changed=True, page_id=page.id)

    def reset_item_styles(self, document: Document, selection: Optional[Selection]) -> FlowResult:
        """Drop every per-item style override so the item follows global styles."""
        located = self._locate(document, selection)
        if located is None:
            return _decline("reset_item_styles", "no valid item selection")
        _, page, item = located
        if not item.styles:
            return _decline("reset_item_styles", "item has no overrides")

        item.styles = {}
        return FlowResult(changed=True, selection=selection, page_id=page.id)

    # =========================================================================
    # In-place edits
    # =========================================================================

    def update_item_field(
        self,
        document: Document,
        selection: Optional[Selection],
        key: str,
        value: Any,
    ) -> FlowResult:
        """Set (or, with None, remove) one content field of the selected item."""
        located = self._locate(document, selection)
        if located is None:
            return _decline("update_item_field", "no valid item selection")
        _, page, item = located
        if key in ("id", "type", "styles", "names"):
            return _decline("update_item_field", f"'{key}' is not a content field")

        item.set(key, value)
        return FlowResult(changed=True, selection=selection, page_id=page.id)

    def update_item_style(
        self,
        document: Document,
        selection: Optional[Selection],
        key: str,
        value: Any,
    ) -> FlowResult:
        """Set (or, with None, clear) one per-item style override."""
        located = self._locate(document, selection)
        if located is None:
            return _decline("update_item_style", "no valid item selection")
        _, page, item = located

        if value is None:
            item.styles.pop(key, None)
        else:
            item.styles[key] = value
        return FlowResult(changed=True, selection=selection, page_id=page.id)

    def edit_table(self, document: Document, selection: Optional[Selection], operation: str) -> FlowResult:
        """
        Grow or shrink the selected table by one row or column.

        A table never shrinks below one row or one column.
        """
        if operation not in TABLE_OPERATIONS:
            return _decline("edit_table", f"unknown operation '{operation}'")
        located = self._locate(document, selection)
        if located is None:
            return _decline("edit_table", "no valid item selection")
        _, page, item = located

        data: List[List[str]] = item.get("tableData") or [[""]]
        if not isinstance(data, list) or not all(isinstance(row, list) for row in data):
            return _decline("edit_table", "tableData is not a list of rows")
        columns = len(data[0]) if data else 1

        if operation == "add_row":
            data = data + [[""] * columns]
        elif operation == "add_column":
            data = [row + [""] for row in data]
        elif operation == "remove_row":
            if len(data) <= 1:
                return _decline("edit_table", "table has a single row")
            data = data[:-1]
        else:
            if columns <= 1:
                return _decline("edit_table", "table has a single column")
            data = [row[:-1] for row in data]

        item.set("tableData", data)
        return FlowResult(changed=True, selection=selection, page_id=page.id)

    # =========================================================================
    # Page operations
    # =========================================================================

    def delete_page(self, document: Document, page_id: Optional[str]) -> FlowResult:
        """
        Remove a page and renumber the rest.

        The result's ``page_id`` is the page now occupying the deleted
        position (or the new last page), or None if no pages remain.
        """
        page_index = document.find_page_index(page_id)
        if page_index < 0:
            return _decline("delete_page", f"page '{page_id}' not found")

        document.pages.pop(page_index)
        document.renumber()

        neighbour = None
        if document.pages:
            neighbour = document.pages[min(page_index, len(document.pages) - 1)].id
        logger.debug(f"Deleted page '{page_id}'")
        return FlowResult(changed=True, page_id=neighbour)

    def delete_page_by_number(self, document: Document, page_number: int) -> FlowResult:
        """Remove the page currently numbered ``page_number``."""
        page = document.page_by_number(page_number)
        if page is None:
            return _decline("delete_page_by_number", f"page {page_number} not found")
        return self.delete_page(document, page.id)

    def move_page(self, document: Document, page_id: Optional[str], target_number: int) -> FlowResult:
        """Move a page to ``target_number`` (clamped to the valid range) and renumber."""
        source_index = document.find_page_index(page_id)
        if source_index < 0:
            return _decline("move_page", f"page '{page_id}' not found")
        if isinstance(target_number, bool) or not isinstance(target_number, int):
            return _decline("move_page", f"invalid target {target_number!r}")

        target_index = max(0, min(target_number - 1, len(document.pages) - 1))
        if target_index == source_index:
            return _decline("move_page", "page already at target position")

        page = document.pages.pop(source_index)
        document.pages.insert(target_index, page)
        document.renumber()
        return FlowResult(changed=True, page_id=page.id)

    def insert_page(self, document: Document, index: int) -> FlowResult:
        """Insert a new page holding one placeholder heading at position ``index``."""
        if isinstance(index, bool) or not isinstance(index, int):
            return _decline("insert_page", f"invalid index {index!r}")
        if index < 0 or index > len(document.pages):
            return _decline("insert_page", f"index {index} outside 0..{len(document.pages)}")

        page = Page(
            id=generate_id("page"),
            page_number=index + 1,
            items=[create_placeholder_heading()],
        )
        document.pages.insert(index, page)
        document.renumber()
        return FlowResult(changed=True, page_id=page.id)

    def set_page_background(
        self,
        document: Document,
        page_id: Optional[str],
        color: Optional[str] = None,
        image: Optional[str] = None,
    ) -> FlowResult:
        """
        Set a page background override.

        An image replaces any color and a color replaces any image; passing
        neither clears both.
        """
        page = document.get_page(page_id)
        if page is None:
            return _decline("set_page_background", f"page '{page_id}' not found")

        if image:
            new_color, new_image = None, image
        elif color:
            new_color, new_image = color, None
        else:
            new_color, new_image = None, None

        if (page.background_color, page.background_image) == (new_color, new_image):
            return _decline("set_page_background", "background unchanged")

        page.background_color = new_color
        page.background_image = new_image
        return FlowResult(changed=True, page_id=page.id)
