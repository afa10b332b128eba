"""Editor session: the orchestrator that owns one open document.

The session wires together the loader, the content-flow engine, the history
manager and the bulk importer. Structural operations go through history;
cosmetic in-place edits (field text, style values, table cells, list items,
settings) do not.
"""

import copy
import logging
from typing import Any, Callable, List, Optional, Sequence

from .config.config_manager import ConfigurationManager
from .config.models import EditorConfiguration
from .flow.content_flow import ContentFlowEngine
from .history.history_manager import HistoryManager
from .interfaces.export import IDocumentExporter
from .interfaces.render import IPageRenderer
from .models.document import Document, Item
from .models.enums import Direction
from .models.selection import FlowResult, Selection
from .models.settings import Settings, merge_settings
from .parsers.bulk_toc import BulkTOCParser
from .parsers.document_loader import DocumentLoader
from .parsers.serialization import DocumentSerializer
from .styles.resolver import StyleResolver


logger = logging.getLogger(__name__)


class EditorSession:
    """
    One editing session over a single Document.

    Holds the current selection (``selection``, which may point at a page
    only) and the selected page id used as the target of page-level
    operations.
    """

    def __init__(
        self,
        config: Optional[EditorConfiguration] = None,
        document: Optional[Document] = None,
    ):
        """
        Initialize the session.

        Args:
            config: Editor configuration (defaults if not provided).
            document: Optional document to start from; an empty document
                with the configured default settings otherwise.
        """
        self.config = config or EditorConfiguration()
        self.base_settings: Settings = merge_settings(Settings(), self.config.default_settings)

        self.loader = DocumentLoader(self.config)
        self.engine = ContentFlowEngine(self.config)
        self.history = HistoryManager(self.config.history_limit)
        self.bulk_parser = BulkTOCParser()

        self.document = document or Document(settings=copy.deepcopy(self.base_settings))
        self.selection: Optional[Selection] = None
        self.selected_page_id: Optional[str] = self.document.pages[0].id if self.document.pages else None

    @classmethod
    def from_config_manager(cls, manager: ConfigurationManager) -> "EditorSession":
        """Create a session from a (loaded or default) configuration manager."""
        return cls(config=manager.configuration)

    # =========================================================================
    # Loading and persistence
    # =========================================================================

    def load(self, raw: Any) -> Document:
        """
        Replace the open document with one loaded from raw data.

        History is cleared and the first page becomes the selected page.
        """
        self.document = self.loader.load(raw, base_settings=self.base_settings)
        self.history.clear()
        self.selection = None
        self.selected_page_id = self.document.pages[0].id if self.document.pages else None
        logger.info(f"Session loaded document with {len(self.document.pages)} pages")
        return self.document

    def load_json(self, json_str: str, source: Optional[str] = None) -> Document:
        """
        Load persisted JSON text.

        Raises:
            DocumentLoadError: If the text is not valid JSON.
        """
        return self.load(DocumentSerializer.decode(json_str, source=source))

    def serialize(self) -> dict:
        """Persistence snapshot of the open document."""
        return DocumentSerializer.to_dict(self.document)

    def to_json(self) -> str:
        return DocumentSerializer.serialize(self.document)

    def snapshot(self) -> Document:
        """Detached deep copy of the open document."""
        return self.document.snapshot()

    # =========================================================================
    # Selection
    # =========================================================================

    def select_page(self, page_id: str) -> bool:
        """Select a page (without an item). Returns False if it does not exist."""
        if self.document.get_page(page_id) is None:
            return False
        self.selected_page_id = page_id
        self.selection = Selection(page_id)
        return True

    def select_item(self, page_id: str, item_index: int, sub_field: Optional[str] = None) -> bool:
        """Select an item, optionally narrowed to one sub-field."""
        page = self.document.get_page(page_id)
        if page is None or page.item_at(item_index) is None:
            return False
        self.selected_page_id = page_id
        self.selection = Selection(page_id, item_index, sub_field)
        return True

    def clear_selection(self) -> None:
        self.selection = None

    @property
    def selected_item(self) -> Optional[Item]:
        if self.selection is None or not self.selection.has_item:
            return None
        page = self.document.get_page(self.selection.page_id)
        return page.item_at(self.selection.item_index) if page else None

    def _follow(self, result: FlowResult) -> FlowResult:
        """Adopt the selection reported by a move-style operation."""
        if result.changed:
            self.selection = result.selection
            if result.page_id is not None:
                self.selected_page_id = result.page_id
        return result

    def _revalidate_selection(self) -> None:
        """Drop selection parts that no longer resolve after a history step."""
        if self.selected_page_id is not None and self.document.get_page(self.selected_page_id) is None:
            self.selected_page_id = self.document.pages[0].id if self.document.pages else None

        if self.selection is None:
            return
        page = self.document.get_page(self.selection.page_id)
        if page is None:
            self.selection = None
        elif self.selection.has_item and page.item_at(self.selection.item_index) is None:
            self.selection = Selection(page.id)

    # =========================================================================
    # Structural operations (recorded in history)
    # =========================================================================

    def _apply(self, operation: Callable[..., FlowResult], *args: Any, **kwargs: Any) -> FlowResult:
        """Run an engine operation, recording history only if it changed the document."""
        before = copy.deepcopy(self.document.pages)
        result = operation(self.document, *args, **kwargs)
        if result.changed:
            self.history.record(before)
        return result

    def push_to_next(self) -> FlowResult:
        return self._follow(self._apply(self.engine.push_to_next, self.selection))

    def pull_from_previous(self) -> FlowResult:
        return self._follow(self._apply(self.engine.pull_from_previous, self.selection))

    def move_item(self, direction: Direction) -> FlowResult:
        """Move the selected item (or selected part of it) to the adjacent page."""
        return self._follow(self._apply(self.engine.move_item_to_page, self.selection, direction))

    def delete_selected(self) -> FlowResult:
        """
        Delete the current selection: a sub-field, an item, or, when only a
        page is selected, that page.
        """
        if self.selection is not None and self.selection.has_item:
            result = self._apply(self.engine.delete_item, self.selection)
            if result.changed:
                self.selection = result.selection
            return result
        page_id = self.selection.page_id if self.selection else self.selected_page_id
        return self.delete_page(page_id)

    def is_deletion_safe(self) -> bool:
        """True if deleting the current selection would discard no content."""
        selection = self.selection
        if selection is None and self.selected_page_id is not None:
            selection = Selection(self.selected_page_id)
        return self.engine.is_deletion_safe(self.document, selection)

    def delete_page(self, page_id: Optional[str] = None) -> FlowResult:
        """Delete a page (the selected one by default) and select its neighbour."""
        result = self._apply(self.engine.delete_page, page_id or self.selected_page_id)
        if result.changed:
            self.selected_page_id = result.page_id
            self.selection = Selection(result.page_id) if result.page_id else None
        return result

    def delete_page_by_number(self, page_number: int) -> FlowResult:
        result = self._apply(self.engine.delete_page_by_number, page_number)
        if result.changed:
            self.selected_page_id = result.page_id
            self.selection = Selection(result.page_id) if result.page_id else None
        return result

    def move_page(self, target_number: int, page_id: Optional[str] = None) -> FlowResult:
        """Move a page (the selected one by default) to ``target_number``."""
        result = self._apply(self.engine.move_page, page_id or self.selected_page_id, target_number)
        if result.changed:
            self.selected_page_id = result.page_id
        return result

    def insert_page(self, index: Optional[int] = None) -> FlowResult:
        """Insert a page at ``index`` (appended by default) and select it."""
        if index is None:
            index = len(self.document.pages)
        result = self._apply(self.engine.insert_page, index)
        if result.changed:
            self.selected_page_id = result.page_id
            self.selection = Selection(result.page_id)
        return result

    def add_item(self, kind: str, page_id: Optional[str] = None) -> FlowResult:
        """Append a placeholder item to a page and select it."""
        return self._follow(self._apply(self.engine.add_item, page_id or self.selected_page_id, kind))

    def append_items(self, items: Sequence[Item], page_id: Optional[str] = None) -> FlowResult:
        return self._apply(self.engine.append_items, page_id or self.selected_page_id, items)

    def import_bulk_toc(self, text: str, page_id: Optional[str] = None) -> FlowResult:
        """Parse pasted table-of-contents text and append it to a page."""
        items = self.bulk_parser.parse(text)
        result = self.append_items(items, page_id)
        if result.changed:
            logger.info(f"Imported {len(items)} table-of-contents entries into page '{result.page_id}'")
        return result

    def reorder_items(self, item_ids: Sequence[str], page_id: Optional[str] = None) -> FlowResult:
        """Apply a new item order to a page; a selected item there stays selected."""
        selected = self.selected_item
        result = self._apply(self.engine.reorder_items, page_id or self.selected_page_id, item_ids)
        if result.changed and self.selection is not None and self.selection.page_id == result.page_id:
            if selected is not None:
                page = self.document.get_page(result.page_id)
                self.selection = Selection(page.id, page.index_of(selected.id), self.selection.sub_field)
            else:
                self.selection = Selection(result.page_id)
        return result

    def set_page_background(
        self,
        color: Optional[str] = None,
        image: Optional[str] = None,
        page_id: Optional[str] = None,
    ) -> FlowResult:
        return self._apply(
            self.engine.set_page_background,
            page_id or self.selected_page_id,
            color=color,
            image=image,
        )

    def reset_item_styles(self) -> FlowResult:
        return self._apply(self.engine.reset_item_styles, self.selection)

    # =========================================================================
    # History
    # =========================================================================

    def undo(self) -> bool:
        """Restore the page list before the last structural operation."""
        pages = self.history.undo(self.document.pages)
        if pages is None:
            return False
        self.document.pages = pages
        self._revalidate_selection()
        logger.info(f"Undo: {len(pages)} pages restored")
        return True

    def redo(self) -> bool:
        pages = self.history.redo(self.document.pages)
        if pages is None:
            return False
        self.document.pages = pages
        self._revalidate_selection()
        logger.info(f"Redo: {len(pages)} pages restored")
        return True

    # =========================================================================
    # Cosmetic edits (not recorded in history)
    # =========================================================================

    def update_item_field(self, key: str, value: Any) -> FlowResult:
        return self.engine.update_item_field(self.document, self.selection, key, value)

    def update_item_style(self, key: str, value: Any) -> FlowResult:
        return self.engine.update_item_style(self.document, self.selection, key, value)

    def edit_table(self, operation: str) -> FlowResult:
        """One of ``add_row``, ``add_column``, ``remove_row``, ``remove_column``."""
        return self.engine.edit_table(self.document, self.selection, operation)

    def update_list_items(self, list_items: Sequence[str]) -> FlowResult:
        return self.update_item_field("listItems", list(list_items))

    def update_settings(self, patch: Any) -> Settings:
        """Merge a settings patch into the document settings."""
        self.document.settings = merge_settings(self.document.settings, patch)
        return self.document.settings

    def update_global_style(self, key: str, value: Any) -> Settings:
        return self.update_settings({"globalStyles": {key: value}})

    # =========================================================================
    # Render and export feeds
    # =========================================================================

    def render(self, renderer: IPageRenderer) -> List[Any]:
        """Render every page of a snapshot, in order."""
        snapshot = self.snapshot()
        resolver = StyleResolver(snapshot.settings)
        return [renderer.render_page(page, snapshot.settings, resolver) for page in snapshot.pages]

    def export(self, exporter: IDocumentExporter) -> Any:
        return exporter.export(self.snapshot())
