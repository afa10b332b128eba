"""Unit tests for the document, settings and selection models."""

from book_composer.models import (
    DEFAULT_GLOBAL_STYLES,
    Document,
    Item,
    ItemType,
    NameEntry,
    Page,
    Selection,
    Settings,
    merge_settings,
    parse_name_key,
)
from book_composer.models.identity import generate_id
from book_composer.models.selection import matches_sub_field


class TestItem:
    """Tests for the sparse field bag."""

    def test_absent_and_empty_are_distinct(self):
        item = Item(id="i", type="text", fields={"urdu": ""})
        assert item.has("urdu")
        assert not item.has("english")
        assert item.get("english") is None

    def test_set_none_removes_field(self):
        item = Item(id="i", type="text", fields={"urdu": "x"})
        item.set("urdu", None)
        assert not item.has("urdu")

    def test_remove_reports_presence(self):
        item = Item(id="i", type="text", fields={"urdu": "x"})
        assert item.remove("urdu") is True
        assert item.remove("urdu") is False

    def test_has_content_counts_names(self):
        item = Item(id="i", type="names_of_allah", names=[NameEntry(arabic="x")])
        assert item.has_content
        item.names = []
        assert not item.has_content

    def test_unknown_type_is_preserved(self):
        item = Item(id="i", type="poem")
        assert item.type_tag is None
        assert Item(id="j", type="heading").type_tag is ItemType.HEADING

    def test_copy_is_deep(self):
        item = Item(id="i", type="table", fields={"tableData": [["a"]]})
        clone = item.copy()
        clone.fields["tableData"][0][0] = "b"
        assert item.get("tableData") == [["a"]]


class TestDocument:
    """Tests for page lookup and renumbering."""

    def test_renumber_is_dense(self):
        doc = Document(pages=[Page(id="a", page_number=7), Page(id="b", page_number=3)])
        doc.renumber()
        assert [p.page_number for p in doc.pages] == [1, 2]

    def test_find_page_index_missing(self):
        doc = Document(pages=[Page(id="a", page_number=1)])
        assert doc.find_page_index("a") == 0
        assert doc.find_page_index("zzz") == -1
        assert doc.find_page_index(None) == -1

    def test_item_at_out_of_range(self):
        page = Page(id="a", page_number=1, items=[Item(id="x", type="text")])
        assert page.item_at(0).id == "x"
        assert page.item_at(1) is None
        assert page.item_at(-1) is None

    def test_snapshot_is_detached(self):
        doc = Document(pages=[Page(id="a", page_number=1, items=[Item(id="x", type="text")])])
        snap = doc.snapshot()
        snap.pages[0].items.clear()
        assert len(doc.pages[0].items) == 1

    def test_item_ids_in_reading_order(self, three_page_document):
        assert three_page_document.item_ids() == ["A", "B", "C", "D"]


class TestSettings:
    """Tests for the settings record and merge rule."""

    def test_defaults(self):
        settings = Settings()
        assert settings.page_size.name == "A4"
        assert settings.margins.top == 40
        assert settings.global_styles == DEFAULT_GLOBAL_STYLES

    def test_round_trip_keeps_unknown_keys(self):
        data = Settings().to_dict()
        data["customFlag"] = {"x": 1}
        assert Settings.from_dict(data).to_dict() == data

    def test_merge_global_styles_per_key(self):
        merged = merge_settings(Settings(), {"globalStyles": {"urduSize": 1.4}})
        assert merged.global_styles["urduSize"] == 1.4
        assert merged.global_styles["arabicSize"] == DEFAULT_GLOBAL_STYLES["arabicSize"]

    def test_merge_replaces_other_keys_wholesale(self):
        merged = merge_settings(Settings(), {"margins": {"top": 10}})
        assert merged.margins.top == 10
        # the rest of the margins record falls back to defaults
        assert merged.margins.bottom == 60

    def test_merge_ignores_non_mapping_patch(self):
        base = Settings(show_outlines=False)
        merged = merge_settings(base, "oops")
        assert merged == base
        assert merged is not base


class TestSelection:
    """Tests for selection keys."""

    def test_parse_name_key(self):
        assert parse_name_key("name-3") == (3, None)
        assert parse_name_key("name-0-urdu") == (0, "urdu")
        assert parse_name_key("urdu") is None
        assert parse_name_key(None) is None

    def test_heading_group_matching(self):
        assert matches_sub_field("heading_urdu", "heading")
        assert matches_sub_field("heading_english", "heading")
        assert not matches_sub_field("urdu", "heading")
        assert matches_sub_field("urdu", "urdu")

    def test_at_item_drops_sub_field(self):
        selection = Selection("P1", 2, "urdu")
        assert selection.at_item(2) == Selection("P1", 2)

    def test_generated_ids_are_unique(self):
        ids = {generate_id("split") for _ in range(50)}
        assert len(ids) == 50
        assert all(i.startswith("split-") for i in ids)
