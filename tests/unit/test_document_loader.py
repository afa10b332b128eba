"""Unit tests for the document loader and names chunker."""

import logging

from book_composer.config import EditorConfiguration
from book_composer.models import Settings
from book_composer.parsers import DocumentLoader, item_from_dict, load_document


def names_payload(count):
    return [
        {"arabic": f"ar{i}", "roman": f"ro{i}", "urdu": f"ur{i}", "english": f"en{i}"}
        for i in range(count)
    ]


class TestEnvelopes:
    """Tests for accepted input shapes."""

    def test_bare_list(self):
        doc = load_document([{"id": "p1", "items": []}])
        assert [p.id for p in doc.pages] == ["p1"]
        assert doc.settings == Settings()

    def test_envelope_with_settings(self):
        doc = load_document({
            "pages": [{"id": "p1"}],
            "settings": {"globalStyles": {"urduSize": 1.5}, "showOutlines": False},
        })
        assert doc.settings.global_styles["urduSize"] == 1.5
        assert doc.settings.global_styles["englishSize"] == 0.9
        assert doc.settings.show_outlines is False

    def test_empty_envelope_keeps_settings(self):
        doc = load_document({"pages": [], "settings": {"showOutlines": False}})
        assert doc.pages == []
        assert doc.settings.show_outlines is False

    def test_unrecognized_shape_is_empty(self, caplog):
        with caplog.at_level(logging.WARNING):
            doc = load_document("not a book")
        assert doc.pages == []
        assert "Unrecognized document shape" in caplog.text

    def test_non_mapping_records_are_skipped(self):
        doc = load_document([{"id": "p1", "items": [42, {"type": "text", "urdu": "x"}]}, "junk"])
        assert len(doc.pages) == 1
        assert len(doc.pages[0].items) == 1


class TestPageFields:
    """Tests for page-level normalization."""

    def test_page_number_fallbacks(self):
        doc = load_document([
            {"pageNumber": 5},
            {"book_page_number": "8"},
            {},
        ])
        assert [p.page_number for p in doc.pages] == [5, 8, 3]

    def test_non_decimal_digit_string_falls_back(self):
        doc = DocumentLoader().load([{"id": "p", "pageNumber": "²", "items": []}])
        assert doc.pages[0].page_number == 1

    def test_arabic_indic_digit_string(self):
        doc = load_document([{"pageNumber": "١٢"}])
        assert doc.pages[0].page_number == 12

    def test_generated_page_ids_are_positional(self):
        doc = load_document([{}, {}])
        assert [p.id for p in doc.pages] == ["page-0", "page-1"]

    def test_backgrounds(self):
        doc = load_document([{"backgroundColor": "#eee", "backgroundImage": "bg.png"}])
        assert doc.pages[0].background_color == "#eee"
        assert doc.pages[0].background_image == "bg.png"


class TestLegacyConversion:
    """Tests for legacy page shapes."""

    def test_toc_page_becomes_entries(self):
        doc = load_document([{
            "id": "toc",
            "type": "table_of_contents",
            "entries": [
                {"topic": "پہلا باب", "topic_english": "Chapter One", "page": 4},
                {"section": "دوسرا", "page": 9},
            ],
        }])
        items = doc.pages[0].items
        assert [i.type for i in items] == ["toc_entry", "toc_entry"]
        assert items[0].fields == {"urdu": "پہلا باب", "english": "Chapter One", "toc_page": 4}
        assert items[1].get("urdu") == "دوسرا"
        assert not items[1].has("english")
        assert [i.id for i in items] == ["toc-toc-0", "toc-toc-1"]

    def test_section_becomes_leading_item(self):
        doc = load_document([{
            "id": "p1",
            "section": "باب اول",
            "items": [{"type": "text", "urdu": "x"}],
        }])
        page = doc.pages[0]
        assert page.items[0].type == "section_title"
        assert page.items[0].get("heading_urdu") == "باب اول"
        assert page.items[0].id == "p1-section-title"
        assert page.section_title == "باب اول"
        assert len(page.items) == 2


class TestItems:
    """Tests for item construction."""

    def test_fields_and_reserved_keys(self):
        item = item_from_dict(
            {"id": "x", "type": "dua", "arabic": "a", "urdu": None, "styles": {"arabicSize": 2}},
            "x",
        )
        assert item.fields == {"arabic": "a"}
        assert item.styles == {"arabicSize": 2}
        assert item.names is None

    def test_missing_type_defaults_to_text(self):
        assert item_from_dict({"urdu": "x"}, "i").type == "text"

    def test_unknown_type_is_kept(self):
        assert item_from_dict({"type": "poem"}, "i").type == "poem"

    def test_generated_item_ids(self):
        doc = load_document([{"id": "p1", "items": [{"urdu": "a"}, {"urdu": "b"}]}])
        assert doc.item_ids() == ["p1-item-0", "p1-item-1"]

    def test_loading_twice_gives_same_ids(self):
        raw = [{"items": [{"urdu": "a"}]}, {"items": [{"urdu": "b"}]}]
        assert load_document(raw).item_ids() == load_document(raw).item_ids()

    def test_duplicate_ids_are_reassigned(self, caplog):
        with caplog.at_level(logging.WARNING):
            doc = load_document([
                {"id": "p", "items": [{"id": "x"}, {"id": "x"}]},
                {"id": "p", "items": [{"id": "x"}]},
            ])
        assert [p.id for p in doc.pages] == ["p", "p-dup-1"]
        assert doc.item_ids() == ["x", "x-dup-1", "x-dup-2"]
        assert "Duplicate id" in caplog.text


class TestNamesChunking:
    """Tests for splitting over-long names collections."""

    def test_fifteen_names_into_six_six_three(self):
        doc = load_document([{
            "id": "p1",
            "items": [{
                "id": "n",
                "type": "names_of_allah",
                "heading_urdu": "اسماء",
                "names": names_payload(15),
                "styles": {"urduSize": 1.1},
            }],
        }])
        items = doc.pages[0].items
        assert [len(i.names) for i in items] == [6, 6, 3]
        assert [i.id for i in items] == ["n-chunk-0", "n-chunk-6", "n-chunk-12"]
        assert all(i.get("heading_urdu") == "اسماء" for i in items)
        assert all(i.styles == {"urduSize": 1.1} for i in items)
        assert items[2].names[0].english == "en12"

    def test_fourteen_names_into_six_six_two(self):
        doc = load_document([{
            "id": "p1",
            "items": [{"id": "n", "type": "names_of_allah", "names": names_payload(14)}],
        }])
        items = doc.pages[0].items
        assert [len(i.names) for i in items] == [6, 6, 2]
        assert len({i.id for i in items}) == 3
        assert "n" not in {i.id for i in items}

    def test_exactly_six_names_untouched(self):
        doc = load_document([{"items": [{"id": "n", "type": "names_of_allah", "names": names_payload(6)}]}])
        items = doc.pages[0].items
        assert [len(i.names) for i in items] == [6]
        assert items[0].id == "n"

    def test_short_collection_untouched(self):
        doc = load_document([{"items": [{"id": "n", "type": "names_of_allah", "names": names_payload(2)}]}])
        assert doc.item_ids() == ["n"]

    def test_configured_chunk_size(self):
        loader = DocumentLoader(EditorConfiguration(names_chunk_size=4))
        doc = loader.load([{"items": [{"type": "names_of_allah", "names": names_payload(9)}]}])
        assert [len(i.names) for i in doc.pages[0].items] == [4, 4, 1]

    def test_only_names_items_are_chunked(self):
        doc = load_document([{"items": [{"type": "text", "names": names_payload(10)}]}])
        assert len(doc.pages[0].items) == 1

    def test_base_settings_used_without_envelope(self):
        base = Settings(show_outlines=False)
        doc = DocumentLoader().load([{}], base_settings=base)
        assert doc.settings.show_outlines is False
        assert doc.settings is not base
