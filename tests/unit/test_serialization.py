"""Unit tests for document serialization."""

import json

import pytest

from book_composer.models import Document, Item, NameEntry, Page, Settings
from book_composer.parsers import (
    DocumentLoadError,
    DocumentSerializer,
    deserialize_document,
    document_to_json,
    load_document,
    serialize_document,
)


@pytest.fixture
def rich_document():
    settings = Settings(show_outlines=False, extra={"customFlag": True})
    settings.global_styles["urduSize"] = 1.3
    return Document(
        pages=[
            Page(
                id="p1",
                page_number=1,
                section_title="باب",
                background_color="#fafafa",
                items=[
                    Item(id="s", type="section_title", fields={"heading_urdu": "باب"}),
                    Item(
                        id="n",
                        type="names_of_allah",
                        fields={"heading_english": "Names"},
                        names=[NameEntry("ar", "ro", "ur", "en")],
                        styles={"arabicSize": 2.0},
                    ),
                    Item(id="t", type="table", fields={"tableData": [["a", "b"], ["c", "d"]]}),
                ],
            ),
            Page(id="p2", page_number=2, background_image="bg.png"),
        ],
        settings=settings,
    )


class TestDocumentSerializer:
    """Tests for the persisted dictionary and JSON forms."""

    def test_to_dict_shape(self, rich_document):
        data = serialize_document(rich_document)

        assert set(data) == {"pages", "settings"}
        page = data["pages"][0]
        assert page["id"] == "p1"
        assert page["pageNumber"] == 1
        assert page["sectionTitle"] == "باب"
        assert "backgroundImage" not in page
        assert page["items"][1]["names"] == [
            {"arabic": "ar", "roman": "ro", "urdu": "ur", "english": "en"}
        ]
        assert page["items"][1]["heading_english"] == "Names"
        assert "styles" not in page["items"][0]
        assert data["settings"]["customFlag"] is True

    def test_round_trip_is_identity(self, rich_document):
        reloaded = load_document(serialize_document(rich_document))
        assert reloaded == rich_document

    def test_json_round_trip(self, rich_document):
        text = document_to_json(rich_document)
        assert "باب" in text
        assert deserialize_document(text) == rich_document

    def test_round_trip_after_chunking(self):
        raw = [{"items": [{"type": "names_of_allah", "names": [{"arabic": str(i)} for i in range(13)]}]}]
        first = load_document(raw)
        second = load_document(serialize_document(first))
        assert second == first

    def test_serialized_output_is_detached(self, rich_document):
        data = serialize_document(rich_document)
        data["pages"][0]["items"][2]["tableData"][0][0] = "changed"
        assert rich_document.pages[0].items[2].get("tableData")[0][0] == "a"

    def test_invalid_json_raises(self):
        with pytest.raises(DocumentLoadError) as exc_info:
            DocumentSerializer.deserialize("{broken", source="book.json")

        error = exc_info.value
        assert error.source == "book.json"
        assert "line" in error.details
        assert error.to_dict()["error_type"] == "DocumentLoadError"
        assert "book.json" in str(error)

    def test_valid_json_of_odd_shape_does_not_raise(self):
        doc = DocumentSerializer.deserialize(json.dumps(42))
        assert doc.pages == []
