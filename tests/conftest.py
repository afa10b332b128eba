"""Shared fixtures for book composer tests."""

import pytest

from book_composer.models import Document, Item, NameEntry, Page


def make_page(page_id, number, *items, section_title=None):
    return Page(id=page_id, page_number=number, items=list(items), section_title=section_title)


def make_names(count):
    return [
        NameEntry(arabic=f"ar{i}", roman=f"ro{i}", urdu=f"ur{i}", english=f"en{i}")
        for i in range(count)
    ]


@pytest.fixture
def three_page_document():
    """P1 = [A, B, C], P2 = [D], P3 = []."""
    return Document(pages=[
        make_page(
            "P1", 1,
            Item(id="A", type="text", fields={"urdu": "a"}),
            Item(id="B", type="text", fields={"urdu": "b"}),
            Item(id="C", type="text", fields={"urdu": "c"}),
        ),
        make_page("P2", 2, Item(id="D", type="text", fields={"urdu": "d"})),
        make_page("P3", 3),
    ])


@pytest.fixture
def heading_document():
    """P1 holds a bilingual heading followed by a dua; P2 holds one text item."""
    return Document(pages=[
        make_page(
            "P1", 1,
            Item(id="H", type="heading", fields={"heading_urdu": "سرخی", "heading_english": "Title"}),
            Item(
                id="X", type="dua",
                fields={"arabic": "ar", "urdu": "ur", "english": "en"},
                styles={"arabicSize": 1.8},
            ),
        ),
        make_page("P2", 2, Item(id="T", type="text", fields={"english": "t"})),
    ])
