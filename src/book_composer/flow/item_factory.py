"""Placeholder items for "add item" and "insert page"."""

import copy
from typing import Any, Dict, Tuple

from ..models.document import Item
from ..models.enums import ItemType
from ..models.identity import generate_id


_TEXT_BOX_STYLES = {
    "backgroundColor": "#ffffff",
    "borderColor": "#000000",
    "borderWidth": 1,
    "padding": 10,
    "borderRadius": 4,
}

# requested kind -> (stored item type, fields, styles)
ITEM_TEMPLATES: Dict[str, Tuple[str, Dict[str, Any], Dict[str, Any]]] = {
    "heading": ("heading", {"heading_urdu": "نئی سرخی", "heading_english": "New Heading"}, {}),
    "section_title": ("section_title", {"heading_urdu": "نئی فصل / عنوان", "heading_english": "New Section Title"}, {}),
    "dua": ("dua", {"arabic": "عربی متن", "urdu": "اردو ترجمہ", "english": "English Translation"}, {}),
    "quran": ("quran", {"arabic": "عربی متن", "urdu": "اردو ترجمہ", "english": "English Translation"}, {}),
    "text": ("text", {"content_urdu": "اردو تحریر", "content_english": "English Text"}, {}),
    "instruction": ("instruction", {"content_urdu": "ہدایت"}, {}),
    "image": ("image", {"image_src": "", "image_caption_urdu": "تصویر کا عنوان"}, {}),
    "image_caption": ("image", {"image_src": "", "image_caption_urdu": "کیپشن", "image_caption_english": "Caption"}, {}),
    "text_box": ("text", {"english": "New Text Box"}, _TEXT_BOX_STYLES),
    "text_arabic": ("text", {"arabic": "نص جديد"}, {"arabicAlign": "center", "arabicSize": 1.5}),
    "text_urdu": ("text", {"urdu": "نیا متن"}, {"urduAlign": "right", "urduSize": 1.2}),
    "text_english": ("text", {"english": "New Text"}, {"englishAlign": "left", "englishSize": 1.0}),
    "table": (
        "table",
        {
            "tableData": [
                ["Header 1", "Header 2", "Header 3"],
                ["Cell 1.1", "Cell 1.2", "Cell 1.3"],
                ["Cell 2.1", "Cell 2.2", "Cell 2.3"],
            ],
        },
        {"tableBorder": True, "tableStriped": True},
    ),
    "list": ("list", {"listItems": ["Item 1", "Item 2", "Item 3"], "listType": "bullet"}, {}),
}


def create_item(kind: str) -> Item:
    """
    Create a new item with placeholder content for ``kind``.

    Kinds without a template (including unknown ones) produce an empty item
    of that type.
    """
    item_type, fields, styles = ITEM_TEMPLATES.get(kind, (kind, {}, {}))
    return Item(
        id=generate_id("item"),
        type=item_type,
        fields=copy.deepcopy(fields),
        styles=copy.deepcopy(styles),
    )


def create_placeholder_heading() -> Item:
    """The single item a freshly inserted page starts with."""
    return create_item(ItemType.HEADING.value)
