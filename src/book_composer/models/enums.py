"""Enumerations for the book composer document model."""

from enum import Enum


class ItemType(Enum):
    """Known item type tags. Unrecognized tags are kept as plain strings."""
    TEXT = "text"
    HEADING = "heading"
    DUA = "dua"
    QURAN = "quran"
    SECTION_TITLE = "section_title"
    SIGNATURE = "signature"
    INSTRUCTION = "instruction"
    NOTE = "note"
    VIRTUE = "virtue"
    NAMES_OF_ALLAH = "names_of_allah"
    QUESTION_ANSWER = "question_answer"
    Q_A = "q_a"
    TABLE_OF_CONTENTS = "table_of_contents"
    TOC_ENTRY = "toc_entry"
    IMAGE = "image"
    TABLE = "table"
    LIST = "list"
    DIVIDER = "divider"


class ContentField(Enum):
    """Content field vocabulary carried by items."""
    ARABIC = "arabic"
    ROMAN = "roman"
    URDU = "urdu"
    ENGLISH = "english"
    HEADING_URDU = "heading_urdu"
    HEADING_ENGLISH = "heading_english"
    CONTENT_URDU = "content_urdu"
    CONTENT_ENGLISH = "content_english"
    FAZILAT = "fazilat"
    FAZILAT_ENGLISH = "fazilat_english"
    TOC_PAGE = "toc_page"
    SURAH_NAME = "surah_name"
    SURAH_NUMBER = "surah_number"
    FREQUENCY = "frequency"
    INSTRUCTION = "instruction"
    QUESTION_URDU = "question_urdu"
    QUESTION_ENGLISH = "question_english"
    ANSWER_URDU = "answer_urdu"
    ANSWER_ENGLISH = "answer_english"
    VIRTUE_URDU = "virtue_urdu"
    VIRTUE_ENGLISH = "virtue_english"
    IMAGE_SRC = "image_src"
    IMAGE_CAPTION_URDU = "image_caption_urdu"
    IMAGE_CAPTION_ENGLISH = "image_caption_english"
    TABLE_DATA = "tableData"
    LIST_ITEMS = "listItems"
    LIST_TYPE = "listType"


class StyleKey(Enum):
    """Style keys that may be overridden per item or set globally."""
    # Sizes (rem scale)
    ARABIC_SIZE = "arabicSize"
    URDU_SIZE = "urduSize"
    ENGLISH_SIZE = "englishSize"
    HEADING_SIZE = "headingSize"

    # Alignments
    ARABIC_ALIGN = "arabicAlign"
    URDU_ALIGN = "urduAlign"
    ENGLISH_ALIGN = "englishAlign"
    HEADING_ALIGN = "headingAlign"

    # Fonts
    ARABIC_FONT = "arabicFont"
    URDU_FONT = "urduFont"
    ENGLISH_FONT = "englishFont"

    # Line heights
    ARABIC_LINE_HEIGHT = "arabicLineHeight"
    URDU_LINE_HEIGHT = "urduLineHeight"
    ENGLISH_LINE_HEIGHT = "englishLineHeight"
    HEADING_LINE_HEIGHT = "headingLineHeight"

    # Colors
    ARABIC_COLOR = "arabicColor"
    URDU_COLOR = "urduColor"
    ENGLISH_COLOR = "englishColor"
    HEADING_COLOR = "headingColor"

    # Composition
    IMAGE_WIDTH = "imageWidth"
    HEADING_LEVEL = "headingLevel"
    TABLE_BORDER = "tableBorder"
    TABLE_STRIPED = "tableStriped"

    # Text box
    BACKGROUND_COLOR = "backgroundColor"
    BORDER_COLOR = "borderColor"
    BORDER_WIDTH = "borderWidth"
    BORDER_RADIUS = "borderRadius"
    PADDING = "padding"


class Alignment(Enum):
    """Horizontal text alignment values."""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"


class Direction(Enum):
    """Direction of a cross-page transfer."""
    BACKWARD = -1
    FORWARD = 1


class SplitPolicy(Enum):
    """How a directional transfer partitions a non-names item."""
    FIELD = "field"
    FIELD_ORDER = "field_order"
