"""Bulk parser for pasted table-of-contents text.

Each non-blank line becomes one ``toc_entry`` item. Lines are split on tabs,
or on runs of two or more spaces when tabs give fewer than two fields, and
the field count picks the interpretation:

==========  ===========================================================
fields      interpretation
==========  ===========================================================
3 or more   english topic, page number, urdu topic (fixed column order)
2           topic + numeric page, topic script decides the language;
            a non-numeric second field falls back to wholesale
0 or 1      whole line goes to the urdu field, no page number
==========  ===========================================================

The parser never rejects a line: anything it cannot read is assigned
wholesale to the urdu field.
"""

import logging
import re
from typing import Callable, Dict, List, Tuple

from ..models.document import Item
from ..models.enums import ItemType
from ..models.identity import generate_id
from .script_detector import detect_script

logger = logging.getLogger(__name__)

_MULTI_SPACE = re.compile(r" {2,}")
_DIGITS = re.compile(r"^\d+$", re.ASCII)

# (english, toc_page, urdu)
TOCFields = Tuple[str, str, str]


class BulkTOCParser:
    """Heuristic line parser producing table-of-contents entries."""

    def __init__(self):
        self._strategies: Dict[str, Callable[[str, List[str]], TOCFields]] = {
            "three_columns": self._three_columns,
            "two_columns": self._two_columns,
            "wholesale": self._wholesale,
        }

    @staticmethod
    def tokenize(line: str) -> List[str]:
        """Split by tab, falling back to runs of two or more spaces."""
        parts = line.split("\t")
        if len(parts) < 2:
            parts = _MULTI_SPACE.split(line)
        return parts

    @staticmethod
    def strategy_for(field_count: int) -> str:
        """Name of the strategy for a given field count."""
        if field_count >= 3:
            return "three_columns"
        if field_count == 2:
            return "two_columns"
        return "wholesale"

    def parse_line(self, line: str) -> TOCFields:
        """
        Parse one line into ``(english, toc_page, urdu)``.

        The raw line is tokenized, so leading or trailing separators count
        as (empty) fields.
        """
        parts = self.tokenize(line)
        return self._strategies[self.strategy_for(len(parts))](line, parts)

    def parse(self, text: str) -> List[Item]:
        """
        Parse pasted text into toc_entry items.

        Args:
            text: Raw pasted text, one entry per line.

        Returns:
            One item per non-blank line, each with a fresh id and the
            ``urdu``, ``english`` and ``toc_page`` fields set.
        """
        if not text:
            return []

        items = []
        for line in text.splitlines():
            if not line.strip():
                continue
            english, page, urdu = self.parse_line(line)
            items.append(Item(
                id=generate_id("toc"),
                type=ItemType.TOC_ENTRY.value,
                fields={"urdu": urdu, "english": english, "toc_page": page},
            ))

        logger.info(f"Parsed {len(items)} table-of-contents entries")
        return items

    # Strategies

    @staticmethod
    def _three_columns(line: str, parts: List[str]) -> TOCFields:
        return parts[0].strip(), parts[1].strip(), parts[2].strip()

    def _two_columns(self, line: str, parts: List[str]) -> TOCFields:
        topic = parts[0].strip()
        page = parts[1].strip()
        if not _DIGITS.match(page):
            return self._wholesale(line, parts)
        if detect_script(topic) in ("arabic", "mixed"):
            return "", page, topic
        return topic, page, ""

    @staticmethod
    def _wholesale(line: str, parts: List[str]) -> TOCFields:
        return "", "", line.strip()


def parse_bulk_toc(text: str) -> List[Item]:
    """Convenience function to parse pasted TOC text."""
    return BulkTOCParser().parse(text)
