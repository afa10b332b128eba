"""Script detection utilities for pasted multilingual text."""

import re
from typing import Literal

ScriptType = Literal["arabic", "latin", "mixed", "none"]

# Arabic block, which also carries the Urdu letters.
ARABIC_SCRIPT_PATTERN = re.compile(r'[\u0600-\u06FF]')
LATIN_LETTER_PATTERN = re.compile(r'[a-zA-Z]')


def contains_arabic_script(text: str) -> bool:
    """True if any codepoint of ``text`` lies in the Arabic/Urdu block."""
    if not text:
        return False
    return ARABIC_SCRIPT_PATTERN.search(text) is not None


def detect_script(text: str) -> ScriptType:
    """
    Classify the script of a text fragment.

    Args:
        text: The text to analyze.

    Returns:
        "arabic" if it has Arabic-block codepoints and no Latin letters,
        "latin" for Latin letters only, "mixed" for both and "none" when
        neither occurs (digits, punctuation, blank).
    """
    if not text or not text.strip():
        return "none"

    has_arabic = contains_arabic_script(text)
    has_latin = LATIN_LETTER_PATTERN.search(text) is not None

    if has_arabic and has_latin:
        return "mixed"
    if has_arabic:
        return "arabic"
    if has_latin:
        return "latin"
    return "none"
