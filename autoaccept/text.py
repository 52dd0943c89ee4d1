"""
Text normalization and lexicon matching for OCR output.
"""

import re
import unicodedata
from typing import Iterable

# Digits and symbols OCR commonly returns in place of letters
OCR_CONFUSABLES = str.maketrans({
    "0": "o",
    "1": "l",
    "5": "s",
    "|": "l",
})

_CONTROL_WHITESPACE = str.maketrans({"\r": " ", "\n": " ", "\t": " "})


def _collapse_spaces(text: str) -> str:
    return re.sub(r" {2,}", " ", text).strip(" ")


def normalize_for_match(text: str) -> str:
    """
    Canonicalize recognized text for substring matching.

    Lowercases, maps OCR-confusable digits to letters, strips diacritics
    and replaces everything that is not a letter, digit or space with a
    space. Runs of spaces are collapsed, so the result is a single line.
    """
    if not text:
        return ""

    lowered = text.lower().translate(_CONTROL_WHITESPACE).translate(OCR_CONFUSABLES)

    decomposed = unicodedata.normalize("NFD", lowered)
    chars = []
    for ch in decomposed:
        category = unicodedata.category(ch)
        if category == "Mn":
            continue
        # Letters and decimal digits only; superscripts, fractions and numerals become spaces
        keep = category[0] == "L" or category == "Nd" or ch == " "
        chars.append(ch if keep else " ")

    recomposed = unicodedata.normalize("NFC", "".join(chars))
    return _collapse_spaces(recomposed)


def count_contains(text: str, patterns: Iterable[str]) -> int:
    """Count the patterns whose normalized form occurs in normalized text."""
    if not text:
        return 0
    count = 0
    for pattern in patterns:
        normalized = normalize_for_match(pattern)
        if normalized and normalized in text:
            count += 1
    return count


def contains_any(text: str, markers: Iterable[str]) -> bool:
    return any(marker in text for marker in markers)


def build_snippet(text: str, limit: int = 120) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + "..."
