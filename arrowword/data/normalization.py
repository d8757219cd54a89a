"""Shared helpers for keyword validation and normalization."""

from __future__ import annotations

import re
import unicodedata

# Expanded before diacritics are stripped, as German puzzles spell them out.
GERMAN_SUBSTITUTIONS = {
    "Ä": "AE",
    "Ö": "OE",
    "Ü": "UE",
    "ß": "SS",
    "ẞ": "SS",
}

NON_ASCII_RE = re.compile(r"[^\x00-\x7F]")


def is_valid_keyword(text: str) -> bool:
    """A keyword consists of letters only."""

    return bool(text) and all(char.isalpha() for char in text)


def normalize_keyword(text: str) -> str:
    """Return the uppercase A-Z form of ``text``.

    >>> normalize_keyword("Größe")
    'GROESSE'
    >>> normalize_keyword("café")
    'CAFE'
    """

    if not text:
        return ""
    # "ß".upper() already yields "SS"; the table covers the capital forms.
    transformed = text.upper()
    for source, target in GERMAN_SUBSTITUTIONS.items():
        transformed = transformed.replace(source, target)
    decomposed = unicodedata.normalize("NFD", transformed)
    return NON_ASCII_RE.sub("", decomposed)


__all__ = ["is_valid_keyword", "normalize_keyword", "GERMAN_SUBSTITUTIONS"]
