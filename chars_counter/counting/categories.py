"""Single-character predicates used by the category counters.

Every predicate is a pure function of one character; none of them looks at
position or neighbouring characters.
"""

from __future__ import annotations

import unicodedata
from typing import Dict, Protocol, Tuple

import regex

from .config import (
    ASCII_LIMIT,
    CJK_FIRST,
    CJK_LAST,
    NO_WHITESPACE_EXCLUDED,
    NUMERIC_CATEGORY_PREFIX,
    CategoryConfig,
)

_ALPHABETIC = regex.compile(r"\p{Alphabetic}")
_WHITE_SPACE = regex.compile(r"\p{White_Space}")


class CharPredicate(Protocol):
    """Decides whether a character takes part in a count."""

    def __call__(self, character: str) -> bool:
        return True


def is_any(character: str) -> bool:
    return True


def is_ascii(character: str) -> bool:
    return ord(character) < ASCII_LIMIT


def is_numeric(character: str) -> bool:
    """True for general categories Nd, Nl and No; CJK numerals (Lo) are not numeric."""
    return unicodedata.category(character).startswith(NUMERIC_CATEGORY_PREFIX)


def is_alphabetic(character: str) -> bool:
    """Unicode `Alphabetic` property: letters, Nl, and Other_Alphabetic marks."""
    return _ALPHABETIC.fullmatch(character) is not None


def is_alphanumeric(character: str) -> bool:
    return is_alphabetic(character) or is_numeric(character)


def is_whitespace(character: str) -> bool:
    # White_Space excludes the U+001C..U+001F separators that str.isspace() accepts.
    return _WHITE_SPACE.fullmatch(character) is not None


def is_not_space(character: str) -> bool:
    return character != NO_WHITESPACE_EXCLUDED


def is_chinese(character: str) -> bool:
    """True for code points in the CJK Unified Ideographs block."""
    return CJK_FIRST <= ord(character) <= CJK_LAST


CATEGORIES: Dict[str, CategoryConfig] = {
    "all": {"predicate": is_any, "description": "Every character."},
    "ascii": {"predicate": is_ascii, "description": "Code points below U+0080."},
    "numeric": {"predicate": is_numeric, "description": "Unicode number categories (Nd, Nl, No)."},
    "alphabetic": {"predicate": is_alphabetic, "description": "Unicode Alphabetic property."},
    "alphanumeric": {"predicate": is_alphanumeric, "description": "Alphabetic or numeric characters."},
    "whitespace": {"predicate": is_whitespace, "description": "Unicode White_Space property."},
    "no_whitespace": {"predicate": is_not_space, "description": "Everything except the ASCII space."},
    "chinese": {"predicate": is_chinese, "description": "CJK Unified Ideographs (U+4E00..U+9FFF)."},
}


def category_names() -> Tuple[str, ...]:
    return tuple(CATEGORIES)


def get_predicate(name: str) -> CharPredicate:
    """Look up the predicate registered under `name`."""
    try:
        return CATEGORIES[name]["predicate"]
    except KeyError as exc:
        known = ", ".join(CATEGORIES)
        raise ValueError(f"Unknown character category '{name}'. Options: {known}") from exc


__all__ = [
    "CATEGORIES",
    "CharPredicate",
    "category_names",
    "get_predicate",
    "is_alphabetic",
    "is_alphanumeric",
    "is_any",
    "is_ascii",
    "is_chinese",
    "is_not_space",
    "is_numeric",
    "is_whitespace",
]
