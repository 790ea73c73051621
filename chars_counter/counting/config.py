"""Static configuration for character categories."""

from __future__ import annotations

from typing import Callable, TypedDict


class CategoryConfig(TypedDict):
    predicate: Callable[[str], bool]
    description: str


# CJK Unified Ideographs block, inclusive bounds.
CJK_FIRST = 0x4E00
CJK_LAST = 0x9FFF

ASCII_LIMIT = 0x80

# General category major class for numbers (Nd, Nl, No).
NUMERIC_CATEGORY_PREFIX = "N"

# `no_whitespace` only drops the plain space; tabs and newlines still count.
NO_WHITESPACE_EXCLUDED = " "

DEFAULT_CATEGORY = "all"


__all__ = [
    "ASCII_LIMIT",
    "CJK_FIRST",
    "CJK_LAST",
    "CategoryConfig",
    "DEFAULT_CATEGORY",
    "NO_WHITESPACE_EXCLUDED",
    "NUMERIC_CATEGORY_PREFIX",
]
