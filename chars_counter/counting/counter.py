"""Single-pass character counting."""

from __future__ import annotations

from collections import defaultdict
from typing import Dict

from .categories import (
    CharPredicate,
    get_predicate,
    is_alphabetic,
    is_alphanumeric,
    is_any,
    is_ascii,
    is_chinese,
    is_not_space,
    is_numeric,
    is_whitespace,
)
from .result import CountResult


def count_chars_filter(text: str, predicate: CharPredicate) -> CountResult:
    """Count the characters of `text` that satisfy `predicate`.

    Args:
        text: Input text; iterated once, code point by code point.
        predicate: Called once per occurrence, not once per distinct character.

    Returns:
        CountResult with one entry per distinct character that passed.
    """
    tally: Dict[str, int] = defaultdict(int)
    for character in text:
        if predicate(character):
            tally[character] += 1
    return CountResult.from_mapping(tally)


def count_chars(text: str) -> CountResult:
    return count_chars_filter(text, is_any)


def count_chars_ascii(text: str) -> CountResult:
    return count_chars_filter(text, is_ascii)


def count_chars_numeric(text: str) -> CountResult:
    return count_chars_filter(text, is_numeric)


def count_chars_alphabetic(text: str) -> CountResult:
    return count_chars_filter(text, is_alphabetic)


def count_chars_alphanumeric(text: str) -> CountResult:
    return count_chars_filter(text, is_alphanumeric)


def count_chars_whitespace(text: str) -> CountResult:
    return count_chars_filter(text, is_whitespace)


def count_chars_no_whitespace(text: str) -> CountResult:
    """Count everything except the plain space character."""
    return count_chars_filter(text, is_not_space)


def count_chars_chinese(text: str) -> CountResult:
    return count_chars_filter(text, is_chinese)


def count_chars_category(text: str, name: str) -> CountResult:
    """Count using the predicate registered under category `name`."""
    return count_chars_filter(text, get_predicate(name))


__all__ = [
    "count_chars",
    "count_chars_alphabetic",
    "count_chars_alphanumeric",
    "count_chars_ascii",
    "count_chars_category",
    "count_chars_chinese",
    "count_chars_filter",
    "count_chars_no_whitespace",
    "count_chars_numeric",
    "count_chars_whitespace",
]
