"""Character-frequency counting with filtering and lookup helpers."""

from .categories import CATEGORIES, CharPredicate, category_names, get_predicate
from .counter import (
    count_chars,
    count_chars_alphabetic,
    count_chars_alphanumeric,
    count_chars_ascii,
    count_chars_category,
    count_chars_chinese,
    count_chars_filter,
    count_chars_no_whitespace,
    count_chars_numeric,
    count_chars_whitespace,
)
from .extension import CharCounting, CountableText
from .records import CharCount
from .result import CountResult, find_by_char, find_by_num, least_chars, most_chars

__all__ = [
    "CATEGORIES",
    "CharCount",
    "CharCounting",
    "CharPredicate",
    "CountResult",
    "CountableText",
    "category_names",
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
    "find_by_char",
    "find_by_num",
    "get_predicate",
    "least_chars",
    "most_chars",
]
