"""`str` flavour that carries the counting operations as methods."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from . import counter
from .categories import CharPredicate
from .result import CountResult


@runtime_checkable
class CharCounting(Protocol):
    """Capability interface for text that can count its own characters."""

    def count_chars(self) -> CountResult: ...

    def count_chars_filter(self, predicate: CharPredicate) -> CountResult: ...

    def count_chars_ascii(self) -> CountResult: ...

    def count_chars_numeric(self) -> CountResult: ...

    def count_chars_alphabetic(self) -> CountResult: ...

    def count_chars_alphanumeric(self) -> CountResult: ...

    def count_chars_whitespace(self) -> CountResult: ...

    def count_chars_no_whitespace(self) -> CountResult: ...

    def count_chars_chinese(self) -> CountResult: ...

    def count_chars_category(self, name: str) -> CountResult: ...


class CountableText(str):
    """A `str` that implements `CharCounting` by delegating to the free functions.

    >>> CountableText("Hello world!").count_chars().most_chars()
    CountResult([CharCount(character='l', count=3)])
    """

    __slots__ = ()

    def count_chars(self) -> CountResult:
        return counter.count_chars(self)

    def count_chars_filter(self, predicate: CharPredicate) -> CountResult:
        return counter.count_chars_filter(self, predicate)

    def count_chars_ascii(self) -> CountResult:
        return counter.count_chars_ascii(self)

    def count_chars_numeric(self) -> CountResult:
        return counter.count_chars_numeric(self)

    def count_chars_alphabetic(self) -> CountResult:
        return counter.count_chars_alphabetic(self)

    def count_chars_alphanumeric(self) -> CountResult:
        return counter.count_chars_alphanumeric(self)

    def count_chars_whitespace(self) -> CountResult:
        return counter.count_chars_whitespace(self)

    def count_chars_no_whitespace(self) -> CountResult:
        return counter.count_chars_no_whitespace(self)

    def count_chars_chinese(self) -> CountResult:
        return counter.count_chars_chinese(self)

    def count_chars_category(self, name: str) -> CountResult:
        return counter.count_chars_category(self, name)


__all__ = ["CharCounting", "CountableText"]
