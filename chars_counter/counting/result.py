"""Ordered collection of character counts and the queries over it."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Iterator, Optional, Sequence, overload

from .records import CharCount

EntryPredicate = Callable[[CharCount], bool]


class CountResult(Sequence[CharCount]):
    """Immutable, de-duplicated sequence of `CharCount` entries.

    Entries are kept ordered by count (descending) with ties broken by code
    point (ascending). Every query that yields several entries returns a new
    `CountResult`, so queries can be chained.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[CharCount] = ()) -> None:
        ordered = sorted(entries, key=CharCount.sort_key)
        seen: set[str] = set()
        for entry in ordered:
            if entry.character in seen:
                raise ValueError(f"Duplicate entry for character {entry.character!r}.")
            seen.add(entry.character)
        self._entries: tuple[CharCount, ...] = tuple(ordered)

    @classmethod
    def from_mapping(cls, counts: Dict[str, int]) -> "CountResult":
        """Build a result from a character → count mapping."""
        return cls(CharCount(character, count) for character, count in counts.items())

    # ------------------------------------------------------------------
    # Sequence protocol

    @overload
    def __getitem__(self, index: int) -> CharCount: ...

    @overload
    def __getitem__(self, index: slice) -> "CountResult": ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return CountResult(self._entries[index])
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CharCount]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CountResult):
            return self._entries == other._entries
        if isinstance(other, (list, tuple)):
            return list(self._entries) == list(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"CountResult({list(self._entries)!r})"

    # ------------------------------------------------------------------
    # Derived values

    @property
    def total(self) -> int:
        """Sum of all counts, i.e. how many characters passed the filter."""
        return sum(entry.count for entry in self._entries)

    def as_dict(self) -> Dict[str, int]:
        return {entry.character: entry.count for entry in self._entries}

    # ------------------------------------------------------------------
    # Queries

    def counter_filter(self, predicate: EntryPredicate) -> "CountResult":
        """Keep the entries for which `predicate` returns True."""
        return CountResult(entry for entry in self._entries if predicate(entry))

    def most_chars(self) -> "CountResult":
        """Entries sharing the highest count; empty when the result is empty."""
        if not self._entries:
            return CountResult()
        top = self._entries[0].count
        return self.counter_filter(lambda entry: entry.count == top)

    def least_chars(self) -> "CountResult":
        """Entries sharing the lowest count; empty when the result is empty."""
        if not self._entries:
            return CountResult()
        bottom = self._entries[-1].count
        return self.counter_filter(lambda entry: entry.count == bottom)

    def find_by_char(self, character: str) -> Optional[CharCount]:
        """Return the entry for `character`, or None when it was not counted."""
        for entry in self._entries:
            if entry.character == character:
                return entry
        return None

    def find_by_num(self, count: int) -> "CountResult":
        """Entries whose count equals `count` exactly."""
        return self.counter_filter(lambda entry: entry.count == count)


def most_chars(result: CountResult) -> CountResult:
    return result.most_chars()


def least_chars(result: CountResult) -> CountResult:
    return result.least_chars()


def find_by_char(result: CountResult, character: str) -> Optional[CharCount]:
    return result.find_by_char(character)


def find_by_num(result: CountResult, count: int) -> CountResult:
    return result.find_by_num(count)


__all__ = [
    "CountResult",
    "EntryPredicate",
    "find_by_char",
    "find_by_num",
    "least_chars",
    "most_chars",
]
