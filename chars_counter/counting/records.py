"""Record types produced by a counting pass."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CharCount:
    """Occurrence count for a single distinct character."""

    character: str
    count: int

    def __post_init__(self) -> None:
        if len(self.character) != 1:
            raise ValueError(f"character must be a single code point, got {self.character!r}")
        if self.count < 1:
            raise ValueError(f"count must be at least 1, got {self.count}")

    def sort_key(self) -> tuple[int, int]:
        """Count descending, then code point ascending."""
        return (-self.count, ord(self.character))


__all__ = ["CharCount"]
