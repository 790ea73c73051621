"""Helpers for resolving the text a count should run over."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

DEFAULT_ENCODING = "utf-8"


def read_text_source(
    text: Optional[str],
    path: Optional[Path],
    encoding: str = DEFAULT_ENCODING,
) -> str:
    """Return inline `text` or the contents of `path`; exactly one must be given."""
    if text is not None and path is not None:
        raise ValueError("Pass either inline text or a file path, not both.")
    if path is not None:
        if not path.is_file():
            raise ValueError(f"No such file: {path}")
        return path.read_text(encoding=encoding)
    if text is None:
        raise ValueError("Provide text to count, either inline or via --file.")
    return text


__all__ = ["DEFAULT_ENCODING", "read_text_source"]
