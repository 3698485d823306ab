"""Cursor and document metadata owned by an edit session."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class CursorPosition:
    """Zero-based ``(column, row)`` pair.

    ``column`` may equal the line length, meaning "after the last character".
    """

    column: int = 0
    row: int = 0

    def with_column(self, column: int) -> "CursorPosition":
        return CursorPosition(column=column, row=self.row)


ORIGIN = CursorPosition(0, 0)


@dataclass(slots=True)
class DocumentMeta:
    filename: Optional[str] = None
    modified: bool = False

    def mark_modified(self) -> None:
        self.modified = True

    def mark_saved(self, filename: str) -> None:
        self.filename = filename
        self.modified = False
