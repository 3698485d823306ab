"""Cursor validation shared by buffer operations."""

from __future__ import annotations

from typing import Sequence

from .state import CursorPosition


class BufferValidationError(RuntimeError):
    """Raised when a caller hands the buffer an out-of-bounds cursor."""

    def __init__(self, message: str, *, cursor: CursorPosition | None = None) -> None:
        super().__init__(message)
        self.cursor = cursor


def ensure_cursor(lines: Sequence[str], cursor: CursorPosition) -> CursorPosition:
    if cursor.row < 0 or cursor.row >= len(lines):
        raise BufferValidationError(
            f"Row {cursor.row} out of range (0..{len(lines) - 1})", cursor=cursor
        )
    length = len(lines[cursor.row])
    if cursor.column < 0 or cursor.column > length:
        raise BufferValidationError(
            f"Column {cursor.column} out of range (0..{length})", cursor=cursor
        )
    return cursor
