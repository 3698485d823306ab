"""Line-oriented text storage with cursor-relative edits."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from .state import CursorPosition
from .validation import ensure_cursor


def split_text(text: str) -> List[str]:
    """Split ``text`` into lines the way the editor reads files.

    Lines end at ``\\n``; a ``\\r`` right before it belongs to the line ending.
    A final line ending does not start another (empty) line.
    """

    pieces = text.split("\n")
    tail = pieces.pop()
    lines = [piece[:-1] if piece.endswith("\r") else piece for piece in pieces]
    if tail:
        lines.append(tail)
    return lines or [""]


class TextBuffer:
    """Ordered list of lines that is never empty.

    Every edit takes the current cursor and returns the cursor that follows
    the edit, so the caller stays the single owner of cursor state. Cursor
    moves are pure: they read the lines and never change them.
    """

    def __init__(self, lines: Optional[Iterable[str]] = None) -> None:
        self._lines: List[str] = list(lines) if lines is not None else []
        if not self._lines:
            self._lines = [""]
        self.version = 0

    @classmethod
    def load(cls, text: str) -> "TextBuffer":
        return cls(split_text(text))

    def serialize(self, separator: str = "\n") -> str:
        return separator.join(self._lines)

    def snapshot(self) -> Sequence[str]:
        return tuple(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, row: int) -> str:
        return self._lines[row]

    def __len__(self) -> int:
        return len(self._lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TextBuffer):
            return NotImplemented
        return self._lines == other._lines

    def __repr__(self) -> str:
        return f"TextBuffer({self._lines!r})"

    def clamp(self, pos: CursorPosition) -> CursorPosition:
        row = max(0, min(pos.row, len(self._lines) - 1))
        column = max(0, min(pos.column, len(self._lines[row])))
        return CursorPosition(column=column, row=row)

    # -- edits ---------------------------------------------------------------

    def insert_char(self, pos: CursorPosition, char: str) -> CursorPosition:
        if len(char) != 1 or char in "\r\n":
            raise ValueError(f"insert_char expects a single character, got {char!r}")
        ensure_cursor(self._lines, pos)
        line = self._lines[pos.row]
        self._lines[pos.row] = line[: pos.column] + char + line[pos.column :]
        self._touch()
        return pos.with_column(pos.column + 1)

    def split_line(self, pos: CursorPosition) -> CursorPosition:
        ensure_cursor(self._lines, pos)
        line = self._lines[pos.row]
        self._lines[pos.row : pos.row + 1] = [line[: pos.column], line[pos.column :]]
        self._touch()
        return CursorPosition(column=0, row=pos.row + 1)

    def backspace(self, pos: CursorPosition) -> CursorPosition:
        ensure_cursor(self._lines, pos)
        if pos.column > 0:
            line = self._lines[pos.row]
            self._lines[pos.row] = line[: pos.column - 1] + line[pos.column :]
            self._touch()
            return pos.with_column(pos.column - 1)
        if pos.row == 0:
            return pos

        previous = self._lines[pos.row - 1]
        current = self._lines.pop(pos.row)
        self._lines[pos.row - 1] = previous + current
        self._touch()
        return CursorPosition(column=len(previous), row=pos.row - 1)

    # -- motions -------------------------------------------------------------

    def move_left(self, pos: CursorPosition) -> CursorPosition:
        ensure_cursor(self._lines, pos)
        if pos.column > 0:
            return pos.with_column(pos.column - 1)
        return pos

    def move_right(self, pos: CursorPosition) -> CursorPosition:
        ensure_cursor(self._lines, pos)
        if pos.column < len(self._lines[pos.row]):
            return pos.with_column(pos.column + 1)
        return pos

    def move_up(self, pos: CursorPosition) -> CursorPosition:
        ensure_cursor(self._lines, pos)
        if pos.row == 0:
            return pos
        return self._vertical(pos, pos.row - 1)

    def move_down(self, pos: CursorPosition) -> CursorPosition:
        ensure_cursor(self._lines, pos)
        if pos.row >= len(self._lines) - 1:
            return pos
        return self._vertical(pos, pos.row + 1)

    def _vertical(self, pos: CursorPosition, row: int) -> CursorPosition:
        column = min(pos.column, len(self._lines[row]))
        return CursorPosition(column=column, row=row)

    def _touch(self) -> None:
        self.version += 1


__all__ = ["TextBuffer", "split_text"]
