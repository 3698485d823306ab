"""Visible window over a buffer that may be taller than the screen."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

from edit_engine.buffer import TextBuffer


def reconcile(cursor_row: int, height: int, start_row: int) -> int:
    """Return the start row that keeps ``cursor_row`` on screen.

    The window only moves as far as it has to: up to the cursor when the
    cursor is above it, or until the cursor is the last visible row when it
    is below. A non-positive height disables scrolling.
    """

    if height <= 0:
        return 0
    if cursor_row < start_row:
        return max(0, cursor_row)
    if cursor_row >= start_row + height:
        return cursor_row - height + 1
    return start_row


def visible_slice(buffer: TextBuffer, start_row: int, height: int) -> Sequence[str]:
    if height <= 0:
        return ()
    end = min(start_row + height, buffer.line_count)
    return tuple(buffer.get_line(row) for row in range(start_row, end))


@dataclass(frozen=True, slots=True)
class ScrollbarExtent:
    """Scrollbar thumb in (fractional) row units."""

    thumb_start: float
    thumb_height: float

    def cells(self, height: int) -> range:
        """Whole rows covered by the thumb, never fewer than one."""

        first = min(int(self.thumb_start), max(0, height - 1))
        size = max(1, math.ceil(self.thumb_height))
        return range(first, min(height, first + size))


def scrollbar_extent(
    buffer_length: int, height: int, start_row: int
) -> Optional[ScrollbarExtent]:
    if height <= 0 or buffer_length <= height:
        return None
    return ScrollbarExtent(
        thumb_start=height * (start_row / buffer_length),
        thumb_height=height * (height / buffer_length),
    )


class Viewport:
    """Stateful window (start row + height) that follows the cursor."""

    def __init__(self, height: int = 0, start_row: int = 0) -> None:
        self.height = height
        self.start_row = max(0, start_row)

    def follow(self, cursor_row: int) -> int:
        self.start_row = reconcile(cursor_row, self.height, self.start_row)
        return self.start_row

    def resize(self, height: int, cursor_row: int) -> int:
        self.height = height
        return self.follow(cursor_row)

    def reset(self) -> None:
        self.start_row = 0

    def lines(self, buffer: TextBuffer) -> Sequence[str]:
        return visible_slice(buffer, self.start_row, self.height)

    def scrollbar(self, buffer: TextBuffer) -> Optional[ScrollbarExtent]:
        return scrollbar_extent(buffer.line_count, self.height, self.start_row)

    def screen_row(self, cursor_row: int) -> int:
        return cursor_row - self.start_row

    def __repr__(self) -> str:
        return f"Viewport(height={self.height}, start_row={self.start_row})"


__all__ = [
    "ScrollbarExtent",
    "Viewport",
    "reconcile",
    "scrollbar_extent",
    "visible_slice",
]
