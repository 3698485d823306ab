"""Render payload handed to host renderers once per processed event."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .viewport import ScrollbarExtent


@dataclass(frozen=True, slots=True)
class RenderFrame:
    lines: Sequence[str]
    cursor_row: int
    cursor_column: int
    scrollbar: Optional[ScrollbarExtent]
    height: int
    start_row: int
    state: str
    filename: Optional[str] = None
    modified: bool = False
    prompt: Optional[str] = None
    notice: Optional[str] = None

    @property
    def title(self) -> str:
        name = self.filename or "[No Name]"
        return f"{name} [+]" if self.modified else name


__all__ = ["RenderFrame"]
