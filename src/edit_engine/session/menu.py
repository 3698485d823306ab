"""Launch menu shown before a document is opened."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from edit_engine.keymaps import KeyCode, KeyEvent


class MenuChoice(str, Enum):
    NEW = "new"
    EDIT = "edit"
    EXIT = "exit"


@dataclass(frozen=True, slots=True)
class MenuOutcome:
    choice: MenuChoice
    path: Optional[str] = None


DEFAULT_OPTIONS: tuple[tuple[str, MenuChoice], ...] = (
    ("Create a new text", MenuChoice.NEW),
    ("Edit an existing text", MenuChoice.EDIT),
    ("Exit", MenuChoice.EXIT),
)


class LaunchMenu:
    """Option list with an inline path entry for "Edit an existing text".

    ``handle_key`` returns a :class:`MenuOutcome` once the user has decided
    and ``None`` while the menu is still open. The host loads the document
    and reports a missing file back through :attr:`notice`.
    """

    path_label = "File to open: "

    def __init__(
        self, options: Sequence[tuple[str, MenuChoice]] = DEFAULT_OPTIONS
    ) -> None:
        if not options:
            raise ValueError("LaunchMenu needs at least one option")
        self.options = tuple(options)
        self.selected_index = 0
        self.entering_path = False
        self.notice: Optional[str] = None
        self._typed: List[str] = []

    @property
    def path_text(self) -> str:
        return "".join(self._typed)

    def render_lines(self) -> List[str]:
        lines = [
            f"{'>' if index == self.selected_index else ' '} {label}"
            for index, (label, _choice) in enumerate(self.options)
        ]
        if self.entering_path:
            lines.append("")
            lines.append(f"{self.path_label}{self.path_text}")
        if self.notice:
            lines.append("")
            lines.append(self.notice)
        return lines

    def handle_key(self, event: KeyEvent) -> Optional[MenuOutcome]:
        if self.entering_path:
            return self._handle_path_key(event)

        if event.code is KeyCode.UP and self.selected_index > 0:
            self.selected_index -= 1
        elif event.code is KeyCode.DOWN and self.selected_index < len(self.options) - 1:
            self.selected_index += 1
        elif event.code is KeyCode.ENTER:
            return self._choose()
        return None

    def _choose(self) -> Optional[MenuOutcome]:
        choice = self.options[self.selected_index][1]
        if choice is MenuChoice.EDIT:
            self.entering_path = True
            self.notice = None
            self._typed.clear()
            return None
        return MenuOutcome(choice)

    def _handle_path_key(self, event: KeyEvent) -> Optional[MenuOutcome]:
        if event.code is KeyCode.CHAR:
            assert event.char is not None
            self._typed.append(event.char)
        elif event.code is KeyCode.BACKSPACE and self._typed:
            self._typed.pop()
        elif event.code is KeyCode.ESCAPE:
            self.entering_path = False
            self._typed.clear()
        elif event.code is KeyCode.ENTER:
            path = self.path_text.strip()
            if not path:
                self.notice = "Enter a file name."
                return None
            return MenuOutcome(MenuChoice.EDIT, path)
        return None

    def report_missing(self, path: str) -> None:
        self.notice = f"File not found: {path}"


__all__ = ["DEFAULT_OPTIONS", "LaunchMenu", "MenuChoice", "MenuOutcome"]
