"""Modal prompts: save-as filename entry and unsaved-changes confirmation."""

from __future__ import annotations

from typing import List, Optional

from edit_engine.actions.prompts import (
    answer_exit_prompt,
    cancel_filename,
    invalid_response,
    submit_filename,
)
from edit_engine.keymaps import KeyCode, KeyEvent

from .base_mode import Mode, ModeContext, ModeResult, SessionState


class SaveFilenameMode(Mode):
    """Collects a filename one key at a time; enter submits, escape cancels."""

    name = SessionState.PROMPT_SAVE_FILENAME
    label = "Save as: "

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self._typed: List[str] = []

    @property
    def text(self) -> str:
        return "".join(self._typed)

    @property
    def prompt(self) -> Optional[str]:
        return f"{self.label}{self.text}"

    def on_enter(self, previous: Optional[SessionState]) -> None:
        del previous
        self._typed.clear()

    def on_exit(self, next_state: Optional[SessionState]) -> None:
        del next_state
        self._typed.clear()

    def handle_key(self, event: KeyEvent) -> ModeResult:
        if event.code is KeyCode.CHAR:
            assert event.char is not None
            self._typed.append(event.char)
            return ModeResult(consumed=True, status="prompt_edit")
        if event.code is KeyCode.BACKSPACE:
            if self._typed:
                self._typed.pop()
            return ModeResult(consumed=True, status="prompt_edit")
        if event.code is KeyCode.ENTER:
            return self.submit(self.text)
        if event.code is KeyCode.ESCAPE:
            return cancel_filename(self.context)
        return ModeResult(consumed=False, status="miss")

    def submit(self, text: str) -> ModeResult:
        return submit_filename(self.context, text)


class ConfirmExitMode(Mode):
    """Asks whether to save unsaved changes before leaving."""

    name = SessionState.PROMPT_CONFIRM_EXIT

    @property
    def prompt(self) -> Optional[str]:
        return "Save changes before exit? (y/n/c) "

    def handle_key(self, event: KeyEvent) -> ModeResult:
        if event.code is KeyCode.CHAR:
            assert event.char is not None
            return answer_exit_prompt(self.context, event.char)
        return invalid_response(self.context)


__all__ = ["SaveFilenameMode", "ConfirmExitMode"]
