"""Normal keystroke handling."""

from __future__ import annotations

from edit_engine.actions.editing import EDITING_ACTIONS
from edit_engine.keymaps import KeyEvent

from .base_mode import Mode, ModeResult, SessionState


class EditingMode(Mode):
    name = SessionState.EDITING

    def handle_key(self, event: KeyEvent) -> ModeResult:
        action = EDITING_ACTIONS.get(event.code)
        if action is None:
            return ModeResult(consumed=False, status="miss", message=None)
        return action(self.context, event)


__all__ = ["EditingMode"]
