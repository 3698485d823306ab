"""Base classes shared by the edit session's modes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, Optional

from edit_engine.keymaps import KeyEvent

if TYPE_CHECKING:  # pragma: no cover - import cycle guard
    from edit_engine.session.session import EditSession


class SessionState(str, Enum):
    EDITING = "editing"
    PROMPT_SAVE_FILENAME = "prompt_save_filename"
    PROMPT_CONFIRM_EXIT = "prompt_confirm_exit"


@dataclass(slots=True)
class ModeResult:
    """Outcome of handling one key event."""

    consumed: bool
    switch_to: Optional[SessionState] = None
    status: str = "ok"
    message: Optional[str] = None
    terminate: bool = False


class ModeBus:
    """Tiny publish/subscribe hub for session events."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass(slots=True)
class ModeContext:
    session: "EditSession"
    bus: ModeBus


class Mode:
    """A session state with its own transition function."""

    name: SessionState = SessionState.EDITING

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    @property
    def prompt(self) -> Optional[str]:
        """Text for the host's prompt line, ``None`` when no prompt is open."""

        return None

    def on_enter(self, previous: Optional[SessionState]) -> None:
        del previous

    def on_exit(self, next_state: Optional[SessionState]) -> None:
        del next_state

    def handle_key(
        self, event: KeyEvent
    ) -> ModeResult:  # pragma: no cover - abstract override
        raise NotImplementedError


__all__ = ["SessionState", "ModeResult", "ModeBus", "ModeContext", "Mode"]
