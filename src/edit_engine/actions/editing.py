"""Actions bound to logical keys while editing."""

from __future__ import annotations

from typing import Callable, Dict

from edit_engine.keymaps import KeyCode, KeyEvent
from edit_engine.modes.base_mode import ModeContext, ModeResult, SessionState

from .persistence import persist

EditAction = Callable[[ModeContext, KeyEvent], ModeResult]


def insert_character(context: ModeContext, event: KeyEvent) -> ModeResult:
    assert event.char is not None
    session = context.session
    session.cursor = session.buffer.insert_char(session.cursor, event.char)
    session.document.mark_modified()
    return ModeResult(consumed=True, status="insert")


def split_line(context: ModeContext, event: KeyEvent) -> ModeResult:
    del event
    session = context.session
    session.cursor = session.buffer.split_line(session.cursor)
    session.document.mark_modified()
    return ModeResult(consumed=True, status="split_line")


def backspace(context: ModeContext, event: KeyEvent) -> ModeResult:
    del event
    session = context.session
    session.cursor = session.buffer.backspace(session.cursor)
    session.document.mark_modified()
    return ModeResult(consumed=True, status="backspace")


def move_up(context: ModeContext, event: KeyEvent) -> ModeResult:
    del event
    session = context.session
    session.cursor = session.buffer.move_up(session.cursor)
    return ModeResult(consumed=True, status="move_up")


def move_down(context: ModeContext, event: KeyEvent) -> ModeResult:
    del event
    session = context.session
    session.cursor = session.buffer.move_down(session.cursor)
    return ModeResult(consumed=True, status="move_down")


def move_left(context: ModeContext, event: KeyEvent) -> ModeResult:
    del event
    session = context.session
    session.cursor = session.buffer.move_left(session.cursor)
    return ModeResult(consumed=True, status="move_left")


def move_right(context: ModeContext, event: KeyEvent) -> ModeResult:
    del event
    session = context.session
    session.cursor = session.buffer.move_right(session.cursor)
    return ModeResult(consumed=True, status="move_right")


def save_document(context: ModeContext, event: KeyEvent) -> ModeResult:
    del event
    filename = context.session.document.filename
    if filename is None:
        return ModeResult(
            consumed=True,
            switch_to=SessionState.PROMPT_SAVE_FILENAME,
            status="prompt_filename",
        )
    return persist(context, filename)


def save_document_as(context: ModeContext, event: KeyEvent) -> ModeResult:
    del event
    return ModeResult(
        consumed=True,
        switch_to=SessionState.PROMPT_SAVE_FILENAME,
        status="prompt_filename",
    )


def request_exit(context: ModeContext, event: KeyEvent) -> ModeResult:
    del event
    if not context.session.document.modified:
        return ModeResult(consumed=True, status="exit", terminate=True)
    return ModeResult(
        consumed=True,
        switch_to=SessionState.PROMPT_CONFIRM_EXIT,
        status="confirm_exit",
    )


EDITING_ACTIONS: Dict[KeyCode, EditAction] = {
    KeyCode.CHAR: insert_character,
    KeyCode.ENTER: split_line,
    KeyCode.BACKSPACE: backspace,
    KeyCode.UP: move_up,
    KeyCode.DOWN: move_down,
    KeyCode.LEFT: move_left,
    KeyCode.RIGHT: move_right,
    KeyCode.SAVE: save_document,
    KeyCode.SAVE_AS: save_document_as,
    KeyCode.ESCAPE: request_exit,
}


__all__ = [
    "EDITING_ACTIONS",
    "insert_character",
    "split_line",
    "backspace",
    "move_up",
    "move_down",
    "move_left",
    "move_right",
    "save_document",
    "save_document_as",
    "request_exit",
]
