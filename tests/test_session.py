from __future__ import annotations

from dataclasses import fields
from pathlib import Path
from typing import List

import pytest

from edit_engine.actions import INVALID_RESPONSE
from edit_engine.buffer import CursorPosition, TextBuffer
from edit_engine.keymaps import KeyCode, KeyEvent
from edit_engine.modes import SessionState
from edit_engine.session import EditSession


def make_session(*lines: str, height: int = 5, **kwargs: object) -> EditSession:
    buffer = TextBuffer(lines) if lines else None
    return EditSession(height=height, buffer=buffer, **kwargs)  # type: ignore[arg-type]


def press(session: EditSession, code: KeyCode) -> None:
    session.handle_event(KeyEvent(code))


def type_text(session: EditSession, text: str) -> None:
    for char in text:
        session.handle_event(KeyEvent.character(char))


def test_typing_inserts_characters_and_marks_modified() -> None:
    session = make_session()

    type_text(session, "hi")

    assert session.buffer.snapshot() == ("hi",)
    assert session.cursor == CursorPosition(2, 0)
    assert session.document.modified is True
    assert session.state is SessionState.EDITING


def test_enter_and_backspace_edit_lines() -> None:
    session = make_session()
    type_text(session, "hello")
    for _ in range(3):
        press(session, KeyCode.LEFT)

    press(session, KeyCode.ENTER)
    assert session.buffer.snapshot() == ("he", "llo")
    assert session.cursor == CursorPosition(0, 1)

    press(session, KeyCode.BACKSPACE)
    assert session.buffer.snapshot() == ("hello",)
    assert session.cursor == CursorPosition(2, 0)


def test_arrows_move_without_modifying() -> None:
    session = make_session("abc", "d")

    press(session, KeyCode.RIGHT)
    press(session, KeyCode.RIGHT)
    press(session, KeyCode.DOWN)

    assert session.cursor == CursorPosition(1, 1)
    press(session, KeyCode.UP)
    assert session.cursor == CursorPosition(1, 0)
    assert session.document.modified is False


def test_backspace_marks_modified_even_at_origin() -> None:
    session = make_session("abc")

    press(session, KeyCode.BACKSPACE)

    assert session.buffer.snapshot() == ("abc",)
    assert session.cursor == CursorPosition(0, 0)
    assert session.document.modified is True


def test_viewport_follows_cursor_through_events() -> None:
    session = make_session(*[f"row {i}" for i in range(10)], height=5)

    for _ in range(7):
        press(session, KeyCode.DOWN)

    assert session.cursor.row == 7
    assert session.viewport.start_row == 3
    frame = session.frame()
    assert frame.lines == tuple(f"row {i}" for i in range(3, 8))
    assert frame.cursor_row == 4
    assert frame.scrollbar is not None

    for _ in range(7):
        press(session, KeyCode.UP)
    assert session.viewport.start_row == 0


def test_resize_reconciles_viewport() -> None:
    session = make_session(*[f"row {i}" for i in range(10)], height=10)
    for _ in range(9):
        press(session, KeyCode.DOWN)
    assert session.viewport.start_row == 0

    session.resize(3)

    assert session.viewport.start_row == 7
    assert session.frame().cursor_row == 2


def test_exit_without_changes_terminates() -> None:
    session = make_session("abc")
    exits: List[object] = []
    session.bus.subscribe("session.exit", exits.append)

    press(session, KeyCode.ESCAPE)

    assert session.terminated is True
    assert exits == ["exit"]
    with pytest.raises(RuntimeError):
        press(session, KeyCode.LEFT)


def test_exit_with_changes_asks_for_confirmation() -> None:
    session = make_session()
    type_text(session, "x")

    press(session, KeyCode.ESCAPE)

    assert session.terminated is False
    assert session.state is SessionState.PROMPT_CONFIRM_EXIT
    assert session.frame().prompt == "Save changes before exit? (y/n/c) "


def test_confirm_exit_cancel_returns_to_editing() -> None:
    session = make_session()
    type_text(session, "x")
    press(session, KeyCode.ESCAPE)

    type_text(session, "c")

    assert session.state is SessionState.EDITING
    assert session.buffer.snapshot() == ("x",)
    assert session.document.modified is True


def test_confirm_exit_no_discards_changes(tmp_path: Path) -> None:
    target = tmp_path / "keep.txt"
    session = make_session(filename=str(target))
    type_text(session, "x")
    press(session, KeyCode.ESCAPE)

    type_text(session, "n")

    assert session.terminated is True
    assert not target.exists()


def test_confirm_exit_invalid_answer_reprompts() -> None:
    session = make_session()
    invalid: List[object] = []
    session.bus.subscribe("prompt.invalid", invalid.append)
    type_text(session, "x")
    press(session, KeyCode.ESCAPE)

    type_text(session, "q")
    press(session, KeyCode.ENTER)

    assert session.state is SessionState.PROMPT_CONFIRM_EXIT
    assert session.terminated is False
    assert session.notice == INVALID_RESPONSE
    assert len(invalid) == 2


def test_confirm_exit_yes_with_known_filename_saves_and_exits(tmp_path: Path) -> None:
    target = tmp_path / "doc.txt"
    session = make_session(filename=str(target))
    type_text(session, "ab")
    press(session, KeyCode.ENTER)
    type_text(session, "c")
    press(session, KeyCode.ESCAPE)

    type_text(session, "Y")

    assert session.terminated is True
    assert target.read_text() == "ab\nc"
    assert session.document.modified is False


def test_confirm_exit_yes_without_filename_prompts_then_exits(tmp_path: Path) -> None:
    target = tmp_path / "fresh.txt"
    session = make_session()
    type_text(session, "data")
    press(session, KeyCode.ESCAPE)
    type_text(session, "y")

    assert session.state is SessionState.PROMPT_SAVE_FILENAME
    assert session.terminated is False

    session.submit_prompt(str(target))

    assert session.terminated is True
    assert target.read_text() == "data"
    assert session.document.filename == str(target)


def test_cancelling_filename_prompt_forgets_pending_exit(tmp_path: Path) -> None:
    session = make_session()
    type_text(session, "data")
    press(session, KeyCode.ESCAPE)
    type_text(session, "y")

    press(session, KeyCode.ESCAPE)
    assert session.state is SessionState.EDITING
    assert session.exit_after_save is False

    press(session, KeyCode.SAVE)
    session.submit_prompt(str(tmp_path / "later.txt"))
    assert session.terminated is False
    assert session.state is SessionState.EDITING


def test_save_with_known_filename_writes_immediately(tmp_path: Path) -> None:
    target = tmp_path / "known.txt"
    session = make_session("one", "two", filename=str(target))
    type_text(session, "!")

    press(session, KeyCode.SAVE)

    assert session.state is SessionState.EDITING
    assert target.read_text() == "!one\ntwo"
    assert session.document.modified is False
    assert session.notice == f"Saved {target}"


def test_save_without_filename_prompts_and_types_name(tmp_path: Path) -> None:
    target = tmp_path / "typed.txt"
    session = make_session("body")

    press(session, KeyCode.SAVE)
    assert session.state is SessionState.PROMPT_SAVE_FILENAME

    type_text(session, str(target) + "x")
    press(session, KeyCode.BACKSPACE)
    assert session.frame().prompt == f"Save as: {target}"
    press(session, KeyCode.ENTER)

    assert session.state is SessionState.EDITING
    assert session.document.filename == str(target)
    assert target.read_text() == "body"


def test_save_as_prompts_even_with_known_filename(tmp_path: Path) -> None:
    first = tmp_path / "first.txt"
    second = tmp_path / "second.txt"
    session = make_session("body", filename=str(first))

    press(session, KeyCode.SAVE_AS)
    assert session.state is SessionState.PROMPT_SAVE_FILENAME

    session.submit_prompt(str(second))

    assert second.read_text() == "body"
    assert not first.exists()
    assert session.document.filename == str(second)


def test_empty_filename_keeps_prompt_open() -> None:
    session = make_session("body")
    press(session, KeyCode.SAVE)

    press(session, KeyCode.ENTER)

    assert session.state is SessionState.PROMPT_SAVE_FILENAME
    assert session.notice == "Filename cannot be empty."


def test_filename_is_saved_exactly_as_typed(tmp_path: Path) -> None:
    target = tmp_path / " padded.txt "
    session = make_session("body")
    press(session, KeyCode.SAVE)

    session.submit_prompt(str(target))

    assert session.document.filename == str(target)
    assert target.read_text() == "body"
    assert not (tmp_path / "padded.txt").exists()


def test_whitespace_only_filename_counts_as_empty() -> None:
    session = make_session("body")
    press(session, KeyCode.SAVE)

    session.submit_prompt("   ")

    assert session.state is SessionState.PROMPT_SAVE_FILENAME
    assert session.notice == "Filename cannot be empty."


def test_failed_save_keeps_modified_flag_and_buffer(tmp_path: Path) -> None:
    missing_dir = tmp_path / "missing" / "doc.txt"
    session = make_session("body", filename=str(missing_dir))
    errors: List[object] = []
    session.bus.subscribe("document.error", errors.append)
    type_text(session, "x")

    press(session, KeyCode.SAVE)

    assert session.state is SessionState.EDITING
    assert session.document.modified is True
    assert session.buffer.snapshot() == ("xbody",)
    assert errors
    assert session.notice is not None and "Cannot write" in session.notice


def test_failed_save_during_exit_does_not_terminate(tmp_path: Path) -> None:
    session = make_session(filename=str(tmp_path / "nope" / "doc.txt"))
    type_text(session, "x")
    press(session, KeyCode.ESCAPE)

    type_text(session, "y")

    assert session.terminated is False
    assert session.state is SessionState.EDITING
    assert session.document.modified is True


def test_submit_prompt_requires_open_prompt() -> None:
    session = make_session()

    with pytest.raises(RuntimeError):
        session.submit_prompt("name.txt")


def test_mode_switch_events_are_published() -> None:
    session = make_session()
    switches: List[object] = []
    session.bus.subscribe("mode.switch", switches.append)

    press(session, KeyCode.SAVE_AS)
    press(session, KeyCode.ESCAPE)

    assert switches == [SessionState.PROMPT_SAVE_FILENAME, SessionState.EDITING]


def test_mode_context_carries_only_session_and_bus() -> None:
    session = make_session()

    assert [f.name for f in fields(session.context)] == ["session", "bus"]
    assert session.context.session is session
    assert session.context.bus is session.bus
