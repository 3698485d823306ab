from __future__ import annotations

from edit_engine.keymaps import KeyCode, KeyEvent
from edit_engine.session import LaunchMenu, MenuChoice, MenuOutcome


def key(code: KeyCode) -> KeyEvent:
    return KeyEvent(code)


def test_menu_selection_is_clamped() -> None:
    menu = LaunchMenu()

    menu.handle_key(key(KeyCode.UP))
    assert menu.selected_index == 0

    for _ in range(5):
        menu.handle_key(key(KeyCode.DOWN))
    assert menu.selected_index == 2
    assert menu.render_lines()[2] == "> Exit"


def test_menu_new_and_exit_choices() -> None:
    menu = LaunchMenu()
    assert menu.handle_key(key(KeyCode.ENTER)) == MenuOutcome(MenuChoice.NEW)

    menu.handle_key(key(KeyCode.DOWN))
    menu.handle_key(key(KeyCode.DOWN))
    assert menu.handle_key(key(KeyCode.ENTER)) == MenuOutcome(MenuChoice.EXIT)


def test_menu_edit_collects_a_path() -> None:
    menu = LaunchMenu()
    menu.handle_key(key(KeyCode.DOWN))

    assert menu.handle_key(key(KeyCode.ENTER)) is None
    assert menu.entering_path is True

    for char in "notes.txq":
        menu.handle_key(KeyEvent.character(char))
    menu.handle_key(key(KeyCode.BACKSPACE))
    menu.handle_key(KeyEvent.character("t"))
    assert menu.render_lines()[-1] == "File to open: notes.txt"

    outcome = menu.handle_key(key(KeyCode.ENTER))
    assert outcome == MenuOutcome(MenuChoice.EDIT, "notes.txt")


def test_menu_path_entry_can_be_abandoned_and_reports_missing_files() -> None:
    menu = LaunchMenu()
    menu.handle_key(key(KeyCode.DOWN))
    menu.handle_key(key(KeyCode.ENTER))

    assert menu.handle_key(key(KeyCode.ENTER)) is None
    assert menu.notice == "Enter a file name."

    menu.handle_key(key(KeyCode.ESCAPE))
    assert menu.entering_path is False

    menu.report_missing("gone.txt")
    assert menu.render_lines()[-1] == "File not found: gone.txt"
