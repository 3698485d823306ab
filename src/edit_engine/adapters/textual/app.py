"""Executable Textual app hosting the edit session."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use edit_engine.adapters.textual.app"
    ) from exc

from edit_engine.buffer import DocumentIOError
from edit_engine.keymaps import KeymapRegistry, KeyStroke, load_default_keymaps
from edit_engine.runtime import EditorSettings, telemetry
from edit_engine.session import EditSession, LaunchMenu, MenuChoice
from edit_engine.viewport import RenderFrame

from .controller import TextualEditorAdapter, TextualUIHooks


def render_frame_text(frame: RenderFrame, width: int) -> Text:
    """Draw visible lines, the cursor cell and the scrollbar column."""

    thumb = set(frame.scrollbar.cells(frame.height)) if frame.scrollbar else set()
    text_width = max(1, width - 1 if frame.scrollbar else width)
    rows = []
    for index in range(max(frame.height, len(frame.lines))):
        line = frame.lines[index] if index < len(frame.lines) else ""
        row = Text(line)
        if index == frame.cursor_row and frame.prompt is None:
            column = frame.cursor_column
            if column >= len(line):
                row.append(" ", style="reverse")
            else:
                row.stylize("reverse", column, column + 1)
        row.truncate(text_width, pad=frame.scrollbar is not None)
        if frame.scrollbar is not None:
            row.append("█" if index in thumb else "│", style="dim")
        rows.append(row)
    return Text("\n").join(rows)


class EditorApp(App[None]):
    """Single-document editor with a launch menu."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		padding: 0 0;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}

	#prompt-line {
		height: 1;
		background: $surface-darken-2;
		padding: 0 1;
	}
	"""

    BINDINGS = [("ctrl+c", "quit", "Force quit")]

    def __init__(
        self,
        *,
        path: Optional[str] = None,
        settings: Optional[EditorSettings] = None,
    ) -> None:
        super().__init__()
        self.settings = settings or EditorSettings.from_env()
        self.path = path
        self.registry = KeymapRegistry(logger_name="edit_engine.keymaps")
        load_default_keymaps(self.registry)
        self.session = EditSession(
            height=self.settings.fallback_height, settings=self.settings
        )
        self.menu: Optional[LaunchMenu] = None
        self.adapter: Optional[TextualEditorAdapter] = None
        self._buffer_widget: Optional[Static] = None
        self._status_widget: Optional[Static] = None
        self._prompt_widget: Optional[Static] = None
        self._last_frame: Optional[RenderFrame] = None

    def compose(self) -> ComposeResult:
        self._buffer_widget = Static("", id="buffer-view")
        self._status_widget = Static("", id="status-line")
        self._prompt_widget = Static("", id="prompt-line")
        yield self._buffer_widget
        yield self._status_widget
        yield self._prompt_widget

    def on_mount(self) -> None:
        if self.path is None:
            self.menu = LaunchMenu()
            self._show_menu()
            return
        try:
            found = self.session.load(self.path)
        except DocumentIOError as exc:
            self.session.new_document()
            self._start_editor(notice=str(exc))
            return
        if not found:
            self.session.new_document(filename=self.path)
        self._start_editor(notice=None if found else f"New file: {self.path}")

    def on_resize(self, event: events.Resize) -> None:
        del event
        self.call_after_refresh(self._sync_height)

    async def on_key(self, event: events.Key) -> None:
        text = event.character if event.is_printable else None
        if self.adapter is not None:
            self.adapter.handle_textual_key(event.key, text=text)
        elif self.menu is not None:
            self._menu_key(event.key, text)
        event.stop()

    # -- launch menu ---------------------------------------------------------

    def _menu_key(self, key: str, text: Optional[str]) -> None:
        assert self.menu is not None
        logical = self.registry.resolve(KeyStroke.parse(key), text=text)
        if logical is None:
            return
        outcome = self.menu.handle_key(logical)
        if outcome is None:
            self._show_menu()
            return
        if outcome.choice is MenuChoice.EXIT:
            self.exit()
            return
        if outcome.choice is MenuChoice.NEW:
            self.session.new_document()
            self._start_editor()
            return

        assert outcome.path is not None
        try:
            found = self.session.load(outcome.path)
        except DocumentIOError as exc:
            self.menu.notice = str(exc)
            self._show_menu()
            return
        if not found:
            self.menu.report_missing(outcome.path)
            self._show_menu()
            return
        self._start_editor()

    def _show_menu(self) -> None:
        assert self.menu is not None
        if self._buffer_widget:
            self._buffer_widget.update("\n".join(self.menu.render_lines()))
        self._update_status("edit-engine")
        self._update_prompt("Up/Down to choose, Enter to confirm")

    # -- editor --------------------------------------------------------------

    def _start_editor(self, notice: Optional[str] = None) -> None:
        self.menu = None
        self.session.notice = notice
        hooks = TextualUIHooks(
            render_frame=self._render_frame,
            request_exit=self.exit,
            log=self._log_line,
        )
        self.adapter = TextualEditorAdapter(self.session, hooks, registry=self.registry)
        self.call_after_refresh(self._sync_height)

    def _sync_height(self) -> None:
        if self.adapter is None or self._buffer_widget is None:
            return
        height = self._buffer_widget.content_size.height
        self.adapter.resize(height or self.settings.fallback_height)

    def _render_frame(self, frame: RenderFrame) -> None:
        self._last_frame = frame
        if self._buffer_widget:
            width = self._buffer_widget.content_size.width or 80
            self._buffer_widget.update(render_frame_text(frame, width))
        row = frame.start_row + frame.cursor_row + 1
        self._update_status(
            f"{frame.title}  Ln {row}, Col {frame.cursor_column + 1}  [{frame.state}]"
        )
        self._update_prompt(
            frame.prompt or frame.notice or "^S save  ^A save as  Esc exit"
        )

    def _update_status(self, text: str) -> None:
        if self._status_widget:
            self._status_widget.update(Text(text))

    def _update_prompt(self, text: str) -> None:
        if self._prompt_widget:
            self._prompt_widget.update(Text(text))

    def _log_line(self, line: str) -> None:
        telemetry.record_event(
            "adapter.trace",
            level="debug",
            data={"line": line},
            logger_name="edit_engine.adapter",
        )


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Edit a plain-text file.")
    parser.add_argument("path", nargs="?", help="File to open or create")
    parser.add_argument("--encoding", help="Text encoding for load and save")
    parser.add_argument(
        "--no-scrollbar", action="store_true", help="Hide the scrollbar column"
    )
    parser.add_argument(
        "--log-preset",
        choices=("development", "production"),
        help="Telemetry preset (default: configured from EDIT_ENGINE_* variables)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    overrides: dict[str, object] = {}
    if args.encoding:
        overrides["encoding"] = args.encoding
    if args.no_scrollbar:
        overrides["show_scrollbar"] = False
    app = EditorApp(path=args.path, settings=EditorSettings.from_env(**overrides))
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
