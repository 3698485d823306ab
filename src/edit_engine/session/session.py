"""Edit session: owns buffer, cursor and viewport and drives the modes."""

from __future__ import annotations

from typing import Dict, Optional, Type

from edit_engine.buffer import (
    ORIGIN,
    CursorPosition,
    DocumentIOError,
    DocumentMeta,
    TextBuffer,
    read_document,
    write_document,
)
from edit_engine.keymaps import KeyEvent
from edit_engine.modes import Mode, ModeBus, ModeContext, ModeResult, SessionState
from edit_engine.modes.editing_mode import EditingMode
from edit_engine.modes.prompt_modes import ConfirmExitMode, SaveFilenameMode
from edit_engine.runtime import EditorSettings, telemetry
from edit_engine.viewport import RenderFrame, Viewport


class EditSession:
    """Single-document editing session.

    Events are processed one at a time: the active mode handles the event,
    the session applies the requested state change and then pulls the
    viewport back over the cursor. Hosts read :meth:`frame` afterwards.
    The session ends only through the exit paths of the state machine.
    """

    def __init__(
        self,
        *,
        height: int = 0,
        settings: Optional[EditorSettings] = None,
        buffer: Optional[TextBuffer] = None,
        filename: Optional[str] = None,
        bus: Optional[ModeBus] = None,
    ) -> None:
        self.settings = settings or EditorSettings()
        self.buffer = buffer if buffer is not None else TextBuffer()
        self.cursor: CursorPosition = ORIGIN
        self.viewport = Viewport(height)
        self.document = DocumentMeta(filename=filename)
        self.bus = bus or ModeBus()
        self.context = ModeContext(session=self, bus=self.bus)
        self.notice: Optional[str] = None
        self.exit_after_save = False
        self.terminated = False
        self._modes: Dict[SessionState, Mode] = {}
        self._active: Optional[SessionState] = None
        for mode_cls in (EditingMode, SaveFilenameMode, ConfirmExitMode):
            self._register_mode(mode_cls)

    # -- state machine -------------------------------------------------------

    @property
    def state(self) -> SessionState:
        assert self._active is not None
        return self._active

    @property
    def active_mode(self) -> Mode:
        return self._modes[self.state]

    def _register_mode(self, mode_cls: Type[Mode]) -> None:
        mode = mode_cls(self.context)
        if mode.name in self._modes:
            raise ValueError(f"Mode '{mode.name.value}' already registered")
        self._modes[mode.name] = mode
        if self._active is None:
            self._active = mode.name
            mode.on_enter(None)

    def switch_mode(self, state: SessionState) -> None:
        if state not in self._modes:
            raise KeyError(f"Unknown session state '{state}'")
        previous = self.active_mode
        if previous.name is state:
            return
        previous.on_exit(state)
        self._active = state
        self._modes[state].on_enter(previous.name)
        telemetry.record_event(
            "mode.switch",
            level="debug",
            data={"from": previous.name.value, "to": state.value},
            logger_name="edit_engine.session",
        )
        self.bus.emit("mode.switch", state)

    def handle_event(self, event: KeyEvent) -> ModeResult:
        if self.terminated:
            raise RuntimeError("Edit session has already ended")
        mode = self.active_mode
        with telemetry.span(
            f"session::{mode.name.value}",
            logger_name="edit_engine.session",
            component=True,
            metadata={"code": event.code.value},
        ):
            result = mode.handle_key(event)
        return self._after_mode_result(result)

    def submit_prompt(self, text: str) -> ModeResult:
        """Submit a whole filename to the open save prompt."""

        if self.terminated:
            raise RuntimeError("Edit session has already ended")
        mode = self.active_mode
        if not isinstance(mode, SaveFilenameMode):
            raise RuntimeError("No filename prompt is open")
        return self._after_mode_result(mode.submit(text))

    def _after_mode_result(self, result: ModeResult) -> ModeResult:
        self.notice = result.message
        if result.message:
            self.bus.emit("session.notice", result.message)
        if result.terminate:
            self._terminate(result.status)
        elif result.switch_to is not None:
            self.switch_mode(result.switch_to)
        self.viewport.follow(self.cursor.row)
        return result

    def _terminate(self, reason: str) -> None:
        self.terminated = True
        self.exit_after_save = False
        telemetry.record_event(
            "session.exit",
            data={"reason": reason, "modified": self.document.modified},
            logger_name="edit_engine.session",
        )
        self.bus.emit("session.exit", reason)

    # -- documents -----------------------------------------------------------

    def new_document(self, filename: Optional[str] = None) -> None:
        self.buffer = TextBuffer()
        self.cursor = ORIGIN
        self.viewport.reset()
        self.document = DocumentMeta(filename=filename)
        self.notice = None

    def load(self, path: str) -> bool:
        """Replace the buffer with the file at ``path``.

        Returns ``False`` and leaves everything untouched when the file does
        not exist. Read failures raise :class:`DocumentIOError`.
        """

        try:
            text = read_document(path, encoding=self.settings.encoding)
        except DocumentIOError as exc:
            self.bus.emit("document.error", exc)
            raise
        if text is None:
            return False

        self.buffer = TextBuffer.load(text)
        self.cursor = ORIGIN
        self.document = DocumentMeta(filename=path, modified=False)
        self.viewport.follow(self.cursor.row)
        telemetry.record_event(
            "document.loaded",
            data={"path": path, "lines": self.buffer.line_count},
            logger_name="edit_engine.session",
        )
        self.bus.emit("document.loaded", path)
        return True

    def save(self, path: Optional[str] = None) -> str:
        """Write the buffer to ``path`` (or the known filename) and return it."""

        target = path or self.document.filename
        if target is None:
            raise ValueError("No filename to save to")
        text = self.buffer.serialize(self.settings.line_separator)
        try:
            write_document(target, text, encoding=self.settings.encoding)
        except DocumentIOError as exc:
            telemetry.record_event(
                "document.save_failed",
                level="error",
                data={"path": target, "error": str(exc)},
                logger_name="edit_engine.session",
            )
            self.bus.emit("document.error", exc)
            raise

        self.document.mark_saved(target)
        telemetry.record_event(
            "document.saved",
            data={"path": target, "lines": self.buffer.line_count},
            logger_name="edit_engine.session",
        )
        self.bus.emit("document.saved", target)
        return target

    # -- rendering -----------------------------------------------------------

    def resize(self, height: int) -> None:
        self.viewport.resize(height, self.cursor.row)

    def frame(self) -> RenderFrame:
        scrollbar = None
        if self.settings.show_scrollbar:
            scrollbar = self.viewport.scrollbar(self.buffer)
        return RenderFrame(
            lines=self.viewport.lines(self.buffer),
            cursor_row=self.viewport.screen_row(self.cursor.row),
            cursor_column=self.cursor.column,
            scrollbar=scrollbar,
            height=self.viewport.height,
            start_row=self.viewport.start_row,
            state=self.state.value,
            filename=self.document.filename,
            modified=self.document.modified,
            prompt=self.active_mode.prompt,
            notice=self.notice,
        )


__all__ = ["EditSession"]
