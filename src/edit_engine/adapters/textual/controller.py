"""Host-side controller wiring key presses and session events to UI hooks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from edit_engine.keymaps import KeymapRegistry, KeyStroke, load_default_keymaps
from edit_engine.modes import ModeResult
from edit_engine.session import EditSession
from edit_engine.viewport import RenderFrame


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


SESSION_EVENTS = (
    "document.saved",
    "document.loaded",
    "document.error",
    "session.notice",
    "session.exit",
    "mode.switch",
    "prompt.invalid",
)


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks the controller uses to update the host widgets."""

    render_frame: Callable[[RenderFrame], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    request_exit: Callable[[], None] = _noop
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Resolves host keys, feeds the session and pushes frames to the host."""

    def __init__(
        self,
        session: EditSession,
        hooks: TextualUIHooks,
        *,
        registry: Optional[KeymapRegistry] = None,
    ) -> None:
        self.session = session
        self.hooks = hooks
        if registry is None:
            registry = KeymapRegistry(logger_name="edit_engine.keymaps")
            load_default_keymaps(registry)
        self.registry = registry
        self._subscribe_events()
        self.refresh()

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> Optional[ModeResult]:
        """Dispatch one host key; returns ``None`` for unbound keys."""

        stroke = KeyStroke.parse(key)
        extra = tuple(modifiers)
        if extra:
            stroke = KeyStroke(stroke.key, stroke.modifiers + extra)
        event = self.registry.resolve(stroke, text=text)
        if event is None:
            self._log_state("key (unbound) ->", stroke=stroke.token)
            return None

        self._log_state("key ->", stroke=stroke.token, code=event.code.value)
        result = self.session.handle_event(event)
        self._log_state(
            "result <-",
            status=result.status,
            switch_to=result.switch_to.value if result.switch_to else None,
            terminate=result.terminate or None,
        )
        self.hooks.update_status(result.message or result.status)
        self.refresh()
        if self.session.terminated:
            self.hooks.request_exit()
        return result

    def resize(self, height: int) -> None:
        self.session.resize(height)
        self.refresh()

    def refresh(self) -> None:
        self.hooks.render_frame(self.session.frame())

    def _subscribe_events(self) -> None:
        for name in SESSION_EVENTS:
            self.session.bus.subscribe(
                name, lambda payload, name=name: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        session = self.session
        return {
            "state": session.state.value,
            "cursor": (session.cursor.column, session.cursor.row),
            "start_row": session.viewport.start_row,
            "modified": session.document.modified,
        }


__all__ = ["SESSION_EVENTS", "TextualEditorAdapter", "TextualUIHooks"]
