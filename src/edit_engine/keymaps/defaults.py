"""Built-in key bindings for terminal hosts."""

from __future__ import annotations

from typing import Iterable, Sequence

from .models import Binding, KeyCode, KeyStroke
from .registry import KeymapRegistry


def _bind(binding_id: str, token: str, code: KeyCode, description: str) -> Binding:
    return Binding(
        id=binding_id,
        stroke=KeyStroke.parse(token),
        code=code,
        description=description,
    )


DEFAULT_BINDINGS: tuple[Binding, ...] = (
    _bind("edit.enter", "enter", KeyCode.ENTER, "Split the line at the cursor"),
    _bind("edit.return", "return", KeyCode.ENTER, "Split the line at the cursor"),
    _bind("edit.backspace", "backspace", KeyCode.BACKSPACE, "Delete backwards"),
    _bind("edit.ctrl_h", "ctrl+h", KeyCode.BACKSPACE, "Delete backwards"),
    _bind("move.up", "up", KeyCode.UP, "Cursor up"),
    _bind("move.down", "down", KeyCode.DOWN, "Cursor down"),
    _bind("move.left", "left", KeyCode.LEFT, "Cursor left"),
    _bind("move.right", "right", KeyCode.RIGHT, "Cursor right"),
    _bind("session.escape", "escape", KeyCode.ESCAPE, "Exit or cancel a prompt"),
    _bind("session.save", "ctrl+s", KeyCode.SAVE, "Save the document"),
    _bind("session.save_as", "ctrl+a", KeyCode.SAVE_AS, "Save under a new name"),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    exclude_bindings: Sequence[str] | None = None,
    extra_bindings: Iterable[Binding] | None = None,
) -> None:
    """Register the built-in bindings, then any ``extra_bindings``.

    Extra bindings are registered with ``replace=True`` so hosts can remap a
    stroke that a default already claims.
    """

    excluded = set(exclude_bindings or ())
    for binding in DEFAULT_BINDINGS:
        if binding.id in excluded:
            continue
        registry.register_binding(binding, replace=replace)

    for binding in extra_bindings or ():
        registry.register_binding(binding, replace=True)


__all__ = ["DEFAULT_BINDINGS", "load_default_keymaps"]
