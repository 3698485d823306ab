"""Textual host adapter.

Only the controller is re-exported; the runnable app lives in
:mod:`edit_engine.adapters.textual.app`.
"""

from .controller import SESSION_EVENTS, TextualEditorAdapter, TextualUIHooks

__all__ = ["SESSION_EVENTS", "TextualEditorAdapter", "TextualUIHooks"]
